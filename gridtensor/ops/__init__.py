# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Operation layer: element-wise, reduction, linear algebra and shape ops."""

from . import arithmetic, comparison, elementwise, linalg, manipulation, math, reduction

__all__ = [
    "arithmetic",
    "comparison",
    "elementwise",
    "linalg",
    "manipulation",
    "math",
    "reduction",
]
