# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Expose every tensor operation as a free function."""

from .ops import arithmetic as _arithmetic
from .ops import comparison as _comparison
from .ops import elementwise as _elementwise
from .ops import linalg as _linalg
from .ops import manipulation as _manipulation
from .ops import math as _math
from .ops import reduction as _reduction

_OPERATION_MODULES = (
    _elementwise,
    _arithmetic,
    _comparison,
    _math,
    _reduction,
    _linalg,
    _manipulation,
)

__all__ = []
for _module in _OPERATION_MODULES:
    for name in _module.__all__:
        globals()[name] = getattr(_module, name)
        if name not in __all__:
            __all__.append(name)
