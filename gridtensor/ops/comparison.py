# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Element-wise comparisons producing 1/0 tensors.

There is no boolean tensor kind: results hold ``1`` where the predicate holds
and ``0`` elsewhere, in the dtype of the tensor operand unless ``dtype`` is
given.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import numpy as np

from ..dtypes import DTypeLike, require_numeric, result_dtype, scalar_kind, scalar_result_dtype
from ..tensor import Tensor
from .elementwise import Operand, as_operand, binary_scalar, elementwise_binary


def _compare(
    a: Any, b: Any, predicate: Callable[..., Any], dtype: Optional[DTypeLike]
) -> Tensor:
    a = as_operand(a)
    b = as_operand(b)

    if isinstance(a, Tensor) and isinstance(b, Tensor):
        operand_dtype = result_dtype(a.dtype, b.dtype)
        out_dtype = require_numeric(dtype) if dtype is not None else operand_dtype
        return elementwise_binary(a, b, predicate, out_dtype)

    if isinstance(a, Tensor):
        tensor, value, reverse = a, b, False
    elif isinstance(b, Tensor):
        tensor, value, reverse = b, a, True
    else:
        raise TypeError("At least one operand must be a Tensor")

    promoted = scalar_result_dtype(tensor.dtype, scalar_kind(value))
    out_dtype = require_numeric(dtype) if dtype is not None else tensor.dtype
    return binary_scalar(
        tensor, value, predicate, out_dtype, reverse=reverse, scalar_dtype=promoted
    )


def equal(a: Operand, b: Operand, dtype: Optional[DTypeLike] = None) -> Tensor:
    """1 where ``a == b``, else 0."""
    return _compare(a, b, np.equal, dtype)


def not_equal(a: Operand, b: Operand, dtype: Optional[DTypeLike] = None) -> Tensor:
    """1 where ``a != b``, else 0."""
    return _compare(a, b, np.not_equal, dtype)


def greater(a: Operand, b: Operand, dtype: Optional[DTypeLike] = None) -> Tensor:
    """1 where ``a > b``, else 0."""
    return _compare(a, b, np.greater, dtype)


def greater_equal(a: Operand, b: Operand, dtype: Optional[DTypeLike] = None) -> Tensor:
    """1 where ``a >= b``, else 0."""
    return _compare(a, b, np.greater_equal, dtype)


def less(a: Operand, b: Operand, dtype: Optional[DTypeLike] = None) -> Tensor:
    """1 where ``a < b``, else 0."""
    return _compare(a, b, np.less, dtype)


def less_equal(a: Operand, b: Operand, dtype: Optional[DTypeLike] = None) -> Tensor:
    """1 where ``a <= b``, else 0."""
    return _compare(a, b, np.less_equal, dtype)


def allclose(a: Tensor, b: Tensor, rtol: float = 1e-5, atol: float = 1e-8) -> bool:
    """True if both tensors broadcast and every pair is within tolerance."""
    a = as_operand(a)
    b = as_operand(b)
    close = _compare(
        a,
        b,
        lambda x, y: abs(x - y) <= atol + rtol * abs(y),
        dtype="int32",
    )
    return bool(np.all(close.buffer))


def array_equal(a: Tensor, b: Tensor) -> bool:
    """True if both tensors have the same shape, dtype and elements."""
    if a.shape != b.shape or a.dtype != b.dtype:
        return False
    return bool(np.array_equal(a.buffer, b.buffer))


__all__ = [
    "equal",
    "not_equal",
    "greater",
    "greater_equal",
    "less",
    "less_equal",
    "allclose",
    "array_equal",
]
