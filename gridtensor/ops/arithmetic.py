# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Broadcasting arithmetic between tensors and scalars."""

from __future__ import annotations

from typing import Any, Callable, Optional

import numpy as np

from ..dtypes import DType, result_dtype, scalar_kind, scalar_result_dtype
from ..tensor import Tensor
from .elementwise import (
    Operand,
    as_operand,
    binary_scalar,
    elementwise_binary,
    elementwise_unary,
    vectorized,
)


@vectorized
def truncate_divide(x: np.ndarray, y: np.ndarray, out: np.ndarray) -> None:
    """Integer division rounding toward zero."""
    if np.any(y == 0):
        raise ZeroDivisionError("integer division by zero")
    quotient = np.floor_divide(x, y)
    remainder = np.remainder(x, y)
    # floor and truncation differ when the division is inexact and signs differ
    adjust = (remainder != 0) & ((x < 0) != (y < 0))
    np.add(quotient, adjust, out=out, casting="unsafe")


@vectorized
def true_divide(x: np.ndarray, y: np.ndarray, out: np.ndarray) -> None:
    """IEEE floating-point division."""
    with np.errstate(divide="ignore", invalid="ignore"):
        np.divide(x, y, out=out, casting="unsafe")


def _divide_kernel(dtype: DType) -> Callable[..., Any]:
    return truncate_divide if dtype.is_int else true_divide


def dispatch_binary(
    a: Any,
    b: Any,
    kernel: Callable[..., Any],
    kernel_for: Optional[Callable[[DType], Callable[..., Any]]] = None,
) -> Tensor:
    """Resolve operand dtypes and run ``kernel`` over tensors or scalars.

    ``kernel_for`` picks a kernel once the result dtype is known.
    """
    a = as_operand(a)
    b = as_operand(b)

    if isinstance(a, Tensor) and isinstance(b, Tensor):
        dtype = result_dtype(a.dtype, b.dtype)
        op = kernel_for(dtype) if kernel_for else kernel
        return elementwise_binary(a, b, op, dtype)
    if isinstance(a, Tensor):
        dtype = scalar_result_dtype(a.dtype, scalar_kind(b))
        op = kernel_for(dtype) if kernel_for else kernel
        return binary_scalar(a, b, op, dtype)
    if isinstance(b, Tensor):
        dtype = scalar_result_dtype(b.dtype, scalar_kind(a))
        op = kernel_for(dtype) if kernel_for else kernel
        return binary_scalar(b, a, op, dtype, reverse=True)
    raise TypeError("At least one operand must be a Tensor")


def add(a: Operand, b: Operand) -> Tensor:
    """Element-wise ``a + b``."""
    return dispatch_binary(a, b, np.add)


def subtract(a: Operand, b: Operand) -> Tensor:
    """Element-wise ``a - b``."""
    return dispatch_binary(a, b, np.subtract)


def multiply(a: Operand, b: Operand) -> Tensor:
    """Element-wise ``a * b``."""
    return dispatch_binary(a, b, np.multiply)


def divide(a: Operand, b: Operand) -> Tensor:
    """Element-wise ``a / b``.

    Integer results truncate toward zero and raise ``ZeroDivisionError`` on a
    zero divisor. Floating results follow IEEE semantics (``inf``/``nan``).
    """
    return dispatch_binary(a, b, true_divide, _divide_kernel)


def add_scalar(x: Tensor, value: float) -> Tensor:
    return add(x, value)


def subtract_scalar(x: Tensor, value: float) -> Tensor:
    return subtract(x, value)


def multiply_scalar(x: Tensor, value: float) -> Tensor:
    return multiply(x, value)


def divide_scalar(x: Tensor, value: float) -> Tensor:
    return divide(x, value)


def negative(x: Tensor) -> Tensor:
    """Element-wise negation, keeping the input dtype."""
    return elementwise_unary(x, np.negative, x.dtype)


__all__ = [
    "dispatch_binary",
    "truncate_divide",
    "true_divide",
    "add",
    "subtract",
    "multiply",
    "divide",
    "add_scalar",
    "subtract_scalar",
    "multiply_scalar",
    "divide_scalar",
    "negative",
]
