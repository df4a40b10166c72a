# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Element-wise mathematical functions.

Transcendental functions return ``float64`` for ``float64`` input and
``float32`` for every other dtype. ``abs``, ``square``, ``sign`` and the
element-wise ``maximum``/``minimum`` keep the input dtype.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

import numpy as np

from ..dtypes import DTypeLike, require_numeric, result_dtype
from ..tensor import Tensor
from .arithmetic import dispatch_binary
from .elementwise import (
    as_operand,
    binary_scalar,
    elementwise_binary,
    elementwise_unary,
    unary_float_dtype,
    vectorized,
)


def _float_unary(x: Tensor, ufunc: Callable[..., Any]) -> Tensor:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return elementwise_unary(x, ufunc, unary_float_dtype(x.dtype))


@vectorized
def _sech(x: np.ndarray, out: np.ndarray) -> None:
    np.divide(1.0, np.cosh(x, dtype=np.float64), out=out, casting="unsafe")


@vectorized
def _sigmoid(x: np.ndarray, out: np.ndarray) -> None:
    np.divide(1.0, 1.0 + np.exp(np.negative(x, dtype=np.float64)), out=out, casting="unsafe")


@vectorized
def _softplus(x: np.ndarray, out: np.ndarray) -> None:
    np.logaddexp(0.0, x.astype(np.float64), out=out, casting="unsafe")


@vectorized
def _softminus(x: np.ndarray, out: np.ndarray) -> None:
    values = x.astype(np.float64)
    np.subtract(values, np.logaddexp(0.0, values), out=out, casting="unsafe")


@vectorized
def _float_power(x: np.ndarray, y: np.ndarray, out: np.ndarray) -> None:
    np.float_power(x, y, out=out, casting="unsafe")


@vectorized
def _square_difference(x: np.ndarray, y: np.ndarray, out: np.ndarray) -> None:
    diff = np.subtract(x, y, dtype=np.float64)
    np.multiply(diff, diff, out=out, casting="unsafe")


@vectorized
def _xlogy(x: np.ndarray, y: np.ndarray, out: np.ndarray) -> None:
    product = np.multiply(x, np.log(y, dtype=np.float64))
    np.copyto(out, np.where(x == 0, 0.0, product), casting="unsafe")


@vectorized
def _xlog1py(x: np.ndarray, y: np.ndarray, out: np.ndarray) -> None:
    product = np.multiply(x, np.log1p(y, dtype=np.float64))
    np.copyto(out, np.where(x == 0, 0.0, product), casting="unsafe")


def abs(x: Tensor) -> Tensor:
    """Absolute value, same dtype as ``x``."""
    return elementwise_unary(x, np.absolute, x.dtype)


def square(x: Tensor) -> Tensor:
    """``x * x``, same dtype as ``x``."""
    return elementwise_unary(x, np.square, x.dtype)


def sign(x: Tensor) -> Tensor:
    """-1, 0 or 1 per element, same dtype as ``x``."""
    return elementwise_unary(x, np.sign, x.dtype)


def exp(x: Tensor) -> Tensor:
    return _float_unary(x, np.exp)


def expm1(x: Tensor) -> Tensor:
    return _float_unary(x, np.expm1)


def sin(x: Tensor) -> Tensor:
    return _float_unary(x, np.sin)


def cos(x: Tensor) -> Tensor:
    return _float_unary(x, np.cos)


def tan(x: Tensor) -> Tensor:
    return _float_unary(x, np.tan)


def acos(x: Tensor) -> Tensor:
    return _float_unary(x, np.arccos)


def asin(x: Tensor) -> Tensor:
    return _float_unary(x, np.arcsin)


def atan(x: Tensor) -> Tensor:
    return _float_unary(x, np.arctan)


def sinh(x: Tensor) -> Tensor:
    return _float_unary(x, np.sinh)


def cosh(x: Tensor) -> Tensor:
    return _float_unary(x, np.cosh)


def tanh(x: Tensor) -> Tensor:
    return _float_unary(x, np.tanh)


def sech(x: Tensor) -> Tensor:
    """Hyperbolic secant ``1 / cosh(x)``."""
    return _float_unary(x, _sech)


def log(x: Tensor) -> Tensor:
    """Natural logarithm; non-positive inputs give ``-inf`` or ``nan``."""
    return _float_unary(x, np.log)


def log1p(x: Tensor) -> Tensor:
    return _float_unary(x, np.log1p)


def log2(x: Tensor) -> Tensor:
    return _float_unary(x, np.log2)


def sqrt(x: Tensor) -> Tensor:
    return _float_unary(x, np.sqrt)


def sigmoid(x: Tensor) -> Tensor:
    """Logistic function ``1 / (1 + exp(-x))``."""
    return _float_unary(x, _sigmoid)


def softplus(x: Tensor) -> Tensor:
    """``log(1 + exp(x))`` computed without overflow."""
    return _float_unary(x, _softplus)


def softminus(x: Tensor) -> Tensor:
    """``x - softplus(x)``."""
    return _float_unary(x, _softminus)


def pow(x: Tensor, exponent: Union[Tensor, float, int]) -> Tensor:
    """Raise ``x`` to ``exponent`` element-wise.

    ``exponent`` may be a scalar or a tensor of the same dtype whose shape
    broadcasts against ``x``. The result is floating point.
    """
    exponent = as_operand(exponent)
    dtype = unary_float_dtype(x.dtype)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        if isinstance(exponent, Tensor):
            result_dtype(x.dtype, exponent.dtype)
            return elementwise_binary(x, exponent, _float_power, dtype)
        return binary_scalar(x, exponent, _float_power, dtype, scalar_dtype="float64")


def _float_binary(x: Tensor, y: Tensor, kernel: Callable[..., Any]) -> Tensor:
    x = as_operand(x)
    y = as_operand(y)
    if not isinstance(x, Tensor) or not isinstance(y, Tensor):
        raise TypeError("Both operands must be tensors")
    dtype = unary_float_dtype(result_dtype(x.dtype, y.dtype))
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return elementwise_binary(x, y, kernel, dtype)


def square_difference(x: Tensor, y: Tensor) -> Tensor:
    """``(x - y) ** 2`` as floating point."""
    return _float_binary(x, y, _square_difference)


def xlogy(x: Tensor, y: Tensor) -> Tensor:
    """``x * log(y)``, defined as 0 wherever ``x == 0``."""
    return _float_binary(x, y, _xlogy)


def xlog1py(x: Tensor, y: Tensor) -> Tensor:
    """``x * log(1 + y)``, defined as 0 wherever ``x == 0``."""
    return _float_binary(x, y, _xlog1py)


def maximum(a: Any, b: Any) -> Tensor:
    """Element-wise maximum of two operands."""
    return dispatch_binary(a, b, np.maximum)


def minimum(a: Any, b: Any) -> Tensor:
    """Element-wise minimum of two operands."""
    return dispatch_binary(a, b, np.minimum)


def apply(
    x: Tensor, func: Callable[[Any], Any], dtype: Optional[DTypeLike] = None
) -> Tensor:
    """Map a Python callable over every element of ``x``.

    Args:
        x: Input tensor.
        func: Called with one Python scalar per element.
        dtype: Output dtype; defaults to the dtype of ``x``.
    """
    out_dtype = require_numeric(dtype) if dtype is not None else x.dtype
    return elementwise_unary(x, func, out_dtype)


__all__ = [
    "abs",
    "square",
    "sign",
    "exp",
    "expm1",
    "sin",
    "cos",
    "tan",
    "acos",
    "asin",
    "atan",
    "sinh",
    "cosh",
    "tanh",
    "sech",
    "log",
    "log1p",
    "log2",
    "sqrt",
    "sigmoid",
    "softplus",
    "softminus",
    "pow",
    "square_difference",
    "xlogy",
    "xlog1py",
    "maximum",
    "minimum",
    "apply",
]
