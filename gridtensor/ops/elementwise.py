# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Drive element-wise kernels over the broadcast iteration engine.

A kernel is either *vectorized* or *scalar*:

* numpy ufuncs and functions decorated with :func:`vectorized` are called
  once as ``op(x, y, out=out)`` where ``x`` and ``y`` are zero-copy strided
  views shaped like the output;
* any other callable is applied to one pair of Python scalars per output
  position, with source offsets produced by
  :func:`gridtensor.iteration.iter_offsets`.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Callable, Optional, Union

import numpy as np

from ..broadcast import resolve_broadcast
from ..dtypes import DType, DTypeLike, check_representable, empty_buffer, require_numeric
from ..iteration import iter_offsets, strided_view
from ..tensor import Tensor

Scalar = Union[int, float]
Operand = Union[Tensor, Scalar]


def vectorized(func: Callable[..., Any]) -> Callable[..., Any]:
    """Mark ``func`` as accepting whole arrays and an ``out`` keyword."""
    func.vectorized = True  # type: ignore[attr-defined]
    return func


def is_vectorized(op: Callable[..., Any]) -> bool:
    return isinstance(op, np.ufunc) or getattr(op, "vectorized", False)


def _call_vectorized(op: Callable[..., Any], *args: Any, out: np.ndarray) -> None:
    if isinstance(op, np.ufunc):
        op(*args, out=out, casting="unsafe")
    else:
        op(*args, out=out)


def as_operand(value: Any) -> Operand:
    """Convert an operation argument to a :class:`Tensor` or a Python scalar."""
    if isinstance(value, Tensor):
        return value
    if isinstance(value, np.ndarray):
        if value.ndim == 0:
            return value.item()
        return Tensor.from_numpy(value)
    if isinstance(value, (list, tuple)):
        return Tensor.constant(value)
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("Boolean operands are not supported")
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Real):
        return value
    raise TypeError(f"Unsupported operand type: {type(value).__name__}")


def scalar_tensor(value: Scalar, dtype: DTypeLike) -> Tensor:
    """Single-element tensor holding ``value`` converted to ``dtype``."""
    resolved = require_numeric(dtype)
    check_representable([value], resolved)
    buffer = np.array([value], dtype=resolved.numpy)
    return Tensor._from_owned_buffer(buffer, [1], resolved)


def elementwise_binary(
    a: Tensor, b: Tensor, op: Callable[..., Any], result_dtype: DTypeLike
) -> Tensor:
    """Apply ``op`` to every broadcast pair of elements of ``a`` and ``b``.

    Operand order is preserved, so non-commutative kernels always receive
    elements of ``a`` first.

    Raises:
        ShapeBroadcastError: The shapes cannot be broadcast.
        UnsupportedDType: ``result_dtype`` is not numeric.
    """
    dtype = require_numeric(result_dtype)
    plan = resolve_broadcast(a.shape, b.shape)
    out = empty_buffer(dtype, plan.size)

    if is_vectorized(op):
        dims = plan.output_shape.dims
        x = strided_view(a.buffer, dims, plan.strides_a)
        y = strided_view(b.buffer, dims, plan.strides_b)
        _call_vectorized(op, x, y, out=out.reshape(dims))
    else:
        a_values = a.buffer.tolist()
        b_values = b.buffer.tolist()
        for i, index_a, index_b in iter_offsets(plan):
            out[i] = op(a_values[index_a], b_values[index_b])

    return Tensor._from_owned_buffer(out, plan.output_shape, dtype)


def binary_scalar(
    x: Tensor,
    value: Scalar,
    op: Callable[..., Any],
    result_dtype: DTypeLike,
    reverse: bool = False,
    scalar_dtype: Optional[DTypeLike] = None,
) -> Tensor:
    """Combine ``x`` with a Python scalar through the broadcast engine.

    The scalar is wrapped in a one-element tensor of ``scalar_dtype``
    (``result_dtype`` when omitted). With ``reverse=True`` it becomes the
    left operand.
    """
    scalar = scalar_tensor(value, scalar_dtype if scalar_dtype is not None else result_dtype)
    if reverse:
        return elementwise_binary(scalar, x, op, result_dtype)
    return elementwise_binary(x, scalar, op, result_dtype)


def elementwise_unary(
    x: Tensor, op: Callable[..., Any], result_dtype: DTypeLike
) -> Tensor:
    """Apply ``op`` to every element of ``x``."""
    dtype = require_numeric(result_dtype)
    out = empty_buffer(dtype, x.size)
    if is_vectorized(op):
        _call_vectorized(op, x.buffer, out=out)
    else:
        for i, value in enumerate(x.buffer.tolist()):
            out[i] = op(value)
    return Tensor._from_owned_buffer(out, x.shape, dtype)


def unary_float_dtype(dtype: DType) -> DType:
    """Output dtype of a transcendental function: float64 stays, all else float32."""
    return DType.FLOAT64 if dtype is DType.FLOAT64 else DType.FLOAT32


__all__ = [
    "vectorized",
    "is_vectorized",
    "as_operand",
    "scalar_tensor",
    "elementwise_binary",
    "binary_scalar",
    "elementwise_unary",
    "unary_float_dtype",
]
