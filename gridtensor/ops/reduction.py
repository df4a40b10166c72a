# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Reductions over any subset of axes.

An accumulator is either a plain callable taking the list of values of one
slice and returning a scalar (``max``, ``sum`` and friends work as-is), or a
:func:`~gridtensor.ops.elementwise.vectorized` function called once as
``acc(slices, out=out)`` where ``slices`` has one row per output element.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

import numpy as np

from ..dtypes import DType, DTypeLike, as_dtype, empty_buffer, require_numeric
from ..errors import UnsupportedDType
from ..iteration import AxisLike, iter_reduction_offsets, normalize_axes, normalize_axis, reduction_slices
from ..tensor import Tensor
from .arithmetic import truncate_divide
from .elementwise import is_vectorized, vectorized

logger = logging.getLogger(__name__)


def _accumulator_dtype(out: np.ndarray) -> type:
    return np.int64 if out.dtype.kind in "iu" else np.float64


def _sum_of_squares(slices: np.ndarray) -> np.ndarray:
    values = slices.astype(np.float64)
    return np.einsum("ij,ij->i", values, values)


def _variance(slices: np.ndarray) -> np.ndarray:
    count = slices.shape[1]
    total = slices.sum(axis=1, dtype=np.float64)
    return (_sum_of_squares(slices) - total * total / count) / count


@vectorized
def max_accumulator(slices: np.ndarray, out: np.ndarray) -> None:
    np.copyto(out, slices.max(axis=1), casting="unsafe")


@vectorized
def min_accumulator(slices: np.ndarray, out: np.ndarray) -> None:
    np.copyto(out, slices.min(axis=1), casting="unsafe")


@vectorized
def sum_accumulator(slices: np.ndarray, out: np.ndarray) -> None:
    np.copyto(out, slices.sum(axis=1, dtype=_accumulator_dtype(out)), casting="unsafe")


@vectorized
def prod_accumulator(slices: np.ndarray, out: np.ndarray) -> None:
    np.copyto(out, slices.prod(axis=1, dtype=_accumulator_dtype(out)), casting="unsafe")


@vectorized
def mean_accumulator(slices: np.ndarray, out: np.ndarray) -> None:
    count = slices.shape[1]
    if out.dtype.kind in "iu":
        total = slices.sum(axis=1, dtype=np.float64 if slices.dtype.kind == "f" else np.int64)
        if total.dtype.kind == "f":
            np.copyto(out, np.trunc(total / count), casting="unsafe")
        else:
            truncate_divide(total, np.int64(count), out=out)
    else:
        np.copyto(out, slices.sum(axis=1, dtype=np.float64) / count, casting="unsafe")


@vectorized
def variance_accumulator(slices: np.ndarray, out: np.ndarray) -> None:
    variance = _variance(slices)
    if out.dtype.kind in "iu":
        variance = np.trunc(variance)
    np.copyto(out, variance, casting="unsafe")


@vectorized
def std_accumulator(slices: np.ndarray, out: np.ndarray) -> None:
    # single-pass variance may dip just below zero from rounding
    std = np.sqrt(np.maximum(_variance(slices), 0.0))
    if out.dtype.kind in "iu":
        std = np.trunc(std)
    np.copyto(out, std, casting="unsafe")


@vectorized
def argmax_accumulator(slices: np.ndarray, out: np.ndarray) -> None:
    np.copyto(out, slices.argmax(axis=1), casting="unsafe")


@vectorized
def argmin_accumulator(slices: np.ndarray, out: np.ndarray) -> None:
    np.copyto(out, slices.argmin(axis=1), casting="unsafe")


def _output_dims(dims: tuple, axes: tuple, keepdims: bool) -> List[int]:
    if len(axes) == len(dims):
        return [1] * len(dims) if keepdims else [1]
    if keepdims:
        return [1 if k in axes else d for k, d in enumerate(dims)]
    return [d for k, d in enumerate(dims) if k not in axes]


def reduce(
    x: Tensor,
    axis: AxisLike,
    keepdims: bool,
    accumulator: Callable[..., Any],
    result_dtype: DTypeLike,
) -> Tensor:
    """Collapse ``axis`` of ``x`` with ``accumulator``.

    Args:
        x: Input tensor.
        axis: Axis or axes to reduce. ``None`` or an empty list reduces all of
            them. Negative values count from the last axis.
        keepdims: Keep reduced axes with size 1 instead of dropping them.
        accumulator: Slice reducer (see module docstring).
        result_dtype: Output dtype.

    Returns:
        A new tensor. Reducing every axis gives shape ``[1]``, or
        ``[1] * x.rank`` when ``keepdims`` is set.

    Raises:
        InvalidAxis: An axis is out of range or repeated.
    """
    dtype = require_numeric(result_dtype)
    dims = x.shape.dims
    axes = normalize_axes(axis, x.rank)
    out_dims = _output_dims(dims, axes, keepdims)
    logger.debug("reduce %s over axes %s -> %s", list(dims), list(axes), out_dims)

    out_size = 1
    for dim in out_dims:
        out_size *= dim
    out = empty_buffer(dtype, out_size)

    if is_vectorized(accumulator):
        accumulator(reduction_slices(x.buffer, dims, axes), out=out)
    else:
        values = x.buffer.tolist()
        for out_index, offsets in iter_reduction_offsets(dims, axes):
            out[out_index] = accumulator([values[o] for o in offsets])

    return Tensor._from_owned_buffer(out, out_dims, dtype)


def reduce_max(x: Tensor, axis: AxisLike = None, keepdims: bool = False) -> Tensor:
    """Maximum over ``axis``, keeping the input dtype."""
    return reduce(x, axis, keepdims, max_accumulator, x.dtype)


def reduce_min(x: Tensor, axis: AxisLike = None, keepdims: bool = False) -> Tensor:
    """Minimum over ``axis``, keeping the input dtype."""
    return reduce(x, axis, keepdims, min_accumulator, x.dtype)


def reduce_sum(x: Tensor, axis: AxisLike = None, keepdims: bool = False) -> Tensor:
    """Sum over ``axis``, keeping the input dtype."""
    return reduce(x, axis, keepdims, sum_accumulator, x.dtype)


def reduce_prod(x: Tensor, axis: AxisLike = None, keepdims: bool = False) -> Tensor:
    """Product over ``axis``, keeping the input dtype."""
    return reduce(x, axis, keepdims, prod_accumulator, x.dtype)


def reduce_mean(
    x: Tensor,
    axis: AxisLike = None,
    keepdims: bool = False,
    dtype: Optional[DTypeLike] = None,
) -> Tensor:
    """Arithmetic mean over ``axis``; integer outputs truncate toward zero."""
    return reduce(x, axis, keepdims, mean_accumulator, dtype if dtype is not None else x.dtype)


def reduce_variance(
    x: Tensor,
    axis: AxisLike = None,
    keepdims: bool = False,
    dtype: Optional[DTypeLike] = None,
) -> Tensor:
    """Population variance ``(sum(x**2) - sum(x)**2 / n) / n`` over ``axis``."""
    return reduce(
        x, axis, keepdims, variance_accumulator, dtype if dtype is not None else x.dtype
    )


def reduce_std(
    x: Tensor,
    axis: AxisLike = None,
    keepdims: bool = False,
    dtype: Optional[DTypeLike] = None,
) -> Tensor:
    """Square root of :func:`reduce_variance`."""
    return reduce(x, axis, keepdims, std_accumulator, dtype if dtype is not None else x.dtype)


def reduce_local_argmax(
    x: Tensor, axis: AxisLike = None, keepdims: bool = False
) -> Tensor:
    """Flat index of the first maximum inside each reduced slice (int32)."""
    return reduce(x, axis, keepdims, argmax_accumulator, DType.INT32)


def _index_dtype(dtype: DTypeLike) -> DType:
    resolved = as_dtype(dtype)
    if not resolved.is_int:
        raise UnsupportedDType(
            resolved, f"Index results require an integer dtype, got '{resolved}'"
        )
    return resolved


def argmax(x: Tensor, axis: int = 0, dtype: DTypeLike = DType.INT32) -> Tensor:
    """Index of the first maximum along a single ``axis``."""
    out_dtype = _index_dtype(dtype)
    return reduce(x, normalize_axis(axis, x.rank), False, argmax_accumulator, out_dtype)


def argmin(x: Tensor, axis: int = 0, dtype: DTypeLike = DType.INT32) -> Tensor:
    """Index of the first minimum along a single ``axis``."""
    out_dtype = _index_dtype(dtype)
    return reduce(x, normalize_axis(axis, x.rank), False, argmin_accumulator, out_dtype)


def mean(x: Tensor, dtype: Optional[DTypeLike] = None) -> Tensor:
    """Mean of all elements as a shape ``[1]`` tensor."""
    return reduce_mean(x, None, False, dtype)


def variance(x: Tensor, dtype: Optional[DTypeLike] = None) -> Tensor:
    """Variance of all elements as a shape ``[1]`` tensor."""
    return reduce_variance(x, None, False, dtype)


__all__ = [
    "reduce",
    "reduce_max",
    "reduce_min",
    "reduce_sum",
    "reduce_prod",
    "reduce_mean",
    "reduce_variance",
    "reduce_std",
    "reduce_local_argmax",
    "argmax",
    "argmin",
    "mean",
    "variance",
    "max_accumulator",
    "min_accumulator",
    "sum_accumulator",
    "prod_accumulator",
    "mean_accumulator",
    "variance_accumulator",
    "std_accumulator",
    "argmax_accumulator",
    "argmin_accumulator",
]
