# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Shape transformations. Every function returns a tensor with its own buffer."""

from __future__ import annotations

import operator
from numbers import Integral, Real
from typing import Any, List, Optional, Sequence, Union

import numpy as np

from ..config import DEFAULT_INT_DTYPE, get_default_dtype
from ..dtypes import DTypeLike, check_representable, require_numeric
from ..errors import (
    DTypeMismatch,
    InvalidArgument,
    InvalidAxis,
    InvalidShapeError,
    ShapeMismatchError,
    UnsupportedDType,
)
from ..iteration import normalize_axes, normalize_axis, strided_view
from ..shape import Shape
from ..tensor import Tensor


def _flatten_shape_args(shape: Sequence[Any]) -> List[int]:
    if len(shape) == 1 and isinstance(shape[0], (list, tuple, Shape)):
        return list(shape[0])
    return list(shape)


def _owned(array: np.ndarray) -> np.ndarray:
    return np.array(array, order="C").reshape(-1)


def reshape(x: Tensor, *shape: Union[int, Sequence[int]]) -> Tensor:
    """Copy ``x`` into a new shape with the same number of elements.

    One dimension may be ``-1`` and is inferred from the others.
    """
    dims = _flatten_shape_args(shape)
    if dims.count(-1) > 1:
        raise InvalidShapeError(f"Only one dimension can be inferred, got {dims}", dims)
    if -1 in dims:
        known = 1
        for dim in dims:
            if dim != -1:
                if dim <= 0:
                    raise InvalidShapeError(f"Invalid shape {dims}", dims)
                known *= dim
        if x.size % known:
            raise InvalidShapeError(
                f"Cannot reshape tensor of size {x.size} into shape {dims}", dims
            )
        dims[dims.index(-1)] = x.size // known
    new_shape = Shape(dims)
    if new_shape.size != x.size:
        raise InvalidShapeError(
            f"Cannot reshape tensor of size {x.size} into shape {dims}", dims
        )
    return Tensor._from_owned_buffer(x.buffer.copy(), new_shape, x.dtype)


def cast(x: Tensor, dtype: DTypeLike) -> Tensor:
    """Convert ``x`` to ``dtype``; floats truncate toward zero when cast to ints."""
    target = require_numeric(dtype)
    if target.is_int and x.dtype.is_float and not np.all(np.isfinite(x.buffer)):
        raise InvalidArgument(f"Cannot cast non-finite values to '{target}'")
    return Tensor._from_owned_buffer(x.buffer.astype(target.numpy), x.shape, target)


def expand_dims(x: Tensor, axis: int) -> Tensor:
    """Insert a size-1 axis at ``axis`` (``-1`` appends)."""
    rank = x.rank
    if axis < -rank - 1 or axis > rank:
        raise InvalidAxis(axis, rank + 1)
    if axis < 0:
        axis += rank + 1
    dims = list(x.shape)
    dims.insert(axis, 1)
    return Tensor._from_owned_buffer(x.buffer.copy(), dims, x.dtype)


def squeeze(x: Tensor, axis: Optional[Union[int, Sequence[int]]] = None) -> Tensor:
    """Drop size-1 axes; all of them when ``axis`` is ``None``.

    Squeezing every axis leaves shape ``[1]``.
    """
    dims = x.shape.dims
    if axis is None:
        axes = [k for k, dim in enumerate(dims) if dim == 1]
    else:
        axes = list(normalize_axes(axis, x.rank))
        for k in axes:
            if dims[k] != 1:
                raise InvalidArgument(
                    f"Cannot squeeze axis {k} of size {dims[k]} in shape {list(dims)}"
                )
    kept = [dim for k, dim in enumerate(dims) if k not in axes] or [1]
    return Tensor._from_owned_buffer(x.buffer.copy(), kept, x.dtype)


def concat(tensors: Sequence[Tensor], axis: int = -1) -> Tensor:
    """Join tensors of equal rank and dtype along ``axis``."""
    tensors = list(tensors)
    if not tensors:
        raise InvalidArgument("concat expects a non-empty sequence of tensors")
    first = tensors[0]
    for other in tensors[1:]:
        if other.dtype is not first.dtype:
            raise DTypeMismatch(first.dtype, other.dtype)
        if other.rank != first.rank:
            raise ShapeMismatchError(
                f"concat expects tensors of equal rank, got {first.shape} and {other.shape}"
            )
    axis = normalize_axis(axis, first.rank)
    for other in tensors[1:]:
        for k in range(first.rank):
            if k != axis and other.shape[k] != first.shape[k]:
                raise ShapeMismatchError(
                    f"Shapes {first.shape} and {other.shape} differ outside axis {axis}"
                )
    joined = np.concatenate(
        [strided_view(t.buffer, t.shape.dims, None) for t in tensors], axis=axis
    )
    return Tensor._from_owned_buffer(_owned(joined), joined.shape, first.dtype)


def slice(x: Tensor, begin: Sequence[int], end: Sequence[int]) -> Tensor:
    """Extract ``x[begin[0]:end[0], begin[1]:end[1], ...]``.

    Both lists need one entry per axis with ``0 <= begin[k] < end[k] <= shape[k]``.
    """
    begin = [operator.index(b) for b in begin]
    end = [operator.index(e) for e in end]
    if len(begin) != x.rank or len(end) != x.rank:
        raise InvalidArgument(
            f"begin and end need {x.rank} entries, got {len(begin)} and {len(end)}"
        )
    for k, (start, stop) in enumerate(zip(begin, end)):
        if not 0 <= start < stop <= x.shape[k]:
            raise InvalidArgument(
                f"Invalid slice [{start}:{stop}] for axis {k} of size {x.shape[k]}"
            )
    view = strided_view(x.buffer, x.shape.dims, None)
    region = view[tuple(np.s_[start:stop] for start, stop in zip(begin, end))]
    return Tensor._from_owned_buffer(_owned(region), region.shape, x.dtype)


def pad(x: Tensor, paddings: Any, value: Union[int, float] = 0) -> Tensor:
    """Pad every axis with ``value``.

    Args:
        x: Input tensor.
        paddings: ``[rank, 2]`` non-negative integers; row ``k`` holds the
            amount added before and after axis ``k``. May be a tensor.
        value: Fill value, converted to the dtype of ``x``.
    """
    if isinstance(paddings, Tensor):
        if not paddings.dtype.is_int:
            raise UnsupportedDType(paddings.dtype, "paddings must be an integer tensor")
        widths = paddings.numpy()
    else:
        widths = np.asarray(paddings)
    if widths.shape != (x.rank, 2):
        raise InvalidArgument(
            f"paddings must have shape [{x.rank}, 2], got {list(widths.shape)}"
        )
    if widths.dtype.kind not in "iu":
        raise InvalidArgument("paddings must contain integers")
    if np.any(widths < 0):
        raise InvalidArgument("paddings must be non-negative")

    check_representable([value], x.dtype)
    fill = int(value) if x.dtype.is_int else float(value)
    view = strided_view(x.buffer, x.shape.dims, None)
    padded = np.pad(view, [tuple(int(w) for w in row) for row in widths], constant_values=fill)
    return Tensor._from_owned_buffer(_owned(padded), padded.shape, x.dtype)


def one_hot(
    indices: Tensor,
    depth: int,
    on_value: Union[int, float] = 1.0,
    off_value: Union[int, float] = 0.0,
    axis: int = -1,
    dtype: Optional[DTypeLike] = None,
) -> Tensor:
    """Expand integer ``indices`` into one-hot vectors of length ``depth``.

    The new axis is inserted at ``axis`` (``-1`` appends it). Indices outside
    ``[0, depth)`` produce rows filled with ``off_value``. Without ``dtype``
    the result is int32 for integer on/off values and the default float dtype
    otherwise.
    """
    if not indices.dtype.is_int:
        raise UnsupportedDType(indices.dtype, "one_hot expects integer indices")
    if depth <= 0:
        raise InvalidArgument(f"depth must be positive, got {depth}")
    if axis < -1 or axis > indices.rank:
        raise InvalidAxis(axis, indices.rank + 1)
    if axis == -1:
        axis = indices.rank

    if dtype is None:
        both_int = isinstance(on_value, Integral) and isinstance(off_value, Integral)
        out_dtype = DEFAULT_INT_DTYPE if both_int else get_default_dtype()
    else:
        out_dtype = require_numeric(dtype)
    if not isinstance(on_value, Real) or not isinstance(off_value, Real):
        raise TypeError("on_value and off_value must be numbers")
    check_representable([on_value, off_value], out_dtype)

    values = strided_view(indices.buffer, indices.shape.dims, None)
    hot = np.expand_dims(values, axis) == np.arange(depth).reshape(
        [depth if k == axis else 1 for k in range(indices.rank + 1)]
    )
    encoded = np.where(hot, on_value, off_value).astype(out_dtype.numpy)
    return Tensor._from_owned_buffer(_owned(encoded), encoded.shape, out_dtype)


__all__ = [
    "reshape",
    "cast",
    "expand_dims",
    "squeeze",
    "concat",
    "slice",
    "pad",
    "one_hot",
]
