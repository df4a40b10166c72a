# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Map flat output positions back to source offsets without copying operands.

Two execution paths share the same stride tables:

* :func:`iter_offsets` and :func:`iter_reduction_offsets` walk positions one
  at a time, keeping only a rank-length coordinate list.
* :func:`strided_view` exposes the same mapping as a read-only numpy view
  (stride 0 repeats a slice), which lets numpy kernels run over broadcast
  operands without materialising them.
"""

from __future__ import annotations

import operator
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.lib.stride_tricks import as_strided

from .broadcast import BroadcastPlan
from .errors import InvalidAxis

AxisLike = Optional[Union[int, Sequence[int]]]


def unravel_index(index: int, dims: Sequence[int], coords: List[int]) -> List[int]:
    """Row-major decomposition of ``index`` into ``coords`` (updated in place)."""
    for axis in range(len(dims) - 1, -1, -1):
        index, coords[axis] = divmod(index, dims[axis])
    return coords


def contiguous_strides(dims: Sequence[int]) -> Tuple[int, ...]:
    """Row-major element strides of a contiguous buffer with ``dims``."""
    strides = [0] * len(dims)
    running = 1
    for axis in range(len(dims) - 1, -1, -1):
        strides[axis] = running
        running *= dims[axis]
    return tuple(strides)


def iter_offsets(plan: BroadcastPlan) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(output_index, index_a, index_b)`` for every output position."""
    size = plan.size
    if plan.strides_a is None or plan.strides_b is None:
        for i in range(size):
            yield i, i, i
        return

    dims = plan.output_shape.dims
    strides_a = plan.strides_a
    strides_b = plan.strides_b
    coords = [0] * len(dims)
    for i in range(size):
        unravel_index(i, dims, coords)
        index_a = 0
        index_b = 0
        for coord, stride_a, stride_b in zip(coords, strides_a, strides_b):
            index_a += stride_a * coord
            index_b += stride_b * coord
        yield i, index_a, index_b


def strided_view(
    buffer: np.ndarray, dims: Sequence[int], strides: Optional[Sequence[int]]
) -> np.ndarray:
    """Read-only view of a flat ``buffer`` laid out with element ``strides``.

    ``strides=None`` means the buffer is already laid out as ``dims``.
    """
    if strides is None:
        view = buffer.reshape(tuple(dims))
        view.flags.writeable = False
        return view
    itemsize = buffer.itemsize
    return as_strided(
        buffer,
        shape=tuple(dims),
        strides=tuple(stride * itemsize for stride in strides),
        writeable=False,
    )


def normalize_axes(axis: AxisLike, rank: int) -> Tuple[int, ...]:
    """Resolve negative axes and validate an axis list for ``rank``.

    ``None`` or an empty list selects every axis. The result is sorted.

    Raises:
        InvalidAxis: An entry is outside ``[-rank, rank)`` or repeated.
    """
    if axis is None:
        return tuple(range(rank))
    if isinstance(axis, (list, tuple)):
        entries = list(axis)
    else:
        entries = [axis]
    if not entries:
        return tuple(range(rank))

    seen = set()
    for entry in entries:
        if isinstance(entry, bool):
            raise InvalidAxis(entry, rank)
        try:
            value = operator.index(entry)
        except TypeError:
            raise InvalidAxis(entry, rank) from None
        if value < -rank or value >= rank:
            raise InvalidAxis(value, rank)
        value %= rank
        if value in seen:
            raise InvalidAxis(
                entry, rank, f"Axis {entry} is repeated in {entries}"
            )
        seen.add(value)
    return tuple(sorted(seen))


def normalize_axis(axis: int, rank: int) -> int:
    """Resolve a single axis, raising :class:`InvalidAxis` when out of range."""
    return normalize_axes([axis], rank)[0]


def _split_axes(
    dims: Sequence[int], axes: Sequence[int]
) -> Tuple[List[int], List[int]]:
    kept = [k for k in range(len(dims)) if k not in axes]
    return kept, list(axes)


def iter_reduction_offsets(
    dims: Sequence[int], axes: Sequence[int]
) -> Iterator[Tuple[int, List[int]]]:
    """Yield ``(output_index, offsets)`` for each reduction slice.

    Retained axes form the outer loop; ``offsets`` lists every source offset
    in the slice, ordered row-major over the reduced axes.
    """
    strides = contiguous_strides(dims)
    kept, reduced = _split_axes(dims, axes)
    kept_dims = [dims[k] for k in kept]
    kept_strides = [strides[k] for k in kept]
    reduced_dims = [dims[k] for k in reduced]
    reduced_strides = [strides[k] for k in reduced]

    out_size = 1
    for dim in kept_dims:
        out_size *= dim
    slice_size = 1
    for dim in reduced_dims:
        slice_size *= dim

    outer = [0] * len(kept_dims)
    inner = [0] * len(reduced_dims)
    for out_index in range(out_size):
        unravel_index(out_index, kept_dims, outer)
        base = sum(c * s for c, s in zip(outer, kept_strides))
        offsets = []
        for slice_index in range(slice_size):
            unravel_index(slice_index, reduced_dims, inner)
            offsets.append(base + sum(c * s for c, s in zip(inner, reduced_strides)))
        yield out_index, offsets


def reduction_slices(
    buffer: np.ndarray, dims: Sequence[int], axes: Sequence[int]
) -> np.ndarray:
    """Return a ``(out_size, slice_size)`` array of reduction slices.

    Row ``r`` holds the elements reduced into output position ``r``, in the
    same order as :func:`iter_reduction_offsets`.

    When the reduced axes are the trailing ones the result is a view of
    ``buffer``. Otherwise the permuted view cannot be flattened in place and
    numpy returns a copy of the input.
    """
    strides = contiguous_strides(dims)
    kept, reduced = _split_axes(dims, axes)
    order = kept + reduced
    view = strided_view(buffer, [dims[k] for k in order], [strides[k] for k in order])
    out_size = 1
    for k in kept:
        out_size *= dims[k]
    return view.reshape(out_size, -1)


__all__ = [
    "unravel_index",
    "contiguous_strides",
    "iter_offsets",
    "strided_view",
    "normalize_axes",
    "normalize_axis",
    "iter_reduction_offsets",
    "reduction_slices",
]
