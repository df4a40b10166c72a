# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Immutable tensor shapes and the predicates used to broadcast them."""

from __future__ import annotations

import operator
from collections.abc import Sequence as _SequenceABC
from typing import Any, Iterator, List, Sequence, Tuple, Union, overload

from .errors import IndexOutOfRange, InvalidShapeError


class Shape(_SequenceABC):
    """Ordered list of positive dimension sizes.

    A shape always has rank >= 1; scalars are represented as ``Shape([1])``.
    Indexing accepts negative positions counted from the last axis.

    Examples:
        >>> Shape([2, 3]).size
        6
        >>> Shape([2, 3])[-1]
        3
    """

    __slots__ = ("_dims", "_size")

    def __init__(self, dims: Union["Shape", Sequence[int]]):
        if isinstance(dims, Shape):
            self._dims: Tuple[int, ...] = dims._dims
            self._size: int = dims._size
            return

        try:
            values = list(dims)
        except TypeError:
            raise InvalidShapeError(
                f"Shape must be a sequence of integers, got {dims!r}"
            ) from None

        if not values:
            raise InvalidShapeError("Shape must have at least one dimension", values)

        parsed = []
        for value in values:
            if isinstance(value, bool):
                raise InvalidShapeError(f"Invalid dimension {value!r}", values)
            try:
                dim = operator.index(value)
            except TypeError:
                raise InvalidShapeError(
                    f"Invalid dimension {value!r}", values
                ) from None
            if dim <= 0:
                raise InvalidShapeError(
                    f"Dimensions must be positive, got {values}", values
                )
            parsed.append(dim)

        size = 1
        for dim in parsed:
            size *= dim
        self._dims = tuple(parsed)
        self._size = size

    # Core properties
    @property
    def dims(self) -> Tuple[int, ...]:
        """Dimension sizes as a tuple."""
        return self._dims

    @property
    def rank(self) -> int:
        """Number of axes."""
        return len(self._dims)

    @property
    def size(self) -> int:
        """Product of all dimensions."""
        return self._size

    def dim(self, index: int) -> int:
        """Return the size of axis ``index`` (negative values count from the end)."""
        rank = len(self._dims)
        if index < -rank or index >= rank:
            raise IndexOutOfRange(index, rank)
        return self._dims[index]

    def as_list(self) -> List[int]:
        return list(self._dims)

    # Sequence protocol
    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[int, ...]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._dims[index]
        return self.dim(operator.index(index))

    def __len__(self) -> int:
        return len(self._dims)

    def __iter__(self) -> Iterator[int]:
        return iter(self._dims)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Shape):
            return self._dims == other._dims
        if isinstance(other, (list, tuple)):
            return list(self._dims) == list(other)
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._dims)

    def __repr__(self) -> str:
        return f"Shape({list(self._dims)})"

    def __str__(self) -> str:
        return str(list(self._dims))

    # Broadcasting predicates
    def equal_to(self, other: "Shape") -> bool:
        """Same rank and identical dimensions."""
        return self._dims == _as_shape(other)._dims

    def compatible_with(self, other: "Shape") -> bool:
        """Same rank and every axis pair is either equal or contains a 1."""
        other = _as_shape(other)
        if self.rank != other.rank:
            return False
        return all(a == b or a == 1 or b == 1 for a, b in zip(self._dims, other._dims))

    def equal_with_last_dims(self, other: "Shape") -> bool:
        """Right-aligned equality over the last ``min(rank)`` axes."""
        other = _as_shape(other)
        common = min(self.rank, other.rank)
        return self._dims[self.rank - common :] == other._dims[other.rank - common :]

    def broadcastable_with(self, other: "Shape") -> bool:
        """Equal, compatible or matching over the trailing axes.

        Single-element operands are handled separately by the broadcast
        resolver and are not covered by this predicate.
        """
        other = _as_shape(other)
        return (
            self.equal_to(other)
            or self.compatible_with(other)
            or self.equal_with_last_dims(other)
        )


def _as_shape(value: Union[Shape, Sequence[int]]) -> Shape:
    if isinstance(value, Shape):
        return value
    return Shape(value)


__all__ = ["Shape"]
