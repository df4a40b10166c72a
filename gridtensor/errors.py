# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Exception hierarchy shared by every gridtensor module.

Each error derives from :class:`TensorError` and from the builtin exception
closest to its meaning, so ``except ValueError`` style handlers keep working.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple


class TensorError(Exception):
    """Base class for all gridtensor errors."""


class InvalidArgument(TensorError, ValueError):
    """An argument value violates an operation precondition."""


class InvalidShapeError(InvalidArgument):
    """A shape is empty, has a non-positive dimension, or mismatches a buffer."""

    def __init__(self, message: str, dims: Optional[Sequence[Any]] = None):
        super().__init__(message)
        self.dims = None if dims is None else tuple(dims)


class ShapeBroadcastError(InvalidArgument):
    """Two shapes cannot be broadcast against each other."""

    def __init__(self, shape_a: Sequence[int], shape_b: Sequence[int]):
        self.shapes: Tuple[Tuple[int, ...], Tuple[int, ...]] = (
            tuple(shape_a),
            tuple(shape_b),
        )
        super().__init__(
            f"Shapes {list(self.shapes[0])} and {list(self.shapes[1])} "
            "are not broadcastable"
        )


class ShapeMismatchError(InvalidArgument):
    """Operand shapes do not satisfy an operation's structural requirement."""


class InvalidAxis(InvalidArgument, IndexError):
    """An axis is out of range for the tensor rank, or repeated."""

    def __init__(self, axis: Any, rank: int, message: Optional[str] = None):
        self.axis = axis
        self.rank = rank
        if message is None:
            message = f"Axis {axis} is out of range for a tensor of rank {rank}"
        super().__init__(message)


class UnsupportedDType(InvalidArgument, TypeError):
    """A dtype is not accepted by the requested operation."""

    def __init__(self, dtype: Any, message: Optional[str] = None):
        self.dtype = dtype
        if message is None:
            message = f"Unsupported dtype '{dtype}'"
        super().__init__(message)


class SerializationError(InvalidArgument):
    """Serialized tensor data is malformed."""


class IndexOutOfRange(TensorError, IndexError):
    """An index falls outside ``[-rank, rank)``."""

    def __init__(self, index: int, rank: int):
        self.index = index
        self.rank = rank
        super().__init__(f"Index {index} is out of range for rank {rank}")


class DTypeMismatch(TensorError, TypeError):
    """Two tensor operands carry different dtypes."""

    def __init__(self, dtype_a: Any, dtype_b: Any):
        self.dtypes = (dtype_a, dtype_b)
        super().__init__(
            f"Operands must share a dtype, got '{dtype_a}' and '{dtype_b}'"
        )


class IncompatibleDType(TensorError, TypeError):
    """A tensor dtype and a scalar kind have no promotion rule."""

    def __init__(self, dtype: Any, kind: Any):
        self.dtype = dtype
        self.kind = kind
        super().__init__(
            f"Cannot combine a '{dtype}' tensor with a scalar of kind '{kind}'"
        )


__all__ = [
    "TensorError",
    "InvalidArgument",
    "InvalidShapeError",
    "ShapeBroadcastError",
    "ShapeMismatchError",
    "InvalidAxis",
    "UnsupportedDType",
    "SerializationError",
    "IndexOutOfRange",
    "DTypeMismatch",
    "IncompatibleDType",
]
