# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Element types, buffer allocation and dtype promotion rules."""

from __future__ import annotations

import enum
import math
from numbers import Integral, Real
from typing import Any, Dict, Iterable, Tuple, Union

import numpy as np

from .errors import DTypeMismatch, IncompatibleDType, InvalidArgument, UnsupportedDType


class DType(str, enum.Enum):
    """Logical element type of a tensor buffer.

    ``string`` and ``bool`` are reserved names; numeric operations reject them.
    Members compare equal to their names, so ``DType.FLOAT32 == "float32"``.
    """

    FLOAT32 = "float32"
    FLOAT64 = "float64"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    STRING = "string"
    BOOL = "bool"

    def __str__(self) -> str:
        return self.value

    @property
    def is_numeric(self) -> bool:
        return self in _NUMPY_TYPES

    @property
    def is_int(self) -> bool:
        return self in (DType.INT32, DType.INT64, DType.UINT8)

    @property
    def is_float(self) -> bool:
        return self in (DType.FLOAT32, DType.FLOAT64)

    @property
    def numpy(self) -> np.dtype:
        """The numpy storage dtype backing this element type."""
        try:
            return _NUMPY_TYPES[self]
        except KeyError:
            raise UnsupportedDType(self) from None

    @property
    def itemsize(self) -> int:
        """Storage width of one element in bytes."""
        return self.numpy.itemsize


_NUMPY_TYPES: Dict[DType, np.dtype] = {
    DType.FLOAT32: np.dtype(np.float32),
    DType.FLOAT64: np.dtype(np.float64),
    DType.INT32: np.dtype(np.int32),
    DType.INT64: np.dtype(np.int64),
    DType.UINT8: np.dtype(np.uint8),
}
_FROM_NUMPY: Dict[np.dtype, DType] = {v: k for k, v in _NUMPY_TYPES.items()}

DTypeLike = Union[DType, str, np.dtype, type]


def as_dtype(spec: DTypeLike) -> DType:
    """Resolve a :class:`DType`, a dtype name, or a numpy dtype to a ``DType``."""
    if isinstance(spec, DType):
        return spec
    if spec is None:
        raise UnsupportedDType(spec)
    if isinstance(spec, str):
        try:
            return DType(spec)
        except ValueError:
            raise UnsupportedDType(spec) from None
    try:
        np_dtype = np.dtype(spec)
    except TypeError:
        raise UnsupportedDType(spec) from None
    if np_dtype in _FROM_NUMPY:
        return _FROM_NUMPY[np_dtype]
    if np_dtype == np.bool_:
        return DType.BOOL
    raise UnsupportedDType(np_dtype)


def require_numeric(dtype: DTypeLike) -> DType:
    """Return ``dtype`` as a :class:`DType`, rejecting string and bool."""
    resolved = as_dtype(dtype)
    if not resolved.is_numeric:
        raise UnsupportedDType(
            resolved, f"Operation requires a numeric dtype, got '{resolved}'"
        )
    return resolved


class ScalarKind(str, enum.Enum):
    """Family of a Python scalar operand."""

    INT = "int"
    DOUBLE = "double"

    def __str__(self) -> str:
        return self.value


def scalar_kind(value: Any) -> ScalarKind:
    """Classify a Python or numpy scalar as integral or floating."""
    if isinstance(value, (bool, np.bool_)):
        raise UnsupportedDType(DType.BOOL, "Boolean scalars are not supported")
    if isinstance(value, Integral):
        return ScalarKind.INT
    if isinstance(value, Real):
        return ScalarKind.DOUBLE
    raise TypeError(f"Expected a numeric scalar, got {type(value).__name__}")


def check_representable(values: Iterable[Any], dtype: DTypeLike) -> None:
    """Raise :class:`InvalidArgument` if a value cannot be stored as ``dtype``.

    Integer dtypes accept finite values inside their ``np.iinfo`` range (floats
    are checked after truncation). Float dtypes reject integers too large to
    convert.
    """
    resolved = require_numeric(dtype)
    if resolved.is_int:
        info = np.iinfo(resolved.numpy)
        for value in values:
            if isinstance(value, Integral):
                truncated = int(value)
            elif math.isfinite(value):
                truncated = math.trunc(value)
            else:
                raise InvalidArgument(f"Value {value} cannot be stored as '{resolved}'")
            if not info.min <= truncated <= info.max:
                raise InvalidArgument(
                    f"Value {value} is out of range for '{resolved}' "
                    f"[{info.min}, {info.max}]"
                )
    else:
        for value in values:
            if isinstance(value, Integral):
                try:
                    float(value)
                except OverflowError:
                    raise InvalidArgument(
                        f"Value {value} is out of range for '{resolved}'"
                    ) from None


def empty_buffer(dtype: DTypeLike, length: int) -> np.ndarray:
    """Allocate a zero-initialised contiguous buffer of ``length`` elements."""
    if length <= 0:
        raise InvalidArgument(f"Buffer length must be positive, got {length}")
    resolved = require_numeric(dtype)
    return np.zeros(length, dtype=resolved.numpy)


def result_dtype(dtype_a: DTypeLike, dtype_b: DTypeLike) -> DType:
    """Result dtype of a tensor-tensor operation; operands must agree."""
    a = require_numeric(dtype_a)
    b = require_numeric(dtype_b)
    if a is not b:
        raise DTypeMismatch(a, b)
    return a


# (tensor dtype, scalar kind) -> result dtype
_SCALAR_PROMOTION: Dict[Tuple[DType, ScalarKind], DType] = {
    (DType.FLOAT32, ScalarKind.DOUBLE): DType.FLOAT32,
    (DType.FLOAT64, ScalarKind.DOUBLE): DType.FLOAT64,
    (DType.UINT8, ScalarKind.INT): DType.INT32,
    (DType.INT32, ScalarKind.INT): DType.INT32,
    (DType.INT64, ScalarKind.INT): DType.INT64,
    (DType.FLOAT32, ScalarKind.INT): DType.FLOAT32,
    (DType.FLOAT64, ScalarKind.INT): DType.FLOAT64,
}

# Only valid while filling a freshly constructed tensor.
_CONSTRUCTION_PROMOTION: Dict[Tuple[DType, ScalarKind], DType] = {
    (DType.INT32, ScalarKind.DOUBLE): DType.INT32,
    (DType.INT64, ScalarKind.DOUBLE): DType.INT64,
}


def scalar_result_dtype(
    dtype: DTypeLike, kind: ScalarKind, construction: bool = False
) -> DType:
    """Result dtype of combining a ``dtype`` tensor with a scalar of ``kind``.

    Args:
        dtype: Tensor element type.
        kind: Family of the scalar operand.
        construction: Allow the rules that only apply when building a tensor
            (an integer tensor filled from a floating value).

    Raises:
        IncompatibleDType: No promotion rule exists for the pair.
    """
    resolved = as_dtype(dtype)
    kind = ScalarKind(kind)
    key = (resolved, kind)
    if key in _SCALAR_PROMOTION:
        return _SCALAR_PROMOTION[key]
    if construction and key in _CONSTRUCTION_PROMOTION:
        return _CONSTRUCTION_PROMOTION[key]
    raise IncompatibleDType(resolved, kind)


__all__ = [
    "DType",
    "DTypeLike",
    "ScalarKind",
    "as_dtype",
    "require_numeric",
    "scalar_kind",
    "check_representable",
    "empty_buffer",
    "result_dtype",
    "scalar_result_dtype",
]
