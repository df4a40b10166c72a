# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Immutable shaped tensors backed by flat numpy buffers.
"""

from __future__ import annotations

import importlib
from numbers import Integral, Real
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from .config import DEFAULT_INT_DTYPE, get_default_dtype
from .dtypes import (
    DType,
    DTypeLike,
    ScalarKind,
    as_dtype,
    check_representable,
    require_numeric,
    scalar_kind,
    scalar_result_dtype,
)
from .errors import InvalidArgument, InvalidShapeError
from .shape import Shape

ShapeLike = Union[Shape, Sequence[int], int]

_FUNCTIONAL: Any = None


def _functional() -> Any:
    """Import the operation namespace on first use."""
    global _FUNCTIONAL

    if _FUNCTIONAL is None:
        _FUNCTIONAL = importlib.import_module(".functional", __package__)
    return _FUNCTIONAL


def as_shape(shape: ShapeLike) -> Shape:
    if isinstance(shape, Shape):
        return shape
    if isinstance(shape, Integral) and not isinstance(shape, bool):
        return Shape([shape])
    return Shape(shape)


def _shape_args(shape: Tuple[Any, ...]) -> Shape:
    if len(shape) == 1:
        return as_shape(shape[0])
    return Shape(shape)


def _infer_dtype(kinds: set) -> DType:
    if ScalarKind.DOUBLE in kinds:
        return get_default_dtype()
    return DEFAULT_INT_DTYPE


def _is_operand(value: Any) -> bool:
    """True for values the operation layer converts to a tensor or scalar."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (Tensor, np.ndarray, np.number, Real, list, tuple))


def _flatten_nested(values: Any) -> Tuple[List[Any], List[int]]:
    """Flatten a rectangular nested list, returning the leaves and dimensions."""
    if not isinstance(values, (list, tuple)):
        return [values], [1]

    dims: List[int] = []
    level: List[Any] = [values]
    while level and isinstance(level[0], (list, tuple)):
        length = len(level[0])
        if length == 0:
            raise InvalidShapeError("Nested lists must not be empty")
        next_level: List[Any] = []
        for item in level:
            if not isinstance(item, (list, tuple)) or len(item) != length:
                raise InvalidShapeError("Nested lists must be rectangular")
            next_level.extend(item)
        dims.append(length)
        level = next_level
    for leaf in level:
        if isinstance(leaf, (list, tuple)):
            raise InvalidShapeError("Nested lists must be rectangular")
    return level, dims


class Tensor:
    """
    An immutable multi-dimensional array.

    A tensor combines a :class:`~gridtensor.shape.Shape`, a
    :class:`~gridtensor.dtypes.DType` and a flat read-only buffer holding
    ``shape.size`` elements in row-major order. Every operation returns a new
    tensor with its own buffer; no two tensors share storage.
    """

    # Let numpy defer mixed operations to Tensor's operators.
    __array_priority__ = 1000
    __hash__ = object.__hash__

    _UFUNC_BINARY_MAP: ClassVar[Dict[Any, Any]] = {
        np.add: lambda a, b: a + b,
        np.subtract: lambda a, b: a - b,
        np.multiply: lambda a, b: a * b,
        np.true_divide: lambda a, b: a / b,
        np.power: lambda a, b: a.pow(b),
        np.maximum: lambda a, b: a.maximum(b),
        np.minimum: lambda a, b: a.minimum(b),
        np.equal: lambda a, b: a.eq(b),
        np.not_equal: lambda a, b: a.ne(b),
        np.less: lambda a, b: a.lt(b),
        np.less_equal: lambda a, b: a.le(b),
        np.greater: lambda a, b: a.gt(b),
        np.greater_equal: lambda a, b: a.ge(b),
        np.matmul: lambda a, b: a.matmul(b),
    }
    _UFUNC_UNARY_MAP: ClassVar[Dict[Any, Any]] = {
        np.negative: lambda a: -a,
        np.absolute: lambda a: a.abs(),
        np.exp: lambda a: a.exp(),
        np.log: lambda a: a.log(),
        np.sin: lambda a: a.sin(),
        np.cos: lambda a: a.cos(),
        np.tan: lambda a: a.tan(),
        np.tanh: lambda a: a.tanh(),
        np.sqrt: lambda a: a.sqrt(),
        np.square: lambda a: a.square(),
        np.sign: lambda a: a.sign(),
    }

    @classmethod
    def _from_owned_buffer(
        cls, buffer: np.ndarray, shape: ShapeLike, dtype: DTypeLike
    ) -> "Tensor":
        """Wrap a freshly allocated flat ``buffer`` without copying it.

        The caller hands over ownership; the buffer is frozen read-only.
        """
        instance = cls.__new__(cls)
        instance._shape = as_shape(shape)
        instance._dtype = as_dtype(dtype)
        if buffer.size != instance._shape.size:
            raise InvalidShapeError(
                f"Buffer of {buffer.size} elements does not match shape {instance._shape}",
                instance._shape.dims,
            )
        buffer.flags.writeable = False
        instance._buffer = buffer
        return instance

    def __init__(self, buffer: Any, shape: ShapeLike, dtype: Optional[DTypeLike] = None):
        """
        Build a tensor from a flat buffer.

        Args:
            buffer: One-dimensional sequence or numpy array of ``shape.size`` values.
                The data is always copied.
            shape: Dimension sizes.
            dtype: Element type. Inferred from a numpy buffer's dtype, otherwise
                int32 for all-integer values and the default float dtype when any
                value is floating.

        Examples:
            >>> t1 = Tensor([1, 2, 3, 4], [2, 2])
            >>> t2 = Tensor([1.0, 2.0], [2], dtype="float64")
        """
        shape = as_shape(shape)
        if dtype is None:
            if isinstance(buffer, np.ndarray):
                dtype = as_dtype(buffer.dtype)
            else:
                dtype = _infer_dtype({scalar_kind(v) for v in buffer})
        resolved = require_numeric(dtype)

        try:
            data = np.array(buffer, dtype=resolved.numpy)
        except OverflowError as exc:
            raise InvalidArgument(f"Buffer values do not fit '{resolved}': {exc}") from None
        if data.ndim != 1:
            raise InvalidShapeError(
                f"Tensor buffer must be one-dimensional, got {data.ndim} dimensions"
            )
        if data.size != shape.size:
            raise InvalidShapeError(
                f"Buffer of {data.size} elements does not match shape {shape}",
                shape.dims,
            )
        data.flags.writeable = False
        self._buffer = data
        self._shape = shape
        self._dtype = resolved

    # Core properties
    @property
    def shape(self) -> Shape:
        """Get tensor shape."""
        return self._shape

    @property
    def dtype(self) -> DType:
        """Get tensor element type."""
        return self._dtype

    @property
    def buffer(self) -> np.ndarray:
        """Flat read-only storage in row-major order."""
        return self._buffer

    @property
    def rank(self) -> int:
        return self._shape.rank

    @property
    def ndim(self) -> int:
        return self._shape.rank

    @property
    def size(self) -> int:
        """Get total number of elements."""
        return self._shape.size

    @property
    def itemsize(self) -> int:
        """Get size of each element in bytes."""
        return self._dtype.itemsize

    @property
    def nbytes(self) -> int:
        """Get total bytes consumed by the tensor elements."""
        return self._buffer.nbytes

    @property
    def T(self) -> "Tensor":
        """Transpose of the last two axes."""
        return _functional().matrix_transpose(self)

    def __len__(self) -> int:
        return self._shape[0]

    # Data conversion methods
    def numpy(self) -> np.ndarray:
        """Copy the elements into a writable numpy array shaped like the tensor."""
        return self._buffer.reshape(self._shape.dims).copy()

    def __array__(self, dtype: Optional[Any] = None, copy: Optional[bool] = None) -> np.ndarray:
        """Support NumPy's array protocol for seamless interoperability."""
        array = self.numpy()
        if dtype is not None:
            return array.astype(dtype, copy=False)
        return array

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        """Dispatch NumPy ufuncs to Tensor operations."""
        if method != "__call__" or kwargs.get("out") is not None:
            return NotImplemented

        operands: List[Any] = []
        for arg in inputs:
            if isinstance(arg, Tensor):
                operands.append(arg)
            elif isinstance(arg, np.ndarray):
                operands.append(arg.item() if arg.ndim == 0 else Tensor.from_numpy(arg))
            elif isinstance(arg, (np.generic, Real)) and not isinstance(arg, (bool, np.bool_)):
                operands.append(arg.item() if isinstance(arg, np.generic) else arg)
            else:
                return NotImplemented

        if ufunc in self._UFUNC_BINARY_MAP and len(operands) == 2:
            left, right = operands
            if not isinstance(left, Tensor):
                return _REFLECTED_UFUNCS.get(ufunc, lambda a, b: NotImplemented)(right, left)
            return self._UFUNC_BINARY_MAP[ufunc](left, right)

        if ufunc in self._UFUNC_UNARY_MAP and len(operands) == 1:
            return self._UFUNC_UNARY_MAP[ufunc](operands[0])

        return NotImplemented

    def tolist(self) -> Any:
        """Convert to a nested Python list."""
        return self.numpy().tolist()

    def item(self) -> Union[float, int]:
        """Return the Python scalar value for a single-element tensor."""
        if self.size != 1:
            raise InvalidArgument(
                f"Only single-element tensors can be converted to a scalar, got shape {self._shape}"
            )
        return self._buffer[0].item()

    def __bool__(self) -> bool:
        return bool(self.item())

    def __float__(self) -> float:
        return float(self.item())

    def __int__(self) -> int:
        return int(self.item())

    def __repr__(self) -> str:
        values = np.array2string(self.numpy(), separator=", ")
        return f"Tensor({values}, shape={self._shape}, dtype={self._dtype})"

    def clone(self) -> "Tensor":
        """Return a copy with its own buffer."""
        return Tensor._from_owned_buffer(self._buffer.copy(), self._shape, self._dtype)

    # Shape manipulation methods
    def reshape(self, *shape: Union[int, Sequence[int]]) -> "Tensor":
        """Return a reshaped copy."""
        return _functional().reshape(self, *shape)

    def cast(self, dtype: DTypeLike) -> "Tensor":
        """Return a copy converted to ``dtype``."""
        return _functional().cast(self, dtype)

    def astype(self, dtype: DTypeLike) -> "Tensor":
        """Alias for :meth:`cast`."""
        return self.cast(dtype)

    def expand_dims(self, axis: int) -> "Tensor":
        return _functional().expand_dims(self, axis)

    def squeeze(self, axis: Optional[Union[int, Sequence[int]]] = None) -> "Tensor":
        return _functional().squeeze(self, axis)

    # Arithmetic operators
    def __neg__(self) -> "Tensor":
        return _functional().negative(self)

    def __add__(self, other: Union["Tensor", float, int]) -> "Tensor":
        return _functional().add(self, other)

    def __radd__(self, other: Union[float, int]) -> "Tensor":
        return _functional().add(other, self)

    def __sub__(self, other: Union["Tensor", float, int]) -> "Tensor":
        return _functional().subtract(self, other)

    def __rsub__(self, other: Union[float, int]) -> "Tensor":
        return _functional().subtract(other, self)

    def __mul__(self, other: Union["Tensor", float, int]) -> "Tensor":
        return _functional().multiply(self, other)

    def __rmul__(self, other: Union[float, int]) -> "Tensor":
        return _functional().multiply(other, self)

    def __truediv__(self, other: Union["Tensor", float, int]) -> "Tensor":
        return _functional().divide(self, other)

    def __rtruediv__(self, other: Union[float, int]) -> "Tensor":
        return _functional().divide(other, self)

    def __pow__(self, exponent: Union["Tensor", float, int]) -> "Tensor":
        return self.pow(exponent)

    def pow(self, exponent: Union["Tensor", float, int]) -> "Tensor":
        """Raise to ``exponent`` element-wise (floating result)."""
        return _functional().pow(self, exponent)

    def __matmul__(self, other: "Tensor") -> "Tensor":
        return self.matmul(other)

    def matmul(
        self, other: "Tensor", transpose_a: bool = False, transpose_b: bool = False
    ) -> "Tensor":
        """Batched matrix multiplication over the last two axes."""
        return _functional().matmul(self, other, transpose_a, transpose_b)

    def maximum(self, other: Union["Tensor", float, int]) -> "Tensor":
        return _functional().maximum(self, other)

    def minimum(self, other: Union["Tensor", float, int]) -> "Tensor":
        return _functional().minimum(self, other)

    # Comparison operators (1/0 tensors in the operand dtype)
    def __eq__(self, other: Any) -> "Tensor":  # type: ignore[override]
        if not _is_operand(other):
            return NotImplemented
        return self.eq(other)

    def __ne__(self, other: Any) -> "Tensor":  # type: ignore[override]
        if not _is_operand(other):
            return NotImplemented
        return self.ne(other)

    def __lt__(self, other: Any) -> "Tensor":
        if not _is_operand(other):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: Any) -> "Tensor":
        if not _is_operand(other):
            return NotImplemented
        return self.le(other)

    def __gt__(self, other: Any) -> "Tensor":
        if not _is_operand(other):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: Any) -> "Tensor":
        if not _is_operand(other):
            return NotImplemented
        return self.ge(other)

    def eq(self, other: Any, dtype: Optional[DTypeLike] = None) -> "Tensor":
        return _functional().equal(self, other, dtype)

    def ne(self, other: Any, dtype: Optional[DTypeLike] = None) -> "Tensor":
        return _functional().not_equal(self, other, dtype)

    def lt(self, other: Any, dtype: Optional[DTypeLike] = None) -> "Tensor":
        return _functional().less(self, other, dtype)

    def le(self, other: Any, dtype: Optional[DTypeLike] = None) -> "Tensor":
        return _functional().less_equal(self, other, dtype)

    def gt(self, other: Any, dtype: Optional[DTypeLike] = None) -> "Tensor":
        return _functional().greater(self, other, dtype)

    def ge(self, other: Any, dtype: Optional[DTypeLike] = None) -> "Tensor":
        return _functional().greater_equal(self, other, dtype)

    def allclose(self, other: "Tensor", rtol: float = 1e-5, atol: float = 1e-8) -> bool:
        return _functional().allclose(self, other, rtol, atol)

    def array_equal(self, other: "Tensor") -> bool:
        return _functional().array_equal(self, other)

    # Reductions
    def sum(self, axis: Any = None, keepdims: bool = False) -> "Tensor":
        return _functional().reduce_sum(self, axis, keepdims)

    def prod(self, axis: Any = None, keepdims: bool = False) -> "Tensor":
        return _functional().reduce_prod(self, axis, keepdims)

    def max(self, axis: Any = None, keepdims: bool = False) -> "Tensor":
        return _functional().reduce_max(self, axis, keepdims)

    def min(self, axis: Any = None, keepdims: bool = False) -> "Tensor":
        return _functional().reduce_min(self, axis, keepdims)

    def mean(
        self, axis: Any = None, keepdims: bool = False, dtype: Optional[DTypeLike] = None
    ) -> "Tensor":
        return _functional().reduce_mean(self, axis, keepdims, dtype)

    def var(
        self, axis: Any = None, keepdims: bool = False, dtype: Optional[DTypeLike] = None
    ) -> "Tensor":
        return _functional().reduce_variance(self, axis, keepdims, dtype)

    def std(
        self, axis: Any = None, keepdims: bool = False, dtype: Optional[DTypeLike] = None
    ) -> "Tensor":
        return _functional().reduce_std(self, axis, keepdims, dtype)

    def argmax(self, axis: int = 0, dtype: DTypeLike = DType.INT32) -> "Tensor":
        return _functional().argmax(self, axis, dtype)

    def argmin(self, axis: int = 0, dtype: DTypeLike = DType.INT32) -> "Tensor":
        return _functional().argmin(self, axis, dtype)

    # Element-wise math
    def abs(self) -> "Tensor":
        return _functional().abs(self)

    def square(self) -> "Tensor":
        return _functional().square(self)

    def sign(self) -> "Tensor":
        return _functional().sign(self)

    def sqrt(self) -> "Tensor":
        return _functional().sqrt(self)

    def exp(self) -> "Tensor":
        return _functional().exp(self)

    def log(self) -> "Tensor":
        return _functional().log(self)

    def sin(self) -> "Tensor":
        return _functional().sin(self)

    def cos(self) -> "Tensor":
        return _functional().cos(self)

    def tan(self) -> "Tensor":
        return _functional().tan(self)

    def tanh(self) -> "Tensor":
        return _functional().tanh(self)

    def sigmoid(self) -> "Tensor":
        return _functional().sigmoid(self)

    def softplus(self) -> "Tensor":
        return _functional().softplus(self)

    # Serialization
    def to_json(self) -> Dict[str, Any]:
        """Return the ``{"dType", "shape", "buffer"}`` mapping."""
        return importlib.import_module(".serialization", __package__).to_json(self)

    def to_bytes(self) -> bytes:
        """Return the JSON header line followed by little-endian element bytes."""
        return importlib.import_module(".serialization", __package__).to_bytes(self)

    # Factories
    @staticmethod
    def constant(
        values: Any, shape: Optional[ShapeLike] = None, dtype: Optional[DTypeLike] = None
    ) -> "Tensor":
        """
        Create a tensor from a scalar or a rectangular nested list.

        Args:
            values: Scalar, nested list, or numpy array.
            shape: Target shape. A scalar is repeated to fill it; a list must
                hold exactly ``shape.size`` leaves.
            dtype: Element type. Without one, integer leaves give int32 and any
                floating leaf gives the default float dtype.

        Raises:
            InvalidShapeError: The nested list is empty or ragged, or does not
                fit ``shape``.
            IncompatibleDType: A leaf cannot be stored as ``dtype``.
        """
        if isinstance(values, np.ndarray):
            values = values.tolist()
        leaves, dims = _flatten_nested(values)
        kinds = {scalar_kind(leaf) for leaf in leaves}

        if dtype is None:
            resolved = _infer_dtype(kinds)
        else:
            resolved = require_numeric(dtype)
            for kind in kinds:
                scalar_result_dtype(resolved, kind, construction=True)
        check_representable(leaves, resolved)

        if shape is None:
            target = Shape(dims)
        else:
            target = as_shape(shape)
            if len(leaves) == 1 and target.size != 1:
                leaves = leaves * target.size
            elif len(leaves) != target.size:
                raise InvalidShapeError(
                    f"Cannot fit {len(leaves)} values into shape {target}", target.dims
                )
        data = np.array(leaves, dtype=resolved.numpy)
        return Tensor._from_owned_buffer(data, target, resolved)

    @staticmethod
    def fill(shape: ShapeLike, value: Union[int, float], dtype: Optional[DTypeLike] = None) -> "Tensor":
        """Create a tensor of ``shape`` with every element equal to ``value``."""
        target = as_shape(shape)
        kind = scalar_kind(value)
        if dtype is None:
            resolved = _infer_dtype({kind})
        else:
            resolved = require_numeric(dtype)
            scalar_result_dtype(resolved, kind, construction=True)
        check_representable([value], resolved)
        data = np.full(target.size, value, dtype=resolved.numpy)
        return Tensor._from_owned_buffer(data, target, resolved)

    @staticmethod
    def full(shape: ShapeLike, fill_value: Union[int, float], dtype: Optional[DTypeLike] = None) -> "Tensor":
        """Alias for :meth:`fill`."""
        return Tensor.fill(shape, fill_value, dtype)

    @staticmethod
    def zeros(*shape: Any, dtype: Optional[DTypeLike] = None) -> "Tensor":
        """Create a tensor filled with zeros (default float dtype)."""
        target = _shape_args(shape)
        resolved = require_numeric(dtype) if dtype is not None else get_default_dtype()
        return Tensor._from_owned_buffer(np.zeros(target.size, resolved.numpy), target, resolved)

    @staticmethod
    def ones(*shape: Any, dtype: Optional[DTypeLike] = None) -> "Tensor":
        """Create a tensor filled with ones (default float dtype)."""
        target = _shape_args(shape)
        resolved = require_numeric(dtype) if dtype is not None else get_default_dtype()
        return Tensor._from_owned_buffer(np.ones(target.size, resolved.numpy), target, resolved)

    @staticmethod
    def eye(
        num_rows: int,
        num_cols: Optional[int] = None,
        batch_shape: Optional[Sequence[int]] = None,
        dtype: Optional[DTypeLike] = None,
    ) -> "Tensor":
        """Create an identity matrix, optionally repeated over ``batch_shape``."""
        num_cols = num_rows if num_cols is None else num_cols
        resolved = require_numeric(dtype) if dtype is not None else get_default_dtype()
        target = Shape(list(batch_shape or []) + [num_rows, num_cols])
        matrix = np.eye(num_rows, num_cols, dtype=resolved.numpy)
        data = np.broadcast_to(matrix, target.dims).reshape(-1).copy()
        return Tensor._from_owned_buffer(data, target, resolved)

    @staticmethod
    def diag(
        diagonal: Any,
        offset: int = 0,
        num_rows: Optional[int] = None,
        num_cols: Optional[int] = None,
        dtype: Optional[DTypeLike] = None,
    ) -> "Tensor":
        """
        Create a matrix with ``diagonal`` placed on the ``offset``-th diagonal.

        A rank-1 ``diagonal`` gives one matrix; higher ranks give one matrix per
        leading index (the last axis holds the diagonal values). Positive
        ``offset`` moves the diagonal right of the main one, negative below it.
        Rows and columns default to ``len(diagonal) + abs(offset)``.
        """
        if isinstance(diagonal, Tensor):
            values = diagonal if dtype is None else diagonal.cast(dtype)
        else:
            values = Tensor.constant(diagonal, dtype=dtype)
        length = values.shape[-1]
        num_rows = length + abs(offset) if num_rows is None else num_rows
        num_cols = length + abs(offset) if num_cols is None else num_cols
        row0, col0 = (0, offset) if offset >= 0 else (-offset, 0)
        if row0 + length > num_rows or col0 + length > num_cols:
            raise InvalidArgument(
                f"Diagonal of length {length} with offset {offset} does not fit "
                f"a {num_rows}x{num_cols} matrix"
            )
        batch = list(values.shape[:-1])
        target = Shape(batch + [num_rows, num_cols])
        out = np.zeros(target.dims, dtype=values.dtype.numpy)
        steps = np.arange(length)
        out[..., row0 + steps, col0 + steps] = values.numpy()
        return Tensor._from_owned_buffer(out.reshape(-1), target, values.dtype)

    @staticmethod
    def from_buffer(buffer: Any, shape: ShapeLike, dtype: Optional[DTypeLike] = None) -> "Tensor":
        """Create a tensor from a flat buffer (copied)."""
        return Tensor(buffer, shape, dtype)

    @staticmethod
    def from_numpy(array: np.ndarray) -> "Tensor":
        """Create a tensor from a NumPy array (copied). 0-d arrays give shape ``[1]``."""
        array = np.asarray(array)
        dtype = require_numeric(as_dtype(array.dtype))
        dims = array.shape or (1,)
        data = np.array(array, dtype=dtype.numpy, order="C").reshape(-1)
        return Tensor._from_owned_buffer(data, dims, dtype)


_REFLECTED_UFUNCS: Dict[Any, Any] = {
    np.add: lambda t, s: t.__radd__(s),
    np.subtract: lambda t, s: t.__rsub__(s),
    np.multiply: lambda t, s: t.__rmul__(s),
    np.true_divide: lambda t, s: t.__rtruediv__(s),
    np.maximum: lambda t, s: t.maximum(s),
    np.minimum: lambda t, s: t.minimum(s),
    np.equal: lambda t, s: t.eq(s),
    np.not_equal: lambda t, s: t.ne(s),
    np.less: lambda t, s: t.gt(s),
    np.less_equal: lambda t, s: t.ge(s),
    np.greater: lambda t, s: t.lt(s),
    np.greater_equal: lambda t, s: t.le(s),
}


# Convenience functions for tensor creation (NumPy-style)
def tensor(values: Any, dtype: Optional[DTypeLike] = None) -> Tensor:
    """Create a tensor from a scalar or nested list."""
    return Tensor.constant(values, dtype=dtype)


def zeros(*shape: Any, dtype: Optional[DTypeLike] = None) -> Tensor:
    """Create a tensor filled with zeros."""
    return Tensor.zeros(*shape, dtype=dtype)


def ones(*shape: Any, dtype: Optional[DTypeLike] = None) -> Tensor:
    """Create a tensor filled with ones."""
    return Tensor.ones(*shape, dtype=dtype)


def full(shape: ShapeLike, fill_value: Union[int, float], dtype: Optional[DTypeLike] = None) -> Tensor:
    """Create a tensor filled with a specific value."""
    return Tensor.full(shape, fill_value, dtype=dtype)


def eye(
    num_rows: int,
    num_cols: Optional[int] = None,
    batch_shape: Optional[Sequence[int]] = None,
    dtype: Optional[DTypeLike] = None,
) -> Tensor:
    """Create an identity matrix."""
    return Tensor.eye(num_rows, num_cols, batch_shape, dtype=dtype)


def from_numpy(array: np.ndarray) -> Tensor:
    """Create a tensor from a NumPy array."""
    return Tensor.from_numpy(array)


# Export all public symbols
__all__ = [
    "Tensor",
    "tensor",
    "zeros",
    "ones",
    "full",
    "eye",
    "from_numpy",
]
