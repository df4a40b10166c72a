# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import logging
from typing import Iterable

from . import functional, numpy_compat, random, serialization
from .broadcast import BroadcastPlan, Strategy, broadcast_strides, resolve_broadcast
from .config import default_dtype, get_default_dtype, set_default_dtype
from .dtypes import DType, ScalarKind, empty_buffer, result_dtype, scalar_result_dtype
from .errors import (
    DTypeMismatch,
    IncompatibleDType,
    IndexOutOfRange,
    InvalidArgument,
    InvalidAxis,
    InvalidShapeError,
    SerializationError,
    ShapeBroadcastError,
    ShapeMismatchError,
    TensorError,
    UnsupportedDType,
)
from .shape import Shape
from .tensor import Tensor

try:
    from ._version import __version__, __version_tuple__
except ImportError:  # pragma: no cover - fallback for editable installs
    __version__ = "0.1.0"
    __version_tuple__ = (0, 1, 0)

logging.getLogger(__name__).addHandler(logging.NullHandler())

functional = functional
numpy_compat = numpy_compat
random = random
serialization = serialization

# Tensor factories map directly to the Tensor static constructors.
tensor = Tensor.constant
constant = Tensor.constant
zeros = Tensor.zeros
ones = Tensor.ones
fill = Tensor.fill
full = Tensor.full
eye = Tensor.eye
diag = Tensor.diag
from_buffer = Tensor.from_buffer
from_numpy = Tensor.from_numpy
asarray = numpy_compat.asarray

uniform = random.uniform
normal = random.normal
truncated_normal = random.truncated_normal
rand = random.rand
randn = random.randn
manual_seed = random.manual_seed

to_json = serialization.to_json
from_json = serialization.from_json
to_bytes = serialization.to_bytes
from_bytes = serialization.from_bytes
save = serialization.save
load = serialization.load

_FUNCTIONAL_FORWARDERS: Iterable[str] = (
    "elementwise_binary",
    "elementwise_unary",
    "binary_scalar",
    "reduce",
    "add",
    "subtract",
    "multiply",
    "divide",
    "negative",
    "add_scalar",
    "subtract_scalar",
    "multiply_scalar",
    "divide_scalar",
    "equal",
    "not_equal",
    "greater",
    "greater_equal",
    "less",
    "less_equal",
    "allclose",
    "array_equal",
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
    "matmul",
    "matrix_transpose",
    "reshape",
    "cast",
    "expand_dims",
    "squeeze",
    "concat",
    "slice",
    "pad",
    "one_hot",
)

for _name in _FUNCTIONAL_FORWARDERS:
    globals()[_name] = getattr(functional, _name)


__all__ = [
    "Tensor",
    "Shape",
    "DType",
    "ScalarKind",
    "BroadcastPlan",
    "Strategy",
    "resolve_broadcast",
    "broadcast_strides",
    "empty_buffer",
    "result_dtype",
    "scalar_result_dtype",
    "functional",
    "numpy_compat",
    "random",
    "serialization",
    "tensor",
    "constant",
    "zeros",
    "ones",
    "fill",
    "full",
    "eye",
    "diag",
    "from_buffer",
    "from_numpy",
    "asarray",
    "uniform",
    "normal",
    "truncated_normal",
    "rand",
    "randn",
    "manual_seed",
    "to_json",
    "from_json",
    "to_bytes",
    "from_bytes",
    "save",
    "load",
    "set_default_dtype",
    "get_default_dtype",
    "default_dtype",
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
    *_FUNCTIONAL_FORWARDERS,
]
