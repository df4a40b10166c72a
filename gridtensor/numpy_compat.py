# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Conversions between tensors and NumPy arrays."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .dtypes import DTypeLike, as_dtype, require_numeric
from .tensor import Tensor


def from_numpy(array: np.ndarray) -> Tensor:
    """Copy a NumPy array into a new tensor with the matching dtype."""
    return Tensor.from_numpy(array)


def asarray(data: Any, dtype: Optional[DTypeLike] = None) -> Tensor:
    """Convert tensors, arrays, nested lists and scalars to a tensor.

    Tensors already of ``dtype`` (or with no ``dtype`` requested) are
    returned unchanged since they are immutable.
    """
    if isinstance(data, Tensor):
        if dtype is None or as_dtype(dtype) is data.dtype:
            return data
        return data.cast(dtype)
    if isinstance(data, (np.ndarray, np.generic)):
        array = np.asarray(data)
        if dtype is not None:
            array = array.astype(require_numeric(dtype).numpy)
        return Tensor.from_numpy(array)
    return Tensor.constant(data, dtype=dtype)


def empty_like(x: Tensor, dtype: Optional[DTypeLike] = None) -> Tensor:
    """Zero-filled tensor with the shape (and by default dtype) of ``x``."""
    return Tensor.zeros(x.shape, dtype=dtype if dtype is not None else x.dtype)


__all__ = ["from_numpy", "asarray", "empty_like"]
