# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Random tensor factories.

Each factory takes an optional ``seed``. Without one, values come from a
module-level generator that :func:`manual_seed` resets.
"""

from __future__ import annotations

from threading import RLock
from typing import Optional, Union

import numpy as np

from .config import get_default_dtype
from .dtypes import DType, DTypeLike, require_numeric
from .errors import InvalidArgument, UnsupportedDType
from .tensor import ShapeLike, Tensor, as_shape

_GENERATOR_LOCK = RLock()
_generator = np.random.default_rng()

# Normal samples further than this many standard deviations are redrawn.
TRUNCATION_BOUND = 2.0


def manual_seed(seed: int) -> None:
    """Reseed the shared generator used when no ``seed`` is passed."""
    global _generator

    with _GENERATOR_LOCK:
        _generator = np.random.default_rng(seed)


def _rng(seed: Optional[int]) -> np.random.Generator:
    if seed is not None:
        return np.random.default_rng(seed)
    return _generator


def _float_dtype(dtype: DTypeLike, name: str) -> DType:
    resolved = require_numeric(dtype)
    if not resolved.is_float:
        raise UnsupportedDType(resolved, f"{name} only supports floating dtypes, got '{resolved}'")
    return resolved


def uniform(
    shape: ShapeLike,
    minval: Union[int, float] = 0.0,
    maxval: Union[int, float] = 1.0,
    dtype: DTypeLike = DType.FLOAT32,
    seed: Optional[int] = None,
) -> Tensor:
    """Uniform samples from ``[minval, maxval)``.

    Reversed bounds are swapped. Integer dtypes draw integers and need
    ``int(minval) != int(maxval)``.
    """
    target = as_shape(shape)
    resolved = require_numeric(dtype)
    with _GENERATOR_LOCK:
        rng = _rng(seed)
        if resolved.is_int:
            low, high = sorted((int(minval), int(maxval)))
            if low == high:
                raise InvalidArgument(f"Empty integer range [{low}, {high})")
            values = rng.integers(low, high, size=target.size, dtype=np.int64)
        else:
            low, high = sorted((float(minval), float(maxval)))
            values = rng.uniform(low, high, size=target.size)
    return Tensor._from_owned_buffer(values.astype(resolved.numpy), target, resolved)


def normal(
    shape: ShapeLike,
    mean: float = 0.0,
    std: float = 1.0,
    dtype: DTypeLike = DType.FLOAT32,
    seed: Optional[int] = None,
) -> Tensor:
    """Samples from a normal distribution with ``mean`` and ``std``."""
    target = as_shape(shape)
    resolved = _float_dtype(dtype, "normal")
    with _GENERATOR_LOCK:
        values = _rng(seed).normal(mean, std, size=target.size)
    return Tensor._from_owned_buffer(values.astype(resolved.numpy), target, resolved)


def truncated_normal(
    shape: ShapeLike,
    mean: float = 0.0,
    std: float = 1.0,
    dtype: DTypeLike = DType.FLOAT32,
    seed: Optional[int] = None,
) -> Tensor:
    """Normal samples restricted to ``mean +/- 2 * std`` by redrawing outliers."""
    target = as_shape(shape)
    resolved = _float_dtype(dtype, "truncated_normal")
    with _GENERATOR_LOCK:
        rng = _rng(seed)
        samples = rng.standard_normal(target.size)
        outside = np.abs(samples) > TRUNCATION_BOUND
        while outside.any():
            samples[outside] = rng.standard_normal(int(outside.sum()))
            outside = np.abs(samples) > TRUNCATION_BOUND
    values = samples * std + mean
    return Tensor._from_owned_buffer(values.astype(resolved.numpy), target, resolved)


def rand(*shape, dtype: Optional[DTypeLike] = None) -> Tensor:
    """Uniform samples in ``[0, 1)`` using the shared generator."""
    target = shape[0] if len(shape) == 1 else list(shape)
    return uniform(target, dtype=dtype if dtype is not None else get_default_dtype())


def randn(*shape, dtype: Optional[DTypeLike] = None) -> Tensor:
    """Standard normal samples using the shared generator."""
    target = shape[0] if len(shape) == 1 else list(shape)
    return normal(target, dtype=dtype if dtype is not None else get_default_dtype())


__all__ = [
    "manual_seed",
    "uniform",
    "normal",
    "truncated_normal",
    "rand",
    "randn",
]
