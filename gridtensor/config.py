# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Process-wide defaults used when a factory is called without a dtype."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from threading import RLock
from typing import Iterator

from .dtypes import DType, DTypeLike, as_dtype
from .errors import InvalidArgument, UnsupportedDType

logger = logging.getLogger(__name__)

_DEFAULT_LOCK = RLock()
_default_float_dtype: DType = DType.FLOAT32

# Integer literals always infer this dtype.
DEFAULT_INT_DTYPE = DType.INT32


def set_default_dtype(dtype: DTypeLike) -> None:
    """Set the global default floating dtype for new tensors."""
    global _default_float_dtype

    try:
        resolved = as_dtype(dtype)
    except UnsupportedDType:
        raise InvalidArgument(f"Unsupported dtype '{dtype}'") from None
    if not resolved.is_float:
        raise InvalidArgument(
            f"Default dtype must be float32 or float64, got '{resolved}'"
        )
    with _DEFAULT_LOCK:
        _default_float_dtype = resolved
    logger.debug("default dtype set to %s", resolved)


def get_default_dtype() -> DType:
    """Get the current global default floating dtype."""
    with _DEFAULT_LOCK:
        return _default_float_dtype


@contextmanager
def default_dtype(dtype: DTypeLike) -> Iterator[DType]:
    """Temporarily switch the default floating dtype.

    The previous value is restored on exit, including when the body raises.
    """
    previous = get_default_dtype()
    set_default_dtype(dtype)
    try:
        yield get_default_dtype()
    finally:
        set_default_dtype(previous)


__all__ = [
    "DEFAULT_INT_DTYPE",
    "set_default_dtype",
    "get_default_dtype",
    "default_dtype",
]
