# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import numpy as np

from ..dtypes import result_dtype
from ..errors import ShapeMismatchError
from ..iteration import strided_view
from ..tensor import Tensor


def _matrices(x: Tensor, transpose: bool) -> np.ndarray:
    view = strided_view(x.buffer, x.shape.dims, None)
    return np.swapaxes(view, -1, -2) if transpose else view


def matmul(
    a: Tensor, b: Tensor, transpose_a: bool = False, transpose_b: bool = False
) -> Tensor:
    """Batched matrix product over the last two axes.

    Args:
        a: Tensor of shape ``[..., m, n]`` (``[..., n, m]`` if ``transpose_a``).
        b: Tensor of shape ``[..., n, p]`` (``[..., p, n]`` if ``transpose_b``).
        transpose_a: Use the transpose of the last two axes of ``a``.
        transpose_b: Use the transpose of the last two axes of ``b``.

    Returns:
        Tensor of shape ``[..., m, p]`` with the shared dtype.

    Raises:
        ShapeMismatchError: Ranks differ, rank < 2, batch axes differ, or the
            inner dimensions do not agree.
        DTypeMismatch: The operands have different dtypes.
    """
    if a.rank != b.rank:
        raise ShapeMismatchError(
            f"matmul operands must share a rank, got {a.shape} and {b.shape}"
        )
    if a.rank < 2:
        raise ShapeMismatchError(f"matmul requires rank >= 2, got {a.shape}")
    if a.shape[:-2] != b.shape[:-2]:
        raise ShapeMismatchError(
            f"matmul operands must share batch axes, got {a.shape} and {b.shape}"
        )
    dtype = result_dtype(a.dtype, b.dtype)

    left = _matrices(a, transpose_a)
    right = _matrices(b, transpose_b)
    if left.shape[-1] != right.shape[-2]:
        raise ShapeMismatchError(
            f"Inner dimensions do not match: {left.shape[-1]} != {right.shape[-2]}"
        )

    product = np.matmul(left, right)
    out = np.ascontiguousarray(product, dtype=dtype.numpy).reshape(-1)
    return Tensor._from_owned_buffer(out, product.shape, dtype)


def matrix_transpose(x: Tensor) -> Tensor:
    """Swap the last two axes of ``x`` (rank >= 2)."""
    if x.rank < 2:
        raise ShapeMismatchError(f"matrix_transpose requires rank >= 2, got {x.shape}")
    transposed = _matrices(x, True)
    out = np.array(transposed, order="C").reshape(-1)
    return Tensor._from_owned_buffer(out, transposed.shape, x.dtype)


__all__ = ["matmul", "matrix_transpose"]
