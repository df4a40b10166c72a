# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import pytest

import gridtensor as gt


def test_equal_over_trailing_dims():
    x = gt.tensor([[1, 2], [3, 4]])
    y = gt.tensor([1, 4])
    result = gt.equal(x, y)
    assert result.dtype == "int32"
    assert result.shape == [2, 2]
    np.testing.assert_array_equal(result.numpy(), [[1, 0], [0, 1]])


def test_comparisons_return_operand_dtype():
    a = gt.tensor([1.0, 2.0, 3.0])
    b = gt.tensor([2.0, 2.0, 2.0])
    cases = {
        gt.less: [1, 0, 0],
        gt.less_equal: [1, 1, 0],
        gt.greater: [0, 0, 1],
        gt.greater_equal: [0, 1, 1],
        gt.equal: [0, 1, 0],
        gt.not_equal: [1, 0, 1],
    }
    for op, expected in cases.items():
        result = op(a, b)
        assert result.dtype == "float32"
        np.testing.assert_array_equal(result.numpy(), np.array(expected, dtype=np.float32))


def test_comparison_dtype_override():
    a = gt.tensor([1.5, 2.5], dtype="float64")
    result = gt.greater(a, 2.0, dtype="uint8")
    assert result.dtype == "uint8"
    np.testing.assert_array_equal(result.numpy(), [0, 1])


def test_operator_dunders_return_tensors():
    x = gt.tensor([1, 2, 3])
    np.testing.assert_array_equal((x == 2).numpy(), [0, 1, 0])
    np.testing.assert_array_equal((x != 2).numpy(), [1, 0, 1])
    np.testing.assert_array_equal((x < 2).numpy(), [1, 0, 0])
    np.testing.assert_array_equal((x >= 2).numpy(), [0, 1, 1])


def test_reversed_scalar_comparison():
    x = gt.tensor([1, 2, 3])
    np.testing.assert_array_equal(gt.less(2, x).numpy(), [0, 0, 1])
    np.testing.assert_array_equal(gt.greater(2, x).numpy(), [1, 0, 0])


def test_uint8_with_large_int_scalar():
    x = gt.tensor([1, 255], dtype="uint8")
    result = gt.less(x, 300)
    assert result.dtype == "uint8"
    np.testing.assert_array_equal(result.numpy(), [1, 1])


def test_int_tensor_with_float_scalar_rejected():
    with pytest.raises(gt.IncompatibleDType):
        gt.equal(gt.tensor([1, 2]), 1.5)


def test_comparison_dtype_mismatch():
    with pytest.raises(gt.DTypeMismatch):
        gt.equal(gt.tensor([1, 2]), gt.tensor([1.0, 2.0]))


def test_allclose_and_array_equal():
    a = gt.tensor([1.0, 2.0, 3.0])
    b = gt.tensor([1.0, 2.0 + 1e-6, 3.0])
    assert gt.allclose(a, b)
    assert not gt.allclose(a, gt.tensor([1.0, 2.1, 3.0]))
    assert a.allclose(b)
    assert gt.array_equal(a, gt.tensor([1.0, 2.0, 3.0]))
    assert not gt.array_equal(a, b)
    assert not gt.array_equal(a, gt.tensor([1.0, 2.0, 3.0], dtype="float64"))
    assert not gt.array_equal(gt.tensor([1, 2]), gt.tensor([[1, 2]]))


def test_unsupported_operands_fall_back_to_identity():
    x = gt.tensor([1, 2])
    assert (x == None) is False  # noqa: E711
    assert (x != "a") is True
    with pytest.raises(TypeError):
        x < object()
