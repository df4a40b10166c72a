# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import pytest

import gridtensor as gt


def test_basic_arithmetic():
    a = gt.tensor([1.0, 2.0, 3.0])
    b = gt.tensor([4.0, 5.0, 6.0])
    np.testing.assert_allclose((a + b).numpy(), [5.0, 7.0, 9.0])
    np.testing.assert_allclose((a - b).numpy(), [-3.0, -3.0, -3.0])
    np.testing.assert_allclose((a * b).numpy(), [4.0, 10.0, 18.0])
    np.testing.assert_allclose((a / b).numpy(), [0.25, 0.4, 0.5])
    assert (a + b).dtype == "float32"


def test_add_is_commutative_with_broadcasting():
    a = gt.from_numpy(np.arange(6, dtype=np.float64).reshape(2, 3))
    b = gt.tensor([10.0, 20.0, 30.0], dtype="float64")
    np.testing.assert_array_equal((a + b).numpy(), (b + a).numpy())
    np.testing.assert_array_equal((a * b).numpy(), (b * a).numpy())


def test_integer_division_truncates_toward_zero():
    a = gt.tensor([-7, 7, -7, 7, 6])
    b = gt.tensor([2, 2, -2, -2, 3])
    result = a / b
    assert result.dtype == "int32"
    np.testing.assert_array_equal(result.numpy(), [-3, 3, 3, -3, 2])


def test_integer_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        gt.tensor([1, 2]) / gt.tensor([0, 1])
    with pytest.raises(ZeroDivisionError):
        gt.divide_scalar(gt.tensor([4, 8], dtype="int64"), 0)


def test_float_division_by_zero_follows_ieee():
    result = gt.tensor([1.0, -1.0, 0.0]) / gt.tensor([0.0, 0.0, 0.0])
    values = result.numpy()
    assert values[0] == np.inf
    assert values[1] == -np.inf
    assert np.isnan(values[2])


def test_scalar_operands_on_either_side():
    x = gt.tensor([1, 2, 3])
    np.testing.assert_array_equal((x + 1).numpy(), [2, 3, 4])
    np.testing.assert_array_equal((10 - x).numpy(), [9, 8, 7])
    np.testing.assert_array_equal((x - 10).numpy(), [-9, -8, -7])
    np.testing.assert_array_equal((2 * x).numpy(), [2, 4, 6])
    np.testing.assert_array_equal((7 / x).numpy(), [7, 3, 2])
    f = gt.tensor([2.0, 4.0])
    np.testing.assert_allclose((1 / f).numpy(), [0.5, 0.25])


def test_scalar_helpers_match_broadcast_tensor():
    x = gt.tensor([[1.5, 2.5], [3.5, 4.5]])
    by_scalar = gt.add_scalar(x, 2.0)
    by_tensor = gt.add(x, gt.tensor(2.0))
    assert by_scalar.shape == by_tensor.shape
    np.testing.assert_array_equal(by_scalar.numpy(), by_tensor.numpy())
    np.testing.assert_allclose(gt.subtract_scalar(x, 0.5).numpy(), [[1.0, 2.0], [3.0, 4.0]])
    np.testing.assert_allclose(gt.multiply_scalar(x, 2).numpy(), [[3.0, 5.0], [7.0, 9.0]])
    np.testing.assert_allclose(gt.divide_scalar(x, 0.5).numpy(), [[3.0, 5.0], [7.0, 9.0]])


def test_uint8_with_int_scalar_promotes_to_int32():
    x = gt.tensor([250, 10], dtype="uint8")
    result = x + 10
    assert result.dtype == "int32"
    np.testing.assert_array_equal(result.numpy(), [260, 20])


def test_float_tensor_with_int_scalar_keeps_dtype():
    x = gt.tensor([1.0, 2.0], dtype="float64")
    result = x * 3
    assert result.dtype == "float64"
    np.testing.assert_allclose(result.numpy(), [3.0, 6.0])


def test_int_tensor_with_float_scalar_is_incompatible():
    with pytest.raises(gt.IncompatibleDType):
        gt.tensor([1, 2]) + 1.5
    with pytest.raises(TypeError):
        gt.tensor([1, 2], dtype="uint8") * 0.5


def test_mixed_tensor_dtypes_raise():
    with pytest.raises(gt.DTypeMismatch):
        gt.tensor([1.0, 2.0]) + gt.tensor([1, 2])


def test_boolean_operands_rejected():
    with pytest.raises(TypeError):
        gt.tensor([1, 2]) + True


def test_numpy_scalar_operands():
    x = gt.tensor([1.0, 2.0])
    np.testing.assert_allclose((x + np.float32(0.5)).numpy(), [1.5, 2.5])
    np.testing.assert_allclose((np.float64(3.0) - x).numpy(), [2.0, 1.0])


def test_negation_keeps_dtype():
    x = gt.tensor([1, -2, 3], dtype="int64")
    result = -x
    assert result.dtype == "int64"
    np.testing.assert_array_equal(result.numpy(), [-1, 2, -3])


def test_results_do_not_alias_inputs():
    x = gt.tensor([1.0, 2.0])
    y = x + 0
    assert not np.shares_memory(x.buffer, y.buffer)
    assert not y.buffer.flags.writeable


def test_custom_scalar_kernel_matches_vectorized():
    a = gt.from_numpy(np.arange(6, dtype=np.int32).reshape(2, 3))
    b = gt.tensor([1, 2, 3])
    slow = gt.elementwise_binary(a, b, lambda x, y: x * 10 + y, "int32")
    np.testing.assert_array_equal(slow.numpy(), a.numpy() * 10 + b.numpy())
    assert slow.shape == [2, 3]


def test_scalar_out_of_range_for_result_dtype():
    with pytest.raises(gt.InvalidArgument, match="int32"):
        gt.tensor([1, 2]) + 2**40
    with pytest.raises(gt.InvalidArgument):
        gt.multiply_scalar(gt.tensor([1], dtype="int64"), 2**70)
    result = gt.tensor([1, 2], dtype="int64") + 2**40
    np.testing.assert_array_equal(result.numpy(), [2**40 + 1, 2**40 + 2])
