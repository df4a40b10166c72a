# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import pytest

import gridtensor as gt


def test_reduce_sum_last_axis():
    x = gt.tensor([[1, 2, 3], [4, 5, 6]])
    result = gt.reduce_sum(x, axis=[-1])
    assert result.shape == [2]
    assert result.dtype == "int32"
    np.testing.assert_array_equal(result.numpy(), [6, 15])


def test_reduce_all_axes():
    x = gt.tensor([[1, 2, 3], [4, 5, 6]])
    assert gt.reduce_sum(x).shape == [1]
    assert gt.reduce_sum(x).item() == 21
    assert gt.reduce_sum(x, axis=[]).item() == 21
    kept = gt.reduce_sum(x, keepdims=True)
    assert kept.shape == [1, 1]
    assert kept.item() == 21


def test_keepdims_shapes():
    x = gt.ones([2, 3, 4])
    assert x.sum(axis=1, keepdims=True).shape == [2, 1, 4]
    assert x.sum(axis=[0, 2]).shape == [3]
    assert x.sum(axis=[0, 2], keepdims=True).shape == [1, 3, 1]


def test_reductions_match_numpy():
    data = np.arange(24, dtype=np.float64).reshape(2, 3, 4) - 7.5
    x = gt.from_numpy(data)
    for axis in [0, 1, 2, (0, 2), -1]:
        np.testing.assert_allclose(gt.reduce_max(x, list(np.atleast_1d(axis))).numpy(), data.max(axis=axis))
        np.testing.assert_allclose(gt.reduce_min(x, list(np.atleast_1d(axis))).numpy(), data.min(axis=axis))
        np.testing.assert_allclose(gt.reduce_sum(x, list(np.atleast_1d(axis))).numpy(), data.sum(axis=axis))
        np.testing.assert_allclose(gt.reduce_mean(x, list(np.atleast_1d(axis))).numpy(), data.mean(axis=axis))
        np.testing.assert_allclose(gt.reduce_std(x, list(np.atleast_1d(axis))).numpy(), data.std(axis=axis))


def test_reduce_prod():
    x = gt.tensor([[1, 2, 3], [4, 5, 6]], dtype="int64")
    np.testing.assert_array_equal(gt.reduce_prod(x, 0).numpy(), [4, 10, 18])
    assert x.prod().item() == 720


def test_variance_of_flat_tensor():
    x = gt.tensor([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    result = gt.variance(x)
    assert result.shape == [1]
    assert result.dtype == "float32"
    assert result.item() == pytest.approx(2.9166667, rel=1e-6)
    assert gt.mean(x).item() == pytest.approx(3.5)


def test_integer_mean_and_variance_truncate():
    x = gt.tensor([1, 2, 4])
    assert gt.mean(x).item() == 2
    assert gt.variance(x).item() == 1
    negative = gt.tensor([-1, -2, -4])
    assert gt.mean(negative).item() == -2
    assert gt.mean(x, dtype="float64").item() == pytest.approx(7 / 3)


def test_std_is_never_nan():
    x = gt.fill([5], 0.1, dtype="float32")
    assert not np.isnan(gt.reduce_std(x).item())


def test_argmax_and_argmin():
    x = gt.tensor([[1, 9, 3], [7, 2, 7]])
    np.testing.assert_array_equal(gt.argmax(x, 1).numpy(), [1, 0])
    np.testing.assert_array_equal(gt.argmin(x, 1).numpy(), [0, 1])
    np.testing.assert_array_equal(x.argmax(0).numpy(), [1, 0, 1])
    assert gt.argmax(x, 1, dtype="int64").dtype == "int64"
    with pytest.raises(gt.UnsupportedDType):
        gt.argmax(x, 1, dtype="float32")


def test_reduce_local_argmax():
    x = gt.tensor([[1, 9], [7, 2]])
    result = gt.reduce_local_argmax(x)
    assert result.dtype == "int32"
    assert result.item() == 1


def test_plain_callable_accumulators():
    x = gt.tensor([[3, 1, 2], [6, 5, 4]])
    np.testing.assert_array_equal(gt.reduce(x, [-1], False, max, "int32").numpy(), [3, 6])
    np.testing.assert_array_equal(gt.reduce(x, [0], True, sum, "int32").numpy(), [[9, 6, 6]])


def test_plain_accumulator_matches_vectorized_order():
    data = np.arange(24, dtype=np.int64).reshape(2, 3, 4)
    x = gt.from_numpy(data)
    first = gt.reduce(x, [0, 2], False, lambda values: values[0], "int64")
    np.testing.assert_array_equal(first.numpy(), [0, 4, 8])


def test_invalid_axes():
    x = gt.ones([2, 3])
    with pytest.raises(gt.InvalidAxis):
        gt.reduce_sum(x, 2)
    with pytest.raises(gt.InvalidAxis):
        gt.reduce_sum(x, [0, 0])
    with pytest.raises(IndexError):
        gt.reduce_mean(x, -3)
