# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import pytest

import gridtensor as gt


def test_reshape_copies_buffer():
    x = gt.tensor([[1, 2, 3], [4, 5, 6]])
    y = x.reshape(3, 2)
    assert y.shape == [3, 2]
    np.testing.assert_array_equal(y.numpy(), [[1, 2], [3, 4], [5, 6]])
    assert not np.shares_memory(x.buffer, y.buffer)


def test_reshape_infers_one_dimension():
    x = gt.ones([2, 3, 4])
    assert gt.reshape(x, -1, 4).shape == [6, 4]
    assert gt.reshape(x, [2, -1]).shape == [2, 12]


def test_reshape_errors():
    x = gt.ones([2, 3])
    with pytest.raises(gt.InvalidShapeError):
        x.reshape(4, 2)
    with pytest.raises(gt.InvalidShapeError):
        x.reshape(-1, -1)
    with pytest.raises(gt.InvalidShapeError):
        x.reshape(4, -1)


def test_cast_truncates_floats():
    x = gt.tensor([1.7, -1.7, 2.0])
    result = x.cast("int32")
    assert result.dtype == "int32"
    np.testing.assert_array_equal(result.numpy(), [1, -1, 2])
    assert x.astype("float64").dtype == "float64"


def test_cast_rejects_non_finite_to_int():
    with pytest.raises(gt.InvalidArgument):
        gt.cast(gt.tensor([1.0, float("nan")]), "int64")
    with pytest.raises(gt.UnsupportedDType):
        gt.cast(gt.tensor([1.0]), "string")


def test_expand_dims_and_squeeze():
    x = gt.ones([2, 3])
    assert x.expand_dims(0).shape == [1, 2, 3]
    assert x.expand_dims(-1).shape == [2, 3, 1]
    assert x.expand_dims(1).shape == [2, 1, 3]
    with pytest.raises(gt.InvalidAxis):
        x.expand_dims(4)

    y = gt.ones([1, 3, 1])
    assert y.squeeze().shape == [3]
    assert y.squeeze(0).shape == [3, 1]
    assert gt.ones([1, 1]).squeeze().shape == [1]
    with pytest.raises(gt.InvalidArgument):
        y.squeeze(1)


def test_concat():
    a = gt.tensor([[1, 2], [3, 4]])
    b = gt.tensor([[5, 6]])
    np.testing.assert_array_equal(gt.concat([a, b], axis=0).numpy(), [[1, 2], [3, 4], [5, 6]])
    c = gt.tensor([[7], [8]])
    np.testing.assert_array_equal(gt.concat([a, c]).numpy(), [[1, 2, 7], [3, 4, 8]])


def test_concat_errors():
    a = gt.tensor([[1, 2], [3, 4]])
    with pytest.raises(gt.ShapeMismatchError):
        gt.concat([a, gt.tensor([[5, 6, 7]])], axis=0)
    with pytest.raises(gt.ShapeMismatchError):
        gt.concat([a, gt.tensor([5, 6])])
    with pytest.raises(gt.DTypeMismatch):
        gt.concat([a, gt.tensor([[5.0, 6.0]])], axis=0)
    with pytest.raises(gt.InvalidArgument):
        gt.concat([])


def test_slice():
    x = gt.from_numpy(np.arange(12, dtype=np.int32).reshape(3, 4))
    result = gt.slice(x, [1, 1], [3, 3])
    np.testing.assert_array_equal(result.numpy(), [[5, 6], [9, 10]])
    with pytest.raises(gt.InvalidArgument):
        gt.slice(x, [0, 2], [3, 2])
    with pytest.raises(gt.InvalidArgument):
        gt.slice(x, [0], [3])
    with pytest.raises(gt.InvalidArgument):
        gt.slice(x, [0, 0], [4, 4])


def test_pad():
    x = gt.tensor([[1, 2], [3, 4]])
    result = gt.pad(x, [[1, 0], [0, 2]], value=9)
    np.testing.assert_array_equal(
        result.numpy(), [[9, 9, 9, 9], [1, 2, 9, 9], [3, 4, 9, 9]]
    )
    tensor_paddings = gt.tensor([[0, 1], [1, 0]])
    assert gt.pad(x, tensor_paddings).shape == [3, 3]
    with pytest.raises(gt.InvalidArgument):
        gt.pad(x, [[1, 1]])
    with pytest.raises(gt.InvalidArgument):
        gt.pad(x, [[-1, 0], [0, 0]])


def test_one_hot():
    indices = gt.tensor([0, 2, 5])
    result = gt.one_hot(indices, 3)
    assert result.dtype == "float32"
    np.testing.assert_array_equal(result.numpy(), [[1, 0, 0], [0, 0, 1], [0, 0, 0]])

    ints = gt.one_hot(indices, 3, on_value=5, off_value=-1)
    assert ints.dtype == "int32"
    np.testing.assert_array_equal(ints.numpy(), [[5, -1, -1], [-1, -1, 5], [-1, -1, -1]])

    first = gt.one_hot(gt.tensor([1, 0]), 2, axis=0)
    np.testing.assert_array_equal(first.numpy(), [[0, 1], [1, 0]])


def test_one_hot_errors():
    with pytest.raises(gt.UnsupportedDType):
        gt.one_hot(gt.tensor([0.0, 1.0]), 2)
    with pytest.raises(gt.InvalidArgument):
        gt.one_hot(gt.tensor([0, 1]), 0)


def test_fill_values_must_fit_dtype():
    x = gt.tensor([1, 2], dtype="uint8")
    with pytest.raises(gt.InvalidArgument):
        gt.pad(x, [[1, 1]], value=-1)
    with pytest.raises(gt.InvalidArgument):
        gt.one_hot(gt.tensor([0, 1]), 2, on_value=256, dtype="uint8")
