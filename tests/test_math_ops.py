# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import pytest

import gridtensor as gt


def test_transcendental_functions_match_numpy():
    data = np.array([0.1, 0.5, 0.9], dtype=np.float64)
    x = gt.from_numpy(data)
    cases = {
        gt.exp: np.exp,
        gt.expm1: np.expm1,
        gt.sin: np.sin,
        gt.cos: np.cos,
        gt.tan: np.tan,
        gt.acos: np.arccos,
        gt.asin: np.arcsin,
        gt.atan: np.arctan,
        gt.sinh: np.sinh,
        gt.cosh: np.cosh,
        gt.tanh: np.tanh,
        gt.log: np.log,
        gt.log1p: np.log1p,
        gt.log2: np.log2,
        gt.sqrt: np.sqrt,
    }
    for op, reference in cases.items():
        result = op(x)
        assert result.dtype == "float64"
        np.testing.assert_allclose(result.numpy(), reference(data), rtol=1e-12)


def test_integer_input_gives_float32():
    x = gt.tensor([1, 4, 9])
    result = gt.sqrt(x)
    assert result.dtype == "float32"
    np.testing.assert_allclose(result.numpy(), [1.0, 2.0, 3.0])


def test_activation_style_functions():
    data = np.array([-3.0, 0.0, 2.5], dtype=np.float64)
    x = gt.from_numpy(data)
    softplus = np.log1p(np.exp(data))
    np.testing.assert_allclose(gt.sigmoid(x).numpy(), 1 / (1 + np.exp(-data)))
    np.testing.assert_allclose(gt.softplus(x).numpy(), softplus)
    np.testing.assert_allclose(gt.softminus(x).numpy(), data - softplus)
    np.testing.assert_allclose(gt.sech(x).numpy(), 1 / np.cosh(data))


def test_softplus_large_input_does_not_overflow():
    x = gt.tensor([1000.0], dtype="float64")
    assert gt.softplus(x).item() == pytest.approx(1000.0)


def test_dtype_preserving_functions():
    x = gt.tensor([-2, 0, 3])
    for op, expected in [(gt.abs, [2, 0, 3]), (gt.square, [4, 0, 9]), (gt.sign, [-1, 0, 1])]:
        result = op(x)
        assert result.dtype == "int32"
        np.testing.assert_array_equal(result.numpy(), expected)


def test_log_of_non_positive_values():
    result = gt.log(gt.tensor([0.0, -1.0])).numpy()
    assert result[0] == -np.inf
    assert np.isnan(result[1])


def test_pow_with_scalar_and_tensor():
    x = gt.tensor([1.0, 2.0, 3.0])
    np.testing.assert_allclose((x**2).numpy(), [1.0, 4.0, 9.0])
    np.testing.assert_allclose(gt.pow(x, 0.5).numpy(), np.sqrt([1.0, 2.0, 3.0]), rtol=1e-6)
    exponent = gt.tensor([2.0, 1.0, 0.0])
    np.testing.assert_allclose(x.pow(exponent).numpy(), [1.0, 2.0, 1.0])
    ints = gt.tensor([2, 3])
    result = ints**2
    assert result.dtype == "float32"
    np.testing.assert_allclose(result.numpy(), [4.0, 9.0])


def test_pow_requires_matching_dtypes():
    with pytest.raises(gt.DTypeMismatch):
        gt.pow(gt.tensor([1.0]), gt.tensor([2]))


def test_binary_math_broadcasts():
    x = gt.tensor([[1.0, 2.0], [3.0, 4.0]])
    y = gt.tensor([1.0, 1.0])
    np.testing.assert_allclose(gt.square_difference(x, y).numpy(), [[0.0, 1.0], [4.0, 9.0]])


def test_xlogy_and_xlog1py_are_zero_for_zero_x():
    x = gt.tensor([0.0, 2.0], dtype="float64")
    y = gt.tensor([0.0, np.e], dtype="float64")
    np.testing.assert_allclose(gt.xlogy(x, y).numpy(), [0.0, 2.0])
    z = gt.tensor([-1.0, np.e - 1], dtype="float64")
    np.testing.assert_allclose(gt.xlog1py(x, z).numpy(), [0.0, 2.0])


def test_maximum_and_minimum():
    a = gt.tensor([1, 5, 3])
    b = gt.tensor([4, 2, 3])
    np.testing.assert_array_equal(gt.maximum(a, b).numpy(), [4, 5, 3])
    np.testing.assert_array_equal(gt.minimum(a, b).numpy(), [1, 2, 3])
    np.testing.assert_array_equal(a.maximum(2).numpy(), [2, 5, 3])


def test_apply_runs_python_callable():
    x = gt.tensor([[1, 2], [3, 4]])
    doubled = gt.apply(x, lambda v: v * 2)
    assert doubled.dtype == "int32"
    np.testing.assert_array_equal(doubled.numpy(), [[2, 4], [6, 8]])
    halves = gt.apply(x, lambda v: v / 2, dtype="float64")
    np.testing.assert_allclose(halves.numpy(), [[0.5, 1.0], [1.5, 2.0]])
