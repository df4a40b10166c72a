# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import pytest

import gridtensor as gt
from gridtensor.broadcast import Strategy, broadcast_strides, resolve_broadcast


def test_equal_shapes_skip_strides():
    plan = resolve_broadcast([2, 3], [2, 3])
    assert plan.strategy is Strategy.EQUAL
    assert plan.output_shape == [2, 3]
    assert plan.strides_a is None and plan.strides_b is None


def test_all_ones_prefers_equal():
    plan = resolve_broadcast([1, 1], [1, 1])
    assert plan.strategy is Strategy.EQUAL


def test_scalar_operand_on_either_side():
    plan = resolve_broadcast([1], [2, 3])
    assert plan.strategy is Strategy.SCALAR
    assert plan.scalar_operand == 0
    assert plan.output_shape == [2, 3]
    assert plan.strides_a == (0, 0)

    plan = resolve_broadcast([4, 5], [1, 1])
    assert plan.strategy is Strategy.SCALAR
    assert plan.scalar_operand == 1
    assert plan.output_shape == [4, 5]


def test_scalar_with_higher_rank_pads_output():
    plan = resolve_broadcast([1, 1, 1], [3])
    assert plan.strategy is Strategy.SCALAR
    assert plan.output_shape == [1, 1, 3]


def test_compatible_output_is_axis_max():
    pairs = [([3, 4, 5], [3, 1, 5]), ([1, 4], [3, 1]), ([2, 1, 6], [1, 7, 6])]
    for a, b in pairs:
        plan = resolve_broadcast(a, b)
        assert plan.strategy is Strategy.COMPATIBLE
        assert plan.output_shape == [max(x, y) for x, y in zip(a, b)]


def test_last_dims_output_is_higher_rank_shape():
    plan = resolve_broadcast([4, 5], [3, 4, 5])
    assert plan.strategy is Strategy.LAST_DIMS
    assert plan.output_shape == [3, 4, 5]
    assert plan.strides_a == (0, 5, 1)
    assert plan.strides_b == (20, 5, 1)


def test_incompatible_shapes_report_both():
    with pytest.raises(gt.ShapeBroadcastError) as excinfo:
        resolve_broadcast([2, 3], [4, 5])
    assert excinfo.value.shapes == ((2, 3), (4, 5))
    assert "[2, 3]" in str(excinfo.value) and "[4, 5]" in str(excinfo.value)


def test_broadcast_strides_zero_for_size_one_axes():
    assert broadcast_strides([3, 1, 5], 3) == (5, 0, 1)
    assert broadcast_strides([5], 3) == (0, 0, 1)
    assert broadcast_strides([2, 3, 4], 3) == (12, 4, 1)


def test_scalar_broadcasting_addition():
    a = gt.tensor([[1.0, 2.0], [3.0, 4.0]])
    b = gt.tensor(1.0)
    c = a + b
    expected = np.array([[2.0, 3.0], [4.0, 5.0]])
    np.testing.assert_allclose(c.numpy(), expected)


def test_compatible_broadcast_add():
    x = gt.ones([3, 4, 5])
    y = gt.ones([3, 1, 5])
    z = gt.add(x, y)
    assert z.shape == [3, 4, 5]
    assert z.dtype == "float32"
    np.testing.assert_array_equal(z.numpy(), np.full((3, 4, 5), 2.0, dtype=np.float32))


def test_multi_dimensional_broadcasting():
    a = gt.from_numpy(np.arange(6, dtype=np.float32).reshape(2, 1, 3))
    b = gt.from_numpy(np.arange(4, dtype=np.float32).reshape(1, 4, 1) * 10)
    c = a + b
    np.testing.assert_allclose(c.numpy(), a.numpy() + b.numpy())


def test_last_dims_preserves_operand_order():
    high = gt.tensor([[10, 20, 30], [40, 50, 60]])
    low = gt.tensor([1, 2, 3])
    np.testing.assert_array_equal((low - high).numpy(), [[-9, -18, -27], [-39, -48, -57]])
    np.testing.assert_array_equal((high - low).numpy(), [[9, 18, 27], [39, 48, 57]])
    np.testing.assert_array_equal((high / low).numpy(), [[10, 10, 10], [40, 25, 20]])
    np.testing.assert_array_equal((low / high).numpy(), [[0, 0, 0], [0, 0, 0]])


def test_broadcast_incompatible_shapes_error():
    a = gt.tensor([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    b = gt.tensor([1.0, 2.0])
    with pytest.raises(ValueError):
        _ = a + b


def test_add_incompatible_reports_shapes():
    with pytest.raises(gt.ShapeBroadcastError) as excinfo:
        gt.add(gt.zeros([2, 3]), gt.zeros([4, 5]))
    assert excinfo.value.shapes == ((2, 3), (4, 5))
