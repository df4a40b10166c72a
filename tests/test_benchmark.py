# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np

import gridtensor as gt


def test_broadcast_add_benchmark(benchmark):
    a = gt.randn(64, 128, 32)
    b = gt.randn(64, 1, 32)
    result = benchmark(gt.add, a, b)
    assert result.shape == [64, 128, 32]


def test_reduce_sum_benchmark(benchmark):
    x = gt.from_numpy(np.arange(4096, dtype=np.float64).reshape(16, 16, 16))
    result = benchmark(gt.reduce_sum, x, [0, 2])
    np.testing.assert_allclose(result.numpy(), x.numpy().sum(axis=(0, 2)))


def test_matmul_benchmark(benchmark):
    a = gt.randn(128, 128)
    b = gt.randn(128, 128)
    result = benchmark(a.matmul, b)
    assert result.shape == [128, 128]
