# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import examples.feature_scaling as fs


def test_feature_scaling_standardizes_columns():
    means, stds = fs.run_demo(verbose=False)
    assert all(abs(m) < 1e-9 for m in means)
    assert all(abs(s - 1.0) < 1e-9 for s in stds)
