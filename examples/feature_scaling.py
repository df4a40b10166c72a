# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Column standardisation example for gridtensor.

Features on very different scales are rescaled to zero mean and unit
variance. The per-column statistics keep their reduced axis, so the
``[n, 3]`` data and the ``[1, 3]`` statistics combine through same-rank
broadcasting, while the scale vector uses trailing-axis broadcasting.
"""

from __future__ import annotations

import gridtensor as gt


def standardize(x: gt.Tensor) -> gt.Tensor:
    """Scale every column of ``x`` to zero mean and unit variance."""
    mean = x.mean(axis=0, keepdims=True)
    std = x.std(axis=0, keepdims=True)
    return (x - mean) / std


def run_demo(verbose: bool = True):
    """Standardise a synthetic dataset.

    Parameters
    ----------
    verbose:
        If ``True``, prints the column statistics before and after scaling.

    Returns
    -------
    tuple[list[float], list[float]]
        Column means and standard deviations of the scaled data.
    """

    scale = gt.tensor([1.0, 10.0, 100.0], dtype="float64")
    data = gt.uniform([200, 3], minval=-5.0, maxval=5.0, dtype="float64", seed=0) * scale
    scaled = standardize(data)

    means = scaled.mean(axis=0).tolist()
    stds = scaled.std(axis=0).tolist()
    if verbose:
        print("Raw std:   ", [round(v, 3) for v in data.std(axis=0).tolist()])
        print("Scaled mean:", [round(v, 6) for v in means])
        print("Scaled std: ", [round(v, 6) for v in stds])
    return means, stds


def main() -> None:  # pragma: no cover - example script
    run_demo(verbose=True)


if __name__ == "__main__":  # pragma: no cover - example script
    main()
