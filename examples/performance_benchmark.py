# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Performance benchmark for gridtensor.

This script times a broadcast addition followed by a reduction and compares
it against the same computation written directly in NumPy.
"""

from __future__ import annotations

import timeit


def _benchmark(lib_name: str, setup: str, stmt: str, number: int = 10):
    """Utility helper to run a benchmark with ``timeit``.

    Args:
        lib_name: Name of the library being benchmarked (for display only).
        setup: Setup string executed once before timing.
        stmt: Statement string to be timed.
        number: Number of executions.

    Returns:
        float | None: Execution time in seconds or ``None`` if the benchmark
        cannot be executed.
    """

    try:
        return timeit.timeit(stmt, setup=setup, number=number)
    except Exception as exc:  # pragma: no cover - best effort only
        print(f"Skipping {lib_name} benchmark: {exc}")
        return None


def main():  # pragma: no cover - example script
    size = 256

    setup_gt = (
        "import gridtensor as gt\n"
        f"a=gt.randn({size},{size},{size // 4})\n"
        f"b=gt.randn({size},1,{size // 4})"
    )
    stmt_gt = "(a + b).sum(axis=[0, 2]).numpy()"
    gt_time = _benchmark("gridtensor", setup_gt, stmt_gt)

    setup_np = (
        "import numpy as np\n"
        f"a=np.random.standard_normal(({size},{size},{size // 4})).astype(np.float32)\n"
        f"b=np.random.standard_normal(({size},1,{size // 4})).astype(np.float32)"
    )
    stmt_np = "(a + b).sum(axis=(0, 2))"
    np_time = _benchmark("NumPy", setup_np, stmt_np)

    print(f"Broadcast add + reduce benchmark ({size}x{size}x{size // 4})")
    if gt_time is not None:
        print(f"gridtensor: {gt_time:.4f}s")
    if np_time is not None:
        print(f"NumPy:      {np_time:.4f}s")


if __name__ == "__main__":  # pragma: no cover - example script
    main()
