"""Benchmark vector algebra kernels."""

import time
from typing import Dict

import numpy as np
import torch

from spgkit.algebra import combine, inner, norm2, update


def benchmark_algebra(
    size: int,
    n_repeats: int = 1000,
    backend: str = "numpy",
) -> Dict[str, float]:
    """Benchmark the kernels used in every SPG iteration.

    Args:
        size: Number of elements per vector.
        n_repeats: Number of timed calls per kernel.
        backend: 'numpy' or 'torch'.

    Returns:
        Dictionary with timing results.
    """
    if backend == "torch":
        x = torch.randn(size, dtype=torch.float64)
        y = torch.randn(size, dtype=torch.float64)
        dst = torch.empty_like(x)
    else:
        rng = np.random.default_rng(0)
        x = rng.standard_normal(size)
        y = rng.standard_normal(size)
        dst = np.empty_like(x)

    kernels = {
        "combine": lambda: combine(dst, 0.5, x, -2.0, y),
        "update": lambda: update(dst, 0.5, x),
        "inner": lambda: inner(x, y),
        "norm2": lambda: norm2(x),
    }

    results: Dict[str, float] = {"size": size}
    for name, kernel in kernels.items():
        # Warmup
        for _ in range(10):
            kernel()
        start = time.perf_counter()
        for _ in range(n_repeats):
            kernel()
        end = time.perf_counter()
        results[f"{name}_time_per_call_sec"] = (end - start) / n_repeats
    return results


if __name__ == "__main__":
    print("Benchmarking vector algebra...")

    for backend in ("numpy", "torch"):
        results = benchmark_algebra(size=100_000, backend=backend)
        print(f"{backend} (100000 elements):")
        for key, value in results.items():
            if key.endswith("_sec"):
                print(f"  {key[:-len('_time_per_call_sec')]}: {value*1e6:.1f} us")
