#!/usr/bin/env python3
"""
Benchmark octahedral normalization: superpermutation lookup vs direct table.

The lookup path reads the representative window from the label string. The
direct path indexes a plain list holding one orbit member per class.

Usage:
    python benchmarks/bench_normalize.py [--extended]

Options:
    --extended    Also time the one-off label table build
"""

import sys
import os
import time
from dataclasses import dataclass

# Ensure local stereopy is used (not installed version)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

CARRIERS = ["C", "F", "Br", "Cl", "I", "S"]

ITERATIONS = 20000
BUILD_ITERATIONS = 20


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    name: str
    time_seconds: float
    iterations: int

    @property
    def time_per_call_us(self) -> float:
        return (self.time_seconds / self.iterations) * 1_000_000


def benchmark_lookup(iterations: int) -> BenchmarkResult:
    """Benchmark normalization through the superpermutation table."""
    from stereopy import Octahedral

    centers = [Octahedral("Co", CARRIERS, order) for order in range(1, 31)]

    # Warmup
    for center in centers:
        center.normalize()

    start = time.perf_counter()
    for _ in range(iterations):
        for center in centers:
            center.normalize()
    end = time.perf_counter()

    return BenchmarkResult("superperm lookup", end - start, iterations * len(centers))


def benchmark_direct_table(iterations: int) -> BenchmarkResult:
    """Benchmark normalization through a direct class -> permutation table."""
    from stereopy.permutation import invapply
    from stereopy.tables import OH_ORBITS

    representatives = [orbit[0] for orbit in OH_ORBITS]

    start = time.perf_counter()
    for _ in range(iterations):
        for order in range(1, 31):
            invapply(CARRIERS, representatives[order - 1])
    end = time.perf_counter()

    return BenchmarkResult("direct table", end - start, iterations * 30)


def benchmark_build(iterations: int) -> BenchmarkResult:
    """Benchmark the class-label table build."""
    from stereopy.tables.builder import build_octahedral_assets

    start = time.perf_counter()
    for _ in range(iterations):
        build_octahedral_assets()
    end = time.perf_counter()

    return BenchmarkResult("label table build", end - start, iterations)


def report(result: BenchmarkResult) -> None:
    print(f"  {result.name:<20} {result.time_seconds:.3f}s "
          f"({result.time_per_call_us:.2f}µs per call)")


def main():
    print("=" * 70)
    print("Octahedral Normalization Benchmark")
    print("=" * 70)
    print(f"\nIterations: {ITERATIONS} x 30 classes")
    print("-" * 70)

    lookup = benchmark_lookup(ITERATIONS)
    direct = benchmark_direct_table(ITERATIONS)
    report(lookup)
    report(direct)
    print(f"\nLookup / direct ratio: {lookup.time_seconds / direct.time_seconds:.2f}x")

    if "--extended" in sys.argv or "-e" in sys.argv:
        print("\n" + "-" * 70)
        report(benchmark_build(BUILD_ITERATIONS))
    else:
        print("\n" + "-" * 70)
        print("TIP: Run with --extended to time the label table build")


if __name__ == "__main__":
    main()
