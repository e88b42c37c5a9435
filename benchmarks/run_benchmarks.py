#!/usr/bin/env python3
"""
noisegraph Benchmark Suite
==========================

Throughput of leaf generators, Fbm and composite graphs, with and without a
Cache on the shared subgraph.

Usage:
    python run_benchmarks.py [--output results.json] [--quick]

Author: noisegraph contributors
License: MIT
"""

import argparse
import json
import time
import sys
from pathlib import Path
from typing import Callable, List, Tuple
from dataclasses import dataclass, asdict

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

import noisegraph
from noisegraph import (
    Abs, Add, Cache, Fbm, NoiseFn, Perlin, ScaleBias, Select, Value,
)


@dataclass
class BenchmarkResult:
    """Single benchmark result"""
    name: str
    dimension: int
    points: int
    total_ms: float
    us_per_point: float
    points_per_second: float
    checksum: float
    notes: str = ""


def benchmark_graph(name: str, graph: NoiseFn, points: np.ndarray, notes: str = "") -> BenchmarkResult:
    """Evaluate ``graph`` at every point and time it"""
    start = time.perf_counter()
    checksum = 0.0
    for point in points:
        checksum += graph.evaluate(point)
    elapsed = time.perf_counter() - start

    return BenchmarkResult(
        name=name,
        dimension=points.shape[1],
        points=len(points),
        total_ms=elapsed * 1000,
        us_per_point=elapsed * 1e6 / len(points),
        points_per_second=len(points) / elapsed if elapsed > 0 else float('inf'),
        checksum=checksum,
        notes=notes,
    )


def shared_terrain(cached: bool) -> NoiseFn:
    hills = Fbm().set_seed(1).set_frequency(0.02)
    if cached:
        hills = Cache(hills)
    mountains = ScaleBias(Perlin(2), scale=2.0, bias=0.5)
    return Add(Select(hills, mountains, hills, bounds=(0.2, 1.0)).set_falloff(0.1), Abs(hills))


def generate_graphs() -> List[Tuple[str, Callable[[], NoiseFn], int, str]]:
    """Benchmark cases as (name, graph builder, dimension, notes)"""
    return [
        ("perlin_2d", lambda: Perlin(0), 2, "Single leaf"),
        ("perlin_3d", lambda: Perlin(0), 3, "Single leaf"),
        ("perlin_4d", lambda: Perlin(0), 4, "Single leaf"),
        ("value_2d", lambda: Value(0), 2, "Single leaf"),
        ("value_3d", lambda: Value(0), 3, "Single leaf"),
        ("fbm_2d", lambda: Fbm(), 2, "6 Perlin octaves"),
        ("fbm_3d", lambda: Fbm(), 3, "6 Perlin octaves"),
        ("terrain_uncached", lambda: shared_terrain(False), 2, "Fbm shared by three parents"),
        ("terrain_cached", lambda: shared_terrain(True), 2, "Shared Fbm behind a Cache"),
    ]


def run_benchmarks(quick: bool = False) -> List[BenchmarkResult]:
    """Run all benchmarks"""
    cases = generate_graphs()
    n_points = 500 if quick else 5000

    results = []
    print(f"Running {len(cases)} benchmarks over {n_points} points...")
    print("-" * 80)

    for name, build, dimension, notes in cases:
        print(f"Benchmarking: {name}...", end=" ", flush=True)
        points = np.random.RandomState(dimension).uniform(-256.0, 256.0, size=(n_points, dimension))
        result = benchmark_graph(name, build(), points, notes)
        results.append(result)
        print(f"{result.us_per_point:.1f} us/point")

    return results


def print_results_table(results: List[BenchmarkResult]):
    """Print results as formatted table"""
    print("\n" + "=" * 80)
    print("noisegraph Benchmark Results")
    print("=" * 80)
    print(f"noisegraph Version: {noisegraph.__version__}")
    print("-" * 80)

    print(f"{'Name':<20} {'Dim':>4} {'Points':>8} {'Total ms':>10} {'us/pt':>8} {'pts/s':>12}")
    print("-" * 80)

    for r in results:
        print(f"{r.name:<20} {r.dimension:>4} {r.points:>8} "
              f"{r.total_ms:>10.1f} {r.us_per_point:>8.1f} {r.points_per_second:>12.0f}")

    print("-" * 80)

    by_name = {r.name: r for r in results}
    if 'terrain_cached' in by_name and 'terrain_uncached' in by_name:
        cached = by_name['terrain_cached']
        uncached = by_name['terrain_uncached']
        print(f"\nCache speedup on shared terrain: {uncached.total_ms / cached.total_ms:.2f}x")
        if cached.checksum != uncached.checksum:
            print("WARNING: cached and uncached terrain checksums differ")


def main():
    parser = argparse.ArgumentParser(description='noisegraph Benchmark Suite')
    parser.add_argument('--output', '-o', type=str, help='Output JSON file')
    parser.add_argument('--quick', action='store_true', help='Use fewer sample points')
    args = parser.parse_args()

    results = run_benchmarks(quick=args.quick)

    print_results_table(results)

    if args.output:
        output_path = Path(args.output)
        with open(output_path, 'w') as f:
            json.dump([asdict(r) for r in results], f, indent=2)
        print(f"\nResults saved to: {output_path}")


if __name__ == '__main__':
    main()
