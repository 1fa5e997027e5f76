#!/usr/bin/env python3
"""
Benchmark Runner: time power-set generation and set algebra on growing inputs.

This script measures:
1. Power-set generation for n = 0..max_n members
2. Pure union/intersection/difference/symmetric difference on sets of growing size
3. Parsing of nested literals of growing depth

Results are written as JSON for generate_plots.py.
"""

import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List

from setlib.core.algebra import difference, intersection, symmetric_difference, union
from setlib.core.parser import parse
from setlib.core.power_set import power_set
from setlib.core.sets import Set

# Setup logging
logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)
# Power sets above the default threshold warn on every run
logging.getLogger("setlib.core.power_set").setLevel(logging.ERROR)

# Configuration
BENCHMARK_DIR = Path(__file__).parent
RESULTS_DIR = BENCHMARK_DIR / "results"
RESULTS_DIR.mkdir(exist_ok=True)

POWER_SET_MAX_N = 16
ALGEBRA_SIZES = [10, 100, 1000, 5000, 10000, 50000]
PARSE_DEPTHS = [1, 2, 4, 8, 16, 32, 64]
REPEATS = 3


def best_of(fn: Callable[[], Any], repeats: int = REPEATS) -> float:
    """Return the fastest wall-clock time of several runs, in seconds."""
    best = float("inf")
    for _ in range(repeats):
        start = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - start)
    return best


def run_power_set(max_n: int) -> List[Dict[str, Any]]:
    """Time power-set generation for 0..max_n members."""
    results = []
    for n in range(max_n + 1):
        source = Set(range(n))
        seconds = best_of(lambda: power_set(source, config={}), repeats=1 if n > 12 else REPEATS)
        results.append({"n": n, "subsets": 2 ** n, "time_seconds": seconds})
        logger.info(f"power_set n={n:2d}: {seconds:.4f}s")
    return results


def run_algebra(sizes: List[int]) -> List[Dict[str, Any]]:
    """Time the pure operations on half-overlapping sets."""
    operations = {
        "union": union,
        "intersection": intersection,
        "difference": difference,
        "symmetric_difference": symmetric_difference,
    }
    results = []
    for size in sizes:
        a = Set(range(size))
        b = Set(range(size // 2, size + size // 2))
        row: Dict[str, Any] = {"size": size}
        for name, op in operations.items():
            row[name] = best_of(lambda: op(a, b))
        results.append(row)
        logger.info(f"algebra size={size}: " + ", ".join(
            f"{name}={row[name]:.4f}s" for name in operations
        ))
    return results


def nested_literal(depth: int) -> str:
    """Build ``{0, {1, {2, ...}}}`` with the given depth."""
    literal = "{}"
    for level in reversed(range(depth)):
        literal = "{" + f"{level}, {literal}" + "}"
    return literal


def run_parse(depths: List[int]) -> List[Dict[str, Any]]:
    """Time parsing of nested literals."""
    results = []
    for depth in depths:
        literal = nested_literal(depth)
        seconds = best_of(lambda: parse(literal))
        results.append({"depth": depth, "length": len(literal), "time_seconds": seconds})
        logger.info(f"parse depth={depth}: {seconds:.4f}s")
    return results


def main():
    """Run complete benchmark suite."""
    import argparse

    parser = argparse.ArgumentParser(description="Run setlib timing benchmark")
    parser.add_argument(
        "--pilot",
        action="store_true",
        help="Run a short pilot (small power sets and sizes only)"
    )
    parser.add_argument(
        "--phase",
        choices=["power_set", "algebra", "parse", "all"],
        default="all",
        help="Which phase to run (default: all)"
    )
    parser.add_argument(
        "--max-n",
        type=int,
        default=POWER_SET_MAX_N,
        help=f"Largest power-set input (default: {POWER_SET_MAX_N})"
    )
    args = parser.parse_args()

    max_n = min(args.max_n, 10) if args.pilot else args.max_n
    sizes = ALGEBRA_SIZES[:3] if args.pilot else ALGEBRA_SIZES
    depths = PARSE_DEPTHS[:4] if args.pilot else PARSE_DEPTHS

    print("=" * 70)
    print("BENCHMARK: setlib timings")
    print("=" * 70)
    print(f"Results: {RESULTS_DIR}")

    results: Dict[str, Any] = {}
    if args.phase in ["power_set", "all"]:
        results["power_set"] = run_power_set(max_n)
    if args.phase in ["algebra", "all"]:
        results["algebra"] = run_algebra(sizes)
    if args.phase in ["parse", "all"]:
        results["parse"] = run_parse(depths)

    output_file = RESULTS_DIR / "benchmark_results.json"
    output_file.write_text(json.dumps(results, indent=2))

    print("\n" + "=" * 70)
    print("Benchmark Complete!")
    print("=" * 70)
    print(f"\nResults saved to: {output_file}")
    print("\nNext: Run generate_plots.py to render the charts")

    return 0


if __name__ == "__main__":
    import sys
    sys.exit(main())
