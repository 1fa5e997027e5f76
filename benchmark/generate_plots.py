#!/usr/bin/env python3
"""
Generate plots from benchmark results.

Creates:
1. Power-set generation time vs. member count (log scale, with fitted growth rate)
2. Set algebra time vs. set size
3. Parse time vs. nesting depth
"""

import json
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

# Set style
plt.style.use('seaborn-v0_8-darkgrid')

BENCHMARK_DIR = Path(__file__).parent
RESULTS_DIR = BENCHMARK_DIR / "results"
OUTPUT_DIR = BENCHMARK_DIR / "plots"
OUTPUT_DIR.mkdir(exist_ok=True)


def load_results():
    """Load benchmark results."""
    results_file = RESULTS_DIR / "benchmark_results.json"
    if not results_file.exists():
        print(f"Results not found: {results_file}")
        print("Run run_benchmark.py first")
        return None
    return json.loads(results_file.read_text())


def fit_doubling_rate(ns, times):
    """Fit log2(time) = slope * n + intercept and return (slope, intercept).

    A slope near 1.0 means each extra member doubles the generation time.
    """
    ns = np.asarray(ns, dtype=float)
    times = np.asarray(times, dtype=float)
    mask = times > 0
    if mask.sum() < 2:
        return None
    slope, intercept = np.polyfit(ns[mask], np.log2(times[mask]), 1)
    return slope, intercept


def plot_power_set(rows):
    """Plot power-set generation time against member count."""
    ns = [row["n"] for row in rows]
    times = [row["time_seconds"] for row in rows]

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.semilogy(ns, times, 'o-', color='#3498db', linewidth=2, label='Measured')

    fit = fit_doubling_rate(ns, times)
    if fit is not None:
        slope, intercept = fit
        fitted = np.power(2.0, slope * np.asarray(ns, dtype=float) + intercept)
        ax.semilogy(ns, fitted, '--', color='#e74c3c', linewidth=1.5,
                    label=f'Fit: time ∝ 2^({slope:.2f}·n)')

    ax.set_xlabel('Members (n)', fontsize=12, fontweight='bold')
    ax.set_ylabel('Time (seconds, log scale)', fontsize=12, fontweight='bold')
    ax.set_title('Power Set Generation Time', fontsize=14, fontweight='bold')
    ax.legend()
    ax.grid(True, which='both', alpha=0.3)

    plt.tight_layout()
    output_file = OUTPUT_DIR / "power_set_scaling.png"
    plt.savefig(output_file, dpi=300, bbox_inches='tight')
    plt.close()
    print(f"✓ Saved: {output_file}")


def plot_algebra(rows):
    """Plot each pure operation's time against set size."""
    sizes = [row["size"] for row in rows]
    operations = [
        ("union", '#2ecc71'),
        ("intersection", '#3498db'),
        ("difference", '#f39c12'),
        ("symmetric_difference", '#9b59b6'),
    ]

    fig, ax = plt.subplots(figsize=(10, 6))
    for name, color in operations:
        times = [row[name] for row in rows]
        ax.loglog(sizes, times, 'o-', color=color, linewidth=2,
                  label=name.replace('_', ' ').title())

    ax.set_xlabel('Set Size', fontsize=12, fontweight='bold')
    ax.set_ylabel('Time (seconds)', fontsize=12, fontweight='bold')
    ax.set_title('Set Algebra Time vs. Size', fontsize=14, fontweight='bold')
    ax.legend()
    ax.grid(True, which='both', alpha=0.3)

    plt.tight_layout()
    output_file = OUTPUT_DIR / "algebra_scaling.png"
    plt.savefig(output_file, dpi=300, bbox_inches='tight')
    plt.close()
    print(f"✓ Saved: {output_file}")


def plot_parse(rows):
    """Plot parse time against nesting depth."""
    depths = [row["depth"] for row in rows]
    times = [row["time_seconds"] for row in rows]

    fig, ax = plt.subplots(figsize=(10, 6))
    bars = ax.bar([str(d) for d in depths], times, color='#1abc9c', alpha=0.8)

    for bar, value in zip(bars, times):
        height = bar.get_height()
        ax.text(bar.get_x() + bar.get_width() / 2., height,
                f'{value * 1000:.2f}ms',
                ha='center', va='bottom', fontsize=9)

    ax.set_xlabel('Nesting Depth', fontsize=12, fontweight='bold')
    ax.set_ylabel('Time (seconds)', fontsize=12, fontweight='bold')
    ax.set_title('Parse Time vs. Nesting Depth', fontsize=14, fontweight='bold')
    ax.grid(axis='y', alpha=0.3)

    plt.tight_layout()
    output_file = OUTPUT_DIR / "parse_depth.png"
    plt.savefig(output_file, dpi=300, bbox_inches='tight')
    plt.close()
    print(f"✓ Saved: {output_file}")


def main():
    """Generate all plots."""
    print("=" * 70)
    print("Generating Plots")
    print("=" * 70)

    results = load_results()
    if results is None:
        return 1

    if results.get("power_set"):
        plot_power_set(results["power_set"])
        fit = fit_doubling_rate(
            [row["n"] for row in results["power_set"]],
            [row["time_seconds"] for row in results["power_set"]],
        )
        if fit is not None:
            print(f"  Power set doubling rate: {fit[0]:.2f} per member")
    if results.get("algebra"):
        plot_algebra(results["algebra"])
    if results.get("parse"):
        plot_parse(results["parse"])

    print("\n" + "=" * 70)
    print(f"All plots saved to: {OUTPUT_DIR}")
    print("=" * 70)

    return 0


if __name__ == "__main__":
    import sys
    sys.exit(main())
