#!/usr/bin/env python3
"""
Benchmark report: profile every algorithm and contrast the two merge sorts.

Run:
    sortkit-bench
    python -m sortkit.benchmark

For each algorithm: time it at the configured sizes, fit a Big O curve,
measure the implementing routines with lizard/radon and verify one sorted
output. Then time merge-in-place against merge-sublist head to head.
"""

import sys

from sortkit.config import BENCHMARK_SIZES
from sortkit.core.metrics_engine import compare_timings, profile_algorithm
from sortkit.models.types import Algorithm, AlgorithmProfile


def format_row(profile: AlgorithmProfile) -> str:
    big_o = profile.big_o
    status = "ok" if profile.verified else "FAIL"
    return (
        f"│ {profile.algorithm.value:16} │ {big_o['label']:11} │ {big_o['slope']:>5} │"
        f" {profile.static_metrics['cyclomatic_complexity']:>3} │"
        f" {profile.stats.comparisons:>11} │ {status:6} │"
    )


def run_benchmarks() -> tuple[list[AlgorithmProfile], dict]:
    profiles = [profile_algorithm(algorithm) for algorithm in Algorithm]
    merge_contrast = compare_timings(Algorithm.MERGE_IN_PLACE, Algorithm.MERGE_SUBLIST)
    return profiles, merge_contrast


def main():
    print(f"Benchmarking sizes {BENCHMARK_SIZES}...")
    profiles, merge_contrast = run_benchmarks()

    print("┌──────────────────┬─────────────┬───────┬─────┬─────────────┬────────┐")
    print("│ Algorithm        │ Big O       │ Slope │ CC  │ Comparisons │ Output │")
    print("├──────────────────┼─────────────┼───────┼─────┼─────────────┼────────┤")
    for profile in profiles:
        print(format_row(profile))
    print("└──────────────────┴─────────────┴───────┴─────┴─────────────┴────────┘")

    verdict = "significant" if merge_contrast["overall_significant"] else "not significant"
    print(
        f"merge-sublist vs merge-in-place: {merge_contrast['average_speedup']}x "
        f"average speedup ({verdict} at p < 0.05)"
    )

    if not all(p.verified for p in profiles):
        print("ERROR: at least one algorithm produced unsorted output", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
