"""Deterministic metrics for the sorting algorithms. Seeded inputs, no hidden state.

Exports:
    compute_static_metrics(algorithm) -> dict
    benchmark_function(func, input_sizes, input_generator, iterations) -> list[dict]
    estimate_big_o(benchmarks) -> dict
    compare_timings(baseline, candidate, input_sizes, runs_per_size, seed) -> dict
    profile_algorithm(algorithm, input_sizes, iterations, seed) -> AlgorithmProfile
"""

from __future__ import annotations

import copy
import inspect
import textwrap
import time
import tracemalloc
from typing import Any, Callable

import lizard
import numpy as np
from radon.metrics import h_visit, mi_visit
from scipy import stats

from sortkit.config import (
    BENCHMARK_ITERATIONS,
    BENCHMARK_SEED,
    BENCHMARK_SIZES,
    SIGNIFICANCE_RUNS,
)
from sortkit.core.generator import generate_random_ints
from sortkit.core.sorter import ALGORITHM_ROUTINES, Sorter
from sortkit.core.verify import is_permutation, is_sorted
from sortkit.models.types import Algorithm, AlgorithmProfile, BenchmarkPoint, SortStats


# ════════════════════════════════════════════════════════════
# Static metrics over the Sorter routines
# ════════════════════════════════════════════════════════════

def _routine_source(algorithm: Algorithm) -> str:
    sources = []
    for name in ALGORITHM_ROUTINES[algorithm]:
        method = getattr(Sorter, name)
        sources.append(textwrap.dedent(inspect.getsource(method)))
    return "\n\n".join(sources)


def compute_static_metrics(algorithm: Algorithm) -> dict:
    """Run lizard + radon over the methods implementing one algorithm."""
    source_code = _routine_source(algorithm)

    # --- Lizard: McCabe cyclomatic complexity, summed over routines ---
    analysis = lizard.analyze_file.analyze_source_code("sorter.py", source_code)
    functions = analysis.function_list

    cc = sum(f.cyclomatic_complexity for f in functions) if functions else 1
    nloc = sum(f.nloc for f in functions)
    nesting = max((f.max_nesting_depth for f in functions), default=0)

    # --- Radon: Halstead metrics ---
    h_results = h_visit(source_code)
    h = h_results.total if hasattr(h_results, "total") else None
    halstead_volume = round(h.volume, 2) if h else None
    halstead_difficulty = round(h.difficulty, 2) if h else None

    # --- Radon: Maintainability Index ---
    mi = round(float(mi_visit(source_code, False)), 1)

    return {
        "routines": list(ALGORITHM_ROUTINES[algorithm]),
        "cyclomatic_complexity": cc,
        "maintainability_index": mi,
        "halstead_volume": halstead_volume,
        "halstead_difficulty": halstead_difficulty,
        "nesting_depth": nesting,
        "nloc": nloc,
    }


# ════════════════════════════════════════════════════════════
# Timing
# ════════════════════════════════════════════════════════════

def _default_generator(seed: int) -> Callable[[int], list[int]]:
    def input_generator(size):
        return generate_random_ints(size, seed=seed + size)
    return input_generator


def benchmark_function(func, input_sizes=None, input_generator=None, iterations=BENCHMARK_ITERATIONS):
    """Empirically benchmark a callable at multiple input sizes.

    func receives a fresh copy of the generated list on every run.
    """
    if input_sizes is None:
        input_sizes = BENCHMARK_SIZES

    if input_generator is None:
        input_generator = _default_generator(BENCHMARK_SEED)

    results = []

    for size in input_sizes:
        input_data = input_generator(size)
        timed_out = False

        # Warmup run (untimed)
        func(copy.copy(input_data))

        # Loop 1: timing only
        times = []
        for _ in range(iterations):
            input_copy = copy.copy(input_data)
            start = time.perf_counter()
            func(input_copy)
            elapsed_ms = (time.perf_counter() - start) * 1000
            times.append(elapsed_ms)

            if elapsed_ms > 10_000:
                timed_out = True
                break

        # Loop 2: memory, measured separately so tracemalloc doesn't skew timing
        tracemalloc.start()
        func(copy.copy(input_data))
        _, peak_bytes = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        results.append({
            "input_size": size,
            "time_ms": round(min(times), 3),
            "memory_mb": round(max(peak_bytes, 0) / 1024 / 1024, 3),
        })

        if timed_out:
            break

    return results


# ════════════════════════════════════════════════════════════
# Big O estimate
# ════════════════════════════════════════════════════════════

_BIG_O_LABELS = [
    (0.1, "O(1)"),
    (0.7, "O(sqrt(n))"),
    (1.2, "O(n)"),
    (1.7, "O(n log n)"),
    (2.3, "O(n^2)"),
    (3.3, "O(n^3)"),
]


def estimate_big_o(benchmarks: list) -> dict:
    """Fit a power law time = c * n^k via log-log linear regression."""
    valid = [
        (b["input_size"], b["time_ms"])
        for b in benchmarks
        if b["input_size"] > 0 and b["time_ms"] > 0
    ]

    if len(valid) < 2:
        return {"label": "O(?)", "slope": 0.0, "r_squared": 0.0, "confidence": "low"}

    log_sizes = np.log(np.array([v[0] for v in valid], dtype=float))
    log_times = np.log(np.array([v[1] for v in valid], dtype=float))

    slope, intercept = np.polyfit(log_sizes, log_times, 1)
    slope = round(float(slope), 2)

    predicted = slope * log_sizes + intercept
    ss_res = float(np.sum((log_times - predicted) ** 2))
    ss_tot = float(np.sum((log_times - np.mean(log_times)) ** 2))
    r_squared = round(1 - (ss_res / ss_tot), 3) if ss_tot > 0 else 0.0

    label = f"O(n^{slope})"
    for upper, name in _BIG_O_LABELS:
        if slope < upper:
            label = name
            break

    if r_squared > 0.95:
        confidence = "high"
    elif r_squared > 0.8:
        confidence = "medium"
    else:
        confidence = "low"

    return {
        "label": label,
        "slope": slope,
        "r_squared": r_squared,
        "confidence": confidence,
    }


# ════════════════════════════════════════════════════════════
# Head-to-head timing with Welch's t-test
# ════════════════════════════════════════════════════════════

def _sort_with(algorithm: Algorithm) -> Callable[[list], None]:
    def run(items):
        Sorter(items, algorithm).sort()
    return run


def compare_timings(
    baseline: Algorithm,
    candidate: Algorithm,
    input_sizes: list[int] | None = None,
    runs_per_size: int = SIGNIFICANCE_RUNS,
    seed: int = BENCHMARK_SEED,
) -> dict[str, Any]:
    """Time two algorithms on shared inputs and test the difference.

    speedup > 1 means the candidate is faster than the baseline.
    """
    if input_sizes is None:
        input_sizes = BENCHMARK_SIZES[-2:]

    runs_per_size = max(runs_per_size, 5)  # minimum for a meaningful t-test
    generate = _default_generator(seed)
    baseline_func = _sort_with(baseline)
    candidate_func = _sort_with(candidate)

    per_size = []
    for size in input_sizes:
        input_data = generate(size)
        baseline_times = []
        candidate_times = []

        for _ in range(runs_per_size):
            start = time.perf_counter()
            baseline_func(list(input_data))
            baseline_times.append((time.perf_counter() - start) * 1000)

            start = time.perf_counter()
            candidate_func(list(input_data))
            candidate_times.append((time.perf_counter() - start) * 1000)

        base_arr = np.array(baseline_times)
        cand_arr = np.array(candidate_times)

        if base_arr.std() == 0 and cand_arr.std() == 0:
            p_value = 0.0 if base_arr.mean() != cand_arr.mean() else 1.0
        else:
            _, p_value = stats.ttest_ind(base_arr, cand_arr, equal_var=False)

        speedup = float(base_arr.mean() / cand_arr.mean()) if cand_arr.mean() > 0 else float("inf")

        per_size.append({
            "input_size": size,
            "baseline_mean_ms": round(float(base_arr.mean()), 3),
            "candidate_mean_ms": round(float(cand_arr.mean()), 3),
            "speedup": round(speedup, 2),
            "p_value": round(float(p_value), 6),
            "significant": float(p_value) < 0.05,
        })

    all_significant = all(r["significant"] for r in per_size) if per_size else False
    avg_speedup = float(np.mean([r["speedup"] for r in per_size])) if per_size else 0.0

    return {
        "baseline": baseline.value,
        "candidate": candidate.value,
        "per_size": per_size,
        "overall_significant": all_significant,
        "average_speedup": round(avg_speedup, 2),
    }


# ════════════════════════════════════════════════════════════
# Full profile for one algorithm
# ════════════════════════════════════════════════════════════

def profile_algorithm(
    algorithm: Algorithm,
    input_sizes: list[int] | None = None,
    iterations: int = BENCHMARK_ITERATIONS,
    seed: int = BENCHMARK_SEED,
) -> AlgorithmProfile:
    """Benchmark, fit, statically measure and verify one algorithm."""
    if input_sizes is None:
        input_sizes = BENCHMARK_SIZES

    generate = _default_generator(seed)
    raw = benchmark_function(_sort_with(algorithm), input_sizes, generate, iterations)
    points = [BenchmarkPoint(**r) for r in raw]

    # Counters and correctness from one run at the largest measured size
    largest = points[-1].input_size if points else 0
    sample = generate(largest)
    sorter = Sorter(sample, algorithm)
    sorter.sort()
    output = list(sorter.items)

    return AlgorithmProfile(
        algorithm=algorithm,
        benchmarks=points,
        big_o=estimate_big_o(raw),
        static_metrics=compute_static_metrics(algorithm),
        stats=SortStats(**vars(sorter.stats)),
        verified=is_sorted(output) and is_permutation(sample, output),
    )
