"""Correctness checks for sort output: ordering, permutation, agreement.

Provides the deterministic machinery to prove a sort kept every value and
put them in order, and that every algorithm lands on the same result.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Optional, Sequence

from sortkit.core.sorter import Sorter
from sortkit.models.types import Algorithm, VerificationResult


def first_violation(items: Sequence[Any]) -> Optional[int]:
    """Return the first index i where items[i] > items[i+1], or None."""
    for i in range(len(items) - 1):
        if items[i] > items[i + 1]:
            return i
    return None


def is_sorted(items: Sequence[Any]) -> bool:
    """True iff items[i] <= items[i+1] for every adjacent pair."""
    return first_violation(items) is None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """True iff a and b hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    try:
        return Counter(a) == Counter(b)
    except TypeError:
        # Unhashable elements: fall back to comparing sorted copies
        return sorted(a) == sorted(b)


def verify_sort(algorithm: Algorithm, items: Sequence[Any]) -> VerificationResult:
    """Sort a copy of items with one algorithm and check the output."""
    sorter = Sorter(items, algorithm)
    sorter.sort()
    output = list(sorter.items)
    violation = first_violation(output)
    return VerificationResult(
        algorithm=sorter.algorithm,
        ordered=violation is None,
        permutation=is_permutation(items, output),
        violation_index=violation,
        output=output,
    )


def compare_outputs(
    outputs: dict[Algorithm, Sequence[Any]],
) -> tuple[bool, list[str]]:
    """Compare every algorithm's output against a reference output.

    The allocating merge variant is the reference when present, otherwise
    the first entry. Returns (all_match, mismatches) where each mismatch
    is a human-readable description.
    """
    if not outputs:
        return True, []

    if Algorithm.MERGE_SUBLIST in outputs:
        reference_algo = Algorithm.MERGE_SUBLIST
    else:
        reference_algo = next(iter(outputs))
    reference = list(outputs[reference_algo])

    mismatches = []
    for algorithm, output in outputs.items():
        if algorithm == reference_algo:
            continue
        output = list(output)
        if len(output) != len(reference):
            mismatches.append(
                f"{algorithm.value}: length {len(output)} != "
                f"{reference_algo.value} length {len(reference)}"
            )
            continue
        for i, (got, expected) in enumerate(zip(output, reference)):
            if got != expected:
                mismatches.append(
                    f"{algorithm.value}: index {i} is {got!r}, "
                    f"{reference_algo.value} has {expected!r}"
                )
                break

    return not mismatches, mismatches


def cross_check(items: Sequence[Any]) -> tuple[bool, list[str]]:
    """Run all four algorithms on the same input and compare their outputs."""
    outputs = {}
    for algorithm in Algorithm:
        result = verify_sort(algorithm, items)
        outputs[algorithm] = result.output
    return compare_outputs(outputs)
