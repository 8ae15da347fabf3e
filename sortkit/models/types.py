"""Shared data contracts for the sorter and its measurement tools.

Every module consumes and produces these types. This is the single source
of truth for what data flows between the generator, the sorter, the
verification helpers and the benchmark report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ── Algorithms ──────────────────────────────────────────────

class Algorithm(str, Enum):
    """Sorting algorithm selector."""
    SELECTION = "selection"
    INSERTION = "insertion"
    MERGE_IN_PLACE = "merge-in-place"
    MERGE_SUBLIST = "merge-sublist"

    @property
    def label(self) -> str:
        """Headline prefix, e.g. "Selection sorting"."""
        return _LABELS[self]

    @classmethod
    def parse(cls, name: str) -> Algorithm:
        """Resolve a CLI name (or legacy alias) to an Algorithm.

        Raises ValueError for unknown names.
        """
        return cls(ALGORITHM_ALIASES.get(name, name))


_LABELS = {
    Algorithm.SELECTION: "Selection sorting",
    Algorithm.INSERTION: "Insertion sorting",
    Algorithm.MERGE_IN_PLACE: "Merge sorting",
    Algorithm.MERGE_SUBLIST: "Merge sorting (sublists)",
}

# "merge" was the only merge sort before the sublist variant existed
ALGORITHM_ALIASES = {
    "merge": Algorithm.MERGE_IN_PLACE.value,
}


# ── Sorting ─────────────────────────────────────────────────

@dataclass
class SortStats:
    """Operation counters collected while a Sorter runs."""
    comparisons: int = 0
    swaps: int = 0                      # selection sort index swaps
    shifts: int = 0                     # remove/reinsert moves, or merged-output copies
    residual_merges: int = 0            # in-place merge correction passes

    def reset(self) -> None:
        self.comparisons = 0
        self.swaps = 0
        self.shifts = 0
        self.residual_merges = 0


# ── Measurement ─────────────────────────────────────────────

@dataclass
class BenchmarkPoint:
    """Single data point from benchmarking at one input size."""
    input_size: int
    time_ms: float
    memory_mb: float


@dataclass
class VerificationResult:
    """Outcome of checking one algorithm's output against its input."""
    algorithm: Algorithm
    ordered: bool
    permutation: bool
    violation_index: int | None = None
    output: list[Any] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.ordered and self.permutation


@dataclass
class AlgorithmProfile:
    """Benchmark, Big O fit and static metrics for one algorithm."""
    algorithm: Algorithm
    benchmarks: list[BenchmarkPoint] = field(default_factory=list)
    big_o: dict[str, Any] = field(default_factory=dict)
    static_metrics: dict[str, Any] = field(default_factory=dict)
    stats: SortStats = field(default_factory=SortStats)
    verified: bool = False
