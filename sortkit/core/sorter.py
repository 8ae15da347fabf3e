"""Sorter: one sequence, one algorithm tag, four textbook comparison sorts.

Exports:
    Sorter(items, algorithm, emitter=None)
        .sort()   -> None, mutates or replaces the held sequence
        .items    -> tuple snapshot of the current sequence
        .stats    -> SortStats counters for the last sort
    ALGORITHM_ROUTINES: Algorithm -> names of the methods implementing it

Elements only need `<`, `<=`, `>` and copying. Nothing here raises on its
own; comparing incomparable values propagates the TypeError.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from sortkit.models.events import EventEmitter, EventType
from sortkit.models.types import Algorithm, SortStats


ALGORITHM_ROUTINES = {
    Algorithm.SELECTION: ("_selection_sort", "_sel_min_pos", "_sel_swap"),
    Algorithm.INSERTION: ("_insertion_sort", "_ins_find_larger_pos", "_ins_insert"),
    Algorithm.MERGE_IN_PLACE: ("_merge_sort_in_place", "_merge_sort_range", "_merge_in_place"),
    Algorithm.MERGE_SUBLIST: ("_merge_sort_sublists", "_sublist_sort", "_sublist_merge"),
}


class Sorter:
    """Owns a sequence and sorts it with the selected algorithm."""

    def __init__(
        self,
        items: Sequence[Any],
        algorithm: Algorithm | str,
        emitter: Optional[EventEmitter] = None,
    ):
        if not isinstance(algorithm, Algorithm):
            algorithm = Algorithm.parse(algorithm)
        self.algorithm = algorithm
        self._items = list(items)
        self._emitter = emitter
        self.stats = SortStats()

        self._handlers = {
            Algorithm.SELECTION: self._selection_sort,
            Algorithm.INSERTION: self._insertion_sort,
            Algorithm.MERGE_IN_PLACE: self._merge_sort_in_place,
            Algorithm.MERGE_SUBLIST: self._merge_sort_sublists,
        }

    @property
    def items(self) -> tuple:
        return tuple(self._items)

    def __repr__(self) -> str:
        return f"Sorter({self.algorithm.value!r}, {self._items!r})"

    def sort(self) -> None:
        """Sort the held sequence in ascending order."""
        self.stats.reset()
        if self._emitter:
            self._emitter.complete(
                EventType.SORT_START, "sorter",
                f"{self.algorithm.label} {len(self._items)} items",
                algorithm=self.algorithm.value,
            )

        self._handlers[self.algorithm]()

        if self._emitter:
            self._emitter.complete(
                EventType.SORT_COMPLETE, "sorter",
                f"Sorted {len(self._items)} items",
                algorithm=self.algorithm.value,
                data={
                    "comparisons": self.stats.comparisons,
                    "swaps": self.stats.swaps,
                    "shifts": self.stats.shifts,
                    "residual_merges": self.stats.residual_merges,
                },
            )

    # ── Selection sort ──────────────────────────────────────

    def _selection_sort(self):
        for i in range(len(self._items)):
            min_pos = self._sel_min_pos(i)
            self._sel_swap(i, min_pos)

    def _sel_min_pos(self, start: int) -> int:
        items = self._items
        pos = start
        for i in range(start + 1, len(items)):
            self.stats.comparisons += 1
            if items[i] < items[pos]:
                pos = i
        return pos

    def _sel_swap(self, a: int, b: int):
        if a == b:
            return
        items = self._items
        items[a], items[b] = items[b], items[a]
        self.stats.swaps += 1

    # ── Insertion sort ──────────────────────────────────────

    def _insertion_sort(self):
        n = len(self._items)
        i = 1
        while i < n:
            target = self._ins_find_larger_pos(i)
            if target < i:
                self._ins_insert(i, target)
                # The shift moved a new element into position i
                i -= 1
            i += 1

    def _ins_find_larger_pos(self, pos: int) -> int:
        """Leftmost position in the run of larger values directly before pos."""
        items = self._items
        current = items[pos]
        target = pos
        for i in range(pos - 1, -1, -1):
            self.stats.comparisons += 1
            if items[i] < current:
                break
            if items[i] > current:
                target = i
        return target

    def _ins_insert(self, old: int, new: int):
        items = self._items
        value = items.pop(old)
        items.insert(new, value)
        self.stats.shifts += 1

    # ── Merge sort, in place ────────────────────────────────

    def _merge_sort_in_place(self):
        self._merge_sort_range(0, len(self._items))

    def _merge_sort_range(self, start: int, length: int):
        if length <= 1:
            return

        a_start = start
        a_length = length // 2
        b_start = a_start + a_length
        b_length = length - a_length

        self._merge_sort_range(a_start, a_length)
        self._merge_sort_range(b_start, b_length)

        self._merge_in_place((a_start, a_length), (b_start, b_length))

    def _merge_in_place(self, a: tuple[int, int], b: tuple[int, int]):
        """Merge two adjacent sorted runs by moving B's fronts in front of A.

        A run is tracked as (start, length). Moving an element from B to
        A's start leaves A's length one short of the A values still ahead,
        so once A runs out those leftovers sit between the merged prefix and
        the rest of B and get merged again.
        """
        items = self._items
        a_start, a_length = a
        b_start, b_length = b
        orig_b_start, orig_b_length = b

        while a_length > 0 and b_length > 0:
            self.stats.comparisons += 1
            if items[a_start] <= items[b_start]:
                a_start += 1
                a_length -= 1
            else:
                value = items.pop(b_start)
                items.insert(a_start, value)
                self.stats.shifts += 1
                b_start += 1
                b_length -= 1

        if b_length > 0 and b_start != orig_b_start:
            displaced = orig_b_length - b_length
            self.stats.residual_merges += 1
            if self._emitter:
                self._emitter.complete(
                    EventType.RESIDUAL_MERGE, "sorter",
                    f"Re-merging {displaced} displaced items",
                    algorithm=self.algorithm.value,
                    data={"start": orig_b_start, "displaced": displaced, "remaining": b_length},
                )
            self._merge_in_place((orig_b_start, displaced), (b_start, b_length))

    # ── Merge sort, allocated sublists ──────────────────────

    def _merge_sort_sublists(self):
        self._items = self._sublist_sort(self._items)

    def _sublist_sort(self, items: list) -> list:
        n = len(items)
        if n <= 1:
            return list(items)

        mid = n // 2
        left = self._sublist_sort(items[:mid])
        right = self._sublist_sort(items[mid:])

        return self._sublist_merge(left, right)

    def _sublist_merge(self, left: list, right: list) -> list:
        """Merge two sorted lists into a new one; ties take the left element."""
        result = []
        i = 0
        j = 0

        while i < len(left) and j < len(right):
            self.stats.comparisons += 1
            if left[i] <= right[j]:
                result.append(left[i])
                i += 1
            else:
                result.append(right[j])
                j += 1

        # One side is exhausted; the other is already in order
        result.extend(left[i:])
        result.extend(right[j:])
        self.stats.shifts += len(result)

        return result
