"""Text rendering for sequences and sort headlines."""

from typing import Any, Iterable

from sortkit.models.types import Algorithm


def format_items(items: Iterable[Any]) -> str:
    """Render a sequence as `Items: [v1, v2, ..., vn]`."""
    return f"Items: [{', '.join(repr(v) for v in items)}]"


def format_headline(algorithm: Algorithm, count: int) -> str:
    """e.g. `Insertion sorting 16 random numbers`."""
    return f"{algorithm.label} {count} random numbers"
