"""
Command-line entry point.

    sortkit ALGORITHM [COUNT]

ALGORITHM is one of selection, insertion, merge-in-place, merge-sublist.
COUNT defaults to 16 when absent or not a non-negative integer.

Flow: generate random u16 values -> Sorter -> print unsorted -> sort -> print sorted.
Set SORTKIT_TRACE=1 to stream sorter events to stderr.
"""

import sys
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

from sortkit.config import DEFAULT_COUNT, trace_enabled
from sortkit.core.generator import generate_random_ints
from sortkit.core.renderer import format_headline, format_items
from sortkit.core.sorter import Sorter
from sortkit.models.events import EventEmitter, print_to_stderr
from sortkit.models.types import ALGORITHM_ALIASES, Algorithm


class SortRequest(BaseModel):
    algorithm: Algorithm
    count: int = DEFAULT_COUNT

    @field_validator("algorithm", mode="before")
    @classmethod
    def resolve_alias(cls, value):
        if isinstance(value, str):
            return ALGORITHM_ALIASES.get(value, value)
        return value

    @field_validator("count", mode="before")
    @classmethod
    def fallback_count(cls, value):
        # Unparseable counts are not an error, they just mean "default"
        if isinstance(value, bool):
            return DEFAULT_COUNT
        if isinstance(value, int):
            return value if value >= 0 else DEFAULT_COUNT
        if isinstance(value, str):
            digits = value[1:] if value.startswith("+") else value
            if digits.isascii() and digits.isdigit():
                return int(digits)
        return DEFAULT_COUNT


def parse_args(argv: list[str]) -> SortRequest:
    """Build a SortRequest from positional args.

    Raises ValueError when the algorithm is missing or unknown.
    """
    if not argv:
        raise ValueError("You must provide a sorting algorithm!")

    fields = {"algorithm": argv[0]}
    if len(argv) > 1:
        fields["count"] = argv[1]

    try:
        return SortRequest(**fields)
    except ValidationError as e:
        raise ValueError(f"No such algorithm: {argv[0]}") from e


def run(argv: Optional[list[str]] = None, emitter: Optional[EventEmitter] = None) -> int:
    """Run one sort and print it. Returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    if emitter is None:
        emitter = EventEmitter()
        if trace_enabled():
            emitter.on_event(print_to_stderr)

    try:
        request = parse_args(argv)
    except ValueError as e:
        emitter.error("cli", str(e))
        print(str(e), file=sys.stderr)
        return 1

    items = generate_random_ints(request.count, emitter=emitter)
    sorter = Sorter(items, request.algorithm, emitter=emitter)
    print(format_headline(request.algorithm, request.count))

    print(f"Unsorted {format_items(sorter.items)}")
    sorter.sort()
    print(f"Sorted {format_items(sorter.items)}")
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
