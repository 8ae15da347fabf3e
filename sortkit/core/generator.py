"""Random fixed-width unsigned integers for the sorter to chew on."""

from __future__ import annotations

from typing import Optional

import numpy as np

from sortkit.config import DEFAULT_COUNT, DEFAULT_ELEMENT_BITS, SUPPORTED_ELEMENT_BITS
from sortkit.models.events import EventEmitter, EventType


_DTYPES = {
    8: np.uint8,
    16: np.uint16,
    32: np.uint32,
    64: np.uint64,
}


def generate_random_ints(
    length: Optional[int] = None,
    bits: int = DEFAULT_ELEMENT_BITS,
    seed: Optional[int] = None,
    emitter: Optional[EventEmitter] = None,
) -> list[int]:
    """Draw `length` independent uniform values of a `bits`-wide unsigned int.

    length defaults to 16 when None. Values cover the full range
    [0, 2**bits - 1] and come back as plain Python ints.
    """
    if bits not in SUPPORTED_ELEMENT_BITS:
        raise ValueError(
            f"Unsupported element width: {bits} bits "
            f"(expected one of {SUPPORTED_ELEMENT_BITS})"
        )

    count = DEFAULT_COUNT if length is None else length
    if count < 0:
        raise ValueError(f"Length must be non-negative, got {count}")

    dtype = _DTYPES[bits]
    rng = np.random.default_rng(seed)
    values = rng.integers(0, np.iinfo(dtype).max, size=count, dtype=dtype, endpoint=True)
    items = values.tolist()

    if emitter:
        emitter.complete(
            EventType.SEQUENCE_GENERATED, "generator",
            f"Generated {count} random u{bits} values",
            data={"count": count, "bits": bits, "seed": seed},
        )

    return items
