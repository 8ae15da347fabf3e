"""
Sort trace events.

Event types:
  - SEQUENCE_GENERATED: the generator produced the input sequence
  - SORT_START / SORT_COMPLETE: a Sorter began / finished sorting
  - RESIDUAL_MERGE: the in-place merge needed a correction pass
  - LOG / ERROR: free-form messages
"""

import json
import sys
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class EventType(str, Enum):
    # Input
    SEQUENCE_GENERATED = "SEQUENCE_GENERATED"

    # Sorter lifecycle
    SORT_START = "SORT_START"
    SORT_COMPLETE = "SORT_COMPLETE"
    RESIDUAL_MERGE = "RESIDUAL_MERGE"

    # General
    LOG = "LOG"
    ERROR = "ERROR"


@dataclass
class SortEvent:
    event_type: EventType
    source: str
    message: str
    data: Optional[dict] = None
    algorithm: Optional[str] = None
    timestamp: float = field(default_factory=time.time)

    def to_line(self) -> str:
        """Format as a single trace line."""
        line = f"[{self.event_type.value}] {self.source}: {self.message}"
        if self.data:
            line += f" {json.dumps(self.data, sort_keys=True)}"
        return line

    def to_dict(self) -> dict:
        return {
            "event_type": self.event_type.value,
            "source": self.source,
            "message": self.message,
            "algorithm": self.algorithm,
            "timestamp": self.timestamp,
            "data": self.data,
        }


class EventEmitter:
    """
    Collects events during a run.
    Components call emitter.log() / emitter.complete() / emitter.error().
    The CLI reads .events or registers a callback to print them as they happen.
    """

    def __init__(self):
        self.events: list[SortEvent] = []
        self._callbacks: list = []

    def on_event(self, callback):
        """Register a callback for real-time output (e.g., a stderr printer)."""
        self._callbacks.append(callback)

    def _emit(self, event: SortEvent):
        self.events.append(event)
        for cb in self._callbacks:
            try:
                cb(event)
            except Exception:
                pass

    def log(self, source: str, message: str, algorithm: str = None, data: dict = None):
        self._emit(SortEvent(
            event_type=EventType.LOG,
            source=source,
            message=message,
            algorithm=algorithm,
            data=data,
        ))

    def complete(self, event_type: EventType, source: str, message: str,
                 algorithm: str = None, data: dict = None):
        self._emit(SortEvent(
            event_type=event_type,
            source=source,
            message=message,
            algorithm=algorithm,
            data=data,
        ))

    def error(self, source: str, message: str, algorithm: str = None):
        self._emit(SortEvent(
            event_type=EventType.ERROR,
            source=source,
            message=message,
            algorithm=algorithm,
        ))

    def of_type(self, event_type: EventType) -> list[SortEvent]:
        return [e for e in self.events if e.event_type == event_type]


def print_to_stderr(event: SortEvent):
    """EventEmitter callback that writes each event as a trace line."""
    print(event.to_line(), file=sys.stderr)
