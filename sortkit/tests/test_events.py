"""Tests for models/events.py and config.py"""

from sortkit.config import DEFAULT_COUNT, DEFAULT_ELEMENT_BITS, trace_enabled
from sortkit.models.events import EventEmitter, EventType, SortEvent


class TestEventEmitter:
    def test_collects_events(self):
        emitter = EventEmitter()
        emitter.log("cli", "hello")
        emitter.error("cli", "boom")
        assert [e.event_type for e in emitter.events] == [EventType.LOG, EventType.ERROR]

    def test_callbacks_receive_events(self):
        emitter = EventEmitter()
        seen = []
        emitter.on_event(seen.append)
        emitter.complete(EventType.SORT_START, "sorter", "go", algorithm="selection")
        assert seen == emitter.events

    def test_failing_callback_does_not_break_emit(self):
        emitter = EventEmitter()

        def broken(event):
            raise RuntimeError("nope")

        emitter.on_event(broken)
        emitter.log("cli", "still recorded")
        assert len(emitter.events) == 1

    def test_of_type(self):
        emitter = EventEmitter()
        emitter.log("a", "x")
        emitter.complete(EventType.RESIDUAL_MERGE, "sorter", "y")
        assert len(emitter.of_type(EventType.RESIDUAL_MERGE)) == 1


class TestSortEvent:
    def test_to_line(self):
        event = SortEvent(EventType.LOG, "cli", "hi", data={"b": 2, "a": 1})
        assert event.to_line() == '[LOG] cli: hi {"a": 1, "b": 2}'

    def test_to_line_without_data(self):
        assert SortEvent(EventType.ERROR, "cli", "bad").to_line() == "[ERROR] cli: bad"

    def test_to_dict(self):
        d = SortEvent(EventType.SORT_COMPLETE, "sorter", "done", algorithm="insertion").to_dict()
        assert d["event_type"] == "SORT_COMPLETE"
        assert d["algorithm"] == "insertion"
        assert d["data"] is None


class TestConfig:
    def test_trace_flag(self, monkeypatch):
        monkeypatch.setenv("SORTKIT_TRACE", "yes")
        assert trace_enabled()
        monkeypatch.setenv("SORTKIT_TRACE", "0")
        assert not trace_enabled()
        monkeypatch.delenv("SORTKIT_TRACE")
        assert not trace_enabled()

    def test_defaults(self):
        assert DEFAULT_COUNT == 16
        assert DEFAULT_ELEMENT_BITS == 16
