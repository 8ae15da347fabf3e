"""Tests for cli.py

Depends on: cli.py, core/, models/
"""

import sys

import pytest

from sortkit import cli
from sortkit.cli import SortRequest, parse_args, run
from sortkit.models.events import EventEmitter, EventType
from sortkit.models.types import Algorithm


def parse_items(line: str, prefix: str) -> list[int]:
    assert line.startswith(prefix)
    body = line[len(prefix):].strip()
    assert body.startswith("[") and body.endswith("]")
    body = body[1:-1]
    return [int(v) for v in body.split(", ")] if body else []


class TestParseArgs:
    def test_algorithm_and_count(self):
        request = parse_args(["insertion", "5"])
        assert request.algorithm is Algorithm.INSERTION
        assert request.count == 5

    def test_count_defaults_to_16(self):
        assert parse_args(["selection"]).count == 16

    @pytest.mark.parametrize("count", ["abc", "-3", "1.5", "", "٣"])
    def test_unparseable_count_falls_back(self, count):
        assert parse_args(["selection", count]).count == 16

    def test_zero_count(self):
        assert parse_args(["selection", "0"]).count == 0

    def test_merge_alias(self):
        assert parse_args(["merge"]).algorithm is Algorithm.MERGE_IN_PLACE

    def test_missing_algorithm(self):
        with pytest.raises(ValueError, match="You must provide a sorting algorithm!"):
            parse_args([])

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError, match="No such algorithm: bogo"):
            parse_args(["bogo", "10"])

    @pytest.mark.parametrize("name", ["SELECTION", "Merge-Sublist", " insertion ", "merge "])
    def test_algorithm_names_are_exact(self, name):
        with pytest.raises(ValueError, match="No such algorithm"):
            parse_args([name])

    @pytest.mark.parametrize("count, expected", [("+5", 5), ("+0", 0), ("+", 16), ("++5", 16), ("-5", 16)])
    def test_count_sign(self, count, expected):
        assert parse_args(["selection", count]).count == expected

    def test_request_model_accepts_ints(self):
        assert SortRequest(algorithm="merge-sublist", count=7).count == 7
        assert SortRequest(algorithm="merge-sublist", count=-7).count == 16


class TestRun:
    @pytest.mark.parametrize("name", ["selection", "insertion", "merge-in-place", "merge-sublist"])
    def test_prints_unsorted_then_sorted(self, name, capsys):
        assert run([name, "12"]) == 0
        lines = capsys.readouterr().out.strip().split("\n")
        assert len(lines) == 3
        assert lines[0].endswith("12 random numbers")
        unsorted = parse_items(lines[1], "Unsorted Items:")
        ordered = parse_items(lines[2], "Sorted Items:")
        assert len(unsorted) == 12
        assert ordered == sorted(unsorted)

    def test_headline(self, capsys):
        run(["selection", "3"])
        assert capsys.readouterr().out.startswith("Selection sorting 3 random numbers\n")

    def test_default_count(self, capsys):
        run(["insertion"])
        lines = capsys.readouterr().out.strip().split("\n")
        assert len(parse_items(lines[1], "Unsorted Items:")) == 16

    def test_zero_items(self, capsys):
        assert run(["merge-sublist", "0"]) == 0
        out = capsys.readouterr().out
        assert "Unsorted Items: []" in out
        assert "Sorted Items: []" in out

    def test_missing_algorithm_exits_1(self, capsys):
        assert run([]) == 1
        captured = capsys.readouterr()
        assert "You must provide a sorting algorithm!" in captured.err
        assert captured.out == ""

    def test_unknown_algorithm_exits_1(self, capsys):
        assert run(["quick"]) == 1
        assert "No such algorithm: quick" in capsys.readouterr().err

    def test_uppercase_algorithm_exits_1(self, capsys):
        assert run(["SELECTION", "3"]) == 1
        captured = capsys.readouterr()
        assert "No such algorithm: SELECTION" in captured.err
        assert captured.out == ""

    def test_error_is_recorded_as_event(self, capsys):
        emitter = EventEmitter()
        run(["quick"], emitter=emitter)
        assert emitter.events[-1].event_type == EventType.ERROR

    def test_events_collected(self, capsys):
        emitter = EventEmitter()
        run(["merge-in-place", "8"], emitter=emitter)
        types = [e.event_type for e in emitter.events]
        assert types[0] == EventType.SEQUENCE_GENERATED
        assert types[-1] == EventType.SORT_COMPLETE

    def test_trace_goes_to_stderr(self, capsys, monkeypatch):
        monkeypatch.setenv("SORTKIT_TRACE", "1")
        run(["selection", "4"])
        captured = capsys.readouterr()
        assert "[SORT_COMPLETE] sorter:" in captured.err
        assert "[SORT_COMPLETE]" not in captured.out

    def test_no_trace_by_default(self, capsys, monkeypatch):
        monkeypatch.delenv("SORTKIT_TRACE", raising=False)
        run(["selection", "4"])
        assert capsys.readouterr().err == ""


class TestMain:
    def test_main_exits_with_status(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["sortkit"])
        with pytest.raises(SystemExit) as exc:
            cli.main()
        assert exc.value.code == 1

    def test_main_success(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["sortkit", "selection", "2"])
        with pytest.raises(SystemExit) as exc:
            cli.main()
        assert exc.value.code == 0
