"""Tests for tier sinks and the console mirror."""

import inspect
import io

import pytest

from tierlog.adapters.sinks import ConsoleMirror, TierSink, tier_sinks
from tierlog.adapters.storage.ring_buffer import PriorityBufferStore
from tierlog.core.models import Priority, RawEntry


@pytest.mark.adapters
class TestTierSink:
    """Tests for TierSink."""

    def test_append_writes_to_bound_tier(self, store: PriorityBufferStore) -> None:
        """append() stores the entry in the sink's tier only."""
        sink = TierSink(store, Priority.DEBUG)

        sink.append("cache warm", "cache.py", 12)

        [entry] = store.export(Priority.DEBUG)
        assert (entry.message, entry.file, entry.line) == ("cache warm", "cache.py", 12)
        assert store.export(Priority.INFO) == []

    def test_log_records_caller_location(self, store: PriorityBufferStore) -> None:
        """log() fills in the calling file and line."""
        sink = TierSink(store, Priority.ERROR)

        expected_line = _current_line() + 1
        sink.log("upgrade failed")

        [entry] = store.export(Priority.ERROR)
        assert entry.file == __file__
        assert entry.line == expected_line

    def test_tier_sinks_covers_every_priority(self, store: PriorityBufferStore) -> None:
        """tier_sinks() returns one sink per tier."""
        sinks = tier_sinks(store)

        assert set(sinks) == set(Priority)
        for priority, sink in sinks.items():
            sink.log(priority.value)
            assert store.export(priority)[-1].message == priority.value


@pytest.mark.adapters
class TestConsoleMirror:
    """Tests for ConsoleMirror."""

    def test_writes_priority_location_and_message(self) -> None:
        """Each entry becomes one line of text."""
        stream = io.StringIO()
        mirror = ConsoleMirror(stream)

        mirror(
            Priority.INFO,
            RawEntry(timestamp=1, counter=0, file="main.py", line=12, message="up"),
        )

        assert stream.getvalue() == "INFO main.py:12 up\n"

    def test_mirrors_store_appends(self, store: PriorityBufferStore) -> None:
        """Subscribed to a store, it echoes every append."""
        stream = io.StringIO()
        store.subscribe(ConsoleMirror(stream))

        store.append(Priority.ERROR, "disk full", file="disk.py", line=3)
        store.append(Priority.DEBUG, "retrying", file="disk.py", line=4)

        assert stream.getvalue().splitlines() == [
            "ERROR disk.py:3 disk full",
            "DEBUG disk.py:4 retrying",
        ]

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without a stream, lines go to stdout."""
        ConsoleMirror()(
            Priority.DEBUG,
            RawEntry(timestamp=1, counter=0, file="a.py", line=1, message="hi"),
        )

        assert capsys.readouterr().out == "DEBUG a.py:1 hi\n"


def _current_line() -> int:
    frame = inspect.currentframe()
    assert frame is not None and frame.f_back is not None
    return frame.f_back.f_lineno
