"""Shared test fixtures for all test modules."""

from collections.abc import Callable

import pytest

from tierlog.adapters.storage.ring_buffer import PriorityBufferStore
from tierlog.core.models import LogEntry, Priority


class FakeClock:
    """Deterministic nanosecond clock; advances by step on every read."""

    def __init__(self, start: int = 1_000, step: int = 10) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def clock() -> FakeClock:
    """Provide a fresh deterministic clock."""
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> PriorityBufferStore:
    """Provide an empty store driven by the fake clock."""
    return PriorityBufferStore(capacity=100, clock=clock)


@pytest.fixture
def make_entry() -> Callable[..., LogEntry]:
    """Factory fixture for LogEntry objects with sensible defaults."""

    def _make(
        timestamp: int = 1_000,
        priority: Priority = Priority.INFO,
        file: str = "src/main.py",
        line: int = 1,
        message: str = "hello",
        counter: int = 0,
    ) -> LogEntry:
        return LogEntry(
            timestamp=timestamp,
            priority=priority,
            file=file,
            line=line,
            message=message,
            counter=counter,
        )

    return _make
