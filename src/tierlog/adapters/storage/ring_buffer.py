"""Ring buffer storage for tiered log entries.

Provides bounded in-memory storage that automatically evicts oldest
entries when a buffer is full, one buffer per priority tier. Useful for
services that need predictable memory usage and keep only recent logs.
"""

import logging
import threading
import time
from collections import deque
from collections.abc import Callable

from tierlog.core.models import Priority, RawEntry
from tierlog.core.ports import EntryObserver

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 1000


class RingBuffer:
    """Fixed-size circular buffer of raw entries for a single tier.

    When the buffer is full, the oldest entry is evicted to make room for
    the new one. The counter keeps increasing across evictions and drains,
    so a gap between exported counters shows that entries were lost.

    Args:
        capacity: Maximum number of entries to retain.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._buffer: deque[RawEntry] = deque(maxlen=capacity)
        self._counter = 0
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._buffer.maxlen or 0

    def __len__(self) -> int:
        return len(self._buffer)

    def append(self, timestamp: int, file: str, line: int, message: str) -> RawEntry:
        """Store a new entry and return it with its assigned counter."""
        with self._lock:
            entry = RawEntry(
                timestamp=timestamp,
                counter=self._counter,
                file=file,
                line=line,
                message=message,
            )
            self._counter += 1
            self._buffer.append(entry)
        return entry

    def export(self) -> list[RawEntry]:
        """Return a snapshot of all retained entries, oldest first."""
        with self._lock:
            return list(self._buffer)

    def drain(self) -> list[RawEntry]:
        """Return all retained entries and remove them from the buffer."""
        with self._lock:
            entries = list(self._buffer)
            self._buffer.clear()
        return entries


class PriorityBufferStore:
    """Three ring buffers, one per priority, behind a single object.

    Implements LogExportPort. Pass one store to whatever writes or exports
    logs instead of relying on module-level buffers.

    Args:
        capacity: Capacity of each tier's buffer.
        clock: Returns the current time in nanoseconds.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self._buffers = {priority: RingBuffer(capacity) for priority in Priority}
        self._clock = clock
        self._observers: list[EntryObserver] = []

    def buffer(self, priority: Priority) -> RingBuffer:
        """Return the ring buffer backing a tier."""
        return self._buffers[priority]

    def subscribe(self, observer: EntryObserver) -> None:
        """Register an observer notified after every append."""
        self._observers.append(observer)

    def append(
        self, priority: Priority, message: str, file: str = "", line: int = 0
    ) -> RawEntry:
        """Timestamp and store an entry in a tier, then notify observers.

        Returns:
            The stored entry.
        """
        entry = self._buffers[priority].append(self._clock(), file, line, message)
        for observer in self._observers:
            try:
                observer(priority, entry)
            except Exception:
                logger.exception("Log observer %r failed", observer)
        return entry

    def export(self, priority: Priority) -> list[RawEntry]:
        """Return a snapshot of a tier's entries, oldest first."""
        return self._buffers[priority].export()

    def drain(self, priority: Priority) -> list[RawEntry]:
        """Return a tier's entries and clear the tier."""
        return self._buffers[priority].drain()
