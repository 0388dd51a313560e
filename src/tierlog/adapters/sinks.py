"""Write-side helpers for the tiered store.

TierSink binds a store to one priority so call sites can log without
naming the tier each time. ConsoleMirror is an observer that echoes every
stored entry to a text stream.
"""

import inspect
import sys
from typing import TextIO

from tierlog.adapters.storage.ring_buffer import PriorityBufferStore
from tierlog.core.models import Priority, RawEntry


class TierSink:
    """Appends entries to a single tier of a store.

    Example:
        ```python
        store = PriorityBufferStore()
        sinks = tier_sinks(store)
        sinks[Priority.ERROR].log("upgrade failed")
        ```
    """

    def __init__(self, store: PriorityBufferStore, priority: Priority) -> None:
        self._store = store
        self.priority = priority

    def append(self, message: str, file: str, line: int) -> RawEntry:
        """Append an entry with an explicit source location."""
        return self._store.append(self.priority, message, file=file, line=line)

    def log(self, message: str) -> RawEntry:
        """Append an entry located at the caller's file and line."""
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        try:
            if caller is None:
                return self.append(message, "", 0)
            return self.append(message, caller.f_code.co_filename, caller.f_lineno)
        finally:
            del frame, caller


def tier_sinks(store: PriorityBufferStore) -> dict[Priority, TierSink]:
    """Create one sink per priority for the given store."""
    return {priority: TierSink(store, priority) for priority in Priority}


class ConsoleMirror:
    """Observer that writes each stored entry as one line of text.

    Lines look like ``INFO main.py:12 service started``.

    Args:
        stream: Where to write. Defaults to sys.stdout at write time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def __call__(self, priority: Priority, entry: RawEntry) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        label = priority.name
        print(f"{label} {entry.file}:{entry.line} {entry.message}", file=stream)
