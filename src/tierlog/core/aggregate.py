"""Log aggregate: merges tier exports into one ordered, serializable list."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from tierlog.core.encoding.bounded import serialize_bounded
from tierlog.core.encoding.json_document import encode_log
from tierlog.core.models import LogEntry, Priority, Sort
from tierlog.core.ports import LogExportPort

# Fixed order used by push_all; pre-sort order is grouped by tier, not time
TIER_ORDER = (Priority.INFO, Priority.DEBUG, Priority.ERROR)


@dataclass
class LogAggregate:
    """Entries collected from one or more tiers for a single request.

    Create one per request, populate it from a store, optionally filter and
    sort it, serialize it, then drop it.

    Example:
        ```python
        aggregate = LogAggregate()
        aggregate.push_all(store)
        aggregate.sort(Sort.DESCENDING)
        body = aggregate.serialize(max_bytes=1_900_000)
        ```
    """

    entries: list[LogEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def push_tier(self, store: LogExportPort, priority: Priority) -> None:
        """Append every retained entry of one tier, in export order.

        Args:
            store: Source of raw entries.
            priority: Tier to export. Each entry is tagged with it.
        """
        for raw in store.export(priority):
            self.entries.append(LogEntry.from_raw(raw, priority))

    def push_all(self, store: LogExportPort) -> None:
        """Append the Info, Debug and Error tiers, in that order."""
        for priority in TIER_ORDER:
            self.push_tier(store, priority)

    def filter_since(self, timestamp: int) -> None:
        """Keep only entries with timestamp > the given value."""
        self.entries = [e for e in self.entries if e.timestamp > timestamp]

    def sort(self, order: Sort, by_counter: bool = False) -> None:
        """Sort entries by timestamp in the given direction.

        The sort is stable, so entries with equal timestamps keep their
        current relative order unless by_counter is set, in which case the
        counter is used as a secondary key in the same direction.
        """
        if order is Sort.ASCENDING:
            self.sort_asc(by_counter)
        else:
            self.sort_desc(by_counter)

    def sort_asc(self, by_counter: bool = False) -> None:
        """Sort entries oldest first."""
        self.entries.sort(key=_sort_key(by_counter))

    def sort_desc(self, by_counter: bool = False) -> None:
        """Sort entries newest first."""
        # reverse=True keeps equal keys in their current relative order
        self.entries.sort(key=_sort_key(by_counter), reverse=True)

    def encode(self) -> str:
        """Encode every entry, ignoring any size limit."""
        return encode_log(self.entries)

    def serialize(self, max_bytes: int) -> str:
        """Encode as many leading entries as fit within max_bytes.

        See serialize_bounded for the exact contract. The aggregate is not
        modified.
        """
        return serialize_bounded(self.entries, max_bytes)


def _sort_key(by_counter: bool) -> Callable[[LogEntry], Any]:
    if by_counter:
        return lambda e: (e.timestamp, e.counter)
    return lambda e: e.timestamp
