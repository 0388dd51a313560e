"""Port interfaces between the aggregate and its collaborators.

The core depends only on these protocols. The ring buffer store in
``tierlog.adapters.storage`` is the production implementation, and tests
substitute their own.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from tierlog.core.models import Priority, RawEntry


@runtime_checkable
class LogExportPort(Protocol):
    """Port for exporting the retained entries of one tier.

    Examples: PriorityBufferStore, or a fixed list in tests.
    """

    def export(self, priority: Priority) -> Sequence[RawEntry]:
        """Return all retained entries of a tier.

        Returns:
            A consistent snapshot, oldest first, in counter order.
        """
        ...


@runtime_checkable
class EntryObserver(Protocol):
    """Callable notified after an entry has been stored in a tier."""

    def __call__(self, priority: Priority, entry: RawEntry) -> None: ...
