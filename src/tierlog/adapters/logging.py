"""Python logging handler adapter for tierlog.

This adapter bridges Python's standard library logging module to the
PriorityBufferStore, so records logged anywhere in an application end up
in the matching priority tier.
"""

import logging

from tierlog.adapters.storage.ring_buffer import PriorityBufferStore
from tierlog.core.models import Priority

# Records at or above each level go to the tier; checked highest first
_DEFAULT_LEVEL_MAP: list[tuple[int, Priority]] = [
    (logging.ERROR, Priority.ERROR),
    (logging.INFO, Priority.INFO),
    (logging.NOTSET, Priority.DEBUG),
]

# tierlog's own loggers are skipped so a failing observer cannot feed back
_OWN_LOGGER_PREFIX = "tierlog."

_FORMATTER = logging.Formatter()


class TieredLogHandler(logging.Handler):
    """Logging handler that appends log records to a PriorityBufferStore.

    DEBUG records go to the Debug tier, INFO and WARNING to Info, and
    ERROR and CRITICAL to Error.

    Example:
        ```python
        from tierlog import PriorityBufferStore, TieredLogHandler

        store = PriorityBufferStore()
        handler = TieredLogHandler(store)
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        store: PriorityBufferStore,
        level_map: list[tuple[int, Priority]] | None = None,
    ) -> None:
        """Initialize the handler with a store.

        Args:
            store: Store that receives the entries.
            level_map: (minimum level, tier) pairs checked in order; the
                first pair whose level the record reaches wins. Defaults to
                the mapping described above.
        """
        super().__init__()
        self._store = store
        self._level_map = sorted(
            level_map or _DEFAULT_LEVEL_MAP, key=lambda pair: pair[0], reverse=True
        )

    def priority_for(self, levelno: int) -> Priority:
        """Return the tier a record of the given level is stored in."""
        for threshold, priority in self._level_map:
            if levelno >= threshold:
                return priority
        return self._level_map[-1][1]

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record to the store.

        Args:
            record: The log record to emit.
        """
        if record.name.startswith(_OWN_LOGGER_PREFIX):
            return
        try:
            message = record.getMessage()
            if record.exc_info:
                message = f"{message}\n{_FORMATTER.formatException(record.exc_info)}"
            self._store.append(
                self.priority_for(record.levelno),
                message,
                file=record.pathname,
                line=record.lineno,
            )
        except Exception:
            self.handleError(record)
