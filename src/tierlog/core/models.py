"""Core domain models for tiered log aggregation."""

from dataclasses import dataclass
from enum import Enum

from tierlog.core.errors import ParseError


class Priority(Enum):
    """Log tier. Values are the wire names used in encoded documents."""

    INFO = "Info"
    DEBUG = "Debug"
    ERROR = "Error"

    @classmethod
    def parse(cls, text: str) -> "Priority":
        """Parse a priority name case-insensitively.

        Args:
            text: One of "info", "debug" or "error" in any case.

        Raises:
            ParseError: If the text names no priority.
        """
        lowered = text.lower()
        for priority in cls:
            if priority.value.lower() == lowered:
                return priority
        raise ParseError("priority", text)


class Sort(Enum):
    """Timestamp ordering applied to an aggregate before serialization."""

    ASCENDING = "Ascending"
    DESCENDING = "Descending"

    @property
    def token(self) -> str:
        """Short query-string form ("asc" or "desc")."""
        return "asc" if self is Sort.ASCENDING else "desc"

    @classmethod
    def parse(cls, text: str) -> "Sort":
        """Parse "asc" or "desc" case-insensitively.

        Raises:
            ParseError: If the text names no sort order.
        """
        lowered = text.lower()
        for order in cls:
            if order.token == lowered:
                return order
        raise ParseError("sort order", text)


@dataclass(frozen=True)
class RawEntry:
    """An entry as held by a ring buffer, before it is tagged with a tier.

    Attributes:
        timestamp: Clock reading in nanoseconds.
        counter: Per-buffer sequence number, incremented on every append.
        file: Source location label.
        line: Source line number.
        message: The log message.
    """

    timestamp: int
    counter: int
    file: str
    line: int
    message: str


@dataclass(frozen=True)
class LogEntry:
    """A structured log entry tagged with the tier it was exported from.

    Attributes:
        timestamp: Clock reading in nanoseconds.
        priority: Tier the entry came from.
        file: Source location label.
        line: Source line number.
        message: The log message.
        counter: Sequence number within its tier, used to spot gaps.
    """

    timestamp: int
    priority: Priority
    file: str
    line: int
    message: str
    counter: int

    @classmethod
    def from_raw(cls, raw: RawEntry, priority: Priority) -> "LogEntry":
        """Tag a raw buffer entry with its tier."""
        return cls(
            timestamp=raw.timestamp,
            priority=priority,
            file=raw.file,
            line=raw.line,
            message=raw.message,
            counter=raw.counter,
        )
