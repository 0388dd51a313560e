"""JSON document encoder for log aggregates."""

import json
from collections.abc import Iterable
from typing import Any

from tierlog.core.errors import EncodingError
from tierlog.core.models import LogEntry, Priority

# No whitespace between tokens
_SEPARATORS = (",", ":")


def _entry_to_dict(entry: LogEntry) -> dict[str, Any]:
    return {
        "timestamp": entry.timestamp,
        "priority": entry.priority.value,
        "file": entry.file,
        "line": entry.line,
        "message": entry.message,
        "counter": entry.counter,
    }


def encode_log(entries: Iterable[LogEntry]) -> str:
    """Encode log entries as a single JSON document.

    Args:
        entries: An iterable of LogEntry objects.

    Returns:
        Compact JSON of the form ``{"entries":[...]}``. Non-ASCII text is
        kept as-is, so the byte size is the UTF-8 length of the result.

    Raises:
        EncodingError: If the document is not representable as UTF-8.
    """
    document = {"entries": [_entry_to_dict(entry) for entry in entries]}
    text = json.dumps(document, ensure_ascii=False, separators=_SEPARATORS)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"log document is not valid UTF-8: {e}") from e
    return text


def encoded_size(text: str) -> int:
    """Return the size of an encoded document in UTF-8 bytes."""
    return len(text.encode("utf-8"))


def decode_log(text: str) -> list[LogEntry]:
    """Decode a document produced by encode_log back into entries.

    Raises:
        EncodingError: If the text is not a well-formed log document.
    """
    try:
        document = json.loads(text)
        return [
            LogEntry(
                timestamp=int(item["timestamp"]),
                priority=Priority(item["priority"]),
                file=str(item["file"]),
                line=int(item["line"]),
                message=str(item["message"]),
                counter=int(item["counter"]),
            )
            for item in document["entries"]
        ]
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise EncodingError(f"malformed log document: {e}") from e
