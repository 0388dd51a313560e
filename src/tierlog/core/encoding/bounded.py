"""Size-bounded serialization of log entries.

The encoded size of a prefix of entries never shrinks as the prefix grows,
so the largest prefix that fits a byte budget can be found by binary search
over the prefix length instead of trying every length in turn. An encoder
that could shrink when entries are added (e.g. one that compresses) breaks
that search.
"""

import logging
from collections.abc import Callable, Sequence

from tierlog.core.encoding.json_document import encode_log, encoded_size
from tierlog.core.errors import EncodingError
from tierlog.core.models import LogEntry

logger = logging.getLogger(__name__)

Encoder = Callable[[Sequence[LogEntry]], str]


def _safe_encode(encode: Encoder, entries: Sequence[LogEntry]) -> str:
    """Encode entries, returning an empty string if encoding fails."""
    try:
        return encode(entries)
    except (EncodingError, TypeError, ValueError):
        logger.warning(
            "Failed to encode %d log entries, substituting empty payload",
            len(entries),
            exc_info=True,
        )
        return ""


def serialize_bounded(
    entries: Sequence[LogEntry],
    max_bytes: int,
    encode: Encoder = encode_log,
) -> str:
    """Encode the longest prefix of entries that fits within max_bytes.

    Args:
        entries: Entries in the order they should appear. Not modified.
        max_bytes: Budget for the encoded output, in UTF-8 bytes.
        encode: Encoder for a sequence of entries (default: encode_log).

    Returns:
        The full encoding if it fits. Otherwise the encoding of the largest
        fitting prefix, or of the empty prefix when nothing fits, even if
        that still exceeds max_bytes. Never raises.
    """
    full = _safe_encode(encode, entries)
    if encoded_size(full) <= max_bytes or not entries:
        return full

    best: str | None = None
    rejected = full
    left, right = 0, len(entries)
    while left < right:
        mid = left + (right - left) // 2
        candidate = _safe_encode(encode, entries[:mid])
        if encoded_size(candidate) <= max_bytes:
            best = candidate
            left = mid + 1
        else:
            rejected = candidate
            right = mid

    # When nothing fits, the last rejected probe is the empty prefix
    return best if best is not None else rejected
