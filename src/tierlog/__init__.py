"""tierlog - priority-tiered in-process logs with size-bounded export.

Core types and helpers are re-exported here. The FastAPI router lives in
tierlog.adapters.frameworks.fastapi so FastAPI stays an optional extra.
"""

from tierlog.adapters.logging import TieredLogHandler
from tierlog.adapters.sinks import ConsoleMirror, TierSink, tier_sinks
from tierlog.adapters.storage.ring_buffer import (
    DEFAULT_CAPACITY,
    PriorityBufferStore,
    RingBuffer,
)
from tierlog.core.aggregate import LogAggregate
from tierlog.core.encoding.bounded import serialize_bounded
from tierlog.core.encoding.json_document import decode_log, encode_log, encoded_size
from tierlog.core.errors import EncodingError, ParseError, TierlogError
from tierlog.core.models import LogEntry, Priority, RawEntry, Sort
from tierlog.core.ports import EntryObserver, LogExportPort

__all__ = [
    "DEFAULT_CAPACITY",
    "ConsoleMirror",
    "EncodingError",
    "EntryObserver",
    "LogAggregate",
    "LogEntry",
    "LogExportPort",
    "ParseError",
    "PriorityBufferStore",
    "Priority",
    "RawEntry",
    "RingBuffer",
    "Sort",
    "TierSink",
    "TieredLogHandler",
    "TierlogError",
    "decode_log",
    "encode_log",
    "encoded_size",
    "serialize_bounded",
    "tier_sinks",
]
