"""Encoders for log aggregates."""

from tierlog.core.encoding.bounded import serialize_bounded
from tierlog.core.encoding.json_document import decode_log, encode_log, encoded_size

__all__ = [
    "decode_log",
    "encode_log",
    "encoded_size",
    "serialize_bounded",
]
