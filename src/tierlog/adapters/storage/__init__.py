"""Storage adapters implementing core ports."""

from tierlog.adapters.storage.ring_buffer import (
    DEFAULT_CAPACITY,
    PriorityBufferStore,
    RingBuffer,
)

__all__ = [
    "DEFAULT_CAPACITY",
    "PriorityBufferStore",
    "RingBuffer",
]
