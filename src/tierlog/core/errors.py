"""Exceptions raised by tierlog."""


class TierlogError(Exception):
    """Base class for all tierlog errors."""


class ParseError(TierlogError, ValueError):
    """Raised when a priority or sort token is not recognized.

    Attributes:
        kind: What was being parsed (e.g. "priority", "sort order").
        token: The text that could not be parsed.
    """

    def __init__(self, kind: str, token: str) -> None:
        self.kind = kind
        self.token = token
        super().__init__(f"could not recognize {kind}: {token!r}")


class EncodingError(TierlogError):
    """Raised when a log document cannot be encoded or decoded."""
