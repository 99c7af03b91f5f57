"""Domain-level error type shown to users when a fetch fails.

Adapters raise transport-specific exceptions; the use-case layer maps them
into ``FetchError`` so nothing above it depends on ``requests``.
"""

from __future__ import annotations


class FetchError(Exception):
    """User-presentable fetch failure with a stable ``code``."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FetchError):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def __repr__(self) -> str:
        return f"FetchError({self.code!r}, {self.message!r})"


__all__ = ["FetchError"]
