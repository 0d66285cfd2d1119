"""Exception hierarchy for the Rhyme Finder project."""

from __future__ import annotations

from typing import Optional


class RhymeFinderError(Exception):
    """Base class for every error raised by :mod:`rhyme_finder`."""


class InvalidKeySelector(RhymeFinderError, TypeError):
    """Raised when a grouping key is neither a field name nor a callable."""

    def __init__(self, selector: object) -> None:
        super().__init__(
            "group key must be a field name or a callable, "
            f"got {type(selector).__name__}: {selector!r}"
        )
        self.selector = selector


class ResponseDecodeError(RhymeFinderError, ValueError):
    """Raised when a lookup payload does not match the expected record shape."""

    def __init__(self, message: str, *, index: Optional[int] = None) -> None:
        if index is not None:
            message = f"result #{index}: {message}"
        super().__init__(message)
        self.index = index


class LookupFailed(RhymeFinderError):
    """Raised when a word lookup cannot produce a decoded result list."""

    def __init__(self, kind: str, word: str, reason: str) -> None:
        super().__init__(f"{kind} lookup for {word!r} failed: {reason}")
        self.kind = kind
        self.word = word
        self.reason = reason


__all__ = [
    "RhymeFinderError",
    "InvalidKeySelector",
    "ResponseDecodeError",
    "LookupFailed",
]
