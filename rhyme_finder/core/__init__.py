"""Core data handling for Rhyme Finder: grouping and typed lookup records."""

from .errors import (
    InvalidKeySelector,
    LookupFailed,
    ResponseDecodeError,
    RhymeFinderError,
)
from .grouping import KeySelector, group_by, resolve_key, sort_group_keys
from .records import WordResult, decode_word_results

__all__ = [
    "RhymeFinderError",
    "InvalidKeySelector",
    "ResponseDecodeError",
    "LookupFailed",
    "KeySelector",
    "group_by",
    "resolve_key",
    "sort_group_keys",
    "WordResult",
    "decode_word_results",
]
