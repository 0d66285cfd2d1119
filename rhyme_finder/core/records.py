"""Typed word records decoded from lookup service responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..utils.syllables import estimate_syllable_count
from .errors import ResponseDecodeError


@dataclass(frozen=True)
class WordResult:
    """One word returned by the lookup service."""

    word: str
    score: Optional[int] = None
    num_syllables: Optional[int] = None
    syllables_estimated: bool = False
    tags: Tuple[str, ...] = ()


def _optional_int(item: Dict[str, Any], field: str, index: int) -> Optional[int]:
    value = item.get(field)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ResponseDecodeError(
            f"{field!r} must be an integer, got {type(value).__name__}",
            index=index,
        )
    return value


def _decode_word_result(item: Any, *, index: int = 0, estimate_syllables: bool = False) -> WordResult:
    """Decode a single JSON object into a :class:`WordResult`."""

    if not isinstance(item, dict):
        raise ResponseDecodeError(
            f"expected an object, got {type(item).__name__}",
            index=index,
        )

    word = item.get("word")
    if not isinstance(word, str) or not word.strip():
        raise ResponseDecodeError("missing or empty 'word' field", index=index)

    score = _optional_int(item, "score", index)
    num_syllables = _optional_int(item, "numSyllables", index)
    if num_syllables is not None and num_syllables < 0:
        raise ResponseDecodeError("'numSyllables' must not be negative", index=index)

    estimated = False
    if num_syllables is None and estimate_syllables:
        num_syllables = estimate_syllable_count(word)
        estimated = True

    raw_tags = item.get("tags") or []
    if not isinstance(raw_tags, list):
        raise ResponseDecodeError("'tags' must be a list", index=index)
    tags = tuple(str(tag) for tag in raw_tags)

    return WordResult(
        word=word,
        score=score,
        num_syllables=num_syllables,
        syllables_estimated=estimated,
        tags=tags,
    )


def decode_word_results(payload: Any, *, estimate_syllables: bool = False) -> List[WordResult]:
    """Decode a lookup response body into typed records.

    ``payload`` must be the parsed JSON array. When ``estimate_syllables`` is
    set, records without ``numSyllables`` get a heuristic count and are
    flagged with ``syllables_estimated``.
    """

    if not isinstance(payload, list):
        raise ResponseDecodeError(
            f"expected a JSON array, got {type(payload).__name__}"
        )
    return [
        _decode_word_result(item, index=index, estimate_syllables=estimate_syllables)
        for index, item in enumerate(payload)
    ]


__all__ = ["WordResult", "decode_word_results"]
