"""Heuristic syllable estimation for words the lookup service leaves uncounted."""

from __future__ import annotations

import re


__all__ = ["estimate_syllable_count"]


_VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]+")
_NON_LETTER_PATTERN = re.compile(r"[^a-z\s]")
_CONSONANT_LE_PATTERN = re.compile(r"[^aeiouy]le$")


def _estimate_token(token: str) -> int:
    count = len(_VOWEL_GROUP_PATTERN.findall(token))
    # Silent trailing "e" ("hate"), but not "-le" after a consonant ("table").
    silent_e = token.endswith("e") and not token.endswith(("ee", "ye"))
    if silent_e and not _CONSONANT_LE_PATTERN.search(token) and count > 1:
        count -= 1
    return max(1, count)


def estimate_syllable_count(word: str) -> int:
    """Estimate the syllables in ``word``; multi-word phrases sum their tokens."""

    tokens = _NON_LETTER_PATTERN.sub(" ", word.lower()).split()
    if not tokens:
        return 0
    return sum(_estimate_token(token) for token in tokens)
