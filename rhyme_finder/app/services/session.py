"""Per-page session state: the saved-words list and the current results view."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional

from rhyme_finder.core import WordResult

from ..data.datamuse import LookupKind


class ViewState(str, enum.Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


_HEADINGS = {
    LookupKind.RHYME: "Words that rhyme with {query}",
    LookupKind.MEANS_LIKE: "Words with a similar meaning to {query}",
}


@dataclass
class LookupView:
    """What the results region shows for one lookup."""

    kind: LookupKind
    query: str
    sequence: int
    state: ViewState = ViewState.LOADING
    groups: Dict[Hashable, List[WordResult]] = field(default_factory=dict)
    results: List[WordResult] = field(default_factory=list)

    @property
    def heading(self) -> str:
        return _HEADINGS[self.kind].format(query=self.query)

    @property
    def is_grouped(self) -> bool:
        return self.kind is LookupKind.RHYME

    @property
    def is_empty(self) -> bool:
        return not self.results

    def words(self) -> List[str]:
        """Result words in display order, group by group for rhymes."""

        if self.is_grouped:
            return [entry.word for bucket in self.groups.values() for entry in bucket]
        return [entry.word for entry in self.results]


class SavedWords:
    """Append-only list of words the user chose to keep."""

    separator = ","

    def __init__(self) -> None:
        self._words: List[str] = []

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> List[str]:
        return list(self._words)

    def add(self, word: str) -> str:
        """Append ``word`` (duplicates allowed) and return the updated display."""

        cleaned = (word or "").strip()
        if cleaned:
            self._words.append(cleaned)
        return self.display()

    def display(self) -> str:
        return self.separator.join(self._words)


@dataclass
class LookupSession:
    """State owned by one page session and passed to every handler."""

    saved: SavedWords = field(default_factory=SavedWords)
    sequence: int = 0
    current_view: Optional[LookupView] = None

    def next_sequence(self) -> int:
        self.sequence += 1
        return self.sequence

    def accept(self, view: LookupView) -> bool:
        """Install ``view`` unless a newer lookup has started since it was issued."""

        if view.sequence != self.sequence:
            return False
        self.current_view = view
        return True

    def clear(self) -> None:
        self.current_view = None


__all__ = ["LookupSession", "LookupView", "SavedWords", "ViewState"]
