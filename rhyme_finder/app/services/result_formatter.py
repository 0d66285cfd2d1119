"""Markdown rendering for lookup views and the saved-words list."""

from __future__ import annotations

from html import escape
from typing import Iterable, List, Optional

from rhyme_finder.core import WordResult

from .session import LookupView, SavedWords, ViewState

LOADING_PLACEHOLDER = "Loading..."
NO_RESULTS_PLACEHOLDER = "(no results)"
FAILED_STATUS = "_Lookup failed; try again._"
IDLE_MESSAGE = "Enter a word and choose **Show rhymes** or **Show synonyms**."


class ResultFormatter:
    """Render lookup views the way the results region displays them."""

    def format_view(self, view: Optional[LookupView]) -> str:
        if view is None:
            return IDLE_MESSAGE

        lines: List[str] = [f"## {escape(view.heading)}", ""]

        if view.state is ViewState.LOADING:
            lines.append(f"### {LOADING_PLACEHOLDER}")
            return "\n".join(lines)

        if view.state is ViewState.FAILED or view.is_empty:
            lines.append(f"### {NO_RESULTS_PLACEHOLDER}")
            if view.state is ViewState.FAILED:
                lines.extend(["", FAILED_STATUS])
            return "\n".join(lines)

        if view.is_grouped:
            for syllables, bucket in view.groups.items():
                lines.append(f"### Syllables: {syllables}")
                lines.extend(self._bullets(bucket))
                lines.append("")
        else:
            lines.extend(self._bullets(view.results))

        return "\n".join(lines).rstrip() + "\n"

    def format_saved(self, saved: SavedWords) -> str:
        display = saved.display()
        return f"**Saved words:** {escape(display) if display else '(none)'}"

    @staticmethod
    def _bullets(entries: Iterable[WordResult]) -> List[str]:
        return [f"- {escape(entry.word)}" for entry in entries]


__all__ = [
    "ResultFormatter",
    "LOADING_PLACEHOLDER",
    "NO_RESULTS_PLACEHOLDER",
    "FAILED_STATUS",
    "IDLE_MESSAGE",
]
