"""Lookup orchestration: request words, group them and track the session."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from rhyme_finder.core import LookupFailed, group_by
from rhyme_finder.utils.observability import get_logger

from ..data.datamuse import DatamuseClient, LookupKind
from .result_formatter import ResultFormatter
from .session import LookupSession, LookupView, ViewState

SYLLABLE_FIELD = "num_syllables"


class LookupService:
    """Run word lookups on behalf of a page session."""

    def __init__(
        self,
        *,
        client: DatamuseClient,
        formatter: Optional[ResultFormatter] = None,
    ) -> None:
        self.client = client
        self.formatter = formatter or ResultFormatter()
        self._logger = get_logger(__name__).bind(component="lookup_service")

    # Public API ------------------------------------------------------------
    def begin(self, session: LookupSession, kind: LookupKind, word: str) -> Optional[LookupView]:
        """Start a lookup and install its loading view.

        A blank query clears the results region and returns ``None`` without
        issuing a request.
        """

        query = (word or "").strip()
        if not query:
            # Supersede any lookup still in flight.
            session.next_sequence()
            session.clear()
            return None

        view = LookupView(
            kind=LookupKind(kind),
            query=query,
            sequence=session.next_sequence(),
        )
        session.accept(view)
        self._logger.info(
            "Lookup started",
            context={"kind": view.kind.label, "query": query, "sequence": view.sequence},
        )
        return view

    def resolve(self, session: LookupSession, ticket: LookupView) -> Optional[LookupView]:
        """Complete the lookup started by ``ticket``.

        Lookup failures are logged and rendered as an empty ``failed`` view.
        If a newer lookup began meanwhile, the response is discarded and the
        session's current view is returned instead.
        """

        try:
            results = self.client.fetch(ticket.kind, ticket.query)
        except LookupFailed as exc:
            self._logger.error(
                "Lookup could not be completed",
                context={
                    "kind": ticket.kind.label,
                    "query": ticket.query,
                    "sequence": ticket.sequence,
                    "error": exc.reason,
                },
            )
            view = replace(ticket, state=ViewState.FAILED, groups={}, results=[])
        else:
            groups = group_by(results, SYLLABLE_FIELD) if ticket.kind is LookupKind.RHYME else {}
            view = replace(ticket, state=ViewState.READY, groups=groups, results=results)

        if not session.accept(view):
            self._logger.info(
                "Discarding stale lookup response",
                context={"sequence": ticket.sequence, "latest": session.sequence},
            )
            return session.current_view
        return view

    def lookup(self, session: LookupSession, kind: LookupKind, word: str) -> Optional[LookupView]:
        ticket = self.begin(session, kind, word)
        if ticket is None:
            return None
        return self.resolve(session, ticket)

    def show_rhymes(self, session: LookupSession, word: str) -> Optional[LookupView]:
        return self.lookup(session, LookupKind.RHYME, word)

    def show_similar(self, session: LookupSession, word: str) -> Optional[LookupView]:
        return self.lookup(session, LookupKind.MEANS_LIKE, word)

    def save_word(self, session: LookupSession, word: str) -> str:
        display = session.saved.add(word)
        self._logger.debug("Word saved", context={"word": word, "saved_count": len(session.saved)})
        return display

    def format_view(self, view: Optional[LookupView]) -> str:
        return self.formatter.format_view(view)

    def format_saved(self, session: LookupSession) -> str:
        return self.formatter.format_saved(session.saved)


__all__ = ["LookupService", "SYLLABLE_FIELD"]
