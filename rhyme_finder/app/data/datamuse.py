"""HTTP client for the Datamuse word-lookup API."""

from __future__ import annotations

import enum
import time
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

from rhyme_finder.core import LookupFailed, ResponseDecodeError, WordResult, decode_word_results
from rhyme_finder.utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

DEFAULT_BASE_URL = "https://api.datamuse.com"
DEFAULT_TIMEOUT = 10.0


class LookupKind(str, enum.Enum):
    """Lookup relations supported by the page, valued by their query parameter."""

    RHYME = "rel_rhy"
    MEANS_LIKE = "ml"

    @property
    def label(self) -> str:
        return "rhyme" if self is LookupKind.RHYME else "means_like"


_REQUESTS_TOTAL = create_counter(
    "rhyme_finder_lookup_requests_total",
    "Word lookups sent to the lookup service.",
    label_names=("kind",),
)
_FAILURES_TOTAL = create_counter(
    "rhyme_finder_lookup_failures_total",
    "Word lookups that failed at the service boundary.",
    label_names=("kind", "reason"),
)
_LATENCY_SECONDS = create_histogram(
    "rhyme_finder_lookup_seconds",
    "Latency of word lookups, including decoding.",
    label_names=("kind",),
)


class DatamuseClient:
    """Fetch rhymes and similar-meaning words from Datamuse."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_results: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = max(0.1, float(timeout))
        self.max_results = max_results if max_results and max_results > 0 else None
        self._session = session or requests.Session()
        self._logger = get_logger(__name__).bind(
            component="datamuse_client",
            base_url=self.base_url,
        )

    # Public API ------------------------------------------------------------
    def build_url(self, kind: LookupKind, word: str) -> str:
        """Return the request URL for ``kind`` lookups of ``word``."""

        params: Dict[str, Any] = {LookupKind(kind).value: word}
        if self.max_results is not None:
            params["max"] = self.max_results
        return f"{self.base_url}/words?{urlencode(params)}"

    def fetch(self, kind: LookupKind, word: str) -> List[WordResult]:
        """Run one lookup and decode the response.

        Every failure (transport, HTTP status, JSON or record shape) surfaces
        as :class:`LookupFailed` with the original error chained.
        """

        kind = LookupKind(kind)
        url = self.build_url(kind, word)
        _REQUESTS_TOTAL.labels(kind=kind.label).inc()
        started = time.perf_counter()

        with start_span("datamuse.fetch", {"lookup.kind": kind.label, "lookup.word": word}) as span:
            try:
                results = self._get_results(kind, word, url)
            except LookupFailed as exc:
                _FAILURES_TOTAL.labels(kind=kind.label, reason=type(exc.__cause__).__name__).inc()
                record_exception(span, exc)
                self._logger.warning(
                    "Lookup failed",
                    context={"kind": kind.label, "word": word, "error": exc.reason},
                )
                raise
            finally:
                _LATENCY_SECONDS.labels(kind=kind.label).observe(time.perf_counter() - started)

            add_span_attributes(span, {"lookup.result_count": len(results)})

        self._logger.info(
            "Lookup completed",
            context={
                "kind": kind.label,
                "word": word,
                "result_count": len(results),
                "elapsed": round(time.perf_counter() - started, 4),
            },
        )
        return results

    def rhymes(self, word: str) -> List[WordResult]:
        return self.fetch(LookupKind.RHYME, word)

    def means_like(self, word: str) -> List[WordResult]:
        return self.fetch(LookupKind.MEANS_LIKE, word)

    def close(self) -> None:
        self._session.close()

    # Internal helpers ------------------------------------------------------
    def _get_results(self, kind: LookupKind, word: str, url: str) -> List[WordResult]:
        self._logger.debug("Sending lookup request", context={"url": url})
        try:
            response = self._session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise LookupFailed(kind.label, word, str(exc)) from exc
        except ValueError as exc:
            raise LookupFailed(kind.label, word, f"invalid JSON body: {exc}") from exc

        try:
            return decode_word_results(
                payload,
                estimate_syllables=kind is LookupKind.RHYME,
            )
        except ResponseDecodeError as exc:
            raise LookupFailed(kind.label, word, str(exc)) from exc


__all__ = ["DatamuseClient", "LookupKind", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT"]
