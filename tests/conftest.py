import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
import requests

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rhyme_finder.app.data.datamuse import DatamuseClient, LookupKind
from rhyme_finder.core import LookupFailed, WordResult


class FakeResponse:
    """Minimal stand-in for :class:`requests.Response`."""

    def __init__(self, payload: Any = None, *, status_code: int = 200, json_error: Optional[Exception] = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self) -> Any:
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class FakeSession:
    """Records requested URLs and replays queued responses or errors."""

    def __init__(self, *responses: Any) -> None:
        self._responses: List[Any] = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, timeout: Optional[float] = None) -> FakeResponse:
        self.calls.append({"url": url, "timeout": timeout})
        outcome = self._responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True


class FakeClient:
    """Lookup client stub keyed by ``(kind, word)``."""

    def __init__(self, results: Optional[Dict[tuple, Any]] = None) -> None:
        self.results = dict(results or {})
        self.calls: List[tuple] = []
        self.base_url = "https://words.test"
        self.timeout = 1.0
        self.max_results = None

    def fetch(self, kind: LookupKind, word: str) -> List[WordResult]:
        self.calls.append((LookupKind(kind), word))
        outcome = self.results.get((LookupKind(kind), word), [])
        if isinstance(outcome, Exception):
            raise outcome
        return list(outcome)

    def close(self) -> None:
        pass


@pytest.fixture
def rhyme_results() -> List[WordResult]:
    return [
        WordResult(word="hat", score=900, num_syllables=1),
        WordResult(word="habitat", score=700, num_syllables=3),
        WordResult(word="that", score=850, num_syllables=1),
        WordResult(word="combat", score=600, num_syllables=2),
    ]


@pytest.fixture
def fake_client(rhyme_results) -> FakeClient:
    return FakeClient(
        {
            (LookupKind.RHYME, "cat"): rhyme_results,
            (LookupKind.MEANS_LIKE, "cat"): [
                WordResult(word="feline", score=950),
                WordResult(word="kitty", score=900),
            ],
            (LookupKind.RHYME, "orange"): [],
            (LookupKind.RHYME, "boom"): LookupFailed("rhyme", "boom", "connection refused"),
        }
    )


def make_client(*responses: Any, **kwargs: Any) -> tuple:
    session = FakeSession(*responses)
    client = DatamuseClient("https://words.test/", session=session, **kwargs)
    return client, session
