"""Application wiring for the Rhyme Finder project."""

from __future__ import annotations

from typing import Optional

if __package__ in {None, ""}:
    import sys
    from pathlib import Path

    repo_root = Path(__file__).resolve().parents[2]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from rhyme_finder.utils.logging_config import configure_logging
from rhyme_finder.utils.observability import get_logger

from rhyme_finder.app.data.datamuse import DatamuseClient, LookupKind
from rhyme_finder.app.services.lookup_service import LookupService
from rhyme_finder.app.services.session import LookupSession, LookupView
from rhyme_finder.app.settings import AppSettings


class RhymeFinderApp:
    """High-level application facade bundling dependencies."""

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        *,
        client: Optional[DatamuseClient] = None,
        lookup_service: Optional[LookupService] = None,
    ) -> None:
        self.settings = settings or AppSettings.from_env()
        self._logger = get_logger(__name__).bind(component="app_facade")

        self.client = client or DatamuseClient(
            self.settings.api_url,
            timeout=self.settings.timeout,
            max_results=self.settings.max_results,
        )
        self.lookup_service = lookup_service or LookupService(client=self.client)

        self._logger.info(
            "Application dependencies wired",
            context={
                "api_url": self.client.base_url,
                "timeout": self.client.timeout,
                "max_results": self.client.max_results,
            },
        )

    # Public API ------------------------------------------------------------
    def new_session(self) -> LookupSession:
        return LookupSession()

    def lookup(self, session: LookupSession, kind: LookupKind, word: str) -> Optional[LookupView]:
        return self.lookup_service.lookup(session, kind, word)

    def create_gradio_interface(self):
        from rhyme_finder.app.ui.gradio import create_interface

        return create_interface(self.lookup_service)

    def close(self) -> None:
        self.client.close()


def main() -> None:
    settings = AppSettings.from_env()
    configure_logging(settings.log_level)

    app = RhymeFinderApp(settings)
    interface = app.create_gradio_interface()
    interface.launch(
        server_name=settings.server_name,
        server_port=settings.server_port,
        share=settings.share,
    )


__all__ = ["RhymeFinderApp", "main"]


if __name__ == "__main__":
    main()
