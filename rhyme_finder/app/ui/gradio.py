"""User interface assembly for the Gradio front-end."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

import gradio as gr

from ..data.datamuse import LookupKind
from ..services.lookup_service import LookupService
from ..services.session import LookupSession


def lookup_updates(
    service: LookupService,
    kind: LookupKind,
    word: Optional[str],
    session: LookupSession,
    *,
    keep_on_blank: bool = False,
) -> Iterator[Tuple[str, List[str]]]:
    """Yield ``(results markdown, pickable words)`` as a lookup progresses.

    The first update shows the loading placeholder; the second the finished
    view. A blank query yields a single cleared update, or re-renders the
    current view untouched when ``keep_on_blank`` is set.
    """

    if keep_on_blank and not (word or "").strip():
        current = session.current_view
        yield service.format_view(current), current.words() if current is not None else []
        return

    ticket = service.begin(session, kind, word or "")
    if ticket is None:
        yield service.format_view(None), []
        return

    yield service.format_view(ticket), []

    view = service.resolve(session, ticket)
    yield service.format_view(view), view.words() if view is not None else []


def save_selected(service: LookupService, word: Optional[str], session: LookupSession) -> str:
    """Append the picked word, if any, and return the saved-words markdown."""

    if word:
        service.save_word(session, word)
    return service.format_saved(session)


def create_interface(lookup_service: LookupService) -> gr.Blocks:
    """Construct the interactive Gradio Blocks UI."""

    def _run(kind: LookupKind, *, keep_on_blank: bool = False):
        def handler(word: str, session: LookupSession):
            updates = lookup_updates(
                lookup_service, kind, word, session, keep_on_blank=keep_on_blank
            )
            for markdown, words in updates:
                yield markdown, gr.update(choices=words, value=None), session

        return handler

    def _save(word: Optional[str], session: LookupSession):
        return save_selected(lookup_service, word, session), session

    with gr.Blocks(title="Rhyme Finder") as interface:
        session_state = gr.State(LookupSession())

        gr.Markdown("## Rhyme Finder\nFind rhymes or similar words and keep the ones you like.")

        with gr.Row():
            word_input = gr.Textbox(
                label="Word",
                placeholder="Enter a word (e.g., cat, ocean, bright)",
                lines=1,
                scale=3,
            )
            rhymes_btn = gr.Button("Show rhymes", variant="primary", scale=1)
            synonyms_btn = gr.Button("Show synonyms", scale=1)

        with gr.Row():
            with gr.Column(scale=2):
                results_md = gr.Markdown(value=lookup_service.format_view(None))
            with gr.Column(scale=1):
                word_picker = gr.Dropdown(
                    choices=[],
                    value=None,
                    label="Result word",
                    info="Pick a word from the results to save it",
                    interactive=True,
                )
                save_btn = gr.Button("(Save)")
                saved_md = gr.Markdown(value=lookup_service.format_saved(LookupSession()))

        lookup_outputs = [results_md, word_picker, session_state]

        rhymes_btn.click(
            fn=_run(LookupKind.RHYME),
            inputs=[word_input, session_state],
            outputs=lookup_outputs,
        )
        word_input.submit(
            fn=_run(LookupKind.RHYME, keep_on_blank=True),
            inputs=[word_input, session_state],
            outputs=lookup_outputs,
        )
        synonyms_btn.click(
            fn=_run(LookupKind.MEANS_LIKE),
            inputs=[word_input, session_state],
            outputs=lookup_outputs,
        )
        save_btn.click(
            fn=_save,
            inputs=[word_picker, session_state],
            outputs=[saved_md, session_state],
        )

    return interface


__all__ = ["create_interface", "lookup_updates", "save_selected"]
