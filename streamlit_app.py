"""Streamlit front-end for the Rhyme Finder project."""

from __future__ import annotations

import streamlit as st

from rhyme_finder.app.app import RhymeFinderApp
from rhyme_finder.app.services.lookup_service import LookupService
from rhyme_finder.app.services.result_formatter import (
    FAILED_STATUS,
    IDLE_MESSAGE,
    NO_RESULTS_PLACEHOLDER,
)
from rhyme_finder.app.services.session import LookupSession, ViewState


@st.cache_resource(show_spinner=False)
def _load_app() -> RhymeFinderApp:
    """Initialise and cache the core application facade."""

    return RhymeFinderApp()


def _session() -> LookupSession:
    if "lookup_session" not in st.session_state:
        st.session_state.lookup_session = LookupSession()
    return st.session_state.lookup_session


def _render_results(service: LookupService, session: LookupSession) -> None:
    view = session.current_view
    if view is None:
        st.markdown(IDLE_MESSAGE)
        return

    st.subheader(view.heading)
    if view.state is ViewState.FAILED or view.is_empty:
        st.markdown(f"### {NO_RESULTS_PLACEHOLDER}")
        if view.state is ViewState.FAILED:
            st.markdown(FAILED_STATUS)
        return

    sections = list(view.groups.items()) if view.is_grouped else [(None, view.results)]
    for syllables, bucket in sections:
        if syllables is not None:
            st.markdown(f"### Syllables: {syllables}")
        for index, entry in enumerate(bucket):
            word_col, button_col = st.columns([4, 1])
            word_col.write(entry.word)
            button_col.button(
                "(Save)",
                key=f"save-{view.sequence}-{syllables}-{index}",
                on_click=service.save_word,
                args=(session, entry.word),
            )


def main() -> None:
    """Render the interactive Streamlit experience."""

    st.set_page_config(page_title="Rhyme Finder", layout="wide")

    app = _load_app()
    service = app.lookup_service
    session = _session()

    st.title("Rhyme Finder")

    with st.form("word_lookup"):
        word = st.text_input("Word", help="Enter a word to find rhymes or similar words for.")
        rhymes_col, synonyms_col = st.columns(2)
        with rhymes_col:
            show_rhymes = st.form_submit_button("Show rhymes")
        with synonyms_col:
            show_synonyms = st.form_submit_button("Show synonyms")

    if show_rhymes or show_synonyms:
        with st.spinner("Loading..."):
            if show_rhymes:
                service.show_rhymes(session, word)
            else:
                service.show_similar(session, word)

    _render_results(service, session)

    st.divider()
    st.markdown(service.format_saved(session))


if __name__ == "__main__":
    main()
