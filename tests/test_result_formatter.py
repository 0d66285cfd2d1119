from rhyme_finder.app.data.datamuse import LookupKind
from rhyme_finder.app.services.result_formatter import (
    FAILED_STATUS,
    IDLE_MESSAGE,
    LOADING_PLACEHOLDER,
    NO_RESULTS_PLACEHOLDER,
    ResultFormatter,
)
from rhyme_finder.app.services.session import LookupView, SavedWords, ViewState
from rhyme_finder.core import WordResult


formatter = ResultFormatter()


def test_idle_view():
    assert formatter.format_view(None) == IDLE_MESSAGE


def test_loading_view_shows_heading_and_placeholder():
    view = LookupView(kind=LookupKind.RHYME, query="cat", sequence=1)

    rendered = formatter.format_view(view)

    assert rendered.startswith("## Words that rhyme with cat")
    assert LOADING_PLACEHOLDER in rendered
    assert NO_RESULTS_PLACEHOLDER not in rendered


def test_empty_and_failed_views_show_no_results():
    empty = LookupView(kind=LookupKind.MEANS_LIKE, query="xyzzy", sequence=1, state=ViewState.READY)
    failed = LookupView(kind=LookupKind.RHYME, query="cat", sequence=2, state=ViewState.FAILED)

    for view in (empty, failed):
        rendered = formatter.format_view(view)
        assert NO_RESULTS_PLACEHOLDER in rendered
        assert LOADING_PLACEHOLDER not in rendered


def test_grouped_view_renders_syllable_sections_in_order():
    cat, hat, elephant = (
        WordResult(word="cat", num_syllables=1),
        WordResult(word="hat", num_syllables=1),
        WordResult(word="elephant", num_syllables=3),
    )
    view = LookupView(
        kind=LookupKind.RHYME,
        query="bat",
        sequence=1,
        state=ViewState.READY,
        groups={1: [cat, hat], 3: [elephant]},
        results=[cat, hat, elephant],
    )

    rendered = formatter.format_view(view)

    assert rendered == (
        "## Words that rhyme with bat\n"
        "\n"
        "### Syllables: 1\n"
        "- cat\n"
        "- hat\n"
        "\n"
        "### Syllables: 3\n"
        "- elephant\n"
    )


def test_flat_view_renders_single_list():
    view = LookupView(
        kind=LookupKind.MEANS_LIKE,
        query="cat",
        sequence=1,
        state=ViewState.READY,
        results=[WordResult(word="feline"), WordResult(word="kitty")],
    )

    rendered = formatter.format_view(view)

    assert "Syllables" not in rendered
    assert rendered.endswith("- feline\n- kitty\n")


def test_words_and_query_are_escaped():
    view = LookupView(
        kind=LookupKind.MEANS_LIKE,
        query="<b>",
        sequence=1,
        state=ViewState.READY,
        results=[WordResult(word="<script>")],
    )

    rendered = formatter.format_view(view)

    assert "<script>" not in rendered
    assert "&lt;script&gt;" in rendered
    assert "&lt;b&gt;" in rendered


def test_saved_words_display():
    saved = SavedWords()
    assert formatter.format_saved(saved) == "**Saved words:** (none)"

    saved.add("hat")
    saved.add("feline")

    assert formatter.format_saved(saved) == "**Saved words:** hat,feline"


def test_failed_view_adds_status_line_that_empty_view_lacks():
    empty = LookupView(kind=LookupKind.RHYME, query="cat", sequence=1, state=ViewState.READY)
    failed = LookupView(kind=LookupKind.RHYME, query="cat", sequence=1, state=ViewState.FAILED)

    empty_rendered = formatter.format_view(empty)
    failed_rendered = formatter.format_view(failed)

    assert empty_rendered != failed_rendered
    assert FAILED_STATUS in failed_rendered
    assert FAILED_STATUS not in empty_rendered
