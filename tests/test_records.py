import pytest

from rhyme_finder.core import ResponseDecodeError, WordResult, decode_word_results
from rhyme_finder.utils.syllables import estimate_syllable_count


def test_decodes_service_payload():
    payload = [
        {"word": "hat", "score": 1234, "numSyllables": 1},
        {"word": "cravat", "score": 900, "numSyllables": 2, "tags": ["n"]},
    ]

    results = decode_word_results(payload)

    assert results == [
        WordResult(word="hat", score=1234, num_syllables=1),
        WordResult(word="cravat", score=900, num_syllables=2, tags=("n",)),
    ]


def test_optional_fields_default_when_absent():
    (result,) = decode_word_results([{"word": "feline"}])

    assert result.num_syllables is None
    assert result.score is None
    assert result.tags == ()
    assert result.syllables_estimated is False


def test_missing_syllables_are_estimated_on_request():
    (result,) = decode_word_results([{"word": "elephant"}], estimate_syllables=True)

    assert result.num_syllables == 3
    assert result.syllables_estimated is True


def test_provided_syllables_are_not_overridden_by_estimation():
    (result,) = decode_word_results([{"word": "fire", "numSyllables": 2}], estimate_syllables=True)

    assert result.num_syllables == 2
    assert result.syllables_estimated is False


@pytest.mark.parametrize(
    "payload",
    [
        {"word": "hat"},
        "hat",
        None,
    ],
)
def test_non_array_payload_is_rejected(payload):
    with pytest.raises(ResponseDecodeError, match="JSON array"):
        decode_word_results(payload)


@pytest.mark.parametrize(
    "item, message",
    [
        ({"score": 10}, "'word'"),
        ({"word": ""}, "'word'"),
        ({"word": 42}, "'word'"),
        ("hat", "expected an object"),
        ({"word": "hat", "numSyllables": "one"}, "'numSyllables' must be an integer"),
        ({"word": "hat", "numSyllables": True}, "'numSyllables' must be an integer"),
        ({"word": "hat", "numSyllables": -1}, "must not be negative"),
        ({"word": "hat", "score": 1.5}, "'score' must be an integer"),
        ({"word": "hat", "tags": "n"}, "'tags' must be a list"),
    ],
)
def test_malformed_records_are_decode_errors(item, message):
    with pytest.raises(ResponseDecodeError, match=message) as excinfo:
        decode_word_results([{"word": "ok"}, item])

    assert excinfo.value.index == 1
    assert str(excinfo.value).startswith("result #1:")


@pytest.mark.parametrize(
    "word, expected",
    [
        ("cat", 1),
        ("hate", 1),
        ("table", 2),
        ("male", 1),
        ("whale", 1),
        ("smile", 1),
        ("pale", 1),
        ("mile", 1),
        ("rhyme", 1),
        ("lyrical", 3),
        ("elephant", 3),
        ("top hat", 2),
        ("", 0),
    ],
)
def test_estimate_syllable_count(word, expected):
    assert estimate_syllable_count(word) == expected
