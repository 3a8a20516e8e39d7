"""
Tests for localized texts and countdown formatting.
"""
import pytest

from trainer_app.core.models import CountdownKind, ValidationIssue
from trainer_app.core.texts import (
    DUTCH_TEXTS,
    ENGLISH_TEXTS,
    SUPPORTED_LANGUAGES,
    format_countdown,
    texts_for,
)


@pytest.mark.parametrize(
    "code, expected",
    [("nl-NL", DUTCH_TEXTS), ("nl-BE", DUTCH_TEXTS), ("en-US", ENGLISH_TEXTS), ("de-DE", ENGLISH_TEXTS)],
)
def test_texts_for_language_code(code, expected):
    assert texts_for(code) is expected


def test_supported_languages_include_english_and_dutch():
    codes = [code for _, code in SUPPORTED_LANGUAGES]
    assert codes == ["en-US", "nl-NL"]


def test_countdown_uses_singular_for_one_second():
    assert format_countdown(ENGLISH_TEXTS, 1, CountdownKind.ANSWER) == "1 second remaining"
    assert format_countdown(ENGLISH_TEXTS, 2, CountdownKind.ANSWER) == "2 seconds remaining"


def test_countdown_next_question_in_dutch():
    assert (
        format_countdown(DUTCH_TEXTS, 300, CountdownKind.NEXT_QUESTION)
        == "Volgende vraag over 300 seconden"
    )
    assert format_countdown(DUTCH_TEXTS, 1, CountdownKind.ANSWER) == "Nog 1 seconde"


def test_validation_messages():
    assert ENGLISH_TEXTS.validation_message(ValidationIssue.MIN_GREATER_THAN_MAX) == "Min must be ≤ max"
    assert DUTCH_TEXTS.validation_message(ValidationIssue.MAX_TOO_HIGH) == "Max moet ≤ 20 zijn"
    for issue in ValidationIssue:
        assert ENGLISH_TEXTS.validation_message(issue)
        assert DUTCH_TEXTS.validation_message(issue)
