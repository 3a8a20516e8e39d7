"""Localized UI strings and spoken phrases."""

from __future__ import annotations

from dataclasses import dataclass

from trainer_app.core.models import CountdownKind, Prompt, PromptKind, ValidationIssue


@dataclass(frozen=True, slots=True)
class LanguageTexts:
    """All user-facing text for one language.

    Templates use ``str.format`` fields: countdowns take ``{seconds}`` and
    ``{unit}``, spoken phrases take ``{square}``, ``{number}`` and ``{seconds}``.
    """

    window_title: str
    window_subtitle: str
    language_label: str
    answer_time_label: str
    interval_time_label: str
    lowest_number_label: str
    highest_number_label: str
    start_button: str
    stop_button: str
    countdown_next_question: str
    countdown_remaining: str
    seconds: str
    second: str
    error_min_max: str
    error_min_too_low: str
    error_max_too_high: str
    error_time_not_positive: str
    question_phrase: str
    time_announcement_phrase: str
    answer_phrase: str

    def validation_message(self, issue: ValidationIssue) -> str:
        messages = {
            ValidationIssue.MIN_TOO_LOW: self.error_min_too_low,
            ValidationIssue.MAX_TOO_HIGH: self.error_max_too_high,
            ValidationIssue.MIN_GREATER_THAN_MAX: self.error_min_max,
            ValidationIssue.ANSWER_TIME_NOT_POSITIVE: self.error_time_not_positive,
            ValidationIssue.INTERVAL_NOT_POSITIVE: self.error_time_not_positive,
        }
        return messages[issue]

    def phrase_for(self, prompt: Prompt) -> str:
        templates = {
            PromptKind.QUESTION: self.question_phrase,
            PromptKind.TIME_ANNOUNCEMENT: self.time_announcement_phrase,
            PromptKind.ANSWER: self.answer_phrase,
        }
        return templates[prompt.kind].format(
            square=prompt.square,
            number=prompt.number,
            seconds=prompt.answer_time_seconds,
        )


ENGLISH_TEXTS = LanguageTexts(
    window_title="Square Root Trainer",
    window_subtitle=(
        "Start the app and keep it running in the background while you answer "
        "the questions in your head when they come up."
    ),
    language_label="Language",
    answer_time_label="Time to answer (s)",
    interval_time_label="Interval time (s)",
    lowest_number_label="Lowest Number",
    highest_number_label="Highest Number",
    start_button="Start Training",
    stop_button="Stop",
    countdown_next_question="Next question in {seconds} {unit}",
    countdown_remaining="{seconds} {unit} remaining",
    seconds="seconds",
    second="second",
    error_min_max="Min must be ≤ max",
    error_min_too_low="Min must be ≥ 1",
    error_max_too_high="Max must be ≤ 20",
    error_time_not_positive="Times must be at least 1 second",
    question_phrase="What is the square root of {square}?",
    time_announcement_phrase="You have {seconds} seconds to answer the question.",
    answer_phrase="The square root of {square} is {number}.",
)

DUTCH_TEXTS = LanguageTexts(
    window_title="Worteltrainer",
    window_subtitle=(
        "Start de app en laat deze op de achtergrond draaien terwijl je de vragen "
        "in je hoofd beantwoordt wanneer ze gesteld worden."
    ),
    language_label="Taal",
    answer_time_label="Tijd voor antwoord (s)",
    interval_time_label="Interval tijd (s)",
    lowest_number_label="Laagste Getal",
    highest_number_label="Hoogste Getal",
    start_button="Start Training",
    stop_button="Stop",
    countdown_next_question="Volgende vraag over {seconds} {unit}",
    countdown_remaining="Nog {seconds} {unit}",
    seconds="seconden",
    second="seconde",
    error_min_max="Min moet ≤ max zijn",
    error_min_too_low="Min moet ≥ 1 zijn",
    error_max_too_high="Max moet ≤ 20 zijn",
    error_time_not_positive="Tijden moeten minstens 1 seconde zijn",
    question_phrase="Wat is de wortel van {square}?",
    time_announcement_phrase="Je hebt {seconds} seconden om de vraag te beantwoorden.",
    answer_phrase="De wortel van {square} is {number}.",
)

# (display name, language code) pairs offered by the language selector.
SUPPORTED_LANGUAGES: list[tuple[str, str]] = [
    ("English (en-US)", "en-US"),
    ("Nederlands (nl-NL)", "nl-NL"),
]


def texts_for(language_code: str) -> LanguageTexts:
    """Return Dutch texts for ``nl*`` codes and English for everything else."""
    if language_code.lower().startswith("nl"):
        return DUTCH_TEXTS
    return ENGLISH_TEXTS


def format_countdown(texts: LanguageTexts, remaining: int, kind: CountdownKind) -> str:
    unit = texts.second if remaining == 1 else texts.seconds
    template = (
        texts.countdown_next_question
        if kind is CountdownKind.NEXT_QUESTION
        else texts.countdown_remaining
    )
    return template.format(seconds=remaining, unit=unit)
