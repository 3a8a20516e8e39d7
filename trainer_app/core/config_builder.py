"""Turn raw form values into a validated training configuration."""

from __future__ import annotations

from dataclasses import dataclass

from trainer_app.constants.trainer_constants import (
    DEFAULT_ANSWER_TIME_SECONDS,
    DEFAULT_HIGHEST_NUMBER,
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_LANGUAGE_CODE,
    DEFAULT_LOWEST_NUMBER,
)
from trainer_app.core.models import TrainingSessionConfig


@dataclass(frozen=True, slots=True)
class TrainingDefaults:
    """Fallback values used when a form field is empty or unusable."""

    answer_time_seconds: int = DEFAULT_ANSWER_TIME_SECONDS
    interval_seconds: int = DEFAULT_INTERVAL_SECONDS
    lowest_number: int = DEFAULT_LOWEST_NUMBER
    highest_number: int = DEFAULT_HIGHEST_NUMBER
    language_code: str = DEFAULT_LANGUAGE_CODE


def _positive_or_default(value: int | None, default: int) -> int:
    if value is None or value <= 0:
        return default
    return value


def build_session_config(
    answer_time_seconds: int | None,
    interval_seconds: int | None,
    lowest_number: int | None,
    highest_number: int | None,
    language_code: str | None,
    defaults: TrainingDefaults | None = None,
) -> TrainingSessionConfig:
    """Build a config from form input.

    Missing or non-positive times fall back to the defaults; missing numbers
    fall back too, but out-of-range numbers are left alone so the config
    rejects them with a ``ConfigValidationError``.
    """
    defaults = defaults or TrainingDefaults()
    return TrainingSessionConfig(
        answer_time_seconds=_positive_or_default(
            answer_time_seconds, defaults.answer_time_seconds
        ),
        interval_seconds=_positive_or_default(interval_seconds, defaults.interval_seconds),
        lowest_number=defaults.lowest_number if lowest_number is None else lowest_number,
        highest_number=defaults.highest_number if highest_number is None else highest_number,
        language_code=language_code or defaults.language_code,
    )
