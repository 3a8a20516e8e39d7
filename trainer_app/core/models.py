"""Domain models for the trainer application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from trainer_app.constants.trainer_constants import (
    MAX_SUPPORTED_NUMBER,
    MIN_SUPPORTED_NUMBER,
)


class ValidationIssue(Enum):
    """Reasons a training configuration can be rejected."""

    MIN_TOO_LOW = auto()
    MAX_TOO_HIGH = auto()
    MIN_GREATER_THAN_MAX = auto()
    ANSWER_TIME_NOT_POSITIVE = auto()
    INTERVAL_NOT_POSITIVE = auto()


class ConfigValidationError(ValueError):
    """Raised when a training configuration violates its constraints."""

    def __init__(self, issue: ValidationIssue, message: str) -> None:
        super().__init__(message)
        self.issue = issue


def validate_number_range(lowest_number: int, highest_number: int) -> None:
    """Reject number ranges outside the supported window or in the wrong order."""
    if lowest_number < MIN_SUPPORTED_NUMBER:
        raise ConfigValidationError(
            ValidationIssue.MIN_TOO_LOW,
            f"Min must be >= {MIN_SUPPORTED_NUMBER} (got {lowest_number})",
        )
    if highest_number > MAX_SUPPORTED_NUMBER:
        raise ConfigValidationError(
            ValidationIssue.MAX_TOO_HIGH,
            f"Max must be <= {MAX_SUPPORTED_NUMBER} (got {highest_number})",
        )
    if lowest_number > highest_number:
        raise ConfigValidationError(
            ValidationIssue.MIN_GREATER_THAN_MAX,
            f"Min must be <= max (got {lowest_number} > {highest_number})",
        )


@dataclass(frozen=True, slots=True)
class TrainingSessionConfig:
    """Settings for one training run; fixed until the session stops."""

    answer_time_seconds: int
    interval_seconds: int
    lowest_number: int
    highest_number: int
    language_code: str

    def __post_init__(self) -> None:
        if self.answer_time_seconds < 1:
            raise ConfigValidationError(
                ValidationIssue.ANSWER_TIME_NOT_POSITIVE,
                f"Answer time must be positive (got {self.answer_time_seconds})",
            )
        if self.interval_seconds < 1:
            raise ConfigValidationError(
                ValidationIssue.INTERVAL_NOT_POSITIVE,
                f"Interval must be positive (got {self.interval_seconds})",
            )
        validate_number_range(self.lowest_number, self.highest_number)


class PromptKind(Enum):
    """The three spoken moments of a question cycle."""

    QUESTION = auto()
    TIME_ANNOUNCEMENT = auto()
    ANSWER = auto()


@dataclass(frozen=True, slots=True)
class Prompt:
    """Something the output should say or play for the current number."""

    kind: PromptKind
    number: int
    answer_time_seconds: int

    @property
    def square(self) -> int:
        return self.number * self.number


class CountdownKind(Enum):
    """Which wait a countdown tick belongs to."""

    ANSWER = auto()
    NEXT_QUESTION = auto()
