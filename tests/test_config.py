"""
Tests for training configuration validation and form input handling.
"""
import dataclasses

import pytest

from trainer_app.core.config_builder import TrainingDefaults, build_session_config
from trainer_app.core.models import (
    ConfigValidationError,
    TrainingSessionConfig,
    ValidationIssue,
)


def test_valid_config_is_frozen():
    config = TrainingSessionConfig(3, 300, 4, 20, "en-US")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.lowest_number = 1


@pytest.mark.parametrize(
    "lowest, highest, issue",
    [
        (10, 2, ValidationIssue.MIN_GREATER_THAN_MAX),
        (0, 5, ValidationIssue.MIN_TOO_LOW),
        (1, 21, ValidationIssue.MAX_TOO_HIGH),
        # min-too-low is reported before min > max
        (0, 25, ValidationIssue.MIN_TOO_LOW),
    ],
)
def test_invalid_ranges_are_rejected(lowest, highest, issue):
    with pytest.raises(ConfigValidationError) as exc_info:
        TrainingSessionConfig(3, 300, lowest, highest, "en-US")
    assert exc_info.value.issue is issue


def test_boundary_range_is_accepted():
    config = TrainingSessionConfig(1, 1, 1, 20, "nl-NL")
    assert (config.lowest_number, config.highest_number) == (1, 20)


@pytest.mark.parametrize(
    "answer, interval, issue",
    [
        (0, 300, ValidationIssue.ANSWER_TIME_NOT_POSITIVE),
        (3, 0, ValidationIssue.INTERVAL_NOT_POSITIVE),
    ],
)
def test_non_positive_times_are_rejected(answer, interval, issue):
    with pytest.raises(ConfigValidationError) as exc_info:
        TrainingSessionConfig(answer, interval, 4, 20, "en-US")
    assert exc_info.value.issue is issue


def test_builder_replaces_non_positive_times_with_defaults():
    config = build_session_config(0, -5, 4, 20, "en-US")
    assert config.answer_time_seconds == 3
    assert config.interval_seconds == 300


def test_builder_fills_missing_values_from_defaults():
    defaults = TrainingDefaults(
        answer_time_seconds=5,
        interval_seconds=60,
        lowest_number=2,
        highest_number=12,
        language_code="en-US",
    )
    config = build_session_config(None, None, None, None, None, defaults=defaults)
    assert config == TrainingSessionConfig(5, 60, 2, 12, "en-US")


def test_builder_keeps_out_of_range_numbers_for_validation():
    with pytest.raises(ConfigValidationError) as exc_info:
        build_session_config(3, 300, 4, 25, "en-US")
    assert exc_info.value.issue is ValidationIssue.MAX_TOO_HIGH
