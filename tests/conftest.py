"""
Pytest configuration and shared fakes.

The training loop is driven through a recording output and an instant,
cancellation-aware sleep so no test touches Qt or waits on a real clock.
"""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Callable

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from trainer_app.core.cancellation import CancellationToken  # noqa: E402
from trainer_app.core.models import Prompt, TrainingSessionConfig  # noqa: E402
from trainer_app.core.services.prompt_output import PromptOutput  # noqa: E402


class RecordingOutput(PromptOutput):
    """Remembers every prompt it was asked to play."""

    def __init__(self, on_play: Callable[[Prompt], None] | None = None) -> None:
        self.played: list[Prompt] = []
        self.languages: list[str] = []
        self.stop_calls = 0
        self.on_play = on_play

    async def _play(self, prompt: Prompt, language_code: str, token: CancellationToken) -> None:
        self.played.append(prompt)
        self.languages.append(language_code)
        if self.on_play is not None:
            self.on_play(prompt)
        await asyncio.sleep(0)

    def stop(self) -> None:
        self.stop_calls += 1


class FakeSleep:
    """Instant replacement for ``CancellationToken.sleep`` that records durations."""

    def __init__(self) -> None:
        self.durations: list[float] = []

    async def __call__(self, token: CancellationToken, seconds: float) -> None:
        token.raise_if_cancelled()
        self.durations.append(seconds)
        await asyncio.sleep(0)
        token.raise_if_cancelled()


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()


@pytest.fixture
def default_config() -> TrainingSessionConfig:
    return TrainingSessionConfig(
        answer_time_seconds=3,
        interval_seconds=300,
        lowest_number=4,
        highest_number=20,
        language_code="en-US",
    )


@pytest.fixture
def make_output() -> Callable[..., RecordingOutput]:
    return RecordingOutput
