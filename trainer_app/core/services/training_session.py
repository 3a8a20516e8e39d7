"""Service running the repeating question/answer training loop."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Awaitable, Callable

from trainer_app.constants.trainer_constants import (
    BRIEF_PAUSE_SECONDS,
    COUNTDOWN_TICK_SECONDS,
)
from trainer_app.core.cancellation import CancellationToken, OperationCancelled
from trainer_app.core.models import (
    CountdownKind,
    Prompt,
    PromptKind,
    TrainingSessionConfig,
)
from trainer_app.core.services.prompt_output import PromptOutput

logger = logging.getLogger(__name__)

CountdownCallback = Callable[[int, CountdownKind], None]
SleepFunction = Callable[[CancellationToken, float], Awaitable[None]]


class SessionAlreadyRunningError(RuntimeError):
    """Raised when starting a session that is already running."""


class TrainingSession:
    """Asks a question, waits, gives the answer, then sleeps and repeats.

    A cycle is five phases: ask, brief pause, announce the answer time,
    count down the answer time, answer. Between cycles the session counts
    down the interval. ``stop()`` fires the cancellation token, which every
    phase observes, so the loop unwinds within one countdown tick.
    """

    def __init__(
        self,
        output: PromptOutput,
        on_countdown: CountdownCallback | None = None,
        on_countdown_cleared: Callable[[], None] | None = None,
        rng: random.Random | None = None,
        sleep: SleepFunction = CancellationToken.sleep,
        brief_pause_seconds: float = BRIEF_PAUSE_SECONDS,
        tick_seconds: float = COUNTDOWN_TICK_SECONDS,
    ) -> None:
        self._output = output
        self._on_countdown = on_countdown
        self._on_countdown_cleared = on_countdown_cleared
        self._rng = rng or random.Random()
        self._sleep = sleep
        self._brief_pause_seconds = brief_pause_seconds
        self._tick_seconds = tick_seconds

        self._running: bool = False
        self._token: CancellationToken | None = None
        self._task: asyncio.Future[None] | None = None
        self._config: TrainingSessionConfig | None = None

    def is_running(self) -> bool:
        return self._running

    def get_config(self) -> TrainingSessionConfig | None:
        return self._config if self._running else None

    def start(self, config: TrainingSessionConfig) -> None:
        """Schedule the training loop on the running event loop."""
        if self._running:
            raise SessionAlreadyRunningError("Training session is already running")

        token = CancellationToken()
        self._running = True
        self._token = token
        self._config = config
        logger.info(
            "Starting training: numbers %d-%d, answer time %ds, interval %ds, language %s",
            config.lowest_number,
            config.highest_number,
            config.answer_time_seconds,
            config.interval_seconds,
            config.language_code,
        )
        self._task = asyncio.ensure_future(self._run(config, token))

    def stop(self) -> None:
        """Request cancellation; a no-op when nothing is running."""
        if not self._running:
            return

        self._running = False
        self._config = None
        if self._token is not None:
            self._token.cancel()
        self._output.stop()
        self._clear_countdown()
        logger.info("Training stopped")

    async def wait_stopped(self) -> None:
        """Wait for the most recent loop task to finish unwinding."""
        if self._task is not None:
            await self._task

    def close(self) -> None:
        """Stop the session and release its output; the session is unusable afterwards."""
        self.stop()
        self._output.close()

    async def _run(self, config: TrainingSessionConfig, token: CancellationToken) -> None:
        try:
            while not token.cancelled:
                await self._run_cycle(config, token)
                if token.cancelled:
                    break
                await self._wait_interval(config, token)
        except OperationCancelled:
            pass
        finally:
            # A newer session may already own the callbacks and state.
            if self._token is token:
                self._running = False
                self._config = None
                self._clear_countdown()

    async def _wait_interval(
        self, config: TrainingSessionConfig, token: CancellationToken
    ) -> None:
        try:
            await self._countdown(
                config.interval_seconds, CountdownKind.NEXT_QUESTION, token
            )
        except OperationCancelled:
            raise
        except Exception:
            logger.exception("Error in interval countdown")
            # Keep the pacing even when the countdown display fails.
            await self._sleep(token, config.interval_seconds * self._tick_seconds)

    async def _run_cycle(
        self, config: TrainingSessionConfig, token: CancellationToken
    ) -> None:
        try:
            number = self._pick_number(config)
            logger.debug("Question cycle for number %d", number)

            await self._play(PromptKind.QUESTION, number, config, token)
            token.raise_if_cancelled()

            await self._sleep(token, self._brief_pause_seconds)
            token.raise_if_cancelled()

            await self._play(PromptKind.TIME_ANNOUNCEMENT, number, config, token)
            token.raise_if_cancelled()

            await self._countdown(config.answer_time_seconds, CountdownKind.ANSWER, token)
            token.raise_if_cancelled()

            await self._play(PromptKind.ANSWER, number, config, token)
        except OperationCancelled:
            raise
        except Exception:
            logger.exception("Error in question cycle")

    def _pick_number(self, config: TrainingSessionConfig) -> int:
        return self._rng.randint(config.lowest_number, config.highest_number)

    async def _play(
        self,
        kind: PromptKind,
        number: int,
        config: TrainingSessionConfig,
        token: CancellationToken,
    ) -> None:
        prompt = Prompt(kind=kind, number=number, answer_time_seconds=config.answer_time_seconds)
        await self._output.play(prompt, config.language_code, token)

    async def _countdown(
        self, seconds: int, kind: CountdownKind, token: CancellationToken
    ) -> None:
        for remaining in range(seconds, 0, -1):
            token.raise_if_cancelled()
            if self._on_countdown is not None:
                self._on_countdown(remaining, kind)
            await self._sleep(token, self._tick_seconds)
        self._clear_countdown()

    def _clear_countdown(self) -> None:
        if self._on_countdown_cleared is not None:
            self._on_countdown_cleared()
