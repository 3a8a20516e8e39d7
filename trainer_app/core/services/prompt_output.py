"""Output capabilities the training loop plays its prompts through."""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from pathlib import Path

from trainer_app.constants.trainer_constants import ANNOUNCEMENT_FILE_NAME
from trainer_app.core.cancellation import CancellationToken, OperationCancelled
from trainer_app.core.models import Prompt, PromptKind
from trainer_app.core.texts import texts_for

logger = logging.getLogger(__name__)


class PromptOutput(ABC):
    """Plays one prompt to completion or until the token fires.

    ``play`` never raises for cancellation; the caller checks the token
    afterwards to decide whether to continue. Halting the player is left to
    whoever fired the token, since a newer session may already be playing
    through the same output by the time this one unwinds.
    """

    async def play(
        self, prompt: Prompt, language_code: str, token: CancellationToken
    ) -> None:
        if token.cancelled:
            return
        try:
            await self._play(prompt, language_code, token)
        except OperationCancelled:
            logger.debug("Playback of %s cancelled", prompt.kind.name)

    @abstractmethod
    async def _play(
        self, prompt: Prompt, language_code: str, token: CancellationToken
    ) -> None:
        ...

    @abstractmethod
    def stop(self) -> None:
        """Stop whatever is currently playing."""

    def close(self) -> None:
        """Release player resources once the output is no longer used."""


class SpeechOutput(PromptOutput):
    """Speaks the localized phrase for each prompt."""

    async def _play(
        self, prompt: Prompt, language_code: str, token: CancellationToken
    ) -> None:
        text = texts_for(language_code).phrase_for(prompt)
        logger.debug("Speaking %r (%s)", text, language_code)
        await token.guard(self._speak(text, language_code))

    @abstractmethod
    async def _speak(self, text: str, language_code: str) -> None:
        """Speak ``text`` and return when the utterance has finished."""


def audio_file_name(prompt: Prompt) -> str:
    """Name of the recorded clip for ``prompt`` inside a language folder."""
    if prompt.kind is PromptKind.QUESTION:
        return f"question_{prompt.number}.wav"
    if prompt.kind is PromptKind.ANSWER:
        return f"answer_{prompt.number}.wav"
    return ANNOUNCEMENT_FILE_NAME


class AudioFileOutput(PromptOutput):
    """Plays pre-recorded clips laid out as ``<base>/<language>/<file>.wav``.

    A missing clip or a failing player is logged and skipped.
    """

    def __init__(self, base_path: Path) -> None:
        self.base_path = Path(base_path)

    def resolve_path(self, prompt: Prompt, language_code: str) -> Path:
        return self.base_path / language_code / audio_file_name(prompt)

    async def _play(
        self, prompt: Prompt, language_code: str, token: CancellationToken
    ) -> None:
        audio_path = self.resolve_path(prompt, language_code)
        if not audio_path.exists():
            logger.warning("Audio file not found: %s", audio_path)
            return
        try:
            await token.guard(self._play_file(audio_path))
        except OperationCancelled:
            raise
        except (OSError, RuntimeError) as exc:
            logger.warning("Audio playback error for %s: %s", audio_path, exc)

    @abstractmethod
    async def _play_file(self, path: Path) -> None:
        """Play ``path`` and return when playback has ended."""
