"""Qt-backed prompt outputs: text-to-speech and recorded clips."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from PySide6.QtCore import QLocale, QObject, QUrl
from PySide6.QtMultimedia import QSoundEffect
from PySide6.QtTextToSpeech import QTextToSpeech

from trainer_app.core.services.prompt_output import AudioFileOutput, SpeechOutput

logger = logging.getLogger(__name__)


def _locale_for(language_code: str) -> QLocale:
    return QLocale(language_code.replace("-", "_"))


class QtSpeechOutput(SpeechOutput):
    """Speaks prompts through the platform's speech engine."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._engine = QTextToSpeech(parent)
        self._pending: asyncio.Future[None] | None = None
        self._engine.stateChanged.connect(self._handle_state_changed)

    async def _speak(self, text: str, language_code: str) -> None:
        # An engine in Error state ignores say() and never emits stateChanged.
        if self._engine.state() == QTextToSpeech.State.Error:
            raise RuntimeError(f"Speech engine unavailable: {self._engine.errorString()}")
        locale = _locale_for(language_code)
        if self._engine.locale() != locale:
            self._engine.setLocale(locale)

        future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._pending = future
        self._engine.say(text)
        try:
            await future
        finally:
            self._pending = None

    def _handle_state_changed(self, state: QTextToSpeech.State) -> None:
        future = self._pending
        if future is None or future.done():
            return
        if state == QTextToSpeech.State.Ready:
            future.set_result(None)
        elif state == QTextToSpeech.State.Error:
            future.set_exception(RuntimeError(f"Speech failed: {self._engine.errorString()}"))

    def stop(self) -> None:
        self._engine.stop()

    def close(self) -> None:
        self._engine.stop()
        self._engine.deleteLater()


class QtAudioFileOutput(AudioFileOutput):
    """Plays the recorded ``.wav`` clips with a single QSoundEffect."""

    def __init__(self, base_path: Path, parent: QObject | None = None) -> None:
        super().__init__(base_path)
        self._effect = QSoundEffect(parent)
        self._pending: asyncio.Future[None] | None = None
        self._playback_started: bool = False
        self._effect.playingChanged.connect(self._handle_playing_changed)
        self._effect.statusChanged.connect(self._handle_status_changed)

    async def _play_file(self, path: Path) -> None:
        future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._pending = future
        self._playback_started = False
        self._effect.setSource(QUrl.fromLocalFile(str(path)))
        # Re-setting a source that already failed emits no statusChanged.
        if self._effect.status() == QSoundEffect.Status.Error:
            self._pending = None
            raise RuntimeError(f"Failed to load {path}")
        self._effect.play()
        try:
            await future
        finally:
            self._pending = None

    def _handle_playing_changed(self) -> None:
        future = self._pending
        if future is None or future.done():
            return
        if self._effect.isPlaying():
            self._playback_started = True
        elif self._playback_started:
            future.set_result(None)

    def _handle_status_changed(self) -> None:
        future = self._pending
        if future is None or future.done():
            return
        if self._effect.status() == QSoundEffect.Status.Error:
            future.set_exception(
                RuntimeError(f"Failed to load {self._effect.source().toLocalFile()}")
            )

    def stop(self) -> None:
        if self._effect.isPlaying():
            self._effect.stop()

    def close(self) -> None:
        self.stop()
        self._effect.deleteLater()
