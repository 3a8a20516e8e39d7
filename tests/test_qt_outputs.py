"""
Tests for the Qt outputs' failure paths, with stand-in engine and effect objects.
"""
import asyncio
import logging

import pytest

QtTextToSpeech = pytest.importorskip("PySide6.QtTextToSpeech")
QtMultimedia = pytest.importorskip("PySide6.QtMultimedia")

from PySide6.QtCore import QLocale  # noqa: E402

from trainer_app.core.cancellation import CancellationToken  # noqa: E402
from trainer_app.core.models import Prompt, PromptKind  # noqa: E402
from trainer_app.core.services.prompt_output import AudioFileOutput  # noqa: E402
from trainer_app.ui.qt_outputs import QtAudioFileOutput, QtSpeechOutput  # noqa: E402

QTextToSpeech = QtTextToSpeech.QTextToSpeech
QSoundEffect = QtMultimedia.QSoundEffect


class FakeEngine:
    def __init__(self, state):
        self._state = state
        self.said = []
        self.deleted = False

    def state(self):
        return self._state

    def errorString(self):
        return "no speech backend"

    def locale(self):
        return QLocale()

    def setLocale(self, locale):
        pass

    def say(self, text):
        self.said.append(text)

    def stop(self):
        pass

    def deleteLater(self):
        self.deleted = True


class FakeEffect:
    def __init__(self, status):
        self._status = status
        self.played = 0

    def setSource(self, url):
        self.source = url

    def status(self):
        return self._status

    def play(self):
        self.played += 1

    def isPlaying(self):
        return False


def _speech_output(engine):
    output = QtSpeechOutput.__new__(QtSpeechOutput)
    output._engine = engine
    output._pending = None
    return output


def _audio_output(base_path, effect):
    output = QtAudioFileOutput.__new__(QtAudioFileOutput)
    AudioFileOutput.__init__(output, base_path)
    output._effect = effect
    output._pending = None
    output._playback_started = False
    return output


@pytest.mark.asyncio
async def test_speech_engine_in_error_state_fails_fast():
    engine = FakeEngine(QTextToSpeech.State.Error)
    output = _speech_output(engine)
    prompt = Prompt(PromptKind.QUESTION, 4, 3)

    with pytest.raises(RuntimeError, match="no speech backend"):
        await asyncio.wait_for(output.play(prompt, "en-US", CancellationToken()), 1.0)

    assert engine.said == []


@pytest.mark.asyncio
async def test_clip_that_failed_to_load_is_skipped(tmp_path, caplog):
    clip = tmp_path / "en-US" / "question_4.wav"
    clip.parent.mkdir()
    clip.write_bytes(b"not a wav")
    effect = FakeEffect(QSoundEffect.Status.Error)
    output = _audio_output(tmp_path, effect)

    with caplog.at_level(logging.WARNING):
        await asyncio.wait_for(
            output.play(Prompt(PromptKind.QUESTION, 4, 3), "en-US", CancellationToken()),
            1.0,
        )

    assert effect.played == 0
    assert "Failed to load" in caplog.text


def test_close_releases_speech_engine():
    engine = FakeEngine(QTextToSpeech.State.Ready)
    output = _speech_output(engine)

    output.close()

    assert engine.deleted
