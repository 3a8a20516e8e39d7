"""Qt main window with the training inputs and start/stop control."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from trainer_app.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from trainer_app.constants.trainer_constants import DEFAULT_AUDIO_DIRECTORY
from trainer_app.constants.ui_constants import (
    ABOUT_BUTTON,
    ALREADY_RUNNING_MESSAGE,
    DEFAULT_UI_FONT_SIZE,
    SETTINGS_BUTTON,
    SPINBOX_MAX_SECONDS,
    SPINBOX_NUMBER_RANGE,
    WINDOW_MIN_WIDTH,
)
from trainer_app.core.config_builder import TrainingDefaults, build_session_config
from trainer_app.core.models import ConfigValidationError, CountdownKind
from trainer_app.core.services.prompt_output import PromptOutput
from trainer_app.core.services.training_session import (
    SessionAlreadyRunningError,
    TrainingSession,
)
from trainer_app.core.texts import (
    SUPPORTED_LANGUAGES,
    LanguageTexts,
    format_countdown,
    texts_for,
)
from trainer_app.styling.styles import Styles
from trainer_app.ui.dialog_helpers import show_error, show_info
from trainer_app.ui.qt_outputs import QtAudioFileOutput, QtSpeechOutput
from trainer_app.ui.settings_dialog import OutputMode, SettingsDialog

logger = logging.getLogger(__name__)


class TrainerMainWindow(QMainWindow):
    """Main window: inputs, language selector, countdown and start/stop."""

    def __init__(self, defaults: TrainingDefaults | None = None) -> None:
        super().__init__()
        self.defaults = defaults or TrainingDefaults()
        self.texts: LanguageTexts = texts_for(self.defaults.language_code)

        self._output_mode = OutputMode.SPEECH
        self._audio_directory = Path.cwd() / DEFAULT_AUDIO_DIRECTORY
        self._ui_font_size: int = DEFAULT_UI_FONT_SIZE

        self._build_ui()
        self.session = self._create_session()
        self._apply_styles()
        self._update_ui_language()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        self.setMinimumWidth(WINDOW_MIN_WIDTH)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.title_label = QLabel(self)
        self.title_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.title_label)

        self.subtitle_label = QLabel(self)
        self.subtitle_label.setAlignment(Qt.AlignCenter)
        self.subtitle_label.setWordWrap(True)
        root_layout.addWidget(self.subtitle_label)

        form = QFormLayout()
        self.language_label = QLabel(self)
        self.language_combo = QComboBox(self)
        for display_name, language_code in SUPPORTED_LANGUAGES:
            self.language_combo.addItem(display_name, language_code)
        self.language_combo.setCurrentIndex(
            max(0, self.language_combo.findData(self.defaults.language_code))
        )
        self.language_combo.currentIndexChanged.connect(self._handle_language_changed)
        form.addRow(self.language_label, self.language_combo)

        self.answer_time_label = QLabel(self)
        self.answer_time_spinbox = self._make_spinbox(
            1, SPINBOX_MAX_SECONDS, self.defaults.answer_time_seconds
        )
        form.addRow(self.answer_time_label, self.answer_time_spinbox)

        self.interval_label = QLabel(self)
        self.interval_spinbox = self._make_spinbox(
            1, SPINBOX_MAX_SECONDS, self.defaults.interval_seconds
        )
        form.addRow(self.interval_label, self.interval_spinbox)

        self.lowest_number_label = QLabel(self)
        self.lowest_number_spinbox = self._make_spinbox(
            *SPINBOX_NUMBER_RANGE, self.defaults.lowest_number
        )
        form.addRow(self.lowest_number_label, self.lowest_number_spinbox)

        self.highest_number_label = QLabel(self)
        self.highest_number_spinbox = self._make_spinbox(
            *SPINBOX_NUMBER_RANGE, self.defaults.highest_number
        )
        form.addRow(self.highest_number_label, self.highest_number_spinbox)
        root_layout.addLayout(form)

        self.start_stop_button = QPushButton(self)
        self.start_stop_button.setObjectName("startStopButton")
        self.start_stop_button.clicked.connect(self._handle_start_stop)
        root_layout.addWidget(self.start_stop_button)

        self.countdown_label = QLabel("", self)
        self.countdown_label.setAlignment(Qt.AlignCenter)
        self.countdown_label.setMinimumHeight(40)
        root_layout.addWidget(self.countdown_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.settings_button = QPushButton(SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)
        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)
        root_layout.addLayout(button_row)

    def _make_spinbox(self, minimum: int, maximum: int, value: int) -> QSpinBox:
        spinbox = QSpinBox(self)
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(value)
        return spinbox

    def _create_output(self) -> PromptOutput:
        if self._output_mode == OutputMode.RECORDED_AUDIO:
            logger.info("Using recorded audio from %s", self._audio_directory)
            return QtAudioFileOutput(self._audio_directory, parent=self)
        logger.info("Using text-to-speech output")
        return QtSpeechOutput(parent=self)

    def _create_session(self) -> TrainingSession:
        return TrainingSession(
            self._create_output(),
            on_countdown=self._show_countdown,
            on_countdown_cleared=self._clear_countdown,
        )

    def _handle_start_stop(self) -> None:
        if self.session.is_running():
            self._stop_training()
        else:
            self._start_training()

    def _start_training(self) -> None:
        try:
            config = build_session_config(
                answer_time_seconds=self.answer_time_spinbox.value(),
                interval_seconds=self.interval_spinbox.value(),
                lowest_number=self.lowest_number_spinbox.value(),
                highest_number=self.highest_number_spinbox.value(),
                language_code=self.language_combo.currentData(),
                defaults=self.defaults,
            )
        except ConfigValidationError as exc:
            logger.info("Rejected training settings: %s", exc)
            self._show_validation_error(self.texts.validation_message(exc.issue))
            return

        self._clear_countdown()
        try:
            self.session.start(config)
        except SessionAlreadyRunningError:
            show_error(self, self.texts.window_title, ALREADY_RUNNING_MESSAGE)
            return
        self._set_inputs_enabled(False)
        self.start_stop_button.setText(self.texts.stop_button)

    def _stop_training(self) -> None:
        self.session.stop()
        self.start_stop_button.setText(self.texts.start_button)
        self._set_inputs_enabled(True)

    def _set_inputs_enabled(self, enabled: bool) -> None:
        for widget in (
            self.language_combo,
            self.answer_time_spinbox,
            self.interval_spinbox,
            self.lowest_number_spinbox,
            self.highest_number_spinbox,
            self.settings_button,
        ):
            widget.setEnabled(enabled)

    def _handle_language_changed(self) -> None:
        if self.session.is_running():
            return
        self.texts = texts_for(self.language_combo.currentData())
        self._update_ui_language()

    def _update_ui_language(self) -> None:
        self.setWindowTitle(self.texts.window_title)
        self.title_label.setText(self.texts.window_title)
        self.subtitle_label.setText(self.texts.window_subtitle)
        self.language_label.setText(self.texts.language_label)
        self.answer_time_label.setText(self.texts.answer_time_label)
        self.interval_label.setText(self.texts.interval_time_label)
        self.lowest_number_label.setText(self.texts.lowest_number_label)
        self.highest_number_label.setText(self.texts.highest_number_label)
        self.start_stop_button.setText(
            self.texts.stop_button if self.session.is_running() else self.texts.start_button
        )

    def _show_countdown(self, remaining: int, kind: CountdownKind) -> None:
        self.countdown_label.setStyleSheet(Styles.get_countdown_style())
        self.countdown_label.setText(format_countdown(self.texts, remaining, kind))

    def _clear_countdown(self) -> None:
        self.countdown_label.setStyleSheet(Styles.get_countdown_style())
        self.countdown_label.setText("")

    def _show_validation_error(self, message: str) -> None:
        self.countdown_label.setStyleSheet(Styles.get_countdown_style(is_error=True))
        self.countdown_label.setText(message)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._output_mode,
            self._audio_directory,
            self._ui_font_size,
        )
        if dialog.exec():
            self._output_mode = dialog.get_output_mode()
            self._audio_directory = dialog.get_audio_directory()
            self._ui_font_size = dialog.get_ui_font_size()
            # Settings are locked while running, so the old session is idle.
            previous = self.session
            self.session = self._create_session()
            previous.close()
            self._apply_styles()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            Styles.get_main_window_style() + f"QWidget {{ font-size: {self._ui_font_size}pt; }}"
        )
        self.title_label.setStyleSheet(Styles.get_title_style())
        self.subtitle_label.setStyleSheet(Styles.get_subtitle_style())
        self.countdown_label.setStyleSheet(Styles.get_countdown_style())

    def closeEvent(self, event: QCloseEvent) -> None:
        self.session.close()
        super().closeEvent(event)
