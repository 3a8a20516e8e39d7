"""Settings dialog for choosing how prompts are played."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from trainer_app.constants.ui_constants import (
    AUDIO_DIRECTORY_DIALOG_TITLE,
    OUTPUT_MODE_RECORDED,
    OUTPUT_MODE_SPEECH,
    SETTINGS_DIALOG_TITLE,
)


class OutputMode(Enum):
    """How the trainer voices its prompts."""

    SPEECH = "speech"
    RECORDED_AUDIO = "recorded"


class SettingsDialog(QDialog):
    """Dialog for configuring the output variant and font size."""

    def __init__(
        self,
        parent=None,
        output_mode: OutputMode = OutputMode.SPEECH,
        audio_directory: Path | None = None,
        ui_font_size: int = 10,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(SETTINGS_DIALOG_TITLE)
        self.setModal(True)
        self.setMinimumWidth(420)

        self._output_mode = output_mode
        self._audio_directory = audio_directory or Path.cwd() / "audio"
        self._ui_font_size = ui_font_size

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        output_group = QGroupBox("Output")
        output_layout = QVBoxLayout()
        output_group.setLayout(output_layout)

        mode_row = QHBoxLayout()
        mode_row.addWidget(QLabel("Play prompts using:"))
        mode_row.addStretch()
        self.output_mode_combo = QComboBox()
        self.output_mode_combo.addItem(OUTPUT_MODE_SPEECH, OutputMode.SPEECH)
        self.output_mode_combo.addItem(OUTPUT_MODE_RECORDED, OutputMode.RECORDED_AUDIO)
        self.output_mode_combo.setCurrentIndex(
            self.output_mode_combo.findData(self._output_mode)
        )
        self.output_mode_combo.currentIndexChanged.connect(self._update_directory_enabled)
        mode_row.addWidget(self.output_mode_combo)
        output_layout.addLayout(mode_row)

        directory_row = QHBoxLayout()
        directory_label = QLabel("Audio directory:")
        directory_label.setToolTip("Folder containing <language>/question_N.wav, answer_N.wav and announcement.wav")
        directory_row.addWidget(directory_label)
        self.audio_directory_edit = QLineEdit(str(self._audio_directory))
        directory_row.addWidget(self.audio_directory_edit, stretch=1)
        self.browse_button = QPushButton("Browse…")
        self.browse_button.clicked.connect(self._handle_browse)
        directory_row.addWidget(self.browse_button)
        output_layout.addLayout(directory_row)

        layout.addWidget(output_group)

        font_row = QHBoxLayout()
        font_label = QLabel("UI Font Size:")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.ui_font_spinbox)
        layout.addLayout(font_row)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)
        self._update_directory_enabled()

    def _update_directory_enabled(self) -> None:
        recorded = self.get_output_mode() == OutputMode.RECORDED_AUDIO
        self.audio_directory_edit.setEnabled(recorded)
        self.browse_button.setEnabled(recorded)

    def _handle_browse(self) -> None:
        directory = QFileDialog.getExistingDirectory(
            self, AUDIO_DIRECTORY_DIALOG_TITLE, self.audio_directory_edit.text()
        )
        if directory:
            self.audio_directory_edit.setText(directory)

    def get_output_mode(self) -> OutputMode:
        """Get the selected output variant."""
        return self.output_mode_combo.currentData()

    def get_audio_directory(self) -> Path:
        """Get the base directory for recorded clips."""
        return Path(self.audio_directory_edit.text().strip() or ".")

    def get_ui_font_size(self) -> int:
        """Get the selected UI font size."""
        return self.ui_font_spinbox.value()
