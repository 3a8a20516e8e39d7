"""Qt UI components for the trainer application."""

from .dialog_helpers import show_error, show_info
from .settings_dialog import OutputMode, SettingsDialog
from .trainer_main_window import TrainerMainWindow

__all__ = [
    "OutputMode",
    "SettingsDialog",
    "TrainerMainWindow",
    "show_error",
    "show_info",
]
