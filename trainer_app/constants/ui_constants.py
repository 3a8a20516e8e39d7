"""Qt UI constants used across widgets."""

WINDOW_MIN_WIDTH: int = 520
SPINBOX_MAX_SECONDS: int = 24 * 60 * 60
# Number inputs accept out-of-range values so validation can explain them.
SPINBOX_NUMBER_RANGE: tuple[int, int] = (0, 99)
DEFAULT_UI_FONT_SIZE: int = 10

SETTINGS_BUTTON: str = "Settings"
ABOUT_BUTTON: str = "About"
SETTINGS_DIALOG_TITLE: str = "Settings"
AUDIO_DIRECTORY_DIALOG_TITLE: str = "Select audio directory"
OUTPUT_MODE_SPEECH: str = "Text-to-speech"
OUTPUT_MODE_RECORDED: str = "Recorded audio files"
ALREADY_RUNNING_MESSAGE: str = "A training session is already running."
