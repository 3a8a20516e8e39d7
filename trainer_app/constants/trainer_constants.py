"""Training-related defaults shared across UI and core layers."""

DEFAULT_INTERVAL_SECONDS: int = 300
DEFAULT_ANSWER_TIME_SECONDS: int = 3
DEFAULT_LOWEST_NUMBER: int = 4
DEFAULT_HIGHEST_NUMBER: int = 20
MIN_SUPPORTED_NUMBER: int = 1
MAX_SUPPORTED_NUMBER: int = 20
BRIEF_PAUSE_SECONDS: float = 1.0
COUNTDOWN_TICK_SECONDS: float = 1.0
DEFAULT_LANGUAGE_CODE: str = "nl-NL"
DEFAULT_AUDIO_DIRECTORY: str = "audio"
ANNOUNCEMENT_FILE_NAME: str = "announcement.wav"
