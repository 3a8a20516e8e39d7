"""Static metadata describing SquareRootTrainer."""

APP_NAME = "SquareRootTrainer"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "SquareRootTrainer quizzes you on square roots at a fixed interval. "
    "Leave it running in the background: it asks a question, gives you a few seconds "
    "to answer in your head, then tells you the answer."
)
