"""Application entry point for SquareRootTrainer."""

from __future__ import annotations

import sys

from PySide6 import QtAsyncio
from PySide6.QtWidgets import QApplication

from trainer_app.ui.trainer_main_window import TrainerMainWindow
from trainer_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and run the Qt UI on an asyncio-aware event loop."""
    logger = configure_logging()
    logger.info("Starting SquareRootTrainer…")

    app = QApplication(sys.argv)
    window = TrainerMainWindow()
    window.show()
    # The training loop's coroutines run on Qt's event loop through QtAsyncio.
    QtAsyncio.run(handle_sigint=True)
    logger.info("SquareRootTrainer closed")


if __name__ == "__main__":
    main()
