"""Application entry point for TriviaQt."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from trivia_app.core.services.question_loader import QuestionLoader
from trivia_app.core.trivia_client import TriviaClient
from trivia_app.ui.dispatcher import QtDispatcher
from trivia_app.ui.trivia_main_window import TriviaMainWindow
from trivia_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, wire the question loader and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting TriviaQt…")

    app = QApplication(sys.argv)
    dispatcher = QtDispatcher(app)
    client = TriviaClient()
    logger.info("Questions will be fetched from %s", client.api_url)
    question_loader = QuestionLoader(client, dispatch=dispatcher)

    window = TriviaMainWindow(question_loader=question_loader)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
