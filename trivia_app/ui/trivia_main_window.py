"""Qt main window switching between the options and quiz screens."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    QUESTION_SOURCE_CREDIT,
)
from trivia_app.constants.ui_constants import WINDOW_TITLE
from trivia_app.core.quiz_options import QuizOptions
from trivia_app.core.services.question_loader import QuestionLoader
from trivia_app.styling.styles import Styles
from trivia_app.ui.components.options_panel import OptionsPanel
from trivia_app.ui.components.quiz_panel import QuizPanel
from trivia_app.ui.dialog_helpers import confirm_leave_quiz, show_info


class TriviaMode(Enum):
    """Which screen the main window is showing."""

    OPTIONS = auto()
    QUIZ = auto()


class TriviaMainWindow(QMainWindow):
    """Main Qt window hosting the options form and the running quiz."""

    def __init__(self, question_loader: QuestionLoader) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.question_loader = question_loader
        self._mode = TriviaMode.OPTIONS

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)
        root_layout.addLayout(button_row)

        self.mode_stack = QStackedWidget(self)
        self.options_panel = OptionsPanel(on_start_quiz=self._handle_start_quiz, parent=self)
        self.quiz_panel = QuizPanel(
            self.question_loader,
            on_leave=self._handle_leave_quiz,
            parent=self,
        )
        self.mode_stack.addWidget(self.options_panel)
        self.mode_stack.addWidget(self.quiz_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(TriviaMode.OPTIONS)

    def _set_mode(self, mode: TriviaMode) -> None:
        self._mode = mode
        index_map = {
            TriviaMode.OPTIONS: 0,
            TriviaMode.QUIZ: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    def _handle_start_quiz(self, options: QuizOptions) -> None:
        self._set_mode(TriviaMode.QUIZ)
        self.quiz_panel.start_quiz(options)

    def _handle_leave_quiz(self) -> None:
        if self.quiz_panel.is_quiz_running() and not confirm_leave_quiz(self):
            return
        self.quiz_panel.end_quiz()
        self._set_mode(TriviaMode.OPTIONS)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"{QUESTION_SOURCE_CREDIT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.quiz_panel.end_quiz()
        super().closeEvent(event)
