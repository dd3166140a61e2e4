"""Card widget showing one question and its answer buttons."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGroupBox, QLabel, QPushButton, QVBoxLayout, QWidget

from trivia_app.constants.ui_constants import ANSWER_BUTTON_MIN_HEIGHT
from trivia_app.core.models import AnswerMark, Question
from trivia_app.styling.styles import ANSWER_MARK_SUFFIX, Styles


class QuestionCard(QGroupBox):
    """Renders ``question.presented_answers`` in their frozen order."""

    def __init__(
        self,
        question: Question,
        on_select_answer: Callable[[str, str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.question = question
        self._on_select_answer = on_select_answer
        self._answer_buttons: list[tuple[str, QPushButton]] = []
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        prompt_label = QLabel(self.question.prompt_text, self)
        prompt_label.setTextFormat(Qt.PlainText)
        prompt_label.setWordWrap(True)
        prompt_label.setStyleSheet("font-weight: bold;")
        layout.addWidget(prompt_label)

        for answer in self.question.presented_answers:
            button = QPushButton(answer, self)
            button.setMinimumHeight(ANSWER_BUTTON_MIN_HEIGHT)
            button.clicked.connect(lambda _checked=False, value=answer: self._on_select_answer(self.question.id, value))
            layout.addWidget(button)
            self._answer_buttons.append((answer, button))

    @property
    def answer_buttons(self) -> list[tuple[str, QPushButton]]:
        return list(self._answer_buttons)

    def refresh(self, mark_for: Callable[[str], AnswerMark], locked: bool) -> None:
        """Restyle every answer button; ``mark_for`` maps an answer to its mark."""
        for answer, button in self._answer_buttons:
            mark = mark_for(answer)
            button.setText(f"{answer}{ANSWER_MARK_SUFFIX[mark]}")
            button.setStyleSheet(Styles.get_answer_button_style(mark))
            button.setEnabled(not locked)
