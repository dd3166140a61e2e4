"""Component for choosing quiz parameters before a session starts."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QGroupBox,
    QLabel,
    QLineEdit,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.quiz_constants import (
    CATEGORIES,
    DEFAULT_DIFFICULTY_SLIDER_VALUE,
    DEFAULT_QUESTION_AMOUNT,
    DEFAULT_QUESTION_TYPE,
    DEFAULT_TIMER_DURATION_SECONDS,
    QUESTION_TYPES,
    TIMER_OPTIONS,
)
from trivia_app.constants.ui_constants import (
    INVALID_INPUT_MESSAGE,
    INVALID_INPUT_TITLE,
    OPTIONS_AMOUNT_LABEL,
    OPTIONS_AMOUNT_PLACEHOLDER,
    OPTIONS_ANY_CHOICE,
    OPTIONS_CATEGORY_LABEL,
    OPTIONS_DIFFICULTY_TEMPLATE,
    OPTIONS_TIMER_LABEL,
    OPTIONS_TYPE_LABEL,
    START_BUTTON,
)
from trivia_app.core.quiz_options import (
    InvalidQuizOptionsError,
    QuizOptions,
    difficulty_from_slider,
    parse_amount,
    validate_quiz_options,
)
from trivia_app.styling.styles import Styles
from trivia_app.ui.dialog_helpers import show_warning

_SLIDER_STEPS = 100


class OptionsPanel(QWidget):
    """UI component collecting amount, category, difficulty, type and timer."""

    def __init__(
        self,
        on_start_quiz: Callable[[QuizOptions], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start_quiz = on_start_quiz
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        group = QGroupBox(self)
        group_layout = QVBoxLayout()
        group.setLayout(group_layout)

        group_layout.addWidget(self._heading(OPTIONS_AMOUNT_LABEL))
        self.amount_input = QLineEdit(str(DEFAULT_QUESTION_AMOUNT), self)
        self.amount_input.setPlaceholderText(OPTIONS_AMOUNT_PLACEHOLDER)
        group_layout.addWidget(self.amount_input)

        group_layout.addWidget(self._heading(OPTIONS_CATEGORY_LABEL))
        self.category_combo = QComboBox(self)
        self.category_combo.addItem(OPTIONS_ANY_CHOICE, None)
        for category_id, label in CATEGORIES:
            self.category_combo.addItem(label, category_id)
        group_layout.addWidget(self.category_combo)

        self.difficulty_label = self._heading("")
        group_layout.addWidget(self.difficulty_label)
        self.difficulty_slider = QSlider(Qt.Horizontal, self)
        self.difficulty_slider.setRange(0, _SLIDER_STEPS)
        self.difficulty_slider.setValue(int(DEFAULT_DIFFICULTY_SLIDER_VALUE * _SLIDER_STEPS))
        self.difficulty_slider.valueChanged.connect(self._update_difficulty_label)
        group_layout.addWidget(self.difficulty_slider)
        self._update_difficulty_label()

        group_layout.addWidget(self._heading(OPTIONS_TYPE_LABEL))
        self.type_combo = QComboBox(self)
        self.type_combo.addItem(OPTIONS_ANY_CHOICE, None)
        for value, label in QUESTION_TYPES:
            self.type_combo.addItem(label, value)
        self.type_combo.setCurrentIndex(self.type_combo.findData(DEFAULT_QUESTION_TYPE))
        group_layout.addWidget(self.type_combo)

        group_layout.addWidget(self._heading(OPTIONS_TIMER_LABEL))
        self.timer_combo = QComboBox(self)
        for label, seconds in TIMER_OPTIONS:
            self.timer_combo.addItem(label, seconds)
        self.timer_combo.setCurrentIndex(self.timer_combo.findData(DEFAULT_TIMER_DURATION_SECONDS))
        group_layout.addWidget(self.timer_combo)

        self.start_button = QPushButton(START_BUTTON, self)
        self.start_button.setStyleSheet(Styles.get_start_button_style())
        self.start_button.clicked.connect(self._handle_start)
        group_layout.addWidget(self.start_button)

        layout.addWidget(group)
        layout.addStretch()

    def _heading(self, text: str) -> QLabel:
        label = QLabel(text, self)
        label.setStyleSheet("font-weight: bold;")
        return label

    def _current_difficulty(self) -> str:
        return difficulty_from_slider(self.difficulty_slider.value() / _SLIDER_STEPS)

    def _update_difficulty_label(self) -> None:
        self.difficulty_label.setText(
            OPTIONS_DIFFICULTY_TEMPLATE.format(difficulty=self._current_difficulty().capitalize())
        )

    def collect_options(self) -> QuizOptions:
        """Build validated options from the form.

        Raises:
            InvalidQuizOptionsError: If any field is out of range.
        """
        options = QuizOptions(
            amount=parse_amount(self.amount_input.text()),
            category_id=self.category_combo.currentData(),
            difficulty=self._current_difficulty(),
            question_type=self.type_combo.currentData(),
            timer_duration_seconds=self.timer_combo.currentData(),
        )
        return validate_quiz_options(options)

    def _handle_start(self) -> None:
        try:
            options = self.collect_options()
        except InvalidQuizOptionsError:
            show_warning(self, INVALID_INPUT_TITLE, INVALID_INPUT_MESSAGE)
            return
        self.on_start_quiz(options)
