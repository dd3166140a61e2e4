"""Component running one quiz session: loading, answering and results."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.ui_constants import (
    BACK_BUTTON,
    DONE_BUTTON,
    EMPTY_QUIZ_MESSAGE,
    FETCH_FAILED_TEMPLATE,
    FETCH_FAILED_TITLE,
    LOADING_MESSAGE,
    RETRY_BUTTON,
    SUBMIT_BUTTON,
    TIME_REMAINING_TEMPLATE,
    TIME_UP_MESSAGE,
    WINDOW_TITLE,
)
from trivia_app.core.models import FinalizationReason, SessionEvent, SessionPhase
from trivia_app.core.quiz_options import QuizOptions
from trivia_app.core.results_renderer import renderer
from trivia_app.core.services.question_loader import LoadHandle, QuestionLoader
from trivia_app.core.services.quiz_session import QuizSession
from trivia_app.styling.styles import Styles
from trivia_app.ui.dialog_helpers import show_error, show_score, show_warning
from trivia_app.ui.question_card import QuestionCard
from trivia_app.ui.tick_driver import QtTickDriver

logger = logging.getLogger(__name__)


class QuizPanel(QWidget):
    """UI component that binds a ``QuizSession`` to widgets."""

    def __init__(
        self,
        question_loader: QuestionLoader,
        on_leave: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.question_loader = question_loader
        self.on_leave = on_leave
        self.tick_driver = QtTickDriver(parent=self)

        self.session: QuizSession | None = None
        self._options: QuizOptions | None = None
        self._load_handle: LoadHandle | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self._cards: list[QuestionCard] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.page_stack = QStackedWidget(self)
        self.page_stack.addWidget(self._build_loading_page())
        self.page_stack.addWidget(self._build_quiz_page())
        layout.addWidget(self.page_stack)

    def _build_loading_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)
        page_layout.addStretch()

        self.status_label = QLabel(LOADING_MESSAGE, page)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        page_layout.addWidget(self.status_label)

        button_row = QHBoxLayout()
        self.retry_button = QPushButton(RETRY_BUTTON, page)
        self.retry_button.clicked.connect(self._handle_retry)
        self.retry_button.setVisible(False)
        button_row.addWidget(self.retry_button)

        self.back_button = QPushButton(BACK_BUTTON, page)
        self.back_button.clicked.connect(self.on_leave)
        button_row.addWidget(self.back_button)
        page_layout.addLayout(button_row)

        page_layout.addStretch()
        return page

    def _build_quiz_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)

        self.time_label = QLabel("", page)
        self.time_label.setAlignment(Qt.AlignCenter)
        self.time_label.setStyleSheet(Styles.get_large_label_style())
        page_layout.addWidget(self.time_label)

        self.scroll_area = QScrollArea(page)
        self.scroll_area.setWidgetResizable(True)
        page_layout.addWidget(self.scroll_area, stretch=1)

        self.results_view = QTextBrowser(page)
        self.results_view.setVisible(False)
        page_layout.addWidget(self.results_view, stretch=1)

        self.submit_button = QPushButton(SUBMIT_BUTTON, page)
        self.submit_button.clicked.connect(self._handle_submit)
        page_layout.addWidget(self.submit_button)
        return page

    # --- Session lifecycle ---

    def start_quiz(self, options: QuizOptions) -> None:
        self.end_quiz()
        logger.info("Starting quiz: %s", options)
        self._options = options
        self.session = QuizSession(options.timer_duration_seconds, tick_source=self.tick_driver)
        self._unsubscribe = self.session.subscribe(self._handle_session_event)
        self._show_loading()
        self._request_questions()

    def end_quiz(self) -> None:
        """Cancel any pending fetch and tear the current session down."""
        if self._load_handle is not None:
            self._load_handle.cancel()
            self._load_handle = None
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self.session is not None:
            self.session.teardown()
            self.session = None
        self._clear_cards()

    def is_quiz_running(self) -> bool:
        return self.session is not None and self.session.phase is SessionPhase.IN_PROGRESS

    def _request_questions(self) -> None:
        if self.session is None or self._options is None:
            return
        session = self.session
        self._load_handle = self.question_loader.request(
            self._options,
            on_ready=session.on_questions_ready,
            on_failed=session.on_fetch_failed,
        )

    # --- Event handling ---

    def _handle_session_event(self, event: SessionEvent) -> None:
        session = self.session
        if session is None:
            return
        if event is SessionEvent.PHASE_CHANGED:
            if session.phase is SessionPhase.IN_PROGRESS:
                self._show_questions()
            elif session.phase is SessionPhase.FINALIZED:
                self._show_results()
        elif event is SessionEvent.SELECTION_CHANGED:
            self._refresh_cards()
        elif event is SessionEvent.TIMER_TICKED:
            self._update_time_label()
        elif event is SessionEvent.FETCH_FAILED:
            self._show_fetch_failure(session.fetch_error or "")
        elif event is SessionEvent.LOADING_RESTARTED:
            self._show_loading()

    def _handle_select(self, question_id: str, answer: str) -> None:
        if self.session is not None:
            self.session.select(question_id, answer)

    def _handle_submit(self) -> None:
        if self.session is None:
            return
        if self.session.is_finalized:
            self.on_leave()
            return
        self.session.submit()

    def _handle_retry(self) -> None:
        if self.session is not None and self.session.retry_loading():
            self._request_questions()

    # --- View updates ---

    def _show_loading(self) -> None:
        self.status_label.setText(LOADING_MESSAGE)
        self.status_label.setStyleSheet("")
        self.retry_button.setVisible(False)
        self.page_stack.setCurrentIndex(0)

    def _show_fetch_failure(self, reason: str) -> None:
        message = FETCH_FAILED_TEMPLATE.format(reason=reason)
        self.status_label.setText(message)
        self.status_label.setStyleSheet(Styles.get_error_label_style())
        self.retry_button.setVisible(True)
        QTimer.singleShot(0, lambda: show_error(self, FETCH_FAILED_TITLE, message))

    def _show_questions(self) -> None:
        session = self.session
        if session is None:
            return
        self._clear_cards()
        container = QWidget(self.scroll_area)
        container_layout = QVBoxLayout()
        container.setLayout(container_layout)
        for question in session.question_set:
            card = QuestionCard(question, self._handle_select, container)
            container_layout.addWidget(card)
            self._cards.append(card)
        container_layout.addStretch()
        self.scroll_area.setWidget(container)

        self.results_view.setVisible(False)
        self.scroll_area.setVisible(True)
        self.submit_button.setText(SUBMIT_BUTTON)
        self._update_time_label()
        self._refresh_cards()
        self.page_stack.setCurrentIndex(1)

    def _show_results(self) -> None:
        session = self.session
        if session is None:
            return
        self._refresh_cards()
        self.submit_button.setText(DONE_BUTTON)
        score = session.score()
        reason = session.finalization_reason

        self.results_view.setHtml(renderer.render_html(score, session.results()))
        self.results_view.setVisible(True)

        if reason is FinalizationReason.EMPTY_QUESTION_SET:
            self.scroll_area.setVisible(False)
            self.time_label.setText("")
            QTimer.singleShot(0, lambda: show_warning(self, WINDOW_TITLE, EMPTY_QUIZ_MESSAGE))
            return

        time_expired = reason is FinalizationReason.TIME_EXPIRED
        if time_expired:
            self.time_label.setText(TIME_UP_MESSAGE)
        # Defer the modal dialog so it does not run inside the tick callback.
        QTimer.singleShot(0, lambda: show_score(self, score, time_expired=time_expired))

    def _update_time_label(self) -> None:
        if self.session is not None:
            self.time_label.setText(TIME_REMAINING_TEMPLATE.format(seconds=self.session.time_remaining_seconds))

    def _refresh_cards(self) -> None:
        session = self.session
        if session is None:
            return
        for card in self._cards:
            question_id = card.question.id
            card.refresh(lambda answer, qid=question_id: session.answer_mark(qid, answer), session.is_finalized)

    def _clear_cards(self) -> None:
        self._cards = []
        old_widget = self.scroll_area.takeWidget() if hasattr(self, "scroll_area") else None
        if old_widget is not None:
            old_widget.deleteLater()
