"""State machine for a single quiz session: loading, answering and scoring."""

from __future__ import annotations

import logging
from typing import Callable

from trivia_app.core.models import (
    AnswerMark,
    FinalizationReason,
    QuestionResult,
    QuestionSet,
    QuizScore,
    SessionEvent,
    SessionPhase,
)
from trivia_app.core.services.answer_ledger import AnswerLedger
from trivia_app.core.services.countdown_timer import CountdownTimer, TickSource

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionEvent], None]


class SessionStateError(RuntimeError):
    """Raised when an operation is used in a phase that does not support it."""


class QuizSession:
    """Owns the answer ledger and countdown of one quiz attempt.

    A session starts in ``LOADING``, moves to ``IN_PROGRESS`` once questions
    arrive and ends in ``FINALIZED`` after an explicit submit or when the
    countdown expires, whichever happens first. Every event is expected on a
    single thread; events that arrive after finalization or teardown are
    ignored.
    """

    def __init__(self, timer_duration_seconds: int, tick_source: TickSource | None = None) -> None:
        self._phase = SessionPhase.LOADING
        self._question_set = QuestionSet()
        self._ledger = AnswerLedger()
        self._timer = CountdownTimer(
            timer_duration_seconds,
            on_expired=self._handle_timer_expired,
            on_tick=self._handle_timer_tick,
        )
        self._tick_source = tick_source
        self._fetch_error: str | None = None
        self._finalization_reason: FinalizationReason | None = None
        self._final_score: QuizScore | None = None
        self._listeners: list[SessionListener] = []
        self._torn_down: bool = False

    # --- Observable state ---

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def question_set(self) -> QuestionSet:
        return self._question_set

    @property
    def ledger(self) -> AnswerLedger:
        return self._ledger

    @property
    def time_remaining_seconds(self) -> int:
        return self._timer.remaining_seconds

    @property
    def timer_active(self) -> bool:
        return self._timer.is_active

    @property
    def fetch_error(self) -> str | None:
        return self._fetch_error

    @property
    def has_fetch_failed(self) -> bool:
        return self._phase is SessionPhase.LOADING and self._fetch_error is not None

    @property
    def finalization_reason(self) -> FinalizationReason | None:
        return self._finalization_reason

    @property
    def is_finalized(self) -> bool:
        return self._phase is SessionPhase.FINALIZED

    @property
    def is_torn_down(self) -> bool:
        return self._torn_down

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Question provider callbacks ---

    def on_questions_ready(self, question_set: QuestionSet) -> None:
        if self._torn_down or self._phase is not SessionPhase.LOADING:
            logger.debug("Ignoring question set delivered in phase %s", self._phase.name)
            return

        self._question_set = question_set
        self._fetch_error = None
        self._set_phase(SessionPhase.IN_PROGRESS)
        # A listener may have submitted or torn the session down already.
        if self._torn_down or self._phase is not SessionPhase.IN_PROGRESS:
            return

        if question_set.is_empty():
            self._finalize(FinalizationReason.EMPTY_QUESTION_SET)
            return

        self._timer.start()
        if self._tick_source is not None:
            self._tick_source.start(self.tick)

    def on_fetch_failed(self, reason: str) -> None:
        if self._torn_down or self._phase is not SessionPhase.LOADING:
            logger.debug("Ignoring fetch failure delivered in phase %s", self._phase.name)
            return
        self._fetch_error = reason or "unknown error"
        logger.warning("Question fetch failed: %s", self._fetch_error)
        self._notify(SessionEvent.FETCH_FAILED)

    def retry_loading(self) -> bool:
        """Clear a fetch failure so a new request can be issued."""
        if self._torn_down or not self.has_fetch_failed:
            return False
        self._fetch_error = None
        self._notify(SessionEvent.LOADING_RESTARTED)
        return True

    # --- Player events ---

    def select(self, question_id: str, answer: str) -> bool:
        """Record ``answer`` for ``question_id``. Returns True if the ledger changed."""
        if self._torn_down or self._phase is not SessionPhase.IN_PROGRESS:
            logger.debug("Ignoring selection in phase %s", self._phase.name)
            return False

        question = self._question_set.get(question_id)
        if question is None:
            logger.warning("Ignoring selection for unknown question %s", question_id)
            return False
        if answer not in question.presented_answers:
            logger.warning("Ignoring answer %r that question %s does not offer", answer, question_id)
            return False

        if not self._ledger.select(question_id, answer):
            return False
        self._notify(SessionEvent.SELECTION_CHANGED)
        return True

    def selected_answer(self, question_id: str) -> str | None:
        return self._ledger.get(question_id)

    def submit(self) -> bool:
        """Finalize the session. Returns False if it was not in progress."""
        if self._torn_down or self._phase is not SessionPhase.IN_PROGRESS:
            logger.debug("Ignoring submit in phase %s", self._phase.name)
            return False
        self._finalize(FinalizationReason.SUBMITTED)
        return True

    def tick(self) -> None:
        if self._torn_down or self._phase is not SessionPhase.IN_PROGRESS:
            return
        self._timer.tick()

    def teardown(self) -> None:
        """Stop the clock and detach listeners; later events become no-ops."""
        if self._torn_down:
            return
        self._timer.stop()
        self._stop_tick_source()
        self._listeners.clear()
        self._torn_down = True
        logger.info("Quiz session torn down in phase %s", self._phase.name)

    # --- Results ---

    def score(self) -> QuizScore:
        """Return the final score.

        Raises:
            SessionStateError: If the session has not been finalized yet.
        """
        if self._final_score is None:
            raise SessionStateError(f"Score is only available once finalized (phase is {self._phase.name}).")
        return self._final_score

    def results(self) -> list[QuestionResult]:
        if not self.is_finalized:
            raise SessionStateError(f"Results are only available once finalized (phase is {self._phase.name}).")
        results: list[QuestionResult] = []
        for question in self._question_set:
            selected = self._ledger.get(question.id)
            results.append(
                QuestionResult(
                    question=question,
                    selected_answer=selected,
                    is_correct=question.is_correct(selected),
                )
            )
        return results

    def answer_mark(self, question_id: str, answer: str) -> AnswerMark:
        """Return how ``answer`` of ``question_id`` should be highlighted."""
        selected = self._ledger.get(question_id)
        if self.is_finalized:
            question = self._question_set.get(question_id)
            if question is not None and answer == question.correct_answer:
                return AnswerMark.CORRECT
            if selected == answer:
                return AnswerMark.INCORRECT
            return AnswerMark.NONE
        if selected == answer:
            return AnswerMark.SELECTED
        return AnswerMark.NONE

    # --- Internals ---

    def _handle_timer_tick(self, remaining_seconds: int) -> None:
        self._notify(SessionEvent.TIMER_TICKED)

    def _handle_timer_expired(self) -> None:
        self._finalize(FinalizationReason.TIME_EXPIRED)

    def _finalize(self, reason: FinalizationReason) -> None:
        if self._phase is SessionPhase.FINALIZED:
            return
        self._timer.stop()
        self._stop_tick_source()
        self._ledger.lock()
        self._finalization_reason = reason
        self._final_score = self._compute_score()
        logger.info(
            "Quiz finalized (%s): %d/%d correct",
            reason.name,
            self._final_score.correct_count,
            self._final_score.total_count,
        )
        self._set_phase(SessionPhase.FINALIZED)

    def _compute_score(self) -> QuizScore:
        correct = sum(1 for question in self._question_set if question.is_correct(self._ledger.get(question.id)))
        return QuizScore(correct_count=correct, total_count=len(self._question_set))

    def _stop_tick_source(self) -> None:
        if self._tick_source is not None and self._tick_source.is_running():
            self._tick_source.stop()

    def _set_phase(self, phase: SessionPhase) -> None:
        logger.info("Quiz session %s -> %s", self._phase.name, phase.name)
        self._phase = phase
        self._notify(SessionEvent.PHASE_CHANGED)

    def _notify(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Session listener failed while handling %s", event.name)
