"""Service that fetches a question batch off the UI thread."""

from __future__ import annotations

import logging
import random
from threading import Event, Thread
from typing import Callable

from trivia_app.core.models import QuestionSet
from trivia_app.core.question_builder import build_question_set
from trivia_app.core.quiz_options import QuizOptions
from trivia_app.core.trivia_client import TriviaClient, TriviaFetchError

logger = logging.getLogger(__name__)

Dispatcher = Callable[[Callable[[], None]], None]


def call_immediately(callback: Callable[[], None]) -> None:
    """Dispatcher that runs the callback on whichever thread delivers it."""
    callback()


class LoadHandle:
    """Tracks one in-flight request and lets the caller drop its outcome."""

    def __init__(self) -> None:
        self._cancelled = Event()
        self._thread: Thread | None = None

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled.is_set()

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the worker thread. Returns True if it has finished."""
        if self._thread is not None:
            self._thread.join(timeout)
        return not self.is_alive()


class QuestionLoader:
    """Runs ``TriviaClient.fetch_questions`` in a background thread.

    The outcome is handed to ``dispatch`` so it can be re-delivered on the
    thread that owns the session. Cancelled requests never reach their
    callbacks.
    """

    def __init__(
        self,
        client: TriviaClient,
        dispatch: Dispatcher = call_immediately,
        rng: random.Random | None = None,
    ) -> None:
        self._client = client
        self._dispatch = dispatch
        self._rng = rng

    def request(
        self,
        options: QuizOptions,
        on_ready: Callable[[QuestionSet], None],
        on_failed: Callable[[str], None],
    ) -> LoadHandle:
        handle = LoadHandle()

        def deliver(outcome: Callable[[], None]) -> None:
            def run() -> None:
                if handle.is_cancelled:
                    logger.debug("Dropping outcome of a cancelled question request")
                    return
                outcome()

            self._dispatch(run)

        def worker() -> None:
            try:
                raws = self._client.fetch_questions(options)
                question_set = build_question_set(raws, self._rng)
            except TriviaFetchError as exc:
                reason = str(exc)
                deliver(lambda: on_failed(reason))
            except Exception as exc:
                logger.exception("Unexpected error while loading questions")
                reason = f"Unexpected error: {exc}"
                deliver(lambda: on_failed(reason))
            else:
                deliver(lambda: on_ready(question_set))

        thread = Thread(target=worker, name="TriviaFetch", daemon=True)
        handle._thread = thread
        thread.start()
        return handle
