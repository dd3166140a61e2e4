"""Tests for background question loading and delivery into a session."""

import threading

from trivia_app.core.models import SessionPhase
from trivia_app.core.quiz_options import QuizOptions
from trivia_app.core.services.question_loader import QuestionLoader
from trivia_app.core.services.quiz_session import QuizSession
from trivia_app.core.trivia_client import TriviaFetchError


class FakeClient:
    def __init__(self, result=None, error=None, gate=None):
        self.result = result or []
        self.error = error
        self.gate = gate
        self.requested = []

    def fetch_questions(self, options):
        self.requested.append(options)
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.error is not None:
            raise self.error
        return self.result


class Outcome:
    def __init__(self):
        self.ready = []
        self.failed = []

    def on_ready(self, question_set):
        self.ready.append(question_set)

    def on_failed(self, reason):
        self.failed.append(reason)


def test_successful_fetch_builds_question_set(capital_question, answer_question, rng):
    client = FakeClient(result=[capital_question, answer_question])
    loader = QuestionLoader(client, rng=rng)
    outcome = Outcome()
    options = QuizOptions(amount=2)

    handle = loader.request(options, outcome.on_ready, outcome.on_failed)

    assert handle.join(timeout=5)
    assert client.requested == [options]
    assert len(outcome.ready) == 1
    assert [q.correct_answer for q in outcome.ready[0]] == ["Paris", "42"]
    assert outcome.failed == []


def test_fetch_error_is_reported_as_failure():
    loader = QuestionLoader(FakeClient(error=TriviaFetchError("service unavailable")))
    outcome = Outcome()

    handle = loader.request(QuizOptions(), outcome.on_ready, outcome.on_failed)

    assert handle.join(timeout=5)
    assert outcome.failed == ["service unavailable"]
    assert outcome.ready == []


def test_unexpected_error_is_reported_as_failure():
    loader = QuestionLoader(FakeClient(error=KeyError("results")))
    outcome = Outcome()

    handle = loader.request(QuizOptions(), outcome.on_ready, outcome.on_failed)

    assert handle.join(timeout=5)
    assert len(outcome.failed) == 1
    assert outcome.failed[0].startswith("Unexpected error")


def test_cancelled_request_never_delivers(capital_question):
    gate = threading.Event()
    loader = QuestionLoader(FakeClient(result=[capital_question], gate=gate))
    outcome = Outcome()

    handle = loader.request(QuizOptions(), outcome.on_ready, outcome.on_failed)
    handle.cancel()
    gate.set()

    assert handle.join(timeout=5)
    assert handle.is_cancelled
    assert outcome.ready == []
    assert outcome.failed == []


def test_outcome_goes_through_dispatcher(capital_question):
    queued = []
    loader = QuestionLoader(FakeClient(result=[capital_question]), dispatch=queued.append)
    outcome = Outcome()

    handle = loader.request(QuizOptions(), outcome.on_ready, outcome.on_failed)
    assert handle.join(timeout=5)
    assert outcome.ready == []

    queued.pop()()
    assert len(outcome.ready) == 1


def test_loader_drives_session_into_progress(capital_question, answer_question, tick_source):
    session = QuizSession(30, tick_source=tick_source)
    loader = QuestionLoader(FakeClient(result=[capital_question, answer_question]))

    handle = loader.request(QuizOptions(amount=2), session.on_questions_ready, session.on_fetch_failed)

    assert handle.join(timeout=5)
    assert session.phase is SessionPhase.IN_PROGRESS
    assert len(session.question_set) == 2
    assert tick_source.is_running()


def test_empty_batch_finalizes_session(tick_source):
    session = QuizSession(30, tick_source=tick_source)
    loader = QuestionLoader(FakeClient(result=[]))

    handle = loader.request(QuizOptions(), session.on_questions_ready, session.on_fetch_failed)

    assert handle.join(timeout=5)
    assert session.phase is SessionPhase.FINALIZED
    assert session.score() == (0, 0)


def test_late_delivery_after_teardown_is_dropped(capital_question, tick_source):
    queued = []
    session = QuizSession(30, tick_source=tick_source)
    loader = QuestionLoader(FakeClient(result=[capital_question]), dispatch=queued.append)

    handle = loader.request(QuizOptions(), session.on_questions_ready, session.on_fetch_failed)
    assert handle.join(timeout=5)
    session.teardown()
    queued.pop()()

    assert session.phase is SessionPhase.LOADING
    assert not tick_source.is_running()
