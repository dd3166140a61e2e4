"""Tests for the answer ledger."""

from trivia_app.core.services.answer_ledger import AnswerLedger


def test_unanswered_question_returns_none():
    ledger = AnswerLedger()

    assert ledger.get("q1") is None
    assert ledger.answered_count == 0


def test_last_write_wins():
    ledger = AnswerLedger()

    for answer in ("Lyon", "Nice", "Paris", "Lyon"):
        assert ledger.select("q1", answer)

    assert ledger.get("q1") == "Lyon"
    assert ledger.answered_count == 1


def test_questions_are_tracked_independently():
    ledger = AnswerLedger()
    ledger.select("q1", "Paris")
    ledger.select("q2", "42")

    assert ledger.snapshot() == {"q1": "Paris", "q2": "42"}


def test_locked_ledger_ignores_selections():
    ledger = AnswerLedger()
    ledger.select("q1", "Paris")
    ledger.lock()

    assert ledger.is_locked
    assert not ledger.select("q1", "Lyon")
    assert not ledger.select("q2", "42")
    assert ledger.snapshot() == {"q1": "Paris"}


def test_snapshot_is_a_copy():
    ledger = AnswerLedger()
    ledger.select("q1", "Paris")

    snapshot = ledger.snapshot()
    snapshot["q1"] = "Nice"

    assert ledger.get("q1") == "Paris"
