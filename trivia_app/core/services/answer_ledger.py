"""Service recording the answer chosen for each question."""

from __future__ import annotations


class AnswerLedger:
    """Maps question ids to the currently selected answer (last write wins)."""

    def __init__(self) -> None:
        self._answers: dict[str, str] = {}
        self._locked: bool = False

    def select(self, question_id: str, answer: str) -> bool:
        """Record or overwrite an answer. Returns False once the ledger is locked."""
        if self._locked:
            return False
        self._answers[question_id] = answer
        return True

    def get(self, question_id: str) -> str | None:
        return self._answers.get(question_id)

    def lock(self) -> None:
        self._locked = True

    @property
    def is_locked(self) -> bool:
        return self._locked

    @property
    def answered_count(self) -> int:
        return len(self._answers)

    def snapshot(self) -> dict[str, str]:
        """Return a copy of all recorded answers."""
        return dict(self._answers)
