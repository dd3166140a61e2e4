"""Domain models for the trivia quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, NamedTuple


@dataclass(frozen=True, slots=True)
class RawQuestion:
    """Decoded question record as delivered by the question provider."""

    prompt_text: str
    correct_answer: str
    distractor_answers: tuple[str, ...]
    question_type: str = "multiple"
    difficulty: str = ""
    category: str = ""


@dataclass(frozen=True, slots=True)
class Question:
    """Question with a stable identity and a frozen answer order."""

    id: str
    prompt_text: str
    correct_answer: str
    distractor_answers: tuple[str, ...]
    question_type: str
    difficulty: str
    category: str
    presented_answers: tuple[str, ...]  # Shuffled once at construction

    def is_correct(self, answer: str | None) -> bool:
        return answer is not None and answer == self.correct_answer


@dataclass(frozen=True, slots=True)
class QuestionSet:
    """Ordered, immutable batch of questions for one session."""

    questions: tuple[Question, ...] = ()

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)

    def is_empty(self) -> bool:
        return not self.questions

    def get(self, question_id: str) -> Question | None:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


class SessionPhase(Enum):
    """Lifecycle phase of a quiz session."""

    LOADING = auto()
    IN_PROGRESS = auto()
    FINALIZED = auto()


class FinalizationReason(Enum):
    """What moved a session into the finalized phase."""

    SUBMITTED = auto()
    TIME_EXPIRED = auto()
    EMPTY_QUESTION_SET = auto()


class SessionEvent(Enum):
    """Notifications published by a quiz session to its listeners."""

    PHASE_CHANGED = auto()
    SELECTION_CHANGED = auto()
    TIMER_TICKED = auto()
    FETCH_FAILED = auto()
    LOADING_RESTARTED = auto()


class AnswerMark(Enum):
    """How a single answer option should be highlighted."""

    NONE = auto()
    SELECTED = auto()
    CORRECT = auto()
    INCORRECT = auto()


class QuizScore(NamedTuple):
    """Final score; compares equal to a plain ``(correct, total)`` tuple."""

    correct_count: int
    total_count: int

    @property
    def percentage(self) -> float:
        if self.total_count == 0:
            return 0.0
        return (self.correct_count / self.total_count) * 100


@dataclass(frozen=True, slots=True)
class QuestionResult:
    """Per-question outcome of a finalized session."""

    question: Question
    selected_answer: str | None
    is_correct: bool
