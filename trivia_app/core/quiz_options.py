"""Validated parameters for starting a quiz session."""

from __future__ import annotations

from dataclasses import dataclass

from trivia_app.constants.quiz_constants import (
    CATEGORIES,
    DEFAULT_QUESTION_AMOUNT,
    DEFAULT_TIMER_DURATION_SECONDS,
    DIFFICULTIES,
    DIFFICULTY_EASY_UPPER_BOUND,
    DIFFICULTY_MEDIUM_UPPER_BOUND,
    MAX_QUESTION_AMOUNT,
    MIN_QUESTION_AMOUNT,
    QUESTION_TYPES,
)


class InvalidQuizOptionsError(ValueError):
    """Raised when quiz parameters fall outside the supported ranges."""


@dataclass(frozen=True, slots=True)
class QuizOptions:
    """Parameters chosen on the options screen."""

    amount: int = DEFAULT_QUESTION_AMOUNT
    category_id: int | None = None
    difficulty: str | None = None
    question_type: str | None = None
    timer_duration_seconds: int = DEFAULT_TIMER_DURATION_SECONDS


def difficulty_from_slider(value: float) -> str:
    """Map a 0..1 slider position onto an API difficulty."""
    if value < DIFFICULTY_EASY_UPPER_BOUND:
        return "easy"
    if value < DIFFICULTY_MEDIUM_UPPER_BOUND:
        return "medium"
    return "hard"


def parse_amount(text: str) -> int:
    """Parse the free-text question count field."""
    try:
        amount = int(text.strip())
    except ValueError as exc:
        raise InvalidQuizOptionsError(f"Question amount must be a whole number, got {text!r}.") from exc
    _validate_amount(amount)
    return amount


def validate_quiz_options(options: QuizOptions) -> QuizOptions:
    """Check every field and return the options unchanged when valid."""
    _validate_amount(options.amount)

    known_categories = {category_id for category_id, _ in CATEGORIES}
    if options.category_id is not None and options.category_id not in known_categories:
        raise InvalidQuizOptionsError(f"Unknown category id {options.category_id}.")

    if options.difficulty is not None and options.difficulty not in DIFFICULTIES:
        raise InvalidQuizOptionsError(f"Unknown difficulty {options.difficulty!r}.")

    known_types = {value for value, _ in QUESTION_TYPES}
    if options.question_type is not None and options.question_type not in known_types:
        raise InvalidQuizOptionsError(f"Unknown question type {options.question_type!r}.")

    if options.timer_duration_seconds <= 0:
        raise InvalidQuizOptionsError("Timer duration must be a positive number of seconds.")

    return options


def _validate_amount(amount: int) -> None:
    if not MIN_QUESTION_AMOUNT <= amount <= MAX_QUESTION_AMOUNT:
        raise InvalidQuizOptionsError(
            f"Question amount must be between {MIN_QUESTION_AMOUNT} and {MAX_QUESTION_AMOUNT}."
        )
