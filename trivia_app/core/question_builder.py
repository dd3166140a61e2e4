"""Builds immutable questions and question sets from provider records."""

from __future__ import annotations

import random
from typing import Iterable
from uuid import uuid4

from trivia_app.core.models import Question, QuestionSet, RawQuestion


def build_question(raw: RawQuestion, rng: random.Random | None = None) -> Question:
    """Assign an identity to ``raw`` and shuffle its answers exactly once.

    Args:
        raw: Decoded question record.
        rng: Random source used for the shuffle; defaults to the module-level
            generator. Tests pass a seeded ``random.Random``.

    Returns:
        A frozen ``Question`` whose ``presented_answers`` never change.
    """
    shuffler = rng or random
    answers = list(raw.distractor_answers) + [raw.correct_answer]
    shuffler.shuffle(answers)
    return Question(
        id=uuid4().hex,
        prompt_text=raw.prompt_text,
        correct_answer=raw.correct_answer,
        distractor_answers=tuple(raw.distractor_answers),
        question_type=raw.question_type,
        difficulty=raw.difficulty,
        category=raw.category,
        presented_answers=tuple(answers),
    )


def build_question_set(
    raws: Iterable[RawQuestion], rng: random.Random | None = None
) -> QuestionSet:
    """Build a question set preserving provider order. Empty input is allowed."""
    return QuestionSet(questions=tuple(build_question(raw, rng) for raw in raws))
