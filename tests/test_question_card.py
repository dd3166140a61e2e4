"""Tests for the question card widget."""

import random

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel

from trivia_app.core.models import AnswerMark, RawQuestion
from trivia_app.core.question_builder import build_question
from trivia_app.styling.styles import ANSWER_MARK_SUFFIX
from trivia_app.ui.question_card import QuestionCard


def _question(prompt, correct, distractors):
    raw = RawQuestion(
        prompt_text=prompt,
        correct_answer=correct,
        distractor_answers=tuple(distractors),
        question_type="multiple",
        difficulty="easy",
        category="General Knowledge",
    )
    return build_question(raw, random.Random(7))


def test_card_keeps_a_button_per_presented_answer(qt_app):
    question = _question("Pick one", "Yes", ["No", "No", "Maybe"])
    card = QuestionCard(question, lambda question_id, answer: None)

    assert [answer for answer, _button in card.answer_buttons] == list(question.presented_answers)
    assert len(card.answer_buttons) == 4


def test_refresh_restyles_and_locks_duplicate_answers(qt_app):
    question = _question("Pick one", "Yes", ["No", "No", "Maybe"])
    card = QuestionCard(question, lambda question_id, answer: None)

    card.refresh(lambda answer: AnswerMark.INCORRECT if answer == "No" else AnswerMark.NONE, locked=True)

    no_buttons = [button for answer, button in card.answer_buttons if answer == "No"]
    assert len(no_buttons) == 2
    for button in no_buttons:
        assert button.text() == f"No{ANSWER_MARK_SUFFIX[AnswerMark.INCORRECT]}"
    assert all(not button.isEnabled() for _answer, button in card.answer_buttons)


def test_clicking_a_button_reports_the_answer(qt_app):
    question = _question("Pick one", "Yes", ["No", "Maybe"])
    picked = []
    card = QuestionCard(question, lambda question_id, answer: picked.append((question_id, answer)))

    answer, button = card.answer_buttons[0]
    button.click()

    assert picked == [(question.id, answer)]


def test_markup_in_prompt_is_shown_as_plain_text(qt_app):
    question = _question("Is <b>bold</b> & <i>italic</i> markup?", "Yes", ["No"])
    card = QuestionCard(question, lambda question_id, answer: None)

    labels = card.findChildren(QLabel)
    prompt_labels = [label for label in labels if label.text() == question.prompt_text]
    assert len(prompt_labels) == 1
    assert prompt_labels[0].textFormat() == Qt.PlainText
