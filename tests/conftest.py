"""Shared fixtures for the trivia test suite."""

import os
import random

import pytest

from trivia_app.core.models import RawQuestion


class FakeTickSource:
    """Tick source driven by hand so tests never wait on a real clock."""

    def __init__(self):
        self.callback = None
        self.start_calls = 0
        self.stop_calls = 0

    def start(self, callback):
        self.callback = callback
        self.start_calls += 1

    def stop(self):
        self.callback = None
        self.stop_calls += 1

    def is_running(self):
        return self.callback is not None

    def fire(self, times=1):
        for _ in range(times):
            if self.callback is None:
                return
            self.callback()


@pytest.fixture
def tick_source():
    return FakeTickSource()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def capital_question():
    return RawQuestion(
        prompt_text="What is the capital of France?",
        correct_answer="Paris",
        distractor_answers=("Lyon", "Nice"),
        question_type="multiple",
        difficulty="easy",
        category="Geography",
    )


@pytest.fixture
def answer_question():
    return RawQuestion(
        prompt_text="What is the answer to life, the universe and everything?",
        correct_answer="42",
        distractor_answers=("7", "13"),
        question_type="multiple",
        difficulty="medium",
        category="General Knowledge",
    )


@pytest.fixture
def make_raw_questions():
    def factory(count):
        return [
            RawQuestion(
                prompt_text=f"Question {index}?",
                correct_answer=f"right-{index}",
                distractor_answers=(f"wrong-{index}-a", f"wrong-{index}-b", f"wrong-{index}-c"),
            )
            for index in range(count)
        ]

    return factory


@pytest.fixture(scope="session")
def qt_app():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
