"""Tests for the results review renderer."""

from trivia_app.core.models import QuestionResult, QuizScore, RawQuestion
from trivia_app.core.question_builder import build_question
from trivia_app.core.results_renderer import ResultsRenderer, escape_markdown


def _result(rng, prompt, correct, selected):
    question = build_question(RawQuestion(prompt_text=prompt, correct_answer=correct, distractor_answers=("x", "y")), rng)
    return QuestionResult(question=question, selected_answer=selected, is_correct=selected == correct)


def test_escape_markdown_protects_emphasis():
    assert escape_markdown("2*3*4") == "2\\*3\\*4"


def test_render_html_lists_each_question(rng):
    results = [
        _result(rng, "What is the capital of France?", "Paris", "Paris"),
        _result(rng, "What is 6*7?", "42", None),
    ]

    html = ResultsRenderer().render_html(QuizScore(1, 2), results)

    assert "Score: 1 / 2 (50%)" in html
    assert "What is the capital of France?" in html
    assert "What is 6*7?" in html
    assert "<em>not answered</em>" in html
    assert "Correct answer: 42" in html


def test_correct_answers_do_not_repeat_solution(rng):
    results = [_result(rng, "Capital?", "Paris", "Paris")]

    markdown = ResultsRenderer().render_markdown(QuizScore(1, 1), results)

    assert "Your answer: Paris" in markdown
    assert "Correct answer" not in markdown


def test_empty_quiz_renders_placeholder():
    html = ResultsRenderer().render_html(QuizScore(0, 0), [])

    assert "Score: 0 / 0 (0%)" in html
    assert "no questions" in html
