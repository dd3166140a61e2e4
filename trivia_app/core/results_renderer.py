"""Markdown rendering of a finished quiz for the results review pane."""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt

from trivia_app.core.models import QuestionResult, QuizScore

_MARKDOWN_SPECIAL_CHARS = "\\`*_{}[]()#+-.!|<>"


def escape_markdown(text: str) -> str:
    """Backslash-escape characters that markdown would interpret."""
    return "".join(f"\\{char}" if char in _MARKDOWN_SPECIAL_CHARS else char for char in text)


@dataclass(slots=True)
class ResultsRenderer:
    """Converts a score and per-question results into an HTML review."""

    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": False})

    def render_markdown(self, score: QuizScore, results: list[QuestionResult]) -> str:
        lines = [f"## Score: {score.correct_count} / {score.total_count} ({score.percentage:.0f}%)", ""]
        if not results:
            lines.append("_There were no questions in this quiz._")
            return "\n".join(lines)

        for number, result in enumerate(results, start=1):
            question = result.question
            verdict = "Correct" if result.is_correct else "Wrong"
            lines.append(f"{number}\\. **{escape_markdown(question.prompt_text)}** ({verdict})")
            lines.append("")
            if result.selected_answer is None:
                lines.append("- Your answer: _not answered_")
            else:
                lines.append(f"- Your answer: {escape_markdown(result.selected_answer)}")
            if not result.is_correct:
                lines.append(f"- Correct answer: {escape_markdown(question.correct_answer)}")
            lines.append("")
        return "\n".join(lines)

    def render_html(self, score: QuizScore, results: list[QuestionResult]) -> str:
        return self._markdown.render(self.render_markdown(score, results))


renderer = ResultsRenderer()
