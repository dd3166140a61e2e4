"""Helper functions for common dialog patterns in the trivia UI."""

from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QMessageBox, QWidget

from trivia_app.constants.ui_constants import (
    LEAVE_QUIZ_MESSAGE,
    LEAVE_QUIZ_TITLE,
    SCORE_TEMPLATE,
    SCORE_TITLE,
    TIME_UP_MESSAGE,
)
from trivia_app.core.models import QuizScore


def _apply_optional_font(widget: QWidget, font_point_size: int | None) -> None:
    """Apply font size to a widget when requested."""
    if font_point_size is None or font_point_size <= 0:
        return

    font: QFont = widget.font()
    font.setPointSize(font_point_size)
    widget.setFont(font)


def confirm_leave_quiz(parent: QWidget) -> bool:
    """Ask before abandoning a quiz that is still running.

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        LEAVE_QUIZ_TITLE,
        LEAVE_QUIZ_MESSAGE,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def show_score(parent: QWidget, score: QuizScore, *, time_expired: bool = False) -> None:
    """Show the final score dialog."""
    message = SCORE_TEMPLATE.format(correct=score.correct_count, total=score.total_count)
    if time_expired:
        message = f"{TIME_UP_MESSAGE}\n{message}"
    show_info(parent, SCORE_TITLE, message, font_point_size=14)


def show_info(
    parent: QWidget,
    title: str,
    message: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show information dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Information message
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    _apply_optional_font(msg_box, font_point_size)
    msg_box.exec()


def show_warning(parent: QWidget, title: str, message: str) -> None:
    """Show warning dialog."""
    QMessageBox.warning(parent, title, message)


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show error dialog."""
    QMessageBox.critical(parent, title, message)
