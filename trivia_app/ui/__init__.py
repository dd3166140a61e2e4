"""Qt UI components for the trivia application."""

from .dialog_helpers import (
    confirm_leave_quiz,
    show_error,
    show_info,
    show_score,
    show_warning,
)
from .dispatcher import QtDispatcher
from .tick_driver import QtTickDriver
from .trivia_main_window import TriviaMainWindow

__all__ = [
    "QtDispatcher",
    "QtTickDriver",
    "TriviaMainWindow",
    "confirm_leave_quiz",
    "show_error",
    "show_info",
    "show_score",
    "show_warning",
]
