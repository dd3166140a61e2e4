"""Centralized stylesheets for the application."""

from trivia_app.core.models import AnswerMark

from .color_palette import ColorPalette, Theme

_ANSWER_BACKGROUNDS = {
    AnswerMark.NONE: ColorPalette.ANSWER_IDLE_BG,
    AnswerMark.SELECTED: ColorPalette.ANSWER_SELECTED_BG,
    AnswerMark.CORRECT: ColorPalette.ANSWER_CORRECT_BG,
    AnswerMark.INCORRECT: ColorPalette.ANSWER_INCORRECT_BG,
}

# Suffix glyphs mirror the check / cross icons shown next to an answer.
ANSWER_MARK_SUFFIX = {
    AnswerMark.NONE: "",
    AnswerMark.SELECTED: "  ✔",
    AnswerMark.CORRECT: "  ✔",
    AnswerMark.INCORRECT: "  ✘",
}


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QLineEdit, QComboBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QGroupBox {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 10px;
                margin-top: 6px;
                padding: 10px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_error_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.ERROR.get(theme)}; font-weight: bold;"

    @staticmethod
    def get_start_button_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QPushButton {{
                background-color: {ColorPalette.START_BUTTON_BG.get(theme)};
                color: {ColorPalette.START_BUTTON_TEXT.get(theme)};
                border: none;
                border-radius: 10px;
                padding: 12px;
            }}
        """

    @staticmethod
    def get_answer_button_style(mark: AnswerMark, theme: Theme = Theme.LIGHT) -> str:
        background = _ANSWER_BACKGROUNDS[mark].get(theme)
        return f"""
            QPushButton {{
                background-color: {background};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: none;
                border-radius: 8px;
                padding: 10px;
                text-align: left;
            }}
        """
