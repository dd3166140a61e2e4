"""Color palette for TriviaQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#000000",      # Black
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_SECONDARY = ThemeColors(
        light="#666666",      # Dark Gray
        dark="#AAAAAA"        # Light Gray
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1E1E1E"        # Dark Gray
    )

    CARD_BACKGROUND = ThemeColors(
        light="#FFFFFF",
        dark="#2D2D2D"
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",      # Gray
        dark="#555555"        # Dark Gray
    )

    START_BUTTON_BG = ThemeColors(
        light="#22A447",      # Green
        dark="#2FBF5A"
    )

    START_BUTTON_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#FFFFFF"
    )

    ERROR = ThemeColors(
        light="#D13438",      # Red
        dark="#FF6B6B"        # Light Red
    )

    # Answer highlight backgrounds (translucent over the card)
    ANSWER_IDLE_BG = ThemeColors(
        light="rgba(128, 128, 128, 0.10)",
        dark="rgba(200, 200, 200, 0.10)"
    )

    ANSWER_SELECTED_BG = ThemeColors(
        light="rgba(0, 122, 255, 0.20)",     # Blue
        dark="rgba(74, 158, 255, 0.30)"
    )

    ANSWER_CORRECT_BG = ThemeColors(
        light="rgba(52, 199, 89, 0.20)",     # Green
        dark="rgba(111, 207, 111, 0.30)"
    )

    ANSWER_INCORRECT_BG = ThemeColors(
        light="rgba(255, 59, 48, 0.20)",     # Red
        dark="rgba(255, 107, 107, 0.30)"
    )
