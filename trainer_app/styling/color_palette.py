"""Color palette for SquareRootTrainer supporting light and dark themes."""

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
        light="#1F2937",      # Slate
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_SECONDARY = ThemeColors(
        light="#6B7280",      # Gray
        dark="#AAAAAA"        # Light Gray
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1E1E1E"        # Dark Gray
    )

    # Countdown text; also the primary accent
    ACCENT_PRIMARY = ThemeColors(
        light="#6366F1",      # Indigo
        dark="#A5B4FC"        # Light Indigo
    )

    ERROR = ThemeColors(
        light="#DC2626",      # Red
        dark="#FF6B6B"        # Light Red
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D1D5DB",      # Gray
        dark="#555555"        # Dark Gray
    )

    BUTTON_PRIMARY_BG = ThemeColors(
        light="#6366F1",      # Indigo
        dark="#818CF8"        # Lighter Indigo
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",      # White
        dark="#000000"        # Black
    )

    BUTTON_SECONDARY_BG = ThemeColors(
        light="#F5F5F5",      # WhiteSmoke
        dark="#3A3A3A"        # Dark Gray
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E8E8E8",      # Light Gray
        dark="#505050"        # Medium Gray
    )
