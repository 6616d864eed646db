"""Color palette for the SoloQuiz windows and result pages."""

from __future__ import annotations

from dataclasses import dataclass

from solo_quiz.core.models import Classification


@dataclass(frozen=True)
class FeedbackColors:
    """Border/text color and background tint for one classification."""

    foreground: str
    background: str


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = "#000000"
    TEXT_SECONDARY = "#666666"
    BACKGROUND_PRIMARY = "#FFFFFF"
    BACKGROUND_SECONDARY = "#F5F5F5"
    BORDER_PRIMARY = "#D1D1D1"
    BUTTON_PRIMARY_BG = "#0078D4"
    BUTTON_PRIMARY_TEXT = "#FFFFFF"
    TEXT_DISABLED = "#CCCCCC"

    CORRECT = FeedbackColors(foreground="green", background="#f0f8f0")
    INCORRECT = FeedbackColors(foreground="red", background="#fff0f0")
    SKIPPED = FeedbackColors(foreground="#b7791f", background="#fff8e6")

    @classmethod
    def for_classification(cls, classification: Classification) -> FeedbackColors:
        if classification is Classification.CORRECT:
            return cls.CORRECT
        if classification is Classification.SKIPPED:
            return cls.SKIPPED
        return cls.INCORRECT
