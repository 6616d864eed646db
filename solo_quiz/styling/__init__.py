"""Styling module for SoloQuiz."""

from .color_palette import ColorPalette, FeedbackColors

__all__ = ["ColorPalette", "FeedbackColors"]
