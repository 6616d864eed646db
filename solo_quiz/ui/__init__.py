"""Qt UI components for the quiz window."""

from .dialog_helpers import show_error, show_warning
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "show_error",
    "show_warning",
]
