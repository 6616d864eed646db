"""Exceptions raised by the quiz core."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for every error raised by the quiz core."""


class QuizLoadError(QuizError):
    """Raised when the question bank or configuration cannot be retrieved or parsed."""


class EmptyBankError(QuizError):
    """Raised when a quiz is requested from a bank without questions."""


class EmptyQuestionSetError(QuizError):
    """Raised when a session is created without any question."""


class InvalidOptionError(QuizError, ValueError):
    """Raised for an out-of-range question or option index."""


class AtBoundaryError(QuizError, RuntimeError):
    """Raised when navigation would move past the first or last question."""


class SessionFinishedError(QuizError, RuntimeError):
    """Raised when a finished session receives a mutating call."""


class SessionNotFinishedError(QuizError, RuntimeError):
    """Raised when results are requested before the session was submitted."""


class QuizNotReadyError(QuizError, RuntimeError):
    """Raised when intents arrive before the question bank finished loading."""
