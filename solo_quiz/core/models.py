"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with at least two options."""

    text: str
    options: tuple[str, ...]
    correct: int
    note: str | None = None

    def __post_init__(self) -> None:
        if len(self.options) < 2:
            raise ValueError("A question needs at least two options.")
        if not 0 <= self.correct < len(self.options):
            raise ValueError(
                f"Correct option index {self.correct} out of range for {len(self.options)} options."
            )

    @property
    def correct_option_text(self) -> str:
        return self.options[self.correct]


class Classification(Enum):
    """Per-question outcome used for feedback rendering."""

    CORRECT = "correct"
    INCORRECT = "incorrect"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class LiveCounts:
    """Running tallies shown while the quiz is in progress."""

    correct: int
    incorrect: int
    skipped: int


@dataclass(frozen=True, slots=True)
class QuestionFeedback:
    """Result detail for a single question of a finished session."""

    number: int
    question_text: str
    user_answer_text: str | None
    correct_answer_text: str
    note: str | None
    classification: Classification

    @property
    def is_correct(self) -> bool:
        return self.classification is Classification.CORRECT


@dataclass(frozen=True, slots=True)
class ScoreSummary:
    """Score of a finished session.

    ``correct_count + incorrect_count + skipped_count`` always equals
    ``total_count``; an unanswered question that was never skipped counts as
    incorrect. ``unanswered_count`` reports every question left without an
    answer regardless of how it was classified.
    """

    correct_count: int
    incorrect_count: int
    skipped_count: int
    total_count: int
    percentage: int
    unanswered_count: int
