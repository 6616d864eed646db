"""State machine for a single quiz attempt.

Navigation policy: free. The user may move forward past a question without
answering it; such a question is scored as incorrect ("No answer") unless it
was explicitly skipped.

Skip policy: the skipped count is the number of questions that were skipped
and are still unanswered. Answering a skipped question removes it from the
count, and skipping the same question twice counts once.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto

from solo_quiz.core.errors import (
    AtBoundaryError,
    EmptyQuestionSetError,
    InvalidOptionError,
    SessionFinishedError,
)
from solo_quiz.core.intents import GoNext, GoPrevious, Intent, SelectOption, Skip, Submit
from solo_quiz.core.models import Question


class SessionState(Enum):
    IN_PROGRESS = auto()
    FINISHED = auto()


class QuizSession:
    """Owns the position, answers and skip markers of one attempt."""

    def __init__(self, questions: Sequence[Question]) -> None:
        if not questions:
            raise EmptyQuestionSetError("A quiz session needs at least one question.")
        self._questions: tuple[Question, ...] = tuple(questions)
        self._current_index: int = 0
        self._answers: list[int | None] = [None] * len(self._questions)
        self._skipped: set[int] = set()
        self._finished: bool = False

    @classmethod
    def create(cls, questions: Sequence[Question]) -> QuizSession:
        return cls(questions)

    # --- Read access ---

    @property
    def active_questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_question(self) -> Question:
        return self._questions[self._current_index]

    @property
    def answers(self) -> tuple[int | None, ...]:
        return tuple(self._answers)

    @property
    def skipped(self) -> frozenset[int]:
        return frozenset(self._skipped)

    @property
    def skipped_count(self) -> int:
        return len(self._skipped)

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def state(self) -> SessionState:
        return SessionState.FINISHED if self._finished else SessionState.IN_PROGRESS

    @property
    def question_count(self) -> int:
        return len(self._questions)

    def is_last_question(self) -> bool:
        return self._current_index == len(self._questions) - 1

    def can_go_previous(self) -> bool:
        return not self._finished and self._current_index > 0

    def can_skip(self) -> bool:
        return not self._finished and not self.is_last_question()

    def get_answer(self, index: int) -> int | None:
        self._check_question_index(index)
        return self._answers[index]

    # --- Mutations ---

    def record_answer(self, index: int, option_index: int) -> None:
        """Store ``option_index`` as the answer to question ``index``."""
        self._ensure_not_finished()
        self._check_question_index(index)
        option_count = len(self._questions[index].options)
        if not 0 <= option_index < option_count:
            raise InvalidOptionError(
                f"Option index {option_index} out of range for question {index + 1} "
                f"({option_count} options)."
            )
        self._answers[index] = option_index
        self._skipped.discard(index)

    def go_to_previous(self) -> None:
        self._ensure_not_finished()
        if self._current_index == 0:
            raise AtBoundaryError("Already at the first question.")
        self._current_index -= 1

    def go_to_next(self) -> None:
        """Advance one question, or submit when already on the last one."""
        self._ensure_not_finished()
        if self.is_last_question():
            self.finish()
            return
        self._current_index += 1

    def skip(self) -> None:
        self._ensure_not_finished()
        if self.is_last_question():
            raise AtBoundaryError("The last question cannot be skipped; submit the quiz instead.")
        # An answered question is never marked as skipped.
        if self._answers[self._current_index] is None:
            self._skipped.add(self._current_index)
        self._current_index += 1

    def finish(self) -> None:
        self._ensure_not_finished()
        self._finished = True

    def dispatch(self, intent: Intent) -> None:
        """Apply a user intent to the session."""
        if isinstance(intent, SelectOption):
            index = self._current_index if intent.question_index is None else intent.question_index
            self.record_answer(index, intent.option_index)
        elif isinstance(intent, GoNext):
            self.go_to_next()
        elif isinstance(intent, GoPrevious):
            self.go_to_previous()
        elif isinstance(intent, Skip):
            self.skip()
        elif isinstance(intent, Submit):
            self.finish()
        else:
            raise TypeError(f"Unsupported intent: {intent!r}")

    def _ensure_not_finished(self) -> None:
        if self._finished:
            raise SessionFinishedError("The quiz has already been submitted.")

    def _check_question_index(self, index: int) -> None:
        if not 0 <= index < len(self._questions):
            raise InvalidOptionError(f"Question index {index} out of range")
