"""Read-only collection of the questions available to a quiz."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from solo_quiz.core.models import Question


class QuestionBank:
    """Ordered, immutable store of loaded questions."""

    def __init__(self, questions: Iterable[Question] = ()) -> None:
        self._questions: tuple[Question, ...] = tuple(questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __getitem__(self, index: int) -> Question:
        return self._questions[index]
