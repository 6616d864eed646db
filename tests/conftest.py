from __future__ import annotations

import json
from pathlib import Path

import pytest

from solo_quiz.core.models import Question
from solo_quiz.core.services.quiz_session import QuizSession


def make_question(number: int, correct: int = 0, option_count: int = 2, note: str | None = None) -> Question:
    return Question(
        text=f"Question {number}?",
        options=tuple(f"Q{number} option {letter}" for letter in "ABCDEFGH"[:option_count]),
        correct=correct,
        note=note,
    )


@pytest.fixture
def scenario_questions() -> list[Question]:
    """Three two-option questions whose correct answers are 0, 1, 0."""
    return [make_question(1, correct=0), make_question(2, correct=1), make_question(3, correct=0)]


@pytest.fixture
def session(scenario_questions: list[Question]) -> QuizSession:
    return QuizSession.create(scenario_questions)


def write_bank(path: Path, questions: list[dict]) -> Path:
    path.write_text(json.dumps({"questions": questions}), encoding="utf-8")
    return path


@pytest.fixture
def bank_file(tmp_path: Path) -> Path:
    return write_bank(
        tmp_path / "questions.json",
        [
            {"text": "Question 1?", "options": ["a", "b"], "correct": 0},
            {"text": "Question 2?", "options": ["a", "b"], "correct": 1, "note": "B it is."},
            {"text": "Question 3?", "options": ["a", "b"], "correct": 0},
        ],
    )
