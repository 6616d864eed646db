"""Loading and validation of question banks.

Two formats are accepted:

JSON (the default), as served next to the web page::

    {"questions": [
        {"text": "What is $2 + 2$?", "options": ["3", "4"], "correct": 1,
         "note": "Optional explanation shown with the results."}
    ]}

Plain text (``.txt`` sources), blocks separated by blank lines or ``---``::

    Q: What is $2 + 2$?
    A: 3
    B: 4
    CORRECT: B
    NOTE: Optional explanation shown with the results.

Question and option text may continue on the following lines until the next
marker. Any malformed record rejects the whole bank with ``QuizLoadError``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from string import ascii_uppercase

from pydantic import BaseModel, StrictInt, ValidationError, field_validator, model_validator

from solo_quiz.core.errors import QuizLoadError
from solo_quiz.core.models import Question
from solo_quiz.core.services.question_bank import QuestionBank
from solo_quiz.core.sources import read_source_text, source_suffix

logger = logging.getLogger(__name__)


class QuestionRecord(BaseModel):
    """Schema of a single question in the JSON bank."""

    text: str
    options: list[str]
    correct: StrictInt
    note: str | None = None

    @field_validator("text")
    @classmethod
    def _text_not_empty(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("question text must not be empty")
        return cleaned

    @field_validator("options")
    @classmethod
    def _valid_options(cls, value: list[str]) -> list[str]:
        cleaned = [option.strip() for option in value]
        if len(cleaned) < 2:
            raise ValueError("at least two options are required")
        if any(not option for option in cleaned):
            raise ValueError("option text must not be empty")
        return cleaned

    @field_validator("note")
    @classmethod
    def _blank_note_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @model_validator(mode="after")
    def _correct_in_range(self) -> QuestionRecord:
        if not 0 <= self.correct < len(self.options):
            raise ValueError(
                f"correct index {self.correct} out of range for {len(self.options)} options"
            )
        return self

    def to_question(self) -> Question:
        return Question(
            text=self.text,
            options=tuple(self.options),
            correct=self.correct,
            note=self.note,
        )


class QuestionBankDocument(BaseModel):
    questions: list[QuestionRecord]


def load_question_bank(source: str | Path) -> QuestionBank:
    """Retrieve and validate a question bank from a path or URL."""
    raw_text = read_source_text(source)
    if source_suffix(source) == ".txt":
        questions = parse_question_text(raw_text)
    else:
        questions = parse_question_json(raw_text)
    logger.info("Loaded %d question(s) from %s", len(questions), source)
    return QuestionBank(questions)


def parse_question_json(raw_text: str) -> list[Question]:
    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise QuizLoadError(f"Question bank is not valid JSON: {exc}") from exc
    try:
        document = QuestionBankDocument.model_validate(payload)
    except ValidationError as exc:
        raise QuizLoadError(f"Malformed question bank: {_describe_validation_error(exc)}") from exc
    return [record.to_question() for record in document.questions]


def _describe_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "document"
        messages.append(f"{location}: {error['msg']}")
    return "; ".join(messages)


def parse_question_text(text: str) -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [_parse_block(block, number) for number, block in enumerate(blocks, start=1)]


def _parse_block(block: str, number: int) -> Question:
    question_lines: list[str] = []
    note_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None
    seen_markers: set[str] = set()

    for raw_line in block.splitlines():
        line = raw_line.strip()
        upper = line.upper()
        if upper.startswith("Q:"):
            _reject_repeat("Q", seen_markers, number)
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            _reject_repeat("CORRECT", seen_markers, number)
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if upper.startswith("NOTE:"):
            _reject_repeat("NOTE", seen_markers, number)
            note_lines = [line.split(":", 1)[1].strip()]
            current_section = "NOTE"
            continue

        if len(line) > 2 and line[0].upper() in ascii_uppercase and line[1] == ":":
            letter = line[0].upper()
            if letter in options:
                raise QuizLoadError(f"Question {number}: option {letter} is defined twice.")
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section == "NOTE":
            note_lines.append(line)
        elif current_section in options:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizLoadError(
                f"Question {number}: text outside of a known section: '{line}'."
            )

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizLoadError(f"Question {number}: question text missing (Q: ...).")

    letters = sorted(options)
    expected = list(ascii_uppercase[: len(letters)])
    if letters != expected:
        raise QuizLoadError(
            f"Question {number}: options must be lettered consecutively from A."
        )
    if len(letters) < 2:
        raise QuizLoadError(f"Question {number}: at least two options are required.")
    option_list = [options[letter].strip() for letter in letters]
    if any(not option for option in option_list):
        raise QuizLoadError(f"Question {number}: option text cannot be empty.")

    if correct_letter is None:
        raise QuizLoadError(f"Question {number}: CORRECT is required.")
    if correct_letter not in letters:
        raise QuizLoadError(
            f"Question {number}: CORRECT must be one of {', '.join(letters)}."
        )

    note = "\n".join(note_lines).strip() or None
    return Question(
        text=question_text,
        options=tuple(option_list),
        correct=letters.index(correct_letter),
        note=note,
    )


def _reject_repeat(marker: str, seen_markers: set[str], number: int) -> None:
    # A second marker means two records were run together without a separator.
    if marker in seen_markers:
        raise QuizLoadError(
            f"Question {number}: {marker}: appears twice; "
            "separate questions with a blank line or ---."
        )
    seen_markers.add(marker)
