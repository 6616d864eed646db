from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import requests

from solo_quiz.core.errors import QuizLoadError
from solo_quiz.core.question_bank_loader import load_question_bank, parse_question_text

from conftest import write_bank


def test_load_json_bank(bank_file: Path) -> None:
    bank = load_question_bank(bank_file)

    assert len(bank) == 3
    second = bank[1]
    assert second.text == "Question 2?"
    assert second.options == ("a", "b")
    assert second.correct == 1
    assert second.note == "B it is."
    assert bank[0].note is None


def test_load_accepts_string_path(bank_file: Path) -> None:
    assert len(load_question_bank(str(bank_file))) == 3


def test_empty_question_list_loads_as_empty_bank(tmp_path: Path) -> None:
    bank = load_question_bank(write_bank(tmp_path / "empty.json", []))

    assert len(bank) == 0


@pytest.mark.parametrize(
    "record",
    [
        {"options": ["a", "b"], "correct": 0},
        {"text": "Q?", "correct": 0},
        {"text": "Q?", "options": ["a", "b"]},
        {"text": "Q?", "options": ["a", "b"], "correct": 2},
        {"text": "Q?", "options": ["a", "b"], "correct": -1},
        {"text": "Q?", "options": ["a"], "correct": 0},
        {"text": "  ", "options": ["a", "b"], "correct": 0},
        {"text": "Q?", "options": ["a", " "], "correct": 0},
        {"text": "Q?", "options": ["a", "b"], "correct": "1"},
    ],
)
def test_malformed_record_is_a_load_error(tmp_path: Path, record: dict) -> None:
    path = write_bank(tmp_path / "bad.json", [record])

    with pytest.raises(QuizLoadError):
        load_question_bank(path)


def test_missing_questions_key_is_a_load_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"items": []}', encoding="utf-8")

    with pytest.raises(QuizLoadError, match="questions"):
        load_question_bank(path)


def test_invalid_json_is_a_load_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(QuizLoadError, match="not valid JSON"):
        load_question_bank(path)


def test_missing_file_is_a_load_error(tmp_path: Path) -> None:
    with pytest.raises(QuizLoadError):
        load_question_bank(tmp_path / "missing.json")


def test_undecodable_file_is_a_load_error(tmp_path: Path) -> None:
    path = tmp_path / "questions.json"
    path.write_bytes(b"\xff\xfe\x00garbage")

    with pytest.raises(QuizLoadError, match="Could not read"):
        load_question_bank(path)


def test_remote_bank_is_fetched_once() -> None:
    response = Mock()
    response.raise_for_status.return_value = None
    response.encoding = "utf-8"
    response.text = '{"questions": [{"text": "Q?", "options": ["a", "b"], "correct": 1}]}'

    with patch("solo_quiz.core.sources.requests.get", return_value=response) as mock_get:
        bank = load_question_bank("https://example.com/data/questions.json")

    assert len(bank) == 1
    mock_get.assert_called_once()
    assert mock_get.call_args.args[0] == "https://example.com/data/questions.json"


def test_remote_http_error_is_a_load_error() -> None:
    response = Mock()
    response.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Client Error")

    with patch("solo_quiz.core.sources.requests.get", return_value=response) as mock_get:
        with pytest.raises(QuizLoadError, match="404"):
            load_question_bank("https://example.com/questions.json")

    mock_get.assert_called_once()


def test_remote_connection_error_is_a_load_error() -> None:
    with patch(
        "solo_quiz.core.sources.requests.get",
        side_effect=requests.exceptions.ConnectionError("unreachable"),
    ):
        with pytest.raises(QuizLoadError, match="unreachable"):
            load_question_bank("http://example.com/questions.json")


TEXT_BANK = """\
Q: What is $2 + 2$?
A: 3
B: 4
C: 5
CORRECT: B
NOTE: Basic arithmetic.

---

Q: Pick the
multi-line answer.
A: first
B: second line one
continued
CORRECT: b
"""


def test_text_bank_is_parsed(tmp_path: Path) -> None:
    path = tmp_path / "questions.txt"
    path.write_text(TEXT_BANK, encoding="utf-8")

    bank = load_question_bank(path)

    assert len(bank) == 2
    first, second = bank
    assert first.text == "What is $2 + 2$?"
    assert first.options == ("3", "4", "5")
    assert first.correct == 1
    assert first.note == "Basic arithmetic."
    assert second.text == "Pick the\nmulti-line answer."
    assert second.options == ("first", "second line one\ncontinued")
    assert second.correct == 1
    assert second.note is None


@pytest.mark.parametrize(
    ("block", "message"),
    [
        ("A: x\nB: y\nCORRECT: A", "question text missing"),
        ("Q: q\nA: x\nCORRECT: A", "at least two options"),
        ("Q: q\nA: x\nC: y\nCORRECT: A", "consecutively"),
        ("Q: q\nA: x\nB: y", "CORRECT is required"),
        ("Q: q\nA: x\nB: y\nCORRECT: D", "CORRECT must be one of"),
        ("stray line\nQ: q\nA: x\nB: y\nCORRECT: A", "outside of a known section"),
        (
            "Q: first\nA: x\nB: y\nCORRECT: A\nQ: second\nA: p\nB: q\nCORRECT: B",
            "Q: appears twice",
        ),
        ("Q: q\nA: x\nB: y\nCORRECT: A\nCORRECT: B", "CORRECT: appears twice"),
        ("Q: q\nA: x\nB: y\nNOTE: one\nCORRECT: A\nNOTE: two", "NOTE: appears twice"),
        ("Q: q\nA: x\nB: y\nA: z\nCORRECT: A", "option A is defined twice"),
    ],
)
def test_text_bank_errors(block: str, message: str) -> None:
    with pytest.raises(QuizLoadError, match=message):
        parse_question_text(block)
