from __future__ import annotations

import json
import random
from pathlib import Path

import pytest

from solo_quiz.core.errors import (
    AtBoundaryError,
    EmptyBankError,
    QuizLoadError,
    QuizNotReadyError,
    SessionNotFinishedError,
)
from solo_quiz.core.intents import GoNext, GoPrevious, SelectOption, Skip
from solo_quiz.core.quiz_manager import LoadStatus, QuizManager

from conftest import write_bank


@pytest.fixture
def in_order_sampling(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace random sampling with the bank's own order."""

    def sample_in_order(bank, max_count, rng=None, *, require_questions=False):
        return list(bank)[:max_count]

    monkeypatch.setattr("solo_quiz.core.quiz_manager.sample_questions", sample_in_order)


def test_intents_before_loading_are_rejected() -> None:
    manager = QuizManager()

    assert manager.get_load_status() is LoadStatus.IDLE
    with pytest.raises(QuizNotReadyError):
        manager.dispatch(GoNext())
    with pytest.raises(QuizNotReadyError):
        manager.get_question_view()


def test_load_makes_quiz_ready(bank_file: Path) -> None:
    manager = QuizManager(rng=random.Random(5))

    manager.load(bank_file)

    assert manager.get_load_status() is LoadStatus.READY
    assert manager.get_load_error() is None
    assert manager.get_bank_size() == 3
    view = manager.get_question_view()
    assert view.number == 1
    assert view.total == 3
    assert view.forward_label == "Next"
    assert not view.can_go_previous


def test_config_limits_question_count(bank_file: Path, tmp_path: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"maxQuestions": 2}), encoding="utf-8")
    manager = QuizManager()

    manager.load(bank_file, config)

    assert manager.get_config().max_questions == 2
    assert manager.get_question_view().total == 2


def test_seed_from_config_makes_attempts_reproducible(bank_file: Path, tmp_path: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"shuffleSeed": 3}), encoding="utf-8")

    first = QuizManager()
    first.load(bank_file, config)
    second = QuizManager()
    second.load(bank_file, config)

    assert first.get_question_view().text == second.get_question_view().text


def test_failed_load_is_recorded(tmp_path: Path) -> None:
    manager = QuizManager()

    with pytest.raises(QuizLoadError):
        manager.load(tmp_path / "missing.json")

    assert manager.get_load_status() is LoadStatus.FAILED
    assert "missing.json" in manager.get_load_error()
    with pytest.raises(QuizNotReadyError):
        manager.dispatch(GoNext())


def test_empty_bank_cannot_start(tmp_path: Path) -> None:
    manager = QuizManager()

    with pytest.raises(EmptyBankError):
        manager.load(write_bank(tmp_path / "empty.json", []))

    assert manager.get_load_status() is LoadStatus.FAILED


def test_background_load_reaches_ready(bank_file: Path) -> None:
    manager = QuizManager()

    thread = manager.load_in_background(bank_file)
    thread.join(timeout=5)

    assert manager.get_load_status() is LoadStatus.READY


def test_background_load_failure_is_reported(tmp_path: Path) -> None:
    manager = QuizManager()

    thread = manager.load_in_background(tmp_path / "missing.json")
    thread.join(timeout=5)

    assert manager.get_load_status() is LoadStatus.FAILED
    assert manager.get_load_error()


def test_background_load_of_undecodable_bank_is_reported(tmp_path: Path) -> None:
    path = tmp_path / "questions.json"
    path.write_bytes(b"\xff\xfe")
    manager = QuizManager()

    thread = manager.load_in_background(path)
    thread.join(timeout=5)

    assert not thread.is_alive()
    assert manager.get_load_status() is LoadStatus.FAILED
    assert "Could not read" in manager.get_load_error()


def test_unexpected_load_error_is_recorded(
    bank_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def broken_loader(source):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr("solo_quiz.core.quiz_manager.load_question_bank", broken_loader)
    manager = QuizManager()

    with pytest.raises(RuntimeError):
        manager.load(bank_file)
    assert manager.get_load_status() is LoadStatus.FAILED
    assert "disk on fire" in manager.get_load_error()

    thread = manager.load_in_background(bank_file)
    thread.join(timeout=5)

    assert manager.get_load_status() is LoadStatus.FAILED
    assert "disk on fire" in manager.get_load_error()


def test_scripted_attempt_scores_as_expected(bank_file: Path, in_order_sampling: None) -> None:
    manager = QuizManager()
    manager.load(bank_file)

    manager.dispatch(SelectOption(option_index=0))
    manager.dispatch(GoNext())
    view = manager.dispatch(Skip())
    assert view.number == 3
    assert view.forward_label == "Submit"
    assert not view.can_skip

    view = manager.dispatch(SelectOption(option_index=1))
    assert (view.counts.correct, view.counts.incorrect, view.counts.skipped) == (1, 1, 1)

    view = manager.dispatch(GoNext())
    assert view.finished
    assert manager.is_finished()

    results = manager.get_results()
    assert results.summary.correct_count == 1
    assert results.summary.incorrect_count == 1
    assert results.summary.skipped_count == 1
    assert results.summary.percentage == 33
    assert results.feedback[1].note == "B it is."


def test_rejected_intent_leaves_view_unchanged(bank_file: Path) -> None:
    manager = QuizManager()
    manager.load(bank_file)
    before = manager.get_question_view()

    with pytest.raises(AtBoundaryError):
        manager.dispatch(GoPrevious())

    assert manager.get_question_view() == before


def test_results_require_submission(bank_file: Path) -> None:
    manager = QuizManager()
    manager.load(bank_file)

    with pytest.raises(SessionNotFinishedError):
        manager.get_results()


def test_new_attempt_starts_fresh(bank_file: Path) -> None:
    manager = QuizManager()
    manager.load(bank_file)
    manager.dispatch(SelectOption(option_index=1))
    manager.dispatch(GoNext())

    view = manager.start_new_attempt()

    assert view.number == 1
    assert view.selected_option is None
    assert not view.finished
    assert (view.counts.correct, view.counts.incorrect, view.counts.skipped) == (0, 0, 0)
