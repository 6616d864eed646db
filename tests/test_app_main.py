from __future__ import annotations

import logging
from pathlib import Path

import pytest

import app_main
from solo_quiz.constants.quiz_constants import DEFAULT_BANK_PATH, DEFAULT_CONFIG_PATH
from solo_quiz.utils.logging_config import configure_logging


def test_default_arguments() -> None:
    args = app_main._parse_args([])

    assert args.bank == DEFAULT_BANK_PATH
    assert args.config is None
    assert args.web is False


def test_web_arguments() -> None:
    args = app_main._parse_args(["--web", "--port", "9001", "--bank", "https://example.com/q.json"])

    assert args.web is True
    assert args.port == 9001
    assert args.bank == "https://example.com/q.json"


def test_config_defaults_to_bundled_file_when_present(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert app_main._default_config_source(None) is None

    (tmp_path / "data").mkdir()
    (tmp_path / DEFAULT_CONFIG_PATH).write_text("{}", encoding="utf-8")
    assert app_main._default_config_source(None) == DEFAULT_CONFIG_PATH
    assert app_main._default_config_source("other.json") == "other.json"


def test_configure_logging_returns_package_logger() -> None:
    logger = configure_logging("debug")

    assert logger.name == "solo_quiz"
    assert isinstance(logger, logging.Logger)
