"""Retrieval of raw quiz data from local files or HTTP(S) URLs."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from solo_quiz.constants.quiz_constants import REMOTE_SOURCE_TIMEOUT_SECONDS
from solo_quiz.core.errors import QuizLoadError

logger = logging.getLogger(__name__)

_REMOTE_SCHEMES = ("http://", "https://")


def is_remote_source(source: str | Path) -> bool:
    return isinstance(source, str) and source.lower().startswith(_REMOTE_SCHEMES)


def source_suffix(source: str | Path) -> str:
    """Return the lower-cased file extension of a path or URL."""
    if is_remote_source(source):
        path_part = str(source).split("?", 1)[0].split("#", 1)[0]
        return Path(path_part).suffix.lower()
    return Path(source).suffix.lower()


def read_source_text(source: str | Path) -> str:
    """Read a whole source as text. Single attempt, no retries."""
    if is_remote_source(source):
        return _read_remote(str(source))
    return _read_local(Path(source))


def _read_local(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise QuizLoadError(f"Could not read {path}: {exc}") from exc


def _read_remote(url: str) -> str:
    logger.info("Fetching %s", url)
    try:
        response = requests.get(url, timeout=REMOTE_SOURCE_TIMEOUT_SECONDS)
        response.raise_for_status()
    except requests.exceptions.RequestException as exc:
        raise QuizLoadError(f"Could not fetch {url}: {exc}") from exc
    response.encoding = response.encoding or "utf-8"
    return response.text
