"""Quiz configuration and its optional JSON source.

Example ``config.json``::

    {"maxQuestions": 20, "shuffleSeed": 1234}

Both keys are optional. Invalid values fall back to the defaults with a
warning; a source that cannot be read or parsed is a load failure.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from solo_quiz.constants.quiz_constants import DEFAULT_MAX_QUESTIONS
from solo_quiz.core.errors import QuizLoadError
from solo_quiz.core.sources import read_source_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuizConfig:
    max_questions: int = DEFAULT_MAX_QUESTIONS
    shuffle_seed: int | None = None


def load_quiz_config(source: str | Path | None) -> QuizConfig:
    """Return the configuration from ``source``, or the defaults when it is ``None``."""
    if source is None:
        return QuizConfig()
    raw_text = read_source_text(source)
    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise QuizLoadError(f"Configuration is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise QuizLoadError("Configuration must be a JSON object.")
    return config_from_mapping(payload)


def config_from_mapping(payload: dict[str, Any]) -> QuizConfig:
    max_questions = _positive_int(payload.get("maxQuestions"))
    if max_questions is None:
        if "maxQuestions" in payload:
            logger.warning(
                "Ignoring invalid maxQuestions %r; using %d",
                payload["maxQuestions"],
                DEFAULT_MAX_QUESTIONS,
            )
        max_questions = DEFAULT_MAX_QUESTIONS

    seed = payload.get("shuffleSeed")
    if seed is not None and not _is_int(seed):
        logger.warning("Ignoring invalid shuffleSeed %r", seed)
        seed = None

    return QuizConfig(max_questions=max_questions, shuffle_seed=seed)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _positive_int(value: Any) -> int | None:
    if _is_int(value) and value > 0:
        return value
    return None
