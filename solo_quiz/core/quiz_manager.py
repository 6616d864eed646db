"""Business logic for running a quiz attempt shared between UI and API."""

from __future__ import annotations

import logging
import random
from enum import Enum, auto
from pathlib import Path
from threading import Lock, Thread

from solo_quiz.core.config_loader import QuizConfig, load_quiz_config
from solo_quiz.core.errors import QuizError, QuizNotReadyError
from solo_quiz.core.intents import Intent
from solo_quiz.core.question_bank_loader import load_question_bank
from solo_quiz.core.services.question_bank import QuestionBank
from solo_quiz.core.services.quiz_session import QuizSession
from solo_quiz.core.services.sampler import sample_questions
from solo_quiz.core.views import QuestionView, ResultsView, build_question_view, build_results_view

logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    IDLE = auto()
    LOADING = auto()
    READY = auto()
    FAILED = auto()


class QuizManager:
    """Facade over loading, sampling, the session state machine and scoring.

    Intents are applied one at a time under a lock so that the web server's
    worker threads and the Qt event loop never interleave mutations.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._lock = Lock()
        self._rng = rng
        self._status = LoadStatus.IDLE
        self._error_message: str | None = None
        self._config = QuizConfig()
        self._bank = QuestionBank()
        self._session: QuizSession | None = None

    # --- Loading ---

    def load(self, bank_source: str | Path, config_source: str | Path | None = None) -> None:
        """Load configuration and bank, then start the first attempt.

        Failures are recorded in the load status and re-raised.
        """
        self._begin_loading()
        self._perform_load(bank_source, config_source)

    def load_in_background(
        self, bank_source: str | Path, config_source: str | Path | None = None
    ) -> Thread:
        """Run :meth:`load` on a daemon thread; poll :meth:`get_load_status` for the outcome."""
        self._begin_loading()

        def run_load() -> None:
            try:
                self._perform_load(bank_source, config_source)
            except Exception:
                # Logged and recorded as FAILED; surfaces read it through get_load_error().
                return

        thread = Thread(target=run_load, name="QuizBankLoader", daemon=True)
        thread.start()
        return thread

    def _begin_loading(self) -> None:
        with self._lock:
            if self._status is LoadStatus.LOADING:
                raise QuizNotReadyError("A question bank is already loading.")
            self._status = LoadStatus.LOADING
            self._error_message = None

    def _perform_load(self, bank_source: str | Path, config_source: str | Path | None) -> None:
        try:
            config = load_quiz_config(config_source)
            bank = load_question_bank(bank_source)
            rng = self._rng or random.Random(config.shuffle_seed)
            session = QuizSession.create(
                sample_questions(bank, config.max_questions, rng, require_questions=True)
            )
        except QuizError as exc:
            logger.error("Quiz could not be started: %s", exc)
            self._record_failure(str(exc))
            raise
        except Exception as exc:
            logger.exception("Unexpected error while loading the quiz")
            self._record_failure(f"Unexpected error: {exc}")
            raise

        with self._lock:
            self._config = config
            self._bank = bank
            self._rng = rng
            self._session = session
            self._status = LoadStatus.READY
        logger.info(
            "Quiz ready with %d of %d question(s)", session.question_count, len(bank)
        )

    def _record_failure(self, message: str) -> None:
        with self._lock:
            self._status = LoadStatus.FAILED
            self._error_message = message

    def get_load_status(self) -> LoadStatus:
        with self._lock:
            return self._status

    def get_load_error(self) -> str | None:
        with self._lock:
            return self._error_message

    def get_config(self) -> QuizConfig:
        with self._lock:
            return self._config

    def get_bank_size(self) -> int:
        with self._lock:
            return len(self._bank)

    def start_new_attempt(self) -> QuestionView:
        """Discard the current attempt and sample a fresh one from the loaded bank."""
        with self._lock:
            self._ensure_ready()
            questions = sample_questions(
                self._bank, self._config.max_questions, self._rng, require_questions=True
            )
            self._session = QuizSession.create(questions)
            logger.info("Started a new attempt with %d question(s)", len(questions))
            return build_question_view(self._session)

    # --- Session ---

    def dispatch(self, intent: Intent) -> QuestionView:
        """Apply an intent and return the refreshed view of the session."""
        with self._lock:
            session = self._ensure_ready()
            session.dispatch(intent)
            logger.debug("Applied %s", intent.kind.value)
            return build_question_view(session)

    def get_question_view(self) -> QuestionView:
        with self._lock:
            return build_question_view(self._ensure_ready())

    def is_finished(self) -> bool:
        with self._lock:
            return self._session is not None and self._session.finished

    def get_results(self) -> ResultsView:
        with self._lock:
            return build_results_view(self._ensure_ready())

    def _ensure_ready(self) -> QuizSession:
        if self._status is not LoadStatus.READY or self._session is None:
            raise QuizNotReadyError("The quiz has not finished loading.")
        return self._session
