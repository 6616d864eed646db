"""Application entry point for SoloQuiz."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from solo_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from solo_quiz.constants.quiz_constants import DEFAULT_BANK_PATH, DEFAULT_CONFIG_PATH
from solo_quiz.core.quiz_manager import QuizManager
from solo_quiz.utils.logging_config import configure_logging


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a multiple-choice quiz.")
    parser.add_argument("--bank", default=DEFAULT_BANK_PATH, help="Question bank path or URL (.json or .txt).")
    parser.add_argument("--config", default=None, help="Configuration path or URL (JSON).")
    parser.add_argument("--web", action="store_true", help="Serve the quiz in the browser instead of a Qt window.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def _default_config_source(explicit: str | None) -> str | None:
    if explicit is not None:
        return explicit
    if Path(DEFAULT_CONFIG_PATH).exists():
        return DEFAULT_CONFIG_PATH
    return None


def main(argv: list[str] | None = None) -> None:
    """Initialize logging, start loading the bank and launch the chosen surface."""
    args = _parse_args(argv)
    logger = configure_logging(args.log_level)
    logger.info("Starting SoloQuiz…")

    quiz_manager = QuizManager()
    quiz_manager.load_in_background(args.bank, _default_config_source(args.config))

    if args.web:
        from solo_quiz.server.api_server import run_api_server

        logger.info("Quiz page available at http://%s:%d/", args.host, args.port)
        run_api_server(quiz_manager, host=args.host, port=args.port)
        return

    from PySide6.QtWidgets import QApplication

    from solo_quiz.ui.quiz_main_window import QuizMainWindow

    app = QApplication(sys.argv)
    window = QuizMainWindow(quiz_manager=quiz_manager)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
