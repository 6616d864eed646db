"""Qt main window driving a single quiz attempt."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QLabel, QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from solo_quiz.constants.ui_constants import (
    LOAD_FAILED_TITLE,
    LOAD_REFRESH_INTERVAL_MS,
    LOADING_MESSAGE,
    WINDOW_TITLE,
)
from solo_quiz.core.errors import QuizError
from solo_quiz.core.quiz_manager import LoadStatus, QuizManager
from solo_quiz.styling.styles import Styles
from solo_quiz.ui.components.question_panel import QuestionPanel
from solo_quiz.ui.components.results_panel import ResultsPanel
from solo_quiz.ui.dialog_helpers import show_error


class WindowMode(Enum):
    """Which page of the window is visible."""

    LOADING = auto()
    QUESTION = auto()
    RESULTS = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window: loading page, question page and results page.

    The window only accepts navigation once the manager reports the bank as
    loaded; until then the loading page is shown and the status is polled.
    """

    def __init__(self, quiz_manager: QuizManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(800, 640)

        self.quiz_manager = quiz_manager
        self._mode = WindowMode.LOADING

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self._configure_refresh_timer()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.mode_stack = QStackedWidget(self)

        self.loading_label = QLabel(LOADING_MESSAGE, self)
        self.loading_label.setAlignment(Qt.AlignCenter)
        self.loading_label.setWordWrap(True)
        self.question_panel = QuestionPanel(
            self.quiz_manager,
            on_finished=self._show_results,
            parent=self,
        )
        self.results_panel = ResultsPanel(
            self.quiz_manager,
            on_restart=self._handle_restart,
            parent=self,
        )

        self.mode_stack.addWidget(self.loading_label)
        self.mode_stack.addWidget(self.question_panel)
        self.mode_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(WindowMode.LOADING)

    def _configure_refresh_timer(self) -> None:
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(LOAD_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._poll_load_status)
        self.refresh_timer.start()

    def _poll_load_status(self) -> None:
        status = self.quiz_manager.get_load_status()
        if status is LoadStatus.READY:
            self.refresh_timer.stop()
            self._show_question()
        elif status is LoadStatus.FAILED:
            self.refresh_timer.stop()
            message = self.quiz_manager.get_load_error() or "Unknown error."
            self.loading_label.setText(f"{LOAD_FAILED_TITLE}: {message}")
            show_error(self, LOAD_FAILED_TITLE, message)

    def _set_mode(self, mode: WindowMode) -> None:
        self._mode = mode
        if mode is WindowMode.LOADING:
            self.mode_stack.setCurrentWidget(self.loading_label)
        elif mode is WindowMode.QUESTION:
            self.mode_stack.setCurrentWidget(self.question_panel)
        else:
            self.mode_stack.setCurrentWidget(self.results_panel)

    def _show_question(self) -> None:
        self.question_panel.refresh()
        self._set_mode(WindowMode.QUESTION)

    def _show_results(self) -> None:
        self.results_panel.refresh()
        self._set_mode(WindowMode.RESULTS)

    def _handle_restart(self) -> None:
        try:
            self.quiz_manager.start_new_attempt()
        except QuizError as exc:
            show_error(self, "Could not restart", str(exc))
            return
        self._show_question()
