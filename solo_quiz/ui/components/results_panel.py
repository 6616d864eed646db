"""Component for the score and per-question feedback of a finished quiz."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from solo_quiz.constants.ui_constants import RESTART_BUTTON, SCORE_TEMPLATE
from solo_quiz.core.question_renderer import render_results_document
from solo_quiz.core.quiz_manager import QuizManager
from solo_quiz.styling.styles import Styles


class ResultsPanel(QWidget):
    """UI component summarizing a submitted quiz."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_restart: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_restart = on_restart
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.score_label = QLabel("", self)
        self.score_label.setWordWrap(True)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        self.feedback_view = QWebEngineView(self)
        layout.addWidget(self.feedback_view, stretch=1)

        self.restart_button = QPushButton(RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button)

    def refresh(self) -> None:
        results = self.quiz_manager.get_results()
        summary = results.summary
        self.score_label.setText(
            SCORE_TEMPLATE.format(
                correct=summary.correct_count,
                total=summary.total_count,
                percentage=summary.percentage,
            )
        )
        self.feedback_view.setHtml(render_results_document(results))
