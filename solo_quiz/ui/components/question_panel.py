"""Component showing the current question with navigation controls."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from solo_quiz.constants.ui_constants import (
    COUNTERS_TEMPLATE,
    PREVIOUS_BUTTON,
    QUESTION_NUMBER_TEMPLATE,
    SKIP_BUTTON,
)
from solo_quiz.core.errors import QuizError
from solo_quiz.core.intents import GoNext, GoPrevious, Intent, SelectOption, Skip
from solo_quiz.core.question_renderer import render_question_document
from solo_quiz.core.quiz_manager import QuizManager
from solo_quiz.core.views import QuestionView
from solo_quiz.styling.styles import Styles
from solo_quiz.ui.dialog_helpers import show_warning


class QuestionPanel(QWidget):
    """UI component for answering and navigating through the questions."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_finished: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_finished = on_finished
        self._font_size: int = 14
        self._option_buttons: list[QRadioButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.number_label = QLabel("", self)
        self.number_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.number_label)

        self.question_view = QWebEngineView(self)
        self.question_view.setMinimumHeight(160)
        layout.addWidget(self.question_view, stretch=1)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)
        self.option_group = QButtonGroup(self)
        self.option_group.setExclusive(True)
        self.option_group.idClicked.connect(self._handle_option_selected)

        button_row = QHBoxLayout()
        self.previous_button = QPushButton(PREVIOUS_BUTTON, self)
        self.previous_button.clicked.connect(lambda: self._dispatch(GoPrevious()))
        button_row.addWidget(self.previous_button)

        self.skip_button = QPushButton(SKIP_BUTTON, self)
        self.skip_button.clicked.connect(lambda: self._dispatch(Skip()))
        button_row.addWidget(self.skip_button)

        button_row.addStretch()

        self.forward_button = QPushButton("", self)
        self.forward_button.clicked.connect(lambda: self._dispatch(GoNext()))
        button_row.addWidget(self.forward_button)
        layout.addLayout(button_row)

        self.counters_label = QLabel("", self)
        self.counters_label.setAlignment(Qt.AlignRight)
        self.counters_label.setStyleSheet(Styles.get_counter_label_style())
        layout.addWidget(self.counters_label)

    def refresh(self) -> None:
        """Redraw from the manager's current question."""
        self._display(self.quiz_manager.get_question_view())

    def _dispatch(self, intent: Intent) -> None:
        try:
            view = self.quiz_manager.dispatch(intent)
        except QuizError as exc:
            show_warning(self, "Action not allowed", str(exc))
            return
        if view.finished:
            self.on_finished()
            return
        self._display(view)

    def _handle_option_selected(self, option_index: int) -> None:
        self._dispatch(SelectOption(option_index=option_index))

    def _display(self, view: QuestionView) -> None:
        self.number_label.setText(QUESTION_NUMBER_TEMPLATE.format(number=view.number, total=view.total))
        self.question_view.setHtml(render_question_document(view.text, self._font_size))
        self._rebuild_options(view)
        self.previous_button.setEnabled(view.can_go_previous)
        self.skip_button.setEnabled(view.can_skip)
        self.forward_button.setText(view.forward_label)
        self.counters_label.setText(
            COUNTERS_TEMPLATE.format(
                correct=view.counts.correct,
                incorrect=view.counts.incorrect,
                skipped=view.counts.skipped,
            )
        )

    def _rebuild_options(self, view: QuestionView) -> None:
        for button in self._option_buttons:
            self.option_group.removeButton(button)
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons = []

        for index, option in enumerate(view.options):
            button = QRadioButton(option, self)
            button.setChecked(view.selected_option == index)
            self.option_group.addButton(button, index)
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)
