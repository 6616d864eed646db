"""Presentation-neutral snapshots of the quiz for the UI and the web page."""

from __future__ import annotations

from dataclasses import dataclass

from solo_quiz.constants.quiz_constants import FORWARD_LABEL_NEXT, FORWARD_LABEL_SUBMIT
from solo_quiz.core.models import LiveCounts, QuestionFeedback, ScoreSummary
from solo_quiz.core.services.quiz_session import QuizSession
from solo_quiz.core.services.scorer import build_feedback, live_counts, score


@dataclass(frozen=True, slots=True)
class QuestionView:
    """Everything a surface needs to draw the current question."""

    number: int
    total: int
    text: str
    options: tuple[str, ...]
    selected_option: int | None
    can_go_previous: bool
    can_skip: bool
    forward_label: str
    counts: LiveCounts
    finished: bool


@dataclass(frozen=True, slots=True)
class ResultsView:
    summary: ScoreSummary
    feedback: tuple[QuestionFeedback, ...]


def build_question_view(session: QuizSession) -> QuestionView:
    index = session.current_index
    question = session.current_question
    return QuestionView(
        number=index + 1,
        total=session.question_count,
        text=question.text,
        options=question.options,
        selected_option=session.get_answer(index),
        can_go_previous=session.can_go_previous(),
        can_skip=session.can_skip(),
        forward_label=FORWARD_LABEL_SUBMIT if session.is_last_question() else FORWARD_LABEL_NEXT,
        counts=live_counts(session),
        finished=session.finished,
    )


def build_results_view(session: QuizSession) -> ResultsView:
    return ResultsView(summary=score(session), feedback=tuple(build_feedback(session)))
