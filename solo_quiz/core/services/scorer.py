"""Scoring and feedback for quiz sessions."""

from __future__ import annotations

from solo_quiz.core.errors import SessionNotFinishedError
from solo_quiz.core.models import (
    Classification,
    LiveCounts,
    QuestionFeedback,
    ScoreSummary,
)
from solo_quiz.core.services.quiz_session import QuizSession


def live_counts(session: QuizSession) -> LiveCounts:
    """Return running totals; unanswered questions are not counted as incorrect yet."""
    correct = 0
    incorrect = 0
    for question, answer in zip(session.active_questions, session.answers):
        if answer is None:
            continue
        if answer == question.correct:
            correct += 1
        else:
            incorrect += 1
    return LiveCounts(correct=correct, incorrect=incorrect, skipped=session.skipped_count)


def classify(session: QuizSession, index: int) -> Classification:
    answer = session.get_answer(index)
    if answer is None:
        if index in session.skipped:
            return Classification.SKIPPED
        return Classification.INCORRECT
    if answer == session.active_questions[index].correct:
        return Classification.CORRECT
    return Classification.INCORRECT


def round_half_up_percentage(part: int, total: int) -> int:
    """Return ``part / total`` as a whole percentage, ties rounded up."""
    if total <= 0:
        raise ValueError("Total must be positive.")
    return (200 * part + total) // (2 * total)


def score(session: QuizSession) -> ScoreSummary:
    if not session.finished:
        raise SessionNotFinishedError("Submit the quiz before requesting the score.")

    classifications = [classify(session, index) for index in range(session.question_count)]
    correct_count = classifications.count(Classification.CORRECT)
    total_count = session.question_count
    return ScoreSummary(
        correct_count=correct_count,
        incorrect_count=classifications.count(Classification.INCORRECT),
        skipped_count=classifications.count(Classification.SKIPPED),
        total_count=total_count,
        percentage=round_half_up_percentage(correct_count, total_count),
        unanswered_count=sum(1 for answer in session.answers if answer is None),
    )


def build_feedback(session: QuizSession) -> list[QuestionFeedback]:
    """Describe every question of a finished session for the results page."""
    if not session.finished:
        raise SessionNotFinishedError("Submit the quiz before requesting feedback.")

    feedback: list[QuestionFeedback] = []
    for index, question in enumerate(session.active_questions):
        answer = session.get_answer(index)
        feedback.append(
            QuestionFeedback(
                number=index + 1,
                question_text=question.text,
                user_answer_text=None if answer is None else question.options[answer],
                correct_answer_text=question.correct_option_text,
                note=question.note,
                classification=classify(session, index),
            )
        )
    return feedback
