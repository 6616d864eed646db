"""HTML rendering of questions and results for QWebEngineView and the web page."""

from __future__ import annotations

from solo_quiz.constants.quiz_constants import NO_ANSWER_TEXT
from solo_quiz.core.markdown_math_renderer import renderer
from solo_quiz.core.models import QuestionFeedback
from solo_quiz.core.views import ResultsView
from solo_quiz.styling.color_palette import ColorPalette


def render_question_document(question_text: str, font_size: int = 14) -> str:
    """Render the question text (Markdown + LaTeX) as a standalone document."""
    return renderer.render_full_document(question_text or "(No question text)", font_size=font_size)


def render_feedback_item(item: QuestionFeedback) -> str:
    """Render one result entry, colored by its classification."""
    colors = ColorPalette.for_classification(item.classification)
    user_answer = renderer.render_inline(item.user_answer_text or NO_ANSWER_TEXT)
    lines = [
        f'<div class="feedback-item {item.classification.value}" '
        f'style="border-color: {colors.foreground}; background: {colors.background};">',
        f'<div class="feedback-title" style="color: {colors.foreground};">'
        f"Q{item.number}: {renderer.render_inline(item.question_text)}</div>",
        f'<div style="color: {colors.foreground};">Your answer: {user_answer}</div>',
    ]
    if not item.is_correct:
        correct_answer = renderer.render_inline(item.correct_answer_text)
        lines.append(
            f'<div style="color: {ColorPalette.CORRECT.foreground};">Correct answer: {correct_answer}</div>'
        )
    if item.note:
        lines.append(f'<div class="feedback-note">Note: {renderer.render_inline(item.note)}</div>')
    lines.append("</div>")
    return "\n".join(lines)


def render_feedback_fragment(results: ResultsView) -> str:
    return "\n".join(render_feedback_item(item) for item in results.feedback)


def render_results_document(results: ResultsView, font_size: int = 14) -> str:
    return renderer.wrap_with_mathjax(
        render_feedback_fragment(results), title="Quiz results", font_size=font_size
    )
