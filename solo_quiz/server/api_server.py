"""FastAPI server that runs the quiz in a browser."""

from __future__ import annotations

from typing import NoReturn

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, StrictInt
import uvicorn

from solo_quiz.constants.about import APP_ABOUT_TEXT, APP_NAME, APP_VERSION
from solo_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from solo_quiz.core.errors import QuizError
from solo_quiz.core.intents import IntentKind, intent_from_kind
from solo_quiz.core.markdown_math_renderer import renderer
from solo_quiz.core.question_renderer import render_feedback_fragment
from solo_quiz.core.quiz_manager import QuizManager
from solo_quiz.core.views import QuestionView, ResultsView

_QUIZ_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>SoloQuiz</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      :root { font-family: 'Segoe UI', system-ui, sans-serif; background: #f5f5f5; color: #000; }
      body { margin: 0 auto; padding: 1.5rem; max-width: 48rem; display: flex; flex-direction: column; gap: 1rem; }
      .card { background: #fff; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.25rem 1rem rgba(0, 0, 0, 0.1); }
      .hidden { display: none; }
      .option { display: block; padding: 0.5rem 0; cursor: pointer; }
      .option.disabled { color: #ccc; cursor: default; }
      .controls { display: flex; gap: 0.75rem; margin-top: 1rem; }
      button { border: none; border-radius: 0.5rem; padding: 0.6rem 1.2rem; font-size: 1rem; background: #0078d4; color: #fff; cursor: pointer; }
      button:disabled { opacity: 0.5; cursor: not-allowed; }
      .counters { display: flex; gap: 1.5rem; color: #666; }
      #error { color: #d13438; }
      .feedback-item { margin-bottom: 15px; padding: 10px; border-left: 4px solid; }
      .feedback-title { font-weight: bold; margin-bottom: 5px; }
      .feedback-note { color: #666; font-style: italic; margin-top: 5px; }
    </style>
    <script>
      window.MathJax = { tex: { inlineMath: [['$','$']], displayMath: [['$$','$$']] }, svg: { fontCache: 'global' } };
    </script>
    <script defer src="https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"></script>
  </head>
  <body>
    <section class="card" id="loading-card"><p id="loading-message">Loading questions…</p></section>
    <section class="card hidden" id="quiz-card">
      <div id="question-number"></div>
      <div id="question-text"></div>
      <div id="options"></div>
      <div class="controls">
        <button id="prev-btn">Previous</button>
        <button id="skip-btn">Skip</button>
        <button id="next-btn">Next</button>
      </div>
      <div class="counters">
        <span>Correct: <strong id="correct-count">0</strong></span>
        <span>Incorrect: <strong id="incorrect-count">0</strong></span>
        <span>Skipped: <strong id="skipped-count">0</strong></span>
      </div>
      <p id="error"></p>
    </section>
    <section class="card hidden" id="results">
      <div id="score"></div>
      <div id="feedback"></div>
      <button id="restart-btn">Try Again</button>
    </section>
    <script>
      const el = (id) => document.getElementById(id);

      function show(id, visible) {
        el(id).classList.toggle('hidden', !visible);
      }

      function typeset() {
        if (window.MathJax && window.MathJax.typesetPromise) {
          window.MathJax.typesetPromise();
        }
      }

      async function callApi(path, options) {
        const response = await fetch(path, options);
        const body = await response.json();
        if (!response.ok) {
          throw new Error(body.detail || `HTTP ${response.status}`);
        }
        return body;
      }

      async function sendIntent(kind, optionIndex) {
        el('error').textContent = '';
        try {
          const view = await callApi('/intent', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({ kind, option_index: optionIndex }),
          });
          if (view.finished) {
            await showResults();
          } else {
            renderQuestion(view);
          }
        } catch (error) {
          el('error').textContent = error.message;
        }
      }

      function renderQuestion(view) {
        show('loading-card', false);
        show('results', false);
        show('quiz-card', true);
        el('question-number').textContent = `Question ${view.number} of ${view.total}`;
        el('question-text').innerHTML = view.question_html;
        const options = el('options');
        options.innerHTML = '';
        view.options.forEach((option, index) => {
          const label = document.createElement('label');
          label.className = 'option';
          const input = document.createElement('input');
          input.type = 'radio';
          input.name = 'option';
          input.value = index;
          input.checked = view.selected_option === index;
          input.addEventListener('change', () => sendIntent('select_option', index));
          label.appendChild(input);
          label.appendChild(document.createTextNode(' ' + option));
          options.appendChild(label);
        });
        el('prev-btn').disabled = !view.can_go_previous;
        el('skip-btn').disabled = !view.can_skip;
        el('next-btn').disabled = false;
        el('next-btn').textContent = view.forward_label;
        el('correct-count').textContent = view.counts.correct;
        el('incorrect-count').textContent = view.counts.incorrect;
        el('skipped-count').textContent = view.counts.skipped;
        typeset();
      }

      async function showResults() {
        const results = await callApi('/results');
        el('prev-btn').disabled = true;
        el('next-btn').disabled = true;
        el('skip-btn').disabled = true;
        document.querySelectorAll('#options label.option').forEach((label) => {
          label.classList.add('disabled');
          label.querySelector('input').disabled = true;
        });
        const summary = results.summary;
        el('score').innerHTML =
          `<div style="font-size: 1.2em; margin-bottom: 10px;">You got <strong>${summary.correct_count}</strong> ` +
          `out of <strong>${summary.total_count}</strong> correct (${summary.percentage}%).</div>`;
        el('feedback').innerHTML = results.feedback_html;
        show('results', true);
        typeset();
      }

      async function refresh() {
        const status = await callApi('/status');
        if (status.status === 'loading' || status.status === 'idle') {
          setTimeout(refresh, 250);
          return;
        }
        if (status.status === 'failed') {
          el('loading-message').textContent = `Could not start the quiz: ${status.error}`;
          return;
        }
        const view = await callApi('/question');
        renderQuestion(view);
        if (view.finished) {
          await showResults();
        }
      }

      el('prev-btn').addEventListener('click', () => sendIntent('go_previous'));
      el('next-btn').addEventListener('click', () => sendIntent('go_next'));
      el('skip-btn').addEventListener('click', () => sendIntent('skip'));
      el('restart-btn').addEventListener('click', async () => {
        renderQuestion(await callApi('/restart', { method: 'POST' }));
      });

      refresh().catch((error) => { el('loading-message').textContent = error.message; });
    </script>
  </body>
</html>
"""


class IntentPayload(BaseModel):
    """Payload schema for user intents."""

    kind: IntentKind
    option_index: StrictInt | None = None
    question_index: StrictInt | None = None


def _question_payload(view: QuestionView) -> dict[str, object]:
    return {
        "number": view.number,
        "total": view.total,
        "question_html": renderer.render_fragment(view.text),
        "options": list(view.options),
        "selected_option": view.selected_option,
        "can_go_previous": view.can_go_previous,
        "can_skip": view.can_skip,
        "forward_label": view.forward_label,
        "counts": {
            "correct": view.counts.correct,
            "incorrect": view.counts.incorrect,
            "skipped": view.counts.skipped,
        },
        "finished": view.finished,
    }


def _results_payload(results: ResultsView) -> dict[str, object]:
    summary = results.summary
    return {
        "summary": {
            "correct_count": summary.correct_count,
            "incorrect_count": summary.incorrect_count,
            "skipped_count": summary.skipped_count,
            "unanswered_count": summary.unanswered_count,
            "total_count": summary.total_count,
            "percentage": summary.percentage,
        },
        "feedback": [
            {
                "number": item.number,
                "question_text": item.question_text,
                "user_answer_text": item.user_answer_text,
                "correct_answer_text": item.correct_answer_text,
                "note": item.note,
                "classification": item.classification.value,
            }
            for item in results.feedback
        ],
        "feedback_html": render_feedback_fragment(results),
    }


def _raise_http_error(exc: Exception) -> NoReturn:
    if isinstance(exc, ValueError):
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    raise HTTPException(status_code=409, detail=str(exc)) from exc


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def create_api_app(quiz_manager: QuizManager) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION, description=APP_ABOUT_TEXT)
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_quiz_page() -> str:
        return _QUIZ_PAGE_HTML

    @app.get("/status")
    def get_status(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return {
            "status": manager.get_load_status().name.lower(),
            "error": manager.get_load_error(),
        }

    @app.get("/question")
    def get_question(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        try:
            view = manager.get_question_view()
        except QuizError as exc:
            _raise_http_error(exc)
        return _question_payload(view)

    @app.post("/intent")
    def post_intent(
        payload: IntentPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        try:
            intent = intent_from_kind(payload.kind, payload.option_index, payload.question_index)
            view = manager.dispatch(intent)
        except (QuizError, ValueError) as exc:
            _raise_http_error(exc)
        return _question_payload(view)

    @app.get("/results")
    def get_results(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        try:
            results = manager.get_results()
        except QuizError as exc:
            _raise_http_error(exc)
        return _results_payload(results)

    @app.post("/restart")
    def restart(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        try:
            view = manager.start_new_attempt()
        except QuizError as exc:
            _raise_http_error(exc)
        return _question_payload(view)

    return app


def run_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Serve the quiz page in the foreground until interrupted."""
    uvicorn.run(create_api_app(quiz_manager), host=host, port=port, log_level="info")

