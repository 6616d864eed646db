"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "SoloQuiz"
LOAD_REFRESH_INTERVAL_MS: int = 200

PREVIOUS_BUTTON: str = "Previous"
SKIP_BUTTON: str = "Skip"
RESTART_BUTTON: str = "Try Again"

LOADING_MESSAGE: str = "Loading questions…"
LOAD_FAILED_TITLE: str = "Could not start the quiz"
QUESTION_NUMBER_TEMPLATE: str = "Question {number} of {total}"
COUNTERS_TEMPLATE: str = "Correct: {correct}   Incorrect: {incorrect}   Skipped: {skipped}"
SCORE_TEMPLATE: str = "You got {correct} out of {total} correct ({percentage}%)."
