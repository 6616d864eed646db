"""Static metadata describing SoloQuiz."""

APP_NAME = "SoloQuiz"
APP_VERSION = "0.1"
APP_ABOUT_TEXT = (
    "SoloQuiz runs a self-paced multiple-choice quiz sampled from a question bank, "
    "either in a Qt window or in the browser."
)
