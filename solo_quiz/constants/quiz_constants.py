"""Quiz-related constants shared across UI and core layers."""

DEFAULT_MAX_QUESTIONS: int = 50
DEFAULT_BANK_PATH: str = "data/questions.json"
DEFAULT_CONFIG_PATH: str = "data/config.json"
REMOTE_SOURCE_TIMEOUT_SECONDS: float = 10.0

FORWARD_LABEL_NEXT: str = "Next"
FORWARD_LABEL_SUBMIT: str = "Submit"
NO_ANSWER_TEXT: str = "No answer"
