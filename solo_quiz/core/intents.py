"""User intents consumed by :meth:`QuizSession.dispatch`.

Presentation surfaces translate their own events (button clicks, HTTP
requests) into these values so the state machine never depends on a
rendering technology.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IntentKind(Enum):
    SELECT_OPTION = "select_option"
    GO_NEXT = "go_next"
    GO_PREVIOUS = "go_previous"
    SKIP = "skip"
    SUBMIT = "submit"


@dataclass(frozen=True, slots=True)
class SelectOption:
    """Pick an option; ``question_index`` defaults to the current question."""

    option_index: int
    question_index: int | None = None
    kind: IntentKind = IntentKind.SELECT_OPTION


@dataclass(frozen=True, slots=True)
class GoNext:
    kind: IntentKind = IntentKind.GO_NEXT


@dataclass(frozen=True, slots=True)
class GoPrevious:
    kind: IntentKind = IntentKind.GO_PREVIOUS


@dataclass(frozen=True, slots=True)
class Skip:
    kind: IntentKind = IntentKind.SKIP


@dataclass(frozen=True, slots=True)
class Submit:
    kind: IntentKind = IntentKind.SUBMIT


Intent = SelectOption | GoNext | GoPrevious | Skip | Submit


def intent_from_kind(
    kind: IntentKind | str,
    option_index: int | None = None,
    question_index: int | None = None,
) -> Intent:
    """Build an intent from its kind, as received from an external surface."""
    kind = IntentKind(kind)
    if kind is IntentKind.SELECT_OPTION:
        if option_index is None:
            raise ValueError("select_option requires an option_index.")
        return SelectOption(option_index=option_index, question_index=question_index)
    if kind is IntentKind.GO_NEXT:
        return GoNext()
    if kind is IntentKind.GO_PREVIOUS:
        return GoPrevious()
    if kind is IntentKind.SKIP:
        return Skip()
    return Submit()
