"""Selection of the questions that make up one quiz attempt."""

from __future__ import annotations

import random
from collections.abc import Sequence

from solo_quiz.core.errors import EmptyBankError
from solo_quiz.core.models import Question


def sample_questions(
    bank: Sequence[Question],
    max_count: int,
    rng: random.Random | None = None,
    *,
    require_questions: bool = False,
) -> list[Question]:
    """Pick ``min(max_count, len(bank))`` distinct questions in random order.

    Every subset of that size is equally likely and so is every ordering of
    it. ``random.Random.sample`` shuffles a prefix of the index range, which
    keeps the cost linear in the bank size.

    Args:
        bank: Questions to draw from; never modified.
        max_count: Upper bound on the number of questions returned.
        rng: Random source; a seeded instance makes the draw reproducible.
        require_questions: Raise ``EmptyBankError`` instead of returning an
            empty list when the bank has no questions.
    """
    if not bank:
        if require_questions:
            raise EmptyBankError("The question bank does not contain any questions.")
        return []
    if max_count <= 0:
        return []

    rng = rng or random.Random()
    target = min(max_count, len(bank))
    indices = rng.sample(range(len(bank)), target)
    return [bank[index] for index in indices]
