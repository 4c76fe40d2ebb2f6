"""Answer correctness checks for each question type."""

from __future__ import annotations

from typing import Any

from quizlink.core.models import (
    MultipleChoiceQuestion,
    Question,
    SingleChoiceQuestion,
    TrueFalseQuestion,
)


def is_answer_correct(question: Question, user_answer: Any) -> bool:
    """Return whether ``user_answer`` matches the question's answer key.

    Answers of the wrong shape (an int for a true/false question, a bool
    standing in for an option index, a scalar for a multiple-choice question)
    are simply incorrect; this function never raises.
    """
    if isinstance(question, TrueFalseQuestion):
        return isinstance(user_answer, bool) and user_answer == question.answer

    if isinstance(question, SingleChoiceQuestion):
        return _is_index(user_answer) and user_answer == question.answer

    if isinstance(question, MultipleChoiceQuestion):
        if not isinstance(user_answer, (list, tuple, set, frozenset)):
            return False
        if not all(_is_index(item) for item in user_answer):
            return False
        # Sorting both sides makes the comparison order-independent.
        return sorted(set(user_answer)) == sorted(set(question.answer))

    return False


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
