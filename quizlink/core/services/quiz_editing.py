"""Copy-on-write helpers used by the editor to build and reshape quizzes.

Every helper returns a new ``Quiz`` or question value; nothing is mutated in
place, so the document handed to the codec or the runner never changes
underneath it.
"""

from __future__ import annotations

from dataclasses import replace

from quizlink.constants.quiz_constants import (
    DEFAULT_DURATION_SECONDS,
    DEFAULT_POINTS,
    DEFAULT_RESPONSE_TIME_MULTIPLIER,
)
from quizlink.core.models import (
    MULTIPLE_CHOICE,
    SINGLE_CHOICE,
    TRUE_FALSE,
    MultipleChoiceQuestion,
    Question,
    Quiz,
    SingleChoiceQuestion,
    TrueFalseQuestion,
)

_DEFAULT_OPTIONS = ("Option 1", "Option 2")


def create_empty_quiz() -> Quiz:
    return Quiz(
        title="New Quiz",
        duration=DEFAULT_DURATION_SECONDS,
        response_time_multiplier=DEFAULT_RESPONSE_TIME_MULTIPLIER,
    )


def create_empty_question(question_type: str) -> Question:
    if question_type == TRUE_FALSE:
        return TrueFalseQuestion(statement="", points=DEFAULT_POINTS, answer=True)
    if question_type == SINGLE_CHOICE:
        return SingleChoiceQuestion(
            statement="", points=DEFAULT_POINTS, options=_DEFAULT_OPTIONS, answer=0
        )
    if question_type == MULTIPLE_CHOICE:
        return MultipleChoiceQuestion(
            statement="", points=DEFAULT_POINTS, options=_DEFAULT_OPTIONS, answer=(0,)
        )
    raise ValueError(f"Unknown question type: {question_type!r}")


def duplicate_question(question: Question) -> Question:
    # Questions are frozen, so a shallow replace is a full copy.
    return replace(question)


def append_question(quiz: Quiz, question: Question) -> Quiz:
    return replace(quiz, questions=quiz.questions + (question,))


def replace_question(quiz: Quiz, index: int, question: Question) -> Quiz:
    _check_index(quiz, index)
    questions = list(quiz.questions)
    questions[index] = question
    return replace(quiz, questions=tuple(questions))


def remove_question(quiz: Quiz, index: int) -> Quiz:
    _check_index(quiz, index)
    questions = list(quiz.questions)
    questions.pop(index)
    return replace(quiz, questions=tuple(questions))


def reorder_questions(
    questions: tuple[Question, ...], from_index: int, to_index: int
) -> tuple[Question, ...]:
    """Move the question at ``from_index`` so it ends up at ``to_index``."""
    result = list(questions)
    moved = result.pop(from_index)
    result.insert(to_index, moved)
    return tuple(result)


def _check_index(quiz: Quiz, index: int) -> None:
    if not 0 <= index < len(quiz.questions):
        raise IndexError(f"Question index {index} out of range")
