"""Compact projection of quiz documents for link transfer.

The compact shape renames every field to a short key and drops values that a
reader would reconstruct anyway, so the JSON that goes into the compressor is
as small as possible:

    quiz:      t, desc, thumb, d, rtm, q
    question:  s, y (tf | sc | mc), a, o, i, p, dur

Elision rules:

* ``None`` and empty strings/lists are dropped everywhere.
* ``p`` is dropped when it equals ``DEFAULT_POINTS``; the model default
  restores it on expansion.
* the quiz ``d`` is dropped when it equals ``DEFAULT_DURATION_SECONDS``;
  readers use ``Quiz.effective_duration``, which yields the same value.
* the question ``dur`` is never elided by value. An absent question
  duration means "inherit the quiz duration", so dropping 30 there would
  change scoring for quizzes whose default is not 30.

Keys are always emitted in the order listed above so that the compressed
output is deterministic.
"""

from __future__ import annotations

from typing import Any, Mapping

from quizlink.constants.quiz_constants import DEFAULT_DURATION_SECONDS, DEFAULT_POINTS
from quizlink.core.models import (
    MULTIPLE_CHOICE,
    SINGLE_CHOICE,
    TRUE_FALSE,
    MultipleChoiceQuestion,
    Question,
    Quiz,
    SingleChoiceQuestion,
)
from quizlink.core.quiz_importer import (
    QuizImportError,
    build_question,
    optional_int,
    optional_number,
    optional_text,
    require_text,
)

COMPACT_QUESTIONS_KEY = "q"
FULL_QUESTIONS_KEY = "questions"

_TYPE_CODES: dict[str, str] = {
    TRUE_FALSE: "tf",
    SINGLE_CHOICE: "sc",
    MULTIPLE_CHOICE: "mc",
}
_TYPES_BY_CODE: dict[str, str] = {code: name for name, code in _TYPE_CODES.items()}


def compact_quiz(quiz: Quiz) -> dict[str, Any]:
    """Project ``quiz`` onto the abbreviated keys.

    A quiz duration equal to the default is dropped, so the expanded quiz has
    ``duration=None`` rather than the original value. Read the time budget
    through ``Quiz.effective_duration``, never the raw field.
    """
    compact: dict[str, Any] = {"t": quiz.title}
    _put_if_present(compact, "desc", quiz.description)
    _put_if_present(compact, "thumb", quiz.thumbnail)
    if quiz.duration != DEFAULT_DURATION_SECONDS:
        _put_if_present(compact, "d", quiz.duration)
    _put_if_present(compact, "rtm", quiz.response_time_multiplier)
    compact[COMPACT_QUESTIONS_KEY] = [compact_question(question) for question in quiz.questions]
    return compact


def compact_question(question: Question) -> dict[str, Any]:
    compact: dict[str, Any] = {"s": question.statement, "y": _TYPE_CODES[question.type]}
    if isinstance(question, MultipleChoiceQuestion):
        _put_if_present(compact, "a", list(question.answer))
    else:
        compact["a"] = question.answer
    if isinstance(question, (SingleChoiceQuestion, MultipleChoiceQuestion)):
        _put_if_present(compact, "o", list(question.options))
    _put_if_present(compact, "i", question.image)
    if question.points != DEFAULT_POINTS:
        compact["p"] = question.points
    _put_if_present(compact, "dur", question.duration)
    return compact


def is_compact_shape(data: Any) -> bool:
    """True for the abbreviated shape, False for anything else.

    The abbreviated shape is recognized by its questions key alone, and only
    when the full-field questions key is absent, so a document carrying both
    is never mistaken for either.
    """
    return (
        isinstance(data, Mapping)
        and COMPACT_QUESTIONS_KEY in data
        and FULL_QUESTIONS_KEY not in data
    )


def is_full_shape(data: Any) -> bool:
    return (
        isinstance(data, Mapping)
        and FULL_QUESTIONS_KEY in data
        and COMPACT_QUESTIONS_KEY not in data
    )


def expand_quiz(data: Mapping[str, Any]) -> Quiz:
    if not is_compact_shape(data):
        raise QuizImportError("Data is not a compact quiz document.")
    raw_questions = data[COMPACT_QUESTIONS_KEY]
    if not isinstance(raw_questions, list):
        raise QuizImportError("Compact questions must be a list.")

    return Quiz(
        title=require_text(data.get("t"), "Quiz title"),
        questions=tuple(
            _expand_question(raw, position)
            for position, raw in enumerate(raw_questions, start=1)
        ),
        description=optional_text(data.get("desc"), "Quiz description"),
        thumbnail=optional_text(data.get("thumb"), "Quiz thumbnail"),
        duration=optional_int(data.get("d"), "Quiz duration"),
        response_time_multiplier=optional_number(data.get("rtm"), "Response time multiplier"),
    )


def _expand_question(raw: Any, position: int) -> Question:
    if not isinstance(raw, Mapping):
        raise QuizImportError(f"Question {position} must be a JSON object.")
    code = raw.get("y")
    if code not in _TYPES_BY_CODE:
        raise QuizImportError(f"Question {position}: unknown type code {code!r}.")
    return build_question(
        question_type=_TYPES_BY_CODE[code],
        statement=raw.get("s"),
        image=raw.get("i"),
        points=raw.get("p"),
        duration=raw.get("dur"),
        options=raw.get("o"),
        answer=raw.get("a"),
        position=position,
    )


def _put_if_present(compact: dict[str, Any], key: str, value: Any) -> None:
    if value is None or value == "" or value == []:
        return
    compact[key] = value
