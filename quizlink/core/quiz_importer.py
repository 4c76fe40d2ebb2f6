"""Utilities for importing quizzes from the full-field JSON document format.

The full-field format is the plain JSON shape of a quiz document:

    {
      "title": "Capitals",
      "description": "Optional text",
      "thumbnail": "https://example.org/cover.png",
      "duration": 20,
      "responseTimeMultiplier": 1.5,
      "questions": [
        {"type": "true-false", "statement": "Paris is in France", "answer": true},
        {"type": "single-choice", "statement": "Capital of Peru?",
         "options": ["Lima", "Quito"], "answer": 0, "points": 200},
        {"type": "multiple-choice", "statement": "Even numbers?",
         "options": ["1", "2", "4"], "answer": [1, 2], "duration": 15}
      ]
    }

It is what the editor exports, what the legacy ``?q=`` links carry, and what
the ``?import=`` entry point receives. Shape problems raise
``QuizImportError``; content rules (non-empty title, valid indices, ...) are
left to the validator so that unfinished drafts still load.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Mapping

from quizlink.constants.quiz_constants import DEFAULT_POINTS
from quizlink.core.codec import CodecError, decode_base64_text
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


class QuizImportError(Exception):
    """Raised when a quiz document cannot be parsed."""


def load_quiz_from_file(file_path: Path) -> Quiz:
    text = file_path.read_text(encoding="utf-8")
    return quiz_from_json(text)


def quiz_from_json(text: str) -> Quiz:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise QuizImportError(f"Quiz data is not valid JSON: {exc.msg}.") from exc
    except RecursionError as exc:
        raise QuizImportError("Quiz data is nested too deeply.") from exc
    return quiz_from_dict(data)


def quiz_from_base64(text: str) -> Quiz:
    """Parse the base64-wrapped JSON produced by the editor export."""
    try:
        decoded = decode_base64_text(text.strip())
    except CodecError as exc:
        raise QuizImportError(str(exc)) from exc
    return quiz_from_json(decoded)


def quiz_from_dict(data: Any) -> Quiz:
    if not isinstance(data, Mapping):
        raise QuizImportError("Quiz data must be a JSON object.")
    if "questions" not in data:
        raise QuizImportError("Quiz data is missing the 'questions' list.")

    raw_questions = data["questions"]
    if not isinstance(raw_questions, list):
        raise QuizImportError("'questions' must be a list.")

    questions = tuple(
        question_from_dict(raw, position)
        for position, raw in enumerate(raw_questions, start=1)
    )
    return Quiz(
        title=require_text(data.get("title"), "Quiz title"),
        questions=questions,
        description=optional_text(data.get("description"), "Quiz description"),
        thumbnail=optional_text(data.get("thumbnail"), "Quiz thumbnail"),
        duration=optional_int(data.get("duration"), "Quiz duration"),
        response_time_multiplier=optional_number(
            data.get("responseTimeMultiplier"), "responseTimeMultiplier"
        ),
    )


def question_from_dict(raw: Any, position: int = 1) -> Question:
    if not isinstance(raw, Mapping):
        raise QuizImportError(f"Question {position} must be a JSON object.")
    return build_question(
        question_type=raw.get("type"),
        statement=raw.get("statement"),
        image=raw.get("image"),
        points=raw.get("points"),
        duration=raw.get("duration"),
        options=raw.get("options"),
        answer=raw.get("answer"),
        position=position,
    )


def build_question(
    *,
    question_type: Any,
    statement: Any,
    image: Any,
    points: Any,
    duration: Any,
    options: Any,
    answer: Any,
    position: int,
) -> Question:
    """Build a typed question from raw decoded values.

    Shared by the full-field importer and the compact projection so both wire
    shapes are held to the same typing rules.
    """
    label = f"Question {position}"
    common = {
        "statement": require_text(statement, f"{label} statement"),
        "image": optional_text(image, f"{label} image"),
        "points": DEFAULT_POINTS if points is None else _require_int(points, f"{label} points"),
        "duration": optional_int(duration, f"{label} duration"),
    }

    if question_type == TRUE_FALSE:
        if not isinstance(answer, bool):
            raise QuizImportError(f"{label}: true-false answer must be true or false.")
        return TrueFalseQuestion(answer=answer, **common)

    if question_type == SINGLE_CHOICE:
        return SingleChoiceQuestion(
            options=_parse_options(options, label),
            answer=_require_int(answer, f"{label} answer"),
            **common,
        )

    if question_type == MULTIPLE_CHOICE:
        if answer is None:
            answer = []
        if not isinstance(answer, list):
            raise QuizImportError(f"{label}: multiple-choice answer must be a list of indices.")
        return MultipleChoiceQuestion(
            options=_parse_options(options, label),
            answer=tuple(_require_int(item, f"{label} answer") for item in answer),
            **common,
        )

    raise QuizImportError(f"{label}: unknown question type {question_type!r}.")


def _parse_options(options: Any, label: str) -> tuple[str, ...]:
    if options is None:
        return ()
    if not isinstance(options, list) or any(not isinstance(opt, str) for opt in options):
        raise QuizImportError(f"{label}: options must be a list of strings.")
    return tuple(options)


def require_text(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise QuizImportError(f"{name} must be a string.")
    return value


def optional_text(value: Any, name: str) -> str | None:
    if value is None or value == "":
        return None
    return require_text(value, name)


def optional_int(value: Any, name: str) -> int | None:
    if value is None:
        return None
    return _require_int(value, name)


def optional_number(value: Any, name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise QuizImportError(f"{name} must be a number.")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        # Integers beyond float range.
        finite = False
    if not finite:
        raise QuizImportError(f"{name} must be a finite number.")
    return value


def _require_int(value: Any, name: str) -> int:
    # JSON numbers written by browsers may arrive as integral floats (e.g. 30.0).
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise QuizImportError(f"{name} must be an integer.")
    return value
