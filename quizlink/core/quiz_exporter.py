"""Utilities for exporting quizzes to the full-field JSON document format."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from quizlink.core.codec import encode_base64_text
from quizlink.core.models import MultipleChoiceQuestion, Question, Quiz, SingleChoiceQuestion


def save_quiz_to_file(file_path: Path, quiz: Quiz) -> None:
    """Persist the quiz to disk as pretty-printed JSON."""

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(quiz_to_json(quiz, indent=2) + "\n", encoding="utf-8")


def quiz_to_json(quiz: Quiz, indent: int | None = None) -> str:
    if indent is None:
        return json.dumps(quiz_to_dict(quiz), ensure_ascii=False, separators=(",", ":"))
    return json.dumps(quiz_to_dict(quiz), ensure_ascii=False, indent=indent)


def quiz_to_base64(quiz: Quiz) -> str:
    """Export text for the base64 tab of the editor and for ``?import=`` links."""
    return encode_base64_text(quiz_to_json(quiz))


def quiz_to_dict(quiz: Quiz) -> dict[str, Any]:
    document: dict[str, Any] = {"title": quiz.title}
    _put_optional(document, "description", quiz.description)
    _put_optional(document, "thumbnail", quiz.thumbnail)
    _put_optional(document, "duration", quiz.duration)
    _put_optional(document, "responseTimeMultiplier", quiz.response_time_multiplier)
    document["questions"] = [question_to_dict(question) for question in quiz.questions]
    return document


def question_to_dict(question: Question) -> dict[str, Any]:
    document: dict[str, Any] = {"type": question.type, "statement": question.statement}
    _put_optional(document, "image", question.image)
    document["points"] = question.points
    _put_optional(document, "duration", question.duration)
    if isinstance(question, (SingleChoiceQuestion, MultipleChoiceQuestion)):
        document["options"] = list(question.options)
    if isinstance(question, MultipleChoiceQuestion):
        document["answer"] = list(question.answer)
    else:
        document["answer"] = question.answer
    return document


def _put_optional(document: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        document[key] = value
