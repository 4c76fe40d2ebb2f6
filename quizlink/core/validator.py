"""Structural checks that gate quiz export and sharing."""

from __future__ import annotations

from dataclasses import dataclass, field

from quizlink.core.models import MultipleChoiceQuestion, Quiz, SingleChoiceQuestion


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Every problem found in a quiz, in document order."""

    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_quiz(quiz: Quiz) -> ValidationResult:
    errors: list[str] = []

    if not quiz.title.strip():
        errors.append("Quiz title is required")

    if not quiz.questions:
        errors.append("At least one question is required")

    for position, question in enumerate(quiz.questions, start=1):
        prefix = f"Question {position}"
        if not question.statement.strip():
            errors.append(f"{prefix}: Statement is required")

        if not isinstance(question, (SingleChoiceQuestion, MultipleChoiceQuestion)):
            continue

        option_count = len(question.options)
        if option_count < 2:
            errors.append(f"{prefix}: At least 2 options are required")
        if any(not option.strip() for option in question.options):
            errors.append(f"{prefix}: All options must have text")

        if isinstance(question, SingleChoiceQuestion):
            if not 0 <= question.answer < option_count:
                errors.append(f"{prefix}: Invalid correct answer index")
        else:
            if not question.answer:
                errors.append(f"{prefix}: At least one correct answer must be selected")
            if any(not 0 <= index < option_count for index in question.answer):
                errors.append(f"{prefix}: Invalid correct answer index")

    return ValidationResult(errors=tuple(errors))
