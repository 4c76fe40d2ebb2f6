"""Domain models for quiz documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from quizlink.constants.quiz_constants import DEFAULT_DURATION_SECONDS, DEFAULT_POINTS

TRUE_FALSE = "true-false"
SINGLE_CHOICE = "single-choice"
MULTIPLE_CHOICE = "multiple-choice"

QUESTION_TYPES: tuple[str, ...] = (TRUE_FALSE, SINGLE_CHOICE, MULTIPLE_CHOICE)


@dataclass(frozen=True, slots=True, kw_only=True)
class BaseQuestion:
    """Fields shared by every question type."""

    type: ClassVar[str] = ""

    statement: str
    image: str | None = None
    points: int = DEFAULT_POINTS
    duration: int | None = None  # Seconds; None inherits the quiz default


@dataclass(frozen=True, slots=True, kw_only=True)
class TrueFalseQuestion(BaseQuestion):
    """Question answered with a single boolean."""

    type: ClassVar[str] = TRUE_FALSE

    answer: bool


@dataclass(frozen=True, slots=True, kw_only=True)
class SingleChoiceQuestion(BaseQuestion):
    """Question with exactly one correct option."""

    type: ClassVar[str] = SINGLE_CHOICE

    options: tuple[str, ...]
    answer: int


@dataclass(frozen=True, slots=True, kw_only=True)
class MultipleChoiceQuestion(BaseQuestion):
    """Question whose answer is an unordered set of option indices."""

    type: ClassVar[str] = MULTIPLE_CHOICE

    options: tuple[str, ...]
    answer: tuple[int, ...]


Question = Union[TrueFalseQuestion, SingleChoiceQuestion, MultipleChoiceQuestion]


@dataclass(frozen=True, slots=True)
class Quiz:
    """Quiz document: metadata plus an ordered list of questions.

    Instances are immutable values. Editor helpers return new documents
    instead of mutating existing ones.
    """

    title: str
    questions: tuple[Question, ...] = field(default_factory=tuple)
    description: str | None = None
    thumbnail: str | None = None
    duration: int | None = None
    response_time_multiplier: float | None = None

    @property
    def effective_duration(self) -> int:
        """Per-question time budget used when a question has no own duration."""
        return self.duration or DEFAULT_DURATION_SECONDS
