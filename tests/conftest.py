from __future__ import annotations

import pytest

from quizlink.core.models import (
    MultipleChoiceQuestion,
    Quiz,
    SingleChoiceQuestion,
    TrueFalseQuestion,
)


@pytest.fixture
def true_false_question() -> TrueFalseQuestion:
    return TrueFalseQuestion(statement="S", answer=True, points=100)


@pytest.fixture
def simple_quiz(true_false_question: TrueFalseQuestion) -> Quiz:
    return Quiz(title="T", questions=(true_false_question,))


@pytest.fixture
def full_quiz() -> Quiz:
    return Quiz(
        title="World Capitals ✈️",
        description="How well do you know the *map*?",
        thumbnail="https://example.org/cover.png",
        duration=20,
        response_time_multiplier=1.5,
        questions=(
            TrueFalseQuestion(statement="Paris is the capital of France", answer=True),
            SingleChoiceQuestion(
                statement="Capital of Peru?",
                options=("Lima", "Quito", "Bogotá"),
                answer=0,
                points=200,
                image="https://example.org/peru.png",
            ),
            MultipleChoiceQuestion(
                statement="Which are in Europe?",
                options=("Oslo", "Lagos", "Rome", "Lima"),
                answer=(2, 0),
                duration=15,
            ),
        ),
    )

