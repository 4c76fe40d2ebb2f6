from __future__ import annotations

import pytest

from quizlink.core.compact import compact_quiz, expand_quiz, is_compact_shape, is_full_shape
from quizlink.core.models import (
    MultipleChoiceQuestion,
    Quiz,
    SingleChoiceQuestion,
    TrueFalseQuestion,
)
from quizlink.core.quiz_importer import QuizImportError
from tests.helpers import assert_equivalent


def test_compact_uses_short_keys(full_quiz):
    assert compact_quiz(full_quiz) == {
        "t": "World Capitals ✈️",
        "desc": "How well do you know the *map*?",
        "thumb": "https://example.org/cover.png",
        "d": 20,
        "rtm": 1.5,
        "q": [
            {"s": "Paris is the capital of France", "y": "tf", "a": True},
            {
                "s": "Capital of Peru?",
                "y": "sc",
                "a": 0,
                "o": ["Lima", "Quito", "Bogotá"],
                "i": "https://example.org/peru.png",
                "p": 200,
            },
            {
                "s": "Which are in Europe?",
                "y": "mc",
                "a": [2, 0],
                "o": ["Oslo", "Lagos", "Rome", "Lima"],
                "dur": 15,
            },
        ],
    }


def test_compact_key_order_is_fixed(full_quiz):
    compact = compact_quiz(full_quiz)
    assert list(compact) == ["t", "desc", "thumb", "d", "rtm", "q"]
    assert list(compact["q"][1]) == ["s", "y", "a", "o", "i", "p"]


def test_compact_elides_defaults_and_empty_values():
    quiz = Quiz(
        title="Defaults",
        duration=30,
        questions=(
            SingleChoiceQuestion(statement="Pick", options=("a", "b"), answer=1, points=100, duration=30),
            MultipleChoiceQuestion(statement="None yet", options=(), answer=()),
        ),
    )
    assert compact_quiz(quiz) == {
        "t": "Defaults",
        "q": [
            {"s": "Pick", "y": "sc", "a": 1, "o": ["a", "b"], "dur": 30},
            {"s": "None yet", "y": "mc"},
        ],
    }


def test_question_duration_is_kept_when_it_matches_the_default():
    question = TrueFalseQuestion(statement="S", answer=False, duration=30)
    compact = compact_quiz(Quiz(title="T", duration=60, questions=(question,)))
    assert compact["q"][0]["dur"] == 30


def test_expand_reverses_compact(full_quiz):
    assert expand_quiz(compact_quiz(full_quiz)) == full_quiz


def test_expand_restores_elided_defaults():
    quiz = Quiz(
        title="Defaults",
        duration=30,
        questions=(
            TrueFalseQuestion(statement="S", answer=True),
            MultipleChoiceQuestion(statement="M", options=(), answer=()),
        ),
    )
    expanded = expand_quiz(compact_quiz(quiz))
    assert_equivalent(expanded, quiz)
    assert expanded.duration is None
    assert expanded.effective_duration == 30
    assert expanded.questions[0].points == 100


def test_expand_leaves_absent_fields_absent():
    expanded = expand_quiz({"t": "T", "q": [{"s": "S", "y": "tf", "a": False}]})
    assert expanded.description is None
    assert expanded.thumbnail is None
    assert expanded.duration is None
    assert expanded.response_time_multiplier is None
    assert expanded.questions[0].image is None
    assert expanded.questions[0].duration is None


@pytest.mark.parametrize(
    "data",
    [
        {"q": []},
        {"t": "T", "q": "nope"},
        {"t": "T", "q": [{"s": "S", "y": "xx", "a": True}]},
        {"t": "T", "q": [{"s": "S", "y": "tf", "a": 1}]},
        {"t": "T", "q": [{"s": "S", "y": "sc", "a": "0", "o": ["a", "b"]}]},
        {"t": "T", "q": ["not an object"]},
        {"t": "T", "questions": []},
    ],
)
def test_expand_rejects_malformed_documents(data):
    with pytest.raises(QuizImportError):
        expand_quiz(data)


def test_shape_detection_is_explicit():
    assert is_compact_shape({"t": "T", "q": []})
    assert not is_compact_shape({"title": "T", "questions": []})
    assert is_full_shape({"title": "T", "questions": []})
    assert not is_full_shape({"t": "T", "q": []})
    ambiguous = {"title": "T", "q": [], "questions": []}
    assert not is_compact_shape(ambiguous)
    assert not is_full_shape(ambiguous)
    assert not is_compact_shape(["q"])
