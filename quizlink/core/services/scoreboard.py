"""Service for scoring a play-through of a quiz and summarizing the result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from quizlink.core.evaluator import is_answer_correct
from quizlink.core.models import Quiz
from quizlink.core.scoring import calculate_score, round_half_up

_SCORE_MESSAGES: tuple[tuple[int, str], ...] = (
    (90, "🎉 Excellent work!"),
    (80, "👏 Great job!"),
    (70, "👍 Good effort!"),
    (60, "📚 Keep practicing!"),
)
_FALLBACK_MESSAGE = "💪 Don't give up!"


@dataclass(frozen=True, slots=True)
class AnswerRecord:
    """Immutable snapshot of one evaluated answer."""

    question_index: int
    user_answer: Any
    response_time: float
    is_correct: bool
    points_earned: int


class Scoreboard:
    """Evaluates and scores the answers given during one run of a quiz."""

    def __init__(self, quiz: Quiz) -> None:
        self._quiz = quiz
        self._answers: list[AnswerRecord] = []

    @property
    def quiz(self) -> Quiz:
        return self._quiz

    def record_answer(self, question_index: int, user_answer: Any, response_time: float) -> AnswerRecord:
        """Evaluate an answer for the question at ``question_index`` and store it."""
        if not 0 <= question_index < len(self._quiz.questions):
            raise IndexError(f"Question index {question_index} out of range")

        question = self._quiz.questions[question_index]
        is_correct = is_answer_correct(question, user_answer)
        record = AnswerRecord(
            question_index=question_index,
            user_answer=user_answer,
            response_time=response_time,
            is_correct=is_correct,
            points_earned=calculate_score(
                question,
                is_correct,
                response_time,
                self._quiz.effective_duration,
                self._quiz.response_time_multiplier,
            ),
        )
        self._answers.append(record)
        return record

    @property
    def answers(self) -> list[AnswerRecord]:
        return list(self._answers)

    @property
    def total_score(self) -> int:
        return sum(record.points_earned for record in self._answers)

    @property
    def max_score(self) -> int:
        """Points available without any speed bonus."""
        return sum(question.points for question in self._quiz.questions)

    @property
    def correct_answers(self) -> int:
        return sum(1 for record in self._answers if record.is_correct)

    @property
    def is_complete(self) -> bool:
        return len(self._answers) >= len(self._quiz.questions)

    @property
    def percentage(self) -> int:
        total_questions = len(self._quiz.questions)
        if not total_questions:
            return 0
        return round_half_up(self.correct_answers / total_questions * 100)

    def score_message(self) -> str:
        percentage = self.percentage
        for threshold, message in _SCORE_MESSAGES:
            if percentage >= threshold:
                return message
        return _FALLBACK_MESSAGE

    def format_results(self) -> str:
        """Plain-text summary suitable for pasting into a chat."""
        return (
            f"🧠 Quiz Results: {self._quiz.title}\n"
            f"\n"
            f"📊 Score: {self.percentage}%\n"
            f"✅ Correct answers: {self.correct_answers}/{len(self._quiz.questions)}"
        )

    def clear(self) -> None:
        """Reset all recorded answers for a restart."""
        self._answers.clear()
