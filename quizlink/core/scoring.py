"""Points awarded for an answer, optionally weighted by response time."""

from __future__ import annotations

import math

from quizlink.constants.quiz_constants import DEFAULT_DURATION_SECONDS
from quizlink.core.models import Question


def calculate_score(
    question: Question,
    is_correct: bool,
    response_time: float,
    quiz_duration: int | None = None,
    multiplier: float | None = None,
) -> int:
    """Return the points earned for one answer.

    Incorrect answers earn nothing. Without a multiplier (or with exactly 1)
    a correct answer earns the question's points regardless of speed. With a
    multiplier, points scale between half the base at the time limit and
    ``base * (0.5 + 0.5 * multiplier)`` for an instant answer:

        round(base * (0.5 + 0.5 * time_ratio * multiplier))

    where ``time_ratio = 1 - response_time / max_time`` clamped to [0, 1] and
    ``max_time`` is the question duration, else the quiz duration, else 30s.
    There is no upper cap: a large multiplier can exceed the base points.
    """
    if not is_correct:
        return 0

    base_points = question.points
    if multiplier is None or multiplier == 1:
        return base_points

    max_time = question.duration or quiz_duration or DEFAULT_DURATION_SECONDS
    time_ratio = response_time_ratio(response_time, max_time)
    return max(0, round_half_up(base_points * (0.5 + 0.5 * time_ratio * multiplier)))


def response_time_ratio(response_time: float, max_time: float) -> float:
    """Fraction of the time budget left when the answer came in, in [0, 1]."""
    if max_time <= 0:
        return 0.0
    return min(1.0, max(0.0, 1 - response_time / max_time))


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; the browser runner rounds .5 up.
    return math.floor(value + 0.5)
