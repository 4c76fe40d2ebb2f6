from __future__ import annotations

from quizlink.core.models import Quiz


def assert_equivalent(actual: Quiz, expected: Quiz) -> None:
    """Compare every field a consumer reads, honoring documented defaults."""
    assert actual.title == expected.title
    assert actual.description == expected.description
    assert actual.thumbnail == expected.thumbnail
    assert actual.effective_duration == expected.effective_duration
    assert actual.response_time_multiplier == expected.response_time_multiplier
    assert actual.questions == expected.questions
