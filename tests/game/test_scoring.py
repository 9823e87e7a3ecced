from __future__ import annotations

import pytest

from console_quiz.game.sessions.errors import EmptyQuizError
from console_quiz.game.sessions.scoring import compute_percentage, resolve_tier
from console_quiz.game.sessions.types import ResultTier


@pytest.mark.parametrize(
    ("score", "total", "expected"),
    [
        (2, 2, 100.0),
        (1, 2, 50.0),
        (0, 3, 0.0),
        (7, 10, 70.0),
    ],
)
def test_compute_percentage(score: int, total: int, expected: float) -> None:
    assert compute_percentage(score, total) == pytest.approx(expected)


def test_compute_percentage_rejects_empty_quiz() -> None:
    with pytest.raises(EmptyQuizError):
        compute_percentage(0, 0)


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [
        (100.0, ResultTier.PERFECT),
        (99.99, ResultTier.PASSED),
        (70.0, ResultTier.PASSED),
        (69.99, ResultTier.KEEP_LEARNING),
        (0.0, ResultTier.KEEP_LEARNING),
    ],
)
def test_resolve_tier_boundaries(percentage: float, expected: ResultTier) -> None:
    assert resolve_tier(percentage) is expected


def test_seven_of_ten_is_a_pass() -> None:
    assert resolve_tier(compute_percentage(7, 10)) is ResultTier.PASSED
