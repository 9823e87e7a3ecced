from __future__ import annotations

from console_quiz.game.sessions.errors import EmptyQuizError
from console_quiz.game.sessions.types import ResultTier

PERFECT_PERCENTAGE = 100.0
PASS_PERCENTAGE = 70.0


def compute_percentage(score: int, total_questions: int) -> float:
    if total_questions < 1:
        raise EmptyQuizError("cannot score a quiz without questions")
    return 100.0 * score / total_questions


def resolve_tier(percentage: float) -> ResultTier:
    if percentage == PERFECT_PERCENTAGE:
        return ResultTier.PERFECT
    if percentage >= PASS_PERCENTAGE:
        return ResultTier.PASSED
    return ResultTier.KEEP_LEARNING
