from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Protocol

from console_quiz.game.answers.types import Rejected
from console_quiz.game.questions.types import PresentedOptions, Question

LineReader = Callable[[str], str]


class RunStatus(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    FINISHED = "FINISHED"
    ABORTED = "ABORTED"


class ResultTier(str, Enum):
    PERFECT = "PERFECT"
    PASSED = "PASSED"
    KEEP_LEARNING = "KEEP_LEARNING"


@dataclass(frozen=True, slots=True)
class AnswerOutcome:
    question_number: int
    question_id: str
    prompt: str
    selected_index: int
    selected_option: str
    correct_index: int
    correct_option: str
    is_correct: bool


@dataclass(slots=True)
class QuizState:
    remaining_questions: list[Question]
    total_questions: int
    score: int = 0
    answers: list[AnswerOutcome] = field(default_factory=list)

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    def record(self, outcome: AnswerOutcome) -> None:
        if outcome.is_correct:
            self.score += 1
        self.answers.append(outcome)


@dataclass(frozen=True, slots=True)
class QuizResult:
    score: int
    total_questions: int
    percentage: float
    tier: ResultTier
    answers: tuple[AnswerOutcome, ...]


class QuizOutput(Protocol):
    def show_welcome(self) -> None: ...

    def show_question(
        self,
        question_number: int,
        question: Question,
        presented: PresentedOptions,
    ) -> None: ...

    def show_rejection(self, rejected: Rejected, option_count: int) -> None: ...

    def show_answer(self, outcome: AnswerOutcome) -> None: ...

    def show_summary(self, result: QuizResult) -> None: ...
