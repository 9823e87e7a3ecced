from __future__ import annotations

from typing import Callable

from console_quiz.console.views import (
    build_answer_feedback,
    build_question_text,
    build_rejection_text,
    build_summary_text,
    build_welcome_text,
)
from console_quiz.game.answers.types import Rejected
from console_quiz.game.questions.types import PresentedOptions, Question
from console_quiz.game.sessions.types import AnswerOutcome, QuizResult


class ConsoleQuizOutput:
    def __init__(self, write: Callable[[str], object] = print) -> None:
        self._write = write

    def show_welcome(self) -> None:
        self._write(build_welcome_text())

    def show_question(
        self,
        question_number: int,
        question: Question,
        presented: PresentedOptions,
    ) -> None:
        self._write(
            build_question_text(
                question_number=question_number,
                question=question,
                presented=presented,
            )
        )

    def show_rejection(self, rejected: Rejected, option_count: int) -> None:
        self._write(build_rejection_text(rejected=rejected, option_count=option_count))

    def show_answer(self, outcome: AnswerOutcome) -> None:
        self._write(build_answer_feedback(outcome))

    def show_summary(self, result: QuizResult) -> None:
        self._write(build_summary_text(result))
