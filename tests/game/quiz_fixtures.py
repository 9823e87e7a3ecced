from __future__ import annotations

from typing import Callable, Iterable

from console_quiz.game.answers.types import Rejected
from console_quiz.game.questions.types import PresentedOptions, Question
from console_quiz.game.sessions.types import AnswerOutcome, QuizResult


def _question(
    question_id: str,
    *,
    options: tuple[str, ...] = ("Alpha", "Bravo", "Charlie", "Delta"),
    correct_index: int = 0,
) -> Question:
    return Question(
        question_id=question_id,
        prompt=f"Prompt {question_id}?",
        options=options,
        correct_index=correct_index,
    )


def _scripted_reader(lines: Iterable[str]) -> Callable[[str], str]:
    """Line reader that behaves like ``input`` on a closed stdin once lines run out."""
    remaining = iter(lines)

    def _read(prompt: str) -> str:
        del prompt
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return _read


class RecordingOutput:
    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def show_welcome(self) -> None:
        self.events.append(("welcome", None))

    def show_question(
        self,
        question_number: int,
        question: Question,
        presented: PresentedOptions,
    ) -> None:
        self.events.append(("question", (question_number, question.question_id, presented)))

    def show_rejection(self, rejected: Rejected, option_count: int) -> None:
        self.events.append(("rejection", (rejected.reason, option_count)))

    def show_answer(self, outcome: AnswerOutcome) -> None:
        self.events.append(("answer", outcome))

    def show_summary(self, result: QuizResult) -> None:
        self.events.append(("summary", result))

    def of_kind(self, kind: str) -> list[object]:
        return [payload for event_kind, payload in self.events if event_kind == kind]
