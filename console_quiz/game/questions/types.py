from __future__ import annotations

from dataclasses import dataclass

from console_quiz.game.questions.errors import InvalidQuestionError

MIN_OPTIONS = 2


@dataclass(frozen=True, slots=True)
class Question:
    question_id: str
    prompt: str
    options: tuple[str, ...]
    correct_index: int

    def __post_init__(self) -> None:
        options = tuple(self.options)
        if len(options) < MIN_OPTIONS:
            raise InvalidQuestionError(
                f"question {self.question_id!r} must provide at least {MIN_OPTIONS} options"
            )
        if not 0 <= self.correct_index < len(options):
            raise InvalidQuestionError(
                f"question {self.question_id!r} has correct_index={self.correct_index} "
                f"outside 0..{len(options) - 1}"
            )
        object.__setattr__(self, "options", options)

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]


@dataclass(frozen=True, slots=True)
class PresentedOptions:
    options: tuple[str, ...]
    correct_index: int

    @property
    def option_count(self) -> int:
        return len(self.options)

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]
