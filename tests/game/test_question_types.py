from __future__ import annotations

import dataclasses

import pytest

from console_quiz.game.questions.errors import InvalidQuestionError
from console_quiz.game.questions.static_bank import get_default_questions
from console_quiz.game.questions.types import Question


def test_question_keeps_options_as_tuple() -> None:
    question = Question(
        question_id="q_list",
        prompt="Pick one",
        options=["first", "second"],  # type: ignore[arg-type]
        correct_index=1,
    )

    assert question.options == ("first", "second")
    assert question.correct_option == "second"


def test_question_is_immutable() -> None:
    question = Question(question_id="q", prompt="Pick", options=("a", "b"), correct_index=0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        question.correct_index = 1  # type: ignore[misc]


@pytest.mark.parametrize(
    ("options", "correct_index"),
    [
        ((), 0),
        (("only",), 0),
        (("a", "b"), 2),
        (("a", "b", "c", "d"), 4),
        (("a", "b"), -1),
    ],
)
def test_invalid_question_is_rejected(options: tuple[str, ...], correct_index: int) -> None:
    with pytest.raises(InvalidQuestionError):
        Question(
            question_id="broken",
            prompt="Broken?",
            options=options,
            correct_index=correct_index,
        )


def test_default_bank_has_ten_valid_questions() -> None:
    questions = get_default_questions()

    assert len(questions) == 10
    assert len({question.question_id for question in questions}) == 10
    assert all(len(question.options) == 4 for question in questions)
    assert questions[0].correct_option == "A way to repeat code blocks multiple times"


def test_default_bank_returns_fresh_list() -> None:
    first = get_default_questions()
    first.clear()

    assert len(get_default_questions()) == 10
