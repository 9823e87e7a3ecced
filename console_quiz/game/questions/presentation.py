from __future__ import annotations

import random

from console_quiz.game.questions.types import PresentedOptions, Question


def _shuffled_with_correct_index(
    question: Question,
    *,
    rng: random.Random,
) -> PresentedOptions:
    paired = [(option, original_index) for original_index, option in enumerate(question.options)]
    rng.shuffle(paired)

    shuffled: list[str] = []
    new_correct_index = -1
    for position, (option, original_index) in enumerate(paired):
        shuffled.append(option)
        if original_index == question.correct_index:
            new_correct_index = position

    return PresentedOptions(options=tuple(shuffled), correct_index=new_correct_index)


def present_question(
    question: Question,
    *,
    rng: random.Random,
    shuffle_options: bool,
) -> PresentedOptions:
    """Return the option ordering shown for one run of ``question``.

    With shuffling on, options are paired with their original positions before
    the shuffle so the correct answer is tracked by position, not by text.
    Duplicate option texts therefore keep the right answer.
    """
    if not shuffle_options:
        return PresentedOptions(options=question.options, correct_index=question.correct_index)
    return _shuffled_with_correct_index(question, rng=rng)
