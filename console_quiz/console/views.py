from __future__ import annotations

from console_quiz.console.texts import TEXTS_EN
from console_quiz.game.answers.parsing import option_letter
from console_quiz.game.answers.types import Rejected
from console_quiz.game.questions.types import PresentedOptions, Question
from console_quiz.game.sessions.types import AnswerOutcome, QuizResult, ResultTier

TIER_TEXT_KEYS: dict[ResultTier, str] = {
    ResultTier.PERFECT: "msg.quiz.tier.perfect",
    ResultTier.PASSED: "msg.quiz.tier.passed",
    ResultTier.KEEP_LEARNING: "msg.quiz.tier.keep_learning",
}


def build_welcome_text() -> str:
    return "\n".join(
        [
            TEXTS_EN["msg.quiz.welcome"],
            TEXTS_EN["msg.quiz.instructions"],
            TEXTS_EN["msg.quiz.separator"],
        ]
    )


def build_question_text(
    *,
    question_number: int,
    question: Question,
    presented: PresentedOptions,
) -> str:
    lines = [
        "",
        TEXTS_EN["msg.quiz.question"].format(number=question_number, prompt=question.prompt),
    ]
    lines.extend(
        TEXTS_EN["msg.quiz.option"].format(letter=option_letter(index), text=text)
        for index, text in enumerate(presented.options)
    )
    return "\n".join(lines)


def build_rejection_text(*, rejected: Rejected, option_count: int) -> str:
    return TEXTS_EN[f"msg.quiz.rejected.{rejected.reason.value}"].format(
        option_count=option_count
    )


def build_answer_feedback(outcome: AnswerOutcome) -> str:
    if outcome.is_correct:
        return TEXTS_EN["msg.quiz.answer.correct"]
    return TEXTS_EN["msg.quiz.answer.wrong"].format(
        letter=option_letter(outcome.correct_index),
        text=outcome.correct_option,
    )


def build_summary_text(result: QuizResult) -> str:
    return "\n".join(
        [
            "",
            TEXTS_EN["msg.quiz.separator"],
            TEXTS_EN["msg.quiz.finished"],
            TEXTS_EN["msg.quiz.score"].format(score=result.score, total=result.total_questions),
            TEXTS_EN["msg.quiz.percentage"].format(percentage=result.percentage),
            TEXTS_EN[TIER_TEXT_KEYS[result.tier]],
        ]
    )
