from __future__ import annotations

import random
from typing import Sequence

import structlog

from console_quiz.game.answers.parsing import parse_answer
from console_quiz.game.answers.types import Rejected
from console_quiz.game.questions.presentation import present_question
from console_quiz.game.questions.types import PresentedOptions, Question
from console_quiz.game.sessions.errors import EmptyQuizError, QuizAbortedError, QuizAlreadyRunError
from console_quiz.game.sessions.scoring import compute_percentage, resolve_tier
from console_quiz.game.sessions.types import (
    AnswerOutcome,
    LineReader,
    QuizOutput,
    QuizResult,
    QuizState,
    RunStatus,
)

logger = structlog.get_logger("console_quiz.game.sessions.runner")

ANSWER_PROMPT = "Your answer: "


class QuizRunner:
    """Runs one quiz from the first question to the summary.

    A runner is single-use. Build a new one, with a fresh question sequence,
    to play again.
    """

    def __init__(
        self,
        questions: Sequence[Question],
        *,
        read_line: LineReader,
        output: QuizOutput,
        rng: random.Random | None = None,
        shuffle_questions: bool = True,
        shuffle_options: bool = True,
        answer_prompt: str = ANSWER_PROMPT,
    ) -> None:
        if not questions:
            raise EmptyQuizError("quiz needs at least one question")
        self._state = QuizState(
            remaining_questions=list(questions),
            total_questions=len(questions),
        )
        self._read_line = read_line
        self._output = output
        self._rng = rng or random.Random()
        self._shuffle_questions = shuffle_questions
        self._shuffle_options = shuffle_options
        self._answer_prompt = answer_prompt
        self._status = RunStatus.NOT_STARTED

    @property
    def status(self) -> RunStatus:
        return self._status

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def total_questions(self) -> int:
        return self._state.total_questions

    def run(self) -> QuizResult:
        if self._status is not RunStatus.NOT_STARTED:
            raise QuizAlreadyRunError(f"quiz runner already used, status={self._status.value}")
        self._status = RunStatus.IN_PROGRESS
        logger.info(
            "quiz_run_started",
            total_questions=self._state.total_questions,
            shuffle_questions=self._shuffle_questions,
            shuffle_options=self._shuffle_options,
        )

        self._output.show_welcome()
        if self._shuffle_questions:
            self._rng.shuffle(self._state.remaining_questions)

        try:
            while self._state.remaining_questions:
                question = self._state.remaining_questions.pop(0)
                self._ask(question, question_number=self._state.answered_count + 1)
        except EOFError as exc:
            self._status = RunStatus.ABORTED
            logger.warning(
                "quiz_run_aborted",
                answered=self._state.answered_count,
                total_questions=self._state.total_questions,
                score=self._state.score,
            )
            raise QuizAbortedError("input ended before the quiz was finished") from exc

        return self._finish()

    def _ask(self, question: Question, *, question_number: int) -> None:
        presented = present_question(
            question,
            rng=self._rng,
            shuffle_options=self._shuffle_options,
        )
        self._output.show_question(question_number, question, presented)

        selected_index = self._collect_selection(question, presented)
        outcome = AnswerOutcome(
            question_number=question_number,
            question_id=question.question_id,
            prompt=question.prompt,
            selected_index=selected_index,
            selected_option=presented.options[selected_index],
            correct_index=presented.correct_index,
            correct_option=presented.correct_option,
            is_correct=selected_index == presented.correct_index,
        )
        self._state.record(outcome)
        logger.info(
            "quiz_answer_recorded",
            question_id=question.question_id,
            question_number=question_number,
            is_correct=outcome.is_correct,
            score=self._state.score,
        )
        self._output.show_answer(outcome)

    def _collect_selection(self, question: Question, presented: PresentedOptions) -> int:
        while True:
            parsed = parse_answer(self._read_line(self._answer_prompt), presented.option_count)
            if isinstance(parsed, Rejected):
                logger.debug(
                    "quiz_answer_rejected",
                    question_id=question.question_id,
                    reason=parsed.reason.value,
                )
                self._output.show_rejection(parsed, presented.option_count)
                continue
            return parsed.index

    def _finish(self) -> QuizResult:
        percentage = compute_percentage(self._state.score, self._state.total_questions)
        result = QuizResult(
            score=self._state.score,
            total_questions=self._state.total_questions,
            percentage=percentage,
            tier=resolve_tier(percentage),
            answers=tuple(self._state.answers),
        )
        self._status = RunStatus.FINISHED
        logger.info(
            "quiz_run_finished",
            score=result.score,
            total_questions=result.total_questions,
            percentage=round(result.percentage, 2),
            tier=result.tier.value,
        )
        self._output.show_summary(result)
        return result
