from __future__ import annotations

import random

import structlog

from console_quiz.console.output import ConsoleQuizOutput
from console_quiz.console.texts import TEXTS_EN
from console_quiz.core.config import get_settings
from console_quiz.core.logging import configure_logging
from console_quiz.game.questions.static_bank import get_default_questions
from console_quiz.game.sessions.errors import QuizAbortedError
from console_quiz.game.sessions.runner import QuizRunner

logger = structlog.get_logger("console_quiz.main")

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_INTERRUPTED = 130


def create_runner() -> QuizRunner:
    settings = get_settings()
    return QuizRunner(
        get_default_questions(),
        read_line=input,
        output=ConsoleQuizOutput(),
        rng=random.Random(settings.random_seed),
        shuffle_questions=settings.shuffle_questions,
        shuffle_options=settings.shuffle_options,
    )


def run() -> int:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    runner = create_runner()
    try:
        runner.run()
    except QuizAbortedError:
        print()  # noqa: T201
        print(TEXTS_EN["msg.quiz.aborted"])  # noqa: T201
        return EXIT_ABORTED
    except KeyboardInterrupt:
        logger.warning("quiz_run_interrupted", score=runner.score)
        print()  # noqa: T201
        print(TEXTS_EN["msg.quiz.interrupted"])  # noqa: T201
        return EXIT_INTERRUPTED
    return EXIT_OK


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
