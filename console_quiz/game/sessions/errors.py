class QuizSessionError(Exception):
    pass


class EmptyQuizError(QuizSessionError):
    pass


class QuizAlreadyRunError(QuizSessionError):
    pass


class QuizAbortedError(QuizSessionError):
    pass
