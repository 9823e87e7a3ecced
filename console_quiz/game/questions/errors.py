class QuestionError(Exception):
    pass


class InvalidQuestionError(QuestionError):
    pass
