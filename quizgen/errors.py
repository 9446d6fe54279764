"""Exceptions raised by the quiz engine and its CSV loader."""


class QuizError(Exception):
    """Base class for all quizgen errors."""


class EmptyInputError(QuizError):
    """The question source contained zero rows, so there are no categories."""


class SourceLoadError(QuizError):
    """The CSV source could not be read or parsed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not load questions from {source}: {reason}")


class InvalidIndexError(QuizError, IndexError):
    """A question index is outside the current exam's question sequence."""

    def __init__(self, question_index: int, total: int):
        self.question_index = question_index
        self.total = total
        super().__init__(f"Question index {question_index} out of range (exam has {total} questions)")


class InactiveSessionError(QuizError):
    """An answer was recorded while the session was not active."""
