"""Base exception class for all quiz-run-specific errors."""


class QuizError(Exception):
    """Base class for all quiz-run errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
