"""Error types raised by dataset infrastructure."""

from quiz_run.core.errors import QuizError


class DatasetLoadError(QuizError):
    """Raised when a CSV dataset cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to load dataset: {reason}")


class DatasetOpenError(DatasetLoadError):
    """Raised when the dataset file cannot be opened or read."""


class DatasetParseError(DatasetLoadError):
    """Raised when the dataset content is not a well-formed question table."""
