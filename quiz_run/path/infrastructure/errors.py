"""Error types raised by path infrastructure."""

from quiz_run.core.errors import QuizError


class PathResolutionError(QuizError):
    """Base class for failures to obtain a usable dataset path."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to resolve file path: {reason}")


class PathNoInputError(PathResolutionError):
    """Raised when the input stream ends before a path line is read."""

    def __init__(self) -> None:
        super().__init__("no input provided")


class PathReadError(PathResolutionError):
    """Raised when reading the path line fails for any other reason."""


class PathNotFoundError(PathResolutionError):
    """Raised when the user-supplied path does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"file does not exist: {path}")
