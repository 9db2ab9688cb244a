"""Error types raised by config infrastructure."""

from pathlib import Path

from quiz_run.core.errors import QuizError


class ConfigValidationError(QuizError):
    """Raised when the loaded config fails YAML parsing or schema validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(QuizError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to load config: file not found: {path}")
