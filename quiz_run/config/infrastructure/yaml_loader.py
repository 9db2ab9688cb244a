"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from quiz_run.config.domain.config import QuizConfig
from quiz_run.config.domain.observer import ConfigObserver
from quiz_run.config.infrastructure.errors import ConfigLoadError, ConfigValidationError


class YamlConfigLoader:
    """Loads, validates, and returns a QuizConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> QuizConfig:
        """
        Load, validate, and return a QuizConfig from a YAML file.

        An empty file yields the default configuration.

        Raises:
            ConfigLoadError: if the file does not exist or cannot be read.
            ConfigValidationError: if the file is not valid YAML, is not a mapping,
                or violates the QuizConfig schema.
        """
        raw = _parse_yaml(path=path)
        cfg = _build_config(raw=raw)
        self._observer.config_loaded(default_path=cfg.default_path)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc


def _build_config(raw: Any) -> QuizConfig:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"expected a mapping at the top level, got {type(raw).__name__}"
        )
    try:
        return QuizConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
