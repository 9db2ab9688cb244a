"""Interactive path resolver — asks the user for a dataset path on the terminal."""

import os
from typing import TextIO

import typer

from quiz_run.core.console import InputClosedError, InputReadError, read_line
from quiz_run.path.domain.observer import PathObserver
from quiz_run.path.infrastructure.errors import (
    PathNoInputError,
    PathNotFoundError,
    PathReadError,
    PathResolutionError,
)


class PromptPathResolver:
    """Prompts for a dataset path, falling back to the configured default."""

    def __init__(self, observer: PathObserver) -> None:
        self._observer = observer

    def resolve(self, default_path: str, stdin: TextIO) -> str:
        """
        Prompt for a file path and return the path to use.

        An empty answer returns default_path unmodified, without checking that it
        exists. Anything else is trimmed, made absolute, and must exist.

        Raises:
            PathNoInputError: if stdin is exhausted before a line is read.
            PathReadError: if reading from stdin fails.
            PathNotFoundError: if the supplied path does not exist.
        """
        self._observer.path_prompted(default_path=default_path)
        typer.echo(f"Enter file path [{default_path}]: ", nl=False)

        try:
            raw = self._read_path_line(stdin=stdin)
            path = self._expand(raw=raw.strip(), default_path=default_path)
        except PathResolutionError as exc:
            self._observer.path_resolution_failed(reason=exc.reason)
            raise

        return path

    def _read_path_line(self, stdin: TextIO) -> str:
        try:
            return read_line(stdin)
        except InputClosedError as exc:
            raise PathNoInputError() from exc
        except InputReadError as exc:
            raise PathReadError(reason=str(exc)) from exc

    def _expand(self, raw: str, default_path: str) -> str:
        if raw == "":
            self._observer.path_default_used(path=default_path)
            return default_path

        expanded = os.path.abspath(raw)
        if not os.path.exists(expanded):
            raise PathNotFoundError(path=expanded)

        self._observer.path_resolved(path=expanded)
        return expanded
