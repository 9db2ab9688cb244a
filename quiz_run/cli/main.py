"""CLI entrypoint for quiz-run — typer app that runs one interactive quiz session."""

import logging
import sys
from pathlib import Path

import structlog
import typer

from quiz_run.config.domain.config import QuizConfig
from quiz_run.config.infrastructure.observer import StructlogConfigObserver
from quiz_run.config.infrastructure.yaml_loader import YamlConfigLoader
from quiz_run.core.errors import QuizError
from quiz_run.dataset.domain.loader import DatasetLoader
from quiz_run.dataset.infrastructure.csv_loader import CsvDatasetLoader
from quiz_run.dataset.infrastructure.observer import StructlogDatasetObserver
from quiz_run.path.domain.resolver import PathResolver
from quiz_run.path.infrastructure.observer import StructlogPathObserver
from quiz_run.path.infrastructure.prompt_resolver import PromptPathResolver
from quiz_run.session.application.runner import SessionRunner
from quiz_run.session.infrastructure.observer import StructlogSessionObserver

app = typer.Typer(add_completion=False)

_LOG_FORMATS = ("console", "json")
_LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog to write to stderr, keeping stdout for the quiz transcript."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LOG_LEVELS[log_level]),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _validate_options(log_format: str, log_level: str) -> None:
    if log_format not in _LOG_FORMATS:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)
    if log_level not in _LOG_LEVELS:
        levels = ", ".join(f"'{name}'" for name in _LOG_LEVELS)
        typer.echo(
            f"Invalid log level: {log_level!r}. Must be one of {levels}.", err=True
        )
        raise typer.Exit(code=1)


def _load_config(config_path: Path | None) -> QuizConfig:
    if config_path is None:
        return QuizConfig()
    return YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)


@app.command()
def run(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Optional YAML file overriding the default dataset path",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    log_level: str = typer.Option(
        "error",
        "--log-level",
        help="Minimum log level written to stderr: debug, info, warning, error",
    ),
) -> None:
    """Run an interactive quiz from a CSV file of questions and answers."""
    _validate_options(log_format=log_format, log_level=log_level)
    _configure_structlog(log_format=log_format, log_level=log_level)

    try:
        config = _load_config(config_path=config_path)

        resolver: PathResolver = PromptPathResolver(observer=StructlogPathObserver())
        file_path = resolver.resolve(default_path=config.default_path, stdin=sys.stdin)
        typer.echo(f"Using filepath: {file_path}")

        loader: DatasetLoader = CsvDatasetLoader(observer=StructlogDatasetObserver())
        dataset = loader.load(path=file_path)
        typer.echo(f"Number of records: {len(dataset.records)}")

        session_runner = SessionRunner(observer=StructlogSessionObserver())
        session_runner.run(records=dataset.records, stdin=sys.stdin)

    except KeyboardInterrupt:
        typer.echo("Quiz interrupted.", err=True)
        sys.exit(1)
    except QuizError as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(1)


if __name__ == "__main__":
    app()
