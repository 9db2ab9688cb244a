"""Line-oriented reads from an interactive input stream."""

from typing import TextIO

from quiz_run.core.errors import QuizError


class InputClosedError(QuizError):
    """Raised when the input stream is exhausted before a line is read."""

    def __init__(self) -> None:
        super().__init__("no input provided")


class InputReadError(QuizError):
    """Raised when the input stream fails for any reason other than end-of-file."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"error reading input: {reason}")


def read_line(stream: TextIO) -> str:
    """
    Read one line from stream and strip its trailing line terminator.

    Leading and interior whitespace is preserved.

    Raises:
        InputClosedError: if the stream is at end-of-file.
        InputReadError: if the stream is closed or the read fails.
    """
    try:
        line = stream.readline()
    except (OSError, ValueError) as exc:
        raise InputReadError(reason=str(exc)) from exc

    if line == "":
        raise InputClosedError()

    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
