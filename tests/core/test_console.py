"""Tests for line reading from an interactive input stream."""

import io

import pytest

from quiz_run.core.console import InputClosedError, InputReadError, read_line


class BrokenStream(io.StringIO):
    """Stream whose reads always fail with an OSError."""

    def readline(self, size: int | None = -1) -> str:
        raise OSError("device unplugged")


class TestReadLine:
    """read_line strips line terminators only and maps stream failures to errors."""

    def test_strips_trailing_newline(self) -> None:
        assert read_line(io.StringIO("10\n")) == "10"

    def test_strips_trailing_crlf(self) -> None:
        assert read_line(io.StringIO("10\r\n")) == "10"

    def test_preserves_leading_and_interior_whitespace(self) -> None:
        assert read_line(io.StringIO("  a  b \n")) == "  a  b "

    def test_last_line_without_newline_is_returned(self) -> None:
        assert read_line(io.StringIO("last")) == "last"

    def test_blank_line_is_empty_string(self) -> None:
        assert read_line(io.StringIO("\n")) == ""

    def test_reads_one_line_at_a_time(self) -> None:
        stream = io.StringIO("first\nsecond\n")
        assert read_line(stream) == "first"
        assert read_line(stream) == "second"

    def test_end_of_file_raises_input_closed(self) -> None:
        with pytest.raises(InputClosedError):
            read_line(io.StringIO(""))

    def test_closed_stream_raises_input_read_error(self) -> None:
        stream = io.StringIO("10\n")
        stream.close()
        with pytest.raises(InputReadError):
            read_line(stream)

    def test_os_error_raises_input_read_error(self) -> None:
        with pytest.raises(InputReadError) as exc_info:
            read_line(BrokenStream())

        assert "device unplugged" in str(exc_info.value)
