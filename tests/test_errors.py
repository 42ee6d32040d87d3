"""Tests for error types."""

import pytest

from ffchain.errors import (
    FFChainError,
    FFmpegExecutionError,
    FFmpegNotFoundError,
    InputFileError,
    InvalidParameterError,
    MissingParameterError,
    parse_ffmpeg_error,
)


@pytest.mark.parametrize(
    ("stderr", "expected"),
    [
        ("frame=1\n[in] Error opening file\nmore", "[in] Error opening file"),
        ("\n  first line  \nsecond", "first line"),
        ("", "Unknown FFmpeg error"),
    ],
)
def test_parse_ffmpeg_error(stderr: str, expected: str) -> None:
    """Prefer a line mentioning an error, then the first line."""
    assert parse_ffmpeg_error(stderr) == expected


def test_error_messages() -> None:
    """Messages carry the offending value."""
    assert str(InvalidParameterError("crf", "too high")) == "Invalid parameter 'crf': too high"
    assert str(MissingParameterError("output")) == "Missing required parameter: output"
    assert str(InputFileError("a.mp4")) == "Error with input file at a.mp4"
    assert str(FFmpegNotFoundError("/x/ffmpeg")) == "FFmpeg executable not found at /x/ffmpeg"
    assert "PATH" in str(FFmpegNotFoundError())


def test_execution_error_keeps_details() -> None:
    """Keep the command and the full error stream."""
    err = FFmpegExecutionError("ffmpeg -i a b", "line\nerror: bad\n")
    assert err.command == "ffmpeg -i a b"
    assert err.stderr == "line\nerror: bad\n"
    assert str(err) == "FFmpeg command execution failed: error: bad"


def test_errors_share_a_base() -> None:
    """Every error derives from the package base but not from ValueError."""
    errors = (FFmpegExecutionError, FFmpegNotFoundError, InputFileError, InvalidParameterError, MissingParameterError)
    for cls in errors:
        assert issubclass(cls, FFChainError)
        assert not issubclass(cls, ValueError)
