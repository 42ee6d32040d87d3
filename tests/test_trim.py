"""Tests for trimming."""

import pytest

from ffchain.backend.builder import FFmpegCommand
from ffchain.errors import InvalidParameterError
from ffchain.operations import TrimOperation


def _args(**kwargs: object) -> tuple[str, ...]:
    cmd = FFmpegCommand("ffmpeg")
    TrimOperation(**kwargs).apply_to(cmd)  # type: ignore[arg-type]
    return cmd.args


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({"start": 5, "end": 10}, ("-ss", "00:00:05.000", "-to", "00:00:10.000")),
        ({"start": "1:00", "duration": 30}, ("-ss", "00:01:00.000", "-t", "00:00:30.000")),
        ({"end": "00:00:02.5"}, ("-to", "00:00:02.500")),
        ({"duration": 4}, ("-t", "00:00:04.000")),
        ({"start": 1, "end": 3, "duration": 2}, ("-ss", "00:00:01.000", "-to", "00:00:03.000")),
    ],
)
def test_trim_arguments(kwargs: dict, expected: tuple[str, ...]) -> None:
    """Emit ``-ss`` then ``-to``, falling back to ``-t``."""
    assert _args(**kwargs) == expected


@pytest.mark.parametrize(
    ("kwargs", "param"),
    [
        ({}, "trim"),
        ({"start": 10, "end": 5}, "end"),
        ({"start": 5, "end": 5}, "end"),
        ({"duration": 0}, "duration"),
        ({"start": 1, "end": 3, "duration": 5}, "duration"),
        ({"start": "bogus"}, "time"),
    ],
)
def test_trim_rejects_invalid_ranges(kwargs: dict, param: str) -> None:
    """Reject empty, reversed and inconsistent ranges."""
    with pytest.raises(InvalidParameterError) as exc:
        TrimOperation(**kwargs)
    assert exc.value.param == param


def test_trim_describe() -> None:
    """Summaries name the set bounds."""
    assert TrimOperation(start=1, end=2).describe() == "Trim from 00:00:01.000 to 00:00:02.000"
