"""Tests for resize, crop and rotate."""

import pytest

from ffchain.backend.builder import FFmpegCommandBuilder
from ffchain.errors import InvalidParameterError
from ffchain.operations import CropOperation, ResizeOperation, RotateOperation


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({"width": 640}, "scale=640:-2"),
        ({"height": 360}, "scale=-2:360"),
        ({"width": 640, "height": 360}, "scale=640:360:force_original_aspect_ratio=decrease"),
        ({"width": 640, "height": 360, "maintain_aspect_ratio": False}, "scale=640:360"),
    ],
)
def test_resize_filter(kwargs: dict, expected: str) -> None:
    """Pick the scale form from the given dimensions."""
    assert ResizeOperation(**kwargs).filter_text() == expected


@pytest.mark.parametrize("kwargs", [{}, {"width": 0}, {"height": -10}])
def test_resize_rejects_invalid(kwargs: dict) -> None:
    """Require a positive dimension."""
    with pytest.raises(InvalidParameterError):
        ResizeOperation(**kwargs)


def test_crop_filter() -> None:
    """Offsets default to the top-left corner."""
    assert CropOperation(width=100, height=50).filter_text() == "crop=100:50:0:0"
    assert CropOperation(width=100, height=50, x=10, y=20).filter_text() == "crop=100:50:10:20"


@pytest.mark.parametrize("kwargs", [{"width": 0, "height": 10}, {"width": 10, "height": 10, "x": -1}])
def test_crop_rejects_invalid(kwargs: dict) -> None:
    """Reject empty windows and negative offsets."""
    with pytest.raises(InvalidParameterError):
        CropOperation(**kwargs)


@pytest.mark.parametrize(
    ("degrees", "expected"),
    [
        (90, "transpose=1"),
        (180, "transpose=2,transpose=2"),
        (270, "transpose=2"),
        (-90, "transpose=2"),
        (450, "transpose=1"),
        (45, "rotate=0.785398"),
        (0, None),
        (360, None),
    ],
)
def test_rotate_filter(degrees: float, expected: str | None) -> None:
    """Quarter turns use transpose; other angles use radians."""
    assert RotateOperation(degrees=degrees).filter_text() == expected


def test_rotate_full_turn_adds_nothing() -> None:
    """A full turn leaves the builder untouched."""
    builder = FFmpegCommandBuilder("ffmpeg")
    builder.add_rotate_operation(720)
    assert builder.filters == ()


def test_rotate_rejects_non_finite() -> None:
    """Reject infinite angles."""
    with pytest.raises(InvalidParameterError):
        RotateOperation(degrees=float("inf"))
