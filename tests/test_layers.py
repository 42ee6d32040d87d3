"""Tests for image overlays and text captions."""

from collections.abc import Callable
from pathlib import Path

import pytest

from ffchain.errors import InputFileError, InvalidParameterError
from ffchain.models import Position
from ffchain.operations import OverlayOperation, TextOperation, escape_text


@pytest.fixture
def logo(make_file: Callable[[str], Path]) -> Path:
    """Placeholder overlay source."""
    return make_file("logo.png")


def test_overlay_requires_existing_source(tmp_path: Path) -> None:
    """A missing source fails on construction."""
    with pytest.raises(InputFileError):
        OverlayOperation(source=tmp_path / "missing.png")


@pytest.mark.parametrize(
    ("kwargs", "param"),
    [
        ({"position": "topleft", "x": 1, "y": 1}, "position"),
        ({"x": 5}, "y"),
        ({"position": "middle"}, "position"),
        ({"opacity": 1.5}, "opacity"),
        ({"scale": 0}, "scale"),
        ({"scale": 0.5, "width": 100}, "scale"),
        ({"padding": -1}, "padding"),
        ({"start": 5, "end": 2}, "end"),
    ],
)
def test_overlay_rejects_invalid(logo: Path, kwargs: dict, param: str) -> None:
    """Report conflicting or out-of-range settings."""
    with pytest.raises(InvalidParameterError) as exc:
        OverlayOperation(source=logo, **kwargs)
    assert exc.value.param == param


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({}, "overlay=0:0"),
        ({"x": 5, "y": 7}, "overlay=5:7"),
        ({"position": "bottomright", "padding": 20}, "overlay=main_w-overlay_w-20:main_h-overlay_h-20"),
        ({"position": Position.TOP_LEFT, "start": 1, "end": 3}, "overlay=10:10:enable='between(t,1,3)'"),
        ({"start": "00:00:02"}, "overlay=0:0:enable='between(t,2,999999)'"),
    ],
)
def test_overlay_filter(logo: Path, kwargs: dict, expected: str) -> None:
    """Render the overlay position and visibility window."""
    assert OverlayOperation(source=logo, **kwargs).overlay_filter() == expected


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({}, None),
        ({"opacity": 1}, None),
        ({"width": 100}, "scale=100:-1"),
        ({"height": 50}, "scale=-1:50"),
        ({"width": 100, "height": 50}, "scale=100:50"),
        ({"scale": 0.5, "opacity": 0.25}, "scale=iw*0.5:ih*0.5,format=rgba,colorchannelmixer=aa=0.25"),
    ],
)
def test_overlay_preprocessing(logo: Path, kwargs: dict, expected: str | None) -> None:
    """Scale first, then fade."""
    assert OverlayOperation(source=logo, **kwargs).preprocess_filter() == expected


def test_escape_text() -> None:
    """Backslashes are escaped before colons and quotes."""
    assert escape_text("It's 5:00 \\o/") == "It\\'s 5\\:00 \\\\o/"


def test_text_filter_defaults_to_center() -> None:
    """Without placement the caption is centered."""
    assert TextOperation(text="Hi").filter_text() == (
        "drawtext=text='Hi':fontsize=24:fontcolor=white:x=(w-text_w)/2:y=(h-text_h)/2"
    )


def test_text_filter_all_options() -> None:
    """Font, box and window settings appear in a fixed order."""
    op = TextOperation(
        text="Hi",
        position="bottom",
        font_file=Path("/fonts/a.ttf"),
        font_size=32,
        font_color="yellow",
        background_color="black@0.5",
        box_border=5,
        start=1,
        end=2,
    )
    assert op.filter_text() == (
        "drawtext=text='Hi':fontfile='/fonts/a.ttf':fontsize=32:fontcolor=yellow"
        ":box=1:boxcolor=black@0.5:boxborderw=5"
        ":x=(w-text_w)/2:y=h-text_h-10:enable='between(t,1,2)'"
    )


def test_text_filter_explicit_coordinates() -> None:
    """Coordinates may be numbers or expressions."""
    op = TextOperation(text="Hi", x=10, y="h-50")
    assert op.filter_text().endswith(":x=10:y=h-50")


@pytest.mark.parametrize(
    ("kwargs", "param"),
    [
        ({"text": "  "}, "text"),
        ({"text": "a", "font_size": 0}, "font_size"),
        ({"text": "a", "position": "top", "y": 3}, "position"),
        ({"text": "a", "start": 3, "end": 3}, "end"),
    ],
)
def test_text_rejects_invalid(kwargs: dict, param: str) -> None:
    """Report the offending parameter."""
    with pytest.raises(InvalidParameterError) as exc:
        TextOperation(**kwargs)
    assert exc.value.param == param
