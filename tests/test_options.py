"""Tests for command-line option models."""

from collections.abc import Callable
from pathlib import Path

import pytest

from ffchain.models import ConcatStrategy, Container, Preset, Verbosity
from ffchain.models.options import (
    ConcatOptions,
    EncodingOptions,
    Options,
    OverlayOptions,
    RuntimeOptions,
    TextOptions,
    TimeOptions,
    VideoOptions,
)


def test_default_output_path(input_file: Path) -> None:
    """Write beside the source with the edit suffix."""
    assert Options(source=input_file).output_path == input_file.with_name("input_edit.mp4")
    assert Options(source=input_file, container="mkv").output_path == input_file.with_name("input_edit.mkv")


def test_output_extension_sets_container(input_file: Path, tmp_path: Path) -> None:
    """A known output extension fills in the container."""
    opts = Options(source=input_file, output=tmp_path / "clip.MOV")
    assert opts.container is Container.MOV
    assert opts.output_path == tmp_path / "clip.MOV"


def test_output_extension_conflict(input_file: Path, tmp_path: Path) -> None:
    """Reject an extension contradicting the container."""
    with pytest.raises(ValueError, match="conflicts"):
        Options(source=input_file, output=tmp_path / "clip.mov", container="mkv")


def test_source_must_exist(tmp_path: Path) -> None:
    """Reject a missing source."""
    with pytest.raises(ValueError):
        Options(source=tmp_path / "missing.mp4")


def test_time_options() -> None:
    """Parse human-friendly timestamps."""
    time = TimeOptions(start="1m20s", duration="90s")
    assert time.is_set
    assert time.start_seconds == 80.0
    assert time.duration_seconds == 90.0
    assert time.end_seconds is None
    assert not TimeOptions().is_set


@pytest.mark.parametrize("kwargs", [{"start": "notatime"}, {"end": "00:00:05", "duration": "2s"}])
def test_time_options_rejects_invalid(kwargs: dict) -> None:
    """Reject unparseable values and end combined with duration."""
    with pytest.raises(ValueError):
        TimeOptions(**kwargs)


def test_crop_box() -> None:
    """Offsets default to zero."""
    assert VideoOptions(crop="100:50").crop_box == (100, 50, 0, 0)
    assert VideoOptions(crop="100:50:4:8").crop_box == (100, 50, 4, 8)
    assert VideoOptions().crop_box is None
    with pytest.raises(ValueError):
        VideoOptions(crop="100x50")


def test_layer_settings_require_content() -> None:
    """Styling without text or image is an error."""
    with pytest.raises(ValueError):
        TextOptions(position="top")
    with pytest.raises(ValueError):
        OverlayOptions(opacity=0.5)
    assert TextOptions(text="Hi", position="top").text == "Hi"


def test_concat_options(input_file: Path, make_file: Callable[[str], Path], tmp_path: Path) -> None:
    """Appended files must exist; the demuxer cannot drop audio."""
    extra = make_file("extra.mp4")
    opts = Options(source=input_file, concat=ConcatOptions(append=[extra]))
    assert opts.concat.append == [extra]
    with pytest.raises(ValueError):
        Options(source=input_file, concat=ConcatOptions(append=[tmp_path / "missing.mp4"]))
    with pytest.raises(ValueError):
        Options(
            source=input_file,
            concat=ConcatOptions(append=[extra], strategy=ConcatStrategy.DEMUXER, video_only=True),
        )


def test_encoding_settings() -> None:
    """Only the given settings are forwarded."""
    assert EncodingOptions(crf=20, preset="fast").settings() == {"crf": 20, "preset": Preset.FAST}
    assert EncodingOptions().settings() == {}


@pytest.mark.parametrize(
    ("value", "expected"),
    [("commands", Verbosity.COMMANDS), ("OUTPUT", Verbosity.OUTPUT), ("2", Verbosity.OUTPUT), (0, Verbosity.QUIET)],
)
def test_verbosity_parsing(value: object, expected: Verbosity) -> None:
    """Accept names and numbers."""
    assert RuntimeOptions(verbosity=value).verbosity is expected


def test_verbosity_rejects_unknown() -> None:
    """Reject unknown levels."""
    with pytest.raises(ValueError):
        RuntimeOptions(verbosity="loud")
