"""Tests for speed, color and encoding operations."""

import math

import pytest

from ffchain.backend.builder import FFmpegCommand
from ffchain.errors import InvalidParameterError
from ffchain.models import Preset
from ffchain.operations import AdjustColorOperation, EncodingOptionsOperation, SpeedOperation, atempo_stages


@pytest.mark.parametrize(
    ("factor", "expected"),
    [
        (4, [2.0, 2.0]),
        (0.25, [0.5, 0.5]),
        (3.5, [2.0, 1.75]),
        (0.5, [0.5]),
        (1.5, [1.5]),
        (2.0, [2.0]),
        (2.1, [2.0, 1.05]),
        (1, []),
    ],
)
def test_atempo_stages(factor: float, expected: list[float]) -> None:
    """Decompose factors into ratios accepted by a single ``atempo``."""
    stages = atempo_stages(factor)
    assert stages == pytest.approx(expected)
    assert all(0.5 <= s <= 2.0 for s in stages)
    assert math.prod(stages) == pytest.approx(factor)


def test_speed_arguments() -> None:
    """Video and audio speed change together."""
    cmd = FFmpegCommand("ffmpeg")
    SpeedOperation(factor=3.5).apply_to(cmd)
    assert cmd.args == ("-filter:v", "setpts=PTS/3.5", "-filter:a", "atempo=2,atempo=1.75")


def test_speed_keeps_tiny_factors() -> None:
    """Very small factors are not rounded away."""
    op = SpeedOperation(factor=0.00001)
    assert op.video_filter() == "PTS/1e-05"
    audio = op.audio_filter()
    assert audio is not None
    stages = [float(stage.removeprefix("atempo=")) for stage in audio.split(",")]
    assert math.prod(stages) == pytest.approx(0.00001, rel=1e-5)


def test_speed_unity_has_no_audio_filter() -> None:
    """A factor of one leaves audio alone."""
    cmd = FFmpegCommand("ffmpeg")
    SpeedOperation(factor=1).apply_to(cmd)
    assert cmd.args == ("-filter:v", "setpts=PTS/1")


@pytest.mark.parametrize("factor", [0, -2, float("nan")])
def test_speed_rejects_invalid(factor: float) -> None:
    """Factor must be a positive number."""
    with pytest.raises(InvalidParameterError):
        SpeedOperation(factor=factor)


def test_adjust_color_filter() -> None:
    """Only the set fields are emitted."""
    cmd = FFmpegCommand("ffmpeg")
    AdjustColorOperation(brightness=0.1, saturation=1.5).apply_to(cmd)
    assert cmd.args == ("-filter:v", "eq=brightness=0.1:saturation=1.5")


@pytest.mark.parametrize(
    "kwargs",
    [{}, {"brightness": 1.5}, {"contrast": -3}, {"saturation": 4}],
)
def test_adjust_color_rejects_invalid(kwargs: dict) -> None:
    """Require one field within its range."""
    with pytest.raises(InvalidParameterError):
        AdjustColorOperation(**kwargs)


def test_encoding_arguments_order() -> None:
    """Encoding flags follow a fixed order."""
    cmd = FFmpegCommand("ffmpeg")
    EncodingOptionsOperation(
        codec="libx264",
        video_bitrate="2M",
        crf=23,
        preset="fast",
        audio_codec="aac",
        audio_bitrate="128k",
    ).apply_to(cmd)
    assert cmd.args == (
        "-c:v",
        "libx264",
        "-b:v",
        "2M",
        "-crf",
        "23",
        "-preset",
        "fast",
        "-c:a",
        "aac",
        "-b:a",
        "128k",
    )


def test_encoding_parses_preset() -> None:
    """Preset names become enum members."""
    assert EncodingOptionsOperation(preset="veryslow").preset is Preset.VERYSLOW


@pytest.mark.parametrize(
    ("kwargs", "param"),
    [
        ({}, "options"),
        ({"crf": 52}, "crf"),
        ({"preset": "warp"}, "preset"),
        ({"video_bitrate": "lots"}, "video_bitrate"),
        ({"audio_bitrate": "128 k"}, "audio_bitrate"),
    ],
)
def test_encoding_rejects_invalid(kwargs: dict, param: str) -> None:
    """Report the offending parameter."""
    with pytest.raises(InvalidParameterError) as exc:
        EncodingOptionsOperation(**kwargs)
    assert exc.value.param == param
