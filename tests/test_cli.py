"""Tests for the CLI entry point and option-driven conversions."""

from collections.abc import Callable
from pathlib import Path

import pytest

from ffchain.backend import ffchain, run_conversion
from ffchain.cli import main
from ffchain.models.options import (
    ColorOptions,
    EncodingOptions,
    Options,
    OverlayOptions,
    RuntimeOptions,
    TextOptions,
    TimeOptions,
    VideoOptions,
)

DRY_RUN = RuntimeOptions(dry_run=True, ffmpeg=Path("ffmpeg"))


def _main(argv: list[str]) -> int | None:
    try:
        return main(argv)
    except SystemExit as e:
        return e.code  # type: ignore[return-value]


def test_cli_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Display help message without error."""
    code = _main(["--help"])
    out = capsys.readouterr().out
    assert code in (0, None)
    assert "ffchain" in out
    assert "--source" in out
    assert "status-callback" not in out


def test_cli_dry_run(input_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Print the command and the output path without running FFmpeg."""
    code = _main(["--source", str(input_file), "--video.width", "320", "--runtime.dry-run"])
    out = capsys.readouterr().out
    assert code in (0, None)
    assert "Command: " in out
    assert "scale=320:-2" in out
    assert str(input_file.with_name("input_edit.mp4")) in out


def test_run_conversion_dry_run(input_file: Path) -> None:
    """Return the full command line and a successful result."""
    messages: list[str] = []
    opts = Options(
        source=input_file,
        time=TimeOptions(start="1s", end="3s"),
        video=VideoOptions(crop="100:50", width=320, rotate=90),
        runtime=DRY_RUN,
    )
    command, result = run_conversion(opts, status_callback=messages.append)
    output = str(input_file.with_name("input_edit.mp4"))
    assert command == (
        "ffmpeg",
        "-y",
        "-i",
        str(input_file),
        "-ss",
        "00:00:01.000",
        "-to",
        "00:00:03.000",
        "-vf",
        "crop=100:50:0:0,scale=320:-2,transpose=1",
        output,
    )
    assert result.success
    assert messages[-1] == output


def test_run_conversion_layers(input_file: Path, make_file: Callable[[str], Path]) -> None:
    """Overlay and text compile into one filter graph."""
    logo = make_file("logo.png")
    opts = Options(
        source=input_file,
        overlay=OverlayOptions(image=logo, position="topright"),
        text=TextOptions(text="Hi", start="1", end="2"),
        color=ColorOptions(brightness=0.2),
        encoding=EncodingOptions(crf=20),
        runtime=DRY_RUN,
    )
    command, _ = run_conversion(opts, status_callback=lambda _msg: None)
    graph = command[command.index("-filter_complex") + 1]
    assert graph == (
        "[0:v][1:v]overlay=main_w-overlay_w-10:10[out0];"
        "[out0]drawtext=text='Hi':fontsize=24:fontcolor=white:x=(w-text_w)/2:y=(h-text_h)/2"
        ":enable='between(t,1,2)'[out1]"
    )
    assert command[command.index("-filter:v") + 1] == "eq=brightness=0.2"
    assert command[command.index("-crf") + 1] == "20"
    assert command[-5:-1] == ("-map", "[out1]", "-map", "0:a?")


def test_ffchain_reports_errors(input_file: Path, tmp_path: Path) -> None:
    """Failures are reported and turned into exit code 1."""
    messages: list[str] = []
    opts = Options(source=input_file, overlay=OverlayOptions(image=tmp_path / "missing.png"), runtime=DRY_RUN)
    assert ffchain(opts, status_callback=messages.append) == 1
    assert messages == [f"Conversion failed: Error with input file at {tmp_path / 'missing.png'}: File does not exist"]


def test_ffchain_success(input_file: Path) -> None:
    """A successful run exits with 0."""
    messages: list[str] = []
    opts = Options(source=input_file, video=VideoOptions(speed=2), runtime=DRY_RUN)
    assert ffchain(opts, status_callback=messages.append) == 0
    assert "setpts=PTS/2" in messages[0]
