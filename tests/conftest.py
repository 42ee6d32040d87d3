"""Shared pytest fixtures.

Keeps the on-disk cache inside the test's temp directory and stubs the FFmpeg
version probe so unit tests never spawn native processes.
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

# Duration in seconds used by synthetic sample videos in tests.
VIDEO_DURATION_SEC: float = 3.0


@pytest.fixture(autouse=True)
def _isolated_cache(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the runtime cache at a per-test directory."""
    monkeypatch.setattr("ffchain.models.context._CACHE_DIR", tmp_path / "cache")


@pytest.fixture(autouse=True)
def _tools_version_sanity(monkeypatch: pytest.MonkeyPatch) -> None:
    """Stub tool version checks to avoid flaky native calls in tests."""
    monkeypatch.setattr("ffchain.backend.executor.check_ffmpeg_version", lambda _ctx, _program: "test")


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory creating placeholder files under ``tmp_path``."""

    def factory(name: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\x00")
        return path

    return factory


@pytest.fixture
def input_file(make_file: Callable[[str], Path]) -> Path:
    """Placeholder primary input."""
    return make_file("input.mp4")


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Provide a small synthetic MP4 video for tests.

    Creates a 200x200 color clip with silent stereo audio using ffmpeg.
    """
    ffmpeg = shutil.which("ffmpeg")
    if ffmpeg is None:
        pytest.skip("ffmpeg not available in PATH")
    data_dir = tmp_path / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    out = data_dir / "video.mp4"
    subprocess.run(  # noqa: S603
        [
            ffmpeg,
            "-v",
            "error",
            "-f",
            "lavfi",
            "-i",
            f"color=s=200x200:d={VIDEO_DURATION_SEC}",
            "-f",
            "lavfi",
            "-i",
            f"anullsrc=r=48000:cl=stereo:d={VIDEO_DURATION_SEC}",
            "-shortest",
            "-c:v",
            "libx264",
            "-pix_fmt",
            "yuv420p",
            "-c:a",
            "aac",
            "-b:a",
            "128k",
            "-y",
            str(out),
        ],
        check=True,
    )
    return out


@pytest.fixture
def image_file(tmp_path: Path) -> Path:
    """Provide a small PNG image rendered by ffmpeg."""
    ffmpeg = shutil.which("ffmpeg")
    if ffmpeg is None:
        pytest.skip("ffmpeg not available in PATH")
    out = tmp_path / "data" / "logo.png"
    out.parent.mkdir(parents=True, exist_ok=True)
    subprocess.run(  # noqa: S603
        [ffmpeg, "-v", "error", "-f", "lavfi", "-i", "color=c=red:s=40x40", "-frames:v", "1", "-y", str(out)],
        check=True,
    )
    return out
