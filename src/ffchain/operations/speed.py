"""Change playback speed of video and audio together."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, ClassVar

from ffchain.errors import InvalidParameterError
from ffchain.models import OperationTarget
from ffchain.tools.args import AUDIO_FILTER

from .base import OperationModel

if TYPE_CHECKING:
    from ffchain.backend.builder.command import FFmpegCommand

ATEMPO_MIN = 0.5  #: Lowest ratio a single ``atempo`` accepts.
ATEMPO_MAX = 2.0  #: Highest ratio a single ``atempo`` accepts.


def format_ratio(value: float) -> str:
    """Render a speed ratio with six significant digits, e.g. ``1e-05`` or ``1.75``."""
    return f"{value:.6g}"


def atempo_stages(factor: float) -> list[float]:
    """Split ``factor`` into ``atempo`` ratios within ``[0.5, 2.0]``.

    The product of the returned stages equals ``factor``. ``1.0`` needs no
    stage at all.

    >>> atempo_stages(3.5)
    [2.0, 1.75]
    >>> atempo_stages(0.25)
    [0.5, 0.5]
    """
    if factor <= 0 or not math.isfinite(factor):
        raise InvalidParameterError("factor", f"Speed factor must be a positive number, got {factor}")
    stages: list[float] = []
    remaining = float(factor)
    while remaining > ATEMPO_MAX:
        stages.append(ATEMPO_MAX)
        remaining /= ATEMPO_MAX
    while remaining < ATEMPO_MIN:
        stages.append(ATEMPO_MIN)
        remaining /= ATEMPO_MIN
    if not math.isclose(remaining, 1.0):
        stages.append(remaining)
    return stages


class SpeedOperation(OperationModel):
    """Play back ``factor`` times faster (``factor < 1`` slows down)."""

    target: ClassVar[OperationTarget] = OperationTarget.COMMAND

    factor: float

    def validate(self) -> None:  # type: ignore[override]
        if self.factor <= 0 or not math.isfinite(self.factor):
            raise InvalidParameterError("factor", f"Speed factor must be greater than 0, got {self.factor}")

    def video_filter(self) -> str:
        return f"PTS/{format_ratio(self.factor)}"

    def audio_filter(self) -> str | None:
        """Return the ``atempo`` chain or ``None`` when no change is needed."""
        stages = atempo_stages(self.factor)
        if not stages:
            return None
        return ",".join(f"atempo={format_ratio(stage)}" for stage in stages)

    def apply_to(self, target: FFmpegCommand) -> None:
        target.add_filter("setpts", self.video_filter())
        audio = self.audio_filter()
        if audio is not None:
            target.add_argument(*AUDIO_FILTER, audio)

    def describe(self) -> str:
        return f"Change speed by {format_ratio(self.factor)}x"


__all__ = ["ATEMPO_MAX", "ATEMPO_MIN", "SpeedOperation", "atempo_stages", "format_ratio"]
