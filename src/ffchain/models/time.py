"""Structured time values."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_FRAME_RATE = 25.0


class TimeCode(BaseModel):
    """A timestamp split into hours, minutes, seconds and frames.

    ``frames`` are converted to seconds with ``frame_rate``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hours: int = Field(0, ge=0)
    minutes: int = Field(0, ge=0)
    seconds: float = Field(ge=0)
    frames: int = Field(0, ge=0)
    frame_rate: float = Field(DEFAULT_FRAME_RATE, gt=0)

    @property
    def total_seconds(self) -> float:
        """Timestamp expressed in seconds."""
        return self.hours * 3600 + self.minutes * 60 + self.seconds + self.frames / self.frame_rate


TimeSpec = float | int | str | TimeCode

__all__ = ["DEFAULT_FRAME_RATE", "TimeCode", "TimeSpec"]
