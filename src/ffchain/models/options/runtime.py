"""Runtime option models."""

from __future__ import annotations

from pathlib import Path

from cyclopts import Parameter
from pydantic import BaseModel, Field, field_validator

from ffchain.models.context import Verbosity

from .groups import RUNTIME_GROUP

VERBOSITY_HINT = "verbosity must be one of quiet, commands, output, or 0/1/2"


@Parameter(group=RUNTIME_GROUP)
class RuntimeOptions(BaseModel):
    """How the conversion is run and reported."""

    verbosity: Verbosity = Field(
        default=Verbosity.QUIET,
        description="Reporting level. commands: print the FFmpeg command; output: also stream FFmpeg output.",
    )
    dry_run: bool = Field(default=False, description="Print the FFmpeg command instead of running it.")
    ffmpeg: Path | None = Field(
        default=None,
        description="FFmpeg executable. [default: $FFCHAIN_FFMPEG or ffmpeg on PATH]",
    )

    @field_validator("verbosity", mode="before")
    @classmethod
    def parse_verbosity(cls, v: object) -> object:
        """Accept level names in any case as well as ``0``-``2``."""
        if isinstance(v, str):
            token = v.strip()
            member = Verbosity.__members__.get(token.upper())
            if member is not None:
                return member
            if not token.isdigit():
                raise ValueError(VERBOSITY_HINT)
            v = int(token)
        if isinstance(v, int) and v not in {level.value for level in Verbosity}:
            raise ValueError(VERBOSITY_HINT)
        return v


__all__ = ["RuntimeOptions"]
