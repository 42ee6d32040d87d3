"""Encoding and concatenation option models."""

from __future__ import annotations

from pathlib import Path

from cyclopts import Parameter
from pydantic import BaseModel, Field

from ffchain.models.types import ConcatStrategy, Preset

from .defaults import DEFAULT_CONCAT_STRATEGY
from .groups import CONCAT_GROUP, ENCODING_GROUP


@Parameter(group=ENCODING_GROUP)
class EncodingOptions(BaseModel):
    """Encoder selection and rate control."""

    codec: str | None = Field(None, description="Video encoder, e.g. libx264.")
    video_bitrate: str | None = Field(None, description="Video bitrate, e.g. 2M.")
    crf: int | None = Field(None, description="Constant rate factor between 0 and 51.")
    preset: Preset | None = Field(None, description="Encoder speed preset.")
    audio_codec: str | None = Field(None, description="Audio encoder, e.g. aac.")
    audio_bitrate: str | None = Field(None, description="Audio bitrate, e.g. 128k.")

    def settings(self) -> dict[str, object]:
        """Options that were given, keyed by encoding operation field."""
        return self.model_dump(exclude_none=True)


@Parameter(group=CONCAT_GROUP)
class ConcatOptions(BaseModel):
    """Append further inputs after the source."""

    append: list[Path] = Field(default_factory=list, description="Inputs joined after the source, in order.")
    strategy: ConcatStrategy = Field(
        DEFAULT_CONCAT_STRATEGY,
        description=(
            "'filter' re-encodes through the concat filter; 'demuxer' copies streams from a list file. "
            f"[default: {DEFAULT_CONCAT_STRATEGY.value}]"
        ),
    )
    video_only: bool = Field(default=False, description="Drop audio when joining with the concat filter.")


__all__ = ["ConcatOptions", "EncodingOptions"]
