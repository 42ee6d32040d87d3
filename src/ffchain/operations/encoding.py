"""Encoder selection and rate control."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import field_validator

from ffchain.errors import InvalidParameterError
from ffchain.models import OperationTarget, Preset
from ffchain.tools.args import BITRATE, CODEC, CRF, PRESET, stream_option

from .base import OperationModel, require_range

if TYPE_CHECKING:
    from ffchain.backend.builder.command import FFmpegCommand

CRF_RANGE = (0, 51)
BITRATE_PATTERN = re.compile(r"^\d+(\.\d+)?[kKmMgG]?$")  #: e.g. ``800k``, ``5M``, ``128000``.


def check_bitrate(name: str, value: str | None) -> None:
    """Raise unless ``value`` looks like an FFmpeg bitrate."""
    if value is not None and not BITRATE_PATTERN.match(value):
        raise InvalidParameterError(name, f"Invalid bitrate: {value}. Expected e.g. '800k' or '5M'")


def parse_preset(value: Any) -> Any:
    """Turn a preset name into :class:`Preset` or raise a typed error."""
    if value is None or isinstance(value, Preset):
        return value
    try:
        return Preset(value)
    except ValueError:
        choices = ", ".join(p.value for p in Preset)
        raise InvalidParameterError("preset", f"Preset must be one of: {choices}") from None


class EncodingOptionsOperation(OperationModel):
    """Set codecs, bitrates, CRF and preset for the output."""

    target: ClassVar[OperationTarget] = OperationTarget.COMMAND

    codec: str | None = None
    video_bitrate: str | None = None
    crf: int | None = None
    preset: Preset | None = None
    audio_codec: str | None = None
    audio_bitrate: str | None = None

    @field_validator("preset", mode="before")
    @classmethod
    def validate_preset(cls, v: Any) -> Any:
        """Report unknown presets as :class:`InvalidParameterError`."""
        return parse_preset(v)

    def validate(self) -> None:  # type: ignore[override]
        if all(getattr(self, name) is None for name in type(self).model_fields):
            raise InvalidParameterError("options", "At least one encoding option is required")
        require_range("crf", self.crf, *CRF_RANGE)
        check_bitrate("video_bitrate", self.video_bitrate)
        check_bitrate("audio_bitrate", self.audio_bitrate)

    def apply_to(self, target: FFmpegCommand) -> None:
        if self.codec:
            target.add_argument(*stream_option(CODEC, "v"), self.codec)
        if self.video_bitrate:
            target.add_argument(*stream_option(BITRATE, "v"), self.video_bitrate)
        if self.crf is not None:
            target.add_argument(*CRF, self.crf)
        if self.preset is not None:
            target.add_argument(*PRESET, self.preset.value)
        if self.audio_codec:
            target.add_argument(*stream_option(CODEC, "a"), self.audio_codec)
        if self.audio_bitrate:
            target.add_argument(*stream_option(BITRATE, "a"), self.audio_bitrate)

    def describe(self) -> str:
        settings = self.model_dump(exclude_none=True, mode="json")
        return "Set encoding " + ", ".join(f"{k}={v}" for k, v in settings.items())


__all__ = ["BITRATE_PATTERN", "CRF_RANGE", "EncodingOptionsOperation", "check_bitrate", "parse_preset"]
