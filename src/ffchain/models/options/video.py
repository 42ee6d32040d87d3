"""Video geometry, speed and color option models."""

from __future__ import annotations

import re

from cyclopts import Parameter
from pydantic import BaseModel, Field, field_validator

from .groups import COLOR_GROUP, VIDEO_GROUP

CROP_PATTERN = re.compile(r"^(\d+):(\d+)(?::(\d+):(\d+))?$")  #: ``W:H[:X:Y]``


@Parameter(group=VIDEO_GROUP)
class VideoOptions(BaseModel):
    """Options that reshape or retime the video."""

    width: int | None = Field(None, gt=0, description="Output width in pixels.")
    height: int | None = Field(None, gt=0, description="Output height in pixels.")
    keep_aspect: bool = Field(default=True, description="Fit inside width x height keeping the aspect ratio.")
    crop: str | None = Field(None, description="Crop window as 'W:H' or 'W:H:X:Y'.")
    rotate: float | None = Field(None, description="Clockwise rotation in degrees.")
    speed: float | None = Field(None, gt=0, description="Playback speed factor, e.g. 2 or 0.5.")

    @field_validator("crop")
    @classmethod
    def validate_crop(cls, v: str | None) -> str | None:
        """Ensure the crop window is well formed."""
        if v is not None and not CROP_PATTERN.match(v):
            raise ValueError(f"Invalid crop: {v}. Expected 'W:H' or 'W:H:X:Y'")
        return v

    @property
    def crop_box(self) -> tuple[int, int, int, int] | None:
        """Crop window as ``(width, height, x, y)``."""
        if self.crop is None:
            return None
        m = CROP_PATTERN.match(self.crop)
        if m is None:  # pragma: no cover - rejected by the validator
            return None
        w, h, x, y = m.groups()
        return int(w), int(h), int(x or 0), int(y or 0)

    @property
    def resizes(self) -> bool:
        return self.width is not None or self.height is not None


@Parameter(group=COLOR_GROUP)
class ColorOptions(BaseModel):
    """Color adjustment options."""

    brightness: float | None = Field(None, description="Brightness offset between -1 and 1.")
    contrast: float | None = Field(None, description="Contrast between -2 and 2.")
    saturation: float | None = Field(None, description="Saturation between 0 and 3.")

    @property
    def is_set(self) -> bool:
        return any(v is not None for v in (self.brightness, self.contrast, self.saturation))


__all__ = ["ColorOptions", "VideoOptions"]
