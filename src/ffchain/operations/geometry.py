"""Resize, crop and rotate operations rendered as simple video filters."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, ClassVar

from ffchain.errors import InvalidParameterError
from ffchain.models import OperationTarget
from ffchain.tools import format_number

from .base import OperationModel, require_non_negative, require_positive

if TYPE_CHECKING:
    from ffchain.backend.builder.command_builder import FFmpegCommandBuilder

#: Keep the other dimension proportional and divisible by two.
AUTO_DIMENSION = -2

# Quarter turns expressed with lossless ``transpose`` steps.
_TRANSPOSE: dict[int, str] = {
    90: "transpose=1",
    180: "transpose=2,transpose=2",
    270: "transpose=2",
}


class ResizeOperation(OperationModel):
    """Scale the video to ``width`` x ``height``."""

    target: ClassVar[OperationTarget] = OperationTarget.BUILDER

    width: int | None = None
    height: int | None = None
    maintain_aspect_ratio: bool = True

    def validate(self) -> None:  # type: ignore[override]
        if self.width is None and self.height is None:
            raise InvalidParameterError("resize", "Width or height is required")
        require_positive("width", self.width)
        require_positive("height", self.height)

    def filter_text(self) -> str:
        if self.height is None:
            return f"scale={self.width}:{AUTO_DIMENSION}"
        if self.width is None:
            return f"scale={AUTO_DIMENSION}:{self.height}"
        if self.maintain_aspect_ratio:
            return f"scale={self.width}:{self.height}:force_original_aspect_ratio=decrease"
        return f"scale={self.width}:{self.height}"

    def apply_to(self, target: FFmpegCommandBuilder) -> None:
        target.add_simple_filter(self.filter_text())

    def describe(self) -> str:
        return f"Resize to {self.width or 'auto'}x{self.height or 'auto'}"


class CropOperation(OperationModel):
    """Cut a ``width`` x ``height`` window at ``x``, ``y``."""

    target: ClassVar[OperationTarget] = OperationTarget.BUILDER

    width: int
    height: int
    x: int = 0
    y: int = 0

    def validate(self) -> None:  # type: ignore[override]
        require_positive("width", self.width)
        require_positive("height", self.height)
        require_non_negative("x", self.x)
        require_non_negative("y", self.y)

    def filter_text(self) -> str:
        return f"crop={self.width}:{self.height}:{self.x}:{self.y}"

    def apply_to(self, target: FFmpegCommandBuilder) -> None:
        target.add_simple_filter(self.filter_text())

    def describe(self) -> str:
        return f"Crop {self.width}x{self.height} at {self.x},{self.y}"


class RotateOperation(OperationModel):
    """Rotate clockwise by ``degrees``."""

    target: ClassVar[OperationTarget] = OperationTarget.BUILDER

    degrees: float

    def validate(self) -> None:  # type: ignore[override]
        if not math.isfinite(self.degrees):
            raise InvalidParameterError("degrees", f"must be a finite number, got {self.degrees}")

    @property
    def normalized(self) -> float:
        """Angle folded into ``[0, 360)``."""
        return self.degrees % 360

    def filter_text(self) -> str | None:
        """Return the rotation filter, or ``None`` for a full turn."""
        angle = self.normalized
        if angle == 0:
            return None
        if angle.is_integer() and int(angle) in _TRANSPOSE:
            return _TRANSPOSE[int(angle)]
        return f"rotate={format_number(math.radians(angle), places=6)}"

    def apply_to(self, target: FFmpegCommandBuilder) -> None:
        text = self.filter_text()
        if text is not None:
            target.add_simple_filter(text)

    def describe(self) -> str:
        return f"Rotate by {format_number(self.degrees)} degrees"


__all__ = ["AUTO_DIMENSION", "CropOperation", "ResizeOperation", "RotateOperation"]
