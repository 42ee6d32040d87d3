"""Brightness, contrast and saturation adjustment through the ``eq`` filter."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from ffchain.errors import InvalidParameterError
from ffchain.models import OperationTarget
from ffchain.tools import format_number

from .base import OperationModel, require_range

if TYPE_CHECKING:
    from ffchain.backend.builder.command import FFmpegCommand

BRIGHTNESS_RANGE = (-1.0, 1.0)
CONTRAST_RANGE = (-2.0, 2.0)
SATURATION_RANGE = (0.0, 3.0)


class AdjustColorOperation(OperationModel):
    """Adjust colors; at least one field must be set."""

    target: ClassVar[OperationTarget] = OperationTarget.COMMAND

    brightness: float | None = None
    contrast: float | None = None
    saturation: float | None = None

    def validate(self) -> None:  # type: ignore[override]
        require_range("brightness", self.brightness, *BRIGHTNESS_RANGE)
        require_range("contrast", self.contrast, *CONTRAST_RANGE)
        require_range("saturation", self.saturation, *SATURATION_RANGE)
        if self.brightness is None and self.contrast is None and self.saturation is None:
            raise InvalidParameterError(
                "options",
                "At least one of brightness, contrast or saturation is required",
            )

    def filter_params(self) -> str:
        """Return ``brightness=..:contrast=..:saturation=..`` for the set fields."""
        values = (("brightness", self.brightness), ("contrast", self.contrast), ("saturation", self.saturation))
        return ":".join(f"{name}={format_number(value)}" for name, value in values if value is not None)

    def apply_to(self, target: FFmpegCommand) -> None:
        target.add_filter("eq", self.filter_params())

    def describe(self) -> str:
        return f"Adjust color {self.filter_params()}"


__all__ = ["AdjustColorOperation"]
