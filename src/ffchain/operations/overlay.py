"""Composite an image or video on top of the main video."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import field_validator

from ffchain.errors import InvalidParameterError
from ffchain.models import FilterKind, OperationTarget, Position, TimeSpec
from ffchain.tools import format_number
from ffchain.tools.args import label

from .base import OperationModel, require_file, require_non_negative, require_positive, require_range
from .placement import (
    DEFAULT_PADDING,
    check_placement,
    check_window,
    enable_window,
    overlay_position,
    parse_position,
)

if TYPE_CHECKING:
    from ffchain.backend.builder.command_builder import FFmpegCommandBuilder

OVERLAY_LABEL_PREFIX = "ovl"
ORIGIN = "0:0"


class OverlayOperation(OperationModel):
    """Place ``source`` over the video.

    Either a named ``position`` or explicit ``x``/``y`` may be given; without
    both the overlay sits at the top-left corner. ``scale`` resizes the source
    by a factor, ``width``/``height`` to a size; the two are exclusive.
    """

    target: ClassVar[OperationTarget] = OperationTarget.BUILDER

    source: Path
    position: Position | None = None
    x: int | str | None = None
    y: int | str | None = None
    padding: int = DEFAULT_PADDING
    scale: float | None = None
    width: int | None = None
    height: int | None = None
    opacity: float | None = None
    start: TimeSpec | None = None
    end: TimeSpec | None = None

    @field_validator("position", mode="before")
    @classmethod
    def validate_position(cls, v: Any) -> Any:
        """Report unknown anchors as :class:`InvalidParameterError`."""
        return parse_position(v)

    def validate(self) -> None:  # type: ignore[override]
        require_file(self.source)
        check_placement(self.position, self.x, self.y)
        require_non_negative("padding", self.padding)
        require_range("opacity", self.opacity, 0.0, 1.0)
        require_positive("scale", self.scale)
        require_positive("width", self.width)
        require_positive("height", self.height)
        if self.scale is not None and (self.width is not None or self.height is not None):
            raise InvalidParameterError("scale", "Cannot combine scale with width/height")
        check_window(self.start, self.end)

    def scale_filter(self) -> str | None:
        if self.width is not None and self.height is not None:
            return f"scale={self.width}:{self.height}"
        if self.width is not None:
            return f"scale={self.width}:-1"
        if self.height is not None:
            return f"scale=-1:{self.height}"
        if self.scale is not None:
            factor = format_number(self.scale, places=4)
            return f"scale=iw*{factor}:ih*{factor}"
        return None

    def opacity_filter(self) -> str | None:
        if self.opacity is None or self.opacity >= 1:
            return None
        return f"format=rgba,colorchannelmixer=aa={format_number(self.opacity)}"

    def preprocess_filter(self) -> str | None:
        """Return the filters applied to the source before overlaying, if any."""
        steps = [f for f in (self.scale_filter(), self.opacity_filter()) if f]
        return ",".join(steps) if steps else None

    def overlay_filter(self) -> str:
        if self.position is not None:
            pos = overlay_position(self.position, self.padding)
        elif self.x is not None and self.y is not None:
            pos = f"{self.x}:{self.y}"
        else:
            pos = ORIGIN
        window = enable_window(self.start, self.end)
        return f"overlay={pos}" + (f":{window}" if window else "")

    def apply_to(self, target: FFmpegCommandBuilder) -> None:
        index = target.add_input(self.source)
        source_label = label("v", input_index=index)
        pre = self.preprocess_filter()
        if pre is not None:
            prepared = target.generate_label(OVERLAY_LABEL_PREFIX)
            target.add_complex_filter(pre, FilterKind.COMPLEX, inputs=(source_label,), outputs=(prepared,))
            source_label = prepared
        target.add_complex_filter(self.overlay_filter(), FilterKind.COMPLEX, inputs=(source_label,))

    def describe(self) -> str:
        where = self.position.value if self.position else f"{self.x or 0},{self.y or 0}"
        return f"Overlay {self.source.name} at {where}"


__all__ = ["OverlayOperation"]
