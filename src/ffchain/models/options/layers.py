"""Text and image overlay option models."""

from __future__ import annotations

from pathlib import Path

from cyclopts import Parameter
from pydantic import BaseModel, Field, model_validator

from ffchain.models.types import Position

from .groups import OVERLAY_GROUP, TEXT_GROUP


@Parameter(group=TEXT_GROUP)
class TextOptions(BaseModel):
    """Caption drawn on the video."""

    text: str | None = Field(None, description="Caption text.")
    position: Position | None = Field(None, description="Anchor for the caption. [default: center]")
    font_size: int = Field(24, gt=0, description="Font size in pixels.")
    font_color: str = Field("white", description="Font color name or hex value.")
    font_file: Path | None = Field(None, description="Font file to render with.")
    background: str | None = Field(None, description="Draw a box of this color behind the caption.")
    start: str | None = Field(None, description="Show the caption from this time (seconds or HH:MM:SS).")
    end: str | None = Field(None, description="Hide the caption after this time (seconds or HH:MM:SS).")

    @model_validator(mode="after")
    def validate_text_present(self) -> TextOptions:
        """Require caption text whenever caption settings are given."""
        styled = any(v is not None for v in (self.position, self.font_file, self.background, self.start, self.end))
        if styled and self.text is None:
            raise ValueError("Text options require --text.text")
        return self


@Parameter(group=OVERLAY_GROUP)
class OverlayOptions(BaseModel):
    """Image or video composited over the video."""

    image: Path | None = Field(None, description="Path to the overlay image or video.")
    position: Position | None = Field(None, description="Anchor for the overlay. [default: top-left corner]")
    opacity: float | None = Field(None, description="Overlay opacity between 0 and 1.")
    scale: float | None = Field(None, description="Scale factor applied to the overlay.")
    start: str | None = Field(None, description="Show the overlay from this time (seconds or HH:MM:SS).")
    end: str | None = Field(None, description="Hide the overlay after this time (seconds or HH:MM:SS).")

    @model_validator(mode="after")
    def validate_image_present(self) -> OverlayOptions:
        """Require an image whenever overlay settings are given."""
        styled = any(v is not None for v in (self.position, self.opacity, self.scale, self.start, self.end))
        if styled and self.image is None:
            raise ValueError("Overlay options require --overlay.image")
        return self


__all__ = ["OverlayOptions", "TextOptions"]
