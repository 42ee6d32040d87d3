"""Burn a text caption into the video with ``drawtext``."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import field_validator

from ffchain.errors import InvalidParameterError
from ffchain.models import FilterKind, OperationTarget, Position, TimeSpec
from ffchain.tools import escape_filter_path

from .base import OperationModel, require_non_negative, require_positive
from .placement import (
    DEFAULT_PADDING,
    check_placement,
    check_window,
    enable_window,
    parse_position,
    text_position,
)

if TYPE_CHECKING:
    from ffchain.backend.builder.command_builder import FFmpegCommandBuilder

DEFAULT_FONT_SIZE = 24
DEFAULT_FONT_COLOR = "white"


def escape_text(text: str) -> str:
    r"""Escape ``text`` for a quoted ``drawtext`` value.

    Backslashes go first so the escapes added for ``:`` and ``'`` stay intact.

    >>> escape_text("a:b")
    'a\\:b'
    """
    return text.replace("\\", "\\\\").replace(":", "\\:").replace("'", "\\'")


class TextOperation(OperationModel):
    """Draw ``text`` at a named position or at ``x``/``y`` (centered by default)."""

    target: ClassVar[OperationTarget] = OperationTarget.BUILDER

    text: str
    position: Position | None = None
    x: int | str | None = None
    y: int | str | None = None
    padding: int = DEFAULT_PADDING
    font_file: Path | None = None
    font_size: int = DEFAULT_FONT_SIZE
    font_color: str = DEFAULT_FONT_COLOR
    background_color: str | None = None
    box_border: int | None = None
    start: TimeSpec | None = None
    end: TimeSpec | None = None

    @field_validator("position", mode="before")
    @classmethod
    def validate_position(cls, v: Any) -> Any:
        """Report unknown anchors as :class:`InvalidParameterError`."""
        return parse_position(v)

    def validate(self) -> None:  # type: ignore[override]
        if not self.text.strip():
            raise InvalidParameterError("text", "Text must not be empty")
        check_placement(self.position, self.x, self.y)
        require_non_negative("padding", self.padding)
        require_positive("font_size", self.font_size)
        require_non_negative("box_border", self.box_border)
        check_window(self.start, self.end)

    def filter_text(self) -> str:
        parts = [f"drawtext=text='{escape_text(self.text)}'"]
        if self.font_file is not None:
            parts.append(f"fontfile='{escape_filter_path(str(self.font_file))}'")
        parts += [f"fontsize={self.font_size}", f"fontcolor={self.font_color}"]
        if self.background_color:
            parts += ["box=1", f"boxcolor={self.background_color}"]
            if self.box_border:
                parts.append(f"boxborderw={self.box_border}")
        if self.x is not None and self.y is not None:
            parts.append(f"x={self.x}:y={self.y}")
        else:
            parts.append(text_position(self.position or Position.CENTER, self.padding))
        window = enable_window(self.start, self.end)
        if window:
            parts.append(window)
        return ":".join(parts)

    def apply_to(self, target: FFmpegCommandBuilder) -> None:
        target.add_complex_filter(self.filter_text(), FilterKind.COMPLEX)

    def describe(self) -> str:
        return f"Add text {self.text!r}"


__all__ = ["DEFAULT_FONT_COLOR", "DEFAULT_FONT_SIZE", "TextOperation", "escape_text"]
