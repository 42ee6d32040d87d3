"""Anchor formulas and visibility windows shared by overlays and text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ffchain.errors import InvalidParameterError
from ffchain.models import Position
from ffchain.tools import format_time_spec, time_spec_to_seconds

if TYPE_CHECKING:
    from ffchain.models import TimeSpec

DEFAULT_PADDING = 10
WINDOW_START = "0"
WINDOW_END = "999999"  #: Stand-in for "until the end" in ``between(t,...)``.

# (x, y) templates; {w}/{h} are the main frame size, {ow}/{oh} the placed item.
_ANCHORS: dict[Position, tuple[str, str]] = {
    Position.TOP_LEFT: ("{p}", "{p}"),
    Position.TOP: ("({w}-{ow})/2", "{p}"),
    Position.TOP_RIGHT: ("{w}-{ow}-{p}", "{p}"),
    Position.LEFT: ("{p}", "({h}-{oh})/2"),
    Position.CENTER: ("({w}-{ow})/2", "({h}-{oh})/2"),
    Position.RIGHT: ("{w}-{ow}-{p}", "({h}-{oh})/2"),
    Position.BOTTOM_LEFT: ("{p}", "{h}-{oh}-{p}"),
    Position.BOTTOM: ("({w}-{ow})/2", "{h}-{oh}-{p}"),
    Position.BOTTOM_RIGHT: ("{w}-{ow}-{p}", "{h}-{oh}-{p}"),
}

OVERLAY_DIMENSIONS = {"w": "main_w", "h": "main_h", "ow": "overlay_w", "oh": "overlay_h"}
TEXT_DIMENSIONS = {"w": "w", "h": "h", "ow": "text_w", "oh": "text_h"}


def anchor(position: Position, padding: int, dimensions: dict[str, str]) -> tuple[str, str]:
    """Return ``(x, y)`` expressions placing an item at ``position``."""
    x, y = _ANCHORS[position]
    return x.format(p=padding, **dimensions), y.format(p=padding, **dimensions)


def overlay_position(position: Position, padding: int = DEFAULT_PADDING) -> str:
    """Return ``x:y`` for the ``overlay`` filter.

    >>> overlay_position(Position.CENTER)
    '(main_w-overlay_w)/2:(main_h-overlay_h)/2'
    """
    return ":".join(anchor(position, padding, OVERLAY_DIMENSIONS))


def text_position(position: Position, padding: int = DEFAULT_PADDING) -> str:
    """Return ``x=..:y=..`` for the ``drawtext`` filter.

    >>> text_position(Position.CENTER)
    'x=(w-text_w)/2:y=(h-text_h)/2'
    """
    x, y = anchor(position, padding, TEXT_DIMENSIONS)
    return f"x={x}:y={y}"


def enable_window(start: TimeSpec | None, end: TimeSpec | None) -> str | None:
    """Return ``enable='between(t,S,E)'`` or ``None`` when neither bound is set."""
    if start is None and end is None:
        return None
    s = WINDOW_START if start is None else format_time_spec(start, for_filter=True)
    e = WINDOW_END if end is None else format_time_spec(end, for_filter=True)
    return f"enable='between(t,{s},{e})'"


def parse_position(value: Any) -> Any:
    """Turn an anchor name into :class:`Position` or raise a typed error."""
    if value is None or isinstance(value, Position):
        return value
    try:
        return Position(value)
    except ValueError:
        choices = ", ".join(p.value for p in Position)
        raise InvalidParameterError("position", f"Position must be one of: {choices}") from None


def check_placement(
    position: Position | None,
    x: int | str | None,
    y: int | str | None,
) -> None:
    """Reject a named position combined with coordinates, or a lone coordinate."""
    if position is not None and (x is not None or y is not None):
        raise InvalidParameterError("position", "Cannot combine a predefined position with x/y coordinates")
    if (x is None) != (y is None):
        raise InvalidParameterError("x" if x is None else "y", "x and y must be given together")


def check_window(start: TimeSpec | None, end: TimeSpec | None) -> None:
    """Ensure a visibility window is parseable and not reversed."""
    s = time_spec_to_seconds(start) if start is not None else None
    e = time_spec_to_seconds(end) if end is not None else None
    if s is not None and e is not None and e <= s:
        raise InvalidParameterError("end", "End time must be after start time")


__all__ = [
    "DEFAULT_PADDING",
    "check_placement",
    "check_window",
    "enable_window",
    "overlay_position",
    "parse_position",
    "text_position",
]
