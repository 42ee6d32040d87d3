"""Time values, filter escaping and status output."""

from __future__ import annotations

import logging
import math
import re
from pathlib import PureWindowsPath
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

from pytimeparse2 import parse as parse_duration

from ffchain.errors import InvalidParameterError
from ffchain.models.time import TimeCode, TimeSpec

logger = logging.getLogger(__name__)

TIME_PATTERN = re.compile(r"^(?:\d+:){0,2}\d+(?:\.\d+)?$")  #: ``[[HH:]MM:]SS[.mmm]``
TIME_FORMAT_HINT = "Expected format: [[HH:]MM:]SS[.mmm]"
DRY_RUN_LABEL = "Command"  #: Prefix of the command line printed on dry runs.

_ROUNDING: dict[str, Callable[[float], float]] = {"round": round, "floor": math.floor, "ceil": math.ceil}


def parse_timespan_to_seconds(s: str | None) -> float | None:
    """Convert a human-friendly time string to seconds.

    Args:
        s: Timespan such as ``"90s"``, ``"1m20s"`` or ``"00:01:30"``. ``None``
            or an empty string returns ``None``.

    Raises:
        ValueError: If ``s`` cannot be parsed.

    """
    if not s:
        return None
    parsed = parse_duration(s)
    if parsed is None:
        raise ValueError(f"Unable to parse timespan: {s}")
    return float(parsed)


def time_spec_to_seconds(time: TimeSpec) -> float:
    """Resolve any supported time representation to seconds.

    Raises:
        InvalidParameterError: For negative numbers, strings outside the
            ``[[HH:]MM:]SS[.mmm]`` grammar, or unsupported types.

    """
    if isinstance(time, TimeCode):
        return time.total_seconds
    if isinstance(time, str):
        if not TIME_PATTERN.match(time):
            raise InvalidParameterError("time", f"Invalid time format: {time}. {TIME_FORMAT_HINT}")
        seconds = 0.0
        for part in time.split(":"):
            seconds = seconds * 60 + float(part)
        return seconds
    if isinstance(time, int | float) and not isinstance(time, bool):
        if not time >= 0:  # also rejects NaN
            raise InvalidParameterError("time", f"Time must be a non-negative number of seconds, got {time}")
        return float(time)
    raise InvalidParameterError("time", f"Unsupported time format: {time!r}")


def format_time(
    seconds: float,
    *,
    places: int = 3,
    mode: Literal["ceil", "floor", "round"] = "round",
) -> str:
    """Render ``seconds`` as ``HH:MM:SS.mmm``.

    ``places`` sets the number of fractional digits and ``mode`` how the last
    one is rounded.
    """
    scale = 10**places
    ticks = int(_ROUNDING[mode](seconds * scale))
    whole, fraction = divmod(ticks, scale)
    minutes, secs = divmod(whole, 60)
    hours, minutes = divmod(minutes, 60)
    stamp = f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{stamp}.{fraction:0{places}d}" if places else stamp


def format_number(value: float, *, places: int = 3) -> str:
    """Return the shortest decimal form of ``value`` rounded to ``places``.

    ``1.0`` renders as ``"1"`` and ``1.75`` as ``"1.75"``.
    """
    text = f"{round(value, places):.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_time_spec(time: TimeSpec, *, for_filter: bool = False) -> str:
    """Render a time value for FFmpeg.

    Args:
        time: Seconds, a ``[[HH:]MM:]SS[.mmm]`` string, or a :class:`TimeCode`.
        for_filter: Return bare decimal seconds for filter expressions such as
            ``between(t,5,10)`` instead of the ``HH:MM:SS.mmm`` option form.

    """
    seconds = time_spec_to_seconds(time)
    if for_filter:
        return format_number(seconds)
    return format_time(seconds)


def escape_filter_path(path: str) -> str:
    """Use forward slashes and escape ``:`` and ``'`` for filter arguments."""
    return PureWindowsPath(path).as_posix().replace(":", r"\:").replace("'", r"\\'")


def emit_status(message: str, *, status_callback: Callable[[str], None] | None) -> None:
    """Deliver a status line.

    ``print`` writes straight to the terminal, keeping ``\\r`` progress lines
    on one row. ``None`` logs at INFO. Any other callable receives the message.
    """
    if status_callback is None:
        logger.info(message)
    elif status_callback is print:
        redraw = "\r" in message and "\n" not in message
        print(message, end="" if redraw else "\n", flush=True)  # noqa: T201
    else:
        status_callback(message)


__all__ = [
    "DRY_RUN_LABEL",
    "emit_status",
    "escape_filter_path",
    "format_number",
    "format_time",
    "format_time_spec",
    "parse_timespan_to_seconds",
    "time_spec_to_seconds",
]
