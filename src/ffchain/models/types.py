"""Enumerations shared by operations, the builder, and the CLI."""

from enum import Enum


class FilterKind(str, Enum):
    """How a filter is expressed in the final command."""

    SIMPLE = "simple"  # comma-joined into ``-vf``
    COMPLEX = "complex"  # labeled node inside ``-filter_complex``


class OperationTarget(str, Enum):
    """What an operation is applied to by the builder."""

    COMMAND = "command"
    BUILDER = "builder"


class Position(str, Enum):
    """Named anchors for overlays and text."""

    TOP_LEFT = "topleft"
    TOP = "top"
    TOP_RIGHT = "topright"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    BOTTOM_LEFT = "bottomleft"
    BOTTOM = "bottom"
    BOTTOM_RIGHT = "bottomright"


class ConcatStrategy(str, Enum):
    """Ways of joining several inputs into one output."""

    FILTER = "filter"
    DEMUXER = "demuxer"


class Preset(str, Enum):
    """Encoder speed/quality presets understood by x264 and x265."""

    ULTRAFAST = "ultrafast"
    SUPERFAST = "superfast"
    VERYFAST = "veryfast"
    FASTER = "faster"
    FAST = "fast"
    MEDIUM = "medium"
    SLOW = "slow"
    SLOWER = "slower"
    VERYSLOW = "veryslow"


class Container(str, Enum):
    """Common output container formats."""

    MP4 = "mp4"
    MOV = "mov"
    MKV = "mkv"
    AVI = "avi"
    WEBM = "webm"
    GIF = "gif"

    @property
    def extension(self) -> str:
        """Canonical filename extension for this container, including dot."""
        return f".{self.value}"


__all__ = [
    "ConcatStrategy",
    "Container",
    "FilterKind",
    "OperationTarget",
    "Position",
    "Preset",
]
