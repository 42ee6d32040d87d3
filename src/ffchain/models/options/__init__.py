"""Options package exports."""

from __future__ import annotations

from ffchain.models.context import Verbosity

from .defaults import DEFAULT_CONCAT_STRATEGY, DEFAULT_CONTAINER, DEFAULT_OUTPUT_SUFFIX
from .encoding import ConcatOptions, EncodingOptions
from .layers import OverlayOptions, TextOptions
from .options import Options
from .runtime import RuntimeOptions
from .time import TimeOptions
from .video import ColorOptions, VideoOptions

__all__ = [
    "DEFAULT_CONCAT_STRATEGY",
    "DEFAULT_CONTAINER",
    "DEFAULT_OUTPUT_SUFFIX",
    "ColorOptions",
    "ConcatOptions",
    "EncodingOptions",
    "Options",
    "OverlayOptions",
    "RuntimeOptions",
    "TextOptions",
    "TimeOptions",
    "Verbosity",
    "VideoOptions",
]
