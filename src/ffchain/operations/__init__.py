"""Declarative media operations compiled into FFmpeg arguments."""

from .base import Operation, OperationModel
from .color import AdjustColorOperation
from .concat import ConcatOperation
from .encoding import EncodingOptionsOperation
from .geometry import CropOperation, ResizeOperation, RotateOperation
from .overlay import OverlayOperation
from .speed import SpeedOperation, atempo_stages
from .text import TextOperation, escape_text
from .trim import TrimOperation

__all__ = [
    "AdjustColorOperation",
    "ConcatOperation",
    "CropOperation",
    "EncodingOptionsOperation",
    "Operation",
    "OperationModel",
    "OverlayOperation",
    "ResizeOperation",
    "RotateOperation",
    "SpeedOperation",
    "TextOperation",
    "TrimOperation",
    "atempo_stages",
    "escape_text",
]
