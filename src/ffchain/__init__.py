"""Compile declarative video edits into FFmpeg commands."""

from .backend import ExecutionResult, FFmpegCommand, FFmpegCommandBuilder, FFmpegExecutor, FilterChain, OutputOptions
from .errors import (
    FFChainError,
    FFmpegExecutionError,
    FFmpegNotFoundError,
    InputFileError,
    InvalidParameterError,
    MissingParameterError,
)
from .models import ConcatStrategy, Container, Position, Preset, RuntimeContext, TimeCode, Verbosity
from .operations import (
    AdjustColorOperation,
    ConcatOperation,
    CropOperation,
    EncodingOptionsOperation,
    Operation,
    OverlayOperation,
    ResizeOperation,
    RotateOperation,
    SpeedOperation,
    TextOperation,
    TrimOperation,
)
from .processor import Processor, video

__all__ = [
    "AdjustColorOperation",
    "ConcatOperation",
    "ConcatStrategy",
    "Container",
    "CropOperation",
    "EncodingOptionsOperation",
    "ExecutionResult",
    "FFChainError",
    "FFmpegCommand",
    "FFmpegCommandBuilder",
    "FFmpegExecutionError",
    "FFmpegExecutor",
    "FFmpegNotFoundError",
    "FilterChain",
    "InputFileError",
    "InvalidParameterError",
    "MissingParameterError",
    "Operation",
    "OutputOptions",
    "OverlayOperation",
    "Position",
    "Preset",
    "Processor",
    "ResizeOperation",
    "RotateOperation",
    "RuntimeContext",
    "SpeedOperation",
    "TextOperation",
    "TimeCode",
    "TrimOperation",
    "Verbosity",
    "video",
]
