"""Backend utilities for building and executing FFmpeg commands."""

from .builder import FFmpegCommand, FFmpegCommandBuilder, FilterChain, OutputOptions
from .conversion import ffchain, run_conversion
from .executor import ExecutionResult, FFmpegExecutor

__all__ = [
    "ExecutionResult",
    "FFmpegCommand",
    "FFmpegCommandBuilder",
    "FFmpegExecutor",
    "FilterChain",
    "OutputOptions",
    "ffchain",
    "run_conversion",
]
