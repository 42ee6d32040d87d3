"""Command representation, filter graph and compiler."""

from .command import FFMPEG_ENV, FFmpegCommand, resolve_ffmpeg_path
from .command_builder import FFmpegCommandBuilder, OutputOptions
from .filter_chain import FilterChain, FilterNode

__all__ = [
    "FFMPEG_ENV",
    "FFmpegCommand",
    "FFmpegCommandBuilder",
    "FilterChain",
    "FilterNode",
    "OutputOptions",
    "resolve_ffmpeg_path",
]
