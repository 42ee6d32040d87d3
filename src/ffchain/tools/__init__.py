"""FFmpeg-related helper utilities."""

from .cli import (
    FFMPEG,
    ProcessOutput,
    check_ffmpeg_version,
    get_ffmpeg_version,
    join_command,
    run,
)
from .helpers import (
    emit_status,
    escape_filter_path,
    format_number,
    format_time,
    format_time_spec,
    parse_timespan_to_seconds,
    time_spec_to_seconds,
)

__all__ = [
    "FFMPEG",
    "ProcessOutput",
    "check_ffmpeg_version",
    "emit_status",
    "escape_filter_path",
    "format_number",
    "format_time",
    "format_time_spec",
    "get_ffmpeg_version",
    "join_command",
    "parse_timespan_to_seconds",
    "run",
    "time_spec_to_seconds",
]
