"""Error types raised by ffchain.

None of these derive from :class:`ValueError`: pydantic wraps ``ValueError``
raised inside validators into a ``ValidationError``, while any other exception
propagates unchanged. Operation models rely on that to surface typed errors.
"""

from __future__ import annotations

UNKNOWN_FFMPEG_ERROR = "Unknown FFmpeg error"


class FFChainError(Exception):
    """Base class for all ffchain errors."""


class FFmpegNotFoundError(FFChainError):
    """The FFmpeg executable could not be located or started."""

    def __init__(self, path: str | None = None) -> None:
        if path:
            message = f"FFmpeg executable not found at {path}"
        else:
            message = "FFmpeg executable not found. Make sure FFmpeg is installed and available in your PATH"
        super().__init__(message)
        self.path = path


class InputFileError(FFChainError):
    """An input file is missing or unusable."""

    def __init__(self, path: str, details: str | None = None) -> None:
        suffix = f": {details}" if details else ""
        super().__init__(f"Error with input file at {path}{suffix}")
        self.path = path
        self.details = details


class InvalidParameterError(FFChainError):
    """A parameter is out of range, malformed, or conflicts with another one."""

    def __init__(self, param: str, details: str) -> None:
        super().__init__(f"Invalid parameter '{param}': {details}")
        self.param = param
        self.details = details


class MissingParameterError(FFChainError):
    """A required parameter was never provided."""

    def __init__(self, param: str) -> None:
        super().__init__(f"Missing required parameter: {param}")
        self.param = param


class FFmpegExecutionError(FFChainError):
    """The FFmpeg process exited with an error.

    Attributes:
        command: Display form of the command that was run.
        stderr: Captured error stream of the process.

    """

    def __init__(self, command: str, stderr: str) -> None:
        super().__init__(f"FFmpeg command execution failed: {parse_ffmpeg_error(stderr)}")
        self.command = command
        self.stderr = stderr


def parse_ffmpeg_error(stderr: str) -> str:
    """Return the most relevant line of an FFmpeg error stream."""
    lines = [line.strip() for line in stderr.splitlines() if line.strip()]
    for line in lines:
        if "error" in line.lower():
            return line
    return lines[0] if lines else UNKNOWN_FFMPEG_ERROR


__all__ = [
    "FFChainError",
    "FFmpegExecutionError",
    "FFmpegNotFoundError",
    "InputFileError",
    "InvalidParameterError",
    "MissingParameterError",
    "parse_ffmpeg_error",
]
