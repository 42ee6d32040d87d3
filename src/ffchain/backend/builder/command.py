"""Mutable FFmpeg command representation."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from ffchain.errors import MissingParameterError
from ffchain.tools import FFMPEG, join_command
from ffchain.tools.args import INPUT_FLAG, SIMPLE_FILTERS, VIDEO_FILTER

FFMPEG_ENV = "FFCHAIN_FFMPEG"  #: Environment variable overriding the executable.


def resolve_ffmpeg_path(ffmpeg_path: str | Path | None = None) -> str:
    """Return the FFmpeg executable to invoke.

    Resolution order is the explicit path, ``$FFCHAIN_FFMPEG``, the first
    ``ffmpeg`` on ``PATH``, and finally the bare program name.
    """
    if ffmpeg_path:
        return str(ffmpeg_path)
    env_path = os.getenv(FFMPEG_ENV)
    if env_path:
        return env_path
    return shutil.which(FFMPEG) or FFMPEG


class FFmpegCommand:
    """Ordered FFmpeg arguments plus the input and output paths.

    The output path is only recorded by :meth:`set_output`; :meth:`validate`
    appends it as the final token. Arguments added later therefore still end up
    in front of it.
    """

    def __init__(self, ffmpeg_path: str | Path | None = None) -> None:
        self.program = resolve_ffmpeg_path(ffmpeg_path)
        self._args: list[str] = []
        self.input_path: str | None = None
        self.output_path: str | None = None

    @property
    def args(self) -> tuple[str, ...]:
        """Arguments excluding the program name."""
        return tuple(self._args)

    def add_args(self, *tokens: str | Path) -> FFmpegCommand:
        """Append raw argument tokens."""
        self._args.extend(str(t) for t in tokens)
        return self

    def set_input(self, path: str | Path) -> FFmpegCommand:
        """Record the primary input and append ``-i path``."""
        self.input_path = str(path)
        return self.add_args(*INPUT_FLAG, self.input_path)

    def set_output(self, path: str | Path) -> FFmpegCommand:
        """Record the output path without appending it."""
        self.output_path = str(path)
        return self

    def add_argument(self, key: str, value: str | float | Path) -> FFmpegCommand:
        """Append a ``key value`` pair."""
        return self.add_args(key, str(value))

    def add_filter(self, name: str, params: str) -> FFmpegCommand:
        """Append a single video filter as ``-filter:v name=params``."""
        return self.add_args(*VIDEO_FILTER, f"{name}={params}")

    def add_filters(self, filters: list[str] | tuple[str, ...]) -> FFmpegCommand:
        """Append a comma-joined ``-vf`` chain; empty input is ignored."""
        if filters:
            self.add_args(*SIMPLE_FILTERS, ",".join(filters))
        return self

    def validate(self) -> None:
        """Check required paths and put the output path last.

        Raises:
            MissingParameterError: If the input or output path is unset.

        """
        if not self.input_path:
            raise MissingParameterError("input")
        if not self.output_path:
            raise MissingParameterError("output")
        if not self._args or self._args[-1] != self.output_path:
            self._args.append(self.output_path)

    def to_list(self) -> list[str]:
        """Return the full command line including the program."""
        return [self.program, *self._args]

    def __str__(self) -> str:
        return join_command(self.program, self._args)


__all__ = ["FFMPEG_ENV", "FFmpegCommand", "resolve_ffmpeg_path"]
