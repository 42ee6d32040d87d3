"""Spawn FFmpeg and render its command lines for display."""

import logging
import os
import re
import shlex
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ffchain.models.context import RuntimeContext

from .helpers import emit_status

FFMPEG = "ffmpeg"

_VERSION_CACHE_KEY = "ffmpeg-version"

# Flags whose value is a filter graph; the value is always quoted for display.
_FILTER_FLAGS = frozenset({"-vf", "-af", "-filter:v", "-filter:a", "-filter_complex"})

# FFmpeg rewrites its progress line with a bare carriage return.
_LINE_BREAK = re.compile(r"(\r\n|\r|\n)")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProcessOutput:
    """Captured streams of a finished process."""

    stdout: str
    stderr: str


class _ProgressRelay:
    """Forward merged process output to a status sink as it arrives.

    Progress updates terminated by ``\\r`` are forwarded with the carriage
    return kept so terminals can redraw them in place.
    """

    def __init__(self, log: Callable[[str], None]) -> None:
        self._log = log
        self._pending = ""
        self._captured: list[str] = []

    def feed(self, chunk: str) -> None:
        self._captured.append(chunk)
        *pieces, self._pending = _LINE_BREAK.split(self._pending + chunk)
        for text, brk in zip(pieces[::2], pieces[1::2], strict=True):
            self._log(text + "\r" if brk == "\r" else text)

    def finish(self) -> str:
        """Flush the unterminated tail and return everything captured."""
        if self._pending:
            self._log(self._pending)
            self._pending = ""
        return "".join(self._captured)


def _run_streaming(cmd: list[str], *, creationflags: int, log: Callable[[str], None]) -> ProcessOutput:
    relay = _ProgressRelay(log)
    with subprocess.Popen(  # noqa: S603
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        bufsize=1,
        creationflags=creationflags,
    ) as proc:
        if proc.stdout is None:  # pragma: no cover - PIPE always yields a stream
            raise RuntimeError("Failed to capture FFmpeg output")
        for line in proc.stdout:
            relay.feed(line)
        returncode = proc.wait()
    # FFmpeg reports on stderr; the merged stream is returned as such.
    output = relay.finish()
    if returncode:
        raise subprocess.CalledProcessError(returncode, cmd, output="", stderr=output)
    return ProcessOutput(stdout="", stderr=output)


def run(
    exe: str | Path,
    args: Sequence[str | Path],
    *,
    verbose: bool = False,
    status_callback: Callable[[str], None] | None = None,
    list_cmd: bool = False,
) -> ProcessOutput:
    """Run ``exe`` with ``args`` and return its captured output.

    Args:
        exe: Program to start.
        args: Arguments after the program name.
        verbose: Forward output to ``status_callback`` while the process runs.
        status_callback: Receives status lines; ``None`` routes them to the log.
        list_cmd: Announce the command line before starting.

    Raises:
        subprocess.CalledProcessError: If the process exits non-zero. The
            captured error stream is available as ``stderr``.
        FileNotFoundError: If ``exe`` cannot be started.

    """
    cmd = [str(exe), *map(str, args)]
    if list_cmd:
        emit_status(f"Running: {join_command(exe, args)}", status_callback=status_callback)
    creationflags = getattr(subprocess, "CREATE_NO_WINDOW", 0)
    if verbose:
        return _run_streaming(
            cmd,
            creationflags=creationflags,
            log=lambda message: emit_status(message, status_callback=status_callback),
        )
    proc = subprocess.run(  # noqa: S603
        cmd,
        capture_output=True,
        text=True,
        creationflags=creationflags,
        check=False,
    )
    if proc.returncode:
        logger.debug("%s exited with %s", cmd[0], proc.returncode)
        raise subprocess.CalledProcessError(proc.returncode, cmd, output=proc.stdout, stderr=proc.stderr)
    return ProcessOutput(stdout=proc.stdout, stderr=proc.stderr)


def get_ffmpeg_version(program: str | Path = FFMPEG) -> str:
    """Return the banner line of ``ffmpeg -version``.

    Raises:
        FileNotFoundError: If ``program`` cannot be started.
        RuntimeError: If ``program`` exits with an error.

    """
    try:
        out = run(program, ["-version"])
    except subprocess.CalledProcessError as e:  # pragma: no cover - unlikely
        raise RuntimeError(f"{program} -version failed with status {e.returncode}") from e
    first, _, _ = out.stdout.partition("\n")
    return first.strip()


def check_ffmpeg_version(ctx: RuntimeContext, program: str | Path = FFMPEG) -> str:
    """Return the version banner of ``program``, cached per executable path."""
    return ctx.remember((_VERSION_CACHE_KEY, str(program)), lambda: get_ffmpeg_version(program))


def quote_arg(arg: str, *, force: bool = False) -> str:
    """Quote ``arg`` for the current platform's shell.

    With ``force`` the argument is wrapped even when no quoting is required.
    """
    if os.name == "nt":
        quoted, mark = subprocess.list2cmdline([arg]), '"'
    else:
        quoted, mark = shlex.quote(arg), "'"
    if force and quoted == arg:
        return f"{mark}{arg}{mark}"
    return quoted


def join_command(exe: str | Path, args: Sequence[str | Path]) -> str:
    """Format a command line for display, quoting filter graphs."""
    parts = [quote_arg(str(exe))]
    previous = None
    for token in map(str, args):
        parts.append(quote_arg(token, force=previous in _FILTER_FLAGS))
        previous = token
    return " ".join(parts)


__all__ = [
    "FFMPEG",
    "ProcessOutput",
    "check_ffmpeg_version",
    "get_ffmpeg_version",
    "join_command",
    "quote_arg",
    "run",
]
