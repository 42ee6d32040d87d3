"""Run a compiled FFmpeg command."""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ffchain.errors import FFmpegExecutionError, FFmpegNotFoundError
from ffchain.models import RuntimeContext, Verbosity
from ffchain.tools import check_ffmpeg_version, run
from ffchain.tools.helpers import DRY_RUN_LABEL, emit_status

if TYPE_CHECKING:
    from collections.abc import Callable

    from .builder import FFmpegCommand

CONVERSION_FAILED = "Conversion failed"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one FFmpeg run."""

    success: bool
    output_path: str | None
    duration_ms: float
    command: str
    stdout: str = ""
    stderr: str = ""


def ensure_output_parent(
    path: Path,
    verbosity: Verbosity = Verbosity.QUIET,
    status_callback: Callable[[str], None] | None = None,
) -> None:
    """Create the directory that will hold ``path``.

    Raises:
        NotADirectoryError: If a file is in the way.
        OSError: If the directory cannot be created.

    """
    parent = path.parent
    if parent.is_dir():
        return
    if parent.exists():
        raise NotADirectoryError(f"Output parent is not a directory: {parent}")
    parent.mkdir(parents=True, exist_ok=True)
    if verbosity >= Verbosity.COMMANDS:
        emit_status(f"Created output directory: {parent}", status_callback=status_callback)


class FFmpegExecutor:
    """Run validated commands once each, honoring the runtime flags."""

    def __init__(self, runtime: RuntimeContext | None = None) -> None:
        self.runtime = runtime or RuntimeContext()

    def can_execute(self, command: FFmpegCommand) -> bool:
        """Whether the command's program can be found."""
        program = command.program
        return Path(program).is_file() or shutil.which(program) is not None

    def execute(self, command: FFmpegCommand) -> ExecutionResult:
        """Run ``command`` and return its captured output.

        Raises:
            MissingParameterError: If the command lacks an input or output.
            FFmpegNotFoundError: If the executable cannot be found.
            FFmpegExecutionError: If FFmpeg exits with an error.

        """
        command.validate()
        text = str(command)
        runtime = self.runtime
        if runtime.dry_run:
            emit_status(f"{DRY_RUN_LABEL}: {text}", status_callback=runtime.status_callback)
            return ExecutionResult(success=True, output_path=command.output_path, duration_ms=0.0, command=text)
        if not self.can_execute(command):
            raise FFmpegNotFoundError(command.program)
        if runtime.verbosity >= Verbosity.COMMANDS:
            version = check_ffmpeg_version(runtime, command.program)
            emit_status(f"Using {version}", status_callback=runtime.status_callback)
        logger.debug("Executing: %s", text)
        started = time.perf_counter()
        try:
            out = run(
                command.program,
                command.args,
                verbose=runtime.verbosity >= Verbosity.OUTPUT,
                status_callback=runtime.status_callback,
                list_cmd=runtime.verbosity >= Verbosity.COMMANDS,
            )
        except FileNotFoundError as e:
            raise FFmpegNotFoundError(command.program) from e
        except subprocess.CalledProcessError as e:
            logger.error("FFmpeg exited with status %s: %s", e.returncode, text)
            raise FFmpegExecutionError(text, e.stderr or "") from e
        duration_ms = (time.perf_counter() - started) * 1000
        return ExecutionResult(
            success=True,
            output_path=command.output_path,
            duration_ms=duration_ms,
            command=text,
            stdout=out.stdout,
            stderr=out.stderr,
        )


__all__ = ["CONVERSION_FAILED", "ExecutionResult", "FFmpegExecutor", "ensure_output_parent"]
