"""Fluent front end chaining operations on one input."""

from __future__ import annotations

import logging
import tempfile
import uuid
from pathlib import Path
from typing import TYPE_CHECKING, Any, Self

from ffchain.backend.builder import FFmpegCommandBuilder, OutputOptions
from ffchain.backend.executor import ExecutionResult, FFmpegExecutor, ensure_output_parent
from ffchain.errors import InputFileError, MissingParameterError
from ffchain.models import ConcatStrategy, Container, RuntimeContext
from ffchain.operations import (
    AdjustColorOperation,
    ConcatOperation,
    CropOperation,
    EncodingOptionsOperation,
    OverlayOperation,
    ResizeOperation,
    RotateOperation,
    SpeedOperation,
    TextOperation,
    TrimOperation,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ffchain.backend.builder import FFmpegCommand
    from ffchain.models import TimeSpec
    from ffchain.operations import Operation

logger = logging.getLogger(__name__)

DEFAULT_TEMP_DIR = Path(tempfile.gettempdir()) / "ffchain"


class Processor:
    """Collect operations for one output and run FFmpeg.

    Example::

        video("in.mp4").trim(start=5, duration=10).resize(width=1280).output("out.mp4").execute()

    """

    def __init__(
        self,
        *,
        ffmpeg_path: str | Path | None = None,
        temp_dir: str | Path | None = None,
        executor: FFmpegExecutor | None = None,
        runtime: RuntimeContext | None = None,
        overwrite: bool = True,
    ) -> None:
        if executor is None:
            executor = FFmpegExecutor(runtime)
        self.executor = executor
        self.temp_dir = Path(temp_dir) if temp_dir is not None else DEFAULT_TEMP_DIR
        self.builder = FFmpegCommandBuilder(ffmpeg_path, overwrite=overwrite)
        self._output_options: OutputOptions | None = None

    @classmethod
    def from_file(cls, path: str | Path, **kwargs: Any) -> Self:
        """Start a processor reading ``path``."""
        return cls(**kwargs).input(path)

    @classmethod
    def from_concat(
        cls,
        inputs: Sequence[str | Path],
        *,
        strategy: ConcatStrategy | str = ConcatStrategy.FILTER,
        video_only: bool = False,
        **kwargs: Any,
    ) -> Self:
        """Start a processor joining ``inputs``."""
        return cls(**kwargs).concat(inputs, strategy=strategy, video_only=video_only)

    @property
    def command(self) -> FFmpegCommand:
        """Command being assembled."""
        return self.builder.command

    def input(self, path: str | Path) -> Self:
        logger.debug("Input: %s", path)
        self.builder.with_input(path)
        return self

    def output(self, path: str | Path, options: OutputOptions | None = None) -> Self:
        logger.debug("Output: %s", path)
        self._output_options = options
        self.builder.with_output(path, options)
        return self

    def _add(self, operation: Operation, *, needs_input: bool = True) -> Self:
        if needs_input and self.command.input_path is None:
            raise MissingParameterError("input")
        logger.debug(operation.describe())
        self.builder.add_operation(operation)
        return self

    def trim(
        self,
        start: TimeSpec | None = None,
        end: TimeSpec | None = None,
        duration: TimeSpec | None = None,
    ) -> Self:
        return self._add(TrimOperation(start=start, end=end, duration=duration))

    def resize(
        self,
        width: int | None = None,
        height: int | None = None,
        *,
        maintain_aspect_ratio: bool = True,
    ) -> Self:
        return self._add(ResizeOperation(width=width, height=height, maintain_aspect_ratio=maintain_aspect_ratio))

    def crop(self, width: int, height: int, x: int = 0, y: int = 0) -> Self:
        return self._add(CropOperation(width=width, height=height, x=x, y=y))

    def rotate(self, degrees: float) -> Self:
        return self._add(RotateOperation(degrees=degrees))

    def text(self, text: str, **options: Any) -> Self:
        """Draw ``text``; see :class:`~ffchain.operations.TextOperation` for options."""
        return self._add(TextOperation(text=text, **options))

    def overlay(self, source: str | Path, **options: Any) -> Self:
        """Overlay ``source``; see :class:`~ffchain.operations.OverlayOperation` for options."""
        return self._add(OverlayOperation(source=source, **options))

    def speed(self, factor: float) -> Self:
        return self._add(SpeedOperation(factor=factor))

    def adjust_color(
        self,
        brightness: float | None = None,
        contrast: float | None = None,
        saturation: float | None = None,
    ) -> Self:
        return self._add(AdjustColorOperation(brightness=brightness, contrast=contrast, saturation=saturation))

    def encoding(self, **options: Any) -> Self:
        """Set encoder options; see :class:`~ffchain.operations.EncodingOptionsOperation`."""
        return self._add(EncodingOptionsOperation(**options))

    def concat(
        self,
        inputs: Sequence[str | Path],
        *,
        strategy: ConcatStrategy | str = ConcatStrategy.FILTER,
        video_only: bool = False,
    ) -> Self:
        if strategy == ConcatStrategy.DEMUXER:
            self.temp_dir.mkdir(parents=True, exist_ok=True)
        operation = ConcatOperation(
            inputs=list(inputs),
            strategy=strategy,
            video_only=video_only,
            temp_dir=self.temp_dir,
        )
        return self._add(operation, needs_input=False)

    def temp_output_path(self) -> Path:
        """Return a fresh output path inside :attr:`temp_dir`."""
        container = Container.MP4
        if self._output_options is not None and self._output_options.format in {c.value for c in Container}:
            container = Container(self._output_options.format)
        return self.temp_dir / f"{uuid.uuid4().hex}{container.extension}"

    def build(self) -> FFmpegCommand:
        """Compile the command without running it."""
        return self.builder.build()

    def execute(self) -> ExecutionResult:
        """Compile and run the command, then release temporary files.

        Raises:
            MissingParameterError: If no input was set.
            InputFileError: If the input does not exist.
            FFmpegNotFoundError: If FFmpeg cannot be found.
            FFmpegExecutionError: If FFmpeg fails.

        """
        input_path = self.command.input_path
        if input_path is None:
            raise MissingParameterError("input")
        if not Path(input_path).is_file():
            raise InputFileError(input_path, "File does not exist")
        if self.command.output_path is None:
            self.builder.with_output(self.temp_output_path())
        output = Path(self.command.output_path or "")
        runtime = self.executor.runtime
        try:
            ensure_output_parent(output, runtime.verbosity, runtime.status_callback)
            command = self.builder.build()
            result = self.executor.execute(command)
        finally:
            self.builder.cleanup()
        logger.debug("Finished %s in %.0f ms", result.output_path, result.duration_ms)
        return result

    def __str__(self) -> str:
        return str(self.builder)


def video(path: str | Path, **kwargs: Any) -> Processor:
    """Return a :class:`Processor` reading ``path``."""
    return Processor.from_file(path, **kwargs)


__all__ = ["DEFAULT_TEMP_DIR", "Processor", "video"]
