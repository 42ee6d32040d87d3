"""Compile operations into one FFmpeg command."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, ConfigDict, model_validator

from ffchain.errors import MissingParameterError
from ffchain.models import FilterKind, OperationTarget
from ffchain.operations import CropOperation, ResizeOperation, RotateOperation, TrimOperation
from ffchain.operations.base import require_range
from ffchain.operations.encoding import CRF_RANGE, check_bitrate
from ffchain.tools.args import (
    BITRATE,
    CODEC,
    CRF,
    FILTER_COMPLEX,
    FORMAT,
    INPUT_FLAG,
    OPTIONAL_AUDIO,
    OVERWRITE_OUTPUT,
    map_stream,
    stream_option,
)

from .command import FFmpegCommand
from .filter_chain import FilterChain

if TYPE_CHECKING:
    from ffchain.models import TimeSpec
    from ffchain.operations import Operation

logger = logging.getLogger(__name__)


class OutputOptions(BaseModel):
    """Container and encoder settings applied when the output is set."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: str | None = None
    codec: str | None = None
    quality: int | None = None  # CRF
    bitrate: str | None = None

    @model_validator(mode="after")
    def check_values(self) -> Self:
        """Validate quality and bitrate."""
        require_range("quality", self.quality, *CRF_RANGE)
        check_bitrate("bitrate", self.bitrate)
        return self

    def to_args(self) -> tuple[str, ...]:
        args: list[str] = []
        if self.format:
            args += [*FORMAT, self.format]
        if self.codec:
            args += [*stream_option(CODEC, "v"), self.codec]
        if self.quality is not None:
            args += [*CRF, str(self.quality)]
        if self.bitrate:
            args += [*stream_option(BITRATE, "v"), self.bitrate]
        return tuple(args)


class FFmpegCommandBuilder:
    """Apply operations to a command and render the filter graph at :meth:`build`.

    One builder produces one output; it is not reused.
    """

    def __init__(self, ffmpeg_path: str | Path | None = None, *, overwrite: bool = True) -> None:
        self.command = FFmpegCommand(ffmpeg_path)
        self.chain = FilterChain()
        self._inputs: list[str] = []
        self._operations: list[Operation] = []
        self._audio_map: tuple[str, ...] = OPTIONAL_AUDIO
        self._built = False
        if overwrite:
            self.command.add_args(*OVERWRITE_OUTPUT)

    @property
    def filters(self) -> tuple[str, ...]:
        """Simple filters in the order they were added."""
        return self.chain.simple_filters()

    @property
    def additional_inputs(self) -> tuple[str, ...]:
        """Inputs after the primary one, e.g. overlay sources."""
        return tuple(self._inputs)

    @property
    def operations(self) -> tuple[Operation, ...]:
        """Operations applied so far."""
        return tuple(self._operations)

    def with_input(self, path: str | Path) -> Self:
        self.command.set_input(path)
        return self

    def add_input(self, path: str | Path) -> int:
        """Append ``-i path`` and return its input ordinal (``1`` for the first)."""
        self.command.add_args(*INPUT_FLAG, path)
        self._inputs.append(str(path))
        return len(self._inputs)

    def with_output(self, path: str | Path, options: OutputOptions | None = None) -> Self:
        self.command.set_output(path)
        if options is not None:
            self.command.add_args(*options.to_args())
        return self

    def add_operation(self, operation: Operation) -> Self:
        """Validate ``operation`` and apply it to the command or to this builder."""
        operation.validate()
        target = self.command if operation.target is OperationTarget.COMMAND else self
        operation.apply_to(target)
        self._operations.append(operation)
        return self

    def add_trim_operation(
        self,
        *,
        start: TimeSpec | None = None,
        end: TimeSpec | None = None,
        duration: TimeSpec | None = None,
    ) -> Self:
        return self.add_operation(TrimOperation(start=start, end=end, duration=duration))

    def add_resize_operation(
        self,
        *,
        width: int | None = None,
        height: int | None = None,
        maintain_aspect_ratio: bool = True,
    ) -> Self:
        return self.add_operation(
            ResizeOperation(width=width, height=height, maintain_aspect_ratio=maintain_aspect_ratio),
        )

    def add_crop_operation(self, width: int, height: int, x: int = 0, y: int = 0) -> Self:
        return self.add_operation(CropOperation(width=width, height=height, x=x, y=y))

    def add_rotate_operation(self, degrees: float) -> Self:
        return self.add_operation(RotateOperation(degrees=degrees))

    def add_simple_filter(self, text: str) -> Self:
        """Queue a ``-vf`` filter."""
        self.chain.add_filter(text, FilterKind.SIMPLE)
        return self

    def add_complex_filter(
        self,
        text: str,
        kind: FilterKind = FilterKind.COMPLEX,
        inputs: tuple[str, ...] = (),
        outputs: tuple[str, ...] = (),
        *,
        main_output: bool = False,
    ) -> Self:
        """Queue a ``-filter_complex`` node."""
        self.chain.add_filter(text, kind, inputs=inputs, outputs=outputs, main_output=main_output)
        return self

    def map_audio(self, *args: str) -> Self:
        """Replace the audio arguments emitted with a complex graph (``-map 0:a?``)."""
        self._audio_map = args
        return self

    def generate_label(self, prefix: str) -> str:
        """Allocate a unique filter graph label."""
        return self.chain.generate_label(prefix)

    def build(self) -> FFmpegCommand:
        """Render filters, put the output last and return the command.

        A complex filter graph takes precedence over simple filters; any simple
        filters are dropped with a warning in that case.

        Raises:
            MissingParameterError: If the input or output path is unset.

        """
        if self._built:
            return self.command
        if self.command.input_path is None:
            raise MissingParameterError("input")
        if self.command.output_path is None:
            raise MissingParameterError("output")
        graph = self.chain.render_complex()
        if graph is not None:
            simple = self.chain.render_simple()
            if simple is not None:
                logger.warning("Ignoring simple filters superseded by the complex filter graph: %s", simple)
            self.command.add_argument(*FILTER_COMPLEX, graph)
            self.command.add_args(*map_stream(self.chain.final_output_label()), *self._audio_map)
        else:
            self.command.add_filters(self.chain.simple_filters())
        self.command.validate()
        self._built = True
        return self.command

    def cleanup(self) -> None:
        """Release temporary resources held by applied operations."""
        for operation in self._operations:
            operation.cleanup()

    def __str__(self) -> str:
        return str(self.command)


__all__ = ["FFmpegCommandBuilder", "OutputOptions"]
