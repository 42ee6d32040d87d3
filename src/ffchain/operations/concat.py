"""Join several inputs end to end."""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import PrivateAttr, field_validator

from ffchain.errors import InvalidParameterError
from ffchain.models import ConcatStrategy, FilterKind, OperationTarget
from ffchain.tools.args import (
    CONCAT_DEMUXER,
    COPY_ALL,
    DROP_AUDIO,
    FORMAT,
    UNSAFE_PATHS,
    label,
    map_stream,
)

from .base import OperationModel, require_file

if TYPE_CHECKING:
    from ffchain.backend.builder.command_builder import FFmpegCommandBuilder

logger = logging.getLogger(__name__)

VIDEO_OUT = "[outv]"
AUDIO_OUT = "[outa]"


def quote_list_entry(path: Path) -> str:
    """Return a concat demuxer ``file`` line for ``path``."""
    escaped = str(path.absolute()).replace("'", "'\\''")
    return f"file '{escaped}'"


class ConcatOperation(OperationModel):
    """Concatenate ``inputs`` with the concat filter or the concat demuxer.

    The demuxer strategy writes a list file that stays on disk until
    :meth:`cleanup` is called.
    """

    target: ClassVar[OperationTarget] = OperationTarget.BUILDER

    inputs: list[Path]
    strategy: ConcatStrategy = ConcatStrategy.FILTER
    video_only: bool = False
    temp_dir: Path | None = None

    _list_file: Path | None = PrivateAttr(default=None)

    @field_validator("strategy", mode="before")
    @classmethod
    def validate_strategy(cls, v: Any) -> Any:
        """Report unknown strategies as :class:`InvalidParameterError`."""
        if isinstance(v, ConcatStrategy):
            return v
        try:
            return ConcatStrategy(v)
        except ValueError:
            raise InvalidParameterError("strategy", "Strategy must be either 'demuxer' or 'filter'") from None

    def validate(self) -> None:  # type: ignore[override]
        if not self.inputs:
            raise InvalidParameterError("inputs", "At least one input file is required")
        for path in self.inputs:
            require_file(path)
        if self.video_only and self.strategy is ConcatStrategy.DEMUXER:
            raise InvalidParameterError("video_only", "Video-only joins need the filter strategy")

    @property
    def list_file(self) -> Path | None:
        """Demuxer list written by :meth:`apply_to`, if any."""
        return self._list_file

    def filter_graph(self, ordinals: Sequence[int] | None = None) -> str:
        """Return the ``concat`` filter graph joining every input.

        ``ordinals`` are the input indexes of :attr:`inputs`; they default to
        ``0..n-1``.
        """
        indexes = range(len(self.inputs)) if ordinals is None else ordinals
        return "".join(self.stream_labels(indexes)) + self._concat_filter() + "".join(self._outputs())

    def stream_labels(self, ordinals: Sequence[int]) -> list[str]:
        kinds = ("v",) if self.video_only else ("v", "a")
        return [label(kind, input_index=i) for i in ordinals for kind in kinds]

    def _concat_filter(self) -> str:
        if self.video_only:
            return f"concat=n={len(self.inputs)}:v=1"
        return f"concat=n={len(self.inputs)}:v=1:a=1"

    def _outputs(self) -> tuple[str, ...]:
        return (VIDEO_OUT,) if self.video_only else (VIDEO_OUT, AUDIO_OUT)

    def list_contents(self) -> str:
        return "\n".join(quote_list_entry(path) for path in self.inputs) + "\n"

    def apply_to(self, target: FFmpegCommandBuilder) -> None:
        if self.strategy is ConcatStrategy.DEMUXER:
            self._apply_demuxer(target)
        else:
            self._apply_filter(target)

    def _apply_filter(self, builder: FFmpegCommandBuilder) -> None:
        first, *rest = self.inputs
        primary = builder.command.input_path
        if primary is not None and Path(primary).absolute() != first.absolute():
            raise InvalidParameterError("inputs", "The first concat input must be the command input")
        if builder.chain.has_complex_filters():
            raise InvalidParameterError("inputs", "Concat must come before other complex filters")
        if primary is None:
            builder.with_input(first)
        ordinals = [0, *(builder.add_input(path) for path in rest)]
        builder.add_complex_filter(
            self._concat_filter(),
            FilterKind.COMPLEX,
            inputs=tuple(self.stream_labels(ordinals)),
            outputs=self._outputs(),
            main_output=True,
        )
        if self.video_only:
            builder.map_audio(*DROP_AUDIO)
        else:
            builder.map_audio(*map_stream(AUDIO_OUT))

    def _apply_demuxer(self, builder: FFmpegCommandBuilder) -> None:
        command = builder.command
        if command.input_path is not None:
            raise InvalidParameterError("strategy", "The demuxer strategy cannot be combined with another input")
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            prefix="concat-",
            suffix=".txt",
            dir=self.temp_dir,
            delete=False,
        ) as f:
            f.write(self.list_contents())
        self._list_file = Path(f.name)
        logger.debug("Wrote concat list %s", self._list_file)
        command.add_args(*FORMAT, CONCAT_DEMUXER, *UNSAFE_PATHS)
        command.set_input(self._list_file)
        command.add_args(*COPY_ALL)

    def cleanup(self) -> None:
        """Remove the demuxer list file."""
        if self._list_file is not None:
            self._list_file.unlink(missing_ok=True)
            self._list_file = None

    def describe(self) -> str:
        return f"Concatenate {len(self.inputs)} inputs using {self.strategy.value}"


__all__ = ["ConcatOperation", "quote_list_entry"]
