"""Turn command-line options into a processor run."""

from __future__ import annotations

import logging
import sys
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter

from ffchain.errors import FFChainError
from ffchain.models import RuntimeContext
from ffchain.models.options import Options
from ffchain.processor import Processor
from ffchain.tools.helpers import emit_status

from .executor import CONVERSION_FAILED, ExecutionResult, FFmpegExecutor

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

logger = logging.getLogger(__name__)


def build_processor(opts: Options, runtime: RuntimeContext) -> Processor:
    """Translate ``opts`` into a configured :class:`Processor`."""
    processor = Processor(ffmpeg_path=opts.runtime.ffmpeg, executor=FFmpegExecutor(runtime))
    if opts.concat.append:
        processor.concat(
            [opts.source, *opts.concat.append],
            strategy=opts.concat.strategy,
            video_only=opts.concat.video_only,
        )
    else:
        processor.input(opts.source)

    if opts.time.is_set:
        processor.trim(
            start=opts.time.start_seconds,
            end=opts.time.end_seconds,
            duration=opts.time.duration_seconds,
        )

    video = opts.video
    if video.crop_box is not None:
        processor.crop(*video.crop_box)
    if video.resizes:
        processor.resize(video.width, video.height, maintain_aspect_ratio=video.keep_aspect)
    if video.rotate is not None:
        processor.rotate(video.rotate)
    if video.speed is not None:
        processor.speed(video.speed)

    if opts.color.is_set:
        processor.adjust_color(opts.color.brightness, opts.color.contrast, opts.color.saturation)

    if opts.overlay.image is not None:
        overlay = opts.overlay
        processor.overlay(
            overlay.image,
            position=overlay.position,
            opacity=overlay.opacity,
            scale=overlay.scale,
            start=overlay.start,
            end=overlay.end,
        )

    if opts.text.text is not None:
        text = opts.text
        processor.text(
            text.text,
            position=text.position,
            font_size=text.font_size,
            font_color=text.font_color,
            font_file=text.font_file,
            background_color=text.background,
            start=text.start,
            end=text.end,
        )

    settings = opts.encoding.settings()
    if settings:
        processor.encoding(**settings)

    processor.output(opts.output_path)
    return processor


def run_conversion(
    opts: Options,
    status_callback: Callable[[str], None] | None = None,
) -> tuple[tuple[str, ...], ExecutionResult]:
    """Build and optionally execute the FFmpeg command described by ``opts``.

    Returns:
        The full command line and the execution result.

    Raises:
        FFChainError: For invalid settings or a failed FFmpeg run.

    """
    with RuntimeContext(
        verbosity=opts.runtime.verbosity,
        dry_run=opts.runtime.dry_run,
        status_callback=status_callback,
    ) as runtime:
        processor = build_processor(opts, runtime)
        result = processor.execute()
        if result.output_path:
            emit_status(str(Path(result.output_path).absolute()), status_callback=status_callback)
        return tuple(processor.command.to_list()), result


def ffchain(
    opts: Options,
    status_callback: Annotated[Callable[[str], None] | None, Parameter(show=False)] = None,  # type: ignore[call-arg]
) -> int:
    """Apply edits to a source video with FFmpeg."""
    status_func = print if status_callback is None else status_callback
    try:
        run_conversion(opts, status_callback=status_func)
    except (FFChainError, OSError) as e:
        logger.debug("Conversion failed", exc_info=True)
        err_func = partial(print, file=sys.stderr, flush=True) if status_callback is None else status_callback
        err_func(f"{CONVERSION_FAILED}: {e}")
        return 1
    return 0


__all__ = ["build_processor", "ffchain", "run_conversion"]
