"""Cut a time range out of the input."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, ClassVar

from ffchain.errors import InvalidParameterError
from ffchain.models import OperationTarget, TimeSpec
from ffchain.tools import format_time_spec, time_spec_to_seconds
from ffchain.tools.args import DURATION, END, START

from .base import OperationModel

if TYPE_CHECKING:
    from ffchain.backend.builder.command import FFmpegCommand

#: Allowed mismatch between ``start + duration`` and ``end``.
TOLERANCE_SECONDS = 0.001


class TrimOperation(OperationModel):
    """Keep ``start``..``end`` or ``start`` plus ``duration`` of the input.

    ``end`` wins over ``duration`` when both are present; they then have to
    describe the same range.
    """

    target: ClassVar[OperationTarget] = OperationTarget.COMMAND

    start: TimeSpec | None = None
    end: TimeSpec | None = None
    duration: TimeSpec | None = None

    def validate(self) -> None:  # type: ignore[override]
        if self.start is None and self.end is None and self.duration is None:
            raise InvalidParameterError("trim", "At least one of start, end or duration is required")
        start = time_spec_to_seconds(self.start) if self.start is not None else 0.0
        end = time_spec_to_seconds(self.end) if self.end is not None else None
        duration = time_spec_to_seconds(self.duration) if self.duration is not None else None
        if end is not None and end <= start:
            raise InvalidParameterError("end", "End time must be after start time")
        if duration is not None and duration <= 0:
            raise InvalidParameterError("duration", "Duration must be greater than 0")
        if (
            self.start is not None
            and end is not None
            and duration is not None
            and not math.isclose(start + duration, end, abs_tol=TOLERANCE_SECONDS)
        ):
            raise InvalidParameterError("duration", "start + duration does not match end")

    def apply_to(self, target: FFmpegCommand) -> None:
        if self.start is not None:
            target.add_argument(*START, format_time_spec(self.start))
        if self.end is not None:
            target.add_argument(*END, format_time_spec(self.end))
        elif self.duration is not None:
            target.add_argument(*DURATION, format_time_spec(self.duration))

    def describe(self) -> str:
        parts = [
            f"{name} {format_time_spec(value)}"
            for name, value in (("from", self.start), ("to", self.end), ("for", self.duration))
            if value is not None
        ]
        return "Trim " + " ".join(parts)


__all__ = ["TOLERANCE_SECONDS", "TrimOperation"]
