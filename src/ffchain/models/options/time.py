"""Trim range option models."""

from __future__ import annotations

from cyclopts import Parameter
from pydantic import BaseModel, Field, field_validator, model_validator

from ffchain.tools import parse_timespan_to_seconds

from .groups import TIME_GROUP

_EXAMPLES = "Examples: '90s', '1m20s', '00:01:30'."


@Parameter(group=TIME_GROUP)
class TimeOptions(BaseModel):
    """Portion of the source kept in the output.

    ``end`` and ``duration`` are alternatives; giving both is an error.
    """

    start: str | None = Field(None, description=f"Where the output starts. {_EXAMPLES}")
    end: str | None = Field(None, description=f"Where the output stops. {_EXAMPLES}")
    duration: str | None = Field(None, description=f"Length of the output. {_EXAMPLES}")

    @field_validator("start", "end", "duration")
    @classmethod
    def check_timespan(cls, v: str | None) -> str | None:
        try:
            parse_timespan_to_seconds(v)
        except ValueError as exc:
            raise ValueError(f"Invalid time format: {v}") from exc
        return v

    @model_validator(mode="after")
    def check_exclusive(self) -> TimeOptions:
        if self.end is not None and self.duration is not None:
            raise ValueError("Use either 'end' or 'duration', not both")
        return self

    @property
    def is_set(self) -> bool:
        return (self.start, self.end, self.duration) != (None, None, None)

    @property
    def start_seconds(self) -> float | None:
        return parse_timespan_to_seconds(self.start)

    @property
    def end_seconds(self) -> float | None:
        return parse_timespan_to_seconds(self.end)

    @property
    def duration_seconds(self) -> float | None:
        return parse_timespan_to_seconds(self.duration)


__all__ = ["TimeOptions"]
