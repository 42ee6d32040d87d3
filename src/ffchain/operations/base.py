"""Operation protocol and the shared pydantic base for concrete operations."""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Protocol, Self, runtime_checkable

from pydantic import BaseModel, ConfigDict, model_validator

from ffchain.errors import InputFileError, InvalidParameterError
from ffchain.models import OperationTarget


@runtime_checkable
class Operation(Protocol):
    """A validated unit of work applied to a command or a builder.

    ``target`` tells the builder whether :meth:`apply_to` receives the
    :class:`~ffchain.backend.builder.command.FFmpegCommand` or the
    :class:`~ffchain.backend.builder.command_builder.FFmpegCommandBuilder`.
    """

    target: ClassVar[OperationTarget]

    def validate(self) -> None:
        """Raise if the parameters are unusable."""

    def apply_to(self, target: Any) -> None:
        """Append this operation's arguments or filters to ``target``."""

    def describe(self) -> str:
        """Return a short human-readable summary."""

    def cleanup(self) -> None:
        """Release temporary resources after the command ran."""


class OperationModel(BaseModel):
    """Frozen parameter model that validates itself on construction."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    target: ClassVar[OperationTarget]

    @model_validator(mode="after")
    def check_parameters(self) -> Self:
        """Run :meth:`validate` once all fields are parsed."""
        self.validate()
        return self

    def validate(self) -> None:  # type: ignore[override]
        """Raise :class:`~ffchain.errors.FFChainError` subclasses on bad input."""

    def cleanup(self) -> None:
        """Nothing to release by default."""

    def describe(self) -> str:
        fields = ", ".join(f"{k}={v}" for k, v in self.model_dump(exclude_none=True).items())
        return f"{type(self).__name__}({fields})"


def require_range(name: str, value: float | None, low: float, high: float) -> None:
    """Raise unless ``value`` is ``None`` or within ``[low, high]``."""
    if value is not None and not low <= value <= high:
        raise InvalidParameterError(name, f"must be between {low:g} and {high:g}, got {value}")


def require_positive(name: str, value: float | None) -> None:
    """Raise unless ``value`` is ``None`` or greater than zero."""
    if value is not None and value <= 0:
        raise InvalidParameterError(name, f"must be greater than 0, got {value}")


def require_non_negative(name: str, value: float | None) -> None:
    """Raise unless ``value`` is ``None`` or at least zero."""
    if value is not None and value < 0:
        raise InvalidParameterError(name, f"must not be negative, got {value}")


def require_file(path: str | Path) -> None:
    """Raise :class:`InputFileError` unless ``path`` is an existing file."""
    if not Path(path).is_file():
        raise InputFileError(str(path), "File does not exist")


__all__ = [
    "Operation",
    "OperationModel",
    "require_file",
    "require_non_negative",
    "require_positive",
    "require_range",
]
