"""Expose models and type definitions.

CLI option models live in :mod:`ffchain.models.options` and are imported from
there directly.
"""

from .context import RuntimeContext, Verbosity
from .time import TimeCode, TimeSpec
from .types import ConcatStrategy, Container, FilterKind, OperationTarget, Position, Preset

__all__ = [
    "ConcatStrategy",
    "Container",
    "FilterKind",
    "OperationTarget",
    "Position",
    "Preset",
    "RuntimeContext",
    "TimeCode",
    "TimeSpec",
    "Verbosity",
]
