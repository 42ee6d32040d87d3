"""Default constants for option models."""

from __future__ import annotations

from ffchain.models.types import ConcatStrategy, Container

DEFAULT_CONTAINER = Container.MP4
DEFAULT_OUTPUT_SUFFIX = "_edit"
DEFAULT_CONCAT_STRATEGY = ConcatStrategy.FILTER

__all__ = ["DEFAULT_CONCAT_STRATEGY", "DEFAULT_CONTAINER", "DEFAULT_OUTPUT_SUFFIX"]
