"""Shared Cyclopts groups for option models."""

from __future__ import annotations

from cyclopts import Group

SOURCE_GROUP = Group.create_ordered("Source")
OUTPUT_GROUP = Group.create_ordered("Output")
TIME_GROUP = Group.create_ordered("Time")
VIDEO_GROUP = Group.create_ordered("Video")
COLOR_GROUP = Group.create_ordered("Color")
TEXT_GROUP = Group.create_ordered("Text")
OVERLAY_GROUP = Group.create_ordered("Overlay")
ENCODING_GROUP = Group.create_ordered("Encoding")
CONCAT_GROUP = Group.create_ordered("Concat")
RUNTIME_GROUP = Group.create_ordered("Runtime")

__all__ = [
    "COLOR_GROUP",
    "CONCAT_GROUP",
    "ENCODING_GROUP",
    "OUTPUT_GROUP",
    "OVERLAY_GROUP",
    "RUNTIME_GROUP",
    "SOURCE_GROUP",
    "TEXT_GROUP",
    "TIME_GROUP",
    "VIDEO_GROUP",
]
