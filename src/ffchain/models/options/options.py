"""Top-level option model for the command line."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from cyclopts import Parameter
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ffchain.models.types import ConcatStrategy, Container

from .defaults import DEFAULT_CONTAINER, DEFAULT_OUTPUT_SUFFIX
from .encoding import ConcatOptions, EncodingOptions
from .groups import OUTPUT_GROUP, SOURCE_GROUP
from .layers import OverlayOptions, TextOptions
from .runtime import RuntimeOptions
from .time import TimeOptions
from .video import ColorOptions, VideoOptions


def _existing_file(path: Path) -> Path:
    resolved = path.expanduser().absolute()
    if not resolved.is_file():
        raise ValueError(f"File does not exist: {resolved}")
    return resolved


def _container_for(path: Path) -> Container | None:
    """Return the container named by ``path``'s extension, if it is a known one."""
    try:
        return Container(path.suffix.lower().lstrip("."))
    except ValueError:
        return None


@Parameter(name="*")
class Options(BaseModel):
    """Edits applied to one source video."""

    model_config = ConfigDict(extra="forbid")

    source: Annotated[Path, Parameter(group=SOURCE_GROUP)] = Field(description="Video to edit.")
    output: Annotated[Path | None, Parameter(group=OUTPUT_GROUP)] = Field(
        None,
        description=f"Where to write the result. [default: source name plus '{DEFAULT_OUTPUT_SUFFIX}']",
    )
    container: Annotated[Container | None, Parameter(group=OUTPUT_GROUP)] = Field(
        None,
        description=f"Output container; follows the output extension if omitted. [default: {DEFAULT_CONTAINER.value}]",
    )
    time: TimeOptions = Field(default_factory=TimeOptions)
    video: VideoOptions = Field(default_factory=VideoOptions)
    color: ColorOptions = Field(default_factory=ColorOptions)
    text: TextOptions = Field(default_factory=TextOptions)
    overlay: OverlayOptions = Field(default_factory=OverlayOptions)
    encoding: EncodingOptions = Field(default_factory=EncodingOptions)
    concat: ConcatOptions = Field(default_factory=ConcatOptions)
    runtime: RuntimeOptions = Field(default_factory=RuntimeOptions)

    @field_validator("source")
    @classmethod
    def check_source(cls, v: Path) -> Path:
        return _existing_file(v)

    @field_validator("output")
    @classmethod
    def absolute_output(cls, v: Path | None) -> Path | None:
        """Resolve ``~`` and relative paths; missing directories are created at run time."""
        return None if v is None else v.expanduser().absolute()

    @model_validator(mode="after")
    def reconcile_container(self) -> Options:
        """Take the container from the output extension, rejecting contradictions."""
        if self.output is None:
            return self
        named = _container_for(self.output)
        if named is None:
            return self
        if self.container is None:
            self.container = named
        elif self.container is not named:
            raise ValueError(
                f"Output extension '{self.output.suffix}' conflicts with container '{self.container.value}'",
            )
        return self

    @model_validator(mode="after")
    def check_concat(self) -> Options:
        self.concat.append = [_existing_file(p) for p in self.concat.append]
        if self.concat.video_only and self.concat.strategy is ConcatStrategy.DEMUXER:
            raise ValueError("video_only needs the concat filter strategy")
        return self

    @property
    def output_path(self) -> Path:
        """Explicit output, or ``<stem>_edit.<container>`` next to the source."""
        if self.output is not None:
            return self.output
        container = self.container or DEFAULT_CONTAINER
        return self.source.with_name(f"{self.source.stem}{DEFAULT_OUTPUT_SUFFIX}{container.extension}")


__all__ = ["Options"]
