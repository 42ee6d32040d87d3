"""FFmpeg argument tokens and stream selector helpers.

Flags are tuples so they can be splatted next to their values.
"""

INPUT_FLAG: tuple[str, ...] = ("-i",)  #: Next token is an input path.
OVERWRITE_OUTPUT: tuple[str, ...] = ("-y",)  #: Replace the output without asking.
FORMAT: tuple[str, ...] = ("-f",)  #: Force a container or demuxer.
START: tuple[str, ...] = ("-ss",)  #: Start timestamp.
END: tuple[str, ...] = ("-to",)  #: Stop timestamp.
DURATION: tuple[str, ...] = ("-t",)  #: Length to keep after the start.
SIMPLE_FILTERS: tuple[str, ...] = ("-vf",)  #: Comma-joined video filter chain.
VIDEO_FILTER: tuple[str, ...] = ("-filter:v",)  #: One video filter.
AUDIO_FILTER: tuple[str, ...] = ("-filter:a",)  #: Audio filter chain.
FILTER_COMPLEX: tuple[str, ...] = ("-filter_complex",)  #: Labeled filter graph.
CRF: tuple[str, ...] = ("-crf",)  #: Constant rate factor.
PRESET: tuple[str, ...] = ("-preset",)  #: Encoder preset.
UNSAFE_PATHS: tuple[str, ...] = ("-safe", "0")  #: Allow absolute paths in concat lists.
COPY_ALL: tuple[str, ...] = ("-c", "copy")  #: Copy every stream as is.
DROP_AUDIO: tuple[str, ...] = ("-an",)  #: Leave audio out of the output.
CONCAT_DEMUXER = "concat"  #: Demuxer reading a list of files.

CODEC = "-c"  #: Per-stream encoder option.
BITRATE = "-b"  #: Per-stream bitrate option.
MAP_FLAG = "-map"


def stream_option(option: str, kind: str) -> tuple[str, ...]:
    """Return ``option`` scoped to one stream type, e.g. ``-c:v`` or ``-b:a``."""
    return (f"{option}:{kind}",)


def stream(kind: str, *, input_index: int = 0, optional: bool = False) -> str:
    """Return a stream specifier such as ``1:v``; ``optional`` appends ``?``."""
    return f"{input_index}:{kind}" + ("?" if optional else "")


def label(kind: str, *, input_index: int = 0) -> str:
    """Return a filter graph input label such as ``[1:v]``."""
    return f"[{stream(kind, input_index=input_index)}]"


def map_stream(selector: str) -> tuple[str, ...]:
    """Return ``-map`` for a stream specifier or a filter graph label."""
    return (MAP_FLAG, selector)


MAIN_VIDEO = label("v")  #: Video of the primary input.
OPTIONAL_AUDIO = map_stream(stream("a", optional=True))  #: Keep source audio when there is any.
