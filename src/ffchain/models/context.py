"""Session state shared by the processor, the executor and the CLI."""

from __future__ import annotations

import os
import tempfile
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from diskcache import Cache

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable
    from types import TracebackType

#: Directory of the on-disk cache; ``$FFCHAIN_CACHE`` moves it.
_CACHE_DIR = Path(os.getenv("FFCHAIN_CACHE", tempfile.gettempdir())) / "ffchain-cache"


class Verbosity(IntEnum):
    """How much of each FFmpeg run is reported."""

    QUIET = 0
    COMMANDS = 1  # command banners and the FFmpeg version
    OUTPUT = 2  # plus FFmpeg's own output, streamed


@dataclass(slots=True)
class RuntimeContext(AbstractContextManager):
    """Flags, status routing and a disk cache for one processing session.

    Use it as a context manager so the cache is closed when the session ends.
    """

    verbosity: Verbosity = Verbosity.QUIET
    dry_run: bool = False
    status_callback: Callable[[str], None] | None = None
    cache: Cache = field(default_factory=lambda: Cache(str(_CACHE_DIR)))

    def remember(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        """Return the cached value for ``key``, computing and storing it on a miss."""
        value = self.cache.get(key)
        if value is None:
            value = compute()
            self.cache[key] = value
        return value

    def close(self) -> None:
        self.cache.close()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["RuntimeContext", "Verbosity"]
