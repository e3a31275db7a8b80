"""In-memory watch adapter for testing (no filesystem events)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ._protocols import WatchOptions


@dataclass
class InMemoryWatch:
    path: Path
    options: WatchOptions
    on_change: Callable[[Path], None]
    on_error: Callable[[Exception], None]
    closed: bool = False

    def close(self) -> None:
        self.closed = True

    def emit_change(self) -> None:
        if self.closed:
            return
        try:
            self.on_change(self.path)
        except Exception as e:
            self.on_error(e)

    def emit_error(self, error: Exception) -> None:
        if not self.closed:
            self.on_error(error)


class InMemoryFileWatchAdapter:
    def __init__(self) -> None:
        self.watches: list[InMemoryWatch] = []

    def watch(
        self,
        path: Path,
        options: WatchOptions,
        on_change: Callable[[Path], None],
        on_error: Callable[[Exception], None],
    ) -> InMemoryWatch:
        handle = InMemoryWatch(path, options, on_change, on_error)
        self.watches.append(handle)
        return handle

    @property
    def active(self) -> list[InMemoryWatch]:
        return [w for w in self.watches if not w.closed]
