"""Protocols (ports) for the config manager."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class WatchOptions:
    """How a file watch reports changes.

    Attributes:
        await_write_settled: Seconds of quiet after the last event before a change is
            reported; bursts of writes inside that window collapse into one change.
        ignore_initial: Do not report the file's existence when the watch starts.
        use_polling: Poll the filesystem instead of using native OS notifications.
    """

    await_write_settled: float = 0.1
    ignore_initial: bool = True
    use_polling: bool = False


class WatchHandle(Protocol):
    """An active watch. close() stops future notifications and is idempotent."""

    def close(self) -> None: ...


class FileWatchAdapter(Protocol):
    """Reports modifications of a single file."""

    def watch(
        self,
        path: Path,
        options: WatchOptions,
        on_change: Callable[[Path], None],
        on_error: Callable[[Exception], None],
    ) -> WatchHandle: ...
