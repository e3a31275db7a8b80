"""watchdog-backed file watch adapter."""

from __future__ import annotations

import os
import threading
from collections.abc import Callable
from pathlib import Path

from loguru import logger
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.polling import PollingObserver

from ._protocols import WatchOptions

_CHANGE_EVENTS = frozenset({"modified", "created", "moved"})


class _SettledChangeHandler(FileSystemEventHandler):
    """Filters directory events down to one file and debounces them."""

    def __init__(
        self,
        path: Path,
        settle_seconds: float,
        on_change: Callable[[Path], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        super().__init__()
        self._path = path
        self._settle_seconds = settle_seconds
        self._on_change = on_change
        self._on_error = on_error
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._closed = False

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in _CHANGE_EVENTS:
            return
        target = getattr(event, "dest_path", "") if event.event_type == "moved" else event.src_path
        if not target or os.path.realpath(os.fsdecode(target)) != str(self._path):
            return
        self.schedule()

    def schedule(self) -> None:
        with self._lock:
            if self._closed:
                return
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._settle_seconds, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._closed = True
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _fire(self) -> None:
        with self._lock:
            self._timer = None
            if self._closed:
                return
        try:
            self._on_change(self._path)
        except Exception as e:
            self._on_error(e)


class _ObserverHandle:
    def __init__(self, observer: Observer | None, handler: _SettledChangeHandler) -> None:
        self._observer = observer
        self._handler = handler

    def close(self) -> None:
        self._handler.cancel()
        observer, self._observer = self._observer, None
        if observer is not None:
            observer.stop()
            observer.join()


class WatchdogFileWatchAdapter:
    """Watches one file by observing its parent directory with watchdog."""

    def watch(
        self,
        path: Path,
        options: WatchOptions,
        on_change: Callable[[Path], None],
        on_error: Callable[[Exception], None],
    ) -> _ObserverHandle:
        target = Path(os.path.realpath(path))
        handler = _SettledChangeHandler(target, options.await_write_settled, on_change, on_error)
        observer = PollingObserver() if options.use_polling else Observer()
        try:
            observer.schedule(handler, str(target.parent), recursive=False)
            observer.start()
        except OSError as e:
            logger.debug(f"FileWatcher: could not observe {target.parent}: {e}")
            on_error(e)
            return _ObserverHandle(None, handler)
        if not options.ignore_initial and target.exists():
            handler.schedule()
        return _ObserverHandle(observer, handler)
