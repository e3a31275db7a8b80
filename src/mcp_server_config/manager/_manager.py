"""ConfigManager: load, validate, watch, reload and save a servers config."""

from __future__ import annotations

import os
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from ..codec import format_for, has_comments, stringify, to_plain
from ..errors import ConfigError, ConfigValidationError, InvalidConfigObjectError, NoConfigPathError
from ..loaders import read_config, write_config
from ..models.server import McpServersConfig, ServerConfig
from ..validation import SERVERS_KEY, validate_config
from ._adapters import WatchdogFileWatchAdapter
from ._protocols import FileWatchAdapter, WatchHandle, WatchOptions


@dataclass(frozen=True)
class PathSource:
    path: Path


@dataclass(frozen=True)
class ObjectSource:
    data: Mapping[str, Any]


ConfigSource = PathSource | ObjectSource


def _resolve_source(source: str | os.PathLike[str] | Mapping[str, Any] | None) -> ConfigSource | None:
    if source is None:
        return None
    if isinstance(source, (str, os.PathLike)):
        return PathSource(Path(source))
    if isinstance(source, Mapping):
        return ObjectSource(source)
    raise TypeError(f"Unsupported config source: {type(source).__name__}")


class ConfigManager:
    """Owns the current servers config and keeps it in sync with its file.

    The config is replaced wholesale on every successful load and never edited
    in place, so readers always see a complete document. Reloads triggered by
    the file watch log their failures and keep the last good config. A config
    object given to the constructor that fails validation is logged and not
    adopted; the manager starts with no config and no path.
    """

    def __init__(
        self,
        source: str | os.PathLike[str] | Mapping[str, Any] | None = None,
        *,
        watcher: FileWatchAdapter | None = None,
        watch_options: WatchOptions | None = None,
    ) -> None:
        self._watcher = watcher if watcher is not None else WatchdogFileWatchAdapter()
        self._watch_options = watch_options or WatchOptions()
        self._lock = threading.Lock()
        self._config: dict[str, Any] | None = None
        self._handle: WatchHandle | None = None
        self.config_path: Path | None = None

        resolved = _resolve_source(source)
        if isinstance(resolved, PathSource):
            self.config_path = resolved.path
        elif isinstance(resolved, ObjectSource):
            try:
                self._config = validate_config(resolved.data)
            except ConfigValidationError as e:
                logger.error(f"ConfigManager: initial config object rejected: {e}")

    def __enter__(self) -> ConfigManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop_watching()

    @property
    def watching(self) -> bool:
        return self._handle is not None

    def load(self) -> dict[str, Any]:
        """Read, parse and validate the bound file, then make it the current config.

        Raises:
            NoConfigPathError: No path is bound.
            ConfigReadError: The file could not be read.
            ConfigDecodeError: The file is not a well-formed document.
            ConfigValidationError: The document breaks a schema rule.
        """
        path = self.config_path
        if path is None:
            raise NoConfigPathError()
        with self._lock:
            config = validate_config(read_config(path))
            self._config = config
        logger.info(f"ConfigManager: loaded {len(config[SERVERS_KEY])} server(s) from {path}")
        return config

    def watch(self) -> None:
        """Reload whenever the bound file changes. Calling again while watching is a no-op."""
        if self._handle is not None:
            return
        if self.config_path is None:
            raise NoConfigPathError()
        self._handle = self._watcher.watch(
            self.config_path,
            self._watch_options,
            self._on_file_change,
            self._on_watch_error,
        )
        logger.info(f"ConfigManager: watching {self.config_path}")

    def stop_watching(self) -> None:
        handle, self._handle = self._handle, None
        if handle is None:
            return
        handle.close()
        logger.debug(f"ConfigManager: stopped watching {self.config_path}")

    def update_config(self, new_path: str | os.PathLike[str]) -> dict[str, Any]:
        """Bind a new file and load it. An active watch follows the new path."""
        was_watching = self.watching
        self.stop_watching()
        self.config_path = Path(new_path)
        if was_watching:
            self.watch()
        return self.load()

    def get_config(self) -> dict[str, Any] | None:
        return self._config

    def get_server_config(self, name: str) -> dict[str, Any] | None:
        config = self._config
        if config is None:
            return None
        return config[SERVERS_KEY].get(name)

    def get_servers(self) -> dict[str, ServerConfig]:
        """Typed views of the current server definitions, defaults applied."""
        config = self._config
        if config is None:
            return {}
        return McpServersConfig.model_validate(to_plain(config)).mcp_servers

    def save_config(
        self,
        config: Any,
        path: str | os.PathLike[str] | None = None,
    ) -> Path:
        """Write a config object to ``path`` or the bound path.

        Objects returned by :meth:`load` keep their comments and layout; plain
        dicts are written as clean documents. The current config is unchanged.
        """
        if not isinstance(config, Mapping):
            raise InvalidConfigObjectError()
        target = Path(path) if path is not None else self.config_path
        if target is None:
            raise NoConfigPathError(
                "No config path specified for saving. "
                "Initialize ConfigManager with a path or provide it to save_config."
            )
        if not isinstance(config, dict):
            config = dict(config)
        write_config(target, stringify(config, fmt=format_for(target)))
        suffix = " (comments preserved)" if has_comments(config) else ""
        logger.info(f"ConfigManager: saved config to {target}{suffix}")
        return target

    def _on_file_change(self, path: Path) -> None:
        logger.info(f"ConfigManager: {path} changed, reloading")
        try:
            self.load()
        except ConfigError as e:
            logger.error(f"ConfigManager: reload of {path} failed, keeping previous config: {e}")

    def _on_watch_error(self, error: Exception) -> None:
        logger.error(f"ConfigManager: file watcher error: {error}")
