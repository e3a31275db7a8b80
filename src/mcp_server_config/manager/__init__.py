"""Config management API: load, validate, watch and save servers config."""

from __future__ import annotations

import os
from pathlib import Path

from ._adapters import WatchdogFileWatchAdapter
from ._in_memory import InMemoryFileWatchAdapter, InMemoryWatch
from ._manager import ConfigManager, ConfigSource, ObjectSource, PathSource
from ._protocols import FileWatchAdapter, WatchHandle, WatchOptions

CONFIG_PATH_ENV = "MCP_SERVERS_CONFIG"


def default_config_path() -> Path:
    """$MCP_SERVERS_CONFIG if set, else ~/.config/mcp-servers/servers.yaml."""
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "mcp-servers" / "servers.yaml"


def make_config_manager(
    path: str | os.PathLike[str] | None = None,
    watch_options: WatchOptions | None = None,
) -> ConfigManager:
    """Build a ConfigManager bound to a file and backed by watchdog.

    path: defaults to default_config_path()
    """
    return ConfigManager(
        Path(path) if path is not None else default_config_path(),
        watcher=WatchdogFileWatchAdapter(),
        watch_options=watch_options,
    )


__all__ = [
    "CONFIG_PATH_ENV",
    "ConfigManager",
    "ConfigSource",
    "FileWatchAdapter",
    "InMemoryFileWatchAdapter",
    "InMemoryWatch",
    "ObjectSource",
    "PathSource",
    "WatchHandle",
    "WatchOptions",
    "WatchdogFileWatchAdapter",
    "default_config_path",
    "make_config_manager",
]
