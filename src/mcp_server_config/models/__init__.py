from .server import (
    DEFAULT_DEV_DEBOUNCE_MS,
    DevConfig,
    McpServersConfig,
    RemoteServerConfig,
    ServerConfig,
    StdioServerConfig,
)

__all__ = [
    "DEFAULT_DEV_DEBOUNCE_MS",
    "DevConfig",
    "McpServersConfig",
    "RemoteServerConfig",
    "ServerConfig",
    "StdioServerConfig",
]
