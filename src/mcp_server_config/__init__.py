"""Load, validate, watch and save MCP server configuration documents."""

from .codec import format_for, has_comments, parse, preserves_formatting, stringify
from .errors import (
    ConfigDecodeError,
    ConfigError,
    ConfigReadError,
    ConfigValidationError,
    DevCwdMustBeAbsoluteError,
    DevDebounceMustBeNumberError,
    DevNotSupportedOnRemoteError,
    DevWatchMustBeStringArrayError,
    FetchError,
    InvalidConfigObjectError,
    InvalidEnvError,
    LoadError,
    MissingIdentifierError,
    MissingServersSectionError,
    NoConfigPathError,
)
from .fetchers import NoProxyRule, parse_no_proxy, proxy_fetch, should_bypass_proxy
from .loaders import read_config, write_config
from .manager import (
    ConfigManager,
    InMemoryFileWatchAdapter,
    WatchdogFileWatchAdapter,
    WatchOptions,
    make_config_manager,
)
from .models import (
    DevConfig,
    McpServersConfig,
    RemoteServerConfig,
    ServerConfig,
    StdioServerConfig,
)
from .validation import (
    ValidationIssue,
    ValidationResult,
    check_config,
    check_config_file,
    validate_config,
    validate_config_file,
)

__all__ = [
    "ConfigDecodeError",
    "ConfigError",
    "ConfigManager",
    "ConfigReadError",
    "ConfigValidationError",
    "DevConfig",
    "DevCwdMustBeAbsoluteError",
    "DevDebounceMustBeNumberError",
    "DevNotSupportedOnRemoteError",
    "DevWatchMustBeStringArrayError",
    "FetchError",
    "InMemoryFileWatchAdapter",
    "InvalidConfigObjectError",
    "InvalidEnvError",
    "LoadError",
    "McpServersConfig",
    "MissingIdentifierError",
    "MissingServersSectionError",
    "NoConfigPathError",
    "NoProxyRule",
    "RemoteServerConfig",
    "ServerConfig",
    "StdioServerConfig",
    "ValidationIssue",
    "ValidationResult",
    "WatchOptions",
    "WatchdogFileWatchAdapter",
    "check_config",
    "check_config_file",
    "format_for",
    "has_comments",
    "make_config_manager",
    "parse",
    "parse_no_proxy",
    "preserves_formatting",
    "proxy_fetch",
    "read_config",
    "should_bypass_proxy",
    "stringify",
    "validate_config",
    "validate_config_file",
    "write_config",
]
