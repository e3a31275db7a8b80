from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(Exception):
    """Base class for every error raised while loading, validating or saving a config."""


class NoConfigPathError(ConfigError):
    """Raised when an operation needs a file path and none is known."""

    def __init__(self, message: str = "No config path specified") -> None:
        super().__init__(message)


class InvalidConfigObjectError(ConfigError):
    """Raised when save_config is handed something that is not a mapping."""

    def __init__(self) -> None:
        super().__init__("Invalid configuration object provided.")


class LoadError(ConfigError):
    """Raised when a config file cannot be turned into a document tree.

    Attributes:
        path: The file that could not be loaded, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class ConfigReadError(LoadError):
    """The file could not be read (missing, unreadable, not UTF-8)."""


class ConfigDecodeError(LoadError):
    """The file was read but is not a well-formed document."""


class ConfigValidationError(ConfigError):
    """Raised when a document fails a schema rule.

    Attributes:
        server: Name of the offending server entry, or None for document-level rules.
    """

    def __init__(self, message: str, server: str | None = None) -> None:
        self.server = server
        super().__init__(message)


class MissingServersSectionError(ConfigValidationError):
    """The document has no `mcpServers` object."""

    def __init__(self) -> None:
        super().__init__("Missing or invalid mcpServers configuration")


class MissingIdentifierError(ConfigValidationError):
    """A server entry has neither a `command` nor a `url`."""

    def __init__(self, server: str) -> None:
        super().__init__(
            f"Server '{server}' must include either command (for stdio) or url (for sse)",
            server=server,
        )


class InvalidEnvError(ConfigValidationError):
    """A server's `env` is present but is not an object."""

    def __init__(self, server: str) -> None:
        super().__init__(f"Server '{server}' has invalid environment config", server=server)


class DevNotSupportedOnRemoteError(ConfigValidationError):
    """A remote (url) server declares a `dev` overlay."""

    def __init__(self, server: str) -> None:
        super().__init__(
            f"Server '{server}' dev field is only supported for stdio servers", server=server
        )


class DevCwdMustBeAbsoluteError(ConfigValidationError):
    """A `dev` overlay is not an object, or its `cwd` is missing or relative."""

    def __init__(self, server: str) -> None:
        super().__init__(f"Server '{server}' dev.cwd must be an absolute path", server=server)


class DevWatchMustBeStringArrayError(ConfigValidationError):
    """A `dev.watch` value is not a list of strings."""

    def __init__(self, server: str) -> None:
        super().__init__(
            f"Server '{server}' dev.watch must be an array of strings", server=server
        )


class DevDebounceMustBeNumberError(ConfigValidationError):
    """A `dev.debounce` value is not a number."""

    def __init__(self, server: str) -> None:
        super().__init__(f"Server '{server}' dev.debounce must be a number", server=server)


class FetchError(Exception):
    """Raised when a proxied HTTP request fails (network error, bad proxy, timeout).

    Attributes:
        url: The URL that failed, if applicable.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)
