from __future__ import annotations

import copy
import posixpath
from collections.abc import Iterator, Mapping
from pathlib import PurePath
from typing import Any

from ..errors import (
    ConfigValidationError,
    DevCwdMustBeAbsoluteError,
    DevDebounceMustBeNumberError,
    DevNotSupportedOnRemoteError,
    DevWatchMustBeStringArrayError,
    InvalidEnvError,
    MissingIdentifierError,
    MissingServersSectionError,
)
from ._result import ValidationIssue, ValidationResult

SERVERS_KEY = "mcpServers"
STDIO_TYPE = "stdio"
DEFAULT_REMOTE_TYPE = "sse"
REMOTE_TYPES = frozenset({"sse", "streamable-http", "http"})


def validate_config(data: Any) -> dict[str, Any]:
    """Validate a parsed document and return a normalized deep copy.

    Stops at the first failing rule. The input is never modified, and any
    comments carried by the parsed tree survive in the returned copy.
    """
    if not _has_servers_section(data):
        raise MissingServersSectionError()
    config = copy.deepcopy(data)
    for name, server in config[SERVERS_KEY].items():
        for _field, error in _server_errors(name, server):
            raise error
        _normalize(server)
    return config


def check_config(data: Any) -> ValidationResult:
    """Collect every rule failure instead of stopping at the first one."""
    if not _has_servers_section(data):
        missing = MissingServersSectionError()
        return ValidationResult(issues=[ValidationIssue("error", SERVERS_KEY, str(missing), error=missing)])
    issues: list[ValidationIssue] = []
    for name, server in data[SERVERS_KEY].items():
        prefix = f"{SERVERS_KEY}.{name}"
        for field, error in _server_errors(name, server):
            path = f"{prefix}.{field}" if field else prefix
            issues.append(ValidationIssue("error", path, str(error), server=name, error=error))
        replaced = _replaced_type(server)
        if replaced is not None:
            issues.append(
                ValidationIssue(
                    "warning",
                    f"{prefix}.type",
                    f"Server '{name}' type '{server['type']}' will be replaced with '{replaced}'",
                    server=name,
                )
            )
    return ValidationResult(issues=issues)


def _has_servers_section(data: Any) -> bool:
    return isinstance(data, Mapping) and isinstance(data.get(SERVERS_KEY), Mapping)


def _identifier(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _is_stdio(server: Mapping[str, Any]) -> bool:
    return _identifier(server.get("command"))


def _server_errors(name: str, server: Any) -> Iterator[tuple[str, ConfigValidationError]]:
    if not isinstance(server, Mapping) or not (
        _is_stdio(server) or _identifier(server.get("url"))
    ):
        yield "", MissingIdentifierError(name)
        return

    if "env" in server and not isinstance(server["env"], Mapping):
        yield "env", InvalidEnvError(name)

    if "dev" not in server:
        return
    if not _is_stdio(server):
        yield "dev", DevNotSupportedOnRemoteError(name)
        return

    dev = server["dev"]
    # A non-object dev block reports the same error as a missing cwd.
    if not isinstance(dev, Mapping) or not _is_absolute(dev.get("cwd")):
        yield "dev.cwd", DevCwdMustBeAbsoluteError(name)
        if not isinstance(dev, Mapping):
            return
    if "watch" in dev:
        watch = dev["watch"]
        if not isinstance(watch, list) or not all(isinstance(p, str) for p in watch):
            yield "dev.watch", DevWatchMustBeStringArrayError(name)
    if "debounce" in dev:
        debounce = dev["debounce"]
        if isinstance(debounce, bool) or not isinstance(debounce, (int, float)):
            yield "dev.debounce", DevDebounceMustBeNumberError(name)


def _is_absolute(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    return posixpath.isabs(value) or PurePath(value).is_absolute()


def _replaced_type(server: Any) -> str | None:
    """The type _normalize would write over an explicit, inconsistent one."""
    if not isinstance(server, Mapping) or "type" not in server:
        return None
    declared = server["type"]
    if _is_stdio(server):
        return STDIO_TYPE if declared != STDIO_TYPE else None
    if _identifier(server.get("url")) and declared not in REMOTE_TYPES:
        return DEFAULT_REMOTE_TYPE
    return None


def _normalize(server: dict[str, Any]) -> None:
    if _is_stdio(server):
        if server.get("args") is None:
            server["args"] = []
        server["type"] = STDIO_TYPE
    elif server.get("type") not in REMOTE_TYPES:
        server["type"] = DEFAULT_REMOTE_TYPE
