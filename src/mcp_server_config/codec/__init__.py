"""Comment-preserving document codec.

Two formats are supported. JSON documents (``.json``, ``.jsonc``, ``.json5``)
may carry ``//`` and ``/* */`` comments and are written back as JSON through
json-five. Every other document is YAML, handled by ruamel.yaml round-trip
mode. Parsed documents are ``dict`` / ``list`` subclasses with their comments
attached, so they can be validated, deep-copied and saved without losing
them. Plain Python objects are written as clean documents.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import PurePath
from typing import Any

from ..errors import ConfigDecodeError
from . import _json, _yaml
from ._json import JsonArray, JsonObject

JSON = "json"
YAML = "yaml"
JSON_SUFFIXES = frozenset({".json", ".jsonc", ".json5"})
YAML_SUFFIXES = frozenset({".yaml", ".yml"})
DEFAULT_INDENT = 2


def format_for(path: str | os.PathLike[str]) -> str | None:
    """The document format implied by a file name, or None if it implies none."""
    suffix = PurePath(path).suffix.lower()
    if suffix in JSON_SUFFIXES:
        return JSON
    if suffix in YAML_SUFFIXES:
        return YAML
    return None


def _backend(fmt: str) -> Any:
    if fmt == JSON:
        return _json
    if fmt == YAML:
        return _yaml
    raise ValueError(f"Unknown document format: {fmt!r}")


def parse(text: str, path: str | os.PathLike[str] | None = None, fmt: str | None = None) -> Any:
    """Parse document text into a comment-carrying tree.

    The format is ``fmt`` if given, else the one implied by ``path``, else YAML
    (which also reads comment-free JSON).

    Raises:
        ConfigDecodeError: If the text is not a well-formed document.
    """
    if fmt is None:
        fmt = (format_for(path) if path is not None else None) or YAML
    backend = _backend(fmt)
    try:
        return backend.loads(text)
    except backend.DecodeError as e:
        where = f" in {path}" if path is not None else ""
        raise ConfigDecodeError(f"Invalid config document{where}: {e}", path=path) from e


def stringify(value: Any, indent: int = DEFAULT_INDENT, fmt: str | None = None) -> str:
    """Serialize a parsed tree or a plain object to text.

    Without ``fmt``, trees parsed from JSON are written as JSON and everything
    else as YAML. Output is deterministic for a given input value.
    """
    if fmt is None:
        fmt = JSON if _json.is_tree(value) else YAML
    return _backend(fmt).dumps(value, indent, to_plain)


def preserves_formatting(value: Any) -> bool:
    """True if ``value`` is a tree returned by :func:`parse`."""
    return _json.is_tree(value) or _yaml.is_tree(value)


def has_comments(value: Any) -> bool:
    """True if ``value`` or anything nested in it carries preserved comments."""
    if _json.carries_comments(value) or _yaml.carries_comments(value):
        return True
    if isinstance(value, Mapping):
        return any(has_comments(v) for v in value.values())
    if isinstance(value, (list, tuple)):
        return any(has_comments(v) for v in value)
    return False


def to_plain(value: Any) -> Any:
    """Strip codec types, returning builtin dicts, lists and scalars."""
    if isinstance(value, Mapping):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    return value


__all__ = [
    "DEFAULT_INDENT",
    "JSON",
    "JSON_SUFFIXES",
    "YAML",
    "YAML_SUFFIXES",
    "JsonArray",
    "JsonObject",
    "format_for",
    "has_comments",
    "parse",
    "preserves_formatting",
    "stringify",
    "to_plain",
]
