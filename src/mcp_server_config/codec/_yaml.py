"""YAML documents through ruamel.yaml round-trip mode."""

from __future__ import annotations

from io import StringIO
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedBase
from ruamel.yaml.error import YAMLError


def _yaml(indent: int) -> YAML:
    yaml = YAML(typ="rt")
    yaml.indent(mapping=indent, sequence=indent + 2, offset=indent)
    yaml.preserve_quotes = True
    yaml.width = 4096
    return yaml


def loads(text: str) -> Any:
    return _yaml(2).load(text)


def dumps(value: Any, indent: int, plain: Any) -> str:
    # The round-trip representer only knows builtins and its own tree types.
    if not isinstance(value, CommentedBase):
        value = plain(value)
    stream = StringIO()
    _yaml(indent).dump(value, stream)
    return stream.getvalue()


def is_tree(value: Any) -> bool:
    return isinstance(value, CommentedBase)


def carries_comments(value: Any) -> bool:
    """True if this node itself (not its children) has comment tokens."""
    if not isinstance(value, CommentedBase):
        return False
    ca = value.ca
    return bool(ca.comment or ca.items or getattr(ca, "end", None))


DecodeError = YAMLError
