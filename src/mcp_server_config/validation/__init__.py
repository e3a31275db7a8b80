from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

from ..loaders import read_config
from ._result import ValidationIssue, ValidationResult
from ._servers import SERVERS_KEY, check_config, validate_config


def check_config_file(path: Path) -> ValidationResult:
    """Load a config file from disk and report every rule failure in it."""
    return check_config(read_config(path))


def validate_config_file(path: Path) -> dict[str, Any]:
    """Load a config file from disk and return its normalized form."""
    return validate_config(read_config(path))


__all__ = [
    "SERVERS_KEY",
    "ValidationIssue",
    "ValidationResult",
    "check_config",
    "check_config_file",
    "validate_config",
    "validate_config_file",
]
