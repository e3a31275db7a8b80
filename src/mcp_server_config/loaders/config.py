from __future__ import annotations

from pathlib import Path
from typing import Any

from ..codec import parse
from ..errors import ConfigReadError


def read_config(path: Path) -> Any:
    """Read a config file as UTF-8 text and parse it, comments included."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigReadError(f"Config file not found: {path}", path=path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"Failed to read {path}: {e}", path=path) from e
    return parse(text, path=path)


def write_config(path: Path, text: str) -> None:
    """Write text to path atomically, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(text, encoding="utf-8")
    tmp.replace(path)
