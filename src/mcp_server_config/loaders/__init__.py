from .config import read_config, write_config

__all__ = [
    "read_config",
    "write_config",
]
