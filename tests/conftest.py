import json

import pytest
from loguru import logger


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def write_config_file(tmp_path):
    """Write a dict (as JSON) or raw text to a config file under tmp_path."""

    def _write(data, name="servers.json"):
        path = tmp_path / name
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return path

    return _write
