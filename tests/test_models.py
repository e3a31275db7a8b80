import pytest
from pydantic import ValidationError

from mcp_server_config.models import (
    DEFAULT_DEV_DEBOUNCE_MS,
    DevConfig,
    McpServersConfig,
    RemoteServerConfig,
    StdioServerConfig,
)


def test_servers_config_alias_and_discriminator():
    config = McpServersConfig.model_validate(
        {
            "mcpServers": {
                "local": {"type": "stdio", "command": "node", "args": ["server.js"]},
                "remote": {"type": "streamable-http", "url": "https://example.com/mcp"},
            }
        }
    )
    assert isinstance(config.mcp_servers["local"], StdioServerConfig)
    assert config.mcp_servers["local"].args == ["server.js"]
    remote = config.mcp_servers["remote"]
    assert isinstance(remote, RemoteServerConfig)
    assert remote.type == "streamable-http"


def test_dev_debounce_default():
    dev = DevConfig.model_validate({"enabled": True, "cwd": "/abs"})
    assert dev.debounce == DEFAULT_DEV_DEBOUNCE_MS
    assert dev.watch == []
    assert "debounce" not in dev.model_dump(exclude_unset=True)


def test_dev_requires_cwd():
    with pytest.raises(ValidationError):
        DevConfig.model_validate({"enabled": True})


def test_stdio_env_numbers_become_strings():
    server = StdioServerConfig.model_validate({"command": "node", "env": {"PORT": 3000}})
    assert server.env == {"PORT": "3000"}


def test_extra_fields_allowed():
    server = RemoteServerConfig.model_validate({"url": "https://x", "timeout": 5})
    assert server.model_extra == {"timeout": 5}
