from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

# Applied by consumers when dev.debounce is absent; never written back to the document.
DEFAULT_DEV_DEBOUNCE_MS = 500


class DevConfig(BaseModel):
    """Local development auto-restart settings for a stdio server."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    enabled: bool = False
    cwd: str
    watch: list[str] = []
    debounce: float = DEFAULT_DEV_DEBOUNCE_MS


class StdioServerConfig(BaseModel):
    """A server launched as a subprocess and spoken to over stdio."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)
    type: Literal["stdio"] = "stdio"
    command: str
    args: list[str] = []
    env: dict[str, str] = {}
    cwd: str | None = None
    disabled: bool = False
    dev: DevConfig | None = None


class RemoteServerConfig(BaseModel):
    """A server reached over HTTP (SSE or streamable HTTP)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    type: Literal["sse", "streamable-http", "http"] = "sse"
    url: str
    headers: dict[str, str] = {}
    disabled: bool = False


ServerConfig = Annotated[
    StdioServerConfig | RemoteServerConfig,
    Field(discriminator="type"),
]


class McpServersConfig(BaseModel):
    """Root of a servers config document: server name -> ServerConfig."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    mcp_servers: dict[str, ServerConfig] = Field(default_factory=dict, alias="mcpServers")
