from pathlib import Path

import pytest

from mcp_server_config import (
    ConfigDecodeError,
    ConfigReadError,
    LoadError,
    has_comments,
    preserves_formatting,
    read_config,
    write_config,
)

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def test_read_config_with_comments():
    tree = read_config(FIXTURES / "config-with-comments.yaml")
    assert preserves_formatting(tree)
    assert tree["mcpServers"]["server1"]["command"] == "node"


def test_read_config_not_found(tmp_path):
    missing = tmp_path / "nope.yaml"
    with pytest.raises(ConfigReadError) as exc_info:
        read_config(missing)
    assert exc_info.value.path == missing
    assert isinstance(exc_info.value, LoadError)


def test_read_config_not_utf8(tmp_path):
    bad = tmp_path / "latin1.yaml"
    bad.write_bytes(b"mcpServers: {caf\xe9: {}}")
    with pytest.raises(ConfigReadError):
        read_config(bad)


def test_read_config_invalid_document(tmp_path):
    bad = tmp_path / "servers.json"
    bad.write_text('{ "mcpServers": { "a": ')
    with pytest.raises(ConfigDecodeError) as exc_info:
        read_config(bad)
    assert exc_info.value.path == bad


def test_write_config_creates_parents(tmp_path):
    target = tmp_path / "nested" / "dir" / "servers.yaml"
    write_config(target, "mcpServers: {}\n")
    assert target.read_text() == "mcpServers: {}\n"
    assert not target.with_suffix(".yaml.tmp").exists()


def test_write_config_replaces_existing(tmp_path):
    target = tmp_path / "servers.yaml"
    target.write_text("old")
    write_config(target, "new")
    assert target.read_text() == "new"


def test_read_json_config_with_comments():
    tree = read_config(FIXTURES / "config-with-comments.json")
    assert has_comments(tree)
    assert tree["mcpServers"]["server1"]["args"] == ["server.js"]
    assert tree["mcpServers"]["server1"]["env"] == {"PORT": "3000"}


def test_read_yaml_text_in_json_file_fails(tmp_path):
    bad = tmp_path / "servers.json"
    bad.write_text("mcpServers:\n  a:\n    command: node\n")
    with pytest.raises(ConfigDecodeError):
        read_config(bad)
