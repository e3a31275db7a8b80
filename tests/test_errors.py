from pathlib import Path

import pytest

from mcp_server_config.errors import (
    ConfigDecodeError,
    ConfigError,
    ConfigReadError,
    ConfigValidationError,
    DevCwdMustBeAbsoluteError,
    FetchError,
    InvalidConfigObjectError,
    LoadError,
    MissingServersSectionError,
    NoConfigPathError,
)


def test_load_error_message():
    err = LoadError("something went wrong")
    assert str(err) == "something went wrong"
    assert err.path is None


def test_load_error_with_path():
    p = Path("/some/servers.yaml")
    err = ConfigReadError("not found", path=p)
    assert err.path == p
    assert isinstance(err, LoadError)


def test_every_config_error_shares_a_base():
    for err in (
        NoConfigPathError(),
        InvalidConfigObjectError(),
        ConfigDecodeError("bad"),
        MissingServersSectionError(),
        DevCwdMustBeAbsoluteError("api"),
    ):
        assert isinstance(err, ConfigError)


def test_validation_error_names_server():
    err = DevCwdMustBeAbsoluteError("api")
    assert isinstance(err, ConfigValidationError)
    assert err.server == "api"
    assert str(err) == "Server 'api' dev.cwd must be an absolute path"


def test_document_level_error_has_no_server():
    assert MissingServersSectionError().server is None


def test_fetch_error_is_not_a_config_error():
    err = FetchError("boom", url="https://example.com")
    assert err.url == "https://example.com"
    assert not isinstance(err, ConfigError)
    with pytest.raises(FetchError):
        raise err


@pytest.mark.parametrize("cls", ConfigValidationError.__subclasses__())
def test_validation_errors_are_documented(cls):
    assert cls.__doc__ and cls.__doc__ != ConfigValidationError.__doc__
