"""Tests for NO_PROXY matching and the proxy-aware fetch helper."""

import httpx
import pytest

from mcp_server_config import FetchError, NoProxyRule, parse_no_proxy, proxy_fetch, should_bypass_proxy
from mcp_server_config.fetchers import select_proxy

# --- parse_no_proxy ---


@pytest.mark.parametrize("value", ["", None, " , ,"])
def test_parse_no_proxy_empty(value):
    assert parse_no_proxy(value) == []


def test_parse_no_proxy_mixed_with_spaces():
    assert parse_no_proxy(" google.com, .example.org, 192.168.1.1, 10.0.0.0/8 , * ") == [
        NoProxyRule("hostname", "google.com"),
        NoProxyRule("domain", ".example.org"),
        NoProxyRule("ip", "192.168.1.1"),
        NoProxyRule("cidr", "10.0.0.0/8"),
        NoProxyRule("hostname", "*"),
    ]


# --- should_bypass_proxy ---

RULES = parse_no_proxy("google.com,.example.org,192.168.1.1,10.0.0.0/8,localhost")


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("http://google.com/path", True),
        ("http://google.com:8080/path", True),
        ("http://www.example.org/path", True),
        ("http://example.org/path", True),
        ("http://other.com/path", False),
        ("http://192.168.1.1/path", True),
        ("http://192.168.1.2/path", False),
        ("http://10.0.0.50/path", True),
        ("http://11.0.0.1/path", False),
        ("http://localhost/path", True),
        ("http://another.domain.com/path", False),
        ("not a url", False),
    ],
)
def test_should_bypass_proxy(url, expected):
    assert should_bypass_proxy(url, RULES) is expected


def test_no_rules_never_bypass():
    assert should_bypass_proxy("http://google.com/path", []) is False


def test_wildcard_bypasses_everything():
    assert should_bypass_proxy("http://anything.com/path", parse_no_proxy("*"))
    assert should_bypass_proxy("http://google.com/path", parse_no_proxy("specific.com,*"))


def test_cidr_outside_range():
    assert not should_bypass_proxy("http://192.168.2.50/path", parse_no_proxy("192.168.1.0/24"))


def test_cidr_with_invalid_prefix_never_matches():
    assert not should_bypass_proxy("http://10.0.0.1/", [NoProxyRule("cidr", "10.0.0.0/40")])


def test_cidr_rule_ignores_hostnames():
    assert not should_bypass_proxy("http://internal.corp/", parse_no_proxy("10.0.0.0/8"))


# --- select_proxy ---

ENV = {
    "HTTP_PROXY": "http://proxy:3128",
    "https_proxy": "http://secure-proxy:3128",
    "NO_PROXY": "localhost,.internal",
}


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("http://example.com/", "http://proxy:3128"),
        ("https://example.com/", "http://secure-proxy:3128"),
        ("http://localhost:8080/", None),
        ("https://api.internal/", None),
        ("ftp://example.com/", None),
    ],
)
def test_select_proxy(url, expected):
    assert select_proxy(url, ENV) == expected


def test_select_proxy_without_env():
    assert select_proxy("https://example.com/", {}) is None


# --- proxy_fetch ---


def test_proxy_fetch_direct(httpx_mock):
    httpx_mock.add_response(url="https://example.com/mcp", json={"ok": True})
    response = proxy_fetch("https://example.com/mcp", env={})
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_proxy_fetch_passes_selected_proxy(httpx_mock, monkeypatch):
    captured = {}
    real_client = httpx.Client

    def fake_client(**kwargs):
        captured.update(kwargs)
        kwargs.pop("proxy")
        return real_client(**kwargs)

    monkeypatch.setattr(httpx, "Client", fake_client)
    httpx_mock.add_response(url="http://example.com/", text="hi")

    proxy_fetch("http://example.com/", env=ENV)

    assert captured["proxy"] == "http://proxy:3128"
    assert captured["trust_env"] is False


def test_proxy_fetch_network_error(httpx_mock):
    httpx_mock.add_exception(httpx.ConnectError("connection refused"))
    with pytest.raises(FetchError) as exc_info:
        proxy_fetch("https://example.com/mcp", env={})
    assert exc_info.value.url == "https://example.com/mcp"
