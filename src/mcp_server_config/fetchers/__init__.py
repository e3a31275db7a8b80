"""Proxy-aware HTTP helpers honoring HTTP_PROXY, HTTPS_PROXY and NO_PROXY."""

from ._http import proxy_fetch, select_proxy
from ._no_proxy import NoProxyRule, parse_no_proxy, should_bypass_proxy

__all__ = [
    "NoProxyRule",
    "parse_no_proxy",
    "proxy_fetch",
    "select_proxy",
    "should_bypass_proxy",
]
