from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

import httpx

from ..errors import FetchError
from ._no_proxy import parse_no_proxy, should_bypass_proxy


def _env(env: Mapping[str, str], name: str) -> str | None:
    return env.get(name) or env.get(name.lower()) or None


def select_proxy(url: str, env: Mapping[str, str] | None = None) -> str | None:
    """Pick the proxy for ``url`` from HTTP(S)_PROXY / NO_PROXY, or None to go direct."""
    env = os.environ if env is None else env
    if should_bypass_proxy(url, parse_no_proxy(_env(env, "NO_PROXY"))):
        return None
    scheme = urlsplit(url).scheme
    if scheme == "http":
        return _env(env, "HTTP_PROXY")
    if scheme == "https":
        return _env(env, "HTTPS_PROXY")
    return None


def proxy_fetch(
    url: str,
    method: str = "GET",
    *,
    env: Mapping[str, str] | None = None,
    timeout: float = 30,
    **kwargs: Any,
) -> httpx.Response:
    """Send a request, routing it through the environment's proxy unless NO_PROXY matches."""
    proxy = select_proxy(url, env)
    try:
        with httpx.Client(
            proxy=proxy,
            trust_env=False,
            follow_redirects=True,
            timeout=timeout,
        ) as client:
            return client.request(method, url, **kwargs)
    except httpx.HTTPError as e:
        raise FetchError(f"Network error fetching {url}: {e}", url=url) from e
