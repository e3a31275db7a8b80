from __future__ import annotations

import ipaddress
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal
from urllib.parse import urlsplit

# Loose shape checks; octet ranges are enforced by ipaddress when matching.
_IP = re.compile(r"^\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}$")
_CIDR = re.compile(r"^(\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})/(\d{1,2})$")

RuleKind = Literal["hostname", "domain", "ip", "cidr"]


@dataclass(frozen=True)
class NoProxyRule:
    """One comma-separated entry of a NO_PROXY value."""

    kind: RuleKind
    value: str


def parse_no_proxy(value: str | None) -> list[NoProxyRule]:
    """Split a NO_PROXY value into typed rules.

    ".example.com" is a domain rule, dotted quads are ip rules, "a.b.c.d/NN" is
    a cidr rule, and everything else (including "*") is a hostname rule.
    """
    if not value:
        return []
    rules: list[NoProxyRule] = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        if part.startswith("."):
            rules.append(NoProxyRule("domain", part))
        elif _IP.match(part):
            rules.append(NoProxyRule("ip", part))
        elif _CIDR.match(part):
            rules.append(NoProxyRule("cidr", part))
        else:
            rules.append(NoProxyRule("hostname", part))
    return rules


def should_bypass_proxy(url: str, rules: Sequence[NoProxyRule]) -> bool:
    """True if a request to ``url`` should go direct rather than through a proxy."""
    if not rules:
        return False
    try:
        hostname = urlsplit(url).hostname
    except ValueError:
        return False
    if not hostname:
        return False

    if any(rule.value == "*" for rule in rules):
        return True

    for rule in rules:
        if rule.kind in ("hostname", "ip"):
            if hostname == rule.value:
                return True
        elif rule.kind == "domain":
            if hostname.endswith(rule.value) or hostname == rule.value[1:]:
                return True
        elif rule.kind == "cidr":
            if _IP.match(hostname) and _ip_in_cidr(hostname, rule.value):
                return True
    return False


def _ip_in_cidr(ip: str, cidr: str) -> bool:
    match = _CIDR.match(cidr)
    if not match:
        return False
    prefix = int(match.group(2))
    if prefix > 32:
        return False
    try:
        network = ipaddress.IPv4Network(f"{match.group(1)}/{prefix}", strict=False)
        return ipaddress.IPv4Address(ip) in network
    except ValueError:
        return False
