"""Multicast DNS modes and host name generation."""

from __future__ import annotations

import uuid
from enum import IntEnum

MDNS_SUFFIX = ".local"


class MulticastDNSMode(IntEnum):
    """How an agent handles mDNS candidates."""

    DISABLED = 1
    """Remote mDNS candidates are discarded; local host candidates use IPs."""

    QUERY_ONLY = 2
    """Remote mDNS candidates are accepted; local host candidates use IPs."""

    QUERY_AND_GATHER = 3
    """Remote mDNS candidates are accepted; local host candidates use mDNS."""


def generate_multicast_dns_name() -> str:
    """Return a version 4 UUID followed by ``.local``."""
    return str(uuid.uuid4()) + MDNS_SUFFIX