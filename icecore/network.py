"""Network types used by ICE candidates."""

from __future__ import annotations

import ipaddress
from enum import IntEnum
from typing import Union

from icecore.errors import DetermineNetworkTypeError

IPLike = Union[str, ipaddress.IPv4Address, ipaddress.IPv6Address, None]

UDP = "udp"
TCP = "tcp"


class NetworkType(IntEnum):
    """Transport protocol and IP family of a network."""

    UDP4 = 1
    UDP6 = 2
    TCP4 = 3
    TCP6 = 4

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def is_udp(self) -> bool:
        """True for UDP over IPv4 or IPv6."""
        return self in (NetworkType.UDP4, NetworkType.UDP6)

    def is_tcp(self) -> bool:
        """True for TCP over IPv4 or IPv6."""
        return self in (NetworkType.TCP4, NetworkType.TCP6)

    def network_short(self) -> str:
        """The protocol name without the IP family."""
        return UDP if self.is_udp() else TCP

    def is_reliable(self) -> bool:
        """True when the transport is reliable (TCP)."""
        return self.is_tcp()

    def is_ipv4(self) -> bool:
        """True for IPv4 networks."""
        return self in (NetworkType.UDP4, NetworkType.TCP4)

    def is_ipv6(self) -> bool:
        """True for IPv6 networks."""
        return self in (NetworkType.UDP6, NetworkType.TCP6)


def supported_network_types() -> list[NetworkType]:
    """All network types an agent can use, in preference order."""
    return [NetworkType.UDP4, NetworkType.UDP6, NetworkType.TCP4, NetworkType.TCP6]


def _is_ipv4(ip: IPLike) -> bool:
    if ip is None:
        return False
    if isinstance(ip, str):
        try:
            ip = ipaddress.ip_address(ip)
        except ValueError:
            return False
    if isinstance(ip, ipaddress.IPv4Address):
        return True
    return ip.ipv4_mapped is not None


def determine_network_type(network: str, ip: IPLike) -> NetworkType:
    """Work out the network type from a network name such as "udp" and an IP."""
    ipv4 = _is_ipv4(ip)
    lowered = network.lower()
    if lowered.startswith(UDP):
        return NetworkType.UDP4 if ipv4 else NetworkType.UDP6
    if lowered.startswith(TCP):
        return NetworkType.TCP4 if ipv4 else NetworkType.TCP6
    raise DetermineNetworkTypeError(
        f"{DetermineNetworkTypeError.default_message} from {network} {ip}"
    )