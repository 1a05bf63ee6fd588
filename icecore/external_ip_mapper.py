"""Mapping of local IPs to external IPs for 1:1 NAT setups."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import Union

from icecore.candidate import CandidateType
from icecore.errors import (
    ExternalMappedIPNotFoundError,
    InvalidNAT1To1IPMappingError,
    UnsupportedNAT1To1IPCandidateTypeError,
)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def validate_ip_string(ip_str: str) -> tuple[IPAddress, bool]:
    """Parse an IP string; return the address and whether it is IPv4."""
    if "%" in ip_str:
        raise InvalidNAT1To1IPMappingError()
    try:
        ip = ipaddress.ip_address(ip_str)
    except ValueError:
        raise InvalidNAT1To1IPMappingError() from None
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped
    return ip, isinstance(ip, ipaddress.IPv4Address)


@dataclass
class IPMapping:
    """Local-to-external mapping for one IP family."""

    ip_sole: IPAddress | None = None
    ip_map: dict[IPAddress, IPAddress] = field(default_factory=dict)
    valid: bool = False

    def set_sole_ip(self, ip: IPAddress) -> None:
        """Use one external IP for every local IP of this family."""
        if self.ip_sole is not None or self.ip_map:
            raise InvalidNAT1To1IPMappingError()
        self.ip_sole = ip
        self.valid = True

    def add_ip_mapping(self, local_ip: IPAddress, external_ip: IPAddress) -> None:
        """Map one local IP to one external IP."""
        if self.ip_sole is not None or local_ip in self.ip_map:
            raise InvalidNAT1To1IPMappingError()
        self.ip_map[local_ip] = external_ip
        self.valid = True

    def find_external_ip(self, local_ip: IPAddress) -> IPAddress:
        """Return the external IP for ``local_ip``; unmapped families pass through."""
        if not self.valid:
            return local_ip
        if self.ip_sole is not None:
            return self.ip_sole
        try:
            return self.ip_map[local_ip]
        except KeyError:
            raise ExternalMappedIPNotFoundError() from None


@dataclass
class ExternalIPMapper:
    """External IP mappings for IPv4 and IPv6 and the candidate type they apply to."""

    candidate_type: CandidateType
    ipv4_mapping: IPMapping = field(default_factory=IPMapping)
    ipv6_mapping: IPMapping = field(default_factory=IPMapping)

    def find_external_ip(self, local_ip_str: str) -> IPAddress:
        """Return the external IP for a local IP given as a string."""
        local_ip, is_ipv4 = validate_ip_string(local_ip_str)
        mapping = self.ipv4_mapping if is_ipv4 else self.ipv6_mapping
        return mapping.find_external_ip(local_ip)


def new_external_ip_mapper(
    candidate_type: CandidateType, ips: list[str] | None
) -> ExternalIPMapper | None:
    """Build a mapper from strings "ext" or "ext/local"; None when ``ips`` is empty."""
    if not ips:
        return None
    if candidate_type == CandidateType.UNSPECIFIED:
        candidate_type = CandidateType.HOST
    elif candidate_type not in (CandidateType.HOST, CandidateType.SERVER_REFLEXIVE):
        raise UnsupportedNAT1To1IPCandidateTypeError()

    mapper = ExternalIPMapper(candidate_type)
    for entry in ips:
        parts = entry.split("/")
        if len(parts) > 2:
            raise InvalidNAT1To1IPMappingError()
        external_ip, is_external_ipv4 = validate_ip_string(parts[0])
        mapping = mapper.ipv4_mapping if is_external_ipv4 else mapper.ipv6_mapping
        if len(parts) == 1:
            mapping.set_sole_ip(external_ip)
            continue
        local_ip, is_local_ipv4 = validate_ip_string(parts[1])
        if is_external_ipv4 != is_local_ipv4:
            raise InvalidNAT1To1IPMappingError()
        mapping.add_ip_mapping(local_ip, external_ip)
    return mapper