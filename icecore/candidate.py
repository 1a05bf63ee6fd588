"""Candidate types and related transport addresses."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum


class CandidateType(IntEnum):
    """The type of an ICE candidate."""

    UNSPECIFIED = 0
    HOST = 1
    SERVER_REFLEXIVE = 2
    PEER_REFLEXIVE = 3
    RELAY = 4

    def __str__(self) -> str:
        return _CANDIDATE_TYPE_NAMES.get(self, "Unknown candidate type")

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def preference(self) -> int:
        """Return the type preference recommended by RFC 8445 section 5.1.2.2."""
        return _CANDIDATE_TYPE_PREFERENCES.get(self, 0)


_CANDIDATE_TYPE_NAMES = {
    CandidateType.HOST: "host",
    CandidateType.SERVER_REFLEXIVE: "srflx",
    CandidateType.PEER_REFLEXIVE: "prflx",
    CandidateType.RELAY: "relay",
}

_CANDIDATE_TYPE_PREFERENCES = {
    CandidateType.HOST: 126,
    CandidateType.PEER_REFLEXIVE: 110,
    CandidateType.SERVER_REFLEXIVE: 100,
    CandidateType.RELAY: 0,
    CandidateType.UNSPECIFIED: 0,
}


def contains_candidate_type(
    candidate_type: CandidateType, candidate_types: Iterable[CandidateType] | None
) -> bool:
    """Tell whether ``candidate_type`` is among ``candidate_types``."""
    if candidate_types is None:
        return False
    return candidate_type in candidate_types


@dataclass(frozen=True)
class CandidateRelatedAddress:
    """A transport address related to a candidate, used for diagnostics."""

    address: str
    port: int

    def __str__(self) -> str:
        return f" related {self.address}:{self.port}"


def format_related_address(related: CandidateRelatedAddress | None) -> str:
    """Render a related address, or an empty string when there is none."""
    return "" if related is None else str(related)