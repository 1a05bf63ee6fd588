"""Statistics about candidates and candidate pairs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from icecore.candidate import CandidateType
from icecore.network import NetworkType


@dataclass
class CandidatePairStats:
    """Statistics of an ICE candidate pair.

    Timestamps are ``None`` until the event they describe has happened.
    """

    timestamp: Optional[datetime] = None
    local_candidate_id: str = ""
    remote_candidate_id: str = ""
    state: object = None
    """The checklist state of the pair."""
    nominated: bool = False
    packets_sent: int = 0
    packets_received: int = 0
    bytes_sent: int = 0
    bytes_received: int = 0
    last_packet_sent_timestamp: Optional[datetime] = None
    last_packet_received_timestamp: Optional[datetime] = None
    first_request_timestamp: Optional[datetime] = None
    last_request_timestamp: Optional[datetime] = None
    last_response_timestamp: Optional[datetime] = None
    total_round_trip_time: float = 0.0
    """Sum of round trip times in seconds."""
    current_round_trip_time: float = 0.0
    """Latest round trip time in seconds."""
    available_outgoing_bitrate: float = 0.0
    available_incoming_bitrate: float = 0.0
    circuit_breaker_trigger_count: int = 0
    requests_received: int = 0
    requests_sent: int = 0
    responses_received: int = 0
    responses_sent: int = 0
    retransmissions_received: int = 0
    retransmissions_sent: int = 0
    consent_requests_sent: int = 0
    consent_expired_timestamp: Optional[datetime] = None


@dataclass
class CandidateStats:
    """Statistics of an ICE candidate."""

    timestamp: Optional[datetime] = None
    id: str = ""
    network_type: Optional[NetworkType] = None
    """Network type of a local candidate's base; unknown for remote candidates."""
    ip: str = ""
    port: int = 0
    candidate_type: CandidateType = CandidateType.UNSPECIFIED
    priority: int = 0
    url: str = ""
    """URL of the STUN or TURN server that produced this address."""
    relay_protocol: str = ""
    """Protocol used to reach the TURN server: udp, tcp or tls."""
    deleted: bool = False