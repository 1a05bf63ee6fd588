import dataclasses
from datetime import datetime, timezone

from icecore.candidate import CandidateType
from icecore.network import NetworkType
from icecore.stats import CandidatePairStats, CandidateStats

COUNTER_FIELDS = [
    "packets_sent",
    "packets_received",
    "bytes_sent",
    "bytes_received",
    "circuit_breaker_trigger_count",
    "requests_received",
    "requests_sent",
    "responses_received",
    "responses_sent",
    "retransmissions_received",
    "retransmissions_sent",
    "consent_requests_sent",
]

TIMESTAMP_FIELDS = [
    "timestamp",
    "last_packet_sent_timestamp",
    "last_packet_received_timestamp",
    "first_request_timestamp",
    "last_request_timestamp",
    "last_response_timestamp",
    "consent_expired_timestamp",
]


def test_pair_stats_defaults():
    stats = CandidatePairStats()
    assert all(getattr(stats, name) == 0 for name in COUNTER_FIELDS)
    assert all(getattr(stats, name) is None for name in TIMESTAMP_FIELDS)
    assert stats.nominated is False


def test_pair_stats_keeps_given_values():
    now = datetime.now(timezone.utc)
    stats = CandidatePairStats(
        timestamp=now,
        local_candidate_id="candidate:local",
        remote_candidate_id="candidate:remote",
        nominated=True,
        bytes_sent=1234,
        current_round_trip_time=0.25,
    )
    assert stats.timestamp == now
    assert stats.local_candidate_id == "candidate:local"
    assert stats.remote_candidate_id == "candidate:remote"
    assert stats.nominated is True
    assert stats.bytes_sent == 1234
    assert stats.current_round_trip_time == 0.25


def test_pair_stats_asdict_round_trip():
    stats = CandidatePairStats(local_candidate_id="a", requests_sent=7)
    assert CandidatePairStats(**dataclasses.asdict(stats)) == stats


def test_pair_stats_replace_changes_only_one_field():
    stats = CandidatePairStats(packets_sent=3, packets_received=4)
    updated = dataclasses.replace(stats, packets_sent=5)
    assert updated.packets_sent == 5
    assert updated.packets_received == 4
    assert stats.packets_sent == 3


def test_candidate_stats_defaults():
    stats = CandidateStats()
    assert stats.candidate_type is CandidateType.UNSPECIFIED
    assert stats.network_type is None
    assert stats.deleted is False


def test_candidate_stats_keeps_given_values():
    stats = CandidateStats(
        id="candidate:abc",
        network_type=NetworkType.UDP4,
        ip="192.0.2.1",
        port=5000,
        candidate_type=CandidateType.RELAY,
        priority=16777215,
        url="turn:example.com",
        relay_protocol="udp",
        deleted=True,
    )
    assert stats.id == "candidate:abc"
    assert stats.network_type is NetworkType.UDP4
    assert stats.ip == "192.0.2.1"
    assert stats.port == 5000
    assert str(stats.candidate_type) == "relay"
    assert stats.priority == 16777215
    assert stats.url == "turn:example.com"
    assert stats.relay_protocol == "udp"
    assert stats.deleted is True


def test_candidate_stats_equality():
    first = CandidateStats(id="x", port=1)
    second = CandidateStats(id="x", port=1)
    third = CandidateStats(id="y", port=1)
    assert first == second
    assert not first == third