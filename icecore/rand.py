"""Random strings for candidate IDs and ICE credentials."""

from __future__ import annotations

import random
import secrets
import threading

RUNES_ALPHA = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
RUNES_DIGIT = "0123456789"
RUNES_CANDIDATE_ID_FOUNDATION = RUNES_ALPHA + RUNES_DIGIT + "+/"

LEN_UFRAG = 16
LEN_PWD = 32
LEN_CANDIDATE_ID_FOUNDATION = 32

CANDIDATE_ID_PREFIX = "candidate:"


def _check_arguments(length: int, runes: str) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not runes:
        raise ValueError("runes must not be empty")


class CandidateIDGenerator:
    """Random candidate ID generator.

    Candidate IDs are shared with the remote peer and need no cryptographic
    strength, so a fast generator seeded from the system's secure source is used.
    """

    def __init__(self) -> None:
        self._random = random.Random(secrets.randbits(64))
        self._lock = threading.Lock()

    def generate(self) -> str:
        """Return a new ID of the form ``candidate:<foundation>`` (RFC 5245 15.1)."""
        with self._lock:
            foundation = "".join(
                self._random.choices(
                    RUNES_CANDIDATE_ID_FOUNDATION, k=LEN_CANDIDATE_ID_FOUNDATION
                )
            )
        return CANDIDATE_ID_PREFIX + foundation


_GLOBAL_CANDIDATE_ID_GENERATOR = CandidateIDGenerator()


def generate_crypto_random_string(length: int, runes: str) -> str:
    """Return ``length`` characters drawn from ``runes`` by a secure source."""
    _check_arguments(length, runes)
    return "".join(secrets.choice(runes) for _ in range(length))


def generate_pwd() -> str:
    """Return a new ICE password."""
    return generate_crypto_random_string(LEN_PWD, RUNES_ALPHA)


def generate_ufrag() -> str:
    """Return a new ICE username fragment."""
    return generate_crypto_random_string(LEN_UFRAG, RUNES_ALPHA)