"""Building blocks for ICE agents: candidate and network types, STUN attributes, NAT mapping and identifiers."""

__version__ = "0.1.0"