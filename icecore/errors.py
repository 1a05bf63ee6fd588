"""Exception types raised by the ICE core."""

from __future__ import annotations


class IceError(Exception):
    """Base class of every error raised by this package."""

    default_message = "ice error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class InvalidNAT1To1IPMappingError(IceError, ValueError):
    """A 1:1 NAT IP mapping is malformed or conflicts with another one."""

    default_message = "invalid 1:1 NAT IP mapping"


class UnsupportedNAT1To1IPCandidateTypeError(IceError, ValueError):
    """A 1:1 NAT IP mapping was requested for an unsupported candidate type."""

    default_message = "unsupported 1:1 NAT IP candidate type"


class ExternalMappedIPNotFoundError(IceError, LookupError):
    """No external IP is mapped to the given local IP."""

    default_message = "external mapped IP not found"


class DetermineNetworkTypeError(IceError, ValueError):
    """The network type could not be worked out from a network name and IP."""

    default_message = "unable to determine networkType"


class UnknownRoleError(IceError, ValueError):
    """A role name is neither controlling nor controlled."""

    default_message = "unknown role"


class UsernameMismatchError(IceError):
    """The USERNAME of an inbound STUN message is not the expected one."""

    default_message = "username mismatch"


class TCPMuxNotInitializedError(IceError):
    """A TCP mux was used before it was set up."""

    default_message = "TCPMux is not initialized"


class NoTCPMuxAvailableError(IceError):
    """A multi TCP mux holds no muxes to hand connections out from."""

    default_message = "no TCP mux is available"


class ClosedPipeError(IceError):
    """A read or write was attempted on something already closed."""

    default_message = "io: read/write on closed pipe"


class ShortBufferError(IceError):
    """A packet is larger than the space allowed for it."""

    default_message = "short buffer"


class AttributeNotFoundError(IceError, LookupError):
    """A STUN message does not hold the requested attribute."""

    default_message = "attribute not found"


class AttributeSizeError(IceError, ValueError):
    """A STUN attribute value has the wrong length."""

    default_message = "attribute size is invalid"


class IntegrityMismatchError(IceError):
    """The MESSAGE-INTEGRITY of a STUN message does not match its key."""

    default_message = "integrity check failed"


class StunDecodeError(IceError, ValueError):
    """Raw bytes could not be decoded as a STUN message."""

    default_message = "failed to decode STUN message"