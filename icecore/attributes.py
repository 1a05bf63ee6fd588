"""ICE-specific STUN attributes: ICE-CONTROLLED, ICE-CONTROLLING and PRIORITY."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from icecore.errors import AttributeNotFoundError
from icecore.role import Role
from icecore.stun import AttrType, Message, check_size

TIEBREAKER_SIZE = 8
PRIORITY_SIZE = 4

_UINT64_MAX = 2**64 - 1
_UINT32_MAX = 2**32 - 1


def _check_range(value: int, maximum: int, what: str) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{what} out of range: {value}")


def _add_tiebreaker(message: Message, attr_type: AttrType, value: int) -> None:
    message.add(attr_type, struct.pack(">Q", value))


def _get_tiebreaker(message: Message, attr_type: AttrType) -> int:
    value = message.get(attr_type)
    check_size(attr_type, len(value), TIEBREAKER_SIZE)
    return struct.unpack(">Q", value)[0]


@dataclass(frozen=True)
class AttrControlled:
    """The ICE-CONTROLLED attribute carrying a tiebreaker."""

    tiebreaker: int = 0

    def __post_init__(self) -> None:
        _check_range(self.tiebreaker, _UINT64_MAX, "tiebreaker")

    def add_to(self, message: Message) -> None:
        """Add ICE-CONTROLLED to the message."""
        _add_tiebreaker(message, AttrType.ICE_CONTROLLED, self.tiebreaker)

    @classmethod
    def get_from(cls, message: Message) -> AttrControlled:
        """Decode ICE-CONTROLLED from the message."""
        return cls(_get_tiebreaker(message, AttrType.ICE_CONTROLLED))


@dataclass(frozen=True)
class AttrControlling:
    """The ICE-CONTROLLING attribute carrying a tiebreaker."""

    tiebreaker: int = 0

    def __post_init__(self) -> None:
        _check_range(self.tiebreaker, _UINT64_MAX, "tiebreaker")

    def add_to(self, message: Message) -> None:
        """Add ICE-CONTROLLING to the message."""
        _add_tiebreaker(message, AttrType.ICE_CONTROLLING, self.tiebreaker)

    @classmethod
    def get_from(cls, message: Message) -> AttrControlling:
        """Decode ICE-CONTROLLING from the message."""
        return cls(_get_tiebreaker(message, AttrType.ICE_CONTROLLING))


@dataclass(frozen=True)
class AttrControl:
    """Either ICE-CONTROLLED or ICE-CONTROLLING, chosen by role."""

    role: Role = Role.CONTROLLING
    tiebreaker: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", Role(self.role))
        _check_range(self.tiebreaker, _UINT64_MAX, "tiebreaker")

    def add_to(self, message: Message) -> None:
        """Add the attribute that matches the role."""
        attr_type = (
            AttrType.ICE_CONTROLLING
            if self.role == Role.CONTROLLING
            else AttrType.ICE_CONTROLLED
        )
        _add_tiebreaker(message, attr_type, self.tiebreaker)

    @classmethod
    def get_from(cls, message: Message) -> AttrControl:
        """Decode role and tiebreaker from whichever attribute is present."""
        if message.contains(AttrType.ICE_CONTROLLING):
            return cls(
                Role.CONTROLLING, _get_tiebreaker(message, AttrType.ICE_CONTROLLING)
            )
        if message.contains(AttrType.ICE_CONTROLLED):
            return cls(
                Role.CONTROLLED, _get_tiebreaker(message, AttrType.ICE_CONTROLLED)
            )
        raise AttributeNotFoundError()


@dataclass(frozen=True)
class PriorityAttr:
    """The PRIORITY attribute."""

    priority: int = 0

    def __post_init__(self) -> None:
        _check_range(self.priority, _UINT32_MAX, "priority")

    def add_to(self, message: Message) -> None:
        """Add PRIORITY to the message."""
        message.add(AttrType.PRIORITY, struct.pack(">I", self.priority))

    @classmethod
    def get_from(cls, message: Message) -> PriorityAttr:
        """Decode PRIORITY from the message."""
        value = message.get(AttrType.PRIORITY)
        check_size(AttrType.PRIORITY, len(value), PRIORITY_SIZE)
        return cls(struct.unpack(">I", value)[0])