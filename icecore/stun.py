"""A small STUN message codec with the checks ICE needs."""

from __future__ import annotations

import hashlib
import hmac
import os
import struct
from collections.abc import Iterator
from enum import IntEnum
from typing import Union

from icecore.errors import (
    AttributeNotFoundError,
    AttributeSizeError,
    IntegrityMismatchError,
    StunDecodeError,
    UsernameMismatchError,
)

MAGIC_COOKIE = 0x2112A442
HEADER_SIZE = 20
TRANSACTION_ID_SIZE = 12
ATTRIBUTE_HEADER_SIZE = 4
MESSAGE_INTEGRITY_SIZE = 20

BINDING_REQUEST = 0x0001
BINDING_SUCCESS = 0x0101


class AttrType(IntEnum):
    """STUN attribute types used by ICE."""

    USERNAME = 0x0006
    MESSAGE_INTEGRITY = 0x0008
    XOR_MAPPED_ADDRESS = 0x0020
    PRIORITY = 0x0024
    USE_CANDIDATE = 0x0025
    FINGERPRINT = 0x8028
    ICE_CONTROLLED = 0x8029
    ICE_CONTROLLING = 0x802A


AttrTypeLike = Union[AttrType, int]


def _attr_type(value: int) -> AttrTypeLike:
    try:
        return AttrType(value)
    except ValueError:
        return value


def _attr_name(attr_type: AttrTypeLike) -> str:
    if isinstance(attr_type, AttrType):
        return attr_type.name
    return f"0x{attr_type:04x}"


def new_transaction_id() -> bytes:
    """Return a fresh random transaction ID."""
    return os.urandom(TRANSACTION_ID_SIZE)


def _padding(length: int) -> int:
    return -length % 4


def _encode_attributes(attributes: list[tuple[AttrTypeLike, bytes]]) -> bytes:
    out = bytearray()
    for attr_type, value in attributes:
        out += struct.pack(">HH", attr_type, len(value))
        out += value
        out += b"\x00" * _padding(len(value))
    return bytes(out)


def _as_key(key: str | bytes) -> bytes:
    return key.encode("utf-8") if isinstance(key, str) else bytes(key)


class Message:
    """A STUN message: a type, a transaction ID and an ordered attribute list."""

    def __init__(
        self,
        message_type: int = BINDING_REQUEST,
        transaction_id: bytes | None = None,
    ) -> None:
        if not 0 <= message_type < 0x4000:
            raise ValueError(f"message type out of range: {message_type:#x}")
        if transaction_id is None:
            transaction_id = new_transaction_id()
        if len(transaction_id) != TRANSACTION_ID_SIZE:
            raise ValueError(
                f"transaction ID must be {TRANSACTION_ID_SIZE} bytes, "
                f"got {len(transaction_id)}"
            )
        self.message_type = message_type
        self.transaction_id = bytes(transaction_id)
        self.attributes: list[tuple[AttrTypeLike, bytes]] = []

    def __repr__(self) -> str:
        names = ", ".join(_attr_name(t) for t, _ in self.attributes)
        return (
            f"Message(type={self.message_type:#06x}, "
            f"transaction_id={self.transaction_id.hex()}, attributes=[{names}])"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return (
            self.message_type == other.message_type
            and self.transaction_id == other.transaction_id
            and self.attributes == other.attributes
        )

    def __iter__(self) -> Iterator[tuple[AttrTypeLike, bytes]]:
        return iter(self.attributes)

    def add(self, attr_type: AttrTypeLike, value: bytes) -> None:
        """Append an attribute."""
        data = bytes(value)
        if len(data) > 0xFFFF:
            raise ValueError(f"attribute value too long: {len(data)} bytes")
        self.attributes.append((_attr_type(int(attr_type)), data))

    def get(self, attr_type: AttrTypeLike) -> bytes:
        """Return the value of the first attribute of the given type."""
        for current, value in self.attributes:
            if current == attr_type:
                return value
        raise AttributeNotFoundError()

    def contains(self, attr_type: AttrTypeLike) -> bool:
        """Tell whether the message holds an attribute of the given type."""
        return any(current == attr_type for current, _ in self.attributes)

    def encode(self) -> bytes:
        """Serialise the message to wire format."""
        body = _encode_attributes(self.attributes)
        header = struct.pack(">HHI", self.message_type, len(body), MAGIC_COOKIE)
        return header + self.transaction_id + body

    @classmethod
    def decode(cls, raw: bytes) -> Message:
        """Parse a message from wire format."""
        if len(raw) < HEADER_SIZE:
            raise StunDecodeError(
                f"message too short: {len(raw)} < {HEADER_SIZE} bytes"
            )
        message_type, length, cookie = struct.unpack_from(">HHI", raw)
        if message_type & 0xC000:
            raise StunDecodeError("first two bits of the message type are not zero")
        if cookie != MAGIC_COOKIE:
            raise StunDecodeError(f"bad magic cookie {cookie:#010x}")
        end = HEADER_SIZE + length
        if len(raw) < end:
            raise StunDecodeError(
                f"message truncated: header says {end} bytes, got {len(raw)}"
            )
        message = cls(message_type, bytes(raw[8:HEADER_SIZE]))
        offset = HEADER_SIZE
        while offset < end:
            if end - offset < ATTRIBUTE_HEADER_SIZE:
                raise StunDecodeError("truncated attribute header")
            attr_type, attr_len = struct.unpack_from(">HH", raw, offset)
            offset += ATTRIBUTE_HEADER_SIZE
            padded = attr_len + _padding(attr_len)
            if end - offset < padded:
                raise StunDecodeError(
                    f"attribute {_attr_name(_attr_type(attr_type))} truncated"
                )
            message.add(attr_type, bytes(raw[offset : offset + attr_len]))
            offset += padded
        return message


def check_size(attr_type: AttrTypeLike, got: int, expected: int) -> None:
    """Raise AttributeSizeError unless an attribute has the expected length."""
    if got != expected:
        raise AttributeSizeError(
            f"{AttributeSizeError.default_message}: "
            f"size of {_attr_name(attr_type)} is {got}, expected {expected}"
        )


def _integrity_digest(message: Message, upto: int, key: bytes) -> bytes:
    body = _encode_attributes(message.attributes[:upto])
    length = len(body) + ATTRIBUTE_HEADER_SIZE + MESSAGE_INTEGRITY_SIZE
    header = struct.pack(">HHI", message.message_type, length, MAGIC_COOKIE)
    return hmac.new(key, header + message.transaction_id + body, hashlib.sha1).digest()


def add_message_integrity(message: Message, key: str | bytes) -> None:
    """Append a MESSAGE-INTEGRITY attribute computed with a short-term key."""
    digest = _integrity_digest(message, len(message.attributes), _as_key(key))
    message.add(AttrType.MESSAGE_INTEGRITY, digest)


def assert_inbound_username(message: Message, expected_username: str) -> None:
    """Raise unless the message's USERNAME equals ``expected_username``."""
    actual = message.get(AttrType.USERNAME)
    expected = expected_username.encode("utf-8")
    if actual != expected:
        raise UsernameMismatchError(
            f"{UsernameMismatchError.default_message} "
            f"expected({expected.hex()}) actual({actual.hex()})"
        )


def assert_inbound_message_integrity(message: Message, key: str | bytes) -> None:
    """Raise unless the message's MESSAGE-INTEGRITY matches ``key``."""
    for index, (attr_type, value) in enumerate(message.attributes):
        if attr_type == AttrType.MESSAGE_INTEGRITY:
            check_size(attr_type, len(value), MESSAGE_INTEGRITY_SIZE)
            expected = _integrity_digest(message, index, _as_key(key))
            if not hmac.compare_digest(expected, value):
                raise IntegrityMismatchError()
            return
    raise AttributeNotFoundError()