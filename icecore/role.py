"""Roles an ICE agent can take."""

from __future__ import annotations

from enum import IntEnum

from icecore.errors import UnknownRoleError


class Role(IntEnum):
    """ICE agent role: controlling or controlled."""

    CONTROLLING = 0
    CONTROLLED = 1

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    @classmethod
    def from_text(cls, text: str | bytes) -> Role:
        """Parse a role from its text form."""
        value = text.decode() if isinstance(text, (bytes, bytearray)) else text
        if value == "controlling":
            return cls.CONTROLLING
        if value == "controlled":
            return cls.CONTROLLED
        raise UnknownRoleError(f'{UnknownRoleError.default_message} "{value}"')

    def to_text(self) -> str:
        """The text form of the role."""
        return str(self)