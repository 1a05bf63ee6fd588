"""Connection and gathering states of an ICE agent."""

from __future__ import annotations

from enum import IntEnum


class ConnectionState(IntEnum):
    """State of an ICE connection."""

    UNKNOWN = 0
    NEW = 1
    CHECKING = 2
    CONNECTED = 3
    COMPLETED = 4
    FAILED = 5
    DISCONNECTED = 6
    CLOSED = 7

    def __str__(self) -> str:
        return _CONNECTION_STATE_NAMES.get(self, "Invalid")

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_CONNECTION_STATE_NAMES = {
    ConnectionState.NEW: "New",
    ConnectionState.CHECKING: "Checking",
    ConnectionState.CONNECTED: "Connected",
    ConnectionState.COMPLETED: "Completed",
    ConnectionState.FAILED: "Failed",
    ConnectionState.DISCONNECTED: "Disconnected",
    ConnectionState.CLOSED: "Closed",
}


class GatheringState(IntEnum):
    """State of the candidate gathering process."""

    UNKNOWN = 0
    NEW = 1
    GATHERING = 2
    COMPLETE = 3

    def __str__(self) -> str:
        return _GATHERING_STATE_NAMES.get(self, "Unknown")

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_GATHERING_STATE_NAMES = {
    GatheringState.NEW: "new",
    GatheringState.GATHERING: "gathering",
    GatheringState.COMPLETE: "complete",
}