"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any chat-client specific types.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServerState:
    """Snapshot of one chat-network connection as seen by the host client."""

    network: str
    nick: str
    away: bool


@dataclass(frozen=True)
class Notification:
    """A single push for the relay server.

    An empty room means the message did not come from a channel. The clear
    signal carries no room, sender, or message.
    """

    room: str
    sender: str
    message: str
    badge: int = 1

    @property
    def is_clear(self) -> bool:
        return self.room == "" and self.sender == "" and self.message == ""

    @classmethod
    def build(cls, room: str, sender: str, message: str) -> "Notification":
        badge = 0 if room == "" and sender == "" and message == "" else 1
        return cls(room=room, sender=sender, message=message, badge=badge)
