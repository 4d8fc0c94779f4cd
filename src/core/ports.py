"""Ports (interfaces) used by the core push service.

Ports define the minimal contracts for the host chat client, the relay
transport, and notification adapters so that the core can be reused with
different chat clients.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Protocol

from core.models import ServerState

PublicMessageCallback = Callable[[ServerState, str, str, str, str], None]
PrivateMessageCallback = Callable[[ServerState, str, str, str], None]


class SettingsPort(Protocol):
    """Typed settings registry offered by the host."""

    def get_str(self, name: str, default: str) -> str:
        ...

    def get_int(self, name: str, default: int) -> int:
        ...

    def get_bool(self, name: str, default: bool) -> bool:
        ...

    def set_value(self, name: str, value: Any) -> None:
        ...


class ChatEventSource(Protocol):
    """Event subscriptions and server enumeration offered by the host."""

    def on_config_changed(self, callback: Callable[[], None]) -> None:
        ...

    def on_public_message(self, callback: PublicMessageCallback) -> None:
        ...

    def on_private_message(self, callback: PrivateMessageCallback) -> None:
        ...

    def register_command(self, name: str, callback: Callable[[], None]) -> None:
        ...

    def servers(self) -> Iterable[ServerState]:
        ...


class Clock(Protocol):
    """Recurring timer registration offered by the host event loop."""

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...


class Connection(Protocol):
    def sendall(self, data: bytes) -> None:
        ...

    def close(self) -> None:
        ...


class Transport(Protocol):
    """Opens encrypted stream connections to the relay server."""

    def connect(self, host: str, port: int) -> Connection:
        ...


class NotifierPort(Protocol):
    """Notification operations required by the core."""

    def send(self, room: str, sender: str, message: str) -> None:
        ...

    def clear(self) -> None:
        ...
