"""Small in-memory stand-ins for the ports, shared by the test modules."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from core.models import ServerState


class FakeConnection:
    def __init__(self, fail_write: bool = False) -> None:
        self.data = b""
        self.closed = False
        self._fail_write = fail_write

    def sendall(self, data: bytes) -> None:
        if self._fail_write:
            raise OSError("broken pipe")
        self.data += data

    def close(self) -> None:
        self.closed = True


class FakeTransport:
    def __init__(self, fail_connect: bool = False, fail_write: bool = False) -> None:
        self.connects: list[tuple[str, int]] = []
        self.connections: list[FakeConnection] = []
        self._fail_connect = fail_connect
        self._fail_write = fail_write

    def connect(self, host: str, port: int) -> FakeConnection:
        self.connects.append((host, port))
        if self._fail_connect:
            raise ConnectionRefusedError("connection refused")
        connection = FakeConnection(fail_write=self._fail_write)
        self.connections.append(connection)
        return connection


class FakeNotifier:
    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []
        self.clears = 0

    def send(self, room: str, sender: str, message: str) -> None:
        self.sent.append((room, sender, message))

    def clear(self) -> None:
        self.clears += 1


class FakeClock:
    def __init__(self) -> None:
        self.active: dict[int, Callable[[], None]] = {}
        self.intervals: dict[int, int] = {}
        self.cancelled: list[int] = []
        self._next = 0

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> int:
        self._next += 1
        self.active[self._next] = callback
        self.intervals[self._next] = interval_ms
        return self._next

    def cancel(self, handle: int) -> None:
        del self.active[handle]
        self.cancelled.append(handle)

    def fire(self) -> None:
        for callback in list(self.active.values()):
            callback()


class FakeSettings:
    def __init__(self, values: Optional[dict[str, Any]] = None) -> None:
        self.values: dict[str, Any] = dict(values or {})

    def get_str(self, name: str, default: str) -> str:
        return str(self.values.get(name, default))

    def get_int(self, name: str, default: int) -> int:
        return int(self.values.get(name, default))

    def get_bool(self, name: str, default: bool) -> bool:
        return bool(self.values.get(name, default))

    def set_value(self, name: str, value: Any) -> None:
        self.values[name] = value


class FakeEvents:
    def __init__(self, servers: Optional[list[ServerState]] = None) -> None:
        self.server_list: list[ServerState] = list(servers or [])
        self.config_callbacks: list[Callable[[], None]] = []
        self.public_callbacks: list[Callable[..., None]] = []
        self.private_callbacks: list[Callable[..., None]] = []
        self.commands: dict[str, Callable[[], None]] = {}

    def on_config_changed(self, callback: Callable[[], None]) -> None:
        self.config_callbacks.append(callback)

    def on_public_message(self, callback: Callable[..., None]) -> None:
        self.public_callbacks.append(callback)

    def on_private_message(self, callback: Callable[..., None]) -> None:
        self.private_callbacks.append(callback)

    def register_command(self, name: str, callback: Callable[[], None]) -> None:
        self.commands[name] = callback

    def servers(self) -> Iterable[ServerState]:
        return list(self.server_list)
