"""HexChat host adapter.

Implements the settings, chat event, and clock ports on top of the module
object HexChat hands to Python plugins. The module is injected rather than
imported so the adapter stays importable (and testable) outside the client.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from adapters.value_parsing import parse_bool, parse_int
from core.models import ServerState
from core.ports import PrivateMessageCallback, PublicMessageCallback

LOGGER = logging.getLogger(__name__)

# HexChat list entry type for server tabs.
SERVER_TAB = 1

PUBLIC_EVENTS = ("Channel Message", "Channel Msg Hilight")
PRIVATE_EVENTS = ("Private Message", "Private Message to Dialog")

SET_COMMAND = "ircpush_set"

# get_pluginpref returns all-digit strings as ints, so "0123" would read back
# as 123. Text values are stored behind this prefix to keep them verbatim.
TEXT_PREFIX = "str:"


class HexChatLogHandler(logging.Handler):
    """Writes log records into the active HexChat window."""

    def __init__(self, hexchat: Any, level: int = logging.WARNING) -> None:
        super().__init__(level=level)
        self._hexchat = hexchat

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._hexchat.prnt(f"ircpush: {self.format(record)}")
        except Exception:
            self.handleError(record)


def _is_away(context: Any) -> bool:
    # HexChat reports the away reason, or None when present.
    return bool(context.get_info("away"))


class HexChatHost:
    """Adapter exposing HexChat as SettingsPort, ChatEventSource, and Clock."""

    def __init__(self, hexchat: Any) -> None:
        self._hexchat = hexchat
        self._config_callbacks: list[Callable[[], None]] = []
        self._hooks: list[Any] = []

    # SettingsPort

    def _get(self, name: str) -> Any:
        value = self._hexchat.get_pluginpref(name)
        if isinstance(value, str) and value.startswith(TEXT_PREFIX):
            return value[len(TEXT_PREFIX):]
        return value

    def get_str(self, name: str, default: str) -> str:
        value = self._get(name)
        if value is None:
            return default
        return str(value)

    def get_int(self, name: str, default: int) -> int:
        value = parse_int(self._get(name))
        return default if value is None else value

    def get_bool(self, name: str, default: bool) -> bool:
        value = parse_bool(self._get(name))
        return default if value is None else value

    def set_value(self, name: str, value: Any) -> None:
        if isinstance(value, bool):
            value = int(value)
        elif isinstance(value, str):
            value = TEXT_PREFIX + value
        if not self._hexchat.set_pluginpref(name, value):
            LOGGER.warning("HexChat refused to store %s", name)

    # ChatEventSource

    def _guard(self, label: str, callback: Callable[..., Any]) -> Callable[..., Any]:
        def wrapper(*args: Any) -> Any:
            try:
                callback(*args)
            except Exception:
                LOGGER.exception("Error while handling %s", label)
            return self._hexchat.EAT_NONE

        return wrapper

    def current_server(self) -> ServerState:
        """Return the server state of the context an event fired in."""

        hexchat = self._hexchat
        return ServerState(
            network=hexchat.get_info("network") or hexchat.get_info("server") or "",
            nick=hexchat.get_info("nick") or "",
            away=_is_away(hexchat),
        )

    def on_config_changed(self, callback: Callable[[], None]) -> None:
        if not self._config_callbacks:
            self._hooks.append(
                self._hexchat.hook_command(
                    SET_COMMAND,
                    self._handle_set,
                    help=f"/{SET_COMMAND} <setting> <value>: change an ircpush setting",
                )
            )
        self._config_callbacks.append(callback)

    def _handle_set(self, word: list[str], word_eol: list[str], userdata: Any) -> Any:
        if len(word) < 2:
            self._hexchat.prnt(f"Usage: /{SET_COMMAND} <setting> <value>")
            return self._hexchat.EAT_ALL

        name = word[1]
        value = word_eol[2] if len(word_eol) > 2 else ""
        self.set_value(name, value)
        self.fire_config_changed()
        return self._hexchat.EAT_ALL

    def fire_config_changed(self) -> None:
        for callback in self._config_callbacks:
            try:
                callback()
            except Exception:
                LOGGER.exception("Error while reloading settings")

    def on_public_message(self, callback: PublicMessageCallback) -> None:
        guarded = self._guard("public message", callback)

        def handler(word: list[str], word_eol: list[str], userdata: Any) -> Any:
            if len(word) < 2:
                return self._hexchat.EAT_NONE
            nick = self._hexchat.strip(word[0])
            channel = self._hexchat.get_info("channel") or ""
            return guarded(self.current_server(), word[1], nick, "", channel)

        for event in PUBLIC_EVENTS:
            self._hooks.append(self._hexchat.hook_print(event, handler))

    def on_private_message(self, callback: PrivateMessageCallback) -> None:
        guarded = self._guard("private message", callback)

        def handler(word: list[str], word_eol: list[str], userdata: Any) -> Any:
            if len(word) < 2:
                return self._hexchat.EAT_NONE
            nick = self._hexchat.strip(word[0])
            address = self._hexchat.get_info("host") or ""
            return guarded(self.current_server(), word[1], nick, address)

        for event in PRIVATE_EVENTS:
            self._hooks.append(self._hexchat.hook_print(event, handler))

    def register_command(self, name: str, callback: Callable[[], None]) -> None:
        guarded = self._guard(f"/{name}", callback)

        def handler(word: list[str], word_eol: list[str], userdata: Any) -> Any:
            guarded()
            return self._hexchat.EAT_ALL

        self._hooks.append(self._hexchat.hook_command(name, handler))

    def servers(self) -> Iterable[ServerState]:
        states = []
        for entry in self._hexchat.get_list("channels"):
            if entry.type != SERVER_TAB:
                continue
            context = entry.context
            states.append(
                ServerState(
                    network=entry.network or entry.server or entry.channel,
                    nick=context.get_info("nick") or "",
                    away=_is_away(context),
                )
            )
        return states

    # Clock

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> Any:
        guarded = self._guard("away timer", callback)

        def handler(userdata: Any) -> bool:
            guarded()
            # Returning True keeps the HexChat timer repeating.
            return True

        return self._hexchat.hook_timer(interval_ms, handler)

    def cancel(self, handle: Any) -> None:
        self._hexchat.unhook(handle)

    def unhook_all(self) -> None:
        for hook in self._hooks:
            self._hexchat.unhook(hook)
        self._hooks.clear()
