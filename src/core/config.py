"""Core configuration dataclasses.

We keep settings parsing outside the filtering logic, but these dataclasses
define the shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.ports import SettingsPort

LOGGER = logging.getLogger(__name__)

# Setting names as registered with the host settings registry.
SERVER_SETTING = "ircpush_server"
PORT_SETTING = "ircpush_port"
AUTH_TOKEN_SETTING = "ircpush_auth_token"
AWAY_ONLY_SETTING = "ircpush_away_only"
DEBUG_SETTING = "ircpush_debug"
CLEAR_ON_RETURN_SETTING = "ircpush_clear_on_return_from_away"

DEFAULT_SERVER = "localhost"
DEFAULT_PORT = 26144

# Declared defaults, keyed by setting name.
DEFAULTS = {
    SERVER_SETTING: DEFAULT_SERVER,
    PORT_SETTING: DEFAULT_PORT,
    AUTH_TOKEN_SETTING: "",
    AWAY_ONLY_SETTING: True,
    DEBUG_SETTING: False,
    CLEAR_ON_RETURN_SETTING: False,
}


@dataclass(frozen=True)
class PushConfig:
    """Relay connection and filtering settings, replaced wholesale on reload."""

    server: str = DEFAULT_SERVER
    port: int = DEFAULT_PORT
    auth_token: str = ""
    away_only: bool = True
    debug: bool = False
    clear_on_return: bool = False


def _valid_port(value: int) -> int:
    if 1 <= value <= 65535:
        return value
    LOGGER.warning("Port %s is out of range, using %s", value, DEFAULT_PORT)
    return DEFAULT_PORT


def read_config(settings: SettingsPort) -> PushConfig:
    """Read every setting from the registry into a fresh PushConfig."""

    return PushConfig(
        server=settings.get_str(SERVER_SETTING, DEFAULT_SERVER).strip(),
        port=_valid_port(settings.get_int(PORT_SETTING, DEFAULT_PORT)),
        auth_token=settings.get_str(AUTH_TOKEN_SETTING, ""),
        away_only=settings.get_bool(AWAY_ONLY_SETTING, True),
        debug=settings.get_bool(DEBUG_SETTING, False),
        clear_on_return=settings.get_bool(CLEAR_ON_RETURN_SETTING, False),
    )


@dataclass
class PushContext:
    """Shared, reload-owned view of the current config.

    The push service owns one context and hands it to every component, so a
    reload is visible everywhere at once.
    """

    config: PushConfig


def mask_token(token: str) -> str:
    if not token:
        return "(not set)"
    return "*" * len(token)


def describe_config(config: PushConfig) -> list[str]:
    """Human-readable lines for the effective settings, token masked."""

    return [
        f"server: {config.server or '(not set)'}",
        f"port: {config.port}",
        f"auth token: {mask_token(config.auth_token)}",
        f"away only: {config.away_only}",
        f"clear on return from away: {config.clear_on_return}",
        f"debug: {config.debug}",
    ]
