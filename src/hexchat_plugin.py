"""Composition root for running ircpush inside HexChat.

load() builds the push service around the HexChat module object and wires
logging into the client window. The addon script ircpush_hexchat.py is the
only place that imports the real hexchat module.
"""

from __future__ import annotations

import logging
from typing import Any

from adapters.hexchat_host import HexChatHost, HexChatLogHandler
from adapters.payload_formatting import escape
from adapters.relay_notifier import RelayNotifier
from adapters.tls_transport import TlsTransport
from core.config import PushConfig, PushContext, describe_config
from core.service import PushService
from log_config import RedactingFormatter

SHOW_COMMAND = "ircpush_show"

# Top-level loggers of the ircpush modules; other plugins share the root logger.
PLUGIN_LOGGERS = ("core", "adapters", "hexchat_plugin")

LOGGER = logging.getLogger(__name__)


def load(hexchat: Any) -> PushService:
    """Build, attach, and return the push service for one HexChat session."""

    host = HexChatHost(hexchat)
    handler = HexChatLogHandler(hexchat)
    formatter = RedactingFormatter([], fmt="%(message)s")
    handler.setFormatter(formatter)

    # Diagnostics from every ircpush module reach the window; the handler
    # level follows the debug setting.
    loggers = [logging.getLogger(name) for name in PLUGIN_LOGGERS]
    previous_levels = [logger.level for logger in loggers]
    for logger in loggers:
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)

    context = PushContext(config=PushConfig())
    notifier = RelayNotifier(context, TlsTransport())
    service = PushService(context, host, notifier, host, host, log_handler=handler)

    def refresh_secrets() -> None:
        token = service.config.auth_token
        # The payload debug line carries the token in its JSON-escaped form.
        formatter.set_secrets([token, escape(token)])

    def show() -> None:
        for line in describe_config(service.config):
            hexchat.prnt(f"ircpush: {line}")

    service.attach()
    host.on_config_changed(refresh_secrets)
    refresh_secrets()
    host.register_command(SHOW_COMMAND, show)

    def unload(userdata: Any) -> None:
        LOGGER.debug("Unloading ircpush")
        service.shutdown()
        host.unhook_all()
        for logger, level in zip(loggers, previous_levels):
            logger.removeHandler(handler)
            logger.setLevel(level)

    hexchat.hook_unload(unload)
    return service
