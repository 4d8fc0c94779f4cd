"""ircpushd relay notification adapter.

Pushes one payload per connection. Delivery is best-effort: nothing here
raises to the caller, so a broken relay never disturbs chat event handling.
"""

from __future__ import annotations

import logging

from adapters.payload_formatting import format_payload
from core.config import PushContext
from core.models import Notification
from core.ports import Transport

LOGGER = logging.getLogger(__name__)


class RelayNotifier:
    """Notifier adapter that writes payloads to the relay over a transport."""

    def __init__(self, context: PushContext, transport: Transport) -> None:
        self._context = context
        self._transport = transport

    def send(self, room: str, sender: str, message: str) -> None:
        """Push one notification; the all-empty triple pushes a clear."""

        config = self._context.config
        if config.auth_token == "":
            LOGGER.debug("Missing auth-token for push!")
            return
        if config.server == "":
            LOGGER.debug("Missing push server!")
            return

        LOGGER.debug("Sending notify to %s:%s...", config.server, config.port)
        try:
            connection = self._transport.connect(config.server, config.port)
        except (OSError, UnicodeError) as exc:
            LOGGER.debug("Could not connect to push server: %s", exc)
            return

        try:
            payload = format_payload(config.auth_token, Notification.build(room, sender, message))
            LOGGER.debug("Payload: %s", payload)
            # Undecodable bytes from the client arrive as lone surrogates.
            connection.sendall(payload.encode("utf-8", errors="replace"))
            LOGGER.debug("Sent push successfully.")
        except (OSError, UnicodeError) as exc:
            LOGGER.debug("Failed sending push to server: %s", exc)
        finally:
            try:
                connection.close()
            except OSError:
                LOGGER.debug("Error while closing relay connection", exc_info=True)

    def clear(self) -> None:
        """Ask the relay to dismiss pending notifications."""

        self.send("", "", "")
