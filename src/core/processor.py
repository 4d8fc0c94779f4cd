"""Chat event filtering.

This module is integration-agnostic. It only relies on the notifier port,
so any chat client adapter can feed it events.
"""

from __future__ import annotations

import logging

from core.config import PushContext
from core.models import ServerState
from core.ports import NotifierPort

LOGGER = logging.getLogger(__name__)


def mentions_nick(text: str, nick: str) -> bool:
    """Return True when the nickname appears anywhere in the text.

    This is a plain case-insensitive substring check, so "bob" also matches
    "bobcat".
    """

    if not nick:
        return False
    return nick.lower() in text.lower()


class EventFilter:
    """Decides per chat event whether the relay should be notified."""

    def __init__(self, context: PushContext, notifier: NotifierPort) -> None:
        self._context = context
        self._notifier = notifier

    def _eligible(self, server: ServerState) -> bool:
        return server.away or not self._context.config.away_only

    def handle_public(
        self,
        server: ServerState,
        text: str,
        nick: str,
        mask: str,
        channel: str,
    ) -> None:
        """Forward a channel message that mentions our nickname."""

        if not self._eligible(server):
            return
        if not mentions_nick(text, server.nick):
            return
        LOGGER.debug("Hilight from %s in %s on %s", nick, channel, server.network)
        self._notifier.send(channel, nick, text)

    def handle_private(self, server: ServerState, text: str, nick: str, address: str) -> None:
        """Forward every private message while eligible."""

        if not self._eligible(server):
            return
        LOGGER.debug("Private message from %s on %s", nick, server.network)
        self._notifier.send("", nick, text)
