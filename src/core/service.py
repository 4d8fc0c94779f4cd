"""Push service: the composition root shared by every host integration.

The service owns the current config, the event filter, and the away tracker.
Hosts construct it with their ports and call attach() once.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.away_tracker import AwayTracker
from core.config import PushConfig, PushContext, read_config
from core.ports import ChatEventSource, Clock, NotifierPort, SettingsPort
from core.processor import EventFilter

LOGGER = logging.getLogger(__name__)

CLEAR_COMMAND = "ircpush_clear"


class PushService:
    """Wires settings, filtering, and away tracking around one notifier."""

    def __init__(
        self,
        context: PushContext,
        settings: SettingsPort,
        notifier: NotifierPort,
        events: ChatEventSource,
        clock: Clock,
        log_handler: Optional[logging.Handler] = None,
    ) -> None:
        self.context = context
        self._settings = settings
        self._notifier = notifier
        self._events = events
        self._log_handler = log_handler
        self.filter = EventFilter(context, notifier)
        self.tracker = AwayTracker(clock, events.servers, notifier.clear)

    @property
    def config(self) -> PushConfig:
        return self.context.config

    def reload(self) -> None:
        """Re-read settings and bring the away timer in line with them."""

        self.context.config = read_config(self._settings)
        if self._log_handler is not None:
            self._log_handler.setLevel(logging.DEBUG if self.config.debug else logging.WARNING)

        if self.config.clear_on_return:
            self.tracker.enable()
        else:
            self.tracker.disable()

    def clear(self) -> None:
        self._notifier.clear()

    def attach(self) -> None:
        """Load settings and subscribe to host events."""

        self.reload()
        self._events.on_config_changed(self.reload)
        self._events.on_public_message(self.filter.handle_public)
        self._events.on_private_message(self.filter.handle_private)
        self._events.register_command(CLEAR_COMMAND, self.clear)
        LOGGER.info(
            "ircpush loaded (server %s:%s, away only: %s)",
            self.config.server,
            self.config.port,
            self.config.away_only,
        )

    def shutdown(self) -> None:
        self.tracker.disable()
