"""Return-from-away detection across chat networks (core domain)."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from core.models import ServerState
from core.ports import Clock

LOGGER = logging.getLogger(__name__)

POLL_INTERVAL_MS = 5 * 1000


class AwayTracker:
    """Polls servers on a fixed interval and fires once per tick on return.

    At most one schedule is held at a time: enable() always cancels the
    previous schedule before registering a new one.
    """

    def __init__(
        self,
        clock: Clock,
        servers: Callable[[], Iterable[ServerState]],
        on_return: Callable[[], None],
        interval_ms: int = POLL_INTERVAL_MS,
    ) -> None:
        self._clock = clock
        self._servers = servers
        self._on_return = on_return
        self._interval_ms = interval_ms
        self._handle: Optional[Any] = None
        self.memory: dict[str, bool] = {}

    @property
    def active(self) -> bool:
        return self._handle is not None

    def enable(self) -> None:
        self.disable()
        LOGGER.debug("Registering away timer")
        self._handle = self._clock.schedule(self._interval_ms, self.tick)

    def disable(self) -> None:
        if self._handle is None:
            return
        LOGGER.debug("Removing old away timer")
        self._clock.cancel(self._handle)
        self._handle = None

    def tick(self) -> bool:
        """Compare live away flags to memory; return True if a clear was sent."""

        returned = False
        for server in self._servers():
            was_away = self.memory.get(server.network)
            if was_away and not server.away:
                returned = True
            self.memory[server.network] = server.away

        if returned:
            LOGGER.debug("At least one server returned from away")
            self._on_return()
        return returned
