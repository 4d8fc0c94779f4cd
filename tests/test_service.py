from __future__ import annotations

import logging

from core.config import (
    AUTH_TOKEN_SETTING,
    AWAY_ONLY_SETTING,
    CLEAR_ON_RETURN_SETTING,
    DEBUG_SETTING,
    PORT_SETTING,
    PushConfig,
    PushContext,
)
from core.models import ServerState
from core.service import CLEAR_COMMAND, PushService
from fakes import FakeClock, FakeEvents, FakeNotifier, FakeSettings


def _service(values: dict | None = None, handler: logging.Handler | None = None):
    settings = FakeSettings(values)
    notifier = FakeNotifier()
    events = FakeEvents()
    clock = FakeClock()
    service = PushService(
        PushContext(config=PushConfig()),
        settings,
        notifier,
        events,
        clock,
        log_handler=handler,
    )
    return service, settings, notifier, events, clock


def test_reload_toggling_keeps_at_most_one_schedule() -> None:
    service, settings, notifier, events, clock = _service()

    for enabled in (False, True, False, True):
        settings.values[CLEAR_ON_RETURN_SETTING] = enabled
        service.reload()
        assert len(clock.active) == (1 if enabled else 0)

    assert service.tracker.active
    settings.values[CLEAR_ON_RETURN_SETTING] = False
    service.reload()
    assert clock.active == {}
    clock.fire()
    assert notifier.clears == 0


def test_reload_is_idempotent() -> None:
    service, _, _, _, clock = _service({CLEAR_ON_RETURN_SETTING: True})

    service.reload()
    service.reload()

    assert len(clock.active) == 1


def test_reload_replaces_config() -> None:
    service, settings, _, _, _ = _service()
    settings.values.update({AUTH_TOKEN_SETTING: "tok", PORT_SETTING: 4000, AWAY_ONLY_SETTING: False})

    service.reload()

    assert service.config == PushConfig(port=4000, auth_token="tok", away_only=False)


def test_out_of_range_port_falls_back_to_default() -> None:
    service, _, _, _, _ = _service({PORT_SETTING: 70000})

    service.reload()

    assert service.config.port == 26144


def test_attach_subscribes_and_registers_clear_command() -> None:
    service, settings, notifier, events, clock = _service({AWAY_ONLY_SETTING: False})
    service.attach()

    server = ServerState(network="libera", nick="alice", away=False)
    events.public_callbacks[0](server, "alice: ping", "bob", "bob!b@host", "#chan")
    events.private_callbacks[0](server, "hello", "carol", "c@host")
    events.commands[CLEAR_COMMAND]()

    assert notifier.sent == [("#chan", "bob", "alice: ping"), ("", "carol", "hello")]
    assert notifier.clears == 1

    settings.values[CLEAR_ON_RETURN_SETTING] = True
    events.config_callbacks[0]()
    assert len(clock.active) == 1


def test_clear_on_return_end_to_end() -> None:
    service, _, notifier, events, clock = _service({CLEAR_ON_RETURN_SETTING: True})
    service.attach()
    events.server_list = [
        ServerState(network="libera", nick="alice", away=True),
        ServerState(network="oftc", nick="alice", away=True),
    ]

    clock.fire()
    events.server_list[0] = ServerState(network="libera", nick="alice", away=False)
    clock.fire()
    clock.fire()

    assert notifier.clears == 1


def test_debug_setting_controls_log_handler_level() -> None:
    handler = logging.NullHandler()
    service, settings, _, _, _ = _service({DEBUG_SETTING: True}, handler=handler)

    service.reload()
    assert handler.level == logging.DEBUG

    settings.values[DEBUG_SETTING] = False
    service.reload()
    assert handler.level == logging.WARNING


def test_shutdown_cancels_timer() -> None:
    service, _, _, _, clock = _service({CLEAR_ON_RETURN_SETTING: True})
    service.attach()

    service.shutdown()

    assert clock.active == {}
