from __future__ import annotations

import json

import pytest

from adapters.json_settings import JsonSettings
from core.config import (
    AUTH_TOKEN_SETTING,
    AWAY_ONLY_SETTING,
    PORT_SETTING,
    SERVER_SETTING,
    PushConfig,
    read_config,
)


def _write(path, data) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


def test_missing_file_yields_defaults(tmp_path) -> None:
    registry = JsonSettings(tmp_path / "config.json")

    assert read_config(registry) == PushConfig()


def test_reads_typed_values(tmp_path) -> None:
    path = tmp_path / "config.json"
    _write(
        path,
        {
            "ircpush": {
                SERVER_SETTING: "relay.example.org",
                PORT_SETTING: "4000",
                AWAY_ONLY_SETTING: "off",
            }
        },
    )

    config = read_config(JsonSettings(path))

    assert config.server == "relay.example.org"
    assert config.port == 4000
    assert config.away_only is False


def test_bad_values_fall_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    _write(path, {"ircpush": {PORT_SETTING: "lots", AWAY_ONLY_SETTING: "maybe"}})
    registry = JsonSettings(path)

    assert registry.get_int(PORT_SETTING, 26144) == 26144
    assert registry.get_bool(AWAY_ONLY_SETTING, True) is True


def test_environment_overrides_auth_token(tmp_path, monkeypatch) -> None:
    path = tmp_path / "config.json"
    _write(path, {"ircpush": {AUTH_TOKEN_SETTING: "from-file"}})
    registry = JsonSettings(path, {AUTH_TOKEN_SETTING: "IRCPUSH_AUTH_TOKEN"})

    monkeypatch.delenv("IRCPUSH_AUTH_TOKEN", raising=False)
    assert registry.get_str(AUTH_TOKEN_SETTING, "") == "from-file"

    monkeypatch.setenv("IRCPUSH_AUTH_TOKEN", "from-env")
    assert registry.get_str(AUTH_TOKEN_SETTING, "") == "from-env"


def test_set_value_keeps_other_sections(tmp_path) -> None:
    path = tmp_path / "config.json"
    _write(path, {"logging": {"enabled": True}})
    registry = JsonSettings(path)

    registry.set_value(SERVER_SETTING, "relay.example.org")

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored == {"logging": {"enabled": True}, "ircpush": {SERVER_SETTING: "relay.example.org"}}
    assert registry.get_str(SERVER_SETTING, "localhost") == "relay.example.org"


def test_invalid_json_raises_runtime_error(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(RuntimeError):
        JsonSettings(path).get_str(SERVER_SETTING, "localhost")


def test_update_writes_several_settings_at_once(tmp_path) -> None:
    path = tmp_path / "config.json"
    _write(path, {"ircpush": {SERVER_SETTING: "old.example.org", PORT_SETTING: 1}, "logging": {}})
    registry = JsonSettings(path)

    registry.update({SERVER_SETTING: "relay.example.org", AWAY_ONLY_SETTING: False})

    assert registry.load_document() == {
        "ircpush": {SERVER_SETTING: "relay.example.org", PORT_SETTING: 1, AWAY_ONLY_SETTING: False},
        "logging": {},
    }
