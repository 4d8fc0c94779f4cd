from __future__ import annotations

from pathlib import Path

import settings


def test_config_path_defaults_to_working_directory(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv(settings.CONFIG_ENV, raising=False)

    assert settings.default_config_path(tmp_path) == tmp_path / "config.json"


def test_config_path_from_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv(settings.CONFIG_ENV, str(tmp_path / "elsewhere.json"))

    assert settings.default_config_path(Path("/unused")) == tmp_path / "elsewhere.json"


def test_registry_and_logging_share_one_file(monkeypatch, tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"ircpush": {}, "logging": {"enabled": true}}', encoding="utf-8")
    monkeypatch.setattr(settings, "CONFIG_PATH", path)

    settings.registry(with_env=False).set_value("ircpush_server", "relay.example.org")

    assert settings.registry().path == path
    assert settings.logging_config() == {"enabled": True}
    assert settings.config_dir() == tmp_path.resolve()
