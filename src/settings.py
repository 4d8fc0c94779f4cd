"""Static configuration for ircpush command line tools.

User-editable settings live in a single JSON file: the "ircpush" section
mirrors the chat client settings, the "logging" section controls log output.
Secrets can stay in the environment or a .env file instead.
"""

import os
from pathlib import Path
from typing import Optional

from adapters.json_settings import JsonSettings
from core.config import AUTH_TOKEN_SETTING

CONFIG_ENV = "IRCPUSH_CONFIG"


def default_config_path(cwd: Optional[Path] = None) -> Path:
    """Return IRCPUSH_CONFIG if set, else config.json in the working directory.

    The modules are installed at the top level of site-packages, so the
    file location never depends on where this module lives.
    """

    configured = os.getenv(CONFIG_ENV)
    if configured:
        return Path(configured).expanduser()
    return (cwd or Path.cwd()) / "config.json"


CONFIG_PATH = default_config_path()

# Environment variables that take precedence over values stored in the file.
AUTH_TOKEN_ENV = "IRCPUSH_AUTH_TOKEN"
ENV_OVERRIDES = {AUTH_TOKEN_SETTING: AUTH_TOKEN_ENV}


def registry(with_env: bool = True) -> JsonSettings:
    """Settings registry over CONFIG_PATH, shared by the CLI and the panel."""

    return JsonSettings(CONFIG_PATH, ENV_OVERRIDES if with_env else None)


def config_dir() -> Path:
    """Directory relative log paths are resolved against."""

    return CONFIG_PATH.resolve().parent


def logging_config() -> dict:
    """Return the optional logging section."""

    section = registry().load_document().get("logging", {})
    return section if isinstance(section, dict) else {}
