"""Logging setup shared by the command line tools and the HexChat plugin."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterable, Optional

from adapters.payload_formatting import escape

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


class RedactingFormatter(logging.Formatter):
    """Replaces secrets (the relay auth token above all) with ***."""

    def __init__(self, secrets: Iterable[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.set_secrets(secrets)

    def set_secrets(self, secrets: Iterable[str]) -> None:
        self._secrets = sorted({secret for secret in secrets if secret}, key=len, reverse=True)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def collect_redaction_values(config: dict, auth_token: str = "") -> list[str]:
    """Return secret values to hide: the auth token plus configured env vars."""

    redact_cfg = config.get("redact", {}) if config else {}
    if not redact_cfg.get("enabled", True):
        return []
    # The payload debug line shows the token JSON-escaped.
    values = [auth_token, escape(auth_token)]
    for name in redact_cfg.get("patterns", []):
        value = os.getenv(name)
        if value:
            values.append(value)
    return sorted({value for value in values if value}, key=len, reverse=True)


def configure_logging(
    config: dict,
    project_root: Path,
    auth_token: str = "",
    debug: bool = False,
) -> None:
    """Configure root logging from the "logging" section of config.json.

    The debug flag forces console output at DEBUG level even when logging
    is disabled in the file.
    """

    if not config.get("enabled", False) and not debug:
        return

    level_name = "DEBUG" if debug else str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = RedactingFormatter(
        collect_redaction_values(config, auth_token), fmt=FORMAT, datefmt=DATEFMT
    )

    handlers: list[logging.Handler] = []

    if config.get("console", True) or debug:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = Path(file_cfg.get("path", "logs/ircpush.log"))
        if not path.is_absolute():
            path = project_root / path
        path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
            backupCount=int(file_cfg.get("backup_count", 5)),
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)
