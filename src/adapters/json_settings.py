"""JSON file settings registry.

Implements the core SettingsPort on top of the "ircpush" section of
config.json so the command line tools share settings with the config panel.
Secrets may be kept out of the file with environment overrides.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from adapters.value_parsing import parse_bool, parse_int

LOGGER = logging.getLogger(__name__)

SECTION = "ircpush"


class JsonSettings:
    """Thin JSON wrapper that satisfies the SettingsPort contract."""

    def __init__(self, path: Path, env_overrides: Optional[dict[str, str]] = None) -> None:
        self.path = Path(path)
        self._env_overrides = env_overrides or {}

    def load_document(self) -> dict[str, Any]:
        """Return the whole config file, or an empty dict when it is missing."""

        if not self.path.exists():
            return {}
        try:
            loaded = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise RuntimeError(f"{self.path} is not valid JSON: {exc.msg}") from exc
        if not isinstance(loaded, dict):
            raise RuntimeError(f"{self.path}: config root must be an object")
        return loaded

    def _section(self) -> dict[str, Any]:
        section = self.load_document().get(SECTION)
        if isinstance(section, dict):
            return section
        return {}

    def _raw(self, name: str) -> Any:
        env_name = self._env_overrides.get(name)
        if env_name:
            value = os.getenv(env_name)
            if value:
                return value
        return self._section().get(name)

    def get_str(self, name: str, default: str) -> str:
        value = self._raw(name)
        if value is None:
            return default
        return str(value)

    def get_int(self, name: str, default: int) -> int:
        value = self._raw(name)
        if value is None:
            return default
        parsed = parse_int(value)
        if parsed is None:
            LOGGER.warning("Setting %s=%r is not an integer, using %s", name, value, default)
            return default
        return parsed

    def get_bool(self, name: str, default: bool) -> bool:
        value = self._raw(name)
        if value is None:
            return default
        parsed = parse_bool(value)
        if parsed is None:
            LOGGER.warning("Setting %s=%r is not a boolean, using %s", name, value, default)
            return default
        return parsed

    def set_value(self, name: str, value: Any) -> None:
        """Store one setting, keeping every other setting and section."""

        self.update({name: value})

    def update(self, values: dict[str, Any]) -> None:
        """Merge values into the "ircpush" section and write the file once."""

        data = self.load_document()
        section = data.get(SECTION)
        if not isinstance(section, dict):
            section = {}
        section.update(values)
        data[SECTION] = section
        self.save_document(data)

    def save_document(self, data: dict[str, Any]) -> None:
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=True) + "\n", encoding="utf-8")
