"""Panel state: settings as loaded from disk plus edits not saved yet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from core.config import DEFAULTS


@dataclass
class PanelState:
    stored: dict[str, Any] = field(default_factory=dict)
    pending: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    loaded: bool = False

    @property
    def dirty(self) -> bool:
        return bool(self.pending)

    def value(self, name: str) -> Any:
        if name in self.pending:
            return self.pending[name]
        return self.stored.get(name, DEFAULTS[name])

    def stage(self, name: str, value: Any) -> None:
        """Record an edit; editing back to the stored value is not a change."""

        if self.stored.get(name, DEFAULTS[name]) == value:
            self.pending.pop(name, None)
        else:
            self.pending[name] = value

    def reset(self, stored: dict[str, Any]) -> None:
        self.stored = dict(stored)
        self.pending = {}
        self.error = None
        self.loaded = True

    def fail(self, message: str) -> None:
        self.stored = {}
        self.pending = {}
        self.error = message
        self.loaded = False

    def commit(self) -> None:
        self.stored.update(self.pending)
        self.pending = {}
        self.error = None
