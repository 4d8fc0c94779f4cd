"""Shared constants for the Textual UI."""

from __future__ import annotations

from core.config import (
    AWAY_ONLY_SETTING,
    CLEAR_ON_RETURN_SETTING,
    DEBUG_SETTING,
)

ACCENT = "#2AABEE"

# Switch widget id -> setting name.
SWITCH_SETTINGS = {
    "away-only": AWAY_ONLY_SETTING,
    "clear-on-return": CLEAR_ON_RETURN_SETTING,
    "debug": DEBUG_SETTING,
}
