"""Validation helpers for config editing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FieldResult:
    value: object | None
    error: str | None = None


def parse_port(raw_value: str) -> FieldResult:
    raw_value = raw_value.strip()
    if not raw_value:
        return FieldResult(None, "port is required")
    if not raw_value.isdigit():
        return FieldResult(None, "port must be numeric")
    port = int(raw_value)
    if not 1 <= port <= 65535:
        return FieldResult(None, "port must be between 1 and 65535")
    return FieldResult(port)


def parse_server(raw_value: str) -> FieldResult:
    raw_value = raw_value.strip()
    if not raw_value:
        return FieldResult(None, "server is required")
    if any(ch.isspace() for ch in raw_value) or "/" in raw_value:
        return FieldResult(None, "server must be a bare hostname")
    return FieldResult(raw_value)


def token_warning(token: str) -> str:
    """Return a hint when the auth token looks too weak to protect pushes."""

    if not token:
        return "auth token is empty, nothing will be pushed"
    if len(token) < 24:
        return "auth tokens shorter than 24 characters are easy to guess"
    return ""
