"""Relay payload formatting.

The relay expects one hand-shaped JSON object per connection. The layout is
written out literally so the bytes on the wire stay exactly what ircpushd
has always received.
"""

from __future__ import annotations

import re

from core.models import Notification

_WHITESPACE = re.compile(r"\s")
# Non-whitespace C0 controls (IRC bold/colour codes) are not legal inside a
# JSON string.
_CONTROL = re.compile(r"[\x00-\x1f]")


def escape(value: str) -> str:
    """Escape one field for embedding in the payload.

    Backslashes must be doubled before quotes are escaped, otherwise the
    backslashes added for quotes would be doubled as well. Every whitespace
    character becomes a single space, which also removes newlines.
    """

    value = value.replace("\\", "\\\\")
    value = value.replace('"', '\\"')
    value = _WHITESPACE.sub(" ", value)
    return _CONTROL.sub(lambda match: f"\\u{ord(match.group()):04x}", value)


def format_payload(auth_token: str, notification: Notification) -> str:
    """Return the JSON payload for a notification or the clear signal."""

    token = escape(auth_token)
    if notification.is_clear:
        return f'{{"auth-token":"{token}","badge":0}}'

    message = escape(notification.message)
    sender = escape(notification.sender)
    room = escape(notification.room)
    return (
        f'{{"auth-token":"{token}","message":"{message}","sender":"{sender}",'
        f'"badge": 1,"room":"{room}"}}'
    )
