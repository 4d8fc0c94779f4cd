"""TLS socket transport for the relay.

The relay is reached with a fresh TLS connection per notification. The
server certificate is not verified: anyone able to intercept the connection
can read the payload, and the auth token is the only secret protecting it.
"""

from __future__ import annotations

import socket
import ssl
from typing import Optional


def build_tls_context() -> ssl.SSLContext:
    """Create a client context that skips certificate and hostname checks."""

    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


class TlsTransport:
    """Transport adapter opening one TLS stream per call.

    With no timeout, connect() blocks the host event loop until the relay
    answers or the OS gives up.
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self._timeout = timeout
        self._context = build_tls_context()

    def connect(self, host: str, port: int) -> ssl.SSLSocket:
        raw = socket.create_connection((host, port), timeout=self._timeout)
        try:
            return self._context.wrap_socket(raw, server_hostname=host)
        except OSError:
            raw.close()
            raise
