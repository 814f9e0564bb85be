# src/lmquery/probe.py
from __future__ import annotations

import logging
import socket
from typing import Optional

from .errors import ServerUnreachable

DEFAULT_PROBE_TIMEOUT = 3.0


def probe_server(
    host: str = "localhost",
    port: int = 1234,
    timeout: float = DEFAULT_PROBE_TIMEOUT,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Open and close one TCP connection to host:port. No retries."""
    if logger:
        logger.debug("Checking server at %s:%s (timeout %.1fs)", host, port, timeout)
    try:
        with socket.create_connection((host, port), timeout=timeout):
            pass
    except OSError as e:
        raise ServerUnreachable(
            f"Cannot connect to {host}:{port}. Is the local model server running? ({e})"
        ) from e
    if logger:
        logger.debug("Server at %s:%s is reachable", host, port)
