from __future__ import annotations

import asyncio
import os
import socket

from core.logging.logger import StructuredLogger
from domain.entities import Outcome, Target
from .timing import Stopwatch


def describe_dial_error(address: str, exc: BaseException) -> str:
    """Render a connection failure as ``dial tcp <address>: <reason>``."""
    if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
        reason = "i/o timeout"
    elif isinstance(exc, ConnectionRefusedError):
        reason = "connection refused"
    elif isinstance(exc, socket.gaierror):
        reason = f"lookup failed: {exc.strerror or exc}"
    elif isinstance(exc, OSError) and exc.errno and exc.errno > 0:
        reason = os.strerror(exc.errno).lower()
    else:
        reason = str(exc) or type(exc).__name__
    return f"dial tcp {address}: {reason}"


class TCPChecker:
    """TCP connect check: UP iff a connection can be established in time."""

    def __init__(self, logger: StructuredLogger) -> None:
        self.logger = logger

    async def check(self, target: Target) -> Outcome:
        watch = Stopwatch()
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(target.host, target.port),
                timeout=float(target.timeout),
            )
        except Exception as e:
            return Outcome.down(target, watch.elapsed_ms(), describe_dial_error(target.address, e))

        latency_ms = watch.elapsed_ms()
        writer.close()
        try:
            await writer.wait_closed()
        except OSError as e:
            # The probe already succeeded; a reset on close does not change that.
            self.logger.debug(lambda: "tcp-close-error", extra={"target": target.name, "error": str(e)})
        return Outcome.up(target, latency_ms)
