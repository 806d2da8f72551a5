from __future__ import annotations

import asyncio
from typing import Dict, Optional

import httpx

from core.logging.logger import StructuredLogger
from domain.entities import Outcome, Target
from .timing import Stopwatch


def is_success_status(status_code: int) -> bool:
    """2xx and 3xx responses count as reachable."""
    return 200 <= status_code < 400


class HTTPChecker:
    """HTTP/HTTPS GET check against ``{protocol}://{host}:{port}``.

    The target timeout bounds the whole request, connection setup included.
    A custom ``transport`` can be injected (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        logger: StructuredLogger,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        verify: bool = True,
    ) -> None:
        self.logger = logger
        self.headers = headers or {}
        self.transport = transport
        self.verify = verify

    def _client(self, timeout_s: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self.headers,
            timeout=httpx.Timeout(timeout_s),
            follow_redirects=True,
            verify=self.verify,
            transport=self.transport,
        )

    async def _fetch_status(self, url: str, timeout_s: float) -> int:
        async with self._client(timeout_s) as client:
            # stream() returns once headers arrive; the body is never read
            async with client.stream("GET", url) as resp:
                return resp.status_code

    async def check(self, target: Target) -> Outcome:
        timeout_s = float(target.timeout)
        watch = Stopwatch()
        try:
            status = await asyncio.wait_for(self._fetch_status(target.url, timeout_s), timeout=timeout_s)
        except asyncio.TimeoutError:
            return Outcome.down(target, watch.elapsed_ms(), f"timeout after {target.timeout}s")
        except httpx.TimeoutException as e:
            return Outcome.down(target, watch.elapsed_ms(), str(e) or f"timeout after {target.timeout}s")
        except Exception as e:
            return Outcome.down(target, watch.elapsed_ms(), str(e) or type(e).__name__)

        latency_ms = watch.elapsed_ms()
        if is_success_status(status):
            return Outcome.up(target, latency_ms)
        return Outcome.down(target, latency_ms, f"HTTP {status}")
