"""pytest configuration and shared fixtures for the monitor tests."""
from __future__ import annotations

import asyncio
import socket
from typing import Callable, Dict, List, Optional

import pytest

from core.logging.logger import StructuredLogger, get_logger
from domain.entities import Outcome, Target


class FakeExecutor:
    """Stand-in for ProbeExecutor: no network, configurable delay and status."""

    def __init__(self, delays: Optional[Dict[str, float]] = None, down: Optional[set[str]] = None) -> None:
        self.delays = delays or {}
        self.down = down or set()
        self.calls: List[str] = []
        self.cancelled: List[str] = []

    async def probe(self, target: Target) -> Outcome:
        self.calls.append(target.name)
        delay = self.delays.get(target.name, 0.0)
        try:
            await asyncio.sleep(delay)
        except asyncio.CancelledError:
            self.cancelled.append(target.name)
            raise
        if target.name in self.down:
            return Outcome.down(target, int(delay * 1000), "simulated failure")
        return Outcome.up(target, int(delay * 1000))


@pytest.fixture
def logger() -> StructuredLogger:
    return get_logger("tests", service="test")


@pytest.fixture
def make_targets() -> Callable[..., List[Target]]:
    def _make(n: int, protocol: str = "tcp", timeout: int = 1) -> List[Target]:
        return [Target(name=f"t{i}", host="127.0.0.1", port=10000 + i, protocol=protocol, timeout=timeout) for i in range(n)]
    return _make


@pytest.fixture
def closed_port() -> int:
    """A loopback port nothing listens on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]
