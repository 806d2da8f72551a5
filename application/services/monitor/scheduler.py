from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional, Sequence

from core.logging.logger import StructuredLogger
from domain.entities import CycleResult, Target
from domain.enums import SchedulerState

CycleFn = Callable[[Sequence[Target]], Awaitable[CycleResult]]


class Scheduler:
    """Runs probe cycles once or on a fixed interval.

    Continuous mode has no internal stop condition: it is meant for a
    long-lived monitoring process and runs until the process is interrupted.
    Callers embedding it can pass an ``asyncio.Event`` as a stop token; it is
    honored between cycles, never in the middle of one.
    """

    def __init__(
        self,
        run_cycle: CycleFn,
        logger: StructuredLogger,
        *,
        on_tick: Optional[Callable[[], None]] = None,
    ) -> None:
        self._run_cycle = run_cycle
        self.logger = logger
        self.on_tick = on_tick
        self.state = SchedulerState.IDLE
        self.cycles_run = 0

    def _enter(self, state: SchedulerState) -> None:
        if self.state is not SchedulerState.IDLE:
            raise RuntimeError(f"scheduler cannot start from state {self.state.value}")
        self.state = state
        self.logger.debug(lambda: f"scheduler-{state.value}")

    async def run_once(self, targets: Sequence[Target]) -> CycleResult:
        self._enter(SchedulerState.RUNNING_ONCE)
        try:
            result = await self._run_cycle(targets)
            self.cycles_run += 1
            return result
        finally:
            self.state = SchedulerState.STOPPED

    async def run_continuous(
        self,
        targets: Sequence[Target],
        interval: float,
        stop: Optional[asyncio.Event] = None,
    ) -> int:
        """Run a cycle every ``interval`` seconds; returns the cycles run once stopped.

        The first cycle fires one interval after start. A cycle that overruns
        the interval delays the next one; ticks missed meanwhile collapse into
        a single immediate cycle.
        """
        self._enter(SchedulerState.RUNNING_CONTINUOUS)
        loop = asyncio.get_running_loop()
        next_tick = loop.time() + interval
        try:
            while True:
                if await self._wait_until(next_tick, stop):
                    break
                if self.on_tick is not None:
                    self.on_tick()
                await self._run_cycle(targets)
                self.cycles_run += 1

                now = loop.time()
                next_tick += interval
                if next_tick < now:
                    self.logger.warning(lambda: "scheduler-overrun", extra={"count": self.cycles_run})
                    next_tick = now
        finally:
            self.state = SchedulerState.STOPPED
            self.logger.info(lambda: "scheduler-stopped", extra={"count": self.cycles_run})
        return self.cycles_run

    @staticmethod
    async def _wait_until(deadline: float, stop: Optional[asyncio.Event]) -> bool:
        """Sleep until ``deadline``; True if the stop token fired first."""
        if stop is not None and stop.is_set():
            return True
        delay = max(0.0, deadline - asyncio.get_running_loop().time())
        if stop is None:
            await asyncio.sleep(delay)
            return False
        try:
            await asyncio.wait_for(stop.wait(), timeout=delay)
        except asyncio.TimeoutError:
            return False
        return True
