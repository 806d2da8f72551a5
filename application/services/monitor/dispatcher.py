from __future__ import annotations

import asyncio
from typing import AsyncIterator, List, Optional, Sequence

from config import settings
from core.logging.logger import StructuredLogger
from domain.entities import Outcome, Target
from ..probe import ProbeExecutor, Stopwatch

# Terminal signal: enqueued once every probe task has delivered its outcome.
_DONE = object()


class Dispatcher:
    """Fans out one probe task per target and streams their outcomes.

    Outcomes pass through a single bounded ``asyncio.Queue`` written by every
    probe task and read by the one consumer iterating ``stream()``. A
    supervisor task enqueues the terminal sentinel only after all probe tasks
    have finished, so the stream ends exactly when every outcome has been
    delivered.
    """

    def __init__(
        self,
        executor: ProbeExecutor,
        logger: StructuredLogger,
        *,
        buffer_size: Optional[int] = None,
    ) -> None:
        self.executor = executor
        self.logger = logger
        self.buffer_size = settings.RESULT_BUFFER_SIZE if buffer_size is None else max(0, buffer_size)

    async def stream(self, targets: Sequence[Target]) -> AsyncIterator[Outcome]:
        """Yield one Outcome per target, in completion order.

        Leaving the iteration early (or closing the generator) cancels and
        awaits every outstanding probe task before returning.
        """
        targets = list(targets)
        if not targets:
            self.logger.debug(lambda: "dispatch-empty")
            return

        queue: asyncio.Queue[object] = asyncio.Queue(maxsize=self.buffer_size)
        workers: List[asyncio.Task[None]] = [
            asyncio.create_task(self._probe_into(target, queue), name=f"probe:{target.name}")
            for target in targets
        ]
        closer = asyncio.create_task(self._close_when_done(workers, queue), name="probe:closer")
        self.logger.debug(lambda: "dispatch-started", extra={"count": len(workers)})

        try:
            while True:
                item = await queue.get()
                if item is _DONE:
                    break
                yield item  # type: ignore[misc]
        finally:
            pending = [t for t in (*workers, closer) if not t.done()]
            for task in pending:
                task.cancel()
            if pending:
                self.logger.warning(lambda: "dispatch-aborted", extra={"count": len(pending)})
                await asyncio.gather(*pending, return_exceptions=True)

    async def _probe_into(self, target: Target, queue: asyncio.Queue[object]) -> None:
        watch = Stopwatch()
        try:
            outcome = await self.executor.probe(target)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            # The executor contract forbids this; still deliver exactly one outcome.
            self.logger.exception(lambda: "probe-crashed", extra={"target": target.name})
            outcome = Outcome.down(target, watch.elapsed_ms(), str(e) or type(e).__name__)
        await queue.put(outcome)

    @staticmethod
    async def _close_when_done(workers: Sequence[asyncio.Task[None]], queue: asyncio.Queue[object]) -> None:
        await asyncio.gather(*workers)
        await queue.put(_DONE)
