from __future__ import annotations

import itertools
from typing import Optional, Sequence

from core.logging.context import context as log_context
from core.logging.logger import StructuredLogger
from domain.entities import CycleResult, Target
from .aggregator import Aggregator, OutcomeCallback
from .dispatcher import Dispatcher


class CycleRunner:
    """One dispatch + aggregate round over a target list."""

    def __init__(self, dispatcher: Dispatcher, logger: StructuredLogger) -> None:
        self.dispatcher = dispatcher
        self.logger = logger
        self._ids = itertools.count(1)

    async def run(self, targets: Sequence[Target], on_outcome: Optional[OutcomeCallback] = None) -> CycleResult:
        cycle_id = next(self._ids)
        # probe tasks created below copy this context, so their records carry the cycle id
        with log_context(cycle=cycle_id):
            self.logger.info(lambda: "cycle-start", extra={"count": len(targets)})
            result = await Aggregator(on_outcome).drain(self.dispatcher.stream(targets))
            self.logger.info(
                lambda: f"cycle-complete up={result.tally.up} down={result.tally.down}",
                extra={"count": result.tally.total},
            )
        return result
