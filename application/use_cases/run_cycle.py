"""Use case: one interactive probe cycle rendered to the console."""
from __future__ import annotations

from typing import Optional, Sequence

from domain.entities import CycleResult, Target
from domain.interfaces import IConsolePresenter
from application.services.monitor import CycleRunner


class RunCycleUseCase:
    """Probes every target once, rendering each outcome as it completes."""

    def __init__(self, cycle_runner: CycleRunner, presenter: Optional[IConsolePresenter] = None) -> None:
        self.cycle_runner = cycle_runner
        self.presenter = presenter

    async def execute(self, targets: Sequence[Target]) -> CycleResult:
        if self.presenter is None:
            return await self.cycle_runner.run(targets)
        self.presenter.cycle_started(len(targets))
        result = await self.cycle_runner.run(targets, on_outcome=self.presenter.outcome)
        self.presenter.summary(result.tally)
        return result
