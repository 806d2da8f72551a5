from __future__ import annotations

from typing import Sequence

from core.logging.logger import StructuredLogger
from domain.entities import Report, Target
from .cycle_runner import CycleRunner


class ReportBuilder:
    """Builds a Report from a fresh, silent probe cycle.

    Every call probes all targets again; it never reuses outcomes of an
    earlier cycle.
    """

    def __init__(self, cycle_runner: CycleRunner, logger: StructuredLogger) -> None:
        self.cycle_runner = cycle_runner
        self.logger = logger

    async def build(self, targets: Sequence[Target]) -> Report:
        result = await self.cycle_runner.run(targets)
        report = Report(results=result.outcomes, summary=result.tally)
        self.logger.info(lambda: "report-built", extra={"count": report.summary.total})
        return report
