"""Use case: run a check and persist a fresh report of the targets."""
from __future__ import annotations

from typing import Sequence

from core.logging.logger import get_logger
from domain.entities import Report, Target
from domain.interfaces import IReportWriter
from application.services.monitor import ReportBuilder
from .run_cycle import RunCycleUseCase

logger = get_logger(__name__, service="report")


class GenerateReportUseCase:
    """
    Report generation probes the targets twice:

    1. an interactive cycle, rendered to the console like ``-once``;
    2. the ReportBuilder's own cycle, whose outcomes go into the report.

    The second cycle is independent of the first, so the console output and
    the persisted report may disagree for flapping endpoints.
    """

    def __init__(
        self,
        run_cycle: RunCycleUseCase,
        report_builder: ReportBuilder,
        writer: IReportWriter,
    ) -> None:
        self.run_cycle = run_cycle
        self.report_builder = report_builder
        self.writer = writer

    async def execute(self, targets: Sequence[Target], destination: str) -> Report:
        await self.run_cycle.execute(targets)
        report = await self.report_builder.build(targets)
        # ReportWriteError propagates to the caller
        self.writer.write(report, destination)
        logger.success(lambda: f"report-written {destination}", extra={"count": len(report.results)})
        return report
