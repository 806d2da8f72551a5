"""JSON report persistence."""
from __future__ import annotations

import json
from pathlib import Path

from core.logging.logger import get_logger
from domain.entities import Report
from domain.exceptions import ReportWriteError
from domain.interfaces import IReportWriter

logger = get_logger(__name__, service="report")


class JSONReportWriter(IReportWriter):
    """Writes reports as two-space indented JSON documents."""

    def write(self, report: Report, destination: str) -> None:
        path = Path(destination)
        data = json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
        try:
            if path.parent != Path(""):
                path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(data + "\n", encoding="utf-8")
        except OSError as e:
            logger.error(lambda: f"report-write-failed {destination}", extra={"error": str(e)})
            raise ReportWriteError(str(destination), str(e)) from e

    @staticmethod
    def read(destination: str) -> Report:
        """Parse a previously written report."""
        with open(destination, encoding="utf-8") as fh:
            return Report.from_dict(json.load(fh))
