from __future__ import annotations

import argparse
import asyncio
import platform
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from config import settings
from core.logging.logger import StructuredLogger, get_logger
from domain.entities import Target
from domain.exceptions import ConfigLoadError, ReportWriteError
from domain.interfaces import IConsolePresenter, IReportWriter
from application.services.probe import HTTPChecker, ProbeExecutor
from application.services.monitor import CycleRunner, Dispatcher, ReportBuilder, Scheduler
from application.use_cases import GenerateReportUseCase, RunCycleUseCase
from infrastructure.config import JSONTargetSource, write_sample_config
from infrastructure.reporting import JSONReportWriter
from .console_presenter import ConsolePresenter
from .duration import format_duration, parse_duration, positive_duration

_EXAMPLES = """\
Examples:
  python main.py -sample
  python main.py -once
  python main.py -interval 60s
  python main.py -report health_report.json
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="server-health-monitor",
        description="Server Health Monitor",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "-help", "--help", action="help", help="Show this help")
    parser.add_argument(
        "-config", "--config", dest="config", default=settings.CONFIG_FILE, metavar="<file>",
        help=f"Configuration file (default: {settings.CONFIG_FILE})",
    )
    parser.add_argument("-once", "--once", dest="once", action="store_true", help="Run check once and exit")
    parser.add_argument(
        "-interval", "--interval", dest="interval", type=positive_duration,
        default=parse_duration(settings.DEFAULT_INTERVAL), metavar="<dur>",
        help=f"Continuous monitoring interval (default: {settings.DEFAULT_INTERVAL})",
    )
    parser.add_argument("-report", "--report", dest="report", metavar="<file>", help="Generate JSON report")
    parser.add_argument("-sample", "--sample", dest="sample", action="store_true", help="Create sample configuration file")
    return parser


class MonitorCommand:
    """CLI front-end wiring config, probe engine, presenter and report writer."""

    def __init__(
        self,
        *,
        presenter: Optional[IConsolePresenter] = None,
        executor: Optional[ProbeExecutor] = None,
        writer: Optional[IReportWriter] = None,
    ) -> None:
        self.log: StructuredLogger = get_logger(__name__, service="monitor")
        self.presenter = presenter or ConsolePresenter()
        self.executor = executor
        self.writer = writer or JSONReportWriter()

    def run(self, argv: Sequence[str]) -> int:
        args = build_parser().parse_args(list(argv))

        if args.sample:
            path = write_sample_config(settings.SAMPLE_CONFIG_FILE)
            print(f"Created sample configuration: {path}")
            return 0

        targets = self._load_targets(Path(args.config))
        if targets is None:
            return 1
        print(f"Loaded {len(targets)} servers from {args.config}")
        print(f"Python version: {platform.python_version()}, OS: {sys.platform}, Arch: {platform.machine()}")

        if args.report:
            return self._report(targets, args.report)
        if args.once:
            asyncio.run(self._run_cycle_use_case().execute(targets))
            return 0
        return self._continuous(targets, args.interval)

    def _load_targets(self, path: Path) -> Optional[List[Target]]:
        if not path.exists():
            print(f"Config file '{path}' not found. Creating sample...")
            write_sample_config(path)
            print(f"Created sample configuration: {path}")
        try:
            return JSONTargetSource(path).load()
        except ConfigLoadError as e:
            self.log.error(lambda: f"config-load-failed {path}", extra={"error": str(e)})
            print(f"Error loading config: {e}", file=sys.stderr)
            return None

    def _executor(self) -> ProbeExecutor:
        if self.executor is None:
            probe_log = get_logger("monitor.probe", service="probe")
            self.executor = ProbeExecutor(
                probe_log,
                http_checker=HTTPChecker(probe_log, headers={"User-Agent": settings.HTTP_USER_AGENT}),
            )
        return self.executor

    def _cycle_runner(self) -> CycleRunner:
        engine_log = get_logger("monitor.engine", service="engine")
        return CycleRunner(Dispatcher(self._executor(), engine_log), engine_log)

    def _run_cycle_use_case(self) -> RunCycleUseCase:
        return RunCycleUseCase(self._cycle_runner(), self.presenter)

    def _report(self, targets: List[Target], destination: str) -> int:
        print(f"Generating report: {destination}")
        runner = self._cycle_runner()
        use_case = GenerateReportUseCase(
            RunCycleUseCase(runner, self.presenter),
            ReportBuilder(runner, get_logger("monitor.report", service="report")),
            self.writer,
        )
        try:
            asyncio.run(use_case.execute(targets, destination))
        except ReportWriteError as e:
            self.log.error(lambda: "report-failed", extra={"error": str(e)})
            print(f"Error generating report: {e}", file=sys.stderr)
            return 1
        print(f"Report saved to {destination}")
        return 0

    def _continuous(self, targets: List[Target], interval: float) -> int:
        scheduler = Scheduler(self._run_cycle_use_case().execute, self.log, on_tick=self.presenter.tick)
        print(f"Starting continuous monitoring (interval: {format_duration(interval)})")
        print("Press Ctrl+C to stop...")
        try:
            asyncio.run(scheduler.run_continuous(targets, interval))
        except KeyboardInterrupt:
            self.log.info(lambda: "interrupted", extra={"count": scheduler.cycles_run})
            print("\nStopped.")
        return 0


def run(argv: Optional[Sequence[str]] = None) -> int:
    return MonitorCommand().run(list(argv if argv is not None else sys.argv[1:]))
