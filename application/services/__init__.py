"""Application services root exports."""
from .probe import ProbeExecutor, TCPChecker, HTTPChecker
from .monitor import Dispatcher, Aggregator, CycleRunner, Scheduler, ReportBuilder

__all__ = [
    "ProbeExecutor",
    "TCPChecker",
    "HTTPChecker",
    "Dispatcher",
    "Aggregator",
    "CycleRunner",
    "Scheduler",
    "ReportBuilder",
]
