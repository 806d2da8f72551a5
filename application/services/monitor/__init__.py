from .dispatcher import Dispatcher
from .aggregator import Aggregator
from .cycle_runner import CycleRunner
from .scheduler import Scheduler
from .report_builder import ReportBuilder

__all__ = [
    "Dispatcher",
    "Aggregator",
    "CycleRunner",
    "Scheduler",
    "ReportBuilder",
]
