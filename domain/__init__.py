"""Domain layer - Entities, enums, interfaces and errors."""
from .entities import Target, Outcome, Tally, CycleResult, Report
from .enums import Protocol, ProbeStatus, SchedulerState
from .interfaces import ITargetSource, IConsolePresenter, IReportWriter
from .exceptions import MonitorError, ConfigLoadError, ReportWriteError

__all__ = [
    # Entities
    'Target',
    'Outcome',
    'Tally',
    'CycleResult',
    'Report',
    # Enums
    'Protocol',
    'ProbeStatus',
    'SchedulerState',
    # Interfaces
    'ITargetSource',
    'IConsolePresenter',
    'IReportWriter',
    # Errors
    'MonitorError',
    'ConfigLoadError',
    'ReportWriteError',
]
