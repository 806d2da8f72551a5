"""Application layer - Probe services and use cases."""
from .services import ProbeExecutor, Dispatcher, Aggregator, CycleRunner, Scheduler, ReportBuilder
from .use_cases import RunCycleUseCase, GenerateReportUseCase

__all__ = [
    'ProbeExecutor',
    'Dispatcher',
    'Aggregator',
    'CycleRunner',
    'Scheduler',
    'ReportBuilder',
    'RunCycleUseCase',
    'GenerateReportUseCase',
]
