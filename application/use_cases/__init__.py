"""Application use cases."""
from .run_cycle import RunCycleUseCase
from .generate_report import GenerateReportUseCase

__all__ = [
    'RunCycleUseCase',
    'GenerateReportUseCase',
]
