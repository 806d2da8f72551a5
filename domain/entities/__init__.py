"""Domain entities."""
from .target import Target
from .outcome import Outcome
from .tally import Tally
from .cycle import CycleResult
from .report import Report

__all__ = [
    'Target',
    'Outcome',
    'Tally',
    'CycleResult',
    'Report',
]
