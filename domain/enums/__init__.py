"""Domain enumerations."""
from .protocol import Protocol
from .probe_status import ProbeStatus
from .scheduler_state import SchedulerState

__all__ = [
    'Protocol',
    'ProbeStatus',
    'SchedulerState',
]
