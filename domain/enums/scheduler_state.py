"""Lifecycle states of the monitoring scheduler."""
from enum import Enum


class SchedulerState(Enum):
    """States a Scheduler moves through.

    IDLE -> RUNNING_ONCE -> STOPPED for single-shot runs,
    IDLE -> RUNNING_CONTINUOUS (-> STOPPED only via a stop token) otherwise.
    """

    IDLE = "idle"
    RUNNING_ONCE = "running-once"
    RUNNING_CONTINUOUS = "running-continuous"
    STOPPED = "stopped"
