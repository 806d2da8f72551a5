"""Domain-level error types."""


class MonitorError(Exception):
    """Base class for fatal monitor errors."""


class ConfigLoadError(MonitorError):
    """Configuration missing, unreadable or malformed."""


class ReportWriteError(MonitorError):
    """A report could not be persisted to its destination."""

    def __init__(self, destination: str, reason: str) -> None:
        super().__init__(f"failed to write report {destination}: {reason}")
        self.destination = destination
        self.reason = reason
