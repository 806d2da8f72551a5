"""Interfaces for the collaborators the monitoring core depends on."""
from abc import ABC, abstractmethod
from typing import List

from ..entities import Outcome, Report, Tally, Target


class ITargetSource(ABC):
    """Yields the configured targets or raises ConfigLoadError."""

    @abstractmethod
    def load(self) -> List[Target]:
        """Load the ordered target list."""
        pass


class IConsolePresenter(ABC):
    """Renders cycle progress for an interactive operator."""

    @abstractmethod
    def cycle_started(self, target_count: int) -> None:
        pass

    @abstractmethod
    def outcome(self, outcome: Outcome) -> None:
        """Render one outcome as it arrives."""
        pass

    @abstractmethod
    def summary(self, tally: Tally) -> None:
        pass

    @abstractmethod
    def tick(self) -> None:
        """Announce a continuous-mode cycle."""
        pass


class IReportWriter(ABC):
    """Persists a report to a destination or raises ReportWriteError."""

    @abstractmethod
    def write(self, report: Report, destination: str) -> None:
        pass
