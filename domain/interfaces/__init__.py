"""Domain interfaces."""
from .collaborators import ITargetSource, IConsolePresenter, IReportWriter

__all__ = [
    'ITargetSource',
    'IConsolePresenter',
    'IReportWriter',
]
