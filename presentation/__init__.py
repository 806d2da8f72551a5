"""Presentation layer - Command-line interface."""
from .cli import MonitorCommand, ConsolePresenter

__all__ = [
    "MonitorCommand",
    "ConsolePresenter",
]
