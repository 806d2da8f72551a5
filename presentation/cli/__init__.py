"""Presentation CLI exports."""
from .console_presenter import ConsolePresenter, format_outcome, format_summary
from .duration import parse_duration, format_duration
from .monitor_command import MonitorCommand, build_parser

__all__ = [
    "ConsolePresenter",
    "format_outcome",
    "format_summary",
    "parse_duration",
    "format_duration",
    "MonitorCommand",
    "build_parser",
]
