"""Structured logging for the monitor."""
from .config import bootstrap_logging, shutdown_logging
from .logger import StructuredLogger, get_logger
from .context import context, get_context
from .levels import LogLevel

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "StructuredLogger",
    "get_logger",
    "context",
    "get_context",
    "LogLevel",
]
