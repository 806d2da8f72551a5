from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import get_context
from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


class _ContextFilter(logging.Filter):
    """Stamp records with the bound log context and a default service.

    Handler filters run in the emitting task, before the record crosses to
    the queue listener thread where the context variable is empty.
    """

    def __init__(self, service: str) -> None:
        super().__init__()
        self._service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "service", None):
            record.service = self._service
        if getattr(record, "context", None) is None:
            record.context = get_context()
        return True


def bootstrap_logging(
    *,
    service: str = "monitor",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "monitor.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Install console and rotating JSON-lines handlers on the root logger.

    The console handler is opt-in (``LOG_CONSOLE=true``) so that log lines do
    not interleave with the monitor's own stdout output. File writes go
    through a queue listener thread so probe tasks never block on disk I/O.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)
    record_filter = _ContextFilter(service)

    if os.getenv("LOG_CONSOLE", "false").strip().lower() == "true":
        console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
        console = logging.StreamHandler()
        console.setLevel(to_level(console_level_str) if console_level_str else lvl)
        console.setFormatter(ConsoleFormatter())
        console.addFilter(record_filter)
        root.addHandler(console)

    if log_dir:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            json_handler = RotatingFileHandler(
                str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
        except OSError as e:
            logging.basicConfig(level=lvl)
            logging.getLogger(__name__).warning("file logging disabled: %s", e)
            return
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        qh.addFilter(record_filter)
        root.addHandler(qh)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()


def shutdown_logging() -> None:
    """Flush and stop the file listener, if one is running."""
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
