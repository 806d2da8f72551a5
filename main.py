"""Main CLI entry-point."""
from __future__ import annotations

import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings


def main(argv: list[str] | None = None) -> int:
    bootstrap_logging(
        service="monitor",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="monitor.jsonl",
    )
    try:
        # Imported after logging is configured so module-level loggers pick it up
        from presentation.cli import MonitorCommand
        return MonitorCommand().run(sys.argv[1:] if argv is None else argv)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
