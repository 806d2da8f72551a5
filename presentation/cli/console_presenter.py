from __future__ import annotations

import sys
from datetime import datetime
from typing import Optional, TextIO

from domain.entities import Outcome, Tally
from domain.enums import ProbeStatus
from domain.interfaces import IConsolePresenter

_GREEN = "\033[92m"
_RED = "\033[91m"
_RESET = "\033[0m"


def format_outcome(outcome: Outcome, *, color: bool = False) -> str:
    """``✓ [UP] host:port - Name (12ms)`` plus `` - Error: ...`` when present."""
    glyph = outcome.status.glyph
    if color:
        glyph = f"{_GREEN if outcome.status is ProbeStatus.UP else _RED}{glyph}{_RESET}"
    line = (
        f"{glyph} [{outcome.status.value}] {outcome.target.address} - "
        f"{outcome.target.name} ({outcome.latency_ms}ms)"
    )
    if outcome.error:
        line += f" - Error: {outcome.error}"
    return line


def format_summary(tally: Tally) -> str:
    return f"Summary: {tally.up} UP, {tally.down} DOWN"


class ConsolePresenter(IConsolePresenter):
    """Prints cycle progress line by line, in outcome completion order."""

    def __init__(self, stream: Optional[TextIO] = None, *, color: Optional[bool] = None) -> None:
        self.stream = stream or sys.stdout
        if color is None:
            isatty = getattr(self.stream, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream, flush=True)

    def cycle_started(self, target_count: int) -> None:
        self._print(f"Checking {target_count} servers...")

    def outcome(self, outcome: Outcome) -> None:
        self._print(format_outcome(outcome, color=self.color))

    def summary(self, tally: Tally) -> None:
        self._print()
        self._print(format_summary(tally))

    def tick(self) -> None:
        self._print()
        self._print(f"--- Health Check at {datetime.now():%H:%M:%S} ---")
