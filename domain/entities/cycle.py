"""Result of one full probe cycle."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .outcome import Outcome
from .tally import Tally


@dataclass(frozen=True, slots=True)
class CycleResult:
    """Outcomes in completion order plus the final tally."""

    outcomes: Tuple[Outcome, ...]
    tally: Tally
