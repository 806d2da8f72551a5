"""Tally: up/down/total counts of one cycle."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from .outcome import Outcome


@dataclass(frozen=True, slots=True)
class Tally:
    total: int = 0
    up: int = 0
    down: int = 0

    @classmethod
    def of(cls, outcomes: Iterable[Outcome]) -> 'Tally':
        """Count outcomes; the result does not depend on their order."""
        up = down = 0
        for outcome in outcomes:
            if outcome.is_up:
                up += 1
            else:
                down += 1
        return cls(total=up + down, up=up, down=down)

    def add(self, outcome: Outcome) -> 'Tally':
        """Return a new tally with one more outcome counted."""
        if outcome.is_up:
            return Tally(self.total + 1, self.up + 1, self.down)
        return Tally(self.total + 1, self.up, self.down + 1)

    def to_dict(self) -> Dict[str, Any]:
        return {'total': self.total, 'up': self.up, 'down': self.down}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Tally':
        return cls(total=int(data['total']), up=int(data['up']), down=int(data['down']))
