"""Report entity: serializable snapshot of one cycle."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Tuple

from .outcome import Outcome, now
from .tally import Tally


@dataclass(frozen=True, slots=True)
class Report:
    """One cycle's outcomes and tally.

    ``timestamp`` is captured when the report is constructed and is distinct
    from the per-outcome completion timestamps.
    """

    results: Tuple[Outcome, ...]
    summary: Tally
    timestamp: datetime = field(default_factory=now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'timestamp': self.timestamp.isoformat(),
            'results': [r.to_dict() for r in self.results],
            'summary': self.summary.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Report':
        return cls(
            results=tuple(Outcome.from_dict(r) for r in data.get('results') or []),
            summary=Tally.from_dict(data['summary']),
            timestamp=datetime.fromisoformat(data['timestamp']),
        )
