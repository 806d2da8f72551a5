"""Outcome entity: the result of probing one target once."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from ..enums import ProbeStatus
from .target import Target


def now() -> datetime:
    """Timezone-aware wall-clock time used for every timestamp."""
    return datetime.now().astimezone()


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of one probe attempt. ``error`` is only set for DOWN outcomes."""

    target: Target
    status: ProbeStatus
    latency_ms: int
    timestamp: datetime = field(default_factory=now)
    error: Optional[str] = None

    @property
    def is_up(self) -> bool:
        return self.status is ProbeStatus.UP

    @classmethod
    def up(cls, target: Target, latency_ms: int) -> 'Outcome':
        return cls(target=target, status=ProbeStatus.UP, latency_ms=max(0, latency_ms))

    @classmethod
    def down(cls, target: Target, latency_ms: int, error: Optional[str]) -> 'Outcome':
        return cls(target=target, status=ProbeStatus.DOWN, latency_ms=max(0, latency_ms), error=error or None)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the report wire field names."""
        data: Dict[str, Any] = {
            'server': self.target.to_dict(),
            'status': self.status.value,
            'response_time': self.latency_ms,
            'timestamp': self.timestamp.isoformat(),
        }
        if self.error:
            data['error'] = self.error
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Outcome':
        return cls(
            target=Target.from_dict(data['server']),
            status=ProbeStatus(data['status']),
            latency_ms=int(data['response_time']),
            timestamp=datetime.fromisoformat(data['timestamp']),
            error=data.get('error') or None,
        )
