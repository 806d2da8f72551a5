"""Target entity: one configured endpoint to probe."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..enums import Protocol


@dataclass(frozen=True, slots=True)
class Target:
    """Immutable descriptor of one endpoint.

    ``protocol`` keeps the tag exactly as configured so that unsupported
    values can be reported back verbatim; use ``kind`` for dispatch.
    """

    name: str
    host: str
    port: int
    protocol: str
    timeout: int  # seconds

    @property
    def kind(self) -> Optional[Protocol]:
        return Protocol.parse(self.protocol)

    @property
    def address(self) -> str:
        """``host:port``, with IPv6 literals bracketed."""
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"

    @property
    def url(self) -> str:
        return f"{self.protocol}://{self.address}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'host': self.host,
            'port': self.port,
            'protocol': self.protocol,
            'timeout': self.timeout,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Target':
        return cls(
            name=str(data['name']),
            host=str(data['host']),
            port=int(data['port']),
            protocol=str(data['protocol']),
            timeout=int(data['timeout']),
        )
