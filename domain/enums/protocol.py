"""Probe protocol enumeration."""
from enum import Enum
from typing import Optional


class Protocol(Enum):
    """Protocols a target can be probed with.

    The set is closed: a configured tag outside of it is not an error at load
    time, it simply resolves to ``None`` and the probe reports it as DOWN.
    """

    TCP = "tcp"
    HTTP = "http"
    HTTPS = "https"

    @classmethod
    def parse(cls, tag: str) -> Optional['Protocol']:
        """Resolve a configured protocol tag, or ``None`` if unsupported."""
        try:
            return cls(tag)
        except ValueError:
            return None
