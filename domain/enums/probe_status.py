"""Reachability status of a probed target."""
from enum import Enum


class ProbeStatus(Enum):
    UP = "UP"
    DOWN = "DOWN"

    @property
    def glyph(self) -> str:
        return "✓" if self is ProbeStatus.UP else "✗"
