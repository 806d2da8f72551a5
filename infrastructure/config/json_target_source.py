"""JSON configuration loader for probe targets."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from config import settings
from core.logging.logger import get_logger
from domain.entities import Target
from domain.exceptions import ConfigLoadError
from domain.interfaces import ITargetSource


class JSONTargetSource(ITargetSource):
    """Reads ``{"servers": [...]}`` documents into Target lists.

    ``host`` and ``port`` are required. ``name`` falls back to the host,
    ``protocol`` to ``tcp`` and ``timeout`` to ``settings.DEFAULT_TIMEOUT_S``.
    Unknown protocol tags are kept; they are reported DOWN at probe time.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._log = get_logger(__name__, service="config")

    def load(self) -> List[Target]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigLoadError(f"failed to read config file: {e}") from e

        try:
            document = json.loads(raw)
            targets = self._parse(document)
        except (ValueError, TypeError, KeyError) as e:
            raise ConfigLoadError(f"failed to parse config: {e}") from e

        self._log.info(lambda: f"config-loaded {self.path}", extra={"count": len(targets)})
        return targets

    def _parse(self, document: Any) -> List[Target]:
        if not isinstance(document, dict):
            raise TypeError("top-level value must be an object")
        servers = document.get("servers") or []
        if not isinstance(servers, list):
            raise TypeError("'servers' must be a list")
        return [self._target(entry, idx) for idx, entry in enumerate(servers)]

    @staticmethod
    def _target(entry: Dict[str, Any], idx: int) -> Target:
        if not isinstance(entry, dict):
            raise TypeError(f"servers[{idx}] must be an object")
        for key in ("host", "port"):
            if key not in entry:
                raise KeyError(f"servers[{idx}] is missing '{key}'")
        host = str(entry["host"])
        port = _as_int(entry["port"], f"servers[{idx}].port")
        timeout = _as_int(entry.get("timeout", settings.DEFAULT_TIMEOUT_S), f"servers[{idx}].timeout")
        if not 0 < port < 65536:
            raise ValueError(f"servers[{idx}].port out of range: {port}")
        return Target(
            name=str(entry.get("name") or host),
            host=host,
            port=port,
            protocol=str(entry.get("protocol", "tcp")),
            timeout=timeout,
        )


def _as_int(value: Any, field: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} must be an integer, got {value!r}")
    return value
