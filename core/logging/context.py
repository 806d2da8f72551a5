from __future__ import annotations

import contextvars
from typing import Any, Dict, Mapping

# Values attached to every record emitted from the current task (e.g. the cycle id).
_fields: contextvars.ContextVar[Mapping[str, Any]] = contextvars.ContextVar("monitor_log_fields", default={})


def _merged(values: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(_fields.get())
    merged.update((k, v) for k, v in values.items() if v is not None)
    return merged


def get_context() -> Dict[str, Any]:
    return dict(_fields.get())


class context(object):
    """Bind values (e.g. ``cycle``) for the duration of a block.

    asyncio tasks copy the current context when created, so probe tasks
    spawned inside the block inherit the binding.
    """

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        bound = _merged(self._values)
        self._token = _fields.set(bound)
        return bound

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _fields.reset(self._token)
            self._token = None
        return False
