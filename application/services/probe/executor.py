from __future__ import annotations

from typing import Optional

from core.logging.logger import StructuredLogger
from domain.entities import Outcome, Target
from domain.enums import Protocol
from .http_checker import HTTPChecker
from .tcp_checker import TCPChecker


class ProbeExecutor:
    """Runs the protocol-specific check for one target.

    ``probe`` always returns exactly one Outcome; probe-level failures are
    reported as DOWN outcomes, never raised.
    """

    def __init__(
        self,
        logger: StructuredLogger,
        *,
        tcp_checker: Optional[TCPChecker] = None,
        http_checker: Optional[HTTPChecker] = None,
    ) -> None:
        self.logger = logger
        self.tcp_checker = tcp_checker or TCPChecker(logger)
        self.http_checker = http_checker or HTTPChecker(logger)

    async def probe(self, target: Target) -> Outcome:
        self.logger.debug(
            lambda: "probe-start",
            extra={"target": target.name, "address": target.address, "protocol": target.protocol},
        )
        match target.kind:
            case Protocol.TCP:
                outcome = await self.tcp_checker.check(target)
            case Protocol.HTTP | Protocol.HTTPS:
                outcome = await self.http_checker.check(target)
            case None:
                outcome = Outcome.down(target, 0, f"unsupported protocol: {target.protocol}")
        self._log_outcome(outcome)
        return outcome

    def _log_outcome(self, outcome: Outcome) -> None:
        extra = {
            "target": outcome.target.name,
            "address": outcome.target.address,
            "latency": outcome.latency_ms,
            "status": outcome.status.value,
        }
        if outcome.is_up:
            self.logger.success(lambda: "probe-ok", extra=extra)
        else:
            self.logger.warning(lambda: "probe-down", extra={**extra, "error": outcome.error})
