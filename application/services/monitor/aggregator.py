from __future__ import annotations

from typing import AsyncIterable, Callable, List, Optional

from domain.entities import CycleResult, Outcome, Tally

OutcomeCallback = Callable[[Outcome], None]


class Aggregator:
    """Single consumer of a cycle's outcomes.

    Counts every outcome as it arrives and hands it to ``on_outcome`` (the
    console presenter in interactive mode). Only this object touches the
    tally, so no locking is involved.
    """

    def __init__(self, on_outcome: Optional[OutcomeCallback] = None) -> None:
        self.on_outcome = on_outcome
        self._tally = Tally()
        self._outcomes: List[Outcome] = []

    @property
    def tally(self) -> Tally:
        """Running tally; final once ``drain`` has returned."""
        return self._tally

    async def drain(self, outcomes: AsyncIterable[Outcome]) -> CycleResult:
        self._tally = Tally()
        self._outcomes = []
        try:
            async for outcome in outcomes:
                self._outcomes.append(outcome)
                self._tally = self._tally.add(outcome)
                if self.on_outcome is not None:
                    self.on_outcome(outcome)
        finally:
            aclose = getattr(outcomes, "aclose", None)
            if aclose is not None:
                await aclose()
        return CycleResult(outcomes=tuple(self._outcomes), tally=self._tally)
