"""Tests for outcome aggregation."""
from __future__ import annotations

from typing import AsyncIterator, List

import pytest

from application.services.monitor import Aggregator, CycleRunner, Dispatcher
from domain.entities import Outcome, Tally, Target
from conftest import FakeExecutor


def _t(name: str) -> Target:
    return Target(name, "127.0.0.1", 1, "tcp", 1)


async def _stream(outcomes: List[Outcome]) -> AsyncIterator[Outcome]:
    for o in outcomes:
        yield o


class TestAggregator:
    @pytest.mark.asyncio
    async def test_final_tally_and_order(self):
        outcomes = [Outcome.up(_t("a"), 1), Outcome.down(_t("b"), 2, "x"), Outcome.up(_t("c"), 3)]
        result = await Aggregator().drain(_stream(outcomes))

        assert result.tally == Tally(total=3, up=2, down=1)
        assert [o.target.name for o in result.outcomes] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_callback_sees_running_tally(self):
        outcomes = [Outcome.down(_t("a"), 1, "x"), Outcome.up(_t("b"), 1)]
        aggregator = Aggregator()
        snapshots = []
        aggregator.on_outcome = lambda o: snapshots.append((o.target.name, aggregator.tally))

        await aggregator.drain(_stream(outcomes))

        assert snapshots == [("a", Tally(1, 0, 1)), ("b", Tally(2, 1, 1))]
        assert aggregator.tally == Tally(2, 1, 1)

    @pytest.mark.asyncio
    async def test_empty_stream(self):
        result = await Aggregator().drain(_stream([]))
        assert result.outcomes == ()
        assert result.tally == Tally(0, 0, 0)


class TestCycleRunner:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("n", [0, 1, 12])
    async def test_tally_matches_target_count(self, logger, make_targets, n):
        executor = FakeExecutor(down={"t0", "t5"})
        result = await CycleRunner(Dispatcher(executor, logger), logger).run(make_targets(n))

        assert result.tally.total == n == len(result.outcomes)
        assert result.tally.up + result.tally.down == n
        assert result.tally.down == len({"t0", "t5"} & {f"t{i}" for i in range(n)})

    @pytest.mark.asyncio
    async def test_closed_port_scenario(self, logger, closed_port):
        from application.services.probe import ProbeExecutor

        runner = CycleRunner(Dispatcher(ProbeExecutor(logger), logger), logger)
        result = await runner.run([Target("A", "127.0.0.1", closed_port, "tcp", 1)])

        assert result.tally == Tally(total=1, up=0, down=1)
        assert "connection refused" in result.outcomes[0].error
