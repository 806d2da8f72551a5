"""Tests for concurrent dispatch and outcome delivery."""
from __future__ import annotations

import asyncio
import time

import httpx
import pytest

from application.services.monitor import Aggregator, Dispatcher
from application.services.probe import HTTPChecker, ProbeExecutor
from domain.entities import Outcome, Target
from domain.enums import ProbeStatus
from conftest import FakeExecutor


async def _collect(dispatcher, targets):
    return [o async for o in dispatcher.stream(targets)]


class TestDelivery:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("n", [0, 1, 7, 40])
    async def test_one_outcome_per_target(self, logger, make_targets, n):
        targets = make_targets(n)
        outcomes = await _collect(Dispatcher(FakeExecutor(), logger), targets)

        assert len(outcomes) == n
        assert sorted(o.target.name for o in outcomes) == sorted(t.name for t in targets)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("buffer_size", [0, 1, 2, 100])
    async def test_any_buffer_size_delivers_everything(self, logger, make_targets, buffer_size):
        targets = make_targets(10)
        executor = FakeExecutor(down={"t3", "t7"})
        outcomes = await _collect(Dispatcher(executor, logger, buffer_size=buffer_size), targets)

        assert len(outcomes) == 10
        assert sum(1 for o in outcomes if o.status is ProbeStatus.DOWN) == 2

    @pytest.mark.asyncio
    async def test_empty_target_list_completes_immediately(self, logger):
        executor = FakeExecutor()
        assert await _collect(Dispatcher(executor, logger), []) == []
        assert executor.calls == []

    @pytest.mark.asyncio
    async def test_outcomes_arrive_in_completion_order(self, logger, make_targets):
        targets = make_targets(3)
        executor = FakeExecutor(delays={"t0": 0.15, "t1": 0.10, "t2": 0.0})
        outcomes = await _collect(Dispatcher(executor, logger), targets)

        assert [o.target.name for o in outcomes] == ["t2", "t1", "t0"]

    @pytest.mark.asyncio
    async def test_crashing_probe_still_yields_down_outcome(self, logger, make_targets):
        class Crashy(FakeExecutor):
            async def probe(self, target: Target) -> Outcome:
                if target.name == "t1":
                    raise RuntimeError("kaboom")
                return await super().probe(target)

        outcomes = await _collect(Dispatcher(Crashy(), logger), make_targets(3))

        crashed = [o for o in outcomes if o.target.name == "t1"]
        assert len(outcomes) == 3
        assert crashed[0].status is ProbeStatus.DOWN
        assert crashed[0].error == "kaboom"


class TestTeardown:
    @pytest.mark.asyncio
    async def test_early_exit_cancels_outstanding_probes(self, logger, make_targets):
        targets = make_targets(4)
        executor = FakeExecutor(delays={"t0": 0.0, "t1": 30, "t2": 30, "t3": 30})
        stream = Dispatcher(executor, logger).stream(targets)

        first = await stream.__anext__()
        await stream.aclose()

        assert first.target.name == "t0"
        assert sorted(executor.cancelled) == ["t1", "t2", "t3"]
        leftovers = [t for t in asyncio.all_tasks() if t.get_name().startswith("probe:")]
        assert leftovers == []

    @pytest.mark.asyncio
    async def test_consumer_error_tears_down_probes(self, logger, make_targets):
        executor = FakeExecutor(delays={"t0": 0.0, "t1": 30})

        def explode(outcome: Outcome) -> None:
            raise ValueError("presenter failed")

        with pytest.raises(ValueError):
            await Aggregator(on_outcome=explode).drain(Dispatcher(executor, logger).stream(make_targets(2)))

        assert executor.cancelled == ["t1"]


class TestParallelism:
    @pytest.mark.asyncio
    async def test_fifty_slow_endpoints_are_probed_in_parallel(self, logger):
        async def slow(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(0.2)
            return httpx.Response(200)

        executor = ProbeExecutor(logger, http_checker=HTTPChecker(logger, transport=httpx.MockTransport(slow)))
        targets = [Target(f"s{i}", f"host{i}.test", 80, "http", 5) for i in range(50)]

        start = time.perf_counter()
        outcomes = await _collect(Dispatcher(executor, logger, buffer_size=4), targets)
        elapsed = time.perf_counter() - start

        assert len(outcomes) == 50
        assert all(o.status is ProbeStatus.UP for o in outcomes)
        # serial execution would take 50 * 0.2s = 10s
        assert elapsed < 3.0
