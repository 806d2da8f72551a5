"""Tests for domain entities and their wire format."""
from __future__ import annotations

import json
from datetime import datetime

import pytest

from domain.entities import Outcome, Report, Tally, Target
from domain.enums import ProbeStatus, Protocol


def _target(protocol: str = "tcp") -> Target:
    return Target(name="A", host="127.0.0.1", port=8080, protocol=protocol, timeout=2)


class TestTarget:
    @pytest.mark.parametrize("tag, kind", [("tcp", Protocol.TCP), ("http", Protocol.HTTP), ("https", Protocol.HTTPS)])
    def test_known_protocols_resolve(self, tag, kind):
        assert _target(tag).kind is kind

    def test_unknown_protocol_resolves_to_none(self):
        assert _target("ftp").kind is None

    def test_url_and_address(self):
        t = _target("http")
        assert t.address == "127.0.0.1:8080"
        assert t.url == "http://127.0.0.1:8080"

    def test_ipv6_address_is_bracketed(self):
        t = Target(name="v6", host="::1", port=443, protocol="https", timeout=1)
        assert t.url == "https://[::1]:443"

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            _target().port = 1  # type: ignore[misc]


class TestOutcome:
    def test_down_outcome_carries_error(self):
        o = Outcome.down(_target(), 12, "HTTP 500")
        assert o.status is ProbeStatus.DOWN
        assert o.to_dict()["error"] == "HTTP 500"

    def test_up_outcome_omits_error_field(self):
        data = Outcome.up(_target(), 3).to_dict()
        assert "error" not in data
        assert data["status"] == "UP"
        assert data["response_time"] == 3
        assert data["server"] == {"name": "A", "host": "127.0.0.1", "port": 8080, "protocol": "tcp", "timeout": 2}

    def test_latency_is_never_negative(self):
        assert Outcome.up(_target(), -5).latency_ms == 0

    def test_timestamp_is_timezone_aware(self):
        assert Outcome.up(_target(), 1).timestamp.tzinfo is not None


class TestTally:
    def test_counts_are_order_independent(self):
        outcomes = [Outcome.up(_target(), 1), Outcome.down(_target(), 1, "x"), Outcome.up(_target(), 1)]
        assert Tally.of(outcomes) == Tally.of(reversed(outcomes)) == Tally(total=3, up=2, down=1)

    def test_empty(self):
        assert Tally.of([]) == Tally(0, 0, 0)

    def test_add_matches_of(self):
        outcomes = [Outcome.down(_target(), 1, "x"), Outcome.up(_target(), 1)]
        running = Tally()
        for o in outcomes:
            running = running.add(o)
        assert running == Tally.of(outcomes)


class TestReport:
    def test_serialized_report_parses_back(self):
        outcomes = (
            Outcome.up(_target(), 4),
            Outcome.down(_target("https"), 9, "HTTP 404"),
            Outcome.down(_target("ftp"), 0, "unsupported protocol: ftp"),
        )
        report = Report(results=outcomes, summary=Tally.of(outcomes))

        parsed = Report.from_dict(json.loads(json.dumps(report.to_dict())))

        assert parsed.summary == report.summary == Tally(3, 1, 2)
        assert len(parsed.results) == 3
        assert {r.error for r in parsed.results} == {None, "HTTP 404", "unsupported protocol: ftp"}
        assert isinstance(parsed.timestamp, datetime)

    def test_wire_document_shape(self):
        report = Report(results=(), summary=Tally())
        assert set(report.to_dict()) == {"timestamp", "results", "summary"}
        assert report.to_dict()["summary"] == {"total": 0, "up": 0, "down": 0}
