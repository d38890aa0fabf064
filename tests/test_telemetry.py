# tests/test_telemetry.py
"""
Tests for the telemetry sinks and their wiring into TeleportPathfinder.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from teleport_nav import (
    JsonlTelemetrySink,
    LoggingTelemetrySink,
    Position,
    RecordingTelemetrySink,
    SearchSummary,
    TeleportPathfinder,
)
from teleport_nav.geometry import CellKey
from teleport_nav.testing import FakeReachabilityOracle

CHAIN = {(0, 0, i): [(0, 0, i + 1)] for i in range(3)}


def run_chain(telemetry) -> TeleportPathfinder:
    pf = TeleportPathfinder(
        Position(0.0, 0.0, 0.0),
        Position(0.0, 0.0, 3.0),
        0.0,
        oracle=FakeReachabilityOracle(CHAIN),
        telemetry=telemetry,
    )
    pf.compute()
    return pf


def test_recording_sink_receives_visits_and_summary() -> None:
    sink = RecordingTelemetrySink()

    run_chain(sink)

    assert sink.visited == [(0, 0, 0), (0, 0, 1), (0, 0, 2)]
    summary = sink.last_summary
    assert summary is not None
    assert summary.status == "SUCCEEDED"
    assert summary.nodes_explored == 3
    assert summary.path_length == 4
    assert summary.expansions == 3
    assert summary.elapsed_ms >= 0


def test_recording_sink_resets_visits_per_search() -> None:
    sink = RecordingTelemetrySink()

    pf = run_chain(sink)
    pf.compute()

    assert sink.visited == [(0, 0, 0), (0, 0, 1), (0, 0, 2)]
    assert len(sink.summaries) == 2


class ExplodingSink:
    def on_visit(self, cell: CellKey) -> None:
        raise RuntimeError("render target gone")

    def on_complete(self, summary: SearchSummary) -> None:
        raise RuntimeError("render target gone")


def test_failing_sink_does_not_break_search(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="teleport_nav.pathfinder"):
        pf = run_chain(ExplodingSink())

    assert pf.get_path()[-1] == (0, 0, 3)
    assert "Telemetry sink failed" in caplog.text


def test_logging_sink_logs_summary(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="teleport_nav.search"):
        run_chain(LoggingTelemetrySink())

    sink_lines = [r.getMessage() for r in caplog.records if r.name == "teleport_nav.search"]
    assert sink_lines == ["search summary status=SUCCEEDED path_length=4 expansions=3"]


def test_jsonl_sink_appends_one_line_per_search(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "searches.jsonl"
    sink = JsonlTelemetrySink(path)

    pf = run_chain(sink)
    pf.compute()
    sink.close()

    lines = path.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 2
    data = json.loads(lines[0])
    assert data["status"] == "SUCCEEDED"
    assert data["nodes_explored"] == 3
    assert data["path_length"] == 4
    assert isinstance(data["ts"], (int, float))
