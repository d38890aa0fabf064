# src/teleport_nav/telemetry.py
"""
Debug / telemetry sinks for the teleport pathfinder.

Provides:
- SearchSummary: record emitted once per completed search.
- TelemetrySink: protocol the pathfinder emits to.
- NullTelemetrySink: drops everything (default).
- LoggingTelemetrySink: logs summaries via the standard logging module.
- RecordingTelemetrySink: keeps visited cells in memory for rendering/tests.
- JsonlTelemetrySink: appends one JSON object per search to a file.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Protocol

from .geometry import CellKey

logger = logging.getLogger(__name__)


@dataclass
class SearchSummary:
    """Outcome of one compute() call. All fields are JSON-safe."""

    nodes_explored: int   # hubs discovered
    elapsed_ms: int
    status: str           # SearchStatus name
    path_length: int
    expansions: int = 0
    oracle_calls: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class TelemetrySink(Protocol):
    """
    Receives visited cells during a search and a summary afterwards.

    Implementations must be cheap: on_visit runs once per frontier pop.
    """

    def on_visit(self, cell: CellKey) -> None:
        ...

    def on_complete(self, summary: SearchSummary) -> None:
        ...


class NullTelemetrySink:
    def on_visit(self, cell: CellKey) -> None:
        return

    def on_complete(self, summary: SearchSummary) -> None:
        return


class LoggingTelemetrySink:
    """Logs each summary at INFO; visited cells at DEBUG when enabled."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logging.getLogger("teleport_nav.search")

    def on_visit(self, cell: CellKey) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("visit cell=%s", cell)

    def on_complete(self, summary: SearchSummary) -> None:
        self._logger.info(
            "search summary status=%s path_length=%d expansions=%d",
            summary.status,
            summary.path_length,
            summary.expansions,
        )


class RecordingTelemetrySink:
    """
    In-memory sink.

    `visited` is the render list for the last search: it is cleared when a
    new search begins (first visit after a completion).
    """

    def __init__(self) -> None:
        self.visited: List[CellKey] = []
        self.summaries: List[SearchSummary] = []
        self._completed = False

    def on_visit(self, cell: CellKey) -> None:
        if self._completed:
            self.visited.clear()
            self._completed = False
        self.visited.append(cell)

    def on_complete(self, summary: SearchSummary) -> None:
        self.summaries.append(summary)
        self._completed = True

    @property
    def last_summary(self) -> SearchSummary | None:
        return self.summaries[-1] if self.summaries else None


class JsonlTelemetrySink:
    """
    JSON-lines writer for search summaries.

    - Ensures the parent directory exists.
    - Writes UTF-8, flushes after every line.
    - Visits are not written.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        path.parent.mkdir(parents=True, exist_ok=True)
        self._file = path.open("a", encoding="utf-8")

    def on_visit(self, cell: CellKey) -> None:
        return

    def on_complete(self, summary: SearchSummary) -> None:
        data = summary.to_dict()
        data["ts"] = time.time()
        try:
            self._file.write(json.dumps(data, ensure_ascii=False) + "\n")
            self._file.flush()
        except OSError:
            logger.exception("Failed to write search summary to %s", self._path)

    def close(self) -> None:
        self._file.close()
