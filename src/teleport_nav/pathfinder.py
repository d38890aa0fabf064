# src/teleport_nav/pathfinder.py
"""
Time-budgeted A* over teleport hops.

- Nodes (hubs) are discovered lazily from a ReachabilityOracle.
- Euclidean edge cost and Euclidean heuristic.
- Cheaper routes to known cells re-promote the hub in place.
- Wall-clock budget instead of an iteration cap.
- No closed set unless PathfinderConfig.use_closed_set is on.

This module does not move the player or touch world state.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Set

from .config import PathfinderConfig
from .frontier import Frontier
from .geometry import (
    CellKey,
    Position,
    ceil_position,
    discretize,
    distance,
    floor_position,
    goal_test,
    heuristic,
    offset,
)
from .hubs import Hub, HubStore
from .oracle import ReachabilityOracle
from .telemetry import NullTelemetrySink, SearchSummary, TelemetrySink

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class SearchStatus(Enum):
    IDLE = "idle"
    SUCCEEDED = "succeeded"
    TIMED_OUT = "timed_out"
    EXHAUSTED = "frontier_exhausted"


@dataclass
class PathfindingResult:
    """Structured result of one compute() call."""

    path: List[Position]
    status: SearchStatus
    nodes_explored: int = 0
    expansions: int = 0
    oracle_calls: int = 0
    elapsed_ms: int = 0

    @property
    def success(self) -> bool:
        return self.status is SearchStatus.SUCCEEDED

    @property
    def reason(self) -> str | None:
        """None on success, otherwise a short machine-readable explanation."""
        return None if self.success else self.status.value


@dataclass
class _Session:
    """Transient state of a single search run."""

    hubs: HubStore = field(default_factory=HubStore)
    frontier: Frontier = field(default_factory=Frontier)
    closed: Set[CellKey] = field(default_factory=set)
    path: List[Position] = field(default_factory=list)
    expansions: int = 0
    oracle_calls: int = 0

    def reset(self) -> None:
        self.hubs.clear()
        self.frontier.clear()
        self.closed.clear()
        self.path = []
        self.expansions = 0
        self.oracle_calls = 0


class TeleportPathfinder:
    """
    Best-first search from `start` to `end` over teleport hops.

    Start and end are floored to block positions. `goal_tolerance_squared`
    of 0 demands reaching the goal's exact cell; a positive value accepts
    any position within that squared distance.

    One instance runs one search at a time. compute() clears all previous
    state, so concurrent calls on the same instance are not supported.
    """

    def __init__(
        self,
        start: Position,
        end: Position,
        goal_tolerance_squared: float,
        *,
        oracle: ReachabilityOracle,
        config: Optional[PathfinderConfig] = None,
        telemetry: Optional[TelemetrySink] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.start = floor_position(Position(*start))
        self.end = floor_position(Position(*end))
        self.goal_tolerance_squared = float(goal_tolerance_squared)

        self._oracle = oracle
        self._config = config or PathfinderConfig()
        self._telemetry: TelemetrySink = telemetry or NullTelemetrySink()
        self._clock = clock

        self._session = _Session()
        self.status = SearchStatus.IDLE

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def config(self) -> PathfinderConfig:
        return self._config

    def get_path(self) -> List[Position]:
        """Path found by the last compute(); empty if none."""
        return list(self._session.path)

    def get_hub(self, key: CellKey) -> Optional[Hub]:
        """Inspect a hub discovered by the last compute()."""
        return self._session.hubs.get(key)

    def compute(self, max_loops: int = 2000, depth: int = 1) -> PathfindingResult:
        """
        Run the search until the goal is reached, the frontier empties or
        the wall-clock budget runs out.

        `max_loops` and `depth` are accepted but do not limit the search;
        the budget in PathfinderConfig.budget_ms is the only cutoff.
        """
        started_at = self._clock()
        session = self._session
        session.reset()

        logger.debug(
            "Teleport search start=%s end=%s tolerance_sq=%s budget_ms=%s "
            "max_loops=%d depth=%d",
            self.start,
            self.end,
            self.goal_tolerance_squared,
            self._config.budget_ms,
            max_loops,
            depth,
        )

        start_hub = Hub(
            location=self.start,
            predecessor=None,
            heuristic=heuristic(self.start, self.end),
            edge_cost=0.0,
            cumulative_cost=0.0,
        )
        session.hubs.put(start_hub.key, start_hub)
        session.frontier.push(start_hub)

        self.status = self._run(started_at)
        return self._finish(started_at)

    # ------------------------------------------------------------------
    # Search loop
    # ------------------------------------------------------------------

    def _run(self, started_at: float) -> SearchStatus:
        session = self._session
        cfg = self._config

        while session.frontier:
            hub = session.frontier.pop_min()
            key = hub.key

            if cfg.use_closed_set:
                if key in session.closed:
                    continue
                session.closed.add(key)

            reached = self._is_goal(hub.location)

            # Popped hub is dropped unvisited once over budget.
            if not reached and self._elapsed_ms(started_at) > cfg.budget_ms:
                return SearchStatus.TIMED_OUT

            self._emit_visit(discretize(ceil_position(hub.location)))

            if reached:
                session.path = session.hubs.path_to(key)
                return SearchStatus.SUCCEEDED

            if self._expand(hub):
                return SearchStatus.SUCCEEDED

        return SearchStatus.EXHAUSTED

    def _expand(self, hub: Hub) -> bool:
        """
        Generate successors of `hub`. Returns True when a candidate reached
        the goal; the path is already set in that case.
        """
        session = self._session
        cfg = self._config
        parent_key = hub.key

        origin = offset(ceil_position(hub.location), *cfg.eye_offset)
        session.expansions += 1
        session.oracle_calls += 1
        candidates = self._oracle.enumerate_reachable(origin, cfg.search_radius)

        for cell in candidates:
            loc = Position.of_cell(cell)
            cost = distance(hub.location, loc)
            total_cost = hub.cumulative_cost + cost

            if self._is_goal(loc):
                # Terminal hub is not stored; first qualifying candidate wins.
                session.path = session.hubs.reconstruct_path(loc, parent_key)
                return True

            cell_key = discretize(loc)
            existing = session.hubs.get(cell_key)

            if existing is None:
                new_hub = Hub(
                    location=loc,
                    predecessor=parent_key,
                    heuristic=heuristic(loc, self.end),
                    edge_cost=cost,
                    cumulative_cost=total_cost,
                )
                session.hubs.put(cell_key, new_hub)
                session.frontier.push(new_hub)
            elif total_cost < existing.cumulative_cost:
                if cfg.use_closed_set and cell_key in session.closed:
                    continue
                self._repromote(existing, loc, parent_key, cost, total_cost)

        return False

    def _repromote(
        self,
        hub: Hub,
        loc: Position,
        parent_key: CellKey,
        cost: float,
        total_cost: float,
    ) -> None:
        """Found a shorter route to a known hub: update in place and re-rank."""
        hub.location = loc
        hub.predecessor = parent_key
        hub.edge_cost = cost
        hub.cumulative_cost = total_cost
        if self._config.recompute_heuristic_on_repromote:
            hub.heuristic = heuristic(loc, self.end)
        self._session.frontier.reprioritize(hub)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _is_goal(self, loc: Position) -> bool:
        return goal_test(loc, self.end, self.goal_tolerance_squared)

    def _elapsed_ms(self, started_at: float) -> float:
        return (self._clock() - started_at) * 1000.0

    def _emit_visit(self, cell: CellKey) -> None:
        try:
            self._telemetry.on_visit(cell)
        except Exception:
            # Telemetry must never break the search.
            logger.exception("Telemetry sink failed on visit")

    def _finish(self, started_at: float) -> PathfindingResult:
        session = self._session
        elapsed_ms = int(self._elapsed_ms(started_at))
        result = PathfindingResult(
            path=list(session.path),
            status=self.status,
            nodes_explored=len(session.hubs),
            expansions=session.expansions,
            oracle_calls=session.oracle_calls,
            elapsed_ms=elapsed_ms,
        )

        logger.info(
            "Done calculating path, searched %d blocks, took: %dms",
            result.nodes_explored,
            elapsed_ms,
        )

        summary = SearchSummary(
            nodes_explored=result.nodes_explored,
            elapsed_ms=elapsed_ms,
            status=self.status.name,
            path_length=len(result.path),
            expansions=result.expansions,
            oracle_calls=result.oracle_calls,
        )
        try:
            self._telemetry.on_complete(summary)
        except Exception:
            logger.exception("Telemetry sink failed on completion")

        return result
