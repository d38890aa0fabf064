# src/teleport_nav/__init__.py
"""
Time-budgeted teleport pathfinding.

Exports:
    - TeleportPathfinder: A* over teleport hops with a wall-clock budget
    - PathfindingResult / SearchStatus: outcome of one compute() call
    - PathfinderConfig / load_pathfinder_config: search knobs
    - Position / CellKey: coordinate types
    - ReachabilityOracle / PositionValidator: world interfaces
"""

from __future__ import annotations

from .config import PathfinderConfig, PathfinderConfigError, load_pathfinder_config
from .geometry import CellKey, Position, discretize, distance, goal_test, heuristic
from .oracle import (
    DEFAULT_EYE_OFFSET,
    DEFAULT_SEARCH_RADIUS,
    PositionValidator,
    ReachabilityOracle,
)
from .pathfinder import PathfindingResult, SearchStatus, TeleportPathfinder
from .telemetry import (
    JsonlTelemetrySink,
    LoggingTelemetrySink,
    NullTelemetrySink,
    RecordingTelemetrySink,
    SearchSummary,
    TelemetrySink,
)

__all__ = [
    "TeleportPathfinder",
    "PathfindingResult",
    "SearchStatus",
    "PathfinderConfig",
    "PathfinderConfigError",
    "load_pathfinder_config",
    "CellKey",
    "Position",
    "discretize",
    "distance",
    "goal_test",
    "heuristic",
    "DEFAULT_EYE_OFFSET",
    "DEFAULT_SEARCH_RADIUS",
    "PositionValidator",
    "ReachabilityOracle",
    "JsonlTelemetrySink",
    "LoggingTelemetrySink",
    "NullTelemetrySink",
    "RecordingTelemetrySink",
    "SearchSummary",
    "TelemetrySink",
]
