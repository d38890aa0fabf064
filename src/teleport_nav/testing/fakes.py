# src/teleport_nav/testing/fakes.py
"""
Test helpers for teleport_nav.

Provides:
- FakeReachabilityOracle: adjacency-dict oracle for synthetic graphs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence, Tuple

from ..geometry import CellKey, Position
from ..oracle import DEFAULT_EYE_OFFSET


@dataclass
class OracleCall:
    """Record of one enumerate_reachable() call."""

    origin: Position
    radius: float
    cell: CellKey


class FakeReachabilityOracle:
    """
    In-memory ReachabilityOracle over an explicit graph.

    Features:
    - `edges` maps a hub cell to the cells reachable from it, in the order
      they should be emitted. Cells not in `edges` reach nothing.
    - The hub cell is recovered from the origin by removing `eye_offset`,
      so the pathfinder's calling convention is exercised unchanged.
    - Every call is recorded in `calls`.
    """

    def __init__(
        self,
        edges: Mapping[CellKey, Sequence[CellKey]],
        *,
        eye_offset: Tuple[float, float, float] = DEFAULT_EYE_OFFSET,
    ) -> None:
        self._edges: Dict[CellKey, List[CellKey]] = {
            k: list(v) for k, v in edges.items()
        }
        self._eye_offset = eye_offset
        self.calls: List[OracleCall] = []

    def enumerate_reachable(self, origin: Position, radius: float) -> List[CellKey]:
        cell = self.cell_for_origin(origin)
        self.calls.append(OracleCall(origin=origin, radius=radius, cell=cell))
        return list(self._edges.get(cell, []))

    def cell_for_origin(self, origin: Position) -> CellKey:
        ex, ey, ez = self._eye_offset
        return (
            int(round(origin[0] - ex)),
            int(round(origin[1] - ey)),
            int(round(origin[2] - ez)),
        )

    # ------------------------------------------------------------------
    # Test-only helpers
    # ------------------------------------------------------------------

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def expanded_cells(self) -> List[CellKey]:
        return [c.cell for c in self.calls]


class StepClock:
    """Fake clock advancing by a fixed amount on every read."""

    def __init__(self, step_s: float = 0.0, start: float = 0.0) -> None:
        self.now = start
        self.step_s = step_s

    def __call__(self) -> float:
        value = self.now
        self.now += self.step_s
        return value
