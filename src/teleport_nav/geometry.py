# src/teleport_nav/geometry.py
"""
Position & cost model for teleport pathfinding.

Positions are continuous (x, y, z) floats; cells are integer (x, y, z)
tuples obtained by flooring. Cell identity is always integer based so that
hub lookups never depend on float equality.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Tuple

# (x, y, z) integer block coordinates
CellKey = Tuple[int, int, int]


class Position(NamedTuple):
    """Continuous 3D coordinate."""

    x: float
    y: float
    z: float

    @classmethod
    def of_cell(cls, cell: CellKey) -> "Position":
        return cls(float(cell[0]), float(cell[1]), float(cell[2]))


def distance_squared(a: Position, b: Position) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    dz = a[2] - b[2]
    return dx * dx + dy * dy + dz * dz


def distance(a: Position, b: Position) -> float:
    """Euclidean distance; the cost of a single teleport hop."""
    return math.sqrt(distance_squared(a, b))


def heuristic(a: Position, goal: Position) -> float:
    """
    Straight-line estimate of the remaining cost to goal.

    Hops are straight lines priced by Euclidean length, so this is
    admissible and consistent.
    """
    return distance(a, goal)


def discretize(p: Position) -> CellKey:
    """Floor each component to form the cell key."""
    return (math.floor(p[0]), math.floor(p[1]), math.floor(p[2]))


def floor_position(p: Position) -> Position:
    return Position.of_cell(discretize(p))


def ceil_position(p: Position) -> Position:
    return Position(
        float(math.ceil(p[0])),
        float(math.ceil(p[1])),
        float(math.ceil(p[2])),
    )


def offset(p: Position, dx: float, dy: float, dz: float) -> Position:
    return Position(p[0] + dx, p[1] + dy, p[2] + dz)


def goal_test(p: Position, goal: Position, tolerance_squared: float) -> bool:
    """
    Decide whether `p` satisfies the goal.

    With a nonzero tolerance, anything within sqrt(tolerance_squared) of the
    goal counts. Otherwise (or when outside the tolerance) the coordinates
    truncated toward zero must match the goal's exactly.
    """
    if tolerance_squared != 0.0 and distance_squared(p, goal) <= tolerance_squared:
        return True
    return (
        int(p[0]) == int(goal[0])
        and int(p[1]) == int(goal[1])
        and int(p[2]) == int(goal[2])
    )
