# src/teleport_nav/oracle.py
"""
Interfaces the search consumes from the world.

The pathfinder depends only on these protocols; concrete implementations
live in teleport_nav.world (voxel world + line of sight) and
teleport_nav.testing.fakes (synthetic graphs for tests).
"""

from __future__ import annotations

from typing import Iterable, Protocol, Tuple

from .geometry import CellKey, Position

# Player eye height above the feet, lowered while sneaking.
EYE_HEIGHT = 1.62
SNEAK_EYE_DROP = 0.08

# Added to a hub's ceiled block position to get the ray origin: the centre
# of the block column, at sneaking eye height above the block on top of it.
DEFAULT_EYE_OFFSET: Tuple[float, float, float] = (
    0.5,
    EYE_HEIGHT - SNEAK_EYE_DROP + 1,
    0.5,
)

DEFAULT_SEARCH_RADIUS = 16.0


class ReachabilityOracle(Protocol):
    """Produces the teleport destinations reachable from an origin."""

    def enumerate_reachable(
        self,
        origin: Position,
        radius: float,
    ) -> Iterable[CellKey]:
        """
        Return every cell reachable by one hop from `origin` within `radius`.

        Order matters: the search consumes candidates in emission order, so
        implementations must emit them in a fixed order for a fixed world.
        """
        ...


class PositionValidator(Protocol):
    """Pure validity query for a candidate standing position."""

    def is_position_valid(self, position: Position) -> bool:
        ...
