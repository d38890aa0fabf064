# src/teleport_nav/world/line_of_sight.py
"""
Line of sight and the voxel-world reachability oracle.

can_see() marches along the ray from an origin to the aim point of a target
cell (the centre of its top face, where a player standing there would be)
in fixed steps; the ray is blocked by the first collidable block it enters
before reaching the target.

LineOfSightOracle enumerates cells whose aim point lies inside a sphere
around the origin, in ascending (x, y, z) order, and keeps those that are
valid teleport targets and visible from the origin.
"""

from __future__ import annotations

import math
from typing import List, Optional

from ..geometry import CellKey, Position, discretize
from .validity import BlockCollisionProfile, default_collision_profile
from .voxels import VoxelWorld

DEFAULT_RAY_STEP = 0.1


def aim_point(cell: CellKey) -> Position:
    """Centre of the top face of `cell`."""
    return Position(cell[0] + 0.5, cell[1] + 1.0, cell[2] + 0.5)


def can_see(
    world: VoxelWorld,
    origin: Position,
    target: CellKey,
    *,
    step: float = DEFAULT_RAY_STEP,
    profile: Optional[BlockCollisionProfile] = None,
) -> bool:
    """True if no collidable block lies between `origin` and `target`'s top face."""
    profile = profile or default_collision_profile()

    tx, ty, tz = aim_point(target)
    dx = tx - origin[0]
    dy = ty - origin[1]
    dz = tz - origin[2]
    length = math.sqrt(dx * dx + dy * dy + dz * dz)
    if length == 0.0:
        return True

    steps = int(math.ceil(length / step))
    last: Optional[CellKey] = None
    for i in range(steps + 1):
        t = min(i * step, length) / length
        cell = discretize(
            Position(origin[0] + dx * t, origin[1] + dy * t, origin[2] + dz * t)
        )
        if cell == last:
            continue
        last = cell
        if cell == target:
            return True
        if profile.is_solid_block(world, *cell):
            return False
    return True


class LineOfSightOracle:
    """ReachabilityOracle over a VoxelWorld."""

    def __init__(
        self,
        world: VoxelWorld,
        profile: Optional[BlockCollisionProfile] = None,
        *,
        ray_step: float = DEFAULT_RAY_STEP,
    ) -> None:
        self._world = world
        self._profile = profile or default_collision_profile()
        self._ray_step = ray_step

    def enumerate_reachable(self, origin: Position, radius: float) -> List[CellKey]:
        radius_sq = radius * radius
        ox, oy, oz = origin
        r = int(math.ceil(radius))
        bx, by, bz = discretize(origin)

        reachable: List[CellKey] = []
        for x in range(bx - r, bx + r + 1):
            cx = x + 0.5 - ox
            for y in range(by - r - 1, by + r + 1):
                cy = y + 1.0 - oy
                for z in range(bz - r, bz + r + 1):
                    cz = z + 0.5 - oz
                    if cx * cx + cy * cy + cz * cz > radius_sq:
                        continue
                    cell = (x, y, z)
                    if not self._profile.can_teleport_to(self._world, cell):
                        continue
                    if can_see(
                        self._world,
                        origin,
                        cell,
                        step=self._ray_step,
                        profile=self._profile,
                    ):
                        reachable.append(cell)
        return reachable

    def is_position_valid(self, position: Position) -> bool:
        return self._profile.can_teleport_to(self._world, discretize(position))
