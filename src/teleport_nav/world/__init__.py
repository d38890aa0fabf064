# src/teleport_nav/world/__init__.py
"""
Voxel world backing for the teleport pathfinder.

Provides:
- BlockMapWorld / load_world: sparse block storage and YAML loading
- BlockCollisionProfile / is_position_valid: teleport-target validity
- can_see / LineOfSightOracle: ray-marched reachability oracle
"""

from __future__ import annotations

from .voxels import AIR, BlockMapWorld, VoxelWorld, load_world
from .validity import (
    BlockCollisionProfile,
    WorldPositionValidator,
    default_collision_profile,
    is_position_valid,
)
from .line_of_sight import LineOfSightOracle, can_see

__all__ = [
    "AIR",
    "BlockMapWorld",
    "VoxelWorld",
    "load_world",
    "BlockCollisionProfile",
    "WorldPositionValidator",
    "default_collision_profile",
    "is_position_valid",
    "LineOfSightOracle",
    "can_see",
]
