# src/teleport_nav/world/validity.py
"""
Teleport-target validity.

A cell is a valid destination when:
- the block there is collidable (something to stand on),
- it is not one of the thin blocks a teleport cannot land on
  (carpet, skulls, signs),
- the two blocks above it are air (room for the player).

The block sets are held in a BlockCollisionProfile so worlds with other
block vocabularies can swap them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from ..geometry import CellKey, Position, discretize
from .voxels import AIR, VoxelWorld

# Blocks without a collision box.
DEFAULT_PASSABLE_BLOCKS: FrozenSet[str] = frozenset(
    {
        "minecraft:tallgrass",
        "minecraft:double_plant",
        "minecraft:red_flower",
        "minecraft:yellow_flower",
        "minecraft:deadbush",
        "minecraft:torch",
        "minecraft:redstone_wire",
        "minecraft:vine",
        "minecraft:web",
        "minecraft:water",
        "minecraft:flowing_water",
        "minecraft:lava",
        "minecraft:flowing_lava",
        "minecraft:fire",
        "minecraft:snow_layer",
        "minecraft:rail",
        "minecraft:lever",
        "minecraft:stone_button",
        "minecraft:wooden_button",
    }
)

# Collidable, but not something a teleport lands on.
DEFAULT_NON_TELEPORTABLE_BLOCKS: FrozenSet[str] = frozenset(
    {
        "minecraft:carpet",
        "minecraft:skull",
        "minecraft:wall_sign",
        "minecraft:standing_sign",
    }
)


def _is_air_like(block: Optional[str]) -> bool:
    """None, empty, or an explicit air id."""
    if not block:
        return True
    return block.lower() in (AIR, "air")


@dataclass(frozen=True)
class BlockCollisionProfile:
    """Block sets used by collision and validity checks."""

    passable_blocks: FrozenSet[str] = field(default=DEFAULT_PASSABLE_BLOCKS)
    non_teleportable_blocks: FrozenSet[str] = field(
        default=DEFAULT_NON_TELEPORTABLE_BLOCKS
    )

    def is_collidable(self, block: Optional[str]) -> bool:
        if _is_air_like(block):
            return False
        return block not in self.passable_blocks

    def is_solid_block(self, world: VoxelWorld, x: int, y: int, z: int) -> bool:
        return self.is_collidable(world.block_at(x, y, z))

    def can_teleport_to(self, world: VoxelWorld, cell: CellKey) -> bool:
        x, y, z = cell
        block = world.block_at(x, y, z)
        if not self.is_collidable(block):
            return False
        if block in self.non_teleportable_blocks:
            return False
        # Headroom must be actual air, not merely passable.
        return _is_air_like(world.block_at(x, y + 1, z)) and _is_air_like(
            world.block_at(x, y + 2, z)
        )


_DEFAULT_PROFILE = BlockCollisionProfile()


def default_collision_profile() -> BlockCollisionProfile:
    return _DEFAULT_PROFILE


def is_position_valid(
    world: VoxelWorld,
    position: Position,
    profile: Optional[BlockCollisionProfile] = None,
) -> bool:
    """Whether `position` (floored to its cell) is a valid teleport target."""
    return (profile or _DEFAULT_PROFILE).can_teleport_to(world, discretize(position))


class WorldPositionValidator:
    """PositionValidator bound to a world, for callers doing pre-flight checks."""

    def __init__(
        self,
        world: VoxelWorld,
        profile: Optional[BlockCollisionProfile] = None,
    ) -> None:
        self._world = world
        self._profile = profile or _DEFAULT_PROFILE

    def is_position_valid(self, position: Position) -> bool:
        return self._profile.can_teleport_to(self._world, discretize(position))
