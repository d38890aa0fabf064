# src/teleport_nav/world/voxels.py
"""
In-memory voxel world for the line-of-sight oracle.

This module does not decide what is solid; it only stores block ids.
Collision policy lives in teleport_nav.world.validity.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Protocol, Sequence

import yaml

from ..geometry import CellKey

AIR = "minecraft:air"


class VoxelWorld(Protocol):
    """Read-only block lookup. None means nothing stored (air)."""

    def block_at(self, x: int, y: int, z: int) -> Optional[str]:
        ...


class BlockMapWorld:
    """
    Sparse dict-backed world: cell -> block id.

    Cells that were never set are air.
    """

    def __init__(self, blocks: Optional[Mapping[CellKey, str]] = None) -> None:
        self._blocks: Dict[CellKey, str] = dict(blocks or {})

    def block_at(self, x: int, y: int, z: int) -> Optional[str]:
        return self._blocks.get((x, y, z))

    def set_block(self, cell: CellKey, block_id: str) -> None:
        if block_id == AIR:
            self._blocks.pop(cell, None)
        else:
            self._blocks[cell] = block_id

    def fill(self, corner_a: CellKey, corner_b: CellKey, block_id: str) -> None:
        """Set every cell of the inclusive box between two corners."""
        lo = [min(a, b) for a, b in zip(corner_a, corner_b)]
        hi = [max(a, b) for a, b in zip(corner_a, corner_b)]
        for x in range(lo[0], hi[0] + 1):
            for y in range(lo[1], hi[1] + 1):
                for z in range(lo[2], hi[2] + 1):
                    self.set_block((x, y, z), block_id)

    def cells(self) -> Iterable[CellKey]:
        return self._blocks.keys()

    def __len__(self) -> int:
        return len(self._blocks)

    # ------------------------------------------------------------------
    # Construction from plain data
    # ------------------------------------------------------------------

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BlockMapWorld":
        """
        Build a world from a mapping such as:

            fills:
              - {from: [-5, 63, -5], to: [5, 63, 5], id: "minecraft:stone"}
            blocks:
              - {pos: [0, 64, 2], id: "minecraft:glass"}

        Fills are applied first, then single blocks, in list order.
        """
        world = cls()
        for entry in data.get("fills") or []:
            _require_keys(entry, ("from", "to", "id"), "fill")
            world.fill(
                _as_cell(entry["from"]),
                _as_cell(entry["to"]),
                str(entry["id"]),
            )
        for entry in data.get("blocks") or []:
            _require_keys(entry, ("pos", "id"), "block")
            world.set_block(_as_cell(entry["pos"]), str(entry["id"]))
        return world


def load_world(path: Path) -> BlockMapWorld:
    """Load a BlockMapWorld from a YAML file."""
    if not path.exists():
        raise FileNotFoundError(f"Missing world file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return BlockMapWorld.from_mapping(data)


def _require_keys(entry: Any, keys: Sequence[str], kind: str) -> None:
    if not isinstance(entry, dict):
        raise ValueError(f"World {kind} entry must be a mapping, got {entry!r}")
    missing = [k for k in keys if k not in entry]
    if missing:
        raise ValueError(f"World {kind} entry {entry!r} missing keys: {missing}")


def _as_cell(raw: Any) -> CellKey:
    if not isinstance(raw, (list, tuple)) or len(raw) != 3:
        raise ValueError(f"Expected [x, y, z], got {raw!r}")
    try:
        return (int(raw[0]), int(raw[1]), int(raw[2]))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Expected integer coordinates, got {raw!r}") from exc
