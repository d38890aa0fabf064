# src/teleport_nav/hubs.py
"""
Hub (search node) type and the per-search hub store.

The store owns every Hub discovered during one search. Predecessor links
are cell keys into the same store rather than object references, so the
implicit shortest-path tree never forms ownership cycles and path
reconstruction is a walk over dict lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from .geometry import CellKey, Position, discretize


@dataclass
class Hub:
    """One discovered graph vertex."""

    location: Position
    predecessor: Optional[CellKey]
    heuristic: float      # H-cost, distance to goal at creation
    edge_cost: float      # cost of the hop from predecessor
    cumulative_cost: float  # G-cost, only ever lowered

    @property
    def key(self) -> CellKey:
        return discretize(self.location)

    @property
    def estimated_total(self) -> float:
        """F-cost: G + H."""
        return self.cumulative_cost + self.heuristic


class HubStore:
    """
    Dict-backed mapping from cell key to Hub.

    No deletion: hubs are only created or updated in place.
    """

    def __init__(self) -> None:
        self._hubs: Dict[CellKey, Hub] = {}

    def get(self, key: CellKey) -> Optional[Hub]:
        return self._hubs.get(key)

    def put(self, key: CellKey, hub: Hub) -> None:
        self._hubs[key] = hub

    def clear(self) -> None:
        self._hubs.clear()

    def __len__(self) -> int:
        return len(self._hubs)

    def __contains__(self, key: object) -> bool:
        return key in self._hubs

    def __iter__(self) -> Iterator[CellKey]:
        return iter(self._hubs)

    # ------------------------------------------------------------------
    # Path reconstruction
    # ------------------------------------------------------------------

    def path_to(self, key: CellKey) -> List[Position]:
        """Path from the root to the stored hub at `key`."""
        hub = self._hubs[key]
        return self.reconstruct_path(hub.location, hub.predecessor)

    def reconstruct_path(
        self,
        location: Position,
        predecessor: Optional[CellKey],
    ) -> List[Position]:
        """
        Walk predecessor keys back to the root and reverse.

        `location` may belong to a terminal hub that was never stored (goal
        hubs found among candidates are not inserted).
        """
        path: List[Position] = [location]
        seen = set()
        current = predecessor
        while current is not None:
            if current in seen:
                raise RuntimeError(f"Predecessor cycle at cell {current}")
            seen.add(current)
            hub = self._hubs[current]
            path.append(hub.location)
            current = hub.predecessor
        path.reverse()
        return path
