# src/teleport_nav/frontier.py
"""
Frontier (open set) for the teleport search.

heapq has no decrease-key, so re-prioritising pushes a fresh entry and
marks it as the only live entry for that cell; stale entries are dropped
when they surface at the top of the heap. Ties on F-cost break by
insertion order.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, List, Tuple

from .geometry import CellKey
from .hubs import Hub

# (f_cost, sequence, key, hub)
_Entry = Tuple[float, int, CellKey, Hub]


class Frontier:
    """Min-priority queue of hubs keyed by cumulative_cost + heuristic."""

    def __init__(self) -> None:
        self._heap: List[_Entry] = []
        # cell key -> sequence number of its live entry
        self._live: Dict[CellKey, int] = {}
        self._counter = itertools.count()

    def push(self, hub: Hub) -> None:
        key = hub.key
        seq = next(self._counter)
        # Any older entry for this key becomes stale here.
        self._live[key] = seq
        heapq.heappush(self._heap, (hub.estimated_total, seq, key, hub))

    def reprioritize(self, hub: Hub) -> None:
        """Re-rank `hub` after its cost was lowered in place."""
        self.push(hub)

    def pop_min(self) -> Hub:
        while self._heap:
            _, seq, key, hub = heapq.heappop(self._heap)
            if self._live.get(key) != seq:
                continue
            del self._live[key]
            return hub
        raise IndexError("pop from an empty frontier")

    def clear(self) -> None:
        self._heap.clear()
        self._live.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._live

    def __len__(self) -> int:
        return len(self._live)

    def __bool__(self) -> bool:
        return bool(self._live)
