from __future__ import annotations

"""Connected-component extraction over a ZoneGrid."""

import math
from collections import deque
from dataclasses import dataclass
from typing import FrozenSet, List, Set

from .grid import Coordinate, ZoneGrid
from .zones import Position, ZoneType


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Cluster:
    """A maximal 4-connected group of cells of one zone, with its rounded centroid."""

    zone: ZoneType
    cells: FrozenSet[Coordinate]
    centroid: Position

    @property
    def size(self) -> int:
        return len(self.cells)

    def __contains__(self, coord: Coordinate) -> bool:
        return coord in self.cells


class ClusterFinder:
    def __init__(self, grid: ZoneGrid) -> None:
        self.grid = grid

    def _flood(self, start: Coordinate, zone: ZoneType, visited: Set[Coordinate]) -> Cluster:
        queue = deque([start])
        visited.add(start)
        members: List[Coordinate] = []
        sum_x = sum_y = 0
        while queue:
            cx, cy = queue.popleft()
            members.append((cx, cy))
            sum_x += cx
            sum_y += cy
            for nx, ny in self.grid.neighbors4(cx, cy):
                if (nx, ny) not in visited and self.grid.get(nx, ny) is zone:
                    visited.add((nx, ny))
                    queue.append((nx, ny))
        count = len(members)
        centroid = Position(_round_half_up(sum_x / count), _round_half_up(sum_y / count))
        return Cluster(zone=zone, cells=frozenset(members), centroid=centroid)

    def find_clusters(self, zone: ZoneType) -> List[Cluster]:
        """Return every maximal 4-connected region of ``zone`` in row-major discovery order."""
        visited: Set[Coordinate] = set()
        clusters: List[Cluster] = []
        for x, y in self.grid.iter_coords():
            if (x, y) in visited or self.grid.get(x, y) is not zone:
                continue
            clusters.append(self._flood((x, y), zone, visited))
        return clusters


def find_clusters(grid: ZoneGrid, zone: ZoneType) -> List[Cluster]:
    """Shortcut for ``ClusterFinder(grid).find_clusters(zone)``."""
    return ClusterFinder(grid).find_clusters(zone)


__all__ = ["Cluster", "ClusterFinder", "find_clusters"]
