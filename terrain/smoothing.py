from __future__ import annotations

"""Majority-vote relaxation that cleans up region-growth artifacts."""

import logging
from typing import Dict

from .grid import ZoneGrid
from .zones import ZoneType

logger = logging.getLogger("zonesearch.Smoothing")
logger.addHandler(logging.NullHandler())


class CellularSmoother:
    """
    Replace each interior cell with the majority zone of its 3x3 window.

    The cell's own zone gets ``self_weight`` extra votes so near-ties do not
    flicker. A Mountain cell whose window still holds ``mountain_threshold``
    Mountain cells (itself included) stays Mountain, which keeps thin ridges
    alive. The outer ring of the grid is left as is.
    """

    def __init__(self, grid: ZoneGrid, *, mountain_threshold: int = 3, self_weight: float = 0.5) -> None:
        self.grid = grid
        self.mountain_threshold = mountain_threshold
        self.self_weight = self_weight

    def _window_counts(self, snapshot: ZoneGrid, x: int, y: int) -> Dict[ZoneType, int]:
        counts = {zone: 0 for zone in ZoneType}
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                counts[snapshot.get(x + dx, y + dy)] += 1
        return counts

    def _resolve(self, current: ZoneType, counts: Dict[ZoneType, int]) -> ZoneType:
        if current is ZoneType.MOUNTAIN and counts[ZoneType.MOUNTAIN] >= self.mountain_threshold:
            return ZoneType.MOUNTAIN
        best = current
        best_votes = -1.0
        # declaration order breaks ties
        for zone in ZoneType:
            votes = counts[zone] + (self.self_weight if zone is current else 0.0)
            if votes > best_votes:
                best_votes = votes
                best = zone
        return best

    def smooth_once(self) -> int:
        """Run one pass over a snapshot of the grid. Returns the number of cells that changed."""
        snapshot = self.grid.copy()
        changed = 0
        for y in range(1, self.grid.rows - 1):
            for x in range(1, self.grid.cols - 1):
                current = snapshot.get(x, y)
                new_zone = self._resolve(current, self._window_counts(snapshot, x, y))
                if new_zone is not current:
                    self.grid.set(x, y, new_zone)
                    changed += 1
        return changed

    def smooth(self, iterations: int = 4) -> int:
        """Run ``iterations`` passes and return the total number of cell changes."""
        total = 0
        for i in range(iterations):
            changed = self.smooth_once()
            total += changed
            logger.debug("smoothing pass %d changed %d cells", i + 1, changed)
        return total


__all__ = ["CellularSmoother"]
