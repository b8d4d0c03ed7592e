from __future__ import annotations

"""Spawn-point selection, optionally biased to trap the hill climber on a lone mountain."""

import logging
import random

from terrain.layout import Layout
from terrain.zones import Position, ZoneType

from . import settings

logger = logging.getLogger("zonesearch.Start")
logger.addHandler(logging.NullHandler())


class StartPositionSelector:
    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        trap_min_distance: float = settings.TRAP_MIN_DISTANCE,
        margin: int = settings.SPAWN_MARGIN,
    ) -> None:
        self.rng = rng or random.Random()
        self.trap_min_distance = trap_min_distance
        self.margin = margin

    def trap_position(self, layout: Layout) -> Position | None:
        """
        Transition cell next to the centroid of a mountain far from the village.

        Returns None when the layout offers no such cell. The centroid of an
        irregular cluster need not be Mountain itself, so this is a heuristic.
        """
        anchor = layout.village_anchor
        if anchor is None or not layout.mountain_clusters:
            return None
        remote = [
            c for c in layout.mountain_clusters if c.centroid.distance_to(anchor) > self.trap_min_distance
        ]
        if not remote:
            return None
        cluster = self.rng.choice(remote)
        cx, cy = cluster.centroid.as_tuple()
        grid = layout.grid
        candidates = [(nx, ny) for nx, ny in grid.neighbors4(cx, cy) if grid.get(nx, ny) is ZoneType.TRANSITION]
        if not candidates:
            return None
        return Position(*self.rng.choice(candidates))

    def random_position(self, layout: Layout) -> Position:
        grid = layout.grid
        m = self.margin
        # tiny grids: shrink the margin until an interior exists
        while m > 0 and (m > grid.cols - 1 - m or m > grid.rows - 1 - m):
            m -= 1
        return Position(self.rng.randint(m, grid.cols - 1 - m), self.rng.randint(m, grid.rows - 1 - m))

    def pick(self, bias_trap: bool, layout: Layout) -> Position:
        """Spawn point for a new run. Never fails: falls back to a random interior cell."""
        if bias_trap:
            trap = self.trap_position(layout)
            if trap is not None:
                return trap
            logger.debug("no trap spawn available, falling back to a random cell")
        return self.random_position(layout)


__all__ = ["StartPositionSelector"]
