from __future__ import annotations

"""Stochastic frontier expansion used to carve villages, droughts and mountains."""

import logging
import random
from typing import Iterable, Iterator, List

from .grid import Coordinate, ZoneGrid
from .zones import ZoneType

logger = logging.getLogger("zonesearch.Growth")
logger.addHandler(logging.NullHandler())


class RegionGrower:
    """
    Paints zones onto a grid by growing them outward from seed cells.

    Each step picks a random frontier cell and a random neighbour of it. A
    Transition neighbour is claimed when a ``bias`` coin succeeds; a neighbour
    of any other foreign zone is claimed with the small ``override_chance`` so
    regions can eat into each other. Every step the picked frontier cell may
    also be retired with ``drop_chance``, which keeps shapes organic and
    guarantees the loop ends.
    """

    def __init__(
        self,
        grid: ZoneGrid,
        rng: random.Random | None = None,
        *,
        margin: int = 2,
        safe_zone: int = 3,
        override_chance: float = 0.05,
        drop_chance: float = 0.05,
    ) -> None:
        self.grid = grid
        self.rng = rng or random.Random()
        self.margin = margin
        self.safe_zone = safe_zone
        self.override_chance = override_chance
        self.drop_chance = drop_chance

    def is_reserved(self, x: int, y: int) -> bool:
        """True for border-margin cells and the top-left safe zone."""
        m = self.margin
        if x < m or y < m or x >= self.grid.cols - m or y >= self.grid.rows - m:
            return True
        return x < self.safe_zone and y < self.safe_zone

    def iter_grow(
        self,
        zone: ZoneType,
        seeds: Iterable[Coordinate],
        target_count: int,
        bias: float = 0.78,
    ) -> Iterator[int]:
        """
        Grow ``zone`` and yield the running painted count after the seeds and after every step.

        Seeds that are off the grid or reserved are skipped.
        """
        frontier: List[Coordinate] = []
        painted = 0
        for sx, sy in seeds:
            if painted >= target_count:
                break
            if not self.grid.in_bounds(sx, sy) or self.is_reserved(sx, sy):
                continue
            self.grid.set(sx, sy, zone)
            frontier.append((sx, sy))
            painted += 1
        yield painted

        while frontier and painted < target_count:
            idx = self.rng.randrange(len(frontier))
            x, y = frontier[idx]
            neighbors = self.grid.neighbors4(x, y)
            if not neighbors:
                frontier.pop(idx)
                yield painted
                continue
            nx, ny = self.rng.choice(neighbors)

            if not self.is_reserved(nx, ny):
                current = self.grid.get(nx, ny)
                allow = (current is ZoneType.TRANSITION and self.rng.random() < bias) or (
                    current is not zone and self.rng.random() < self.override_chance
                )
                if allow:
                    self.grid.set(nx, ny, zone)
                    frontier.append((nx, ny))
                    painted += 1

            if self.rng.random() < self.drop_chance:
                frontier.pop(idx)
            yield painted

    def grow(
        self,
        zone: ZoneType,
        seeds: Iterable[Coordinate],
        target_count: int,
        bias: float = 0.78,
    ) -> int:
        """
        Paint ``zone`` from ``seeds`` until ``target_count`` cells are painted or the frontier runs out.

        Returns the number of cells painted. Falling short of the target is a
        normal outcome.
        """
        painted = 0
        for painted in self.iter_grow(zone, seeds, target_count, bias):
            pass
        if painted < target_count:
            logger.debug("%s growth stopped at %d/%d cells", zone.name, painted, target_count)
        return painted


__all__ = ["RegionGrower"]
