from __future__ import annotations

"""
settlements.py

Placement of big houses (2x2 Village footprints), small houses (single Village
cells) and the road joining the two main houses.

Big houses are ranked by how much Village surrounds them. Small houses are
filtered and ordered by a coordinate hash instead of the run's random stream,
so the decorative scatter is reproducible for a given terrain.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .grid import ZoneGrid
from .noise import cell_noise
from .zones import Candidate, Position, ZoneType

logger = logging.getLogger("zonesearch.Settlements")
logger.addHandler(logging.NullHandler())

BIG_HOUSE_SIZE = 2
SMALL_HOUSE_NOISE_SEED = 5011


@dataclass(frozen=True)
class Settlements:
    """Ordered placement set produced by the planner."""

    big_houses: Tuple[Position, ...] = ()
    small_houses: Tuple[Position, ...] = ()
    road: Tuple[Position, ...] = field(default=())

    def in_big_footprint(self, x: int, y: int) -> bool:
        """True if (x, y) lies under any big house (positions are footprint top-left corners)."""
        return any(
            b.x <= x < b.x + BIG_HOUSE_SIZE and b.y <= y < b.y + BIG_HOUSE_SIZE
            for b in self.big_houses
        )

    def is_occupied(self, x: int, y: int) -> bool:
        if self.in_big_footprint(x, y):
            return True
        return any(h.x == x and h.y == y for h in self.small_houses)


def plan_road(start: Position, end: Position) -> Tuple[Position, ...]:
    """L-shaped path from ``start`` to ``end``: horizontal leg first, both endpoints included."""
    cells: List[Position] = []
    x, y = start.x, start.y
    while x != end.x:
        cells.append(Position(x, y))
        x += 1 if end.x > x else -1
    while y != end.y:
        cells.append(Position(x, y))
        y += 1 if end.y > y else -1
    cells.append(Position(x, y))
    return tuple(cells)


class SettlementPlanner:
    def __init__(
        self,
        grid: ZoneGrid,
        *,
        safe_zone: int = 3,
        big_house_spacing: float = 8.0,
        small_from_big_spacing: float = 5.0,
        small_house_spacing: float = 3.0,
        small_house_threshold: float = 0.3,
        score_radius: int = 2,
        hostile_penalty: float = 0.5,
    ) -> None:
        self.grid = grid
        self.safe_zone = safe_zone
        self.big_house_spacing = big_house_spacing
        self.small_from_big_spacing = small_from_big_spacing
        self.small_house_spacing = small_house_spacing
        self.small_house_threshold = small_house_threshold
        self.score_radius = score_radius
        self.hostile_penalty = hostile_penalty

    # ─────────────────────────────────────────────────────────────────────
    # == BIG HOUSES ==

    def fits_big_house(self, x: int, y: int) -> bool:
        for dy in range(BIG_HOUSE_SIZE):
            for dx in range(BIG_HOUSE_SIZE):
                if self.grid.get(x + dx, y + dy) is not ZoneType.VILLAGE:
                    return False
        return True

    def village_score(self, x: int, y: int) -> float:
        """+1 per Village and -penalty per Drought/Mountain cell in the window around the footprint."""
        r = self.score_radius
        score = 0.0
        for dy in range(-r, r + BIG_HOUSE_SIZE):
            for dx in range(-r, r + BIG_HOUSE_SIZE):
                zone = self.grid.get(x + dx, y + dy)
                if zone is ZoneType.VILLAGE:
                    score += 1
                elif zone is ZoneType.DROUGHT or zone is ZoneType.MOUNTAIN:
                    score -= self.hostile_penalty
        return score

    def big_house_candidates(self) -> List[Candidate]:
        candidates = [
            Candidate(x, y, self.village_score(x, y))
            for y in range(self.grid.rows - 1)
            for x in range(self.grid.cols - 1)
            if self.fits_big_house(x, y)
        ]
        # sort is stable: equal scores keep row-major order
        candidates.sort(key=lambda c: c.score, reverse=True)
        return candidates

    def place_big_houses(self, max_count: int) -> List[Position]:
        chosen: List[Position] = []
        for cand in self.big_house_candidates():
            if len(chosen) >= max_count:
                break
            pos = cand.position
            if all(pos.distance_to(b) >= self.big_house_spacing for b in chosen):
                chosen.append(pos)
        return chosen

    # ─────────────────────────────────────────────────────────────────────
    # == SMALL HOUSES ==

    def small_house_candidates(self, big_houses: Sequence[Position]) -> List[Candidate]:
        footprint = Settlements(big_houses=tuple(big_houses))
        candidates: List[Candidate] = []
        for x, y in self.grid.iter_coords():
            if x < self.safe_zone and y < self.safe_zone:
                continue
            if self.grid.get(x, y) is not ZoneType.VILLAGE:
                continue
            if footprint.in_big_footprint(x, y):
                continue
            n = cell_noise(x, y, SMALL_HOUSE_NOISE_SEED)
            if n < self.small_house_threshold:
                candidates.append(Candidate(x, y, n))
        candidates.sort(key=lambda c: c.score)
        return candidates

    def place_small_houses(self, big_houses: Sequence[Position], max_count: int) -> List[Position]:
        chosen: List[Position] = []
        for cand in self.small_house_candidates(big_houses):
            if len(chosen) >= max_count:
                break
            pos = cand.position
            far_from_big = all(pos.distance_to(b) >= self.small_from_big_spacing for b in big_houses)
            far_from_small = all(pos.distance_to(h) >= self.small_house_spacing for h in chosen)
            if far_from_big and far_from_small:
                chosen.append(pos)
        return chosen

    # ─────────────────────────────────────────────────────────────────────

    def plan_settlements(self, max_big: int = 2, max_small: int = 8) -> Settlements:
        """
        Place up to ``max_big`` big houses and ``max_small`` small houses.

        Fewer houses than requested is a normal result on sparse terrain.
        """
        big = self.place_big_houses(max_big)
        small = self.place_small_houses(big, max_small)
        road = plan_road(big[0], big[1]) if len(big) >= 2 else ()
        logger.debug(
            "placed %d/%d big houses, %d/%d small houses", len(big), max_big, len(small), max_small
        )
        return Settlements(big_houses=tuple(big), small_houses=tuple(small), road=road)


__all__ = ["BIG_HOUSE_SIZE", "SettlementPlanner", "Settlements", "plan_road"]
