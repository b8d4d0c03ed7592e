from __future__ import annotations

"""
layout.py

Builds a complete terrain layout: zones, mountain clusters, settlements,
road and decorations. A Layout is assembled fully before it is returned, so a
caller that swaps it in never exposes a half-built map.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .clusters import Cluster, ClusterFinder
from .decorations import Decorations, scatter_decorations
from .grid import ZoneGrid
from .growth import RegionGrower
from .settings import LayoutSettings
from .settlements import SettlementPlanner, Settlements
from .smoothing import CellularSmoother
from .zones import Position, ZoneType

logger = logging.getLogger("zonesearch.Layout")
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class Layout:
    grid: ZoneGrid
    mountain_clusters: Tuple[Cluster, ...]
    settlements: Settlements
    village_anchor: Optional[Position]
    decorations: Decorations
    settings: LayoutSettings

    @property
    def big_houses(self) -> Tuple[Position, ...]:
        return self.settlements.big_houses

    @property
    def small_houses(self) -> Tuple[Position, ...]:
        return self.settlements.small_houses

    @property
    def road(self) -> Tuple[Position, ...]:
        return self.settlements.road

    def summary(self) -> Dict[str, object]:
        counts = self.grid.counts()
        return {
            "size": f"{self.grid.cols}x{self.grid.rows}",
            "zones": {zone.value: counts[zone] for zone in ZoneType},
            "mountain_clusters": len(self.mountain_clusters),
            "big_houses": [p.as_tuple() for p in self.big_houses],
            "small_houses": len(self.small_houses),
            "village_anchor": self.village_anchor.as_tuple() if self.village_anchor else None,
        }


def _random_interior(rng: random.Random, settings: LayoutSettings, margin: int) -> Tuple[int, int]:
    return (
        rng.randint(margin, settings.cols - 1 - margin),
        rng.randint(margin, settings.rows - 1 - margin),
    )


def _pick_village_seed(
    rng: random.Random, settings: LayoutSettings, mountains: List[Cluster]
) -> Tuple[int, int]:
    """Random seed far enough from every mountain; falls back to the grid centre."""
    vm = settings.village_margin
    if vm <= settings.cols - 1 - vm and vm <= settings.rows - 1 - vm:
        for _ in range(settings.village_attempts):
            vx, vy = _random_interior(rng, settings, vm)
            seed = Position(vx, vy)
            if all(seed.distance_to(m.centroid) >= settings.village_mountain_distance for m in mountains):
                return (vx, vy)
    logger.warning("No village site clear of mountains; using grid centre")
    return (settings.cols // 2, settings.rows // 2)


def generate_layout(settings: LayoutSettings | None = None, rng: random.Random | None = None) -> Layout:
    """
    Generate a fresh layout.

    Args:
        settings: Generation constants. Defaults to ``LayoutSettings()``.
        rng: Random stream for growth and placement. Defaults to
            ``random.Random(settings.seed)``.
    """
    settings = settings or LayoutSettings()
    rng = rng or random.Random(settings.seed)

    grid = ZoneGrid(settings.rows, settings.cols)
    grower = RegionGrower(
        grid,
        rng,
        margin=settings.margin,
        safe_zone=settings.safe_zone,
        override_chance=settings.override_chance,
        drop_chance=settings.drop_chance,
    )
    finder = ClusterFinder(grid)

    # 1) Mountains
    for _ in range(settings.mountain_count):
        seed = _random_interior(rng, settings, settings.margin)
        target = rng.randint(*settings.mountain_size)
        grower.grow(ZoneType.MOUNTAIN, [seed], target, settings.mountain_bias)
    mountains = finder.find_clusters(ZoneType.MOUNTAIN)

    # 2) One main village away from the mountains
    village_seed = _pick_village_seed(rng, settings, mountains)
    grower.grow(ZoneType.VILLAGE, [village_seed], settings.village_size, settings.village_bias)
    village_anchor = Position(*village_seed)

    # 3) Drought patches
    for _ in range(settings.drought_count):
        seed = _random_interior(rng, settings, settings.margin)
        target = rng.randint(*settings.drought_size)
        grower.grow(ZoneType.DROUGHT, [seed], target, settings.drought_bias)

    # 4) Relax growth artifacts
    CellularSmoother(grid, mountain_threshold=settings.mountain_threshold).smooth(settings.smooth_iterations)

    # 5) Settlements and decorations on the final terrain
    planner = SettlementPlanner(
        grid,
        safe_zone=settings.safe_zone,
        big_house_spacing=settings.big_house_spacing,
        small_from_big_spacing=settings.small_from_big_spacing,
        small_house_spacing=settings.small_house_spacing,
        small_house_threshold=settings.small_house_threshold,
    )
    settlements = planner.plan_settlements(settings.max_big_houses, settings.max_small_houses)
    mountains = finder.find_clusters(ZoneType.MOUNTAIN)
    decorations = scatter_decorations(grid, settlements)

    layout = Layout(
        grid=grid,
        mountain_clusters=tuple(mountains),
        settlements=settlements,
        village_anchor=village_anchor,
        decorations=decorations,
        settings=settings,
    )
    logger.debug("generated layout %s", layout.summary())
    return layout


__all__ = ["Layout", "generate_layout"]
