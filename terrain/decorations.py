from __future__ import annotations

"""Decorative scatter (trees, dead trees, mountain peaks) picked by coordinate hash."""

from dataclasses import dataclass
from typing import List, Tuple

from .grid import ZoneGrid
from .noise import cell_noise
from .settlements import Settlements
from .zones import Position, ZoneType

TREE_SEED = 9090
PEAK_SEED = 9999

TREE_CHANCE = 0.35
DEAD_TREE_CHANCE = 0.15
PEAK_CHANCE = 0.20

# no scatter inside this top-left square, where the UI overlays sit
CLEAR_CORNER = 6


@dataclass(frozen=True)
class Decorations:
    trees: Tuple[Position, ...] = ()
    dead_trees: Tuple[Position, ...] = ()
    peaks: Tuple[Position, ...] = ()


def scatter_decorations(grid: ZoneGrid, settlements: Settlements) -> Decorations:
    trees: List[Position] = []
    dead_trees: List[Position] = []
    peaks: List[Position] = []
    for x, y in grid.iter_coords():
        zone = grid.get(x, y)
        if zone is ZoneType.MOUNTAIN:
            if cell_noise(x, y, PEAK_SEED) < PEAK_CHANCE:
                peaks.append(Position(x, y))
            continue
        if x < CLEAR_CORNER and y < CLEAR_CORNER:
            continue
        if settlements.is_occupied(x, y):
            continue
        n = cell_noise(x, y, TREE_SEED)
        if zone is ZoneType.VILLAGE and n < TREE_CHANCE:
            trees.append(Position(x, y))
        elif zone is ZoneType.DROUGHT and n < DEAD_TREE_CHANCE:
            dead_trees.append(Position(x, y))
    return Decorations(trees=tuple(trees), dead_trees=tuple(dead_trees), peaks=tuple(peaks))


__all__ = ["Decorations", "scatter_decorations"]
