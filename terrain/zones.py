from __future__ import annotations

"""
Zone types, the score table agents climb, and the small value types shared by
the generator and the search agents.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class ZoneType(Enum):
    TRANSITION = "transition"
    VILLAGE = "village"
    DROUGHT = "drought"
    MOUNTAIN = "mountain"


# Score ("elevation") for every zone. Agents maximise this value.
ZONE_SCORES: Dict[ZoneType, int] = {
    ZoneType.VILLAGE: 100,
    ZoneType.MOUNTAIN: 80,
    ZoneType.TRANSITION: 50,
    ZoneType.DROUGHT: 10,
}

# Returned for coordinates outside the grid. Never selectable.
OUT_OF_BOUNDS_SCORE = -999

ZONE_NAMES: Dict[ZoneType, str] = {
    ZoneType.TRANSITION: "Transition",
    ZoneType.VILLAGE: "Village",
    ZoneType.DROUGHT: "Drought",
    ZoneType.MOUNTAIN: "Mountain",
}

# RGBA colors used by the map view.
ZONE_COLORS: Dict[ZoneType, Tuple[int, int, int, int]] = {
    ZoneType.TRANSITION: (231, 220, 166, 255),
    ZoneType.VILLAGE: (110, 170, 80, 255),
    ZoneType.DROUGHT: (214, 178, 120, 255),
    ZoneType.MOUNTAIN: (107, 79, 51, 255),
}


def score_of(zone: object) -> int:
    """Return the score of ``zone``, or ``OUT_OF_BOUNDS_SCORE`` for anything that is not a ZoneType."""
    if not isinstance(zone, ZoneType):
        return OUT_OF_BOUNDS_SCORE
    return ZONE_SCORES[zone]


def zone_name(zone: ZoneType | None) -> str:
    if zone is None:
        return "Out of bounds"
    return ZONE_NAMES[zone]


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def distance_to(self, other: "Position") -> float:
        """Euclidean distance between two grid positions."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Candidate:
    """A scored grid coordinate considered during placement."""

    x: int
    y: int
    score: float

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


__all__ = [
    "Candidate",
    "OUT_OF_BOUNDS_SCORE",
    "Position",
    "ZONE_COLORS",
    "ZONE_NAMES",
    "ZONE_SCORES",
    "ZoneType",
    "score_of",
    "zone_name",
]
