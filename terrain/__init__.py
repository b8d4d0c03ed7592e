"""Terrain generation: zone grid, region growth, smoothing, clusters and settlements."""

from .clusters import Cluster, ClusterFinder, find_clusters
from .decorations import Decorations, scatter_decorations
from .grid import DIRECTIONS, InvalidCoordinateError, ZoneGrid
from .growth import RegionGrower
from .layout import Layout, generate_layout
from .noise import cell_noise
from .settings import LayoutSettings
from .settlements import SettlementPlanner, Settlements, plan_road
from .smoothing import CellularSmoother
from .zones import (
    OUT_OF_BOUNDS_SCORE,
    ZONE_COLORS,
    ZONE_NAMES,
    ZONE_SCORES,
    Candidate,
    Position,
    ZoneType,
    score_of,
    zone_name,
)

__all__ = [
    "Candidate",
    "CellularSmoother",
    "Cluster",
    "ClusterFinder",
    "DIRECTIONS",
    "Decorations",
    "InvalidCoordinateError",
    "Layout",
    "LayoutSettings",
    "OUT_OF_BOUNDS_SCORE",
    "Position",
    "RegionGrower",
    "SettlementPlanner",
    "Settlements",
    "ZONE_COLORS",
    "ZONE_NAMES",
    "ZONE_SCORES",
    "ZoneGrid",
    "ZoneType",
    "cell_noise",
    "find_clusters",
    "generate_layout",
    "plan_road",
    "scatter_decorations",
    "score_of",
    "zone_name",
]
