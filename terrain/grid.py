from __future__ import annotations

"""
grid.py

The scored terrain grid. A ZoneGrid is a fixed ``rows x cols`` mapping from
(x, y) to ZoneType. The generator owns and writes it; agents and the map view
only read it.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .zones import ZoneType, score_of

Coordinate = Tuple[int, int]

# 4-neighbourhood: up, down, left, right
DIRECTIONS: List[Tuple[int, int]] = [
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
]


class InvalidCoordinateError(ValueError):
    """Raised when a write or an agent placement targets a cell outside the grid."""


class ZoneGrid:
    __slots__ = ("rows", "cols", "_cells")

    def __init__(self, rows: int, cols: int, fill: ZoneType = ZoneType.TRANSITION) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
        if not isinstance(fill, ZoneType):
            raise TypeError(f"fill must be a ZoneType, not {type(fill)}")
        self.rows = rows
        self.cols = cols
        self._cells: List[List[ZoneType]] = [[fill] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[ZoneType]]) -> "ZoneGrid":
        """Build a grid from nested rows, ``rows[y][x]``."""
        data = [list(row) for row in rows]
        if not data or not data[0]:
            raise ValueError("rows must contain at least one cell")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("all rows must have the same length")
        grid = cls(len(data), width)
        for y, row in enumerate(data):
            for x, zone in enumerate(row):
                grid.set(x, y, zone)
        return grid

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def __contains__(self, coord: Coordinate) -> bool:
        x, y = coord
        return self.in_bounds(x, y)

    def get(self, x: int, y: int) -> Optional[ZoneType]:
        """Return the zone at (x, y), or None outside the grid."""
        if not self.in_bounds(x, y):
            return None
        return self._cells[y][x]

    def set(self, x: int, y: int, zone: ZoneType) -> None:
        if not self.in_bounds(x, y):
            raise InvalidCoordinateError(f"({x}, {y}) is outside a {self.cols}x{self.rows} grid")
        if not isinstance(zone, ZoneType):
            raise TypeError(f"zone must be a ZoneType, not {type(zone)}")
        self._cells[y][x] = zone

    def score(self, x: int, y: int) -> int:
        """Score of the cell at (x, y); ``OUT_OF_BOUNDS_SCORE`` outside the grid."""
        return score_of(self.get(x, y))

    def neighbors4(self, x: int, y: int) -> List[Coordinate]:
        """In-bounds 4-neighbours of (x, y) in DIRECTIONS order."""
        result: List[Coordinate] = []
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((nx, ny))
        return result

    def iter_coords(self) -> Iterator[Coordinate]:
        """Yield every coordinate in row-major order."""
        for y in range(self.rows):
            for x in range(self.cols):
                yield (x, y)

    def cells_of(self, zone: ZoneType) -> List[Coordinate]:
        return [(x, y) for (x, y) in self.iter_coords() if self._cells[y][x] is zone]

    def counts(self) -> Dict[ZoneType, int]:
        totals = {zone: 0 for zone in ZoneType}
        for row in self._cells:
            for zone in row:
                totals[zone] += 1
        return totals

    def copy(self) -> "ZoneGrid":
        clone = ZoneGrid(self.rows, self.cols)
        clone._cells = [row.copy() for row in self._cells]
        return clone

    def rows_view(self) -> List[Tuple[ZoneType, ...]]:
        """Immutable snapshot of the cells, ``rows_view()[y][x]``."""
        return [tuple(row) for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneGrid):
            return NotImplemented
        return self.rows == other.rows and self.cols == other.cols and self._cells == other._cells

    def __repr__(self) -> str:
        counts = ", ".join(f"{zone.name}:{n}" for zone, n in self.counts().items() if n)
        return f"ZoneGrid({self.cols}x{self.rows}, {counts})"


__all__ = ["Coordinate", "DIRECTIONS", "InvalidCoordinateError", "ZoneGrid"]
