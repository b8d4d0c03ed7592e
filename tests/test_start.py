import random

from search.start import StartPositionSelector
from terrain.clusters import find_clusters
from terrain.decorations import Decorations
from terrain.grid import ZoneGrid
from terrain.layout import Layout
from terrain.settings import LayoutSettings
from terrain.settlements import Settlements
from terrain.zones import Position, ZoneType


def make_layout(grid, anchor):
    return Layout(
        grid=grid,
        mountain_clusters=tuple(find_clusters(grid, ZoneType.MOUNTAIN)),
        settlements=Settlements(),
        village_anchor=anchor,
        decorations=Decorations(),
        settings=LayoutSettings(),
    )


def ridge_grid():
    grid = ZoneGrid(30, 30)
    for y in range(18, 23):
        grid.set(20, y, ZoneType.MOUNTAIN)
    return grid


def test_trap_spawns_beside_a_remote_mountain():
    layout = make_layout(ridge_grid(), Position(3, 3))
    for seed in range(10):
        pos = StartPositionSelector(random.Random(seed)).pick(True, layout)
        assert pos in (Position(19, 20), Position(21, 20))
        assert layout.grid.get(pos.x, pos.y) is ZoneType.TRANSITION


def test_mountain_near_the_village_is_not_a_trap():
    layout = make_layout(ridge_grid(), Position(18, 18))
    selector = StartPositionSelector(random.Random(1))
    assert selector.trap_position(layout) is None
    pos = selector.pick(True, layout)
    assert 2 <= pos.x <= 27 and 2 <= pos.y <= 27


def test_no_anchor_falls_back_to_random_cell():
    layout = make_layout(ridge_grid(), None)
    selector = StartPositionSelector(random.Random(4))
    assert selector.trap_position(layout) is None
    pos = selector.pick(True, layout)
    assert 2 <= pos.x <= 27 and 2 <= pos.y <= 27


def test_surrounded_centroid_gives_no_trap():
    grid = ZoneGrid(30, 30)
    for x in range(19, 22):
        for y in range(19, 22):
            grid.set(x, y, ZoneType.MOUNTAIN)
    layout = make_layout(grid, Position(3, 3))
    assert StartPositionSelector(random.Random(0)).trap_position(layout) is None


def test_unbiased_pick_is_random_interior():
    layout = make_layout(ridge_grid(), Position(3, 3))
    selector = StartPositionSelector(random.Random(9))
    picks = {selector.pick(False, layout) for _ in range(200)}
    assert len(picks) > 50
    assert all(2 <= p.x <= 27 and 2 <= p.y <= 27 for p in picks)


def test_tiny_grid_shrinks_the_margin():
    layout = make_layout(ZoneGrid(3, 3), None)
    assert StartPositionSelector(random.Random(0)).pick(False, layout) == Position(1, 1)
    layout = make_layout(ZoneGrid(1, 1), None)
    assert StartPositionSelector(random.Random(0)).pick(True, layout) == Position(0, 0)
