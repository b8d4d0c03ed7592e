import logging

import pytest

from terrain.clusters import find_clusters
from terrain.layout import generate_layout
from terrain.settings import LayoutSettings
from terrain.zones import ZoneType


def test_same_seed_same_layout():
    first = generate_layout(LayoutSettings(seed=7))
    second = generate_layout(LayoutSettings(seed=7))
    assert first.grid == second.grid
    assert first.settlements == second.settlements
    assert first.decorations == second.decorations
    assert first.summary() == second.summary()


def test_different_seeds_differ():
    assert generate_layout(LayoutSettings(seed=1)).grid != generate_layout(LayoutSettings(seed=2)).grid


@pytest.mark.parametrize("seed", range(5))
def test_margin_and_safe_zone_stay_transition(seed):
    layout = generate_layout(LayoutSettings(seed=seed))
    grid = layout.grid
    for x, y in grid.iter_coords():
        in_margin = x < 2 or y < 2 or x >= grid.cols - 2 or y >= grid.rows - 2
        if in_margin or (x < 3 and y < 3):
            assert grid.get(x, y) is ZoneType.TRANSITION, (x, y)


def test_seeds_on_the_safe_zone_paint_nothing():
    # on a 5x5 map the only interior cell is (2, 2), inside the safe zone
    for seed in range(5):
        layout = generate_layout(LayoutSettings(seed=seed, rows=5, cols=5))
        assert layout.grid.counts()[ZoneType.TRANSITION] == 25


@pytest.mark.parametrize("seed", range(10))
def test_safe_zone_stays_clear_on_a_cramped_map(seed):
    # seeds are drawn from a 3x3 interior that includes the safe-zone cell (2, 2)
    layout = generate_layout(LayoutSettings(seed=seed, rows=7, cols=7))
    for x in range(3):
        for y in range(3):
            assert layout.grid.get(x, y) is ZoneType.TRANSITION, (x, y)


@pytest.mark.parametrize("seed", range(5))
def test_layout_is_consistent(seed):
    layout = generate_layout(LayoutSettings(seed=seed))
    grid = layout.grid
    assert layout.mountain_clusters == tuple(find_clusters(grid, ZoneType.MOUNTAIN))
    for house in layout.big_houses:
        for dx in (0, 1):
            for dy in (0, 1):
                assert grid.get(house.x + dx, house.y + dy) is ZoneType.VILLAGE
    for house in layout.small_houses:
        assert grid.get(house.x, house.y) is ZoneType.VILLAGE
    if len(layout.big_houses) == 2:
        assert layout.road[0] == layout.big_houses[0]
        assert layout.road[-1] == layout.big_houses[1]
    else:
        assert layout.road == ()


def test_summary_shape():
    summary = generate_layout(LayoutSettings(seed=3)).summary()
    assert summary["size"] == "30x30"
    assert sum(summary["zones"].values()) == 900
    assert set(summary["zones"]) == {"transition", "village", "drought", "mountain"}


def test_rectangular_and_small_grids():
    layout = generate_layout(LayoutSettings(seed=1, rows=12, cols=20))
    assert (layout.grid.rows, layout.grid.cols) == (12, 20)
    layout = generate_layout(LayoutSettings(seed=1, rows=5, cols=5))
    assert layout.grid.rows == 5


def test_village_falls_back_to_centre(caplog):
    with caplog.at_level(logging.WARNING, logger="zonesearch.Layout"):
        layout = generate_layout(LayoutSettings(seed=2, rows=10, cols=10, village_margin=5))
    assert layout.village_anchor.as_tuple() == (5, 5)
    assert "No village site" in caplog.text


def test_invalid_settings_rejected():
    with pytest.raises(ValueError):
        LayoutSettings(rows=4, cols=4, margin=2)
    with pytest.raises(ValueError):
        LayoutSettings(drop_chance=1.5)
    with pytest.raises(ValueError):
        LayoutSettings(mountain_size=(10, 5))
