import random

from terrain.clusters import ClusterFinder, find_clusters
from terrain.grid import ZoneGrid
from terrain.zones import Position, ZoneType


def random_grid(seed, rows=14, cols=11):
    rng = random.Random(seed)
    weights = [ZoneType.TRANSITION] * 3 + [ZoneType.MOUNTAIN] * 2
    return ZoneGrid.from_rows([[rng.choice(weights) for _ in range(cols)] for _ in range(rows)])


def test_clusters_partition_the_zone():
    for seed in range(6):
        grid = random_grid(seed)
        clusters = find_clusters(grid, ZoneType.MOUNTAIN)
        seen = set()
        for cluster in clusters:
            assert cluster.zone is ZoneType.MOUNTAIN
            assert not (seen & cluster.cells)
            seen |= cluster.cells
        assert seen == set(grid.cells_of(ZoneType.MOUNTAIN))


def test_clusters_are_maximal():
    grid = random_grid(21)
    clusters = ClusterFinder(grid).find_clusters(ZoneType.MOUNTAIN)
    owner = {cell: i for i, cluster in enumerate(clusters) for cell in cluster.cells}
    for (x, y), i in owner.items():
        for nb in grid.neighbors4(x, y):
            if nb in owner:
                assert owner[nb] == i


def test_clusters_are_connected():
    grid = random_grid(8)
    for cluster in find_clusters(grid, ZoneType.MOUNTAIN):
        start = next(iter(cluster.cells))
        reached = {start}
        stack = [start]
        while stack:
            x, y = stack.pop()
            for nb in grid.neighbors4(x, y):
                if nb in cluster and nb not in reached:
                    reached.add(nb)
                    stack.append(nb)
        assert reached == cluster.cells


def test_centroid_rounds_half_up():
    grid = ZoneGrid(1, 3)
    grid.set(0, 0, ZoneType.MOUNTAIN)
    grid.set(1, 0, ZoneType.MOUNTAIN)
    (cluster,) = find_clusters(grid, ZoneType.MOUNTAIN)
    assert cluster.size == 2
    assert cluster.centroid == Position(1, 0)


def test_diagonal_cells_are_separate_clusters():
    grid = ZoneGrid(3, 3)
    grid.set(0, 0, ZoneType.MOUNTAIN)
    grid.set(1, 1, ZoneType.MOUNTAIN)
    clusters = find_clusters(grid, ZoneType.MOUNTAIN)
    assert [c.centroid for c in clusters] == [Position(0, 0), Position(1, 1)]


def test_missing_zone_gives_no_clusters():
    assert find_clusters(ZoneGrid(4, 4), ZoneType.DROUGHT) == []
