import pytest

from gridroute import Algorithm, GridWorld, Terrain, build_map, manhattan, search
from gridroute.maps import SMALL_OFFICE

ALL = list(Algorithm)
COST_AWARE = [Algorithm.UCS, Algorithm.ASTAR, Algorithm.ASTAR_REPLAN]


def _is_walk(world, path):
    steps_ok = all(manhattan(a, b) == 1 for a, b in zip(path, path[1:]))
    return steps_ok and not any(world.is_wall(s) for s in path)


@pytest.mark.parametrize("algo", ALL)
def test_open_grid_finds_shortest_route(open3, algo):
    start, end = open3.find_endpoints()
    res = search(algo, open3, start, end)
    assert res.found
    assert res.path[0] == start and res.path[-1] == end
    assert len(res.path) == 5
    assert res.total_cost == 4
    assert _is_walk(open3, res.path)
    assert res.visited_order[0] == start
    assert res.visited_order[-1] == end
    assert res.elapsed_ms >= 0


def test_algorithm_may_be_named(open3):
    assert search("ucs", open3, (0, 0), (2, 2)).algorithm is Algorithm.UCS
    with pytest.raises(ValueError):
        search("dfs", open3, (0, 0), (2, 2))


def test_bfs_trace_follows_neighbor_order():
    world = GridWorld.from_strings(["S.", ".E"])
    res = search(Algorithm.BFS, world, (0, 0), (1, 1))
    assert res.visited_order == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert res.path == [(0, 0), (1, 0), (1, 1)]


@pytest.mark.parametrize("algo", ALL)
def test_start_equals_end(open3, algo):
    res = search(algo, open3, (1, 1), (1, 1))
    assert res.path == [(1, 1)]
    assert res.total_cost == 0
    assert res.visited_order == [(1, 1)]


@pytest.mark.parametrize("start,end", [(None, (2, 2)), ((0, 0), None), (None, None)])
def test_missing_endpoint_returns_empty_result(open3, start, end):
    res = search(Algorithm.ASTAR, open3, start, end)
    assert res.path == [] and res.visited_order == [] and res.total_cost == 0
    assert not res.found
    assert res.expansions == 0


@pytest.mark.parametrize("algo", ALL)
def test_enclosed_end_has_no_path(enclosed, algo):
    start, end = enclosed.find_endpoints()
    res = search(algo, enclosed, start, end)
    reachable = {(r, c) for r in range(2) for c in range(3)}
    assert res.path == []
    assert res.total_cost == 0
    assert set(res.visited_order) == reachable


@pytest.mark.parametrize("algo", [Algorithm.BFS, Algorithm.UCS])
def test_enclosed_end_expands_each_reachable_cell_once(enclosed, algo):
    start, end = enclosed.find_endpoints()
    res = search(algo, enclosed, start, end)
    assert len(res.visited_order) == 6


def test_small_office_optimal_lengths():
    world = GridWorld.from_strings(SMALL_OFFICE)
    start, end = world.find_endpoints()
    for algo in ALL:
        res = search(algo, world, start, end)
        assert res.total_cost == 17, algo
        assert len(res.path) == 18, algo
        assert _is_walk(world, res.path)


def test_water_corridor_loses_to_road_detour():
    world = GridWorld.from_strings(
        ["S.....E",
         "......."],
        ["RWWWWWR",
         "RRRRRRR"],
    )
    start, end = world.find_endpoints()
    for algo in COST_AWARE:
        res = search(algo, world, start, end)
        assert res.total_cost == 8
        assert len(res.path) == 9
        assert all(world.terrain_at(s) is not Terrain.WATER for s in res.path)


def test_bfs_ignores_cost():
    world = GridWorld.from_strings(["S.E", "..."], ["RWR", "RRR"])
    bfs = search(Algorithm.BFS, world, (0, 0), (0, 2))
    ucs = search(Algorithm.UCS, world, (0, 0), (0, 2))
    assert bfs.path == [(0, 0), (0, 1), (0, 2)]
    assert bfs.total_cost == 6
    assert ucs.path == [(0, 0), (1, 0), (1, 1), (1, 2), (0, 2)]
    assert ucs.total_cost == 4


def test_stale_entries_stay_in_trace():
    # (0, 2) is first reached across water, then again more cheaply
    # from below before the end is popped, so it is expanded twice
    world = GridWorld.from_strings(["S...E", "....."], ["RWRRR", "RRRRR"])
    res = search(Algorithm.BFS, world, (0, 0), (0, 4))
    assert res.visited_order == [
        (0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2), (0, 3), (0, 2), (1, 3), (0, 4),
    ]
    assert res.path == [(0, 0), (1, 0), (1, 1), (1, 2), (0, 2), (0, 3), (0, 4)]
    assert res.total_cost == 6


def test_closed_set_variant_expands_each_cell_once():
    world = GridWorld.from_strings(["S...E", "....."], ["RWRRR", "RRRRR"])
    res = search(Algorithm.BFS, world, (0, 0), (0, 4), closed_set=True)
    assert len(res.visited_order) == len(set(res.visited_order))
    assert res.path[0] == (0, 0) and res.path[-1] == (0, 4)


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_astar_matches_ucs_cost_on_terrain(seed):
    world = build_map("medium", seed=seed)
    start, end = world.find_endpoints()
    ucs = search(Algorithm.UCS, world, start, end)
    astar = search(Algorithm.ASTAR, world, start, end)
    assert astar.total_cost == ucs.total_cost
    assert astar.found == ucs.found


def test_astar_expands_fewer_cells_than_ucs():
    world = GridWorld.from_strings(["." * 9] * 9)
    ucs = search(Algorithm.UCS, world, (4, 0), (4, 8))
    astar = search(Algorithm.ASTAR, world, (4, 0), (4, 8))
    assert astar.total_cost == ucs.total_cost == 8
    assert astar.expansions == 9
    assert astar.expansions < ucs.expansions

    office = GridWorld.from_strings(SMALL_OFFICE)
    start, end = office.find_endpoints()
    assert search(Algorithm.ASTAR, office, start, end).expansions <= search(Algorithm.UCS, office, start, end).expansions


@pytest.mark.parametrize("algo", ALL)
def test_repeat_search_is_identical(algo):
    world = build_map("medium", seed=5)
    start, end = world.find_endpoints()
    a = search(algo, world, start, end)
    b = search(algo, world, start, end)
    assert a.path == b.path
    assert a.total_cost == b.total_cost
    assert a.visited_order == b.visited_order
