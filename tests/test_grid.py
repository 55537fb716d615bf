import pytest

from gridroute import CellKind, GridWorld, Terrain


def test_from_strings_and_endpoints(open3):
    assert (open3.rows, open3.cols) == (3, 3)
    assert open3.find_endpoints() == ((0, 0), (2, 2))
    assert open3.terrain is None
    assert open3.terrain_at((1, 1)) is Terrain.ROAD


def test_missing_endpoints_are_none():
    world = GridWorld.from_strings(["...", ".#."])
    assert world.find_endpoints() == (None, None)


def test_neighbors_order_and_walls():
    world = GridWorld.from_strings([
        ".#.",
        "...",
        "...",
    ])
    assert world.neighbors((1, 1)) == [(2, 1), (1, 0), (1, 2)]
    assert world.neighbors((0, 0)) == [(1, 0)]
    assert world.neighbors((2, 2)) == [(1, 2), (2, 1)]


def test_shape_checks():
    with pytest.raises(ValueError):
        GridWorld.from_strings(["S..", ".E"])
    with pytest.raises(ValueError):
        GridWorld.from_strings(["S.E"], ["RR"])
    with pytest.raises(ValueError):
        GridWorld.from_strings(["S?E"])
    with pytest.raises(ValueError):
        GridWorld([])


def test_copy_is_independent(open3):
    clone = open3.copy()
    clone.set_wall((1, 1))
    assert clone.is_wall((1, 1))
    assert not open3.is_wall((1, 1))


def test_save_and_load_with_terrain(tmp_path):
    world = GridWorld.from_strings(["S.#", "..E"], ["RGW", "WWR"])
    path = tmp_path / "maps" / "tiny.txt"
    world.save(str(path))
    text = path.read_text().splitlines()
    assert text[0] == "GRID 2 3"
    assert text[1] == "201"
    assert text[3] == "TERRAIN"

    loaded = GridWorld.load(str(path))
    assert loaded.cells == world.cells
    assert loaded.terrain == world.terrain


def test_load_legacy_digit_rows(tmp_path):
    path = tmp_path / "legacy.txt"
    path.write_text("2001\n0003\n")
    world = GridWorld.load(str(path))
    assert world.cells[0] == [CellKind.START, CellKind.EMPTY, CellKind.EMPTY, CellKind.WALL]
    assert world.find_endpoints() == ((0, 0), (1, 3))
    assert world.terrain is None


@pytest.mark.parametrize("body", [
    "",
    "GRID 2\n20\n03\n",
    "GRID 2 2\n20\n",
    "GRID 2 2\n29\n03\n",
    "GRID 2 2\n20\n03\nTERRAIN\nRR\n",
    "GRID 2 2\n20\n03\nTERRAIN\nRX\nRR\n",
])
def test_load_rejects_bad_files(tmp_path, body):
    path = tmp_path / "bad.txt"
    path.write_text(body)
    with pytest.raises(ValueError):
        GridWorld.load(str(path))


def test_random_is_seeded():
    a = GridWorld.random(rows=8, cols=9, p_wall=0.3, seed=7)
    b = GridWorld.random(rows=8, cols=9, p_wall=0.3, seed=7)
    assert a.cells == b.cells
    assert a.find_endpoints() == ((0, 0), (7, 8))


@pytest.mark.parametrize("rows,cols", [(1, 1), (0, 5), (3, 0)])
def test_random_needs_two_cells(rows, cols):
    with pytest.raises(ValueError):
        GridWorld.random(rows=rows, cols=cols, seed=1)


def test_random_two_cells_keeps_both_endpoints():
    assert GridWorld.random(rows=1, cols=2, p_wall=1.0, seed=1).find_endpoints() == ((0, 0), (0, 1))
