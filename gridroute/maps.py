# gridroute/maps.py
"""
Built-in maps. Maps with random walls draw from their own
random.Random(seed), so the same seed always gives the same layout.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
import random

from .types import CellKind, Terrain
from .grid import GridWorld

@dataclass(frozen=True)
class MapInfo:
    key: str
    name: str
    build: Callable[[random.Random], GridWorld]

SMALL_OFFICE = [
    "S...#.....",
    ".##.#.###.",
    ".#......#.",
    ".#.####.#.",
    "......#...",
    "#####.###.",
    "....#.....",
    ".##.#####.",
    "........#E",
]

def _blank(rows: int, cols: int) -> List[List[CellKind]]:
    return [[CellKind.EMPTY] * cols for _ in range(rows)]

def _roads(rows: int, cols: int) -> List[List[Terrain]]:
    return [[Terrain.ROAD] * cols for _ in range(rows)]

def _small(rng: random.Random) -> GridWorld:
    return GridWorld.from_strings(SMALL_OFFICE)

def _medium(rng: random.Random) -> GridWorld:
    rows, cols = 15, 25
    cells, terrain = _blank(rows, cols), _roads(rows, cols)
    cells[2][2] = CellKind.START
    cells[12][22] = CellKind.END
    for r in range(rows):
        for c in range(cols):
            if cells[r][c] == CellKind.EMPTY and rng.random() > 0.8:
                cells[r][c] = CellKind.WALL
            if 5 < c < 19:
                terrain[r][c] = Terrain.GRASS
            if 4 < r < 10 and 8 < c < 16:
                terrain[r][c] = Terrain.WATER
    return GridWorld(cells, terrain)

def _large(rng: random.Random) -> GridWorld:
    rows, cols = 25, 40
    cells = _blank(rows, cols)
    for r in range(rows):
        if r % 4 in (0, 1):
            continue  # street rows
        for c in range(cols):
            if c % 5 != 0 and rng.random() > 0.1:
                cells[r][c] = CellKind.WALL
    cells[2][2] = CellKind.START
    cells[22][37] = CellKind.END
    return GridWorld(cells, _roads(rows, cols))

def _dynamic(rng: random.Random) -> GridWorld:
    rows, cols = 15, 25
    cells = _blank(rows, cols)
    cells[7][2] = CellKind.START
    cells[7][22] = CellKind.END
    for c in range(cols):
        if c % 6 != 0:
            for r in (2, 4, 10, 12):
                cells[r][c] = CellKind.WALL
    return GridWorld(cells, _roads(rows, cols))

MAPS: Dict[str, MapInfo] = {
    m.key: m for m in (
        MapInfo("small", "Small Office", _small),
        MapInfo("medium", "Medium Warehouse (with Terrain)", _medium),
        MapInfo("large", "Large City Block", _large),
        MapInfo("dynamic", "Dynamic Highway", _dynamic),
    )
}

def build_map(key: str, seed: Optional[int] = None) -> GridWorld:
    try:
        info = MAPS[key]
    except KeyError:
        raise ValueError(f"unknown map {key!r} (choose from {', '.join(MAPS)})") from None
    return info.build(random.Random(seed))
