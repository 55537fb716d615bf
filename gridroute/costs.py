# gridroute/costs.py
from __future__ import annotations
from typing import TYPE_CHECKING, Dict

from .types import Coord, Terrain

if TYPE_CHECKING:
    from .grid import GridWorld

TERRAIN_COST: Dict[Terrain, int] = {
    Terrain.ROAD: 1,
    Terrain.GRASS: 3,
    Terrain.WATER: 5,
}

def terrain_cost(kind: Terrain) -> int:
    return TERRAIN_COST[kind]

def cell_cost(world: "GridWorld", s: Coord) -> int:
    """Cost of stepping onto `s`; every cell is road when the world has no terrain."""
    if world.terrain is None:
        return TERRAIN_COST[Terrain.ROAD]
    r, c = s
    return TERRAIN_COST[world.terrain[r][c]]
