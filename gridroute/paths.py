# gridroute/paths.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from .types import Coord
from .grid import GridWorld
from .costs import cell_cost

def reconstruct_path(came_from: Dict[Coord, Optional[Coord]],
                     start: Coord,
                     end: Coord,
                     world: GridWorld) -> Tuple[List[Coord], int]:
    """
    Walk predecessor links back from `end`. The start has a None entry and
    adds no cost; every other cell on the walk adds its terrain cost.
    Returns ([], 0) when `end` was never reached or the walk does not
    arrive at `start`.
    """
    if end not in came_from:
        return [], 0

    path: List[Coord] = []
    total = 0
    cur: Optional[Coord] = end
    while cur is not None:
        path.append(cur)
        prev = came_from[cur]
        if prev is not None:
            total += cell_cost(world, cur)
        cur = prev
    path.reverse()

    if start == end and path == [start]:
        return path, 0
    if len(path) > 1 and path[0] == start:
        return path, total
    return [], 0

def route_cost(route: List[Coord], world: GridWorld) -> int:
    """Entry cost of every cell after the first."""
    return sum(cell_cost(world, s) for s in route[1:])
