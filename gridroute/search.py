# gridroute/search.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Union
import time

from loguru import logger

from .types import Algorithm, Coord
from .grid import GridWorld
from .costs import cell_cost
from .frontier import FifoFrontier, PriorityFrontier
from .heuristics import priority
from .paths import reconstruct_path

@dataclass(frozen=True)
class SearchResult:
    algorithm: Algorithm
    path: List[Coord] = field(default_factory=list)
    visited_order: List[Coord] = field(default_factory=list)
    total_cost: int = 0
    elapsed_ms: float = 0.0

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def expansions(self) -> int:
        return len(self.visited_order)

def search(
    algorithm: Union[Algorithm, str],
    world: GridWorld,
    start: Optional[Coord],
    end: Optional[Coord],
    closed_set: bool = False,
) -> SearchResult:
    """
    Run one search from `start` to `end` over `world`.

    Every popped cell goes into `visited_order`, including stale entries
    that were pushed again after a cheaper route was found; pass
    closed_set=True to skip cells that were already expanded instead.
    A missing endpoint yields an empty result rather than an exception.
    """
    if isinstance(algorithm, str):
        algorithm = Algorithm.parse(algorithm)
    if start is None or end is None:
        logger.error("search called without a start or end point (start={}, end={})", start, end)
        return SearchResult(algorithm)

    t0 = time.perf_counter()
    frontier = FifoFrontier() if algorithm is Algorithm.BFS else PriorityFrontier()
    frontier.push(start, 0)

    came_from: Dict[Coord, Optional[Coord]] = {start: None}
    cost_so_far: Dict[Coord, int] = {start: 0}
    visited: List[Coord] = []
    closed: Set[Coord] = set()

    while not frontier.is_empty():
        cur = frontier.pop()
        if closed_set:
            if cur in closed:
                continue
            closed.add(cur)
        visited.append(cur)
        if cur == end:
            break

        for nb in world.neighbors(cur):
            new_cost = cost_so_far[cur] + cell_cost(world, nb)
            if nb not in cost_so_far or new_cost < cost_so_far[nb]:
                cost_so_far[nb] = new_cost
                came_from[nb] = cur
                frontier.push(nb, priority(algorithm, new_cost, nb, end))

    path, total = reconstruct_path(came_from, start, end, world)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    logger.debug("{}: {} -> {} found={} cost={} expanded={} in {:.2f} ms",
                 algorithm.value, start, end, bool(path), total, len(visited), elapsed_ms)
    return SearchResult(algorithm, path, visited, total, elapsed_ms)
