# gridroute/replan.py
from __future__ import annotations
from dataclasses import dataclass, field
from fractions import Fraction
from typing import List, Optional, Union

from loguru import logger

from .types import Algorithm, Coord
from .grid import GridWorld
from .paths import route_cost
from .search import SearchResult, search

DEFAULT_FRACTION = Fraction(2, 3)

@dataclass
class ReplanResult:
    reached: bool
    stage: str                      # "initial", "replan" or "done"
    initial: SearchResult
    replanned: Optional[SearchResult] = None
    obstacle: Optional[Coord] = None
    prefix: List[Coord] = field(default_factory=list)
    route: List[Coord] = field(default_factory=list)
    route_cost: int = 0
    replans: int = 0

    @property
    def expansions(self) -> int:
        n = self.initial.expansions
        if self.replanned is not None:
            n += self.replanned.expansions
        return n

    @property
    def elapsed_ms(self) -> float:
        t = self.initial.elapsed_ms
        if self.replanned is not None:
            t += self.replanned.elapsed_ms
        return t

def obstacle_index(path_len: int, fraction: Union[Fraction, float] = DEFAULT_FRACTION) -> int:
    """floor(path_len * fraction), clamped to a valid index of the path."""
    idx = int(Fraction(fraction).limit_denominator(1000) * path_len)
    return max(0, min(path_len - 1, idx))

def plan_with_replanning(world: GridWorld,
                         start: Optional[Coord],
                         end: Optional[Coord],
                         fraction: Union[Fraction, float] = DEFAULT_FRACTION,
                         closed_set: bool = False) -> ReplanResult:
    """
    Plan, drop a wall onto the planned route, walk up to it, then plan again
    from where the agent stopped. `world` is modified in place: the obstacle
    cell is left as a WALL. Stops at the first search that finds no path.
    """
    if not 0 <= fraction <= 1:
        raise ValueError(f"replan fraction must be within [0, 1], got {fraction}")

    logger.info("1. Calculating initial route...")
    initial = search(Algorithm.ASTAR, world, start, end, closed_set=closed_set)
    if not initial.found:
        logger.warning("No initial path found! Halting.")
        return ReplanResult(False, "initial", initial)

    idx = obstacle_index(len(initial.path), fraction)
    obstacle = initial.path[idx]
    world.set_wall(obstacle)
    logger.info("2. [EVENT] Obstacle appeared at {}!", obstacle)

    prefix = initial.path[:idx]
    here = prefix[-1] if prefix else start
    logger.info("3. Agent stopped. Replanning from {}...", here)
    replanned = search(Algorithm.ASTAR, world, here, end, closed_set=closed_set)
    if not replanned.found:
        logger.warning("Failed to find a new path! Agent is stuck.")
        return ReplanResult(False, "replan", initial, replanned, obstacle, prefix, replans=1)

    route = prefix + replanned.path[1:] if prefix else list(replanned.path)
    cost = route_cost(route, world)
    logger.info("4. Route complete: {} cells, cost {}", len(route), cost)
    return ReplanResult(True, "done", initial, replanned, obstacle, prefix, route, cost, replans=1)
