# gridroute/planners.py
from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import List, Optional, Union

from .types import Algorithm, Coord
from .grid import GridWorld
from .search import SearchResult, search
from .replan import DEFAULT_FRACTION, ReplanResult, plan_with_replanning

Outcome = Union[SearchResult, ReplanResult]

@dataclass
class RunStats:
    reached: bool
    cost: int
    expansions: int
    replans: int
    elapsed_ms: float
    route: List[Coord]

def run(algorithm: Union[Algorithm, str],
        world: GridWorld,
        start: Optional[Coord] = None,
        end: Optional[Coord] = None,
        fraction: Union[Fraction, float] = DEFAULT_FRACTION,
        closed_set: bool = False) -> Outcome:
    """
    Dispatch one algorithm. Endpoints default to the START/END cells of
    the grid. A*-with-replanning works on a copy, so `world` is unchanged.
    """
    if isinstance(algorithm, str):
        algorithm = Algorithm.parse(algorithm)
    if start is None or end is None:
        found_start, found_end = world.find_endpoints()
        start = found_start if start is None else start
        end = found_end if end is None else end
    if algorithm is Algorithm.ASTAR_REPLAN:
        return plan_with_replanning(world.copy(), start, end, fraction=fraction, closed_set=closed_set)
    return search(algorithm, world, start, end, closed_set=closed_set)

def stats(outcome: Outcome) -> RunStats:
    if isinstance(outcome, ReplanResult):
        return RunStats(outcome.reached, outcome.route_cost, outcome.expansions,
                        outcome.replans, outcome.elapsed_ms, outcome.route)
    return RunStats(outcome.found, outcome.total_cost, outcome.expansions,
                    0, outcome.elapsed_ms, outcome.path)
