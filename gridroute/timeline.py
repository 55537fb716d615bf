# gridroute/timeline.py
"""
Paint steps for replaying a search: the visitation trace first, then
the route. A viewer applies one step per `delay_ms`.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Union

from .types import Coord
from .search import SearchResult
from .replan import ReplanResult

VISITED_MS = 15
AGENT_MS = 100

@dataclass(frozen=True)
class Step:
    cell: Coord
    style: str      # "visited", "path", "agent" or "obstacle"
    delay_ms: int

def _cells(cells: List[Coord], style: str, delay_ms: int) -> List[Step]:
    return [Step(s, style, delay_ms) for s in cells]

def search_timeline(res: SearchResult) -> List[Step]:
    steps = _cells(res.visited_order, "visited", VISITED_MS)
    steps += _cells(res.path, "path", AGENT_MS)
    return steps

def replan_timeline(res: ReplanResult) -> List[Step]:
    steps = _cells(res.initial.visited_order, "visited", VISITED_MS)
    if res.obstacle is None:
        return steps
    steps.append(Step(res.obstacle, "obstacle", AGENT_MS))
    steps += _cells(res.prefix, "path", AGENT_MS)
    if res.prefix:
        steps.append(Step(res.prefix[-1], "agent", AGENT_MS))
    if res.replanned is not None:
        steps += _cells(res.replanned.visited_order, "visited", VISITED_MS)
    steps += _cells(res.route, "path", AGENT_MS)
    return steps

def build_timeline(res: Union[SearchResult, ReplanResult]) -> List[Step]:
    if isinstance(res, ReplanResult):
        return replan_timeline(res)
    return search_timeline(res)
