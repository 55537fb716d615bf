# gridroute/__init__.py
from .types import Coord, CellKind, Terrain, Algorithm
from .grid import GridWorld
from .costs import TERRAIN_COST, terrain_cost, cell_cost
from .heuristics import manhattan, priority
from .frontier import PriorityFrontier, FifoFrontier
from .paths import reconstruct_path, route_cost
from .search import search, SearchResult
from .replan import plan_with_replanning, obstacle_index, ReplanResult
from .planners import run, stats, RunStats
from .maps import MAPS, build_map
from .config import PlannerConfig, load_config

__all__ = [
    "Coord", "CellKind", "Terrain", "Algorithm", "GridWorld",
    "TERRAIN_COST", "terrain_cost", "cell_cost", "manhattan", "priority",
    "PriorityFrontier", "FifoFrontier",
    "reconstruct_path", "route_cost",
    "search", "SearchResult",
    "plan_with_replanning", "obstacle_index", "ReplanResult",
    "run", "stats", "RunStats",
    "MAPS", "build_map",
    "PlannerConfig", "load_config",
]
