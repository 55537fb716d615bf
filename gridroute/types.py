# gridroute/types.py
from __future__ import annotations
from enum import Enum, IntEnum
from typing import Tuple

Coord = Tuple[int, int]  # (row, col)


class CellKind(IntEnum):
    EMPTY = 0
    WALL = 1
    START = 2
    END = 3


class Terrain(Enum):
    ROAD = "R"
    GRASS = "G"
    WATER = "W"


class Algorithm(Enum):
    BFS = "bfs"
    UCS = "ucs"
    ASTAR = "astar"
    ASTAR_REPLAN = "astar-replan"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @staticmethod
    def parse(name: str) -> "Algorithm":
        key = name.strip().lower().replace("_", "-")
        for algo in Algorithm:
            if algo.value == key:
                return algo
        raise ValueError(f"unknown algorithm {name!r} (choose from {', '.join(a.value for a in Algorithm)})")


_LABELS = {
    Algorithm.BFS: "Breadth-First Search (Uninformed)",
    Algorithm.UCS: "Uniform-Cost Search (Uninformed)",
    Algorithm.ASTAR: "A* Search (Informed)",
    Algorithm.ASTAR_REPLAN: "A* with Replanning",
}
