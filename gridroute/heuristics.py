# gridroute/heuristics.py
from .types import Algorithm, Coord

def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

def priority(algorithm: Algorithm, cost: int, s: Coord, end: Coord) -> int:
    """Frontier key: arrival order for BFS (0), cost for UCS, cost + distance for A*."""
    if algorithm is Algorithm.BFS:
        return 0
    if algorithm is Algorithm.UCS:
        return cost
    return cost + manhattan(s, end)
