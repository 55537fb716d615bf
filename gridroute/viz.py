# gridroute/viz.py
from __future__ import annotations
import os
from typing import Dict, Iterable, Optional, Tuple

from PIL import Image, ImageDraw

from .types import CellKind, Coord, Terrain
from .grid import GridWorld
from .planners import Outcome, stats
from .replan import ReplanResult

RGB = Tuple[int, int, int]

COLORS: Dict[str, RGB] = {
    "start": (34, 197, 94),
    "end": (239, 68, 68),
    "wall": (107, 114, 128),
    "path": (59, 130, 246),
    "visited": (3, 105, 161),
    "agent": (250, 204, 21),
    "obstacle": (147, 51, 234),
    "plain": (241, 245, 249),
    "gap": (15, 23, 42),
}

TERRAIN_COLORS: Dict[Terrain, RGB] = {
    Terrain.ROAD: (148, 163, 184),
    Terrain.GRASS: (22, 101, 52),
    Terrain.WATER: (30, 64, 175),
}

def base_color(world: GridWorld, s: Coord) -> RGB:
    r, c = s
    kind = world.cells[r][c]
    if kind == CellKind.START:
        return COLORS["start"]
    if kind == CellKind.END:
        return COLORS["end"]
    if kind == CellKind.WALL:
        return COLORS["wall"]
    if world.terrain is None:
        return COLORS["plain"]
    return TERRAIN_COLORS[world.terrain[r][c]]

def _fill(drw: ImageDraw.ImageDraw, cells: Iterable[Coord], color: RGB, cell: int) -> None:
    for (r, c) in cells:
        x0, y0 = c * cell, r * cell
        drw.rectangle((x0, y0, x0 + cell - 2, y0 + cell - 2), fill=color)

def draw_result_png(world: GridWorld,
                    outcome: Optional[Outcome],
                    out_png: str,
                    cell: int = 24) -> None:
    """
    Grid with terrain, the visitation trace, the route, and for a
    replanning run the injected obstacle and where the agent stopped.
    """
    W, H = world.cols * cell, world.rows * cell
    img = Image.new("RGB", (W, H), COLORS["gap"])
    drw = ImageDraw.Draw(img)

    for r in range(world.rows):
        for c in range(world.cols):
            _fill(drw, [(r, c)], base_color(world, (r, c)), cell)

    if outcome is not None:
        if isinstance(outcome, ReplanResult):
            visited = list(outcome.initial.visited_order)
            if outcome.replanned is not None:
                visited += outcome.replanned.visited_order
        else:
            visited = outcome.visited_order
        route = stats(outcome).route
        _fill(drw, visited, COLORS["visited"], cell)
        _fill(drw, route, COLORS["path"], cell)

        if isinstance(outcome, ReplanResult):
            if outcome.obstacle is not None:
                _fill(drw, [outcome.obstacle], COLORS["obstacle"], cell)
            if outcome.prefix:
                _fill(drw, [outcome.prefix[-1]], COLORS["agent"], cell)

    # start/end stay visible on top
    start, end = world.find_endpoints()
    if start is not None:
        _fill(drw, [start], COLORS["start"], cell)
    if end is not None:
        _fill(drw, [end], COLORS["end"], cell)

    d = os.path.dirname(out_png)
    if d:
        os.makedirs(d, exist_ok=True)
    img.save(out_png)
