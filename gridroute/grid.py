# gridroute/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import random, os

from .types import CellKind, Coord, Terrain

_ART = {".": CellKind.EMPTY, "#": CellKind.WALL, "S": CellKind.START, "E": CellKind.END}

@dataclass
class GridWorld:
    cells: List[List[CellKind]]
    terrain: Optional[List[List[Terrain]]] = None  # None = all road

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise ValueError("grid must be at least 1x1")
        cols = len(self.cells[0])
        if any(len(row) != cols for row in self.cells):
            raise ValueError("grid rows have different lengths")
        if self.terrain is not None:
            if len(self.terrain) != len(self.cells) or any(len(row) != cols for row in self.terrain):
                raise ValueError("terrain shape does not match grid shape")

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    # ----------------- construction -----------------
    @staticmethod
    def from_strings(art: Sequence[str], terrain: Optional[Sequence[str]] = None) -> "GridWorld":
        """
        Build a world from string art: '.' empty, '#' wall, 'S' start, 'E' end.
        Terrain rows use 'R' road, 'G' grass, 'W' water.
        """
        try:
            cells = [[_ART[ch] for ch in line] for line in art]
            ter = None if terrain is None else [[Terrain(ch) for ch in line] for line in terrain]
        except (KeyError, ValueError) as e:
            raise ValueError(f"bad map character: {e}") from e
        return GridWorld(cells, ter)

    @staticmethod
    def random(rows: int = 15, cols: int = 25, p_wall: float = 0.20, seed: Optional[int] = None) -> "GridWorld":
        if rows < 1 or cols < 1 or rows * cols < 2:
            raise ValueError(f"a random grid needs room for a start and an end, got {rows}x{cols}")
        rng = random.Random(seed)
        cells = [[CellKind.WALL if rng.random() < p_wall else CellKind.EMPTY for _ in range(cols)] for _ in range(rows)]
        cells[0][0] = CellKind.START
        cells[rows - 1][cols - 1] = CellKind.END
        return GridWorld(cells)

    @staticmethod
    def load(path: str) -> "GridWorld":
        with open(path, "r") as f:
            lines = [line.strip() for line in f if line.strip()]
        if not lines:
            raise ValueError(f"{path}: empty map file")

        header = lines[0].split()
        if header and header[0] == "GRID":
            if len(header) != 3:
                raise ValueError(f"{path}: expected 'GRID <rows> <cols>' header")
            rows, cols = int(header[1]), int(header[2])
            body = lines[1:]
        else:
            # legacy flat format: digit rows only, no terrain
            rows, cols, body = len(lines), len(lines[0]), lines

        if len(body) < rows:
            raise ValueError(f"{path}: expected {rows} grid rows, found {len(body)}")
        try:
            cells = [[CellKind(int(ch)) for ch in body[i]] for i in range(rows)]
        except ValueError as e:
            raise ValueError(f"{path}: bad cell value: {e}") from e
        if any(len(row) != cols for row in cells):
            raise ValueError(f"{path}: every grid row must have {cols} cells")

        terrain = None
        rest = body[rows:]
        if rest:
            if rest[0] != "TERRAIN" or len(rest) - 1 != rows:
                raise ValueError(f"{path}: expected 'TERRAIN' followed by {rows} rows")
            try:
                terrain = [[Terrain(ch) for ch in line] for line in rest[1:]]
            except ValueError as e:
                raise ValueError(f"{path}: bad terrain value: {e}") from e
        return GridWorld(cells, terrain)

    def save(self, path: str) -> None:
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)
        with open(path, "w") as f:
            f.write(f"GRID {self.rows} {self.cols}\n")
            for row in self.cells:
                f.write("".join(str(int(k)) for k in row) + "\n")
            if self.terrain is not None:
                f.write("TERRAIN\n")
                for trow in self.terrain:
                    f.write("".join(t.value for t in trow) + "\n")

    def copy(self) -> "GridWorld":
        terrain = None if self.terrain is None else [list(row) for row in self.terrain]
        return GridWorld([list(row) for row in self.cells], terrain)

    # ----------------- queries -----------------
    def in_bounds(self, s: Coord) -> bool:
        r, c = s
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_wall(self, s: Coord) -> bool:
        r, c = s
        return self.cells[r][c] == CellKind.WALL

    def terrain_at(self, s: Coord) -> Terrain:
        if self.terrain is None:
            return Terrain.ROAD
        r, c = s
        return self.terrain[r][c]

    def neighbors(self, s: Coord) -> List[Coord]:
        """Up, down, left, right; in bounds and not a wall."""
        r, c = s
        cand = [(r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)]
        return [p for p in cand if self.in_bounds(p) and not self.is_wall(p)]

    def find_endpoints(self) -> Tuple[Optional[Coord], Optional[Coord]]:
        """Scan for the START and END cells; the last one found wins, None if absent."""
        start = end = None
        for r, row in enumerate(self.cells):
            for c, kind in enumerate(row):
                if kind == CellKind.START:
                    start = (r, c)
                elif kind == CellKind.END:
                    end = (r, c)
        return start, end

    def set_wall(self, s: Coord) -> None:
        r, c = s
        self.cells[r][c] = CellKind.WALL
