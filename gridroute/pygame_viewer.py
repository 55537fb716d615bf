# gridroute/pygame_viewer.py (trace playback)
from __future__ import annotations
import argparse
from typing import Dict, List, Optional, Tuple

import pygame
from loguru import logger

from .types import Algorithm, Coord
from .grid import GridWorld
from .maps import MAPS, build_map
from .log import setup_logger
from .planners import Outcome, run, stats
from .timeline import Step, build_timeline
from .viz import COLORS, base_color

class Viewer:
    def __init__(self, map_key: str = "medium", algorithm: Algorithm = Algorithm.ASTAR,
                 cell_size: int = 28, fps: int = 60, seed: Optional[int] = None,
                 env: Optional[str] = None, fullscreen: bool = False):
        self.map_keys = list(MAPS)
        self.map_index = self.map_keys.index(map_key)
        self.algos = list(Algorithm)
        self.algo_index = self.algos.index(algorithm)
        self.cell = cell_size
        self.fps = fps
        self.seed = seed
        self.env = env
        self.fullscreen = fullscreen

        self.paused = False
        self.clock = pygame.time.Clock()
        self._reset_state()

    # ----------------- display -----------------
    def _recreate_display(self) -> None:
        W, H = self.world.cols * self.cell, self.world.rows * self.cell
        flags = pygame.SCALED | (pygame.FULLSCREEN if self.fullscreen else 0)
        self.screen = pygame.display.set_mode((W, H), flags)

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        self._recreate_display()

    # ----------------- planning -----------------
    def _reset_state(self) -> None:
        """Reload the map, run the current algorithm and rewind playback."""
        if self.env:
            self.world = GridWorld.load(self.env)
            title = self.env
        else:
            key = self.map_keys[self.map_index]
            self.world = build_map(key, seed=self.seed)
            title = MAPS[key].name
        algo = self.algos[self.algo_index]
        pygame.display.set_caption(f"{title} - {algo.label}")
        self._recreate_display()

        self.outcome: Outcome = run(algo, self.world)
        self.steps: List[Step] = build_timeline(self.outcome)
        self.painted: Dict[Coord, Tuple[int, int, int]] = {}
        self.step_index = 0
        self._step_timer = 0.0
        logger.info("Starting {} on '{}'.", algo.label, title)

    def _finish(self) -> None:
        st = stats(self.outcome)
        if st.reached:
            logger.info("cost={} expanded={} time={:.2f} ms replans={}",
                        st.cost, st.expansions, st.elapsed_ms, st.replans)
        else:
            logger.warning("No path could be found.")

    def _advance(self, dt_ms: float) -> None:
        self._step_timer += dt_ms
        while self.step_index < len(self.steps):
            step = self.steps[self.step_index]
            if self._step_timer < step.delay_ms:
                return
            self._step_timer -= step.delay_ms
            self.painted[step.cell] = COLORS[step.style]
            self.step_index += 1
            if self.step_index == len(self.steps):
                self._finish()

    # ----------------- draw -----------------
    def draw(self) -> None:
        cell = self.cell
        scr = self.screen
        scr.fill(COLORS["gap"])
        start, end = self.world.find_endpoints()
        for r in range(self.world.rows):
            for c in range(self.world.cols):
                color = self.painted.get((r, c), base_color(self.world, (r, c)))
                if (r, c) in (start, end):
                    color = base_color(self.world, (r, c))
                scr.fill(color, pygame.Rect(c * cell, r * cell, cell - 1, cell - 1))
        pygame.display.flip()

    # ----------------- loop -----------------
    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(self.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        self.paused = not self.paused
                    elif event.key == pygame.K_r:
                        self._reset_state()
                    elif event.key == pygame.K_n:
                        self.algo_index = (self.algo_index + 1) % len(self.algos)
                        self._reset_state()
                    elif event.key == pygame.K_m and not self.env:
                        self.map_index = (self.map_index + 1) % len(self.map_keys)
                        self._reset_state()
                    elif event.key == pygame.K_F11:
                        self.toggle_fullscreen()

            if not self.paused:
                self._advance(dt)
            self.draw()

def main():
    parser = argparse.ArgumentParser(description="Replay a route search step by step")
    parser.add_argument("--map", type=str, default="medium", choices=list(MAPS))
    parser.add_argument("--env", type=str, default=None, help="Load a saved map (.txt)")
    parser.add_argument("--algo", type=str, default="astar", choices=[a.value for a in Algorithm])
    parser.add_argument("--seed", type=int, default=None, help="Seed for maps with random walls")
    parser.add_argument("--cell", type=int, default=28, help="Cell size in pixels")
    parser.add_argument("--fps", type=int, default=60, help="Frames per second")
    parser.add_argument("--fullscreen", action="store_true", help="Start in fullscreen (toggle F11)")
    args = parser.parse_args()
    setup_logger("INFO")

    pygame.init()
    try:
        Viewer(args.map, Algorithm.parse(args.algo), cell_size=args.cell, fps=args.fps,
               seed=args.seed, env=args.env, fullscreen=args.fullscreen).run()
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
