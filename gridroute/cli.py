# gridroute/cli.py
from __future__ import annotations
import argparse, csv, os, os.path, sys
from typing import List, Optional, Tuple

from loguru import logger

from .types import Algorithm
from .grid import GridWorld
from .maps import MAPS, build_map
from .config import PlannerConfig, load_config
from .log import setup_logger
from .planners import RunStats, run, stats
from .viz import draw_result_png

def format_stats(name: str, s: RunStats) -> str:
    return (f"{name:14s} | reached={s.reached!s:5s} | cost={s.cost:5d} | "
            f"expanded={s.expansions:6d} | replans={s.replans:2d} | "
            f"time={s.elapsed_ms:8.2f} ms")

def load_world(args: argparse.Namespace) -> Tuple[str, GridWorld]:
    if args.env:
        return os.path.splitext(os.path.basename(args.env))[0], GridWorld.load(args.env)
    return args.map, build_map(args.map, seed=args.seed)

def run_all_algs(world: GridWorld, cfg: PlannerConfig,
                 out_dir: Optional[str] = None, base_tag: str = "run") -> List[Tuple[str, RunStats]]:
    results: List[Tuple[str, RunStats]] = []
    for algo in Algorithm:
        outcome = run(algo, world, fraction=cfg.replan_fraction, closed_set=cfg.closed_set)
        results.append((algo.value, stats(outcome)))
        if out_dir:
            draw_result_png(world, outcome, os.path.join(out_dir, f"{base_tag}_{algo.value}.png"), cell=cfg.cell_size)
    return results

# -------- subcommands --------

def cmd_maps(args: argparse.Namespace, cfg: PlannerConfig) -> None:
    for key, info in MAPS.items():
        world = build_map(key, seed=0)
        terrain = "terrain" if world.terrain is not None else "no terrain"
        print(f"{key:8s} {info.name:34s} {world.rows}x{world.cols} ({terrain})")

def cmd_gen(args: argparse.Namespace, cfg: PlannerConfig) -> None:
    os.makedirs(args.out, exist_ok=True)
    for i in range(args.count):
        gw = GridWorld.random(rows=args.rows, cols=args.cols, p_wall=args.p,
                              seed=(args.seed + i) if args.seed is not None else None)
        path = os.path.join(args.out, f"grid_{i:03d}.txt")
        gw.save(path)
        print("wrote", path)

def cmd_run(args: argparse.Namespace, cfg: PlannerConfig) -> None:
    name, world = load_world(args)
    algo = Algorithm.parse(args.algo or cfg.algorithm)
    logger.info("Starting {} on '{}'.", algo.label, name)
    outcome = run(algo, world, fraction=cfg.replan_fraction, closed_set=cfg.closed_set)
    st = stats(outcome)
    print(format_stats(algo.value, st))
    if not st.reached:
        print("No path could be found.")
    if args.png:
        draw_result_png(world, outcome, args.png, cell=cfg.cell_size)
        print("wrote", args.png)

def cmd_bench(args: argparse.Namespace, cfg: PlannerConfig) -> None:
    if args.envdir:
        envs = sorted(p for p in os.listdir(args.envdir) if p.endswith(".txt"))
        worlds = [(fname, GridWorld.load(os.path.join(args.envdir, fname))) for fname in envs]
    else:
        worlds = [(key, build_map(key, seed=args.seed)) for key in MAPS]
    if args.out:
        os.makedirs(args.out, exist_ok=True)

    rows = []
    for tag, world in worlds:
        results = run_all_algs(world, cfg, out_dir=args.out, base_tag=os.path.splitext(tag)[0])
        for name, st in results:
            print(f"{tag} :: {format_stats(name, st)}")
            rows.append({
                "env": tag,
                "alg": name,
                "reached": st.reached,
                "cost": st.cost,
                "expanded": st.expansions,
                "replans": st.replans,
                "time_ms": round(st.elapsed_ms, 3),
            })
    if args.csv and rows:
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Grid route planning (BFS, UCS, A*, A* with replanning)")
    p.add_argument("--config", type=str, default=None, help="YAML file of planner settings")
    p.add_argument("--log-level", type=str, default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    m = sub.add_parser("maps", help="list built-in maps")
    m.set_defaults(func=cmd_maps)

    g = sub.add_parser("gen", help="generate random grids")
    g.add_argument("--count", type=int, default=10)
    g.add_argument("--rows", type=int, default=15)
    g.add_argument("--cols", type=int, default=25)
    g.add_argument("--p", type=float, default=0.20)
    g.add_argument("--out", type=str, default="envs")
    g.add_argument("--seed", type=int, default=None)
    g.set_defaults(func=cmd_gen)

    r = sub.add_parser("run", help="run one algorithm on one map")
    src = r.add_mutually_exclusive_group()
    src.add_argument("--map", type=str, default="medium", choices=list(MAPS))
    src.add_argument("--env", type=str, default=None, help="map file instead of a built-in map")
    r.add_argument("--algo", type=str, default=None, choices=[a.value for a in Algorithm])
    r.add_argument("--seed", type=int, default=None)
    r.add_argument("--png", type=str, default="")
    r.set_defaults(func=cmd_run)

    b = sub.add_parser("bench", help="run every algorithm on every .txt in a folder (or every built-in map)")
    b.add_argument("--envdir", type=str, default="")
    b.add_argument("--seed", type=int, default=0)
    b.add_argument("--out", type=str, default="")
    b.add_argument("--csv", type=str, default="")
    b.set_defaults(func=cmd_bench)

    for sp in (r, b):
        sp.add_argument("--fraction", type=float, default=None, help="replan obstacle position along the route")
        sp.add_argument("--closed-set", action="store_true", default=None)
        sp.add_argument("--cell", type=int, default=None, help="PNG pixels per cell")

    return p

def main(argv: Optional[List[str]] = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    setup_logger(args.log_level or "INFO")
    try:
        cfg = load_config(args.config).merged(
            log_level=args.log_level,
            replan_fraction=getattr(args, "fraction", None),
            closed_set=getattr(args, "closed_set", None),
            cell_size=getattr(args, "cell", None),
        )
        setup_logger(cfg.log_level, cfg.log_dir)
        args.func(args, cfg)
    except (ValueError, FileNotFoundError) as e:
        logger.error("{}", e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
