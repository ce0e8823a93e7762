#!/usr/bin/env python3
# Render generated mazes to PNGs using Pillow.

import argparse, logging, os
from pacmon.config import CONFIG
from pacmon.levels import MAX_LEVEL
from pacmon.mapgen.classic import classic_maze
from pacmon.mapgen.generator import generate_maze
from pacmon.render.snapshot import save_maze_png
from pacmon.rng import PMRandom, seed_for_level

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--levels", type=int, default=MAX_LEVEL, help="Render levels 1..N")
    ap.add_argument("--seed", type=int, default=None, help="Session seed (omit for random mazes)")
    ap.add_argument("--classic", action="store_true", help="Also render the classic layout")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--cell", type=int, default=CONFIG.cell_px, help="Cell size in pixels")
    ap.add_argument("--verbose", "-v", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    os.makedirs(args.outdir, exist_ok=True)
    for lvl in range(1, args.levels + 1):
        rng = PMRandom(seed_for_level(args.seed, lvl)) if args.seed is not None else None
        maze = generate_maze(lvl, rng=rng)
        save_maze_png(maze, os.path.join(args.outdir, f"{lvl:02d}.png"), cell=args.cell)
    if args.classic:
        save_maze_png(classic_maze(), os.path.join(args.outdir, "classic.png"), cell=args.cell)
    print(f"Wrote PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
