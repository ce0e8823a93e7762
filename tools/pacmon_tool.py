#!/usr/bin/env python3
import argparse, csv, logging, os
from pacmon.levels import MAX_LEVEL
from pacmon.mapgen.generator import generate_maze
from pacmon.rng import PMRandom, seed_for_level

def rng_for(seed, level):
    return PMRandom(seed_for_level(seed, level)) if seed is not None else None

def write_tsv(mat, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)

def cmd_emit(args):
    maze = generate_maze(args.level, rng=rng_for(args.seed, args.level))
    write_tsv(maze.grid, args.out, include_header=args.header)
    print(f"Wrote {args.out} (size {maze.size}, dots {maze.dots}, "
          f"player {maze.player_start}, ghosts {list(maze.ghost_starts)})")

def cmd_batch(args):
    os.makedirs(args.outdir, exist_ok=True)
    for lvl in range(1, args.levels + 1):
        maze = generate_maze(lvl, rng=rng_for(args.seed, lvl))
        write_tsv(maze.grid, os.path.join(args.outdir, f"{lvl:02d}.tsv"))
    print(f"Wrote {args.levels} levels to {args.outdir}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--verbose', '-v', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--seed', type=int, default=None)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('batch')
    p2.add_argument('--levels', type=int, default=MAX_LEVEL)
    p2.add_argument('--seed', type=int, default=None)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_batch)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    args.func(args)

if __name__ == '__main__':
    main()
