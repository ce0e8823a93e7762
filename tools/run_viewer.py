#!/usr/bin/env python3
# Minimal interactive viewer for generated mazes (no gameplay).
# - Left/Right: previous/next level
# - R: regenerate the current level
# - C: toggle the classic layout
# - S: toggle spawn markers
# - 60 Hz fixed loop

import argparse, logging
import pygame
from pacmon.config import CONFIG
from pacmon.levels import MAX_LEVEL
from pacmon.mapgen.classic import classic_maze
from pacmon.mapgen.generator import generate_maze
from pacmon.render.tileset import GHOST_COLORS, PLAYER_COLOR, Tileset
from pacmon.rng import PMRandom, seed_for_level

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--level", type=int, default=1, help=f"Level (1..{MAX_LEVEL})")
    ap.add_argument("--seed", type=int, default=None, help="Session seed (omit for random mazes)")
    ap.add_argument("--cell", type=int, default=CONFIG.cell_px, help="Cell size in pixels")
    ap.add_argument("--verbose", "-v", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    pygame.init()
    clock = pygame.time.Clock()
    tiles = Tileset(args.cell)

    level = args.level
    show_classic = False
    show_spawns = True
    regen = 0  # bumps the seed so R gives a new maze in seeded mode too

    def load_maze():
        if show_classic:
            return classic_maze()
        rng = None
        if args.seed is not None:
            rng = PMRandom(seed_for_level(args.seed + regen, level))
        return generate_maze(level, rng=rng)

    def resize(m):
        return pygame.display.set_mode((m.width * args.cell, m.height * args.cell))

    maze = load_maze()
    screen = resize(maze)
    running = True
    while running:
        reload = False
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RIGHT:
                    level = 1 if level == MAX_LEVEL else level + 1
                    reload = True
                elif ev.key == pygame.K_LEFT:
                    level = MAX_LEVEL if level == 1 else level - 1
                    reload = True
                elif ev.key == pygame.K_r:
                    regen += 1
                    reload = True
                elif ev.key == pygame.K_c:
                    show_classic = not show_classic
                    reload = True
                elif ev.key == pygame.K_s:
                    show_spawns = not show_spawns
        if reload:
            maze = load_maze()
            screen = resize(maze)

        screen.fill((0, 0, 0))
        for y, row in enumerate(maze.grid):
            for x, kind in enumerate(row):
                screen.blit(tiles.view(kind, args.cell), (x * args.cell, y * args.cell))
        if show_spawns:
            for i, (gx, gy) in enumerate(maze.ghost_starts):
                color = GHOST_COLORS[i % len(GHOST_COLORS)]
                screen.blit(tiles.actor(color, args.cell), (gx * args.cell, gy * args.cell))
            px, py = maze.player_start
            screen.blit(tiles.actor(PLAYER_COLOR, args.cell), (px * args.cell, py * args.cell))

        title = "Classic" if show_classic else f"Level {level} [{maze.tier}]"
        pygame.display.set_caption(
            f"Pacmon Viewer - {title}  size {maze.size}  dots {maze.dots}  ghosts {len(maze.ghost_starts)}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
