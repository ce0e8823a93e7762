# src/pacmon/render/snapshot.py
# Headless PNG rendering of a Maze with Pillow (tools + tests; no pygame).

from __future__ import annotations

from PIL import Image, ImageDraw

from ..config import CONFIG
from ..mapgen.generator import Maze
from ..tiles import DOT, PATH, POWER_PELLET, WALL

COLORS = {
    WALL: (32, 0, 82, 255),
    PATH: (14, 16, 15, 255),
    DOT: (251, 250, 249, 255),
    POWER_PELLET: (255, 255, 255, 255),
}
PLAYER = (255, 220, 0, 255)
GHOST = (255, 0, 0, 255)


def render_maze_image(maze: Maze, cell: int = CONFIG.cell_px, margin: int = 0, actors: bool = True) -> Image.Image:
    """Paint every cell, then player and ghost spawns on top."""
    if cell < 4:
        raise ValueError("cell must be at least 4 pixels")
    w = maze.width * cell + 2 * margin
    h = maze.height * cell + 2 * margin
    img = Image.new("RGBA", (w, h), COLORS[PATH])
    draw = ImageDraw.Draw(img)

    def box(x: int, y: int, inset: int = 0):
        x0 = margin + x * cell + inset
        y0 = margin + y * cell + inset
        return (x0, y0, x0 + cell - 1 - inset, y0 + cell - 1 - inset)

    for y, row in enumerate(maze.grid):
        for x, kind in enumerate(row):
            if kind == WALL:
                draw.rectangle(box(x, y), fill=COLORS[WALL])
            elif kind == DOT:
                draw.ellipse(box(x, y, inset=max(1, cell * 3 // 8)), fill=COLORS[DOT])
            elif kind == POWER_PELLET:
                draw.ellipse(box(x, y, inset=max(1, cell // 6)), fill=COLORS[POWER_PELLET])

    if actors:
        for gx, gy in maze.ghost_starts:
            draw.ellipse(box(gx, gy, inset=1), fill=GHOST)
        px, py = maze.player_start
        draw.ellipse(box(px, py, inset=1), fill=PLAYER)
    return img


def save_maze_png(maze: Maze, path: str, cell: int = CONFIG.cell_px) -> None:
    render_maze_image(maze, cell=cell).save(path)
