# src/pacmon/render/tileset.py
from __future__ import annotations
import os
import pygame
from functools import lru_cache
from typing import Tuple

from ..tiles import DOT, PATH, POWER_PELLET, WALL

ASSET_DIR = os.path.join("assets", "images")

CELL_COLORS = {
    WALL: (32, 0, 82, 255),          # deep blue
    PATH: (14, 16, 15, 255),         # near black
    DOT: (251, 250, 249, 255),       # off white
    POWER_PELLET: (255, 255, 255, 255),
}
PLAYER_COLOR = (255, 220, 0, 255)
GHOST_COLORS = (
    (255, 0, 0, 255),
    (255, 184, 255, 255),
    (0, 255, 255, 255),
    (255, 184, 82, 255),
)

def _path_candidates(kind: int) -> Tuple[str, ...]:
    return (
        os.path.join(ASSET_DIR, f"{kind}.png"),
        os.path.join(ASSET_DIR, f"cell_{kind}.png"),
    )

def _dot_radius(kind: int, size: int) -> int:
    if kind == DOT:
        return max(1, size // 8)
    if kind == POWER_PELLET:
        return max(2, size // 3)
    return 0

class Tileset:
    """
    Tiny cached cell painter:
      - Uses assets/images/<kind>.png or cell_<kind>.png when present
      - Otherwise paints the cell colour with a centred dot for DOT/POWER_PELLET
      - Returns pygame.Surface of exactly (size, size)
    """
    def __init__(self, cell_size: int):
        self.cell_size = cell_size

    @lru_cache(maxsize=64)
    def get(self, kind: int) -> pygame.Surface:
        for p in _path_candidates(kind):
            if os.path.exists(p):
                return pygame.image.load(p).convert_alpha()
        img = pygame.Surface((self.cell_size, self.cell_size), pygame.SRCALPHA)
        img.fill(CELL_COLORS[PATH] if kind in (DOT, POWER_PELLET) else CELL_COLORS.get(kind, CELL_COLORS[WALL]))
        r = _dot_radius(kind, self.cell_size)
        if r:
            c = self.cell_size // 2
            pygame.draw.circle(img, CELL_COLORS[kind], (c, c), r)
        return img

    @lru_cache(maxsize=256)
    def view(self, kind: int, size: int) -> pygame.Surface:
        base = self.get(kind)
        if base.get_size() == (size, size):
            return base
        return pygame.transform.scale(base, (size, size))

    def actor(self, color: Tuple[int, int, int, int], size: int) -> pygame.Surface:
        img = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(img, color, (size // 2, size // 2), max(2, size // 2 - 1))
        return img
