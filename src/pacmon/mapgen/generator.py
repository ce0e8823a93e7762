# src/pacmon/mapgen/generator.py
# Level -> Maze. The returned value is never touched again; consumers take
# working_copy() for live play.

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..config import CONFIG, GameConfig
from ..levels import get_level_settings
from ..rng import PMRandom, RandomSource
from ..tiles import DOT, POWER_PELLET
from .carve import carve_for_tier, empty_wall_grid
from .placement import place_power_pellets, place_spawns

XY = Tuple[int, int]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Maze:
    grid: Tuple[Tuple[int, ...], ...]   # [row][col], i.e. grid[y][x]
    size: int                           # width; equals height except for fixed non-square layouts
    player_start: XY
    ghost_starts: Tuple[XY, ...]
    dots: int                           # DOT cells actually placed
    power_pellets: int = 0
    level: int = 0
    tier: str = ""

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def cell(self, x: int, y: int) -> int:
        return self.grid[y][x]

    def working_copy(self) -> List[List[int]]:
        return [list(row) for row in self.grid]

    def to_dict(self) -> Dict[str, Any]:
        """Plain shape for JSON / front-end consumers."""
        return {
            "grid": [list(row) for row in self.grid],
            "size": self.size,
            "playerStart": {"x": self.player_start[0], "y": self.player_start[1]},
            "ghostStarts": [{"x": x, "y": y} for x, y in self.ghost_starts],
            "dots": self.dots,
        }


def tier_for_level(level: int, config: GameConfig = CONFIG) -> str:
    return "simple" if level <= config.simple_tier_max_level else "complex"


def generate_maze(
    level: int,
    rng: Optional[RandomSource] = None,
    config: GameConfig = CONFIG,
) -> Maze:
    """
    Build a fresh maze for `level`.

    Without `rng` each call draws from an entropy-seeded PMRandom, so two
    calls for the same level differ. Pass a seeded source to reproduce one.
    """
    settings = get_level_settings(level)
    if rng is None:
        rng = PMRandom.from_entropy()

    tier = tier_for_level(level, config)
    grid = empty_wall_grid(settings.maze_size)
    carve_for_tier(grid, rng, tier, settings.dots, config)
    pellets = place_power_pellets(grid, rng, settings.power_pellets, config)
    player, ghosts = place_spawns(grid, rng, settings.ghost_count, config)

    maze = Maze(
        grid=grid.as_matrix(),
        size=settings.maze_size,
        player_start=player,
        ghost_starts=tuple(ghosts),
        dots=grid.count(DOT),
        power_pellets=grid.count(POWER_PELLET),
        level=level,
        tier=tier,
    )
    logger.debug(
        "level %d (%s): size=%d dots=%d/%d pellets=%d/%d ghosts=%d/%d",
        level, tier, maze.size, maze.dots, settings.dots,
        len(pellets), settings.power_pellets, len(ghosts), settings.ghost_count,
    )
    return maze
