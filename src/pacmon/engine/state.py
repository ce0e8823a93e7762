# src/pacmon/engine/state.py
# Live play state built on top of a generated Maze: eaten cells, score,
# lives, frightened window and level transitions.

from __future__ import annotations

import logging
from typing import List, Optional

from ..config import CONFIG, GameConfig
from ..levels import LevelSettings, get_level_settings
from ..mapgen.generator import Maze, generate_maze
from ..rng import PMRandom, seed_for_level
from ..tiles import DOT, PATH, POWER_PELLET, is_collectible
from .timing import TimingModel

logger = logging.getLogger(__name__)


class PlaySession:
    def __init__(
        self,
        level: int = 1,
        *,
        seed: Optional[int] = None,
        config: GameConfig = CONFIG,
    ) -> None:
        self.config = config
        self.seed = seed
        self.timing = TimingModel.from_config(config)

        self.score = 0
        self.lives = config.start_lives
        self.frightened_ticks = 0

        self._load_level(level)

    # ---- Level lifecycle ----
    def _load_level(self, level: int) -> None:
        rng = PMRandom(seed_for_level(self.seed, level)) if self.seed is not None else None
        self.level = level
        self.settings: LevelSettings = get_level_settings(level)
        self.maze: Maze = generate_maze(level, rng=rng, config=self.config)
        self.grid: List[List[int]] = self.maze.working_copy()
        self.frightened_ticks = 0
        logger.info("level %d loaded (%dx%d, %d dots)", level, self.maze.size, self.maze.size, self.maze.dots)

    def advance_level(self) -> Maze:
        """Discard the current maze and generate the next level's."""
        self._load_level(self.level + 1)
        return self.maze

    def restart_level(self) -> Maze:
        self._load_level(self.level)
        return self.maze

    # ---- Queries ----
    @property
    def dots_remaining(self) -> int:
        return sum(1 for row in self.grid for c in row if is_collectible(c))

    @property
    def level_complete(self) -> bool:
        return self.dots_remaining == 0

    @property
    def game_over(self) -> bool:
        return self.lives <= 0

    @property
    def frightened(self) -> bool:
        return self.frightened_ticks > 0

    @property
    def ghost_period(self) -> int:
        return self.timing.ghost_step_period(self.settings.ghost_speed)

    # ---- Events ----
    def eat(self, x: int, y: int) -> int:
        """Consume whatever sits at (x, y); returns the points gained."""
        if not (0 <= y < len(self.grid) and 0 <= x < len(self.grid[y])):
            raise ValueError(f"({x}, {y}) is outside the maze")
        cell = self.grid[y][x]
        if cell == DOT:
            points = self.config.score_dot
        elif cell == POWER_PELLET:
            points = self.config.score_power_pellet
            self.frightened_ticks = self.timing.power_pellet_ticks
        else:
            return 0
        self.grid[y][x] = PATH
        self.score += points
        return points

    def eat_ghost(self) -> int:
        if not self.frightened:
            raise RuntimeError("ghosts can only be eaten while frightened")
        self.score += self.config.score_ghost
        return self.config.score_ghost

    def lose_life(self) -> int:
        self.lives = max(0, self.lives - 1)
        self.frightened_ticks = 0
        if self.game_over:
            logger.info("game over at level %d with score %d", self.level, self.score)
        return self.lives

    def gain_life(self) -> int:
        self.lives = min(self.config.max_lives, self.lives + 1)
        return self.lives

    def tick(self) -> None:
        if self.frightened_ticks > 0:
            self.frightened_ticks -= 1
