# src/pacmon/mapgen/placement.py
# Bounded rejection sampling for pellets and spawns.

import logging
from typing import Callable, Collection, List, Optional, Tuple

from ..config import CONFIG, GameConfig
from ..grid import Grid
from ..rng import RandomSource, randbelow
from ..tiles import PATH, POWER_PELLET

XY = Tuple[int, int]

logger = logging.getLogger(__name__)


def sample_interior(
    grid: Grid,
    rng: RandomSource,
    accept: Callable[[int, int], bool],
    exclude: Collection[XY] = (),
    attempts: int = 100,
) -> Optional[XY]:
    """
    Draw uniform interior coordinates (1..size-2 on both axes) until one
    passes `accept` and is not in `exclude`.
    Gives up with None after `attempts` draws; callers treat that as
    "nothing placed", never as an error.
    """
    if attempts < 1:
        raise ValueError("attempts must be >= 1")
    span = grid.size - 2
    if span < 1:
        return None
    for _ in range(attempts):
        x = randbelow(rng, span) + 1
        y = randbelow(rng, span) + 1
        if (x, y) in exclude:
            continue
        if accept(x, y):
            return (x, y)
    return None


def find_open_space(
    grid: Grid,
    rng: RandomSource,
    exclude: Optional[XY] = None,
    attempts: int = 100,
) -> Optional[XY]:
    """Random PATH cell other than `exclude`, or None once attempts run out."""
    return sample_interior(
        grid, rng,
        accept=lambda x, y: grid.get(x, y) == PATH,
        exclude=(exclude,) if exclude is not None else (),
        attempts=attempts,
    )


def place_power_pellets(
    grid: Grid,
    rng: RandomSource,
    count: int,
    config: GameConfig = CONFIG,
) -> List[XY]:
    placed: List[XY] = []
    for _ in range(count):
        pos = find_open_space(grid, rng, attempts=config.placement_attempts)
        if pos is None:
            logger.debug("power pellet %d/%d omitted: no open space", len(placed) + 1, count)
            continue
        grid.set(pos[0], pos[1], POWER_PELLET)
        placed.append(pos)
    return placed


def place_spawns(
    grid: Grid,
    rng: RandomSource,
    ghost_count: int,
    config: GameConfig = CONFIG,
) -> Tuple[XY, List[XY]]:
    """
    Player first, falling back to (1,1) when the search is exhausted.
    Ghosts avoid the player cell only; missing ghosts are dropped.
    Spawns do not alter the grid.
    """
    player = find_open_space(grid, rng, attempts=config.placement_attempts)
    if player is None:
        logger.debug("player spawn search exhausted; using (1, 1)")
        player = (1, 1)

    ghosts: List[XY] = []
    for i in range(ghost_count):
        pos = find_open_space(grid, rng, exclude=player, attempts=config.placement_attempts)
        if pos is None:
            logger.debug("ghost spawn %d/%d omitted: no open space", i + 1, ghost_count)
            continue
        ghosts.append(pos)
    return player, ghosts
