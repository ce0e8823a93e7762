# src/pacmon/mapgen/carve.py
# The two carving strategies. Both write only interior cells (1..size-2),
# so the wall ring laid down by Grid.empty survives untouched.

from typing import List, Set, Tuple

from ..config import CONFIG, GameConfig
from ..grid import Grid
from ..rng import RandomSource, randbelow
from ..tiles import DOT, PATH, WALL

XY = Tuple[int, int]


def empty_wall_grid(size: int) -> Grid:
    return Grid.empty(size, WALL)


def carve_simple(grid: Grid, rng: RandomSource, target_dots: int, dot_chance: float = 0.7) -> int:
    """
    Sweep the odd lattice (1, 3, 5, ...) marking each cell open, then open
    the cell to its right when the next odd cell is still inside the border.
    Each opened cell independently becomes a DOT with `dot_chance` while the
    running count is below `target_dots`.

    The result is rows of short horizontal corridors that do not join
    vertically. Early levels keep that shape on purpose.
    Returns the number of dots written.
    """
    dots = 0
    inner = grid.size - 2

    def open_cell(x: int, y: int) -> None:
        nonlocal dots
        grid.set(x, y, PATH)
        if rng.random() < dot_chance and dots < target_dots:
            grid.set(x, y, DOT)
            dots += 1

    for y in range(1, inner + 1, 2):
        for x in range(1, inner + 1, 2):
            open_cell(x, y)
            if x + 2 <= inner:
                open_cell(x + 1, y)
    return dots


def carve_frontier(grid: Grid, rng: RandomSource, target_dots: int,
                   dot_chance: float = 0.8, dot_factor: float = 1.5) -> int:
    """
    Randomized Prim-style growth from (1,1).

    Each round pops a random frontier cell. If some cell two steps away is
    already open, the popped cell and the midpoint towards one such cell
    (picked at random) are opened, and the popped cell, if it is plain
    PATH, may become a DOT.
    Either way its adjacent walls join the frontier.

    A cell enters the frontier at most once, so the loop ends after at most
    one round per interior cell even if the dot cap is never reached.
    Returns the number of dots written.
    """
    cap = int(target_dots * dot_factor)
    dots = 0

    grid.set(1, 1, PATH)
    frontier: List[XY] = []
    queued: Set[XY] = {(1, 1)}

    def enqueue_walls(x: int, y: int) -> None:
        for n in grid.neighbors(x, y, 1):
            if n not in queued and grid.get(*n) == WALL:
                queued.add(n)
                frontier.append(n)

    enqueue_walls(1, 1)

    while frontier and dots < cap:
        # swap-pop keeps removal O(1)
        i = randbelow(rng, len(frontier))
        frontier[i], frontier[-1] = frontier[-1], frontier[i]
        x, y = frontier.pop()

        carved = [n for n in grid.neighbors(x, y, 2) if grid.get(*n) != WALL]
        if carved:
            nx, ny = carved[randbelow(rng, len(carved))]
            mx, my = (x + nx) // 2, (y + ny) // 2
            if grid.get(mx, my) == WALL:
                grid.set(mx, my, PATH)
            if grid.get(x, y) == WALL:
                grid.set(x, y, PATH)
            # Cells opened earlier as a midpoint still get their roll; DOTs are never recounted.
            if grid.get(x, y) == PATH and rng.random() < dot_chance and dots < cap:
                grid.set(x, y, DOT)
                dots += 1

        enqueue_walls(x, y)
    return dots


def carve_for_tier(grid: Grid, rng: RandomSource, tier: str, target_dots: int,
                   config: GameConfig = CONFIG) -> int:
    if tier == "simple":
        return carve_simple(grid, rng, target_dots, config.simple_dot_chance)
    if tier == "complex":
        return carve_frontier(grid, rng, target_dots,
                              config.complex_dot_chance, config.complex_dot_factor)
    raise ValueError(f"unknown carve tier {tier!r}")
