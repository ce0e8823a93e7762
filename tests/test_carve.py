from collections import deque

import pytest

from pacmon.grid import Grid
from pacmon.mapgen.carve import carve_for_tier, carve_frontier, carve_simple, empty_wall_grid
from pacmon.mapgen.generator import generate_maze
from pacmon.rng import PMRandom
from pacmon.tiles import DOT, PATH, WALL

def border_cells(size):
    for i in range(size):
        yield (i, 0)
        yield (i, size - 1)
        yield (0, i)
        yield (size - 1, i)

def assert_border_walls(g):
    for x, y in border_cells(g.size):
        assert g.get(x, y) == WALL, f"border cell {(x, y)} was carved"

def test_simple_opens_odd_lattice_and_right_links():
    g = empty_wall_grid(9)
    carve_simple(g, PMRandom(1), target_dots=100)
    for y in range(1, 8):
        for x in range(1, 8):
            v = g.get(x, y)
            if y % 2 == 1:
                assert v != WALL, (x, y)   # odd rows are one corridor
            else:
                assert v == WALL, (x, y)   # even rows never carved
    assert_border_walls(g)

def test_simple_rows_are_disconnected():
    g = empty_wall_grid(11)
    carve_simple(g, PMRandom(8), target_dots=0)
    for y in range(2, 10, 2):
        assert all(g.get(x, y) == WALL for x in range(11))

def test_simple_respects_dot_target():
    for seed in range(1, 30):
        g = empty_wall_grid(9)
        n = carve_simple(g, PMRandom(seed), target_dots=15)
        assert n == g.count(DOT) <= 15

def test_simple_dot_chance_extremes():
    g = empty_wall_grid(9)
    assert carve_simple(g, PMRandom(4), target_dots=100, dot_chance=0.0) == 0
    assert g.count(PATH) == 28
    g = empty_wall_grid(9)
    assert carve_simple(g, PMRandom(4), target_dots=100, dot_chance=1.0) == 28

def test_frontier_keeps_border_and_seed():
    for seed in range(1, 20):
        g = empty_wall_grid(17)
        carve_frontier(g, PMRandom(seed), target_dots=35)
        assert_border_walls(g)
        assert g.get(1, 1) != WALL

def test_frontier_dot_cap():
    for seed in range(1, 20):
        g = empty_wall_grid(17)
        n = carve_frontier(g, PMRandom(seed), target_dots=35)
        assert n == g.count(DOT) <= int(35 * 1.5)

def test_frontier_terminates_without_dots():
    # Dot cap of zero still carves the seed and stops.
    g = empty_wall_grid(9)
    assert carve_frontier(g, PMRandom(2), target_dots=0) == 0
    assert g.get(1, 1) == PATH

def test_frontier_ends_when_frontier_empties():
    # Cap unreachable: the loop must still stop once every cell was visited.
    g = empty_wall_grid(9)
    carve_frontier(g, PMRandom(6), target_dots=10_000, dot_chance=0.0)
    assert g.count(DOT) == 0
    assert g.count(PATH) > 1
    assert_border_walls(g)

def test_frontier_is_reproducible_with_seed():
    a, b = empty_wall_grid(15), empty_wall_grid(15)
    carve_frontier(a, PMRandom(77), target_dots=30)
    carve_frontier(b, PMRandom(77), target_dots=30)
    assert a.buf == b.buf

def test_unknown_tier():
    with pytest.raises(ValueError):
        carve_for_tier(empty_wall_grid(9), PMRandom(1), "maze", 10)

def reachable_from(grid, start):
    # 4-connected flood over non-wall cells
    seen = {start}
    todo = deque([start])
    while todo:
        x, y = todo.popleft()
        for n in grid.neighbors(x, y, 1):
            if n not in seen and grid.get(*n) != WALL:
                seen.add(n)
                todo.append(n)
    return seen

def open_cells(grid):
    return {(x, y) for y in range(grid.size) for x in range(grid.size) if grid.get(x, y) != WALL}

def test_frontier_open_cells_all_connect_to_seed():
    for seed in range(1, 25):
        for size, target in ((13, 25), (17, 35), (21, 85)):
            g = empty_wall_grid(size)
            carve_frontier(g, PMRandom(seed), target_dots=target)
            assert reachable_from(g, (1, 1)) == open_cells(g), f"disconnected carve: seed {seed} size {size}"

def test_generated_complex_mazes_are_connected():
    for level in range(3, 11):
        m = generate_maze(level, rng=PMRandom(level * 13))
        g = Grid(buf=[c for row in m.grid for c in row], stride=m.size)
        assert reachable_from(g, (1, 1)) == open_cells(g), f"level {level}"

class PopRecordingGrid(Grid):
    """Notes each cell asked for its distance-2 neighbours, i.e. each pop."""

    def neighbors(self, x, y, dist=1):
        found = list(super().neighbors(x, y, dist))
        if dist == 2:
            self.pops.append(((x, y), self.get(x, y), any(self.get(*n) != WALL for n in found)))
        return iter(found)

def test_frontier_rolls_dot_for_cells_already_opened_as_midpoints():
    reopened = 0
    for seed in range(1, 11):
        g = PopRecordingGrid.empty(17, WALL)
        g.pops = []
        # chance 1.0 and an unreachable cap: every carving pop must end as a DOT
        carve_frontier(g, PMRandom(seed), target_dots=10_000, dot_chance=1.0)
        for pos, before, carves in g.pops:
            if not carves:
                continue
            if before == PATH:
                reopened += 1
            assert g.get(*pos) == DOT, f"seed {seed}: {pos} carved without a dot"
        assert g.count(DOT) == sum(1 for _, before, carves in g.pops if carves and before != DOT)
    assert reopened > 0
