import pytest

from pacmon.grid import Grid
from pacmon.tiles import PATH, WALL

def test_empty_is_filled_square():
    g = Grid.empty(5, WALL)
    assert g.size == 5
    assert g.count(WALL) == 25
    m = g.as_matrix()
    assert len(m) == 5 and all(len(r) == 5 for r in m)

def test_set_get_row_major():
    g = Grid.empty(4, WALL)
    g.set(2, 1, PATH)
    assert g.get(2, 1) == PATH
    assert g.as_lists()[1][2] == PATH
    assert g.get(1, 2) == WALL

def test_interior_excludes_border():
    g = Grid.empty(5, WALL)
    assert g.in_interior(1, 1) and g.in_interior(3, 3)
    assert not g.in_interior(0, 2)
    assert not g.in_interior(4, 2)
    assert not g.in_interior(2, -1)

def test_neighbors_stay_inside():
    g = Grid.empty(7, WALL)
    assert sorted(g.neighbors(1, 1, 1)) == [(1, 2), (2, 1)]
    assert sorted(g.neighbors(3, 3, 2)) == [(1, 3), (3, 1), (3, 5), (5, 3)]
    assert sorted(g.neighbors(1, 1, 2)) == [(1, 3), (3, 1)]

def test_bad_size():
    with pytest.raises(ValueError):
        Grid.empty(0, WALL)
