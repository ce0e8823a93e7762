# src/pacmon/mapgen/classic.py
# Fixed arcade-style layout. X = wall, '.' = dot, ' ' = open floor
# (ghost house, side tunnel).

from ..tiles import DOT, cell_from_glyph
from .generator import Maze

CLASSIC_MAZE_ROWS = (
    "XXXXXXXXXXXXXXXXXXXXXXXXXXXX",
    "X............XX............X",
    "X.XXXX.XXXXX.XX.XXXXX.XXXX.X",
    "X..........................X",
    "X.XXXX.XX.XXXXXXXX.XX.XXXX.X",
    "X......XX....XX....XX......X",
    "XXXXXX.XXXXX XX XXXXX.XXXXXX",
    "XXXXXX.XX          XX.XXXXXX",
    "XXXXXX.XX XXXXXXXX XX.XXXXXX",
    "      .   X      X   .      ",
    "XXXXXX.XX X      X XX.XXXXXX",
    "XXXXXX.XX XXXXXXXX XX.XXXXXX",
    "XXXXXX.XX          XX.XXXXXX",
    "XXXXXX.XX XXXXXXXX XX.XXXXXX",
    "X............XX............X",
    "X.XXXX.XXXXX.XX.XXXXX.XXXX.X",
    "X...XX................XX...X",
    "XXX.XX.XX.XXXXXXXX.XX.XX.XXX",
    "X......XX....XX....XX......X",
    "X.XXXXXXXXXX.XX.XXXXXXXXXX.X",
    "X..........................X",
    "XXXXXXXXXXXXXXXXXXXXXXXXXXXX",
)

# Player sits bottom-centre; ghosts start inside the house.
CLASSIC_PLAYER_START = (13, 20)
CLASSIC_GHOST_STARTS = ((13, 9), (12, 9), (14, 9), (15, 9))


def classic_maze() -> Maze:
    grid = tuple(tuple(cell_from_glyph(ch) for ch in row) for row in CLASSIC_MAZE_ROWS)
    return Maze(
        grid=grid,
        size=len(CLASSIC_MAZE_ROWS[0]),
        player_start=CLASSIC_PLAYER_START,
        ghost_starts=CLASSIC_GHOST_STARTS,
        dots=sum(row.count(DOT) for row in grid),
        level=0,
        tier="classic",
    )
