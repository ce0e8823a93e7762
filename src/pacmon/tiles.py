# Canonical cell kinds for generated mazes

PATH = 0
WALL = 1
DOT = 2
POWER_PELLET = 3

# Single-character glyphs used by text dumps and the classic layout.
GLYPHS = {WALL: "X", PATH: " ", DOT: ".", POWER_PELLET: "o"}

def is_open(cell: int) -> bool:
    # Anything but a wall can be walked on.
    return cell != WALL

def is_collectible(cell: int) -> bool:
    return cell in (DOT, POWER_PELLET)

def cell_from_glyph(ch: str) -> int:
    for kind, glyph in GLYPHS.items():
        if glyph == ch:
            return kind
    raise ValueError(f"unknown maze glyph {ch!r}")
