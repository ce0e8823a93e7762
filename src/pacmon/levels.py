# Difficulty table: level number -> maze and spawn parameters.

from dataclasses import dataclass
from typing import Dict

@dataclass(frozen=True)
class LevelSettings:
    maze_size: int       # grid is maze_size x maze_size
    ghost_count: int
    ghost_speed: float   # multiplier for the game loop; generation ignores it
    power_pellets: int
    dots: int            # soft target, see mapgen

LEVEL_SETTINGS: Dict[int, LevelSettings] = {
    1:  LevelSettings(maze_size=9,  ghost_count=1, ghost_speed=1.0, power_pellets=1, dots=15),
    2:  LevelSettings(maze_size=11, ghost_count=1, ghost_speed=1.2, power_pellets=1, dots=20),
    3:  LevelSettings(maze_size=13, ghost_count=2, ghost_speed=1.4, power_pellets=1, dots=25),
    4:  LevelSettings(maze_size=15, ghost_count=2, ghost_speed=1.6, power_pellets=2, dots=30),
    5:  LevelSettings(maze_size=17, ghost_count=3, ghost_speed=1.8, power_pellets=3, dots=35),
    6:  LevelSettings(maze_size=17, ghost_count=3, ghost_speed=2.0, power_pellets=3, dots=45),
    7:  LevelSettings(maze_size=19, ghost_count=3, ghost_speed=2.2, power_pellets=3, dots=55),
    8:  LevelSettings(maze_size=19, ghost_count=4, ghost_speed=2.4, power_pellets=4, dots=65),
    9:  LevelSettings(maze_size=21, ghost_count=4, ghost_speed=2.6, power_pellets=4, dots=75),
    10: LevelSettings(maze_size=21, ghost_count=4, ghost_speed=2.8, power_pellets=4, dots=85),
}

MIN_LEVEL = min(LEVEL_SETTINGS)
MAX_LEVEL = max(LEVEL_SETTINGS)

def clamp_level(level: int) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        raise TypeError(f"level must be an int, got {type(level).__name__}")
    return max(MIN_LEVEL, min(level, MAX_LEVEL))

def get_level_settings(level: int) -> LevelSettings:
    """
    Settings for `level`. Levels past the table reuse the last entry and
    levels below 1 reuse the first, so every int resolves to a record.
    """
    return LEVEL_SETTINGS[clamp_level(level)]
