from dataclasses import dataclass

@dataclass(frozen=True)
class GameConfig:
    # Levels at or below this use the simple sweep; above it, frontier growth.
    simple_tier_max_level: int = 2
    simple_dot_chance: float = 0.7
    complex_dot_chance: float = 0.8
    # Frontier carving stops once realized dots reach target * factor.
    complex_dot_factor: float = 1.5
    placement_attempts: int = 100

    # Session rules
    start_lives: int = 3
    max_lives: int = 5
    score_dot: int = 10
    score_power_pellet: int = 50
    score_ghost: int = 200
    power_pellet_ms: int = 6000
    tick_ms: int = 200

    # Rendering
    cell_px: int = 18

# Global defaults (can be swapped by launcher)
CONFIG = GameConfig()
