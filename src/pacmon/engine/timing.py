# src/pacmon/engine/timing.py
# Tick arithmetic for the game loop. Everything is counted in loop ticks so
# the session stays independent of wall-clock time.

from __future__ import annotations

from dataclasses import dataclass

from ..config import CONFIG, GameConfig


@dataclass
class TimingModel:
    tick_ms: int = 200             # one loop step
    power_pellet_ms: int = 6000    # frightened window after a power pellet
    base_ghost_period: int = 6     # ticks per cell at ghost_speed 1.0

    @classmethod
    def from_config(cls, config: GameConfig = CONFIG) -> "TimingModel":
        return cls(tick_ms=config.tick_ms, power_pellet_ms=config.power_pellet_ms)

    def ms_to_ticks(self, ms: int) -> int:
        return max(1, -(-ms // self.tick_ms))  # ceil

    @property
    def power_pellet_ticks(self) -> int:
        return self.ms_to_ticks(self.power_pellet_ms)

    def ghost_step_period(self, ghost_speed: float) -> int:
        """Ticks per cell for a ghost moving at `ghost_speed` x base."""
        if ghost_speed <= 0:
            raise ValueError("ghost_speed must be positive")
        return max(1, round(self.base_ghost_period / ghost_speed))


def ghost_step_period(ghost_speed: float, config: GameConfig = CONFIG) -> int:
    return TimingModel.from_config(config).ghost_step_period(ghost_speed)
