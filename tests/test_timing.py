import pytest

from pacmon.config import GameConfig
from pacmon.engine.timing import TimingModel, ghost_step_period

def test_power_pellet_ticks_default():
    # 6000 ms at 200 ms per tick
    assert TimingModel().power_pellet_ticks == 30

def test_ms_to_ticks_rounds_up():
    t = TimingModel(tick_ms=200)
    assert t.ms_to_ticks(1) == 1
    assert t.ms_to_ticks(201) == 2
    assert t.ms_to_ticks(0) == 1

def test_from_config():
    t = TimingModel.from_config(GameConfig(tick_ms=16, power_pellet_ms=1600))
    assert t.power_pellet_ticks == 100

def test_faster_ghosts_step_more_often():
    periods = [ghost_step_period(s) for s in (1.0, 1.4, 1.8, 2.2, 2.8)]
    assert periods == sorted(periods, reverse=True)
    assert periods[0] == 6
    assert all(p >= 1 for p in periods)

def test_ghost_speed_must_be_positive():
    with pytest.raises(ValueError):
        ghost_step_period(0)
