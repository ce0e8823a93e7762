import random as _random
from dataclasses import dataclass
from typing import Protocol

A = 16807
M = 0x7FFFFFFF  # 2^31-1
# Offset mixed into per-level seeds so level 1 of seed 0 is still non-zero.
LEVEL_SEED_OFFSET = 0x0FCDD36

class RandomSource(Protocol):
    """Anything with a uniform ``random()`` in [0, 1), e.g. ``random.Random``."""

    def random(self) -> float: ...


def pm_next(state: int) -> int:
    return (state * A) % M


@dataclass
class PMRandom:
    state: int

    def __post_init__(self) -> None:
        # Park–Miller is stuck at 0; keep the state in 1..M-1.
        self.state = (self.state % M) or 1

    @classmethod
    def from_entropy(cls) -> "PMRandom":
        return cls(_random.SystemRandom().randrange(1, M))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        # States are 1..M-1, so this lands in (0, 1).
        return self.next32() / M


def randbelow(rng: RandomSource, n: int) -> int:
    """Uniform integer in 0..n-1 drawn from a single ``random()`` call."""
    if n <= 0:
        raise ValueError("n must be positive")
    return min(int(rng.random() * n), n - 1)


def seed_for_level(base_seed: int, level: int) -> int:
    """
    Per-level seed derived from a session seed.
    K = base_seed + level, seed = (A*K + offset) mod M, never 0.
    """
    k = base_seed + level
    return ((A * k + LEVEL_SEED_OFFSET) % M) or 1
