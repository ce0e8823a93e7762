from dataclasses import dataclass
from typing import Iterator, List, Tuple

XY = Tuple[int, int]

# Axis-aligned steps: Down, Up, Right, Left
DIRS = ((0, 1), (0, -1), (1, 0), (-1, 0))

@dataclass
class Grid:
    buf: List[int]
    stride: int

    @classmethod
    def empty(cls, size: int, fill: int) -> "Grid":
        if size < 1:
            raise ValueError("grid size must be positive")
        return cls(buf=[fill] * (size * size), stride=size)

    @property
    def size(self) -> int:
        return self.stride

    def idx(self, x: int, y: int) -> int:
        return y * self.stride + x

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        self.buf[self.idx(x, y)] = v

    def in_interior(self, x: int, y: int) -> bool:
        # Everything except the one-cell border ring.
        return 1 <= x <= self.stride - 2 and 1 <= y <= self.stride - 2

    def neighbors(self, x: int, y: int, dist: int = 1) -> Iterator[XY]:
        """Interior cells exactly `dist` steps away along each axis."""
        for dx, dy in DIRS:
            nx, ny = x + dx * dist, y + dy * dist
            if self.in_interior(nx, ny):
                yield (nx, ny)

    def count(self, kind: int) -> int:
        return sum(1 for v in self.buf if v == kind)

    def as_lists(self) -> List[List[int]]:
        s = self.stride
        return [self.buf[y * s:(y + 1) * s] for y in range(s)]

    def as_matrix(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self.as_lists())
