from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .directions import ALL_DIRECTIONS, Direction, delta, opposite


def room_grid_size(width: int, height: int) -> Tuple[int, int]:
    """Rooms needed for a ``width x height`` cell grid (rooms sit on even coordinates)."""
    return (width + 1) // 2, (height + 1) // 2


@dataclass
class RoomGraph:
    """Half-resolution connectivity graph: one direction bitmask per room, row-major."""

    width: int
    height: int
    directions: List[int] = field(default_factory=list)

    def __post_init__(self):
        if not self.directions:
            self.directions = [0] * (self.width * self.height)
        elif len(self.directions) != self.width * self.height:
            raise ValueError(
                f"directions has {len(self.directions)} entries, expected {self.width * self.height}"
            )

    def __len__(self) -> int:
        return self.width * self.height

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def mask(self, x: int, y: int) -> int:
        return self.directions[self.index(x, y)]

    def has_passage(self, x: int, y: int, direction: Direction) -> bool:
        return bool(self.directions[self.index(x, y)] & direction)

    def neighbor(self, x: int, y: int, direction: Direction) -> Optional[Tuple[int, int]]:
        dx, dy = delta(direction)
        nx, ny = x + dx, y + dy
        if self.in_bounds(nx, ny):
            return nx, ny
        return None

    def carve(self, x: int, y: int, direction: Direction) -> Tuple[int, int]:
        """Open the passage from ``(x, y)`` toward ``direction`` on both sides.

        Returns the neighbor coordinate. Raises ValueError if it is off the grid.
        """
        target = self.neighbor(x, y, direction)
        if target is None:
            raise ValueError(f"cannot carve {direction.name} from {(x, y)}: out of bounds")
        nx, ny = target
        self.directions[self.index(x, y)] |= int(direction)
        self.directions[self.index(nx, ny)] |= int(opposite(direction))
        return target

    def passages(self) -> Iterator[Tuple[int, int, Direction]]:
        """Each carved undirected edge once, as (x, y, EAST|SOUTH)."""
        for y in range(self.height):
            for x in range(self.width):
                m = self.directions[self.index(x, y)]
                if m & Direction.EAST:
                    yield x, y, Direction.EAST
                if m & Direction.SOUTH:
                    yield x, y, Direction.SOUTH

    def open_directions(self, x: int, y: int) -> List[Direction]:
        m = self.mask(x, y)
        return [d for d in ALL_DIRECTIONS if m & d]


__all__ = ["RoomGraph", "room_grid_size"]
