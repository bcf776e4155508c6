"""Direction bit flags for the half-resolution room graph.

A room stores its open passages as a 4-bit mask. Y grows downward, so North
is ``dy = -1`` and South is ``dy = +1``.
"""
from enum import IntFlag
from typing import Tuple


class Direction(IntFlag):
    NONE = 0
    EAST = 1
    NORTH = 2
    SOUTH = 4
    WEST = 8


# Enumeration order shuffled by the backtracker before carving from a room
CARVE_ORDER = (Direction.EAST, Direction.WEST, Direction.NORTH, Direction.SOUTH)
# All single-bit directions in mask order (used by the expander and analysis)
ALL_DIRECTIONS = (Direction.EAST, Direction.NORTH, Direction.SOUTH, Direction.WEST)

_OPPOSITE = {
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
}

_DELTA = {
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
}


def opposite(direction: Direction) -> Direction:
    return _OPPOSITE.get(direction, Direction.NONE)


def delta(direction: Direction) -> Tuple[int, int]:
    return _DELTA.get(direction, (0, 0))


def direction_between(src: Tuple[int, int], dst: Tuple[int, int]) -> Direction:
    """Direction of an orthogonally adjacent ``dst`` as seen from ``src``."""
    (sx, sy), (dx, dy) = src, dst
    if dx > sx:
        return Direction.EAST
    if dx < sx:
        return Direction.WEST
    if dy > sy:
        return Direction.SOUTH
    if dy < sy:
        return Direction.NORTH
    return Direction.NONE


__all__ = ["Direction", "CARVE_ORDER", "ALL_DIRECTIONS", "opposite", "delta", "direction_between"]
