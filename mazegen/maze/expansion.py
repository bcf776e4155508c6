"""Room graph to full-resolution floor/wall grid.

Room ``(rx, ry)`` lands on cell ``(2*rx, 2*ry)``. Odd coordinates are
connectors, opened only for passages recorded in the room's bitmask.
"""
from __future__ import annotations

from typing import List

from .cells import Cell, cell_center
from .directions import ALL_DIRECTIONS, delta
from .rooms import RoomGraph


def expand_floor_mask(rooms: RoomGraph, width: int, height: int) -> List[bool]:
    """Row-major floor flags for a ``width x height`` grid; everything starts as wall."""
    floor = [False] * (width * height)
    for ry in range(rooms.height):
        for rx in range(rooms.width):
            fx, fy = rx * 2, ry * 2
            if fx >= width or fy >= height:
                continue
            floor[fy * width + fx] = True
            mask = rooms.mask(rx, ry)
            for direction in ALL_DIRECTIONS:
                if not mask & direction:
                    continue
                dx, dy = delta(direction)
                cx, cy = fx + dx, fy + dy
                if 0 <= cx < width and 0 <= cy < height:
                    floor[cy * width + cx] = True
    return floor


def build_cells(floor: List[bool], width: int, height: int, cell_size: float) -> List[Cell]:
    cells: List[Cell] = []
    for y in range(height):
        for x in range(width):
            wx, wy, wz = cell_center(x, y, cell_size)
            cells.append(Cell(x, y, wx, wy, wz, floor[y * width + x]))
    return cells


def expand_rooms(rooms: RoomGraph, width: int, height: int, cell_size: float) -> List[Cell]:
    return build_cells(expand_floor_mask(rooms, width, height), width, height, cell_size)


__all__ = ["expand_floor_mask", "build_cells", "expand_rooms"]
