"""Randomized Prim: grows the maze outward from a random room.

Produces shorter, bushier corridors radiating from the start room. Per-room
membership lives in its own ``CellState`` list, independent of the direction
bitmasks.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from .directions import direction_between
from .rng import DeterministicRandom
from .rooms import RoomGraph


class CellState(Enum):
    OUT = 0
    FRONTIER = 1
    IN = 2


def _expand_frontier(graph: RoomGraph, states: List[CellState], frontier: List[Tuple[int, int]], x: int, y: int):
    states[graph.index(x, y)] = CellState.IN
    for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
        if graph.in_bounds(nx, ny) and states[graph.index(nx, ny)] is CellState.OUT:
            states[graph.index(nx, ny)] = CellState.FRONTIER
            frontier.append((nx, ny))


def _in_neighbors(graph: RoomGraph, states: List[CellState], x: int, y: int) -> List[Tuple[int, int]]:
    found = []
    for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
        if graph.in_bounds(nx, ny) and states[graph.index(nx, ny)] is CellState.IN:
            found.append((nx, ny))
    return found


def carve_prims(width: int, height: int, rng: DeterministicRandom) -> RoomGraph:
    graph = RoomGraph(width, height)
    states = [CellState.OUT] * len(graph)
    frontier: List[Tuple[int, int]] = []

    start_x = rng.next_in_range(0, width - 1)
    start_y = rng.next_in_range(0, height - 1)
    _expand_frontier(graph, states, frontier, start_x, start_y)

    while frontier:
        pick = rng.next_in_range(0, len(frontier) - 1)
        # swap-remove
        current = frontier[pick]
        frontier[pick] = frontier[-1]
        frontier.pop()

        cx, cy = current
        candidates = _in_neighbors(graph, states, cx, cy)
        if candidates:
            target = candidates[rng.next_in_range(0, len(candidates) - 1)]
            graph.carve(cx, cy, direction_between(current, target))
        _expand_frontier(graph, states, frontier, cx, cy)
    return graph


__all__ = ["CellState", "carve_prims"]
