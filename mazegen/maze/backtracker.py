"""Recursive backtracker (depth-first carving) over the room graph.

Long winding corridors with many dead ends. Uses an explicit stack of
``(x, y, remaining directions)`` frames instead of recursion.
"""
from __future__ import annotations

from typing import Iterator, List, Tuple

from .directions import CARVE_ORDER, Direction
from .rng import DeterministicRandom
from .rooms import RoomGraph


def _shuffled_directions(rng: DeterministicRandom) -> Iterator[Direction]:
    dirs = list(CARVE_ORDER)
    rng.shuffle(dirs)
    return iter(dirs)


def carve_backtracker(width: int, height: int, rng: DeterministicRandom) -> RoomGraph:
    """Carve a perfect maze over a ``width x height`` room grid starting at (0, 0)."""
    graph = RoomGraph(width, height)
    visited = [False] * len(graph)
    visited[graph.index(0, 0)] = True
    stack: List[Tuple[int, int, Iterator[Direction]]] = [(0, 0, _shuffled_directions(rng))]
    while stack:
        x, y, pending = stack[-1]
        for direction in pending:
            nxt = graph.neighbor(x, y, direction)
            if nxt is None or visited[graph.index(*nxt)]:
                continue
            graph.carve(x, y, direction)
            visited[graph.index(*nxt)] = True
            # directions are shuffled when a room is entered
            stack.append((nxt[0], nxt[1], _shuffled_directions(rng)))
            break
        else:
            stack.pop()
    return graph


__all__ = ["carve_backtracker"]
