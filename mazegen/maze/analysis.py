"""Structural checks over room graphs and expanded grids.

Used by the test-suite and by the diagnostics commands to confirm a layout is
a perfect maze (spanning tree over every room) and that the expanded grid
agrees with it.
"""
from __future__ import annotations

from collections import deque
from typing import Any, Dict, List, Sequence, Tuple

from .cells import Cell
from .directions import ALL_DIRECTIONS, Direction, delta, opposite
from .rooms import RoomGraph


def carved_edge_count(graph: RoomGraph) -> int:
    return sum(1 for _ in graph.passages())


def asymmetric_passages(graph: RoomGraph) -> List[Tuple[int, int, Direction]]:
    """Passages whose neighbor lacks the opposite bit (or that point off the grid)."""
    bad = []
    for y in range(graph.height):
        for x in range(graph.width):
            for d in graph.open_directions(x, y):
                nxt = graph.neighbor(x, y, d)
                if nxt is None or not graph.has_passage(nxt[0], nxt[1], opposite(d)):
                    bad.append((x, y, d))
    return bad


def is_symmetric(graph: RoomGraph) -> bool:
    return not asymmetric_passages(graph)


def reachable_rooms(graph: RoomGraph, start: Tuple[int, int] = (0, 0)) -> set:
    if not len(graph):
        return set()
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for d in graph.open_directions(x, y):
            nxt = graph.neighbor(x, y, d)
            if nxt is not None and nxt not in seen:
                seen.add(nxt)
                q.append(nxt)
    return seen


def is_connected(graph: RoomGraph) -> bool:
    return len(reachable_rooms(graph)) == len(graph)


def is_spanning_tree(graph: RoomGraph) -> bool:
    return is_symmetric(graph) and is_connected(graph) and carved_edge_count(graph) == len(graph) - 1


def expansion_mismatches(graph: RoomGraph, cells: Sequence[Cell], width: int, height: int) -> List[Tuple[int, int]]:
    """Cells whose floor flag disagrees with what ``graph`` implies."""
    expected = [False] * (width * height)
    for ry in range(graph.height):
        for rx in range(graph.width):
            fx, fy = rx * 2, ry * 2
            if fx >= width or fy >= height:
                continue
            expected[fy * width + fx] = True
            for d in ALL_DIRECTIONS:
                if graph.has_passage(rx, ry, d):
                    dx, dy = delta(d)
                    if 0 <= fx + dx < width and 0 <= fy + dy < height:
                        expected[(fy + dy) * width + fx + dx] = True
    return [(c.grid_x, c.grid_y) for c in cells if c.is_floor != expected[c.grid_y * width + c.grid_x]]


def analyze(graph: RoomGraph, cells: Sequence[Cell], width: int, height: int) -> Dict[str, Any]:
    carved = carved_edge_count(graph)
    mismatches = expansion_mismatches(graph, cells, width, height)
    issues = {
        "asymmetric_passages": len(asymmetric_passages(graph)),
        "unreachable_rooms": len(graph) - len(reachable_rooms(graph)),
        "edge_count_delta": carved - (len(graph) - 1),
        "expansion_mismatches": len(mismatches),
        "cell_count_delta": len(cells) - width * height,
    }
    return {"rooms": len(graph), "carved_edges": carved, "issues": issues, "ok": all(v == 0 for v in issues.values())}


__all__ = [
    "carved_edge_count",
    "asymmetric_passages",
    "is_symmetric",
    "reachable_rooms",
    "is_connected",
    "is_spanning_tree",
    "expansion_mismatches",
    "analyze",
]
