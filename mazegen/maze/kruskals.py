from __future__ import annotations

from typing import List, NamedTuple

from .directions import Direction, delta
from .disjoint_set import DisjointSet
from .rng import DeterministicRandom
from .rooms import RoomGraph


class Edge(NamedTuple):
    x: int
    y: int
    direction: Direction


def enumerate_edges(width: int, height: int) -> List[Edge]:
    """Every undirected room adjacency exactly once (each room's West and North edge)."""
    edges: List[Edge] = []
    for y in range(height):
        for x in range(width):
            if x > 0:
                edges.append(Edge(x, y, Direction.WEST))
            if y > 0:
                edges.append(Edge(x, y, Direction.NORTH))
    return edges


def carve_kruskals(width: int, height: int, rng: DeterministicRandom) -> RoomGraph:
    """Randomized Kruskal: join rooms along shuffled edges while they are in different sets."""
    graph = RoomGraph(width, height)
    sets = DisjointSet(len(graph))
    edges = enumerate_edges(width, height)
    rng.shuffle(edges)
    for edge in edges:
        dx, dy = delta(edge.direction)
        here = graph.index(edge.x, edge.y)
        there = graph.index(edge.x + dx, edge.y + dy)
        if sets.union(here, there):
            graph.carve(edge.x, edge.y, edge.direction)
    return graph


__all__ = ["Edge", "enumerate_edges", "carve_kruskals"]
