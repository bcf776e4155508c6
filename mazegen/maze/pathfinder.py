"""Breadth-first shortest paths over an expanded maze grid.

BFS on a 4-connected unweighted grid yields a minimum cell-count path.
Neighbors are always enumerated East, West, South, North, which fixes the
parent recorded for each cell and therefore which of several equally short
paths is returned.

Lifecycle: ``initialize`` (or ``load``) copies the floor flags it needs;
afterwards queries only read that snapshot, so one initialized instance can
serve concurrent readers as long as nobody re-initializes it meanwhile.
"""
from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..logging_utils import get_logger
from .cells import Cell, GridPoint, Vec3, cell_center
from .errors import MazeError

log = get_logger("pathfinder")

# East, West, South, North
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class PathResult:
    success: bool = False
    path: List[GridPoint] = field(default_factory=list)
    world_path: List[Vec3] = field(default_factory=list)
    length: int = 0
    error: Optional[MazeError] = None

    @classmethod
    def failure(cls, error: MazeError) -> "PathResult":
        return cls(success=False, error=error)


class Pathfinder:
    def __init__(self):
        self.width = 0
        self.height = 0
        self.cell_size = 200.0
        self.initialized = False
        self._floor: Tuple[bool, ...] = ()

    def initialize(self, cells: Sequence[Cell], width: int, height: int, cell_size: float) -> bool:
        """Snapshot ``cells``; returns False (and stays uninitialized) on a size mismatch
        or a non-positive ``cell_size``."""
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self._floor = tuple(bool(c.is_floor) for c in cells)
        self.initialized = width > 0 and height > 0 and cell_size > 0 and len(self._floor) == width * height
        if not self.initialized:
            log.error(
                event="pathfinder_size_mismatch",
                cells=len(self._floor),
                width=width,
                height=height,
                expected=width * height,
                cell_size=cell_size,
            )
            self._floor = ()
        else:
            log.debug(event="pathfinder_initialized", width=width, height=height, cells=len(self._floor))
        return self.initialized

    def load(self, grid_data) -> bool:
        """Initialize from a ``MazeGridData`` record, refusing inconsistent records."""
        if not grid_data.is_valid():
            log.error(
                event="pathfinder_invalid_grid_data",
                width=grid_data.width,
                height=grid_data.height,
                cells=len(grid_data.cells),
            )
            self.initialized = False
            self._floor = ()
            return False
        return self.initialize(grid_data.cells, grid_data.width, grid_data.height, grid_data.cell_size)

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------
    def index(self, p: Tuple[int, int]) -> int:
        return p[1] * self.width + p[0]

    def in_bounds(self, p: Tuple[int, int]) -> bool:
        return 0 <= p[0] < self.width and 0 <= p[1] < self.height

    def is_valid_cell(self, p: Tuple[int, int]) -> bool:
        if not self.in_bounds(p):
            return False
        i = self.index(p)
        return i < len(self._floor) and self._floor[i]

    def world_to_grid(self, pos: Sequence[float]) -> GridPoint:
        return GridPoint(math.floor(pos[0] / self.cell_size), math.floor(pos[1] / self.cell_size))

    def grid_to_world(self, p: Tuple[int, int]) -> Vec3:
        return cell_center(p[0], p[1], self.cell_size)

    def walkable_neighbors(self, p: Tuple[int, int]) -> List[GridPoint]:
        x, y = p
        return [GridPoint(x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS if self.is_valid_cell((x + dx, y + dy))]

    def find_nearest_walkable_cell(self, p: Tuple[int, int]) -> Optional[GridPoint]:
        """Closest floor cell by Chebyshev distance, or None.

        Rings are scanned dx-major then dy, both ascending; the first hit wins ties.
        """
        px, py = p
        max_radius = max(self.width, self.height)
        for radius in range(max_radius + 1):
            for dx in range(-radius, radius + 1):
                for dy in range(-radius, radius + 1):
                    if abs(dx) != radius and abs(dy) != radius:
                        continue
                    candidate = (px + dx, py + dy)
                    if self.is_valid_cell(candidate):
                        return GridPoint(*candidate)
        return None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_path(self, start: Tuple[int, int], end: Tuple[int, int]) -> PathResult:
        if not self.initialized:
            log.warn(event="path_not_initialized")
            return PathResult.failure(MazeError.UNINITIALIZED_PATHFINDER)
        start, end = GridPoint(*start), GridPoint(*end)
        if not self.is_valid_cell(start):
            log.warn(event="path_invalid_start", x=start.x, y=start.y)
            return PathResult.failure(MazeError.INVALID_CELL)
        if not self.is_valid_cell(end):
            log.warn(event="path_invalid_end", x=end.x, y=end.y)
            return PathResult.failure(MazeError.INVALID_CELL)
        if start == end:
            return PathResult(True, [start], [self.grid_to_world(start)], 1)

        parents: Dict[GridPoint, GridPoint] = {}
        visited = {start}
        q = deque([start])
        found = False
        while q:
            current = q.popleft()
            if current == end:
                found = True
                break
            for nb in self.walkable_neighbors(current):
                if nb not in visited:
                    visited.add(nb)
                    parents[nb] = current
                    q.append(nb)
        if not found:
            log.warn(event="path_not_found", sx=start.x, sy=start.y, ex=end.x, ey=end.y)
            return PathResult.failure(MazeError.NO_PATH_FOUND)

        path = [end]
        while path[-1] != start:
            path.append(parents[path[-1]])
        path.reverse()
        return PathResult(True, path, [self.grid_to_world(p) for p in path], len(path))

    def find_path_from_world(self, world_start: Sequence[float], grid_end: Tuple[int, int]) -> PathResult:
        if not self.initialized:
            log.warn(event="path_not_initialized")
            return PathResult.failure(MazeError.UNINITIALIZED_PATHFINDER)
        start = self.world_to_grid(world_start)
        if not self.is_valid_cell(start):
            nearest = self.find_nearest_walkable_cell(start)
            if nearest is None:
                log.warn(event="no_walkable_cell", x=start.x, y=start.y)
                return PathResult.failure(MazeError.NO_WALKABLE_CELL_FOUND)
            start = nearest
        return self.find_path(start, grid_end)


__all__ = ["NEIGHBOR_OFFSETS", "PathResult", "Pathfinder"]
