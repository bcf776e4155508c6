"""Serialisable snapshot of a generated grid.

Carries everything needed to rebuild the cell list and pathfinder without
regenerating: dimensions, scales, the seed/algorithm that produced it, and
the floor layout. The dict form stores one string per row (``.`` floor,
``#`` wall), so documents stay diff-friendly.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .cells import Cell
from .config import Algorithm, GenerationConfig
from .expansion import build_cells

FLOOR_CHAR = "."
WALL_CHAR = "#"
PATH_CHAR = "*"
START_CHAR = "S"
END_CHAR = "E"

FORMAT_VERSION = 1


def _field(data: Dict[str, Any], key: str, kind, default=None):
    raw = data.get(key, default)
    try:
        return kind(raw)
    except (TypeError, ValueError):
        raise ValueError(f"'{key}' must be {'an integer' if kind is int else 'a number'}, got {raw!r}") from None


@dataclass
class MazeGridData:
    width: int = 0
    height: int = 0
    cell_size: float = 200.0
    wall_height: float = 300.0
    seed: int = 0
    algorithm: Algorithm = Algorithm.BACKTRACKER
    cells: List[Cell] = field(default_factory=list)

    @classmethod
    def from_generation(cls, config: GenerationConfig, cells: List[Cell]) -> "MazeGridData":
        return cls(
            width=config.width,
            height=config.height,
            cell_size=config.cell_size,
            wall_height=config.wall_height,
            seed=config.seed if config.seed is not None else 0,
            algorithm=Algorithm(config.algorithm),
            cells=list(cells),
        )

    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0 and len(self.cells) == self.width * self.height

    def floor_count(self) -> int:
        return sum(1 for c in self.cells if c.is_floor)

    def wall_count(self) -> int:
        return len(self.cells) - self.floor_count()

    def rows(self) -> List[str]:
        return [
            "".join(
                FLOOR_CHAR if self.cells[y * self.width + x].is_floor else WALL_CHAR for x in range(self.width)
            )
            for y in range(self.height)
        ]

    def to_ascii(self, path: Optional[Iterable[Tuple[int, int]]] = None) -> str:
        grid = [list(r) for r in self.rows()]
        points = [tuple(p) for p in (path or [])]
        for x, y in points:
            grid[y][x] = PATH_CHAR
        if points:
            sx, sy = points[0]
            ex, ey = points[-1]
            grid[sy][sx] = START_CHAR
            grid[ey][ex] = END_CHAR
        return "\n".join("".join(r) for r in grid)

    # ------------------------------------------------------------------
    # Dict / JSON documents
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "format": FORMAT_VERSION,
            "width": self.width,
            "height": self.height,
            "cell_size": self.cell_size,
            "wall_height": self.wall_height,
            "seed": self.seed,
            "algorithm": Algorithm(self.algorithm).value,
            "floors": self.floor_count(),
            "grid": self.rows(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MazeGridData":
        if not isinstance(data, dict):
            raise ValueError("grid document must be a mapping")
        for key in ("width", "height", "cell_size", "grid"):
            if key not in data:
                raise ValueError(f"grid document missing '{key}'")
        width, height = _field(data, "width", int), _field(data, "height", int)
        cell_size = _field(data, "cell_size", float)
        if width < 1 or height < 1 or cell_size <= 0:
            raise ValueError(f"invalid grid dimensions {width}x{height} (cell_size={cell_size})")
        rows = data["grid"]
        if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
            raise ValueError("'grid' must be a list of row strings")
        if len(rows) != height or any(len(r) != width for r in rows):
            raise ValueError(f"grid rows do not match {width}x{height}")
        floor: List[bool] = []
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch not in (FLOOR_CHAR, WALL_CHAR):
                    raise ValueError(f"unexpected character {ch!r} at {(x, y)}")
                floor.append(ch == FLOOR_CHAR)
        return cls(
            width=width,
            height=height,
            cell_size=cell_size,
            wall_height=_field(data, "wall_height", float, 300.0),
            seed=_field(data, "seed", int, 0),
            algorithm=Algorithm.parse(str(data.get("algorithm", Algorithm.BACKTRACKER.value))),
            cells=build_cells(floor, width, height, cell_size),
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> "MazeGridData":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"grid document is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ValueError("grid document must be a JSON object")
        return cls.from_dict(data)


__all__ = ["MazeGridData", "FLOOR_CHAR", "WALL_CHAR", "PATH_CHAR", "START_CHAR", "END_CHAR"]
