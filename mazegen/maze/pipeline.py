"""Generation entry points.

``generate_maze`` is a pure function of the config: each call builds its own
random source and room graph and hands back a fresh cell list. Nothing is
cached between calls.
"""
from __future__ import annotations

import time
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from ..logging_utils import get_logger
from .backtracker import carve_backtracker
from .cells import Cell
from .config import Algorithm, GenerationConfig, metrics_enabled
from .errors import MazeError
from .expansion import expand_rooms
from .kruskals import carve_kruskals
from .metrics import init_metrics
from .prims import carve_prims
from .rng import DeterministicRandom
from .rooms import RoomGraph, room_grid_size

log = get_logger("maze")

CARVERS: Dict[Algorithm, Callable[[int, int, DeterministicRandom], RoomGraph]] = {
    Algorithm.BACKTRACKER: carve_backtracker,
    Algorithm.PRIMS: carve_prims,
    Algorithm.KRUSKALS: carve_kruskals,
}


class GenerationResult(NamedTuple):
    config: GenerationConfig
    cells: List[Cell]
    rooms: Optional[RoomGraph]
    metrics: Dict[str, Any]
    error: Optional[MazeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_room_graph(width: int, height: int, algorithm: Algorithm, rng: DeterministicRandom) -> RoomGraph:
    """Room graph for a ``width x height`` cell grid using the selected algorithm."""
    rw, rh = room_grid_size(width, height)
    carver = CARVERS.get(Algorithm(algorithm), carve_backtracker)
    graph = carver(rw, rh, rng)
    log.debug(
        event="room_graph_built",
        algorithm=Algorithm(algorithm).value,
        rooms_x=rw,
        rooms_y=rh,
        carved_edges=sum(1 for _ in graph.passages()),
    )
    return graph


def generate_maze(config: GenerationConfig, *, collect_metrics: Optional[bool] = None) -> GenerationResult:
    """Generate the cell grid for ``config``.

    Returns a ``GenerationResult`` with ``error=MazeError.INVALID_CONFIG`` and
    no cells when the dimensions or scales are not positive. A ``None`` seed
    is resolved first; the resolved config is returned alongside the cells.
    """
    if collect_metrics is None:
        collect_metrics = metrics_enabled()
    err = config.validate()
    if err is not None:
        log.warn(
            event="invalid_config",
            width=config.width,
            height=config.height,
            cell_size=config.cell_size,
            wall_height=config.wall_height,
        )
        return GenerationResult(config, [], None, {}, err)
    config = config.resolved()

    phase_times: Dict[str, int] = {}
    start = time.perf_counter()

    def _phase(label, fn, *a, **k):
        ps = time.perf_counter()
        r = fn(*a, **k)
        phase_times[label] = int((time.perf_counter() - ps) * 1000)
        return r

    rng = DeterministicRandom(config.seed)
    rooms = _phase('room_graph', build_room_graph, config.width, config.height, config.algorithm, rng)
    cells = _phase('expand', expand_rooms, rooms, config.width, config.height, config.cell_size)

    floors = sum(1 for c in cells if c.is_floor)
    walls = len(cells) - floors
    carved = sum(1 for _ in rooms.passages())
    runtime_ms = int((time.perf_counter() - start) * 1000)

    metrics: Dict[str, Any] = {}
    if collect_metrics:
        metrics = init_metrics()
        metrics.update(
            seed=config.seed,
            algorithm=Algorithm(config.algorithm).value,
            rooms=len(rooms),
            carved_edges=carved,
            tiles_floor=floors,
            tiles_wall=walls,
            runtime_ms=runtime_ms,
            phase_ms=phase_times,
        )
    log.info(
        event="maze_generated",
        seed=config.seed,
        algorithm=Algorithm(config.algorithm).value,
        width=config.width,
        height=config.height,
        floors=floors,
        walls=walls,
        carved_edges=carved,
        runtime_ms=runtime_ms,
    )
    return GenerationResult(config, cells, rooms, metrics)


__all__ = ["CARVERS", "GenerationResult", "build_room_graph", "generate_maze"]
