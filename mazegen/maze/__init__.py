"""Public maze package interface: generation, expansion and pathfinding."""

from .cells import Cell, GridPoint, Vec3
from .config import Algorithm, GenerationConfig
from .directions import Direction
from .disjoint_set import DisjointSet
from .errors import MazeError
from .grid_data import MazeGridData
from .pathfinder import PathResult, Pathfinder
from .pipeline import GenerationResult, build_room_graph, generate_maze
from .rng import DeterministicRandom
from .rooms import RoomGraph

__all__ = [
    "Algorithm",
    "Cell",
    "DeterministicRandom",
    "Direction",
    "DisjointSet",
    "GenerationConfig",
    "GenerationResult",
    "GridPoint",
    "MazeError",
    "MazeGridData",
    "PathResult",
    "Pathfinder",
    "RoomGraph",
    "Vec3",
    "build_room_graph",
    "generate_maze",
]
