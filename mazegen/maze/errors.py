from enum import Enum


class MazeError(str, Enum):
    """Recoverable failure kinds reported through result values."""

    INVALID_CONFIG = "invalid_config"
    UNINITIALIZED_PATHFINDER = "uninitialized_pathfinder"
    INVALID_CELL = "invalid_cell"
    NO_PATH_FOUND = "no_path_found"
    NO_WALKABLE_CELL_FOUND = "no_walkable_cell_found"


__all__ = ["MazeError"]
