from typing import NamedTuple


class GridPoint(NamedTuple):
    x: int
    y: int


class Vec3(NamedTuple):
    x: float
    y: float
    z: float = 0.0


class Cell(NamedTuple):
    """One position of the full-resolution grid; index ``grid_y * width + grid_x``."""

    grid_x: int
    grid_y: int
    world_x: float
    world_y: float
    world_z: float
    is_floor: bool

    @property
    def grid_position(self) -> GridPoint:
        return GridPoint(self.grid_x, self.grid_y)

    @property
    def world_position(self) -> Vec3:
        return Vec3(self.world_x, self.world_y, self.world_z)


def cell_center(x: int, y: int, cell_size: float) -> Vec3:
    half = cell_size * 0.5
    return Vec3(x * cell_size + half, y * cell_size + half, 0.0)


__all__ = ["Cell", "GridPoint", "Vec3", "cell_center"]
