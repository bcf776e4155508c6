import pytest

from mazegen.maze import Algorithm, MazeError, MazeGridData, Pathfinder
from tests.maze_test_utils import (
    ALGORITHMS,
    assert_path_valid,
    bfs_distances,
    cells_from_rows,
    floor_points,
    generated_pathfinder,
    pathfinder_for_rows,
)


def test_uninitialized_pathfinder_reports_error():
    pf = Pathfinder()
    result = pf.find_path((0, 0), (1, 0))
    assert not result.success
    assert result.error is MazeError.UNINITIALIZED_PATHFINDER
    assert result.path == [] and result.world_path == [] and result.length == 0
    assert pf.find_path_from_world((0.0, 0.0), (1, 0)).error is MazeError.UNINITIALIZED_PATHFINDER


def test_size_mismatch_leaves_pathfinder_uninitialized(small_maze):
    pf = Pathfinder()
    assert not pf.initialize(small_maze.cells[:-1], 5, 5, 200.0)
    assert not pf.initialized
    assert pf.find_path((0, 0), (0, 0)).error is MazeError.UNINITIALIZED_PATHFINDER
    assert not pf.initialize([], 0, 0, 200.0)


@pytest.mark.parametrize("cell_size", [0.0, -100.0])
def test_non_positive_cell_size_is_rejected(cell_size):
    cells, width, height = cells_from_rows(["...", "..."])
    pf = Pathfinder()
    assert not pf.initialize(cells, width, height, cell_size)
    assert not pf.initialized
    result = pf.find_path_from_world((10.0, 10.0), (1, 1))
    assert result.error is MazeError.UNINITIALIZED_PATHFINDER


def test_small_maze_corner_to_corner(small_maze, small_pathfinder):
    pf = small_pathfinder
    assert pf.is_valid_cell((0, 0))
    assert pf.walkable_neighbors((0, 0))
    result = pf.find_path((0, 0), (4, 4))
    assert_path_valid(pf, result, (0, 0), (4, 4))
    assert 9 <= result.length <= 25
    dist = bfs_distances(small_maze.cells, 5, 5, (0, 0))
    assert result.length == dist[(4, 4)] + 1


def test_same_start_and_end(small_pathfinder):
    result = small_pathfinder.find_path((2, 2), (2, 2))
    assert result.success
    assert result.path == [(2, 2)]
    assert result.length == 1
    assert result.world_path == [small_pathfinder.grid_to_world((2, 2))]


@pytest.mark.parametrize(
    "start,end",
    [
        ((1, 1), (0, 0)),
        ((0, 0), (3, 3)),
        ((-1, 0), (0, 0)),
        ((0, 0), (5, 0)),
        ((0, 0), (0, 99)),
    ],
)
def test_wall_or_out_of_bounds_endpoints(small_pathfinder, start, end):
    result = small_pathfinder.find_path(start, end)
    assert not result.success
    assert result.error is MazeError.INVALID_CELL


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("seed", [5, 99, 4242])
def test_paths_in_generated_mazes_are_valid(algorithm, seed):
    result, pf = generated_pathfinder(seed, 15, 13, algorithm)
    floors = floor_points(result.cells)
    start, end = floors[0], floors[-1]
    assert_path_valid(pf, pf.find_path(start, end), start, end)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("size", [(5, 5), (7, 7), (6, 4)])
def test_bfs_lengths_are_minimal_for_all_pairs(algorithm, size):
    width, height = size
    result, pf = generated_pathfinder(77, width, height, algorithm)
    floors = floor_points(result.cells)
    for start in floors:
        dist = bfs_distances(result.cells, width, height, start)
        for end in floors:
            path = pf.find_path(start, end)
            # perfect mazes are connected, so every floor pair has a route
            assert path.success
            assert path.length == dist[end] + 1


def test_open_grid_length():
    pf = pathfinder_for_rows(["...."] * 4)
    result = pf.find_path((0, 0), (3, 3))
    assert result.length == 7


def test_tie_break_follows_east_west_south_north():
    pf = pathfinder_for_rows(["...", "...", "..."])
    result = pf.find_path((0, 0), (2, 2))
    assert result.path == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]


def test_disconnected_regions_report_no_path():
    pf = pathfinder_for_rows(["..#.."])
    result = pf.find_path((0, 0), (4, 0))
    assert not result.success
    assert result.error is MazeError.NO_PATH_FOUND


def test_world_grid_transforms():
    pf = pathfinder_for_rows(["....."] * 5, cell_size=200.0)
    assert pf.world_to_grid((250.0, 399.9)) == (1, 1)
    assert pf.world_to_grid((0.0, 0.0)) == (0, 0)
    assert pf.world_to_grid((-10.0, 50.0)) == (-1, 0)
    assert pf.grid_to_world((2, 3)) == (500.0, 700.0, 0.0)
    for p in [(0, 0), (4, 1), (3, 3)]:
        assert pf.world_to_grid(pf.grid_to_world(p)) == p


def test_world_start_snaps_to_nearest_floor():
    pf = pathfinder_for_rows(["#..", "...", "..."], cell_size=100.0)
    result = pf.find_path_from_world((50.0, 50.0), (2, 2))
    assert result.success
    assert result.path[0] == (0, 1)
    assert result.path[-1] == (2, 2)


def test_world_start_outside_grid_snaps_inside():
    pf = pathfinder_for_rows(["...", "...", "..."], cell_size=100.0)
    result = pf.find_path_from_world((-50.0, 50.0), (2, 0))
    assert result.success
    assert result.path == [(0, 0), (1, 0), (2, 0)]


def test_world_start_on_floor_is_used_directly():
    pf = pathfinder_for_rows(["...", "...", "..."], cell_size=100.0)
    result = pf.find_path_from_world((150.0, 150.0), (1, 1))
    assert result.path == [(1, 1)]


def test_world_start_without_any_floor():
    pf = pathfinder_for_rows(["###", "###"], cell_size=100.0)
    result = pf.find_path_from_world((50.0, 50.0), (0, 0))
    assert result.error is MazeError.NO_WALKABLE_CELL_FOUND


def test_world_start_with_invalid_end():
    pf = pathfinder_for_rows(["...", ".#."], cell_size=100.0)
    result = pf.find_path_from_world((50.0, 50.0), (1, 1))
    assert result.error is MazeError.INVALID_CELL


def test_load_from_grid_data(small_maze):
    data = MazeGridData.from_generation(small_maze.config, small_maze.cells)
    pf = Pathfinder()
    assert pf.load(data)
    assert pf.cell_size == small_maze.config.cell_size
    assert pf.find_path((0, 0), (4, 4)).success


def test_load_rejects_inconsistent_grid_data():
    pf = Pathfinder()
    assert not pf.load(MazeGridData(width=3, height=3, cells=[]))
    assert not pf.initialized


def test_initialize_snapshots_cells():
    cells, width, height = cells_from_rows(["...", "...", "..."])
    pf = Pathfinder()
    assert pf.initialize(cells, width, height, 100.0)
    cells[1] = cells[1]._replace(is_floor=False)
    assert pf.is_valid_cell((1, 0))
    assert pf.find_path((0, 0), (2, 0)).length == 3


def test_reinitialize_replaces_grid():
    pf = pathfinder_for_rows(["...", "...", "..."])
    cells, width, height = cells_from_rows([".#.", ".#.", ".#."])
    assert pf.initialize(cells, width, height, 100.0)
    assert pf.find_path((0, 0), (2, 0)).error is MazeError.NO_PATH_FOUND


def test_backtracker_pathfinder_from_fixture_helper():
    result, pf = generated_pathfinder(42, 5, 5, Algorithm.BACKTRACKER)
    assert pf.initialized
    assert pf.width == 5 and pf.height == 5
