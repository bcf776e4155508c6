from collections import deque

from mazegen.maze import Algorithm, GenerationConfig, Pathfinder, generate_maze
from mazegen.maze.expansion import build_cells

ALGORITHMS = list(Algorithm)


def cells_from_rows(rows, cell_size=100.0):
    """Build a cell list from strings of '.' (floor) and '#' (wall)."""
    width = len(rows[0])
    height = len(rows)
    floor = [ch == "." for row in rows for ch in row]
    return build_cells(floor, width, height, cell_size), width, height


def pathfinder_for_rows(rows, cell_size=100.0):
    cells, width, height = cells_from_rows(rows, cell_size)
    pf = Pathfinder()
    assert pf.initialize(cells, width, height, cell_size)
    return pf


def generated_pathfinder(seed, width, height, algorithm=Algorithm.BACKTRACKER):
    result = generate_maze(GenerationConfig(seed=seed, width=width, height=height, algorithm=algorithm))
    pf = Pathfinder()
    assert pf.initialize(result.cells, width, height, result.config.cell_size)
    return result, pf


def floor_points(cells):
    return [(c.grid_x, c.grid_y) for c in cells if c.is_floor]


def bfs_distances(cells, width, height, start):
    """Brute-force step counts from start to every reachable floor cell."""
    floor = {(c.grid_x, c.grid_y) for c in cells if c.is_floor}
    if start not in floor:
        return {}
    dist = {start: 0}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (nx, ny) in floor and (nx, ny) not in dist:
                dist[(nx, ny)] = dist[(x, y)] + 1
                q.append((nx, ny))
    return dist


def chebyshev(a, b):
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def assert_path_valid(pf, result, start, end):
    assert result.success, f"expected a path {start}->{end}, got {result.error}"
    path = result.path
    assert path[0] == tuple(start)
    assert path[-1] == tuple(end)
    assert result.length == len(path) == len(result.world_path)
    for p in path:
        assert pf.is_valid_cell(p), f"path cell {p} is not floor"
    for (ax, ay), (bx, by) in zip(path, path[1:]):
        assert abs(ax - bx) + abs(ay - by) == 1, f"non-adjacent step {(ax, ay)} -> {(bx, by)}"
    for p, w in zip(path, result.world_path):
        assert w == pf.grid_to_world(p)
