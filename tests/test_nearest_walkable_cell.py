import pytest

from tests.maze_test_utils import ALGORITHMS, chebyshev, floor_points, generated_pathfinder, pathfinder_for_rows


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_nearest_matches_brute_force(algorithm):
    result, pf = generated_pathfinder(321, 9, 7, algorithm)
    floors = floor_points(result.cells)
    limit = max(pf.width, pf.height)
    for x in range(-2, pf.width + 2):
        for y in range(-2, pf.height + 2):
            best = min(chebyshev((x, y), f) for f in floors)
            found = pf.find_nearest_walkable_cell((x, y))
            if best > limit:
                assert found is None
                continue
            assert found is not None
            assert pf.is_valid_cell(found)
            assert chebyshev((x, y), found) == best


def test_floor_cell_is_its_own_nearest(small_maze, small_pathfinder):
    for p in floor_points(small_maze.cells):
        assert small_pathfinder.find_nearest_walkable_cell(p) == p


def test_ties_resolved_by_scan_order():
    pf = pathfinder_for_rows(["#.#", ".##", "###"])
    # (0, 1) and (1, 0) are both one ring away; the dx = -1 column is scanned first
    assert pf.find_nearest_walkable_cell((1, 1)) == (0, 1)


def test_ring_search_prefers_smaller_radius():
    pf = pathfinder_for_rows(["....#", "#####", "#####", "#####", "####."])
    assert pf.find_nearest_walkable_cell((4, 3)) == (4, 4)
    assert pf.find_nearest_walkable_cell((1, 2)) == (0, 0)


def test_no_floor_returns_none():
    pf = pathfinder_for_rows(["###", "###", "###"])
    assert pf.find_nearest_walkable_cell((1, 1)) is None
