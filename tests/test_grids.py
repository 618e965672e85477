import pytest

from pojkit.grids import (
    count_lakes,
    count_ships,
    curling_moves,
    knight_moves,
    maze_path,
    mountain_route,
    segments_between,
)

GAME_BOARD = ["XXXXX", "X...X", "XXX.X", " XXX "]


def _draw(rows, cols, rects, mark="#"):
    grid = [["."] * cols for _ in range(rows)]
    for top, left, bottom, right in rects:
        for r in range(top, bottom + 1):
            for c in range(left, right + 1):
                grid[r][c] = mark
    return ["".join(row) for row in grid]


def test_segments_sample_board():
    assert segments_between(GAME_BOARD, (2, 3), (5, 3)) == 4
    assert segments_between(GAME_BOARD, (1, 3), (4, 4)) == 3
    assert segments_between(GAME_BOARD, (2, 3), (3, 4)) is None


@pytest.mark.parametrize("a,b", [((2, 3), (5, 3)), ((1, 3), (4, 4)), ((1, 1), (5, 1))])
def test_segments_symmetric(a, b):
    assert segments_between(GAME_BOARD, a, b) == segments_between(GAME_BOARD, b, a)


def test_count_ships_counts_rectangles():
    rects = [(0, 0, 1, 1), (0, 4, 1, 4), (3, 0, 3, 2), (5, 5, 5, 5)]
    grid = _draw(6, 6, rects)
    assert count_ships(grid) == len(rects)


def test_count_ships_bad_placement():
    grid = [".....#", "##...#", "##...#", "..#..#", ".....#", "######"]
    assert count_ships(grid) is None


def test_count_ships_diagonal_touch_is_bad():
    assert count_ships(["#.", ".#"]) is None


def test_count_lakes_isolated_cells():
    cells = [(0, 0, 0, 0), (0, 4, 0, 4), (3, 2, 3, 2), (5, 0, 5, 0)]
    grid = _draw(6, 6, cells, mark="W")
    assert count_lakes(grid) == len(cells)


def test_count_lakes_diagonal_joins():
    joined = count_lakes(["W..", ".W.", "..W"])
    apart = count_lakes(["W.W", "...", "W.W"])
    assert apart == 4 * joined


def test_mountain_route_follows_trails():
    heights = [[0, 0, 0], [0, 0, 0], [0, 0, 0]]
    trails = [((1, 1), (1, 3)), ((1, 3), (3, 3))]
    route = mountain_route(heights, trails, (1, 1), (3, 3))
    assert route == [(1, 1), (1, 2), (1, 3), (2, 3), (3, 3)]
    assert mountain_route(heights, trails, (3, 3), (1, 1)) is None


def test_mountain_route_climb_limit():
    trails = [((1, 1), (1, 3))]
    steep = [[0, 11, 0]]
    gentle = [[0, 10, 0]]
    assert mountain_route(steep, trails, (1, 1), (1, 3)) is None
    assert mountain_route(gentle, trails, (1, 1), (1, 3)) == [(1, 1), (1, 2), (1, 3)]


def test_mountain_route_stay_put_and_bounds():
    heights = [[0, 0], [0, 0]]
    assert mountain_route(heights, [], (2, 2), (2, 2)) == [(2, 2)]
    with pytest.raises(ValueError):
        mountain_route(heights, [], (0, 1), (1, 1))


def test_knight_moves_basic():
    assert knight_moves(8, (3, 3), (3, 3)) == 0
    assert knight_moves(8, (0, 0), (1, 2)) == 1
    assert knight_moves(2, (0, 0), (1, 1)) is None


@pytest.mark.parametrize("a,b", [((0, 0), (7, 7)), ((0, 0), (7, 0)), ((2, 5), (6, 1))])
def test_knight_moves_symmetry_and_parity(a, b):
    there = knight_moves(8, a, b)
    assert there == knight_moves(8, b, a)
    assert there % 2 == (a[0] + a[1] + b[0] + b[1]) % 2


def test_knight_moves_outside_board():
    with pytest.raises(ValueError):
        knight_moves(8, (0, 0), (8, 0))


def test_curling_single_throw():
    assert curling_moves([[2, 0, 0, 3]]) == 1


def test_curling_breaks_block():
    assert curling_moves([[2, 0, 1, 3]]) == 2


def test_curling_unreachable_and_missing_stone():
    assert curling_moves([[2, 0, 0]]) is None
    with pytest.raises(ValueError):
        curling_moves([[0, 0, 3]])


def test_maze_path_sample():
    maze = [
        [0, 1, 0, 0, 0],
        [0, 1, 0, 1, 0],
        [0, 0, 0, 0, 0],
        [0, 1, 1, 1, 0],
        [0, 0, 0, 1, 0],
    ]
    assert maze_path(maze) == [
        (0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (2, 3), (2, 4), (3, 4), (4, 4),
    ]


def test_maze_path_open_is_shortest():
    rows, cols = 3, 4
    path = maze_path([[0] * cols for _ in range(rows)])
    assert path[0] == (0, 0)
    assert path[-1] == (rows - 1, cols - 1)
    assert len(path) == rows + cols - 1
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_maze_path_blocked():
    assert maze_path([[0, 1], [1, 0]]) is None