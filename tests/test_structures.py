import random

import pytest

from pojkit.structures import (
    ColorBoard,
    FenwickGrid,
    argus_schedule,
    count_false_statements,
    star_levels,
)


def test_food_chain_sample():
    statements = [
        (1, 101, 1),
        (2, 1, 2),
        (2, 2, 3),
        (2, 3, 3),
        (1, 1, 3),
        (2, 3, 1),
        (1, 5, 5),
    ]
    assert count_false_statements(100, statements) == 3


def test_food_chain_cycle_is_consistent():
    cycle = [(2, 1, 2), (2, 2, 3), (2, 3, 1)]
    assert count_false_statements(3, cycle) == 0
    assert count_false_statements(3, cycle + [(2, 1, 3), (1, 1, 2)]) == 2


def test_food_chain_self_eating_is_false():
    assert count_false_statements(5, [(2, 4, 4), (1, 4, 4)]) == 1


def test_food_chain_bad_kind():
    with pytest.raises(ValueError):
        count_false_statements(5, [(3, 1, 2)])


def test_fenwick_matches_brute_force():
    rng = random.Random(7)
    size = 6
    grid = FenwickGrid(size)
    cells = [[0] * size for _ in range(size)]
    for _ in range(40):
        x, y, value = rng.randrange(size), rng.randrange(size), rng.randint(-5, 9)
        grid.add(x, y, value)
        cells[x][y] += value
    for _ in range(40):
        left, right = sorted((rng.randrange(size), rng.randrange(size)))
        bottom, top = sorted((rng.randrange(size), rng.randrange(size)))
        expected = sum(
            cells[x][y] for x in range(left, right + 1) for y in range(bottom, top + 1)
        )
        assert grid.range_sum(left, bottom, right, top) == expected


def test_fenwick_out_of_range():
    grid = FenwickGrid(3)
    with pytest.raises(IndexError):
        grid.add(3, 0, 1)
    with pytest.raises(ValueError):
        grid.range_sum(2, 0, 1, 2)


def test_star_levels_sample():
    stars = [(1, 1), (5, 1), (7, 1), (3, 3), (5, 5)]
    assert star_levels(stars) == [1, 2, 1, 1, 0]


def test_star_levels_match_brute_force():
    rng = random.Random(3)
    stars = sorted(
        {(rng.randrange(20), rng.randrange(20)) for _ in range(30)},
        key=lambda s: (s[1], s[0]),
    )
    expected = [0] * len(stars)
    for i, (x, _) in enumerate(stars):
        expected[sum(1 for ex, _ in stars[:i] if ex <= x)] += 1
    levels = star_levels(stars)
    assert levels == expected
    assert sum(levels) == len(stars)


def test_color_board_sample():
    board = ColorBoard(2, 2)
    board.paint(1, 1, 2)
    assert board.count_colors(1, 2) == 2
    board.paint(2, 2, 2)
    assert board.count_colors(1, 2) == 1


def test_color_board_matches_brute_force():
    rng = random.Random(11)
    length, colors = 17, 5
    board = ColorBoard(length, colors)
    plain = [1] * (length + 1)
    for _ in range(60):
        left, right = sorted((rng.randint(1, length), rng.randint(1, length)))
        if rng.random() < 0.5:
            color = rng.randint(1, colors)
            board.paint(left, right, color)
            plain[left : right + 1] = [color] * (right - left + 1)
        else:
            assert board.count_colors(left, right) == len(set(plain[left : right + 1]))


def test_color_board_rejects_bad_colour():
    board = ColorBoard(4, 3)
    with pytest.raises(ValueError):
        board.paint(1, 2, 4)


def test_argus_sample():
    assert argus_schedule([(2004, 200), (2005, 300)], 5) == [2004, 2005, 2004, 2004, 2005]


def test_argus_tie_goes_to_lower_number():
    assert argus_schedule([(9, 10), (3, 10)], 4) == [3, 9, 3, 9]


def test_argus_rejects_empty():
    with pytest.raises(ValueError):
        argus_schedule([], 1)