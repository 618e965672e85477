from pojkit.geometry import count_rectangles, mark_targets, max_walls_hit

HASH = [(1, 0, 1, 4), (3, 0, 3, 4), (0, 1, 4, 1), (0, 3, 4, 3)]


def test_count_rectangles_hash_shape():
    assert count_rectangles(HASH) == 1


def test_count_rectangles_orientation_invariant():
    flipped = [(bx, by, ax, ay) for ax, ay, bx, by in HASH]
    assert count_rectangles(flipped) == count_rectangles(HASH)
    assert count_rectangles(list(reversed(HASH))) == count_rectangles(HASH)


def test_count_rectangles_ignores_diagonals():
    assert count_rectangles(HASH + [(0, 0, 4, 4)]) == count_rectangles(HASH)


def test_count_rectangles_needs_strict_crossing():
    touching = [(1, 0, 1, 4), (3, 0, 3, 4), (1, 1, 3, 1), (1, 3, 3, 3)]
    assert count_rectangles(touching) == 0


def test_max_walls_hit_all_in_line():
    walls = [(1, -1, 1, 1), (2, -1, 2, 1), (3, -1, 3, 1)]
    assert max_walls_hit(walls, (0, 0)) == len(walls)


def test_max_walls_hit_ignores_walls_behind():
    walls = [(1, -1, 1, 1), (-1, -1, -1, 1)]
    assert max_walls_hit(walls, (0, 0)) == 1


def test_max_walls_hit_parallel_and_empty():
    assert max_walls_hit([(1, 0, 2, 0)], (0, 0)) == 0
    assert max_walls_hit([], (0, 0)) == 0


def test_mark_targets_centre():
    picture = ["aaa", "aaa", "aaa"]
    result = mark_targets((0, 0, 0), [(1000, 0, 0)], picture)
    assert result == ["aaa", "a*a", "aaa"]


def test_mark_targets_relative_to_observer():
    picture = ["aaa", "aaa", "aaa"]
    result = mark_targets((5, 1, 1), [(1005, -9, 11)], picture)
    assert result == ["*aa", "aaa", "aaa"]


def test_mark_targets_misses():
    picture = ["aaa", "a a", "aaa"]
    assert mark_targets((0, 0, 0), [(-1000, 0, 0)], picture) is None
    assert mark_targets((0, 0, 0), [(1000, 0, 0)], picture) is None
    assert mark_targets((0, 0, 0), [(1000, 500, 0)], picture) is None