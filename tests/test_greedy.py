import pytest

from pojkit.greedy import (
    count_parcels,
    count_turns,
    cover_interval,
    guaranteed_wins,
    lost_cows,
    max_alternating_sum,
)


def test_count_parcels_samples():
    assert count_parcels((0, 0, 4, 0, 0, 1)) == 2
    assert count_parcels((7, 5, 1, 0, 0, 0)) == 1


def test_count_parcels_simple_shapes():
    assert count_parcels((0, 0, 0, 0, 0, 0)) == 0
    assert count_parcels((0, 0, 0, 0, 0, 3)) == 3
    assert count_parcels((0, 0, 0, 0, 4, 0)) == 4
    assert count_parcels((36, 0, 0, 0, 0, 0)) == 1
    assert count_parcels((37, 0, 0, 0, 0, 0)) == 2


@pytest.mark.parametrize("base", [(3, 2, 1, 0, 1, 0), (10, 7, 5, 1, 0, 2), (0, 9, 3, 2, 0, 0)])
def test_count_parcels_monotone(base):
    for slot in range(6):
        bigger = list(base)
        bigger[slot] += 1
        assert count_parcels(bigger) >= count_parcels(base)


def test_count_parcels_bad_input():
    with pytest.raises(ValueError):
        count_parcels((1, 2, 3))
    with pytest.raises(ValueError):
        count_parcels((0, 0, -1, 0, 0, 0))


def test_lost_cows_sample():
    assert lost_cows([1, 2, 1, 0]) == [2, 4, 5, 3, 1]


def test_lost_cows_consistent():
    counts = [0, 2, 1, 3, 0, 5]
    brands = lost_cows(counts)
    assert sorted(brands) == list(range(1, len(counts) + 2))
    for position, expected in enumerate(counts, start=1):
        assert sum(b < brands[position] for b in brands[:position]) == expected


def test_lost_cows_invalid():
    with pytest.raises(ValueError):
        lost_cows([2])


def test_guaranteed_wins_sample():
    assert guaranteed_wins(2, [1, 7, 2, 10, 9]) == 2


def test_guaranteed_wins_extremes():
    assert guaranteed_wins(4, [10, 11, 12]) == 3
    assert guaranteed_wins(4, [1, 2, 3]) == 0


def test_guaranteed_wins_invalid():
    with pytest.raises(ValueError):
        guaranteed_wins(2, [1, 1])
    with pytest.raises(ValueError):
        guaranteed_wins(2, [5, 1])


def test_cover_interval_sample():
    assert cover_interval([(1, 7), (3, 6), (6, 10)], 10) == 2


def test_cover_interval_cases():
    assert cover_interval([(1, 10)], 10) == 1
    assert cover_interval([], 10) is None
    assert cover_interval([(2, 10)], 10) is None
    assert cover_interval([(1, 4), (6, 10)], 10) is None


def test_count_turns():
    assert count_turns([]) == 0
    assert count_turns([1, 2, 3, 4]) == 1
    values = [5, 1, 4, 2, 3]
    assert count_turns(values) == len(values)


def test_max_alternating_sum():
    assert max_alternating_sum([7, 2, 1, 8, 4, 3, 5, 6]) == 17
    assert max_alternating_sum([9]) == 9
    assert max_alternating_sum([]) == 0
    assert max_alternating_sum([1, 2, 3]) == 3