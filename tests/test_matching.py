import pytest

from pojkit.matching import (
    count_occurrences,
    longest_common_substring,
    pattern_positions,
    predictive_text,
    prefix_function,
    string_power,
)


def test_predictive_text_follows_word():
    assert predictive_text([("hello", 5), ("help", 3)], "4351") == ["h", "he", "hel"]


def test_predictive_text_prefers_higher_frequency():
    assert predictive_text([("ab", 1), ("ba", 5)], "221") == ["b", "ba"]


def test_predictive_text_sums_frequencies_of_prefix():
    words = [("bat", 2), ("bar", 2), ("car", 3)]
    assert predictive_text(words, "2")[0] == "b"


def test_predictive_text_manual_stays_manual():
    assert predictive_text([("ab", 1)], "22221") == ["a", "ab", None, None]


def test_predictive_text_end_key_optional():
    words = [("hello", 5)]
    assert predictive_text(words, "435") == predictive_text(words, "4351")


def test_predictive_text_rejects_unknown_key():
    with pytest.raises(ValueError):
        predictive_text([("ab", 1)], "01")


def test_predictive_text_rejects_bad_word():
    with pytest.raises(ValueError):
        predictive_text([("Hello", 1)], "41")


def test_prefix_function_repeated_letter():
    assert prefix_function("a" * 6) == list(range(6))


def test_prefix_function_empty():
    assert prefix_function("") == []


@pytest.mark.parametrize("pattern", ["aabaaab", "abcabcabd", "abababa", "xyz"])
def test_prefix_function_values_are_borders(pattern):
    borders = prefix_function(pattern)
    assert len(borders) == len(pattern)
    for i, border in enumerate(borders):
        assert border <= i
        assert pattern[:border] == pattern[i + 1 - border : i + 1]


@pytest.mark.parametrize("unit, times", [("ab", 3), ("a", 4), ("abcd", 1), ("xyx", 5)])
def test_string_power_of_repeated_unit(unit, times):
    assert string_power(unit * times) == times


def test_string_power_when_period_does_not_divide():
    assert string_power("abcab") == 1


def test_string_power_rejects_empty():
    with pytest.raises(ValueError):
        string_power("")


@pytest.mark.parametrize("count", [0, 1, 4])
def test_count_occurrences_separated(count):
    assert count_occurrences("ab", "ab#" * count) == count


def test_count_occurrences_overlapping():
    assert count_occurrences("a", "a" * 7) == 7
    assert count_occurrences("aa", "a" * 7) == 6


def test_count_occurrences_absent():
    assert count_occurrences("VERDI", "AVERDXIVYERDIAN") == 0


def test_count_occurrences_rejects_empty_pattern():
    with pytest.raises(ValueError):
        count_occurrences("", "abc")


def test_longest_common_substring_sample():
    assert longest_common_substring(["aabbaabb", "abbababb", "bbbbbabb"]) == "abb"


def test_longest_common_substring_none_shared():
    assert longest_common_substring(["xyz", "abc"]) is None


def test_longest_common_substring_single_string():
    assert longest_common_substring(["abc"]) == "abc"


def test_longest_common_substring_prefers_alphabetical():
    assert longest_common_substring(["ab", "ba"]) == "a"


def test_longest_common_substring_shared_core():
    assert longest_common_substring(["xbcay", "ybcaz"]) == "bca"


def test_longest_common_substring_rejects_empty_list():
    with pytest.raises(ValueError):
        longest_common_substring([])


def test_pattern_positions_sample():
    assert pattern_positions([5, 6, 2, 10, 10, 7, 3, 2, 9], [1, 4, 4, 3, 2, 1]) == [3]


def test_pattern_positions_self_match():
    values = [4, 1, 3, 3, 2]
    assert pattern_positions(values, values) == [1]


def test_pattern_positions_scaled_copy():
    pattern = [1, 3, 2, 2]
    sequence = [7] + [2 * v + 1 for v in pattern]
    assert 2 in pattern_positions(sequence, pattern)


def test_pattern_positions_windows_share_order():
    sequence = [3, 1, 2, 5, 4, 6, 1, 2, 2, 3, 8, 7]
    pattern = [2, 1, 3]
    found = pattern_positions(sequence, pattern)
    assert found
    for start in found:
        window = sequence[start - 1 : start - 1 + len(pattern)]
        for i in range(len(pattern)):
            for j in range(len(pattern)):
                assert (window[i] < window[j]) == (pattern[i] < pattern[j])
                assert (window[i] == window[j]) == (pattern[i] == pattern[j])


def test_pattern_positions_rejects_empty_pattern():
    with pytest.raises(ValueError):
        pattern_positions([1, 2], [])