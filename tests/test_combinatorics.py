import itertools
from collections import Counter

import pytest

from dsakit.combinatorics import combination_sum, permutations


def test_combination_sum_results_add_up():
    results = combination_sum([1, 2, 3, 4], 7)
    assert results
    assert all(sum(combo) == 7 for combo in results)
    assert all(set(combo) <= {1, 2, 3, 4} for combo in results)


def test_combination_sum_order_and_uniqueness():
    results = combination_sum([1, 2, 3, 4], 7)
    assert results[0] == [1] * 7
    assert results[-1] == [3, 4]
    assert len({tuple(combo) for combo in results}) == len(results)
    assert all(combo == sorted(combo) for combo in results)


def test_combination_sum_matches_exhaustive_count():
    results = combination_sum([2, 3, 5], 8)
    exhaustive = {
        combo
        for size in range(1, 5)
        for combo in itertools.combinations_with_replacement([2, 3, 5], size)
        if sum(combo) == 8
    }
    assert {tuple(combo) for combo in results} == exhaustive


def test_combination_sum_unreachable():
    assert combination_sum([4, 6], 5) == []


def test_combination_sum_zero_target_is_empty_combination():
    assert combination_sum([1, 2], 0) == [[]]


@pytest.mark.parametrize("candidates", [[0, 1], [-1, 2]])
def test_combination_sum_rejects_non_positive(candidates):
    with pytest.raises(ValueError):
        combination_sum(candidates, 3)


@pytest.mark.parametrize("text", ["a", "ab", "abc", "abcd"])
def test_permutations_match_itertools(text):
    expected = ["".join(p) for p in itertools.permutations(text)]
    assert permutations(text) == expected


def test_permutations_keep_repeats():
    result = permutations("aab")
    assert len(result) == 6
    assert Counter(result)["aab"] == 2


def test_permutations_of_empty_string():
    assert permutations("") == [""]


def test_permutations_are_rearrangements():
    for word in permutations("abcde"):
        assert sorted(word) == list("abcde")