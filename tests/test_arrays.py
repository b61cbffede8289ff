import math
import random

import pytest

from dsakit.arrays import (
    common_elements,
    count_inversions,
    count_pairs_with_sum,
    factorial_digits,
    find_duplicate,
    has_triplet_sum,
    longest_consecutive_run,
    majority_element,
    negatives_first,
    pair_count_by_frequency,
    repeated_elements,
    reverse_in_place,
    reverse_word,
    sort_by_parity_ii,
    to_24_hour,
)


@pytest.mark.parametrize("text", ["", "a", "hello", "abcdef"])
def test_reverse_word_round_trip(text):
    assert reverse_word(reverse_word(text)) == text


def test_reverse_word_palindrome_unchanged():
    assert reverse_word("abba") == "abba"


def test_reverse_in_place_matches_reverse_word():
    chars = list("geeks")
    assert reverse_in_place(chars) is None
    assert "".join(chars) == reverse_word("geeks")


def test_count_inversions_sorted_is_zero():
    assert count_inversions([1, 2, 3, 4, 5]) == 0


def test_count_inversions_reversed_is_all_pairs():
    values = list(range(8, 0, -1))
    assert count_inversions(values) == len(values) * (len(values) - 1) // 2


def test_count_inversions_equal_values_do_not_count():
    assert count_inversions([3, 3, 3]) == 0


@pytest.mark.parametrize(
    "values,target",
    [([1, 5, 7, 1], 6), ([1, 1, 1, 1], 2), ([1, 5, 7, -1, 5], 6), ([2, 4, 6], 100)],
)
def test_pair_counts_agree_for_positive_targets(values, target):
    assert pair_count_by_frequency(values, target) == count_pairs_with_sum(values, target)


def test_pair_count_all_equal_values():
    values = [1, 1, 1, 1]
    assert count_pairs_with_sum(values, 2) == len(values) * (len(values) - 1) // 2


def test_pair_count_by_frequency_truncated_half_for_negative_odd_target():
    assert count_pairs_with_sum([-1, -2], -3) == 1
    assert pair_count_by_frequency([-1, -2], -3) == 2


def test_common_elements():
    first = [1, 5, 10, 20, 40, 80]
    second = [6, 7, 20, 80, 100]
    third = [3, 4, 15, 20, 30, 70, 80, 120]
    assert common_elements(first, second, third) == [20, 80]


def test_common_elements_none_shared():
    assert common_elements([1, 2], [3, 4], [5, 6]) == []


def test_has_triplet_sum_source_example():
    values = [1, 2, 4, 3, 6]
    assert has_triplet_sum(values, 10) is True
    assert values == [1, 2, 4, 3, 6]


def test_has_triplet_sum_absent():
    assert has_triplet_sum([1, 2, 3], 100) is False
    assert has_triplet_sum([5, 5], 10) is False


def test_longest_consecutive_run_contiguous_block():
    block = list(range(5, 12))
    values = block + [20]
    random.Random(3).shuffle(values)
    assert longest_consecutive_run(values) == len(block)


def test_longest_consecutive_run_empty_and_negative():
    assert longest_consecutive_run([]) == 0
    assert longest_consecutive_run([-3, -2, -1]) == 0


@pytest.mark.parametrize("n", [0, 1, 5, 10, 50, 100])
def test_factorial_digits_matches_factorial(n):
    digits = factorial_digits(n)
    assert "".join(map(str, digits)) == str(math.factorial(n))


def test_factorial_digits_negative_is_empty_product():
    assert factorial_digits(-4) == [1]


def test_find_duplicate():
    assert find_duplicate([1, 3, 4, 2, 2]) == 2
    assert find_duplicate([3, 1, 3, 4, 2]) == 3


def test_find_duplicate_raises_when_distinct():
    with pytest.raises(ValueError):
        find_duplicate([1, 2, 3])


def test_majority_element():
    assert majority_element([1, 2, 1, 1, 1, 4, 5, 1]) == 1
    assert majority_element([1, 2, 3]) is None
    assert majority_element([1, 1, 2, 2]) is None


def test_negatives_first_invariants():
    values = [-12, 11, -13, -5, 6, -7, 5, -3, -6]
    result = negatives_first(values)
    assert sorted(result) == sorted(values)
    negatives = [v for v in values if v < 0]
    assert result[: len(negatives)] == negatives
    assert all(v >= 0 for v in result[len(negatives):])


def test_repeated_elements():
    assert repeated_elements([1, 2, 3, 1, 3, 6, 6]) == [1, 3, 6]


def test_repeated_elements_zero_is_never_marked():
    assert repeated_elements([0, 0, 1]) == []


def test_repeated_elements_out_of_range():
    with pytest.raises(ValueError):
        repeated_elements([1, 5, 2])


def test_sort_by_parity_ii_invariants():
    values = [4, 2, 5, 7, 8, 1, 3, 6]
    result = sort_by_parity_ii(values)
    assert sorted(result) == sorted(values)
    assert all(v % 2 == 0 for v in result[::2])
    assert all(v % 2 == 1 for v in result[1::2])


def test_sort_by_parity_ii_unbalanced_raises():
    with pytest.raises(ValueError):
        sort_by_parity_ii([1, 3])


def test_to_24_hour_source_example():
    assert to_24_hour("07:05:45PM") == "19:05:45"


def test_to_24_hour_noon_and_midnight():
    assert to_24_hour("12:45:54PM") == "12:45:54"
    assert to_24_hour("12:00:00AM") == "00:00:00"
    assert to_24_hour("09:10:11AM") == "09:10:11"


@pytest.mark.parametrize("bad", ["7:05:45PM", "07:05:45XM", "07:05:45"])
def test_to_24_hour_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        to_24_hour(bad)