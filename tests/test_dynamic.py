import pytest

from algokit.dynamic import (
    can_partition,
    knapsack_01,
    longest_common_subsequence,
    min_insertions_palindrome,
    subset_sum,
    trapped_water,
    tsp_min_cost,
)


def _is_subsequence(short: str, long: str) -> bool:
    chars = iter(long)
    return all(ch in chars for ch in short)


def test_knapsack_everything_fits():
    profits = [10, 20, 30]
    weights = [1, 2, 3]
    assert knapsack_01(profits, weights, 6) == sum(profits)


def test_knapsack_single_item_too_heavy():
    assert knapsack_01([50], [10], 5) == 0


def test_knapsack_degenerate_inputs():
    assert knapsack_01([1, 2], [1, 2], 0) == 0
    assert knapsack_01([], [], 10) == 0
    assert knapsack_01([1, 2], [1], 10) == 0


def test_knapsack_monotone_in_capacity():
    profits = [1, 6, 10, 16]
    weights = [1, 2, 3, 5]
    results = [knapsack_01(profits, weights, c) for c in range(0, 12)]
    assert results == sorted(results)
    assert results[-1] <= sum(profits)


def test_knapsack_rejects_negative_weight():
    with pytest.raises(ValueError):
        knapsack_01([1, 2], [1, -2], 5)


def test_can_partition_driver_example():
    assert can_partition([1, 5, 11, 5]) is True


def test_can_partition_odd_sum():
    assert can_partition([1, 2, 4]) is False


def test_subset_sum_invariants():
    values = [3, 34, 4, 12, 5, 2]
    assert subset_sum(values, 0) is True
    assert subset_sum(values, sum(values)) is True
    assert subset_sum(values, sum(values) + 1) is False
    assert all(subset_sum(values, v) for v in values)


def test_subset_sum_uses_each_value_once():
    assert subset_sum([5], 10) is False


def test_subset_sum_rejects_negatives():
    with pytest.raises(ValueError):
        subset_sum([1, 2], -1)
    with pytest.raises(ValueError):
        subset_sum([1, -2], 1)


def test_lcs_of_identical_and_empty():
    assert longest_common_subsequence("ACADE", "ACADE") == "ACADE"
    assert longest_common_subsequence("", "ABC") == ""


def test_lcs_is_common_subsequence():
    first, second = "ACADE", "CBGSA"
    result = longest_common_subsequence(first, second)
    assert _is_subsequence(result, first)
    assert _is_subsequence(result, second)
    assert len(result) >= 1


def test_lcs_no_common_characters():
    assert longest_common_subsequence("abc", "xyz") == ""


def test_min_insertions_palindrome_zero():
    assert min_insertions_palindrome("racecar") == 0
    assert min_insertions_palindrome("") == 0


def test_min_insertions_two_chars():
    assert min_insertions_palindrome("ab") == 1


def test_min_insertions_bounds_and_symmetry():
    for text in ["abcd", "geeks", "abcda"]:
        result = min_insertions_palindrome(text)
        assert 0 <= result <= len(text) - 1
        assert result == min_insertions_palindrome(text[::-1])


def test_trapped_water_documented_example():
    assert trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_trapped_water_monotone_holds_nothing():
    assert trapped_water([1, 2, 3, 4]) == 0
    assert trapped_water([]) == 0


def test_tsp_driver_graph():
    graph = [
        [0, 10, 15, 20],
        [10, 0, 35, 25],
        [15, 35, 0, 30],
        [20, 25, 30, 0],
    ]
    assert tsp_min_cost(graph, 0) == 80


def test_tsp_independent_of_source_for_symmetric_graph():
    graph = [
        [0, 10, 15, 20],
        [10, 0, 35, 25],
        [15, 35, 0, 30],
        [20, 25, 30, 0],
    ]
    costs = {tsp_min_cost(graph, s) for s in range(4)}
    assert len(costs) == 1


def test_tsp_rejects_bad_input():
    with pytest.raises(ValueError):
        tsp_min_cost([[0, 1], [1]], 0)
    with pytest.raises(ValueError):
        tsp_min_cost([[0, 1], [1, 0]], 2)