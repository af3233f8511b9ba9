import pytest

from algokit.greedy import (
    fractional_knapsack,
    job_sequencing,
    max_activities,
    optimal_merge_cost,
)


def test_optimal_merge_source_example():
    assert optimal_merge_cost([2, 4, 7, 9, 12]) == 74


def test_optimal_merge_is_order_independent():
    sizes = [12, 2, 9, 4, 7]
    assert optimal_merge_cost(sizes) == optimal_merge_cost(sorted(sizes))


def test_optimal_merge_of_two_files_costs_their_sum():
    assert optimal_merge_cost([8, 5]) == 8 + 5
    assert optimal_merge_cost([8]) == optimal_merge_cost([])


def test_activities_empty():
    assert max_activities([]) == 0


def test_touching_activities_all_fit():
    intervals = [(i, i + 1) for i in range(6)]
    assert max_activities(reversed(intervals)) == len(intervals)


def test_activities_never_exceed_count_and_ignore_duplicates():
    intervals = [(1, 4), (3, 5), (0, 6), (5, 7), (3, 9), (5, 9), (6, 10), (8, 11)]
    result = max_activities(intervals)
    assert result <= len(intervals)
    assert max_activities(intervals + intervals) == result


def test_fractional_knapsack_classic():
    items = [(60, 10), (100, 20), (120, 30)]
    assert fractional_knapsack(items, 50) == pytest.approx(240.0)


def test_fractional_knapsack_large_capacity_takes_everything():
    items = [(60, 10), (100, 20), (120, 30)]
    assert fractional_knapsack(items, 1000) == pytest.approx(sum(p for p, _ in items))


def test_fractional_knapsack_partial_single_item():
    profit, weight, capacity = 30.0, 12.0, 5.0
    assert fractional_knapsack([(profit, weight)], capacity) == pytest.approx(
        profit * capacity / weight
    )


def test_fractional_knapsack_errors():
    with pytest.raises(ValueError):
        fractional_knapsack([(10, 0)], 5)
    with pytest.raises(ValueError):
        fractional_knapsack([(10, 2)], -1)


def test_job_sequencing_example():
    jobs = [(100, 2), (19, 1), (27, 2), (25, 1), (15, 3)]
    order, total = job_sequencing(jobs)
    assert order == [3, 1, 5]
    assert total == sum(jobs[number - 1][0] for number in order)


def test_job_sequencing_respects_deadlines():
    jobs = [(20, 4), (10, 1), (40, 1), (30, 1), (5, 3), (50, 2)]
    order, total = job_sequencing(jobs)
    assert len(set(order)) == len(order)
    for slot, number in enumerate(order):
        assert jobs[number - 1][1] >= slot + 1
    assert total == sum(jobs[number - 1][0] for number in order)