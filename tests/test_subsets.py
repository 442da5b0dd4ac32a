from itertools import combinations

import pytest

from puzzlebox.subsets import format_subset, subsets_by_backtracking, subsets_by_mask


def test_mask_order_for_two_elements():
    assert subsets_by_mask([1, 2]) == [[], [1], [2], [1, 2]]


@pytest.mark.parametrize("nums", [[], [1], [1, 2, 3], [4, 5, 6, 7]])
def test_both_methods_produce_same_subsets(nums):
    by_mask = sorted(subsets_by_mask(nums))
    by_backtracking = sorted(subsets_by_backtracking(nums))
    assert by_mask == by_backtracking


@pytest.mark.parametrize("nums", [[], [1], [1, 2, 3], [9, 8, 7, 6, 5]])
def test_subset_count_is_power_of_two(nums):
    assert len(subsets_by_mask(nums)) == 2 ** len(nums)
    assert len(subsets_by_backtracking(nums)) == 2 ** len(nums)


def test_subsets_match_all_combinations():
    nums = [1, 2, 3]
    expected = sorted(
        list(combo) for size in range(len(nums) + 1) for combo in combinations(nums, size)
    )
    assert sorted(subsets_by_mask(nums)) == expected


def test_mask_order_ends():
    nums = [1, 2, 3]
    result = subsets_by_mask(nums)
    assert result[0] == []
    assert result[-1] == nums


def test_backtracking_order_ends():
    nums = [1, 2, 3]
    result = subsets_by_backtracking(nums)
    assert result[0] == nums
    assert result[-1] == []


def test_subsets_keep_original_order():
    nums = [3, 1, 2]
    for subset in subsets_by_backtracking(nums):
        positions = [nums.index(value) for value in subset]
        assert positions == sorted(positions)


def test_format_subset():
    assert format_subset([1, 2, 3]) == "[1, 2, 3]"


def test_format_empty_subset():
    assert format_subset([]) == "[]"