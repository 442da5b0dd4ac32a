import pytest

from puzzlebox.arrangements import count_beautiful_arrangements, count_beautiful_subsets


def test_arrangements_examples_from_description():
    assert count_beautiful_arrangements(1) == 1
    assert count_beautiful_arrangements(2) == 2


def test_arrangements_never_exceed_permutations():
    import math

    for n in range(1, 7):
        assert 1 <= count_beautiful_arrangements(n) <= math.factorial(n)


def test_arrangements_negative_raises():
    with pytest.raises(ValueError):
        count_beautiful_arrangements(-1)


def test_subsets_all_beautiful_when_k_unreachable():
    nums = [1, 2, 3, 4]
    assert count_beautiful_subsets(nums, 100) == 2 ** len(nums) - 1


def test_subsets_empty_input():
    assert count_beautiful_subsets([], 1) == 0


def test_subsets_equal_values_with_zero_k():
    # Any subset with two equal values differs from its first element by 0.
    assert count_beautiful_subsets([5, 5, 5], 0) == 3


def test_subsets_small_example():
    assert count_beautiful_subsets([2, 4, 6], 2) == 4


def test_subsets_singletons_always_count():
    nums = [1, 2, 3]
    assert count_beautiful_subsets(nums, 1) >= len(nums)
    assert count_beautiful_subsets(nums, 1) < 2 ** len(nums) - 1