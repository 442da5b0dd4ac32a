import pytest

from puzzlebox.pairs import divide_players, friend_requests, max_pair_operations


def test_friend_requests_same_age_pair():
    assert friend_requests([16, 16]) == 2


@pytest.mark.parametrize("age", [15, 30, 60, 120])
def test_friend_requests_identical_ages_all_connect(age):
    n = 4
    assert friend_requests([age] * n) == n * (n - 1)


@pytest.mark.parametrize("ages", [[1, 5, 10, 14], [14, 14, 14], [7]])
def test_friend_requests_young_people_send_nothing(ages):
    assert friend_requests(ages) == 0


def test_friend_requests_order_independent():
    ages = [20, 30, 100, 110, 120, 16, 17, 18]
    assert friend_requests(ages) == friend_requests(sorted(ages, reverse=True))


def test_friend_requests_empty():
    assert friend_requests([]) == 0


@pytest.mark.parametrize("ages", [[0], [121], [30, -1]])
def test_friend_requests_invalid_age(ages):
    with pytest.raises(ValueError):
        friend_requests(ages)


def test_max_pair_operations_two_pairs():
    assert max_pair_operations([1, 2, 3, 4], 5) == 2


def test_max_pair_operations_no_match():
    assert max_pair_operations([1, 1], 5) == 0


@pytest.mark.parametrize(
    "nums,target", [([3, 1, 3, 4, 3], 6), ([2, 2, 2, 2, 2], 4), ([5, 1, 4, 2, 3, 0], 5)]
)
def test_max_pair_operations_bounded_and_order_free(nums, target):
    result = max_pair_operations(nums, target)
    assert 0 <= result <= len(nums) // 2
    assert result == max_pair_operations(sorted(nums), target)
    assert result == max_pair_operations(nums[::-1], target)


def test_max_pair_operations_does_not_mutate_input():
    nums = [4, 3, 2, 1]
    max_pair_operations(nums, 5)
    assert nums == [4, 3, 2, 1]


def test_divide_players_classic():
    assert divide_players([3, 2, 5, 1, 3, 4]) == 22


def test_divide_players_single_pair():
    assert divide_players([3, 4]) == 3 * 4


def test_divide_players_order_free():
    skill = [1, 6, 2, 5, 3, 4]
    assert divide_players(skill) == divide_players(sorted(skill))


@pytest.mark.parametrize("skill", [[1, 1, 2, 3], [1, 2, 3], [], [5]])
def test_divide_players_impossible(skill):
    with pytest.raises(ValueError):
        divide_players(skill)