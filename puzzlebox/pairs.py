"""Counting and pairing problems on lists of numbers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate

MAX_AGE = 120


def friend_requests(ages: Sequence[int]) -> int:
    """Return how many friend requests are sent among people of the given ages.

    Person A sends to person B (B != A) when ``age_B > 0.5 * age_A + 7`` and
    ``age_B <= age_A``. Ages must lie between 1 and 120.
    """
    for age in ages:
        if not 1 <= age <= MAX_AGE:
            raise ValueError(f"age {age} is outside 1..{MAX_AGE}")

    counts = Counter(ages)
    per_age = [counts.get(age, 0) for age in range(MAX_AGE + 1)]
    at_most = list(accumulate(per_age))

    total = 0
    for age_a in range(1, MAX_AGE + 1):
        senders = per_age[age_a]
        if senders == 0:
            continue
        lower_bound = int(0.5 * age_a + 7)
        if lower_bound >= age_a:
            continue
        in_range = at_most[age_a] - at_most[lower_bound]
        total += (in_range - 1) * senders
    return total


def max_pair_operations(nums: Sequence[int], target: int) -> int:
    """Return how many disjoint pairs summing to ``target`` can be removed."""
    values = sorted(nums)
    left, right = 0, len(values) - 1
    operations = 0
    while left < right:
        pair_sum = values[left] + values[right]
        if pair_sum < target:
            left += 1
        elif pair_sum > target:
            right -= 1
        else:
            left += 1
            right -= 1
            operations += 1
    return operations


def divide_players(skill: Sequence[int]) -> int:
    """Split players into pairs of equal total skill and return the summed chemistry.

    Chemistry of a pair is the product of its skills. Raises ValueError when
    the players cannot be split into such pairs.
    """
    if not skill or len(skill) % 2:
        raise ValueError("players cannot be split into pairs")

    ordered = sorted(skill)
    half = len(ordered) // 2
    target = ordered[0] + ordered[-1]
    chemistry = 0
    for low, high in zip(ordered[:half], reversed(ordered[half:])):
        if low + high != target:
            raise ValueError("players cannot be split into pairs of equal skill")
        chemistry += low * high
    return chemistry