"""Counting beautiful arrangements and beautiful subsets."""

from __future__ import annotations

from collections.abc import Sequence


def count_beautiful_arrangements(n: int) -> int:
    """Count permutations of 1..n where each value divides, or is divided by, its position."""
    if n < 0:
        raise ValueError("n must not be negative")
    used = [False] * (n + 1)

    def count_from(position: int) -> int:
        if position > n:
            return 1
        total = 0
        for value in range(1, n + 1):
            if not used[value] and (value % position == 0 or position % value == 0):
                used[value] = True
                total += count_from(position + 1)
                used[value] = False
        return total

    return count_from(1)


def count_beautiful_subsets(nums: Sequence[int], k: int) -> int:
    """Count the non-empty subsets in which no element differs from the first one by ``k``.

    Subsets keep the order of ``nums``; only pairs that include the subset's
    first element are compared.
    """
    count = 0
    for mask in range(1, 1 << len(nums)):
        subset = [value for j, value in enumerate(nums) if mask >> j & 1]
        first = subset[0]
        if all(abs(first - other) != k for other in subset[1:]):
            count += 1
    return count