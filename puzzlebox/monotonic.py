"""Subarray sums and water trapping computed with monotonic stacks and prefix maxima."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate

MODULUS = 10**9 + 7


def _contribution(nums: Sequence[int], pops) -> int:
    """Sum of ``nums[j] * (j - prev) * (next - j)`` over elements popped by ``pops``."""
    total = 0
    stack: list[int] = []
    n = len(nums)
    for i in range(n + 1):
        while stack and (i == n or pops(nums[stack[-1]], nums[i])):
            j = stack.pop()
            previous = stack[-1] if stack else -1
            total += nums[j] * (j - previous) * (i - j)
        stack.append(i)
    return total


def sum_subarray_ranges(nums: Sequence[int]) -> int:
    """Return the sum of ``max - min`` over every contiguous subarray."""
    maxima = _contribution(nums, lambda top, current: top < current)
    minima = _contribution(nums, lambda top, current: top > current)
    return maxima - minima


def sum_subarray_mins(arr: Sequence[int]) -> int:
    """Return the sum of the minimum of every subarray, modulo 10**9 + 7."""
    n = len(arr)
    left = [0] * n
    right = [0] * n

    stack: list[tuple[int, int]] = []
    for i, value in enumerate(arr):
        count = 1
        while stack and stack[-1][0] > value:
            count += stack.pop()[1]
        stack.append((value, count))
        left[i] = count

    stack = []
    for i in reversed(range(n)):
        value = arr[i]
        count = 1
        while stack and stack[-1][0] >= value:
            count += stack.pop()[1]
        stack.append((value, count))
        right[i] = count

    total = 0
    for value, span_left, span_right in zip(arr, left, right):
        total = (total + value * span_left * span_right) % MODULUS
    return total


def sum_subarray_mins_brute(arr: Sequence[int]) -> int:
    """Return the exact sum of the minimum of every subarray, by enumeration."""
    total = 0
    for start in range(len(arr)):
        minimum = None
        for value in arr[start:]:
            minimum = value if minimum is None else min(minimum, value)
            total += minimum
    return total


def trapped_water(heights: Sequence[int]) -> int:
    """Return how many units of rain water the elevation map traps."""
    if not heights:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(lhs, rhs) - height for lhs, rhs, height in zip(left_max, right_max, heights)
    )