"""Sliding-window problems over lists and strings."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence


def total_fruit(fruits: Sequence[int]) -> int:
    """Return the length of the longest run holding at most two distinct fruit types."""
    counts: Counter[int] = Counter()
    left = 0
    best = 0
    for right, fruit in enumerate(fruits):
        counts[fruit] += 1
        while len(counts) > 2:
            outgoing = fruits[left]
            counts[outgoing] -= 1
            if counts[outgoing] == 0:
                del counts[outgoing]
            left += 1
        best = max(best, right - left + 1)
    return best


def total_fruit_brute(fruits: Sequence[int]) -> int:
    """Return the same answer as :func:`total_fruit` by trying every start position."""
    best = 0
    for start in range(len(fruits)):
        basket: set[int] = set()
        for length, fruit in enumerate(fruits[start:], start=1):
            basket.add(fruit)
            if len(basket) > 2:
                break
            best = max(best, length)
    return best


def longest_ones(bits: Sequence[int], k: int) -> int:
    """Return the longest run of ones obtainable by flipping at most ``k`` zeros."""
    if k < 0:
        raise ValueError("k must not be negative")
    left = 0
    zeros = 0
    best = 0
    for right, bit in enumerate(bits):
        if bit == 0:
            zeros += 1
        while zeros > k:
            if bits[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def sliding_max(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values.

    Returns an empty list when ``k`` exceeds the number of values.
    """
    if k < 1:
        raise ValueError("window size must be at least 1")
    result: list[int] = []
    window: deque[int] = deque()
    for i, value in enumerate(nums):
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(i)
        if window[0] <= i - k:
            window.popleft()
        if i >= k - 1:
            result.append(nums[window[0]])
    return result


def longest_run_with_flips(text: str, k: int, target: str) -> int:
    """Return the longest run of ``target`` characters after changing at most ``k`` others."""
    if k < 0:
        raise ValueError("k must not be negative")
    left = 0
    flips = 0
    best = 0
    for right, char in enumerate(text):
        if char != target:
            flips += 1
        while flips > k:
            if text[left] != target:
                flips -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def max_consecutive_answers(key: str, k: int) -> int:
    """Return the longest run of identical 'T' or 'F' answers after at most ``k`` changes."""
    return max(
        longest_run_with_flips(key, k, "T"),
        longest_run_with_flips(key, k, "F"),
    )


def count_subarrays_max_at_most(nums: Sequence[int], limit: int) -> int:
    """Return how many subarrays have every element at most ``limit``."""
    count = 0
    start = 0
    for end, value in enumerate(nums):
        if value > limit:
            start = end + 1
        else:
            count += end - start + 1
    return count


def count_bounded_max_subarrays(nums: Sequence[int], left: int, right: int) -> int:
    """Return how many subarrays have their maximum within ``[left, right]``."""
    below = count_subarrays_max_at_most(nums, left - 1) if left > 0 else 0
    return count_subarrays_max_at_most(nums, right) - below


def count_bounded_max_subarrays_brute(nums: Sequence[int], left: int, right: int) -> int:
    """Return the same count as :func:`count_bounded_max_subarrays` by enumeration."""
    total = 0
    for end in range(len(nums)):
        current_max = nums[end]
        for start in range(end, -1, -1):
            current_max = max(current_max, nums[start])
            if left <= current_max <= right:
                total += 1
            if current_max > right:
                break
    return total