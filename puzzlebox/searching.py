"""Binary searches and heaps: eating speeds and the k-th smallest fraction."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from fractions import Fraction


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Return the smallest bananas-per-hour speed that finishes every pile within ``hours``.

    Each hour one pile is eaten from, so a pile of ``p`` takes ``ceil(p / speed)``
    hours. Raises ValueError when there are no piles or fewer hours than piles.
    """
    if not piles:
        raise ValueError("there must be at least one pile")
    if hours < len(piles):
        raise ValueError("fewer hours than piles: no speed is fast enough")

    low, high = 1, max(piles)
    while low < high:
        mid = low + (high - low) // 2
        needed = sum(-(-pile // mid) for pile in piles)
        if needed <= hours:
            high = mid
        else:
            low = mid + 1
    return low


def _check_fraction_input(arr: Sequence[int], k: int) -> None:
    n = len(arr)
    if n < 2:
        raise ValueError("at least two values are needed to form a fraction")
    total = n * (n - 1) // 2
    if not 1 <= k <= total:
        raise ValueError(f"k must lie between 1 and {total}")


def kth_smallest_fraction(arr: Sequence[int], k: int) -> tuple[int, int]:
    """Return ``(numerator, denominator)`` of the k-th smallest ``arr[i] / arr[j]`` with ``i < j``.

    ``arr`` is sorted ascending and holds positive values. A min-heap walks the
    fractions in increasing order.
    """
    _check_fraction_input(arr, k)
    heap = [(Fraction(arr[0], arr[j]), 0, j) for j in range(1, len(arr))]
    heapq.heapify(heap)
    for _ in range(k - 1):
        _, num_idx, den_idx = heapq.heappop(heap)
        if num_idx + 1 < den_idx:
            nxt = num_idx + 1
            heapq.heappush(heap, (Fraction(arr[nxt], arr[den_idx]), nxt, den_idx))
    _, num_idx, den_idx = heap[0]
    return arr[num_idx], arr[den_idx]


def kth_smallest_fraction_search(arr: Sequence[int], k: int) -> tuple[int, int]:
    """Return the same fraction as :func:`kth_smallest_fraction` by binary search on its value."""
    _check_fraction_input(arr, k)
    n = len(arr)
    low, high = 0.0, 1.0
    num_ans, den_ans = 0, 1

    while low < high:
        mid = low + (high - low) / 2
        if not low < mid < high:
            break
        count = 0
        max_num, max_den = 0, 1
        j = 1
        for i in range(n - 1):
            while j < n and arr[i] > mid * arr[j]:
                j += 1
            count += n - j
            if j < n and max_num * arr[j] < arr[i] * max_den:
                max_num, max_den = arr[i], arr[j]

        if count == k:
            num_ans, den_ans = max_num, max_den
            break
        if count < k:
            low = mid
        else:
            num_ans, den_ans = max_num, max_den
            high = mid

    return num_ans, den_ans