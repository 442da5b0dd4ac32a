"""Enumerating every subset of a list, by bitmask and by backtracking."""

from __future__ import annotations

from collections.abc import Sequence


def subsets_by_mask(nums: Sequence[int]) -> list[list[int]]:
    """Return all subsets of ``nums``, one for each bitmask from 0 to 2**n - 1.

    Bit ``j`` of the mask selects ``nums[j]``, so the empty subset comes first
    and the full list last.
    """
    return [
        [value for j, value in enumerate(nums) if mask >> j & 1]
        for mask in range(1 << len(nums))
    ]


def subsets_by_backtracking(nums: Sequence[int]) -> list[list[int]]:
    """Return all subsets of ``nums``, trying to include each element before excluding it.

    The full list comes first and the empty subset last.
    """
    results: list[list[int]] = []
    chosen: list[int] = []

    def explore(index: int) -> None:
        if index == len(nums):
            results.append(list(chosen))
            return
        chosen.append(nums[index])
        explore(index + 1)
        chosen.pop()
        explore(index + 1)

    explore(0)
    return results


def format_subset(subset: Sequence[int]) -> str:
    """Render a subset as ``[a, b, c]``."""
    return "[" + ", ".join(str(value) for value in subset) + "]"