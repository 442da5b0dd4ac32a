"""Stack-based puzzles: asteroid collisions, celebrities, histograms and digit removal."""

from __future__ import annotations

from collections.abc import Sequence


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Return the asteroids that survive all collisions, in their original order.

    Positive values move right and negative values move left. When two meet,
    the smaller one explodes; equal sizes destroy each other. An empty list
    means everything was destroyed.
    """
    survivors: list[int] = []
    for asteroid in asteroids:
        if asteroid > 0:
            survivors.append(asteroid)
            continue
        size = abs(asteroid)
        while survivors and survivors[-1] > 0 and size > survivors[-1]:
            survivors.pop()
        if survivors and survivors[-1] > 0 and size == survivors[-1]:
            survivors.pop()
        elif not survivors or survivors[-1] < 0:
            survivors.append(asteroid)
    return survivors


def find_celebrity(matrix: Sequence[Sequence[int]]) -> int | None:
    """Return the index of the celebrity in a "knows" matrix, or None if there is none.

    ``matrix[a][b] == 1`` means person ``a`` knows person ``b``. A celebrity
    knows nobody and is known by everybody else.
    """
    candidates = list(range(len(matrix)))
    while len(candidates) > 1:
        person_a = candidates.pop()
        person_b = candidates.pop()
        candidates.append(person_b if matrix[person_a][person_b] == 1 else person_a)

    if not candidates:
        return None

    candidate = candidates[0]
    for other, row in enumerate(matrix):
        if other == candidate:
            continue
        if matrix[candidate][other] == 1 or row[candidate] == 0:
            return None
    return candidate


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under the histogram."""
    bars = [*heights, 0]
    best = 0
    stack: list[int] = []
    for i, height in enumerate(bars):
        while stack and height < bars[stack[-1]]:
            top_height = bars[stack.pop()]
            width = i if not stack else i - stack[-1] - 1
            best = max(best, top_height * width)
        stack.append(i)
    return best


def remove_k_digits(num: str, k: int) -> str:
    """Remove ``k`` digits from ``num`` so that the remaining number is as small as possible.

    Leading zeros are stripped; an empty result is returned as ``"0"``.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    kept: list[str] = []
    for digit in num:
        while kept and k > 0 and digit < kept[-1]:
            kept.pop()
            k -= 1
        kept.append(digit)

    if k > 0:
        kept = kept[: max(len(kept) - k, 0)]

    result = "".join(kept).lstrip("0")
    return result or "0"