"""Backtracking generators: combinations, binary strings, parentheses, queens and keypads."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product

KEYPAD = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def combination_sum_unique(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct combination of candidates summing to ``target``.

    Each candidate is used at most once. Combinations are in ascending order
    and listed in lexicographic order.
    """
    values = sorted(candidates)
    results: list[list[int]] = []
    chosen: list[int] = []

    def explore(start: int, remaining: int) -> None:
        if remaining == 0:
            results.append(list(chosen))
            return
        for i in range(start, len(values)):
            value = values[i]
            if i > start and value == values[i - 1]:
                continue
            if value > remaining:
                break
            chosen.append(value)
            explore(i + 1, remaining - value)
            chosen.pop()

    explore(0, target)
    return results


def binary_strings_without_consecutive_ones(n: int) -> list[str]:
    """Return all binary strings of length ``n`` with no two adjacent '1's, in ascending order."""
    _require_non_negative(n)
    results: list[str] = []

    def extend(current: str, last_is_one: bool) -> None:
        if len(current) == n:
            results.append(current)
            return
        extend(current + "0", False)
        if not last_is_one:
            extend(current + "1", True)

    extend("", False)
    return results


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses."""
    _require_non_negative(n)
    results: list[str] = []

    def extend(current: str, opened: int, closed: int) -> None:
        if len(current) == 2 * n:
            results.append(current)
            return
        if opened < n:
            extend(current + "(", opened + 1, closed)
        if closed < opened:
            extend(current + ")", opened, closed + 1)

    extend("", 0, 0)
    return results


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an ``n`` by ``n`` board.

    Each board is a list of rows, with 'Q' for a queen and '.' for an empty square.
    """
    _require_non_negative(n)
    boards: list[list[str]] = []
    columns: list[int] = []

    def safe(row: int, col: int) -> bool:
        return all(
            placed != col and abs(placed - col) != row - placed_row
            for placed_row, placed in enumerate(columns)
        )

    def place(row: int) -> None:
        if row == n:
            boards.append(["." * c + "Q" + "." * (n - c - 1) for c in columns])
            return
        for col in range(n):
            if safe(row, col):
                columns.append(col)
                place(row + 1)
                columns.pop()

    place(0)
    return boards


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string that the phone keypad digits can spell.

    Digits 0 and 1 carry no letters, so any input containing them yields nothing.
    """
    try:
        groups = [KEYPAD[digit] for digit in digits]
    except KeyError as error:
        raise ValueError(f"not a keypad digit: {error.args[0]!r}") from None
    if not groups:
        return []
    return ["".join(letters) for letters in product(*groups)]