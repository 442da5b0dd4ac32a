"""Longest concatenation of strings whose letters are all distinct."""

from __future__ import annotations

from collections.abc import Iterator, Sequence, Set


def can_include(text: str, used: Set[str]) -> bool:
    """Return True if ``text`` has no repeated letters and shares none with ``used``."""
    return len(set(text)) == len(text) and used.isdisjoint(text)


def max_unique_concatenation_length(strings: Sequence[str]) -> int:
    """Return the greatest length of a concatenation of some ``strings`` with all letters distinct."""

    def best_from(index: int, used: frozenset[str], length: int) -> int:
        if index == len(strings):
            return length
        best = best_from(index + 1, used, length)
        text = strings[index]
        if can_include(text, used):
            best = max(best, best_from(index + 1, used | set(text), length + len(text)))
        return best

    return best_from(0, frozenset(), 0)


def _letters(chars) -> str:
    return "{" + ", ".join(chars) + "}"


def exploration_trace(strings: Sequence[str]) -> Iterator[str]:
    """Yield a line-by-line account of the include/skip search over ``strings``."""
    best = 0
    used: set[str] = set()

    def explore(index: int, length: int) -> Iterator[str]:
        nonlocal best
        indent = " " * (index * 2)
        yield (
            f"{indent}-> Exploring at index {index}. Current Length: {length}. "
            f"Letters used: {_letters(sorted(used))}"
        )
        if length > best:
            yield f"{indent}   *** New Max Length Found: {length} ***"
            best = length

        if index == len(strings):
            yield f"{indent}   Reached end of blocks for this path."
            return

        text = strings[index]
        yield f'{indent}   Considering block: "{text}"'
        allowed = can_include(text, used)
        yield f'{indent}   Checking if we can include "{text}": {"Yes" if allowed else "No"}'

        if allowed:
            yield f'{indent}   YES, Including "{text}". Adding its letters to checklist.'
            used.update(text)
            yield from explore(index + 1, length + len(text))
            yield (
                f'{indent}   <-- Backtracking from including "{text}". '
                f"Removing its letters: {_letters(text)} from checklist."
            )
            used.difference_update(text)

        yield f'{indent}   NO (or choosing not to), Skipping block "{text}".'
        yield from explore(index + 1, length)
        yield f"{indent}<- Finished exploring options for index {index}."

    yield from explore(0, 0)