"""Palindromic substrings and palindromic rotations."""

from __future__ import annotations


def _expand(text: str, left: int, right: int) -> int:
    while left >= 0 and right < len(text) and text[left] == text[right]:
        left -= 1
        right += 1
    return right - left - 1


def longest_palindromic_substring(text: str) -> str:
    """Return the longest palindromic substring; the earliest one wins a tie."""
    start = 0
    best = 0
    for i in range(len(text)):
        length = max(_expand(text, i, i), _expand(text, i, i + 1))
        if length > best:
            best = length
            start = i - (length - 1) // 2
    return text[start : start + best]


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def rotations(text: str) -> list[str]:
    """Return every rotation of ``text``, starting with ``text`` itself."""
    return [text[i:] + text[:i] for i in range(len(text))]


def can_rotate_to_palindrome(text: str) -> bool:
    """Return True if some rotation of ``text`` is a palindrome.

    Empty and single-character strings count as palindromes.
    """
    if len(text) <= 1:
        return True
    return any(is_palindrome(rotation) for rotation in rotations(text))