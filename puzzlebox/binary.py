"""Decimal-to-binary explanations and letter bitmasks."""

from __future__ import annotations

import string

BYTE_WIDTH = 8
ALPHABET_SIZE = 26


def _require_non_negative(num: int) -> None:
    if num < 0:
        raise ValueError("number must not be negative")


def division_steps(num: int) -> list[tuple[int, int, int]]:
    """Return the ``(dividend, quotient, remainder)`` steps of repeated division by 2.

    Zero yields the single step ``(0, 0, 0)``.
    """
    _require_non_negative(num)
    if num == 0:
        return [(0, 0, 0)]
    steps = []
    while num > 0:
        quotient, remainder = divmod(num, 2)
        steps.append((num, quotient, remainder))
        num = quotient
    return steps


def powers_of_two(num: int) -> list[int]:
    """Return the powers of two from 128 down to 1 that greedily make up ``num``.

    Only the eight powers of a byte are tried, each at most once.
    """
    _require_non_negative(num)
    powers = []
    for bit in reversed(range(BYTE_WIDTH)):
        power = 1 << bit
        if num >= power:
            powers.append(power)
            num -= power
    return powers


def bit_string(num: int, width: int = BYTE_WIDTH) -> str:
    """Return the lowest ``width`` bits of ``num``, most significant first."""
    if width < 0:
        raise ValueError("width must not be negative")
    return "".join("1" if num >> bit & 1 else "0" for bit in reversed(range(width)))


def string_bitmask(text: str) -> int:
    """Return a mask with bit ``c - 'a'`` set for every lowercase letter ``c`` in ``text``."""
    mask = 0
    for char in text:
        if char not in string.ascii_lowercase:
            raise ValueError(f"not a lowercase letter: {char!r}")
        mask |= 1 << (ord(char) - ord("a"))
    return mask


def mask_letters(mask: int) -> str:
    """Return the letters whose bits are set in ``mask``, in alphabetical order."""
    return "".join(
        letter for bit, letter in enumerate(string.ascii_lowercase) if mask >> bit & 1
    )


def explain_binary(num: int) -> str:
    """Return a multi-line walk-through of converting ``num`` to binary."""
    steps = division_steps(num)
    bits = list(reversed(range(BYTE_WIDTH)))
    lines = [f"Converting {num} to binary:", "", "=== METHOD 1: Division by 2 ==="]
    lines += [f"{d} ÷ 2 = {q} remainder {r}" for d, q, r in steps]
    lines += [
        "",
        "Reading remainders from bottom to top: "
        + "".join(str(r) for _, _, r in reversed(steps)),
        "",
        "=== METHOD 2: Powers of 2 ===",
        "Powers of 2: " + " ".join(str(1 << bit) for bit in bits),
        "Bit positions: " + "   ".join(str(bit) for bit in bits),
        "",
        f"For {num}:",
    ]

    powers = powers_of_two(num)
    if powers:
        sums = " + ".join(str(power) for power in powers)
        exponents = " + ".join(f"2^{power.bit_length() - 1}" for power in powers)
        lines.append(f"{num} = {sums} = {exponents}")
    else:
        lines.append("0 = 0")

    lines += [
        "",
        "Binary representation (8 bits):",
        "Position: " + " ".join(str(bit) for bit in bits),
        "Binary:   " + " ".join(bit_string(num)),
    ]
    return "\n".join(lines)