import pytest

from puzzlebox.binary import (
    bit_string,
    division_steps,
    explain_binary,
    mask_letters,
    powers_of_two,
    string_bitmask,
)


@pytest.mark.parametrize("num", [0, 1, 7, 15, 56, 255, 1000])
def test_division_remainders_read_upwards_give_binary(num):
    steps = division_steps(num)
    assert "".join(str(r) for _, _, r in reversed(steps)) == format(num, "b")
    for dividend, quotient, remainder in steps:
        assert dividend == 2 * quotient + remainder


def test_division_of_zero():
    assert division_steps(0) == [(0, 0, 0)]


def test_negative_numbers_rejected():
    with pytest.raises(ValueError):
        division_steps(-3)
    with pytest.raises(ValueError):
        explain_binary(-1)


@pytest.mark.parametrize("num", range(256))
def test_powers_sum_to_byte_values(num):
    powers = powers_of_two(num)
    assert sum(powers) == num
    assert powers == sorted(set(powers), reverse=True)


def test_powers_of_zero_is_empty():
    assert powers_of_two(0) == []


@pytest.mark.parametrize("num", [0, 1, 7, 56, 200, 255])
def test_bit_string_round_trip(num):
    bits = bit_string(num)
    assert len(bits) == 8
    assert int(bits, 2) == num


def test_bit_string_width():
    assert bit_string(5, 3) == "101"
    assert len(bit_string(5, 26)) == 26


@pytest.mark.parametrize("text", ["abc", "def", "un", "iq", "ue"])
def test_bitmask_round_trip(text):
    assert mask_letters(string_bitmask(text)) == "".join(sorted(set(text)))


def test_bitmask_value():
    assert string_bitmask("abc") == 7


def test_bitmask_rejects_non_letters():
    with pytest.raises(ValueError):
        string_bitmask("aB")


def test_explain_binary_contents():
    text = explain_binary(56)
    assert text.splitlines()[0] == "Converting 56 to binary:"
    assert "56 = 32 + 16 + 8 = 2^5 + 2^4 + 2^3" in text
    assert "Reading remainders from bottom to top: 111000" in text


def test_explain_zero():
    text = explain_binary(0)
    assert "0 ÷ 2 = 0 remainder 0" in text
    assert "0 = 0" in text.splitlines()