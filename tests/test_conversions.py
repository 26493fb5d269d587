import pytest

from miniprintf.conversions import (
    char,
    hexadecimal,
    pointer,
    signed_decimal,
    string,
    unsigned_decimal,
)


def test_char_from_int_round_trips_through_ord():
    for code in (0, 65, 122, 255):
        assert ord(char(code)) == code


def test_char_keeps_only_low_byte():
    assert char(0x141) == char(0x41)


def test_char_accepts_single_character_string():
    assert char("z") == "z"


def test_char_rejects_longer_string():
    with pytest.raises(ValueError):
        char("ab")


def test_string_none_is_null_marker():
    assert string(None) == "(null)"


def test_string_returns_text_unchanged():
    assert string("hello world") == "hello world"


def test_string_stops_at_nul():
    assert string("abc\0def") == "abc"


def test_pointer_zero_is_nil():
    assert pointer(0) == "(nil)"
    assert pointer(None) == "(nil)"


@pytest.mark.parametrize("address", [1, 0xDEADBEEF, 0x7FFF_FFFF_FFFF, (1 << 64) - 1])
def test_pointer_round_trips(address):
    text = pointer(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address
    assert text[2:] == text[2:].lower()


def test_pointer_wraps_to_64_bits():
    assert pointer(-1) == pointer((1 << 64) - 1)


def test_signed_decimal_minimum():
    assert signed_decimal(-2147483648) == "-2147483648"


@pytest.mark.parametrize("value", [0, 1, -1, 42, -42, 2147483647, -2147483647])
def test_signed_decimal_round_trips(value):
    assert int(signed_decimal(value)) == value


def test_signed_decimal_wraps_overflow():
    assert signed_decimal(1 << 31) == "-2147483648"
    assert signed_decimal((1 << 32) + 7) == signed_decimal(7)


@pytest.mark.parametrize("value", [0, 9, 10, 4294967295])
def test_unsigned_decimal_round_trips(value):
    assert int(unsigned_decimal(value)) == value


def test_unsigned_decimal_wraps_negative():
    assert int(unsigned_decimal(-1)) == (1 << 32) - 1


@pytest.mark.parametrize("digit", range(16))
def test_hexadecimal_single_digits(digit):
    assert hexadecimal(digit, False) == "0123456789abcdef"[digit]
    assert hexadecimal(digit, True) == "0123456789ABCDEF"[digit]


@pytest.mark.parametrize("value", [16, 255, 4096, 0xCAFEBABE, (1 << 32) - 1])
def test_hexadecimal_round_trips(value):
    lower = hexadecimal(value, False)
    upper = hexadecimal(value, True)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert not lower.startswith("0")


def test_hexadecimal_wraps_to_32_bits():
    assert hexadecimal(-1, False) == hexadecimal((1 << 32) - 1, False)