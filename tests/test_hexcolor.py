import pytest

from fdf.hexcolor import hex_to_dec, is_hex


@pytest.mark.parametrize("token", ["0xFF0000", "0xff", "0XaBc", "0x0"])
def test_hex_tokens(token):
    assert is_hex(token) is True


@pytest.mark.parametrize("token", ["0x", "0", "", "1xFF", "0xGG", "0xFF0000\n"])
def test_not_hex(token):
    assert is_hex(token) is False


def test_second_character_unchecked():
    assert is_hex("0zab") is True


def test_plain_digits():
    assert hex_to_dec("ff") == 255
    assert hex_to_dec("0") == 0
    assert hex_to_dec("") == 0


@pytest.mark.parametrize("value", [0, 1, 15, 16, 0xFFFFFF, 0x8FCE00, 0x7FFFFFFF])
def test_round_trip(value):
    assert hex_to_dec(format(value, "x")) == value
    assert hex_to_dec(format(value, "X")) == value


@pytest.mark.parametrize("token", ["0xFF0000", "0xF44336", "0x8FCE00", "0xFFFFFF"])
def test_prefixed_colour_keeps_low_bits(token):
    assert hex_to_dec(token) & 0xFFFFFF == int(token, 16)


def test_wraps_to_signed_32_bits():
    result = hex_to_dec("0x" + "f" * 12)
    assert -(2**31) <= result < 2**31