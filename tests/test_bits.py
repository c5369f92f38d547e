import pytest

from embkit.bits import (
    clear_bit,
    clear_mask,
    format_binary,
    get_bit,
    set_bit,
    set_mask,
    shift_left,
    shift_right,
    toggle_bit,
    toggle_mask,
)


@pytest.mark.parametrize("byte, shift, expected", [(0xFF, 4, 0xF0), (0x01, 1, 0x02)])
def test_shift_left(byte, shift, expected):
    assert shift_left(byte, shift) == expected


@pytest.mark.parametrize("byte, shift, expected", [(0xFF, 4, 0x0F), (0x04, 2, 0x01)])
def test_shift_right(byte, shift, expected):
    assert shift_right(byte, shift) == expected


@pytest.mark.parametrize("byte, mask, expected", [(0x01, 0x0A, 0x0B), (0xFF, 0x00, 0xFF)])
def test_set_mask(byte, mask, expected):
    assert set_mask(byte, mask) == expected


@pytest.mark.parametrize("byte, mask, expected", [(0xFF, 0x0F, 0xF0), (0xFF, 0x01, 0xFE)])
def test_clear_mask(byte, mask, expected):
    assert clear_mask(byte, mask) == expected


@pytest.mark.parametrize("byte, mask, expected", [(0xFF, 0xF0, 0x0F), (0xAA, 0xFF, 0x55)])
def test_toggle_mask(byte, mask, expected):
    assert toggle_mask(byte, mask) == expected


@pytest.mark.parametrize("byte, bit, expected", [(0x00, 4, 0x10), (0x00, 0, 0x01)])
def test_set_bit(byte, bit, expected):
    assert set_bit(byte, bit) == expected


@pytest.mark.parametrize("byte, bit, expected", [(0xFF, 0, 0xFE), (0xFF, 7, 0x7F)])
def test_clear_bit(byte, bit, expected):
    assert clear_bit(byte, bit) == expected


@pytest.mark.parametrize("byte, bit, expected", [(0xFF, 0, 0xFE), (0xFF, 4, 0xEF)])
def test_toggle_bit(byte, bit, expected):
    assert toggle_bit(byte, bit) == expected


@pytest.mark.parametrize("byte, bit, expected", [(0xFF, 5, 1), (0xAA, 3, 1), (0xAA, 4, 0)])
def test_get_bit(byte, bit, expected):
    assert get_bit(byte, bit) == expected


def test_format_binary_pins_known_patterns():
    assert format_binary(0xAA) == "0b10101010"
    assert format_binary(0x00) == "0b00000000"


@pytest.mark.parametrize("byte", [0x00, 0x01, 0x5A, 0xFF])
def test_format_binary_round_trip(byte):
    assert int(format_binary(byte), 2) == byte


@pytest.mark.parametrize("bit", range(8))
def test_toggle_bit_twice_restores(bit):
    assert toggle_bit(toggle_bit(0x3C, bit), bit) == 0x3C


@pytest.mark.parametrize("bit", range(8))
def test_set_then_get_and_clear_then_get(bit):
    assert get_bit(set_bit(0x00, bit), bit) == 1
    assert get_bit(clear_bit(0xFF, bit), bit) == 0


def test_negative_shift_rejected():
    with pytest.raises(ValueError):
        shift_left(0x01, -1)