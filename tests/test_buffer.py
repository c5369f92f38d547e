import pytest

from embkit.buffer import BufferEmptyError, BufferFullError, CircularBuffer


def test_initial_state():
    buf = CircularBuffer(200)
    assert buf.head == 0
    assert buf.tail == 0
    assert buf.is_empty() is True
    assert buf.is_full() is False


def test_write_single_byte_advances_head():
    buf = CircularBuffer(3)
    buf.write(0x23)
    assert buf.head == 1
    assert buf.is_empty() is False
    assert buf.read() == 0x23


def test_filling_buffer_sets_full_and_rolls_head():
    buf = CircularBuffer(3)
    for _ in range(3):
        buf.write(0x23)
    assert buf.is_full() is True
    assert buf.head == 0


def test_write_when_full_raises():
    buf = CircularBuffer(2)
    buf.write(1)
    buf.write(2)
    with pytest.raises(BufferFullError):
        buf.write(3)


def test_read_when_empty_raises():
    buf = CircularBuffer(4)
    with pytest.raises(BufferEmptyError):
        buf.read()


def test_drain_returns_values_in_order():
    values = [100, 120, 200, 201, 202, 255, 254, 253, 125]
    buf = CircularBuffer(200)
    for value in values:
        buf.write(value)
    assert list(buf.drain()) == values
    assert buf.is_empty() is True


def test_wraparound_preserves_order():
    buf = CircularBuffer(3)
    buf.write(1)
    buf.write(2)
    assert buf.read() == 1
    buf.write(3)
    buf.write(4)
    assert buf.is_full() is True
    assert list(buf.drain()) == [2, 3, 4]


def test_read_clears_full_flag():
    buf = CircularBuffer(2)
    buf.write(5)
    buf.write(6)
    buf.read()
    assert buf.is_full() is False
    assert buf.is_empty() is False


def test_out_of_range_byte_rejected():
    buf = CircularBuffer(2)
    with pytest.raises(ValueError):
        buf.write(256)
    with pytest.raises(ValueError):
        buf.write(-1)


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        CircularBuffer(0)