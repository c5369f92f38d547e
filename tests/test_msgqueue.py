import pytest

from embkit.msgqueue import Message, MessageQueue, QueueEmptyError, QueueFullError


def test_initial_state():
    queue = MessageQueue(10)
    assert queue.head == 0
    assert queue.tail == 0
    assert queue.is_full() is False
    assert queue.is_empty() is True
    assert len(queue) == 0


def test_write_single_message():
    queue = MessageQueue(10)
    queue.write(Message(msg=1, value=100))
    assert queue.capacity == 10
    assert queue.is_empty() is False
    assert len(queue) == 1


def test_fill_queue():
    queue = MessageQueue(3)
    queue.write(Message(1, 100))
    queue.write(Message(2, 200))
    queue.write(Message(3, 150))
    assert queue.capacity == 3
    assert queue.is_empty() is False
    assert queue.is_full() is True
    assert len(queue) == 3


def test_write_when_full_raises():
    queue = MessageQueue(1)
    queue.write(Message(1, 100))
    with pytest.raises(QueueFullError):
        queue.write(Message(2, 200))


def test_flush_resets_queue():
    queue = MessageQueue(3)
    queue.write(Message(1, 100))
    queue.write(Message(2, 200))
    queue.write(Message(3, 150))
    queue.flush()
    assert queue.is_empty() is True
    assert queue.is_full() is False
    assert queue.head == 0
    assert queue.tail == 0
    with pytest.raises(QueueEmptyError):
        queue.read()


def test_read_order_matches_write_order():
    queue = MessageQueue(10)
    written = [Message(1, 100), Message(2, 200), Message(3, 255)]
    for message in written:
        queue.write(message)
    read = []
    while not queue.is_empty():
        read.append(queue.read())
    assert read == written


def test_read_when_empty_raises():
    queue = MessageQueue(4)
    with pytest.raises(QueueEmptyError):
        queue.read()


def test_written_item_is_copied():
    queue = MessageQueue(2)
    payload = {"msg": 1}
    queue.write(payload)
    payload["msg"] = 2
    assert queue.read() == {"msg": 1}


def test_wraparound_length_and_order():
    queue = MessageQueue(3)
    queue.write("a")
    queue.write("b")
    assert queue.read() == "a"
    queue.write("c")
    queue.write("d")
    assert len(queue) == 3
    assert [queue.read() for _ in range(3)] == ["b", "c", "d"]


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        MessageQueue(0)