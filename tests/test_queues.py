import pytest

from dsalab.queues import CircularQueue, LinearQueue, QueueOverflow, QueueUnderflow


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_new_queue_empty(cls):
    queue = cls()
    assert queue.is_empty()
    assert not queue.is_full()
    assert list(queue) == []


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_fifo_order(cls):
    queue = cls()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert list(queue) == [1, 2, 3]
    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [1, 2, 3]
    assert queue.is_empty()


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_default_capacity_three(cls):
    queue = cls()
    for value in range(3):
        queue.enqueue(value)
    assert queue.is_full()
    with pytest.raises(QueueOverflow):
        queue.enqueue(99)
    assert list(queue) == [0, 1, 2]


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_dequeue_empty_raises(cls):
    with pytest.raises(QueueUnderflow):
        cls().dequeue()


def test_linear_queue_does_not_reuse_front_space():
    queue = LinearQueue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    assert queue.is_full()
    with pytest.raises(QueueOverflow):
        queue.enqueue(4)
    assert list(queue) == [2, 3]


def test_linear_queue_resets_when_drained():
    queue = LinearQueue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    for _ in range(3):
        queue.dequeue()
    queue.enqueue(7)
    assert list(queue) == [7]
    assert not queue.is_full()


def test_circular_queue_wraps():
    queue = CircularQueue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert queue.is_full()
    assert list(queue) == [2, 3, 4]
    assert [queue.dequeue() for _ in range(3)] == [2, 3, 4]
    assert queue.is_empty()


def test_circular_queue_long_run_keeps_order():
    queue = CircularQueue(capacity=4)
    produced = list(range(20))
    consumed = []
    for value in produced:
        if queue.is_full():
            consumed.append(queue.dequeue())
        queue.enqueue(value)
    while not queue.is_empty():
        consumed.append(queue.dequeue())
    assert consumed == produced


def test_capacity_one_circular():
    queue = CircularQueue(capacity=1)
    queue.enqueue("x")
    assert queue.is_full()
    assert queue.dequeue() == "x"
    assert queue.is_empty()


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_invalid_capacity(cls):
    with pytest.raises(ValueError):
        cls(capacity=0)