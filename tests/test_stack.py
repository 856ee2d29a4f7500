import pytest

from dsalab.stack import Stack, StackOverflow, StackUnderflow


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty()
    assert not stack.is_full()
    assert len(stack) == 0
    assert stack.peek() == -1


def test_push_pop_lifo():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


def test_peek_tracks_top_index():
    stack = Stack()
    stack.push(42)
    assert stack.peek() == 0
    stack.push(43)
    assert stack.peek() == 1
    stack.pop()
    assert stack.peek() == 0


def test_default_capacity_is_ten():
    stack = Stack()
    for value in range(10):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(StackOverflow):
        stack.push(10)
    assert len(stack) == 10


def test_pop_empty_raises():
    with pytest.raises(StackUnderflow):
        Stack().pop()


def test_iteration_bottom_to_top():
    stack = Stack(capacity=4)
    for value in (5, 6, 7):
        stack.push(value)
    assert list(stack) == [5, 6, 7]


def test_overflow_leaves_stack_intact():
    stack = Stack(capacity=2)
    stack.push("a")
    stack.push("b")
    with pytest.raises(StackOverflow):
        stack.push("c")
    assert list(stack) == ["a", "b"]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Stack(capacity=0)