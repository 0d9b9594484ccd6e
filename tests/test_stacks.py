import pytest

from dslab.stacks import LinkedStack, TwinStack


def _stack(*values):
    stack = LinkedStack()
    for value in values:
        stack.push(value)
    return stack


def test_push_pop_is_last_in_first_out():
    stack = _stack(10, 20, 30)
    assert stack.pop() == 30
    assert stack.peek() == 20
    assert list(stack) == [20, 10]
    assert len(stack) == 2


def test_str_lists_from_top():
    assert str(_stack(10, 20, 30)) == "30 -> 20 -> 10 -> NULL"
    assert str(LinkedStack()) == "NULL"


def test_peek_does_not_remove():
    stack = _stack(5)
    assert stack.peek() == stack.peek() == 5
    assert len(stack) == 1


def test_empty_stack_raises():
    stack = LinkedStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_pop_all_reverses_push_order():
    values = [3, 1, 4, 1, 5]
    stack = _stack(*values)
    assert [stack.pop() for _ in values] == values[::-1]
    assert len(stack) == 0


def test_twin_stack_source_example():
    twin = TwinStack()
    twin.push(1, 10)
    twin.push(1, 20)
    twin.push(2, 30)
    twin.push(2, 40)
    assert twin.pop(1) == 20
    assert twin.pop(2) == 40


def test_twin_stacks_are_independent():
    twin = TwinStack(10)
    for value in (1, 2, 3):
        twin.push(1, value)
    for value in (7, 8):
        twin.push(2, value)
    assert [twin.pop(2), twin.pop(2)] == [8, 7]
    assert [twin.pop(1), twin.pop(1), twin.pop(1)] == [3, 2, 1]


def test_twin_stack_overflow_shares_space():
    twin = TwinStack(4)
    for value in range(4):
        twin.push(1, value)
    with pytest.raises(OverflowError):
        twin.push(2, 99)
    with pytest.raises(OverflowError):
        twin.push(1, 99)
    assert twin.pop(1) == 3
    twin.push(2, 99)
    assert twin.pop(2) == 99


def test_twin_stack_underflow():
    twin = TwinStack(4)
    with pytest.raises(IndexError):
        twin.pop(1)
    with pytest.raises(IndexError):
        twin.pop(2)


def test_twin_stack_rejects_unknown_stack():
    twin = TwinStack(4)
    with pytest.raises(ValueError):
        twin.push(3, 1)
    with pytest.raises(ValueError):
        twin.pop(0)