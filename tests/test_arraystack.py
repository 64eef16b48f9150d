import pytest

from schedkit.arraystack import DEFAULT_STACK_CAPACITY, ArrayStack


def test_default_capacity_is_fifty():
    assert ArrayStack().capacity == 50
    assert ArrayStack(0).capacity == DEFAULT_STACK_CAPACITY
    assert ArrayStack(-1).capacity == DEFAULT_STACK_CAPACITY


def test_lifo_order():
    stack = ArrayStack()
    for value in ["a", "b", "c"]:
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]
    assert stack.is_empty()


def test_peek_does_not_remove():
    stack = ArrayStack()
    stack.push(1)
    stack.push(2)
    assert stack.peek() == 2
    assert len(stack) == 2


def test_empty_stack_raises():
    stack = ArrayStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_growth_keeps_all_elements():
    stack = ArrayStack(1)
    values = list(range(6))
    for value in values:
        stack.push(value)
    assert stack.to_list() == values[::-1]
    assert stack.capacity >= len(values)


def test_to_list_is_top_first():
    stack = ArrayStack()
    stack.push("bottom")
    stack.push("top")
    assert stack.to_list() == ["top", "bottom"]


def test_clear_releases_each_element():
    released = []
    stack = ArrayStack(0, released.append)
    for value in ["x", "y"]:
        stack.push(value)
    stack.clear()
    assert sorted(released) == ["x", "y"]
    assert len(stack) == 0


def test_pop_does_not_release():
    released = []
    stack = ArrayStack(0, released.append)
    stack.push("x")
    assert stack.pop() == "x"
    stack.clear()
    assert released == []


def test_create_makes_empty_stack_sharing_release_function():
    released = []
    stack = ArrayStack(3, released.append)
    stack.push("kept")
    fresh = stack.create()
    assert fresh.is_empty()
    assert fresh.capacity == DEFAULT_STACK_CAPACITY
    fresh.push("gone")
    fresh.clear()
    assert released == ["gone"]
    assert stack.to_list() == ["kept"]


def test_iteration_is_a_snapshot_top_first():
    stack = ArrayStack()
    stack.push(1)
    stack.push(2)
    iterator = iter(stack)
    stack.push(3)
    assert list(iterator) == [2, 1]
    assert list(stack) == [3, 2, 1]


def test_iterator_has_next():
    stack = ArrayStack()
    iterator = iter(stack)
    assert not iterator.has_next()
    with pytest.raises(StopIteration):
        next(iterator)