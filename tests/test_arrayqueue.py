import pytest

from schedkit.arrayqueue import DEFAULT_QUEUE_CAPACITY, ArrayQueue


def test_default_capacity_is_fifty():
    assert ArrayQueue().capacity == 50
    assert ArrayQueue(0).capacity == DEFAULT_QUEUE_CAPACITY
    assert ArrayQueue(-3).capacity == DEFAULT_QUEUE_CAPACITY


def test_explicit_capacity_is_kept():
    assert ArrayQueue(7).capacity == 7


def test_fifo_order():
    queue = ArrayQueue()
    for value in ["a", "b", "c"]:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == ["a", "b", "c"]
    assert queue.is_empty()


def test_front_does_not_remove():
    queue = ArrayQueue()
    queue.enqueue(10)
    queue.enqueue(20)
    assert queue.front() == 10
    assert len(queue) == 2
    assert queue.dequeue() == 10
    assert queue.front() == 20


def test_empty_queue_raises():
    queue = ArrayQueue()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.front()


def test_growth_keeps_order_and_doubles_capacity():
    queue = ArrayQueue(2)
    values = list(range(5))
    for value in values:
        queue.enqueue(value)
    assert queue.to_list() == values
    assert queue.capacity >= len(values)
    assert queue.capacity % 2 == 0


def test_wraparound_after_mixed_operations():
    queue = ArrayQueue(3)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    queue.enqueue(3)
    queue.enqueue(4)
    queue.enqueue(5)
    assert queue.to_list() == [2, 3, 4, 5]


def test_clear_releases_each_element_in_order():
    released = []
    queue = ArrayQueue(0, released.append)
    for value in ["x", "y", "z"]:
        queue.enqueue(value)
    queue.clear()
    assert released == ["x", "y", "z"]
    assert len(queue) == 0


def test_dequeue_does_not_release():
    released = []
    queue = ArrayQueue(0, released.append)
    queue.enqueue("x")
    assert queue.dequeue() == "x"
    queue.clear()
    assert released == []


def test_create_makes_empty_queue_sharing_release_function():
    released = []
    queue = ArrayQueue(4, released.append)
    queue.enqueue("kept")
    fresh = queue.create()
    assert fresh.is_empty()
    assert fresh.capacity == DEFAULT_QUEUE_CAPACITY
    fresh.enqueue("gone")
    fresh.clear()
    assert released == ["gone"]
    assert queue.to_list() == ["kept"]


def test_iteration_is_a_snapshot():
    queue = ArrayQueue()
    queue.enqueue(1)
    queue.enqueue(2)
    iterator = iter(queue)
    queue.enqueue(3)
    assert list(iterator) == [1, 2]
    assert list(queue) == [1, 2, 3]


def test_iterator_has_next():
    queue = ArrayQueue()
    queue.enqueue("only")
    iterator = iter(queue)
    assert iterator.has_next()
    assert next(iterator) == "only"
    assert not iterator.has_next()


def test_empty_to_list():
    assert ArrayQueue().to_list() == []