import random

import pytest

from schedkit.prioqueue import HeapPrioQueue


def int_cmp(a, b):
    return (a > b) - (a < b)


def test_remove_min_yields_ascending_priorities():
    pq = HeapPrioQueue(int_cmp)
    priorities = [5, 3, 9, 1, 7, 2, 8]
    for p in priorities:
        pq.insert(p, f"v{p}")
    out = [pq.remove_min() for _ in priorities]
    assert [p for p, _ in out] == sorted(priorities)
    assert all(v == f"v{p}" for p, v in out)
    assert pq.is_empty()


def test_equal_priorities_leave_in_insertion_order():
    pq = HeapPrioQueue(int_cmp)
    for name in ["first", "second", "third"]:
        pq.insert(1, name)
    pq.insert(0, "zero")
    assert pq.to_list() == ["zero", "first", "second", "third"]
    assert [pq.remove_min()[1] for _ in range(4)] == ["zero", "first", "second", "third"]


def test_min_does_not_remove():
    pq = HeapPrioQueue(int_cmp)
    pq.insert(4, "d")
    pq.insert(2, "b")
    assert pq.min() == (2, "b")
    assert len(pq) == 2


def test_empty_queue_raises():
    pq = HeapPrioQueue(int_cmp)
    with pytest.raises(IndexError):
        pq.min()
    with pytest.raises(IndexError):
        pq.remove_min()


def test_reverse_comparator_gives_max_first():
    pq = HeapPrioQueue(lambda a, b: int_cmp(b, a))
    for p in [1, 4, 2]:
        pq.insert(p, p)
    assert pq.to_list() == [4, 2, 1]


def test_to_list_and_iteration_do_not_consume():
    pq = HeapPrioQueue(int_cmp)
    for p in [3, 1, 2]:
        pq.insert(p, p * 10)
    assert list(pq) == pq.to_list()
    assert len(pq) == 3
    assert pq.min() == (1, 10)


def test_clear_releases_priorities_and_values():
    prios, values = [], []
    pq = HeapPrioQueue(int_cmp, prios.append, values.append)
    pq.insert(2, "b")
    pq.insert(1, "a")
    pq.clear()
    assert sorted(prios) == [1, 2]
    assert sorted(values) == ["a", "b"]
    assert pq.is_empty()


def test_create_shares_functions_but_not_contents():
    values = []
    pq = HeapPrioQueue(int_cmp, free_value=values.append)
    pq.insert(1, "kept")
    fresh = pq.create()
    assert len(fresh) == 0
    assert fresh.cmp is pq.cmp
    fresh.insert(1, "gone")
    fresh.clear()
    assert values == ["gone"]
    assert pq.to_list() == ["kept"]


def test_many_random_inserts_match_stable_sort():
    rng = random.Random(1234)
    pq = HeapPrioQueue(int_cmp)
    items = [(rng.randrange(10), i) for i in range(200)]
    for p, i in items:
        pq.insert(p, i)
    expected = [i for _, i in sorted(items, key=lambda pair: pair[0])]
    assert pq.to_list() == expected
    assert [pq.remove_min()[1] for _ in items] == expected