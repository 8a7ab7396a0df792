import random

import pytest

from succinctree.rmq.binary_rmq import BinaryRmq


def test_small():
    rmq = BinaryRmq([9, 6, 10, 4, 0, 8, 3, 7, 1, 2, 5])

    assert rmq.range_min(0, 0) == 0
    assert rmq.range_min(0, 1) == 1
    assert rmq.range_min(0, 2) == 1
    assert rmq.range_min(0, 3) == 3
    assert rmq.range_min(5, 8) == 8
    assert rmq.range_min(5, 9) == 8
    assert rmq.range_min(9, 10) == 9
    assert rmq.range_min(0, 10) == 4


def test_documented_example():
    rmq = BinaryRmq([4, 10, 3, 11, 2, 12])
    assert rmq.range_min(0, 1) == 0
    assert rmq.range_min(0, 2) == 2
    assert rmq.range_min(0, 3) == 2


def test_randomized():
    rng = random.Random(7)
    length = 100
    numbers = [rng.getrandbits(64) for _ in range(length)]
    rmq = BinaryRmq(numbers)

    for i in range(length):
        current = numbers[i]
        for j in range(i, length):
            current = min(current, numbers[j])
            assert numbers[rmq.range_min(i, j)] == current, (i, j)


def test_from_generator():
    rmq = BinaryRmq(x for x in [3, 1, 2])
    assert rmq.range_min(0, 2) == 1
    assert len(rmq) == 3


def test_iter():
    rmq = BinaryRmq([1, 2, 3, 4, 5])
    it = iter(rmq)
    assert next(it) == 1
    assert next(it) == 2
    assert next(it) == 3
    assert next(it) == 4
    assert next(it) == 5
    with pytest.raises(StopIteration):
        next(it)


def test_indexing():
    rmq = BinaryRmq([7, 8, 9])
    assert rmq[0] == 7
    assert rmq[2] == 9
    assert list(rmq) == [7, 8, 9]


def test_range_operators():
    rmq = BinaryRmq([5, 4, 3, 2, 1])
    assert rmq.range_min(0, 3) == 3
    assert rmq.range_min_with_range(range(0, 3)) == 2
    assert rmq.range_min_with_range(range(0, 4)) == 3
    assert rmq.range_min_with_range(slice(None)) == 4
    assert rmq.range_min_with_range(range(2, 100)) == 4


def test_range_with_step_rejected():
    rmq = BinaryRmq([5, 4, 3, 2, 1])
    with pytest.raises(ValueError):
        rmq.range_min_with_range(range(0, 4, 2))


def test_empty_rmq():
    rmq = BinaryRmq([])
    assert len(rmq) == 0
    with pytest.raises(IndexError):
        rmq.range_min(0, 0)
    with pytest.raises(ValueError):
        rmq.range_min_with_range(range(0, 1))


def test_invalid_queries():
    rmq = BinaryRmq([1, 2, 3])
    with pytest.raises(IndexError):
        rmq.range_min(0, 3)
    with pytest.raises(ValueError):
        rmq.range_min(2, 1)


def test_single_element():
    rmq = BinaryRmq([42])
    assert rmq.range_min(0, 0) == 0


def test_heap_size():
    assert BinaryRmq([5, 4, 3, 2, 1]).heap_size() == 120
    assert BinaryRmq([]).heap_size() == 0