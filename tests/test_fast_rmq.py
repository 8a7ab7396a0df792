import random

import pytest

from succinctree.rmq.fast_rmq import BLOCK_SIZE, FastRmq, SmallBitVector


@pytest.fixture
def small_bit_vector():
    sbv = SmallBitVector()
    sbv.set_bit(1)
    sbv.set_bit(3)
    sbv.set_bit(64)
    sbv.set_bit(65)
    return sbv


def test_small_bit_vector_rank0(small_bit_vector):
    sbv = small_bit_vector
    assert sbv.rank0(0) == 0
    assert sbv.rank0(1) == 1
    assert sbv.rank0(2) == 1
    assert sbv.rank0(3) == 2
    assert sbv.rank0(4) == 2

    assert sbv.rank0(64) == 62
    assert sbv.rank0(65) == 62
    assert sbv.rank0(66) == 62
    assert sbv.rank0(67) == 63


def test_small_bit_vector_select0(small_bit_vector):
    sbv = small_bit_vector
    assert sbv.select0(0) == 0
    assert sbv.select0(1) == 2
    assert sbv.select0(2) == 4
    assert sbv.select0(3) == 5
    assert sbv.select0(64) == 68


def test_small_bit_vector_full_rank(small_bit_vector):
    assert small_bit_vector.rank0(128) == 124


def test_small_bit_vector_set_bit_out_of_range():
    sbv = SmallBitVector()
    with pytest.raises(IndexError):
        sbv.set_bit(128)


def test_fast_rmq_sorted():
    length = 2 * BLOCK_SIZE
    rmq = FastRmq(range(length))

    for i in range(length):
        for j in range(i, length):
            assert rmq.range_min(i, j) == i, (i, j)


def test_fast_rmq_unsorted():
    rng = random.Random(11)
    length = 2 * BLOCK_SIZE
    numbers = [rng.getrandbits(64) for _ in range(length)]
    rmq = FastRmq(numbers)

    for i in range(length):
        current = numbers[i]
        for j in range(i, length):
            current = min(current, numbers[j])
            assert numbers[rmq.range_min(i, j)] == current, (i, j)


def test_fast_rmq_many_blocks_with_duplicates():
    rng = random.Random(3)
    numbers = [rng.randrange(5) for _ in range(5 * BLOCK_SIZE + 17)]
    rmq = FastRmq(numbers)

    for _ in range(2000):
        i = rng.randrange(len(numbers))
        j = rng.randrange(i, len(numbers))
        result = rmq.range_min(i, j)
        assert i <= result <= j
        assert numbers[result] == min(numbers[i:j + 1]), (i, j)


def test_documented_example():
    rmq = FastRmq([4, 10, 3, 11, 2, 12])
    assert rmq.range_min(0, 1) == 0
    assert rmq.range_min(0, 2) == 2
    assert rmq.range_min(0, 3) == 2


def test_iter():
    rmq = FastRmq([1, 2, 3, 4, 5])
    it = iter(rmq)
    assert next(it) == 1
    assert next(it) == 2
    assert next(it) == 3
    assert next(it) == 4
    assert next(it) == 5
    with pytest.raises(StopIteration):
        next(it)


def test_indexing_and_len():
    rmq = FastRmq([9, 8, 7])
    assert len(rmq) == 3
    assert rmq[1] == 8
    assert list(rmq) == [9, 8, 7]


def test_range_operators():
    rmq = FastRmq([5, 4, 3, 2, 1])
    assert rmq.range_min(0, 3) == 3
    assert rmq.range_min_with_range(range(0, 3)) == 2
    assert rmq.range_min_with_range(range(0, 4)) == 3
    assert rmq.range_min_with_range(slice(None)) == 4


def test_empty_rmq():
    rmq = FastRmq([])
    assert len(rmq) == 0
    with pytest.raises(IndexError):
        rmq.range_min(0, 0)
    with pytest.raises(ValueError):
        rmq.range_min_with_range(range(0, 1))


def test_invalid_queries():
    rmq = FastRmq([1, 2, 3])
    with pytest.raises(IndexError):
        rmq.range_min(0, 5)
    with pytest.raises(ValueError):
        rmq.range_min(2, 0)


def test_heap_size():
    assert FastRmq([]).heap_size() == 0
    assert FastRmq([5, 4, 3, 2, 1]).heap_size() == 85