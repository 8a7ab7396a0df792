"""Fast, quasi-succinct range minimum queries.

The data is split into blocks of 128 elements. Each block keeps two small
bit vectors marking its prefix and suffix minima, and the block minima are
indexed with a :class:`~succinctree.rmq.binary_rmq.BinaryRmq`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from succinctree.rmq.binary_rmq import BinaryRmq, _check_query, _inclusive_bounds

BLOCK_SIZE = 128

_MAX_LEN = 1 << 40
_SMALL_MASK = (1 << BLOCK_SIZE) - 1
_WORD_BYTES = 8
_BLOCK_BYTES = 32


@dataclass
class SmallBitVector:
    """A 128-bit vector supporting rank0 and select0."""

    bits: int = 0

    def rank0(self, i: int) -> int:
        """Number of zero bits among the first ``i`` bits."""
        if not 0 <= i <= BLOCK_SIZE:
            raise IndexError(f"rank position {i} out of range")
        mask = (1 << i) - 1
        return (~self.bits & mask).bit_count()

    def select0(self, rank: int) -> int:
        """Position of the zero bit with the given rank, or 128 if there is none."""
        zeros = ~self.bits & _SMALL_MASK
        for _ in range(rank):
            zeros &= zeros - 1
            if not zeros:
                return BLOCK_SIZE
        if not zeros:
            return BLOCK_SIZE
        return (zeros & -zeros).bit_length() - 1

    def set_bit(self, i: int) -> None:
        """Set bit ``i`` to one."""
        if not 0 <= i < BLOCK_SIZE:
            raise IndexError(f"bit position {i} out of range")
        self.bits |= 1 << i


@dataclass
class _Block:
    prefix_minima: SmallBitVector = field(default_factory=SmallBitVector)
    suffix_minima: SmallBitVector = field(default_factory=SmallBitVector)


def _build_block(block: list[int]) -> tuple[_Block, int]:
    """Summarise one block; returns the block and the offset of its minimum."""
    summary = _Block()

    prefix_minimum = block[0]
    minimum_index = 0
    for i, elem in enumerate(block[1:], 1):
        if elem < prefix_minimum:
            prefix_minimum = elem
            minimum_index = i
        else:
            summary.prefix_minima.set_bit(i)

    suffix_minimum = block[-1]
    for offset, elem in enumerate(reversed(block[:-1]), 1):
        if elem < suffix_minimum:
            suffix_minimum = elem
        else:
            summary.suffix_minima.set_bit(offset)

    return summary, minimum_index


class FastRmq:
    """Constant-time range minimum queries with a small space overhead.

    Handles fewer than ``2**40`` elements.
    """

    def __init__(self, data: Iterable[int]) -> None:
        self._data = list(data)
        if len(self._data) >= _MAX_LEN:
            raise ValueError("input too large for fast rmq")

        block_minima: list[int] = []
        self._block_min_indices: list[int] = []
        self._blocks: list[_Block] = []
        for start in range(0, len(self._data), BLOCK_SIZE):
            block = self._data[start:start + BLOCK_SIZE]
            summary, minimum_index = _build_block(block)
            block_minima.append(block[minimum_index])
            self._block_min_indices.append(minimum_index)
            self._blocks.append(summary)

        self._block_minima = BinaryRmq(block_minima)

    def _argmin(self, a: int, b: int) -> int:
        return a if self._data[a] <= self._data[b] else b

    def range_min(self, i: int, j: int) -> int:
        """Return the index of the minimum element in the inclusive range ``[i, j]``."""
        _check_query(i, j, len(self._data))
        block_i, offset_i = divmod(i, BLOCK_SIZE)
        block_j, offset_j = divmod(j, BLOCK_SIZE)

        if block_i == block_j:
            block = self._blocks[block_i]
            rank_i_prefix = block.prefix_minima.rank0(offset_i + 1)
            rank_j_prefix = block.prefix_minima.rank0(offset_j + 1)
            if rank_j_prefix > rank_i_prefix:
                return block_i * BLOCK_SIZE + block.prefix_minima.select0(rank_j_prefix - 1)

            rank_i_suffix = block.suffix_minima.rank0(BLOCK_SIZE - offset_i)
            rank_j_suffix = block.suffix_minima.rank0(BLOCK_SIZE - offset_j)
            if rank_j_suffix > rank_i_suffix:
                return (block_i + 1) * BLOCK_SIZE - block.suffix_minima.select0(
                    rank_j_suffix - 1
                )

            return min(range(i, j + 1), key=self._data.__getitem__)

        suffix = self._blocks[block_i].suffix_minima
        partial_i_min = (
            (block_i + 1) * BLOCK_SIZE
            - suffix.select0(suffix.rank0(BLOCK_SIZE - offset_i) - 1)
            - 1
        )

        prefix = self._blocks[block_j].prefix_minima
        partial_j_min = block_j * BLOCK_SIZE + prefix.select0(prefix.rank0(offset_j + 1) - 1)

        best = self._argmin(partial_i_min, partial_j_min)
        if block_i + 1 < block_j:
            min_block = self._block_minima.range_min(block_i + 1, block_j - 1)
            min_block_index = min_block * BLOCK_SIZE + self._block_min_indices[min_block]
            best = self._argmin(best, min_block_index)
        return best

    def range_min_with_range(self, rng: range | slice) -> int:
        """Like :meth:`range_min`, for a half-open ``range`` or ``slice``.

        The bounds are clamped to the sequence, so only an empty structure
        raises.
        """
        start, end = _inclusive_bounds(rng, len(self._data))
        return self.range_min(start, end)

    def heap_size(self) -> int:
        """Bytes used by the data and the supporting structures."""
        return (
            len(self._data) * _WORD_BYTES
            + self._block_minima.heap_size()
            + len(self._block_min_indices)
            + len(self._blocks) * _BLOCK_BYTES
        )

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"