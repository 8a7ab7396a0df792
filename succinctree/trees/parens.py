"""Balanced-parenthesis bit vectors with rank, select and excess searches.

A one bit is an opening parenthesis and a zero bit a closing one. The vector
is split into blocks summarised by a :class:`~succinctree.trees.mmt.MinMaxTree`.
Forward and backward searches for a relative excess scan the starting block,
use the min-max tree to jump to the block holding the answer, and then scan
that block. Scans use the 8-bit lookup tables where they can.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import accumulate

from succinctree.trees.lookup import (
    LOOKUP_BLOCK_SIZE,
    process_block_bwd,
    process_block_fwd,
)
from succinctree.trees.mmt import MinMaxTree
from succinctree.trees.mmt_search import bwd_search as _mmt_bwd_search
from succinctree.trees.mmt_search import fwd_search as _mmt_fwd_search

DEFAULT_BLOCK_SIZE = 512

OPEN_PAREN = 1
CLOSE_PAREN = 0

_LOOKUP_MASK = (1 << LOOKUP_BLOCK_SIZE) - 1
_WORD_BYTES = 8


def _check_position(index: int) -> None:
    if index < 0:
        raise IndexError(f"position {index} must not be negative")


class ParenthesesVector:
    """An immutable parenthesis expression supporting excess queries.

    ``bits`` holds the expression; truthy values are opening parentheses.
    ``block_size`` is the number of bits summarised by each leaf of the
    min-max tree.
    """

    def __init__(self, bits: Iterable[int], block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        if block_size < 1:
            raise ValueError(f"block size must be positive, got {block_size}")
        self._block_size = block_size
        self._bits: list[int] = [OPEN_PAREN if bit else CLOSE_PAREN for bit in bits]
        self._prefix_ones: list[int] = list(accumulate(self._bits, initial=0))
        self._ones: list[int] = [i for i, bit in enumerate(self._bits) if bit]
        self._zeros: list[int] = [i for i, bit in enumerate(self._bits) if not bit]
        self._packed = int("".join(map(str, reversed(self._bits))) or "0", 2)
        self._min_max_tree = MinMaxTree.excess_tree(self._bits, block_size)

    @property
    def block_size(self) -> int:
        """Number of bits per min-max tree leaf."""
        return self._block_size

    def __len__(self) -> int:
        return len(self._bits)

    def __getitem__(self, index: int) -> int:
        return self._bits[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __repr__(self) -> str:
        text = "".join("(" if bit else ")" for bit in self._bits)
        return f"{type(self).__name__}({text!r}, block_size={self._block_size})"

    def get(self, index: int) -> int | None:
        """The bit at ``index``, or None if it is out of bounds."""
        if 0 <= index < len(self._bits):
            return self._bits[index]
        return None

    def rank1(self, index: int) -> int:
        """Number of ones before ``index``; positions past the end count all bits."""
        _check_position(index)
        return self._prefix_ones[min(index, len(self._bits))]

    def rank0(self, index: int) -> int:
        """Number of zeros before ``index``; positions past the end count all bits."""
        _check_position(index)
        index = min(index, len(self._bits))
        return index - self._prefix_ones[index]

    def select1(self, rank: int) -> int:
        """Position of the one bit with the given zero-based rank."""
        if not 0 <= rank < len(self._ones):
            raise IndexError(f"no one bit of rank {rank}")
        return self._ones[rank]

    def select0(self, rank: int) -> int:
        """Position of the zero bit with the given zero-based rank."""
        if not 0 <= rank < len(self._zeros):
            raise IndexError(f"no zero bit of rank {rank}")
        return self._zeros[rank]

    def iter1(self) -> Iterator[int]:
        """Positions of all one bits in ascending order."""
        return iter(self._ones)

    def iter0(self) -> Iterator[int]:
        """Positions of all zero bits in ascending order."""
        return iter(self._zeros)

    def _lookup_block(self, index: int) -> int:
        return (self._packed >> index) & _LOOKUP_MASK

    def _fwd_search_block(
        self, start_index: int, block_index: int, relative_excess: int
    ) -> tuple[int | None, int]:
        """Scan forward from after ``start_index`` to the end of the block.

        Returns the found position, or None and the excess still to be reached
        relative to the end of the block.
        """
        bits = self._bits
        block_boundary = min((block_index + 1) * self._block_size, len(bits))
        lookup_boundary = min(
            -(-(start_index + 1) // LOOKUP_BLOCK_SIZE) * LOOKUP_BLOCK_SIZE,
            block_boundary,
        )
        for i in range(start_index + 1, lookup_boundary):
            relative_excess -= 1 if bits[i] else -1
            if relative_excess == 0:
                return i, 0

        upper_lookup_boundary = max(
            lookup_boundary,
            (block_boundary // LOOKUP_BLOCK_SIZE) * LOOKUP_BLOCK_SIZE,
        )
        for i in range(lookup_boundary, upper_lookup_boundary, LOOKUP_BLOCK_SIZE):
            position, relative_excess = process_block_fwd(
                self._lookup_block(i), relative_excess
            )
            if position is not None:
                return i + position, 0

        for i in range(upper_lookup_boundary, block_boundary):
            relative_excess -= 1 if bits[i] else -1
            if relative_excess == 0:
                return i, 0

        return None, relative_excess

    def _bwd_search_block(
        self, start_index: int, block_index: int, relative_excess: int
    ) -> tuple[int | None, int]:
        """Scan backward from before ``start_index`` to the start of the block.

        Returns the found position, or None and the excess still to be reached
        relative to the start of the block.
        """
        bits = self._bits
        block_boundary = min(block_index * self._block_size, len(bits))
        lookup_boundary = max(
            ((start_index - 1) // LOOKUP_BLOCK_SIZE) * LOOKUP_BLOCK_SIZE,
            block_boundary,
        )
        for i in reversed(range(lookup_boundary, start_index)):
            relative_excess += 1 if bits[i] else -1
            if relative_excess == 0:
                return i, 0

        for i in reversed(range(block_boundary, lookup_boundary, LOOKUP_BLOCK_SIZE)):
            position, relative_excess = process_block_bwd(
                self._lookup_block(i), relative_excess
            )
            if position is not None:
                return i + position, 0

        return None, relative_excess

    def fwd_search(self, index: int, relative_excess: int) -> int | None:
        """First position after ``index`` whose excess relative to ``index`` is given.

        Returns None if there is no such position.
        """
        _check_position(index)
        if index >= len(self._bits) - 1:
            return None

        block_index = (index + 1) // self._block_size
        found, remaining = self._fwd_search_block(index, block_index, relative_excess)
        if found is not None:
            return found

        located = _mmt_fwd_search(self._min_max_tree, block_index, remaining)
        if located is None:
            return None
        block, remaining = located
        found, _ = self._fwd_search_block(block * self._block_size - 1, block, remaining)
        return found

    def bwd_search(self, index: int, relative_excess: int) -> int | None:
        """Last position before ``index`` whose excess relative to ``index`` is given.

        Returns None if there is no such position.
        """
        _check_position(index)
        if index >= len(self._bits) or index == 0:
            return None

        # start in the block of index - 1 so the search cannot report index itself
        block_index = (index - 1) // self._block_size
        found, remaining = self._bwd_search_block(index, block_index, relative_excess)
        if found is not None:
            return found

        located = _mmt_bwd_search(self._min_max_tree, block_index, remaining)
        if located is None:
            return None
        block, remaining = located
        found, _ = self._bwd_search_block((block + 1) * self._block_size, block, remaining)
        return found

    def close(self, index: int) -> int | None:
        """Position of the parenthesis closing the one opened at ``index``."""
        _check_position(index)
        if index >= len(self._bits):
            return None
        return self.fwd_search(index, -1)

    def open(self, index: int) -> int | None:
        """Position of the parenthesis opening the one closed at ``index``."""
        _check_position(index)
        if index >= len(self._bits):
            return None
        return self.bwd_search(index, -1)

    def enclose(self, index: int) -> int | None:
        """Position of the opening parenthesis enclosing ``index``."""
        _check_position(index)
        if index >= len(self._bits):
            return None
        return self.bwd_search(index, -1 if self._bits[index] else -2)

    def excess(self, index: int) -> int:
        """Opening minus closing parentheses up to and including ``index``."""
        if not 0 <= index < len(self._bits):
            raise IndexError(f"position {index} out of range for length {len(self._bits)}")
        return 2 * self._prefix_ones[index + 1] - (index + 1)

    def heap_size(self) -> int:
        """Approximate bytes used by the packed bits and the min-max tree."""
        packed_bytes = -(-len(self._bits) // 64) * _WORD_BYTES
        return packed_bytes + self._min_max_tree.heap_size()