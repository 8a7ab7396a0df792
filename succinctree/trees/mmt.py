"""Min-max tree over the excess of a parenthesis expression.

The tree is a complete binary tree stored linearly. Each leaf summarises one
block of the parenthesis expression by its total, minimum and maximum
relative excess, and each inner node combines the summaries of its children.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_NODE_BYTES = 24


def _next_power_of_two(n: int) -> int:
    """Smallest power of two that is at least ``n`` (1 for ``n <= 1``)."""
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


@dataclass(frozen=True)
class ExcessNode:
    """Excess summary of the range ``[l, r]`` covered by one tree node."""

    total: int = 0
    min: int = 0
    max: int = 0

    def combine(self, right: ExcessNode) -> ExcessNode:
        """Summary of this node's range followed by ``right``'s range."""
        return ExcessNode(
            total=self.total + right.total,
            min=min(self.min, self.total + right.min),
            max=max(self.max, self.total + right.max),
        )


def _summarise(block: list[int]) -> ExcessNode:
    total = 0
    lowest = None
    highest = None
    for bit in block:
        total += 1 if bit else -1
        lowest = total if lowest is None else min(lowest, total)
        highest = total if highest is None else max(highest, total)
    return ExcessNode(total=total, min=lowest, max=highest)


class MinMaxTree:
    """A complete binary tree of excess summaries, stored in an array."""

    def __init__(self, nodes: Iterable[ExcessNode] = ()) -> None:
        self._nodes: list[ExcessNode] = list(nodes)

    @classmethod
    def excess_tree(cls, bits: Iterable[int], block_size: int) -> MinMaxTree:
        """Build the tree for a parenthesis expression split into blocks.

        ``bits`` holds the expression, with truthy values for opening and
        falsy values for closing parentheses.
        """
        if block_size < 1:
            raise ValueError(f"block size must be positive, got {block_size}")
        bit_list = list(bits)
        if not bit_list:
            return cls()

        num_leaves = -(-len(bit_list) // block_size)
        num_internal = max(1, (1 << (num_leaves - 1).bit_length()) - 1)

        nodes = [ExcessNode()] * num_internal
        nodes.extend(
            _summarise(bit_list[start:start + block_size])
            for start in range(0, len(bit_list), block_size)
        )

        level_size = max(1, _next_power_of_two(num_leaves) // 2)
        level_start = num_internal - level_size
        while True:
            for node in range(level_start, level_start + level_size):
                left = node * 2 + 1
                right = node * 2 + 2
                if left < len(nodes):
                    if right < len(nodes):
                        nodes[node] = nodes[left].combine(nodes[right])
                    else:
                        nodes[node] = nodes[left]
            if level_size == 1:
                break
            level_size //= 2
            level_start -= level_size

        return cls(nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._nodes!r})"

    def node(self, index: int) -> ExcessNode:
        """The summary stored at ``index``."""
        if not 0 <= index < len(self._nodes):
            raise IndexError(f"node index {index} out of range")
        return self._nodes[index]

    def total_excess(self, index: int) -> int:
        """Total excess of the node at ``index``."""
        return self.node(index).total

    def min_excess(self, index: int) -> int:
        """Minimum relative excess of the node at ``index``."""
        return self.node(index).min

    def max_excess(self, index: int) -> int:
        """Maximum relative excess of the node at ``index``."""
        return self.node(index).max

    def parent(self, index: int) -> int | None:
        """Index of the parent of ``index``, or None for the root or a missing node."""
        if 0 < index < len(self._nodes):
            return (index - 1) // 2
        return None

    def left_child(self, index: int) -> int | None:
        """Index of the left child of ``index`` if it exists."""
        child = index * 2 + 1
        return child if child < len(self._nodes) else None

    def right_child(self, index: int) -> int | None:
        """Index of the right child of ``index`` if it exists."""
        child = index * 2 + 2
        return child if child < len(self._nodes) else None

    def right_sibling(self, index: int) -> int | None:
        """Index of the right sibling of ``index`` if it exists."""
        if index % 2 == 1 and index + 1 < len(self._nodes):
            return index + 1
        return None

    def left_sibling(self, index: int) -> int | None:
        """Index of the left sibling of ``index`` if it exists."""
        if index > 0 and index % 2 == 0:
            return index - 1
        return None

    def is_left_child(self, index: int) -> bool:
        """Whether ``index`` is, or would be, a left child."""
        return index % 2 == 1

    def first_leaf(self) -> int:
        """Index of the first node in the last level of the tree."""
        if not self._nodes:
            raise ValueError("an empty tree has no leaves")
        if len(self._nodes) == 2:
            return 1
        return _next_power_of_two(-(-len(self._nodes) // 2)) - 1

    def is_leaf(self, index: int) -> bool:
        """Whether ``index`` lies in the last level of the tree."""
        return index >= self.first_leaf()

    def heap_size(self) -> int:
        """Bytes used by the stored nodes."""
        return len(self._nodes) * _NODE_BYTES