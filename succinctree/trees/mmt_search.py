"""Block-level forward and backward excess searches on a min-max tree.

Both searches take the index of a leaf block (the first leaf is block 0) and
a relative excess. They locate the nearest other block that contains the
requested excess. The returned excess is relative to the edge of that block
from which it will be scanned. The starting block itself is never returned.
"""

from __future__ import annotations

from succinctree.trees.mmt import MinMaxTree


def _contains(tree: MinMaxTree, node: int, excess: int) -> bool:
    return tree.min_excess(node) <= excess <= tree.max_excess(node)


def _contains_bwd(tree: MinMaxTree, node: int, excess: int) -> bool:
    shifted = excess + tree.total_excess(node)
    return shifted == 0 or _contains(tree, node, shifted)


def _start_node(tree: MinMaxTree, begin: int) -> int | None:
    if len(tree) == 0 or begin < 0:
        return None
    node = begin + tree.first_leaf()
    return node if node < len(tree) else None


def _inconsistent(node: int) -> RuntimeError:
    return RuntimeError(f"min-max tree is inconsistent below node {node}")


def _fwd_downwards(tree: MinMaxTree, node: int, relative_excess: int) -> tuple[int, int]:
    while not tree.is_leaf(node):
        left = tree.left_child(node)
        if left is None:
            raise _inconsistent(node)
        if _contains(tree, left, relative_excess):
            node = left
            continue
        right = tree.right_child(node)
        relative_excess -= tree.total_excess(left)
        if right is None or not _contains(tree, right, relative_excess):
            raise _inconsistent(node)
        node = right
    return node, relative_excess


def _bwd_downwards(tree: MinMaxTree, node: int, relative_excess: int) -> tuple[int, int]:
    while not tree.is_leaf(node):
        right = tree.right_child(node)
        if right is None:
            raise _inconsistent(node)
        if _contains_bwd(tree, right, relative_excess):
            node = right
            continue
        left = tree.left_child(node)
        relative_excess += tree.total_excess(right)
        if left is None or not _contains_bwd(tree, left, relative_excess):
            raise _inconsistent(node)
        node = left
    return node, relative_excess


def fwd_search(tree: MinMaxTree, begin: int, relative_excess: int) -> tuple[int, int] | None:
    """Find the next block after leaf ``begin`` that reaches ``relative_excess``.

    ``relative_excess`` is measured from the end of block ``begin``. Returns
    the block index and the excess relative to the start of that block, or
    None if no later block reaches it.
    """
    node = _start_node(tree, begin)
    if node is None:
        return None

    while True:
        if tree.is_left_child(node):
            sibling = tree.right_sibling(node)
            if sibling is None:
                return None
            if _contains(tree, sibling, relative_excess):
                leaf, excess = _fwd_downwards(tree, sibling, relative_excess)
                return leaf - tree.first_leaf(), excess
            relative_excess -= tree.total_excess(sibling)
        parent = tree.parent(node)
        if not parent:
            return None
        node = parent


def bwd_search(tree: MinMaxTree, begin: int, relative_excess: int) -> tuple[int, int] | None:
    """Find the nearest block before leaf ``begin`` that reaches ``relative_excess``.

    ``relative_excess`` is measured from the start of block ``begin``. Returns
    the block index and the excess relative to the end of that block, or None
    if no earlier block reaches it.
    """
    node = _start_node(tree, begin)
    if node is None:
        return None

    while True:
        if not tree.is_left_child(node):
            sibling = tree.left_sibling(node)
            if sibling is None:
                return None
            if _contains_bwd(tree, sibling, relative_excess):
                leaf, excess = _bwd_downwards(tree, sibling, relative_excess)
                return leaf - tree.first_leaf(), excess
            relative_excess += tree.total_excess(sibling)
        parent = tree.parent(node)
        if not parent:
            return None
        node = parent