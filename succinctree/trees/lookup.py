"""Lookup tables for excess queries on 8-bit blocks of parentheses.

A block holds eight parentheses as the bits of an integer in ``range(256)``.
The least significant bit comes first, and a one bit is an opening
parenthesis. For every possible block the tables hold the minimum and
maximum prefix excess. They also hold the first position at which each
reachable relative excess is hit, scanning forward and backward.
"""

from __future__ import annotations

LOOKUP_BLOCK_SIZE = 8

_BLOCK_VALUES = 1 << LOOKUP_BLOCK_SIZE


def _step(block: int, position: int) -> int:
    return 1 if (block >> position) & 1 else -1


def _forward_table(block: int) -> dict[int, int]:
    """Map each prefix excess to the first position where it is reached."""
    first: dict[int, int] = {}
    excess = 0
    for position in range(LOOKUP_BLOCK_SIZE):
        excess += _step(block, position)
        first.setdefault(excess, position)
    return first


def _backward_table(block: int) -> dict[int, int]:
    """Map each negated suffix excess to the last position where it is reached."""
    first: dict[int, int] = {}
    excess = 0
    for position in reversed(range(LOOKUP_BLOCK_SIZE)):
        excess -= _step(block, position)
        first.setdefault(excess, position)
    return first


_FWD = tuple(_forward_table(block) for block in range(_BLOCK_VALUES))
_BWD = tuple(_backward_table(block) for block in range(_BLOCK_VALUES))
_MIN = tuple(min(table) for table in _FWD)
_MAX = tuple(max(table) for table in _FWD)
_TOTAL = tuple(2 * block.bit_count() - LOOKUP_BLOCK_SIZE for block in range(_BLOCK_VALUES))


def _check_block(block: int) -> None:
    if not 0 <= block < _BLOCK_VALUES:
        raise ValueError(f"block {block} is not an {LOOKUP_BLOCK_SIZE}-bit value")


def block_total_excess(block: int) -> int:
    """Opening minus closing parentheses in ``block``."""
    _check_block(block)
    return _TOTAL[block]


def block_min_excess(block: int) -> int:
    """Smallest prefix excess reached within ``block``."""
    _check_block(block)
    return _MIN[block]


def block_max_excess(block: int) -> int:
    """Largest prefix excess reached within ``block``."""
    _check_block(block)
    return _MAX[block]


def process_block_fwd(block: int, relative_excess: int) -> tuple[int | None, int]:
    """Scan ``block`` forward for the first position reaching ``relative_excess``.

    Returns ``(position, 0)`` on a hit. On a miss it returns ``(None, rest)``,
    where ``rest`` is the excess still to be reached, measured from the end of
    the block.
    """
    _check_block(block)
    position = _FWD[block].get(relative_excess)
    if position is None:
        return None, relative_excess - _TOTAL[block]
    return position, 0


def process_block_bwd(block: int, relative_excess: int) -> tuple[int | None, int]:
    """Scan ``block`` backward for the last position reaching ``relative_excess``.

    Scanning starts after the block's last bit. Returns ``(position, 0)`` on a
    hit. On a miss it returns ``(None, rest)``, where ``rest`` is the excess
    still to be reached, measured from the start of the block.
    """
    _check_block(block)
    position = _BWD[block].get(relative_excess)
    if position is None:
        return None, relative_excess + _TOTAL[block]
    return position, 0