"""Range minimum queries over a static sequence using a sparse table.

The index of the minimum element in every interval of length ``2**k`` is
precomputed, so each query is answered in constant time from two
overlapping sub-intervals. This needs O(n log n) space.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_MAX_LEN = (1 << 32) - 1
_WORD_BYTES = 8
_INDEX_BYTES = 4


def _row_length(length: int) -> int:
    """Number of precomputed interval sizes per element."""
    return max(length - 1, 0).bit_length() + 1


def _check_query(i: int, j: int, length: int) -> None:
    """Validate an inclusive query range ``[i, j]``."""
    if not (0 <= i < length and 0 <= j < length):
        raise IndexError(f"range [{i}, {j}] out of bounds for length {length}")
    if i > j:
        raise ValueError(f"invalid range [{i}, {j}]: start exceeds end")


def _inclusive_bounds(rng: range | slice, length: int) -> tuple[int, int]:
    """Turn a half-open range or slice into clamped inclusive bounds."""
    if length == 0:
        raise ValueError("range minimum query on an empty sequence")
    if rng.step not in (None, 1):
        raise ValueError("only ranges with step 1 are supported")
    last = length - 1
    start = 0 if rng.start is None else rng.start
    end = last if rng.stop is None else rng.stop - 1
    return min(max(start, 0), last), min(max(end, 0), last)


class BinaryRmq:
    """Constant-time range minimum queries backed by a sparse table.

    Slightly faster than :class:`~succinctree.rmq.fast_rmq.FastRmq` for small
    inputs, but with a much larger space overhead. Supports at most
    ``2**32 - 1`` elements.
    """

    def __init__(self, data: Iterable[int]) -> None:
        self._data = list(data)
        if len(self._data) > _MAX_LEN:
            raise ValueError("input too large for binary rmq")
        self._levels = self._build_levels()

    def _build_levels(self) -> list[list[int]]:
        data = self._data
        length = len(data)
        levels = [list(range(length))]
        for k in range(1, _row_length(length)):
            prev = levels[-1]
            offset = 1 << (k - 1)
            combined = [
                left if data[left] < data[right] else right
                for left, right in zip(prev, prev[offset:])
            ]
            # intervals running past the end are already covered by the previous level
            combined.extend(prev[length - offset:])
            levels.append(combined)
        return levels

    def range_min(self, i: int, j: int) -> int:
        """Return the index of the minimum element in the inclusive range ``[i, j]``."""
        _check_query(i, j, len(self._data))
        log_dist = max((j - i).bit_length() - 1, 0)
        level = self._levels[log_dist]
        first = level[i]
        second = level[j - (1 << log_dist) + 1]
        return first if self._data[first] <= self._data[second] else second

    def range_min_with_range(self, rng: range | slice) -> int:
        """Like :meth:`range_min`, for a half-open ``range`` or ``slice``.

        The bounds are clamped to the sequence, so only an empty structure
        raises.
        """
        start, end = _inclusive_bounds(rng, len(self._data))
        return self.range_min(start, end)

    def heap_size(self) -> int:
        """Bytes used by the data and the precomputed table."""
        length = len(self._data)
        return length * _WORD_BYTES + length * _row_length(length) * _INDEX_BYTES

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"