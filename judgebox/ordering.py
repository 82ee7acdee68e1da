"""Reconstructing orders from relative counts, and modular partial sums."""

from __future__ import annotations

from bisect import bisect_right, insort
from collections.abc import Sequence


def order_ranks(shifts: Sequence[int]) -> list[int]:
    """Return the ranks of soldiers given how many earlier soldiers outrank each one.

    ``shifts[i]`` is the number of soldiers before position ``i`` whose rank is
    higher; ranks run from 1 to ``len(shifts)``.
    """
    n = len(shifts)
    for position, shift in enumerate(shifts):
        if not 0 <= shift <= position:
            raise ValueError(f"shift {shift} at position {position} is impossible")
    tree = [index & -index for index in range(n + 1)]
    top_step = 1 << (n.bit_length() - 1) if n else 0

    def take(k: int) -> int:
        position = 0
        remaining = k + 1
        step = top_step
        while step:
            following = position + step
            if following <= n and tree[following] < remaining:
                position = following
                remaining -= tree[following]
            step >>= 1
        rank = position + 1
        index = rank
        while index <= n:
            tree[index] -= 1
            index += index & -index
        return rank

    ranks = [0] * n
    for position in reversed(range(n)):
        ranks[position] = take(position - shifts[position])
    return ranks


def queue_order(heights: Sequence[int], taller_counts: Sequence[int]) -> list[int]:
    """Return the heights in queue order given how many taller people stand in front."""
    if len(heights) != len(taller_counts):
        raise ValueError("heights and taller_counts must have the same length")
    people = sorted(zip(heights, taller_counts), key=lambda person: person[0], reverse=True)
    order: list[int] = []
    for height, taller in people:
        order.insert(taller, height)
    return order


def min_partial_sum_mod(values: Sequence[int], k: int, p: int) -> int | None:
    """Return the least ``sum mod p`` of a contiguous run of ``values`` that is at least ``k``.

    ``None`` is returned when no run qualifies.
    """
    if p < 1:
        raise ValueError("p must be positive")
    best: int | None = None
    prefixes: list[int] = []
    total = 0
    for value in values:
        total = (total + value % p) % p
        if total >= k and (best is None or total < best):
            best = total
        target = (total - k) % p
        index = bisect_right(prefixes, target) - 1
        if index >= 0:
            candidate = (total - prefixes[index]) % p
            if candidate >= k and (best is None or candidate < best):
                best = candidate
        insort(prefixes, total)
    return best