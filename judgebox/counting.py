"""Counting problems: best subarrays, zero-sum quadruples, non-triangles and treat sales."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, Sequence


def max_sum_subarrays(values: Sequence[int]) -> tuple[int, int]:
    """Return the largest sum of a contiguous subarray and how many subarrays reach it."""
    if not values:
        raise ValueError("values must not be empty")

    best: float = -math.inf
    current = -1
    zeroes = new_max_zeroes = 0
    has_hit_zero = True
    total = current_count = last = last_count = 0

    for x in values:
        if current < 0:
            current = x
            last = zeroes = new_max_zeroes = 0
            has_hit_zero = False
            last_count += current_count
            current_count = 0
        else:
            current += x

        if current == 0:
            has_hit_zero = True
            new_max_zeroes += 1
            if x == 0:
                zeroes += 1

        if best < current:
            last_count = 0
            if current == 0:
                last = current_count = 1
            else:
                last = current_count = new_max_zeroes + 1
                zeroes = 0
            best = current
            has_hit_zero = best == 0
            if best == 0:
                last = 0
        elif best == current:
            if current == 0:
                current_count = last + zeroes * (zeroes + 1) // 2
            elif has_hit_zero:
                last = new_max_zeroes + 1
                current_count += last
            else:
                current_count += last if last else 1
            if current != 0:
                zeroes = 0
            has_hit_zero = False

        total = last_count + current_count

    return int(best), total


def zero_sum_quadruples(rows: Iterable[Sequence[int]]) -> int:
    """Count choices of one number per column of ``(a, b, c, d)`` rows that sum to zero."""
    rows = list(rows)
    if any(len(row) != 4 for row in rows):
        raise ValueError("every row must hold four numbers")
    a, b, c, d = (list(column) for column in zip(*rows)) if rows else ([], [], [], [])
    pair_sums = Counter(x + y for x in a for y in b)
    return sum(pair_sums[-(x + y)] for x in c for y in d)


def non_triangles(lengths: Iterable[int]) -> int:
    """Count triples of sticks whose two shorter sticks are together shorter than the longest."""
    sticks = sorted(lengths)
    count = 0
    for longest in range(2, len(sticks)):
        limit = sticks[longest]
        for shortest in range(longest - 1):
            first = shortest + 1
            end = bisect_left(sticks, limit - sticks[shortest], first, longest)
            if end > first:
                count += end - first
    return count


def treats_revenue(values: Sequence[int]) -> int:
    """Return the most money from selling treats from either end, the k-th sold earning k times its value."""
    n = len(values)
    if n == 0:
        return 0
    # best[left]: revenue of the interval of the current length starting at left
    best = [n * value for value in values]
    for length in range(2, n + 1):
        age = n - length + 1
        best = [
            max(
                age * values[left] + best[left + 1],
                age * values[left + length - 1] + best[left],
            )
            for left in range(n - length + 1)
        ]
    return best[0]