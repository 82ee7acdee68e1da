"""Assorted puzzles: binary-string paths, convex-hull peeling and zigzag walks."""

from __future__ import annotations

from collections.abc import Iterable

Point = tuple[int, int]

_STEPS = {"R": (0, 1), "L": (0, -1), "U": (-1, 0), "D": (1, 0)}


def _profile(bits: str, name: str) -> tuple[int, int, int]:
    """Return (ones, first zero, last zero) of ``bits``; missing zeros give -1."""
    if set(bits) - {"0", "1"}:
        raise ValueError(f"{name} may only hold '0' and '1'")
    return bits.count("1"), bits.find("0"), bits.rfind("0")


def min_max_path(a: str, b: str) -> tuple[int, int]:
    """Return ``(maximum, minimum)`` path values for the binary strings ``a`` and ``b``."""
    ones_a, first_zero_a, last_zero_a = _profile(a, "a")
    ones_b, first_zero_b, last_zero_b = _profile(b, "b")
    n, m = len(a), len(b)

    if ones_a == 0 or ones_b == 0:
        return 0, 0
    if first_zero_a == -1 and first_zero_b == -1:
        return n + m - 1, n + m - 1
    if first_zero_a == -1:
        return n - 1 + ones_b, ones_b
    if first_zero_b == -1:
        return m - 1 + ones_a, ones_a

    maximum = ones_a + ones_b - 1
    minimum = min(first_zero_a, first_zero_b) + min(m - last_zero_b - 1, n - last_zero_a - 1)
    return maximum, minimum


def _cross(a: Point, b: Point, c: Point) -> int:
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _envelope(points: list[Point], sign: int) -> list[Point]:
    hull: list[Point] = []
    for point in points:
        while len(hull) >= 2 and _cross(hull[-2], hull[-1], point) * sign > 0:
            hull.pop()
        hull.append(point)
    return hull


def onion_layers(points: Iterable[tuple[int, int]]) -> int:
    """Return how many convex hulls can be peeled off while more than two points remain."""
    remaining = sorted((int(x), int(y)) for x, y in points)
    layers = 0
    while len(remaining) > 2:
        layers += 1
        upper = _envelope(remaining, +1)
        lower = _envelope(remaining, -1)
        kept: list[Point] = []
        lower_index, upper_index = 0, 1
        for point in remaining:
            if lower_index < len(lower) and point == lower[lower_index]:
                lower_index += 1
                continue
            if upper_index < len(upper) and point == upper[upper_index]:
                upper_index += 1
                continue
            kept.append(point)
        remaining = kept
    return layers


def _delta(n: int, i: int, j: int, move: str, up: bool) -> int:
    if i + j < n:
        if up:
            table = {"R": 2 * i + 1, "L": -2 * j, "U": -(2 * j + 1), "D": 2 * i + 2}
        else:
            table = {"R": 2 * j + 2, "L": -(2 * i + 1), "U": -2 * i, "D": 2 * j + 1}
        return table[move]
    below_i, below_j = n - 1 - i, n - 1 - j
    if up:
        table = {
            "R": 2 * below_j,
            "L": -(2 * below_i + 1),
            "U": -(2 * below_i + 2),
            "D": 2 * below_j + 1,
        }
    else:
        table = {
            "R": 2 * below_i + 1,
            "L": -(2 * below_j + 2),
            "U": -(2 * below_j + 1),
            "D": 2 * below_i,
        }
    return table[move]


def zigzag_sum(n: int, moves: str) -> int:
    """Return the sum of the zigzag-numbered cells visited on an ``n`` x ``n`` grid.

    The walk starts in the top-left cell (number 1) and follows ``moves``, each
    one of ``R``, ``L``, ``U`` or ``D``; the starting cell is counted too.
    """
    if n < 1:
        raise ValueError("n must be positive")
    i = j = 0
    current = total = 1
    up = True
    for move in moves:
        if move not in _STEPS:
            raise ValueError(f"unknown move {move!r}")
        di, dj = _STEPS[move]
        if not (0 <= i + di < n and 0 <= j + dj < n):
            raise ValueError(f"move {move!r} leaves the grid")
        upper_half = i + j < n
        current += _delta(n, i, j, move, up)
        i, j = i + di, j + dj
        if upper_half and i + j == n:
            current -= 1
        total += current
        up = not up
    return total