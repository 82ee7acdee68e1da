"""Small arithmetic problems solved by closed forms and digit tricks."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

_HOLES = {"0": 1, "6": 1, "9": 1, "8": 2}


def max_ln(r: int) -> float:
    """Return the largest value of the expression for radius ``r``: 4r² + 1/4."""
    return 4 * r * r + 0.25


def step_number(x: int, y: int) -> int | None:
    """Return the number written at point ``(x, y)`` of the step pattern.

    Only points with ``y == x`` or ``y == x - 2`` carry a number; for every
    other point ``None`` is returned.
    """
    if y != x and y + 2 != x:
        return None
    if y % 2 == 0:
        return x + y
    return x + y - 1


def parquet_dimensions(red: int, brown: int) -> tuple[int, int]:
    """Return ``(length, width)`` of a floor with ``red`` border and ``brown`` inner tiles."""
    if red < 0 or brown < 0:
        raise ValueError("tile counts must be non-negative")
    half = 2 + red // 2
    discriminant = half * half - 4 * (red + brown)
    if discriminant < 0:
        raise ValueError(f"no floor has {red} border and {brown} inner tiles")
    root = math.sqrt(discriminant)
    return int((half + root) / 2), int((half - root) / 2)


def tower_moves(n: int) -> int:
    """Return the moves needed for ``n`` discs: f(1) = 2, f(n) = 3·f(n-1) + 2."""
    if n < 1:
        raise ValueError("n must be at least 1")
    moves = 2
    for _ in range(n - 1):
        moves = 3 * moves + 2
    return moves


def count_squares(n: int) -> int:
    """Return how many squares of any size fit in an ``n`` x ``n`` grid."""
    return sum(side * side for side in range(1, n + 1))


def is_right_triangle(a: int, b: int, c: int) -> bool:
    """Tell whether sides ``a``, ``b``, ``c`` form a right triangle."""
    return (
        a * a == b * b + c * c
        or b * b == a * a + c * c
        or c * c == a * a + b * b
    )


def silver_cuts(n: int) -> int:
    """Return the fewest cuts of a chain of ``n`` links: floor(log2(n))."""
    if n < 1:
        raise ValueError("n must be positive")
    return n.bit_length() - 1


def will_it_stop(n: int) -> bool:
    """Tell whether the process started at ``n`` stops (``n`` is a power of two or 0)."""
    return n == (n & -n)


def to_negabinary(n: int) -> str:
    """Return ``n`` written in base -2."""
    if n == 0:
        return "0"
    negative = n < 0
    remaining = abs(n)
    carrying = False
    digits: list[str] = []
    while remaining or carrying:
        bit = remaining & 1
        if bit and carrying:
            digit, carrying = 0, True
        elif bit or carrying:
            digit, carrying = 1, negative
        else:
            digit, carrying = 0, False
        digits.append(str(digit))
        negative = not negative
        remaining >>= 1
    return "".join(reversed(digits))


def count_holes(digits: str) -> int:
    """Return the number of closed loops drawn by the digits of ``digits``."""
    return sum(_HOLES.get(ch, 0) for ch in digits)


def until_42(numbers: Iterable[int]) -> Iterator[int]:
    """Yield the numbers up to, but not including, the first 42."""
    for number in numbers:
        if number == 42:
            return
        yield number