"""Number sequences, sieves and divisibility searches."""

from __future__ import annotations

import math
from collections import Counter, deque
from collections.abc import Sequence
from functools import reduce
from itertools import accumulate, pairwise

RECAMAN_LIMIT = 500_000
NON_DECREASING_LIMIT = 64

_recaman_terms = [0]
_recaman_seen: set[int] = set()


def recaman(k: int) -> int:
    """Return the ``k``-th term of Recamán's sequence (0 <= k <= RECAMAN_LIMIT)."""
    if not 0 <= k <= RECAMAN_LIMIT:
        raise ValueError(f"k must lie between 0 and {RECAMAN_LIMIT}")
    while len(_recaman_terms) <= k:
        i = len(_recaman_terms)
        previous = _recaman_terms[-1]
        candidate = previous - i
        if candidate > 0 and candidate not in _recaman_seen:
            value = candidate
        else:
            value = previous + i
        _recaman_seen.add(value)
        _recaman_terms.append(value)
    return _recaman_terms[k]


def non_decreasing_count(length: int) -> int:
    """Return how many digit strings of ``length`` digits never decrease."""
    if not 1 <= length <= NON_DECREASING_LIMIT:
        raise ValueError(f"length must lie between 1 and {NON_DECREASING_LIMIT}")
    # ways[d]: strings of the current length whose first digit is d
    ways = [1] * 10
    for _ in range(length - 1):
        ways = list(accumulate(reversed(ways)))[::-1]
    return sum(ways)


def factorial_factorization(n: int) -> list[tuple[int, int]]:
    """Return the prime factorisation of ``n!`` as ``(prime, exponent)`` pairs."""
    result = []
    for prime in _primes_up_to(n):
        exponent = 0
        power = prime
        while power <= n:
            exponent += n // power
            power *= prime
        result.append((prime, exponent))
    return result


def primes_between(lower: int, upper: int) -> list[int]:
    """Return the primes ``p`` with ``lower <= p <= upper``."""
    lower = max(lower, 2)
    if upper < lower:
        return []
    composite = bytearray(upper - lower + 1)
    for prime in _primes_up_to(math.isqrt(upper)):
        start = max(prime * prime, -(-lower // prime) * prime)
        for multiple in range(start, upper + 1, prime):
            composite[multiple - lower] = 1
    return [lower + offset for offset, flag in enumerate(composite) if not flag]


def street_trees(positions: Sequence[int]) -> int:
    """Return how many trees to plant so the sorted ``positions`` become evenly spaced."""
    if len(positions) < 3:
        raise ValueError("at least three positions are needed")
    gaps = [b - a for a, b in pairwise(positions)]
    step = reduce(math.gcd, gaps)
    if step == 0:
        raise ValueError("positions must not all coincide")
    return sum(gap // step - 1 for gap in gaps)


def patting_heads(values: Sequence[int]) -> list[int]:
    """For each value return how many of the other values divide it."""
    if not values:
        return []
    if min(values) < 1:
        raise ValueError("values must be positive")
    counts = Counter(values)
    top = max(values)
    divisors = [0] * (top + 1)
    for value, count in counts.items():
        for multiple in range(value, top + 1, value):
            divisors[multiple] += count
    return [divisors[value] - 1 for value in values]


def smallest_binary_multiple(n: int) -> str:
    """Return the smallest positive multiple of ``n`` written with digits 0 and 1 only."""
    if n < 1:
        raise ValueError("n must be positive")
    start = 1 % n
    parent: dict[int, tuple[int, str] | None] = {start: None}
    queue = deque([start])
    while queue:
        remainder = queue.popleft()
        if remainder == 0:
            digits = []
            node = remainder
            while (link := parent[node]) is not None:
                node, digit = link
                digits.append(digit)
            return "1" + "".join(reversed(digits))
        for digit in "01":
            following = (remainder * 10 + int(digit)) % n
            if following not in parent:
                parent[following] = (remainder, digit)
                queue.append(following)
    raise ValueError(f"no multiple of {n} found")


def _primes_up_to(limit: int) -> list[int]:
    if limit < 2:
        return []
    is_prime = bytearray([1]) * (limit + 1)
    is_prime[0] = is_prime[1] = 0
    for candidate in range(2, math.isqrt(limit) + 1):
        if is_prime[candidate]:
            is_prime[candidate * candidate :: candidate] = bytearray(
                len(range(candidate * candidate, limit + 1, candidate))
            )
    return [number for number, flag in enumerate(is_prime) if flag]