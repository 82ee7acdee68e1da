"""String problems: digit removal, rotations, palindromes and edit distance."""

from __future__ import annotations

COIN_SEQUENCES = ("TTT", "TTH", "THT", "THH", "HTT", "HTH", "HHT", "HHH")
DISTANCE_BAND = 100


def largest_after_removal(number: str, k: int) -> str:
    """Return the largest number left after deleting ``k`` digits of ``number``.

    The remaining digits keep their order; an empty string is returned when
    every digit is removed.
    """
    if not number.isdigit() and number:
        raise ValueError("number must consist of decimal digits")
    if not 0 <= k <= len(number):
        raise ValueError("k must lie between 0 and the number of digits")
    keep = len(number) - k
    remaining = k
    stack: list[str] = []
    for digit in number:
        while remaining and stack and stack[-1] < digit:
            stack.pop()
            remaining -= 1
        stack.append(digit)
    return "".join(stack[:keep])


def min_rotation(s: str) -> int:
    """Return the smallest index at which the least rotation of ``s`` starts."""
    n = len(s)
    if n == 0:
        raise ValueError("string must not be empty")
    i, j, k = 0, 1, 0
    while i < n and j < n and k < n:
        a = s[(i + k) % n]
        b = s[(j + k) % n]
        if a == b:
            k += 1
            continue
        if a > b:
            i += k + 1
        else:
            j += k + 1
        if i == j:
            j += 1
        k = 0
    return min(i, j)


def min_dna_mutations(sequence: str) -> int:
    """Return the fewest mutations that turn every letter of ``sequence`` into A.

    A mutation either flips one letter or flips the whole prefix up to a
    position. Every letter other than ``A`` counts as ``B``.
    """
    as_a = as_b = 0
    for letter in sequence:
        if letter == "A":
            as_a = min(as_b + 1, as_a)
            as_b = min(as_b + 1, as_a + 1)
        else:
            as_b = min(as_b, as_a + 1)
            as_a = min(as_b + 1, as_a + 1)
    return min(as_a, as_b + 1)


def coin_sequence_counts(tosses: str) -> tuple[int, ...]:
    """Count overlapping occurrences of each three-toss pattern in ``COIN_SEQUENCES`` order."""
    counts = dict.fromkeys(COIN_SEQUENCES, 0)
    for start in range(len(tosses) - 2):
        window = tosses[start : start + 3]
        if window in counts:
            counts[window] += 1
    return tuple(counts[pattern] for pattern in COIN_SEQUENCES)


def splits_into_even_palindromes(s: str) -> bool:
    """Tell whether ``s`` splits greedily into even-length palindromes."""
    n = len(s)
    if n == 0:
        return True
    if n % 2:
        return False
    begin = 0
    i = 1
    while i < n:
        if s[i] == s[i - 1]:
            half = i - begin
            if i + half > n:
                break
            if s[i : i + half] == s[begin:i][::-1]:
                i = begin = i + half
        i += 1
    return begin == n


def decode_to_and_fro(columns: int, text: str) -> str:
    """Recover the message written row by row, alternating direction, in ``columns`` columns."""
    if columns < 1:
        raise ValueError("columns must be positive")
    rows = [text[start : start + columns] for start in range(0, len(text) // columns * columns, columns)]
    rows = [row if index % 2 == 0 else row[::-1] for index, row in enumerate(rows)]
    return "".join("".join(row[column] for row in rows) for column in range(columns))


def string_distance(a: str, b: str) -> int:
    """Return the edit distance of ``a`` and ``b`` with adjacent transpositions.

    Only cells within ``DISTANCE_BAND`` of the diagonal are computed, so the
    result is exact whenever the distance does not exceed the band.
    """
    la, lb = len(a), len(b)
    if abs(la - lb) > DISTANCE_BAND:
        raise ValueError(f"lengths may differ by at most {DISTANCE_BAND}")
    infinity = la + lb + 1
    before: dict[int, int] = {}
    previous = {j: j for j in range(min(lb, DISTANCE_BAND) + 1)}
    for i in range(1, la + 1):
        current = {0: i}
        for j in range(max(i - DISTANCE_BAND, 1), min(lb, i + DISTANCE_BAND) + 1):
            best = min(
                previous.get(j, infinity) + 1,
                current.get(j - 1, infinity) + 1,
                previous.get(j - 1, infinity) + (a[i - 1] != b[j - 1]),
            )
            if i >= 2 and j >= 2 and a[i - 2] == b[j - 1] and a[i - 1] == b[j - 2]:
                best = min(best, before.get(j - 2, infinity) + 1)
            current[j] = best
        before, previous = previous, current
    return previous[lb]