"""Two-dimensional Fenwick tree over a square grid of integers."""

from __future__ import annotations


class Fenwick2D:
    """A ``size`` x ``size`` grid with cell assignment and rectangle sums."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._tree = [[0] * (size + 1) for _ in range(size + 1)]
        self._cells = [[0] * size for _ in range(size)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"cell ({x}, {y}) lies outside a {self.size}x{self.size} grid")

    def set(self, x: int, y: int, value: int) -> None:
        """Assign ``value`` to cell ``(x, y)``."""
        self._check(x, y)
        delta = value - self._cells[x][y]
        self._cells[x][y] = value
        i = x + 1
        while i <= self.size:
            row = self._tree[i]
            j = y + 1
            while j <= self.size:
                row[j] += delta
                j += j & -j
            i += i & -i

    def _prefix(self, x: int, y: int) -> int:
        total = 0
        i = x + 1
        while i > 0:
            row = self._tree[i]
            j = y + 1
            while j > 0:
                total += row[j]
                j -= j & -j
            i -= i & -i
        return total

    def sum(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Return the sum of the cells with ``x1 <= x <= x2`` and ``y1 <= y <= y2``."""
        self._check(x1, y1)
        self._check(x2, y2)
        if x1 > x2 or y1 > y2:
            raise ValueError("the first corner must not lie past the second")
        return (
            self._prefix(x2, y2)
            - self._prefix(x2, y1 - 1)
            - self._prefix(x1 - 1, y2)
            + self._prefix(x1 - 1, y1 - 1)
        )