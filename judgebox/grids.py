"""Grid searches: fewest gangs to cross a city, and collecting stars on two walks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import combinations

GANG_COUNT = 10
_CELLS = frozenset(".*#")


def _rectangular(grid: Iterable[Sequence], name: str) -> list[Sequence]:
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError(f"{name} must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError(f"{name} rows must all have the same length")
    return rows


def _connected(rows, start, end, allowed) -> bool:
    height, width = len(rows), len(rows[0])
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == end:
            return True
        row, column = cell
        for step_row, step_column in ((-1, 0), (0, -1), (1, 0), (0, 1)):
            following = (row + step_row, column + step_column)
            r, c = following
            if 0 <= r < height and 0 <= c < width and following not in seen and rows[r][c] in allowed:
                seen.add(following)
                queue.append(following)
    return False


def min_gangs(grid: Iterable[Sequence[int]], start: tuple[int, int], end: tuple[int, int]) -> int:
    """Return the fewest gangs whose territory links cell ``start`` with cell ``end``.

    Every cell of ``grid`` holds a gang number from 0 to 9; moves go to the four
    neighbouring cells.
    """
    rows = _rectangular(grid, "grid")
    height, width = len(rows), len(rows[0])
    gangs = {gang for row in rows for gang in row}
    if any(not 0 <= gang < GANG_COUNT for gang in gangs):
        raise ValueError(f"gangs must be numbered from 0 to {GANG_COUNT - 1}")
    for row, column in (start, end):
        if not (0 <= row < height and 0 <= column < width):
            raise ValueError(f"cell ({row}, {column}) lies outside the grid")
    start, end = tuple(start), tuple(end)
    required = {rows[start[0]][start[1]], rows[end[0]][end[1]]}
    optional = sorted(gangs - required)
    for extra in range(len(optional) + 1):
        for chosen in combinations(optional, extra):
            allowed = required.union(chosen)
            if _connected(rows, start, end, allowed):
                return len(allowed)
    raise RuntimeError("the grid does not connect the two cells")


def tourist_stars(grid: Iterable[str]) -> int:
    """Return the most stars two walks from the top-left to the bottom-right cell can collect.

    The walks move right or down, never enter ``#`` cells, and a star counts once.
    """
    rows = _rectangular(grid, "grid")
    if any(set(row) - _CELLS for row in rows):
        raise ValueError("cells may only be '.', '*' or '#'")
    height, width = len(rows), len(rows[0])

    if rows[0][0] == "#":
        raise ValueError("the starting cell is blocked")
    states = {(0, 0): int(rows[0][0] == "*")}
    for step in range(1, height + width - 1):
        following: dict[tuple[int, int], int] = {}
        for (first, second), collected in states.items():
            for a in (first, first + 1):
                for b in (second, second + 1):
                    upper, lower = min(a, b), max(a, b)
                    upper_column, lower_column = step - upper, step - lower
                    if lower >= height or upper_column >= width:
                        continue
                    upper_cell = rows[upper][upper_column]
                    lower_cell = rows[lower][lower_column]
                    if upper_cell == "#" or lower_cell == "#":
                        continue
                    gain = int(upper_cell == "*")
                    if upper != lower:
                        gain += int(lower_cell == "*")
                    key = (upper, lower)
                    if following.get(key, -1) < collected + gain:
                        following[key] = collected + gain
        states = following
    final = states.get((height - 1, height - 1))
    if final is None:
        raise ValueError("the bottom-right cell cannot be reached")
    return final