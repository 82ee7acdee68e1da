"""Game positions and odds: tic-tac-toe boards, RPSSL matches and pouring water."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

RPSSL_MOVES = ("rock", "scissors", "paper", "lizard", "spock")

# For every move, the moves it beats, as indexes into RPSSL_MOVES.
_BEATS = {
    0: (3, 1),
    1: (2, 3),
    2: (0, 4),
    3: (4, 2),
    4: (1, 0),
}
_WINNING_LINES = ("XXX", "OOO")
_MARKS = frozenset("XO.")


def _board_rows(board: Iterable[str]) -> list[str]:
    rows = list(board)
    if len(rows) != 3 or any(len(row) != 3 for row in rows):
        raise ValueError("a board has three rows of three cells")
    if any(set(row) - _MARKS for row in rows):
        raise ValueError("cells may only be 'X', 'O' or '.'")
    return rows


def _inconsistent(rows: list[str], strict_diagonal: bool, require_end: bool) -> bool:
    crosses = sum(row.count("X") for row in rows)
    noughts = sum(row.count("O") for row in rows)
    columns = ["".join(cells) for cells in zip(*rows)]

    horizontal = vertical = 0
    winner = ""
    for line_number, (row, column) in enumerate(zip(rows, columns), start=1):
        if row in _WINNING_LINES:
            if horizontal:
                return True
            horizontal = line_number
            if vertical and winner != row[0]:
                return True
            winner = row[0]
        if column in _WINNING_LINES:
            if vertical:
                return True
            vertical = line_number
            if horizontal and winner != column[0]:
                return True
            winner = column[0]

    if noughts > crosses or crosses - noughts > 1:
        return True

    centre = rows[1][1]
    main = rows[0][0] == centre == rows[2][2]
    anti = rows[0][2] == centre == rows[2][0]
    marked = centre in ("X", "O")
    diagonal = (main or anti) and marked if strict_diagonal else main or (anti and marked)

    if not horizontal and not vertical and diagonal:
        winner = centre
    if diagonal and (horizontal in (1, 3) or vertical in (1, 3)):
        return True
    if horizontal and vertical and diagonal:
        return True
    if winner == "X" and noughts == crosses:
        return True
    if winner == "O" and crosses != noughts:
        return True
    if require_end and not horizontal and not vertical and not diagonal and crosses + noughts != 9:
        return True
    return False


def is_valid_tictactoe(board: Iterable[str]) -> bool:
    """Tell whether ``board`` (three strings of ``X``, ``O``, ``.``) can occur in a game."""
    return not _inconsistent(_board_rows(board), strict_diagonal=False, require_end=False)


def is_final_tictactoe(board: Iterable[str]) -> bool:
    """Tell whether ``board`` can be the last position of a game.

    The game must have ended: someone has a line, or the board is full.
    """
    return not _inconsistent(_board_rows(board), strict_diagonal=True, require_end=True)


def rpssl_win_probability(rajesh: Sequence[float], sheldon: Sequence[float]) -> float:
    """Return, as a percentage, the chance Rajesh wins the match.

    Both arguments give the percentages with which each player picks the
    moves in ``RPSSL_MOVES`` order.
    """
    if len(rajesh) != len(RPSSL_MOVES) or len(sheldon) != len(RPSSL_MOVES):
        raise ValueError(f"each player needs {len(RPSSL_MOVES)} percentages")
    r = [share / 100 for share in rajesh]
    s = [share / 100 for share in sheldon]

    p_tie = sum(mine * theirs for mine, theirs in zip(r, s))
    p_rajesh = sum(r[move] * s[beaten] for move, targets in _BEATS.items() for beaten in targets)
    p_sheldon = 1 - p_rajesh - p_tie

    if p_tie == 1 or p_sheldon == 1:
        return 0.0

    geometric = 1 / (1 - p_tie)
    chance = (
        p_rajesh * p_rajesh * geometric * geometric
        + p_rajesh * p_sheldon * p_rajesh * 2 * geometric ** 3
    )
    return chance * 100


def pour_steps(a: int, b: int, c: int) -> int | None:
    """Return the fewest steps to get ``c`` litres in one of two vessels of ``a`` and ``b`` litres.

    ``None`` is returned when it cannot be done.
    """
    small, large = sorted((a, b))
    if small < 1:
        raise ValueError("vessel capacities must be positive")
    if c < 0:
        raise ValueError("the wanted amount must not be negative")
    if c in (small, large):
        return 1
    if c > large:
        return None

    found = breaking = False
    position = 0
    level = moves = 0
    while True:
        if level == c:
            found = breaking = True
            position = moves - 2
        elif (c - level) % small == 0:
            found = True
            position = moves + (c - level) // small * 2

        if (large - level) % small == 0:
            moves += (large - level) // small * 2
            if found:
                return min(moves - position - 2 * breaking, position)
            return None

        fills = (large - level) // small + 1
        level += fills * small - large
        moves += fills * 2 + 2