"""Ordering, tournament and search problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def reversed_order_inversions(words: Sequence[str]) -> int:
    """Count pairs of words whose order flips when every word is spelled backwards."""
    n = len(words)
    by_word = sorted(range(n), key=lambda i: words[i])
    by_reversed = sorted(range(n), key=lambda i: words[i][::-1])
    rank = {index: position for position, index in enumerate(by_reversed)}

    tree = [index & -index for index in range(n + 1)]

    def prefix(count: int) -> int:
        total = 0
        while count > 0:
            total += tree[count]
            count -= count & -count
        return total

    def remove(position: int) -> None:
        position += 1
        while position <= n:
            tree[position] -= 1
            position += position & -position

    inversions = 0
    for index in by_word:
        position = rank[index]
        inversions += prefix(position)
        remove(position)
    return inversions


def champion(matches: Iterable[tuple[str, str, int, int]]) -> str:
    """Return the team that never lost, given ``(team1, team2, goals1, goals2)`` results.

    A draw counts as a loss for the first team. Among several unbeaten teams
    the alphabetically first is returned.
    """
    winners: set[str] = set()
    losers: set[str] = set()
    for first, second, goals_first, goals_second in matches:
        loser, winner = (second, first) if goals_first > goals_second else (first, second)
        winners.discard(loser)
        losers.add(loser)
        if winner not in losers:
            winners.add(winner)
    if not winners:
        raise ValueError("no unbeaten team")
    return min(winners)


def christmas_lights_swaps(lights: str) -> int:
    """Return the seconds until all ``B`` lights precede the ``G`` lights.

    Every second each adjacent ``GB`` pair swaps at the same time.
    """
    if set(lights) - {"B", "G"}:
        raise ValueError("lights may only hold 'B' and 'G'")
    n = len(lights)
    first_green = lights.find("G")
    if first_green < 0:
        return 0
    i = first_green + 1
    greens = 0
    delay = 0
    blues = 0
    while i < n:
        while i < n and lights[i] == "B":
            blues += 1
            i += 1
        if i == n:
            break
        while i < n and lights[i] == "G":
            blues -= 1
            greens += 1
            i += 1
        if i < n and blues < 0:
            delay += blues
            blues = 0
    final_position = i - greens - 1
    return final_position - first_green - delay


def min_nails(boards: Iterable[tuple[int, int]]) -> int:
    """Return the fewest nails that pin every ``(start, end)`` board."""
    ordered = sorted(boards, key=lambda board: (board[1], board[0]))
    if not ordered:
        return 0
    nails = 1
    last = ordered[0][1]
    for start, end in ordered:
        if start > last:
            nails += 1
            last = end
    return nails


def max_candies_per_person(piles: Sequence[int], persons: int) -> int:
    """Return the most candies each of ``persons`` can get, each from a single pile."""

    def enough(share: int) -> bool:
        return sum(pile // share for pile in piles) >= persons

    lo, hi = 0, max(piles, default=0)
    while lo < hi:
        mid = lo + (hi - lo + 1) // 2
        if enough(mid):
            lo = mid
        else:
            hi = mid - 1
    return lo