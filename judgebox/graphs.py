"""Graph problems: ordering workers, tree checks, common neighbours and prime paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import combinations

from judgebox.sequences import primes_between

_FOUR_DIGIT_PRIMES = frozenset(primes_between(1000, 9999))


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is not between 1 and {n}")


def make_tree(n: int, supervisors: Sequence[Iterable[int]]) -> list[int]:
    """Arrange workers ``1..n`` in a chain and return each worker's parent (0 for the root).

    ``supervisors[i - 1]`` lists the workers that must end up below worker ``i``.
    The listed requirements must not form a cycle.
    """
    if len(supervisors) > n:
        raise ValueError("there are more workers with requirements than workers")
    below: list[list[int]] = [[] for _ in range(n + 1)]
    for worker, nodes in enumerate(supervisors, start=1):
        for node in nodes:
            _check_node(node, n)
            below[node].append(worker)

    visited = [False] * (n + 1)
    order: list[int] = []
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(below[root]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if not visited[child]:
                    visited[child] = True
                    stack.append((child, iter(below[child])))
                    break
            else:
                stack.pop()
                order.append(node)

    parent = [0] * (n + 1)
    for previous, node in zip([0, *order], order):
        parent[node] = previous
    return parent[1:]


def is_tree(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether ``edges`` on nodes ``1..n`` hold fewer than ``n`` edges and no cycle."""
    edges = list(edges)
    if n <= len(edges):
        return False
    link = list(range(n + 1))
    size = [1] * (n + 1)

    def root(node: int) -> int:
        top = node
        while top != link[top]:
            top = link[top]
        while node != top:
            link[node], node = top, link[node]
        return top

    for first, second in edges:
        _check_node(first, n)
        _check_node(second, n)
        a, b = root(first), root(second)
        if a == b:
            return False
        if size[a] < size[b]:
            a, b = b, a
        link[b] = a
        size[a] += size[b]
    return True


def tree_longest_path(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of edges on the longest path of the tree on nodes ``1..n``."""
    if n < 1:
        raise ValueError("n must be positive")
    adjacent: list[list[int]] = [[] for _ in range(n)]
    for first, second in edges:
        _check_node(first, n)
        _check_node(second, n)
        adjacent[first - 1].append(second - 1)
        adjacent[second - 1].append(first - 1)

    def farthest(start: int) -> tuple[int, int]:
        distance = [-1] * n
        distance[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacent[node]:
                if distance[neighbour] == -1:
                    distance[neighbour] = distance[node] + 1
                    queue.append(neighbour)
        node = max(range(n), key=distance.__getitem__)
        return node, distance[node]

    end, _ = farthest(0)
    _, length = farthest(end)
    return length


def count_quadruples(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count pairs of nodes together with pairs of targets both of them point to."""
    masks = [0] * n
    for source, target in edges:
        _check_node(source, n)
        _check_node(target, n)
        masks[source - 1] |= 1 << (target - 1)
    total = 0
    for first, second in combinations(masks, 2):
        shared = (first & second).bit_count()
        total += shared * (shared - 1) // 2
    return total


def prime_path(first: int, second: int) -> int | None:
    """Return the fewest one-digit changes leading from ``first`` to ``second`` through primes.

    Every number on the way after ``first`` must be a four-digit prime.
    ``None`` is returned when ``second`` cannot be reached.
    """
    for number in (first, second):
        if not 1000 <= number <= 9999:
            raise ValueError(f"{number} is not a four-digit number")
    if first == second:
        return 0
    seen = {first}
    queue = deque([(first, 0)])
    while queue:
        number, cost = queue.popleft()
        digits = str(number)
        for position, current in enumerate(digits):
            for digit in "0123456789":
                if digit == current:
                    continue
                candidate = int(digits[:position] + digit + digits[position + 1 :])
                if candidate not in _FOUR_DIGIT_PRIMES or candidate in seen:
                    continue
                if candidate == second:
                    return cost + 1
                seen.add(candidate)
                queue.append((candidate, cost + 1))
    return None