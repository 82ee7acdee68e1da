"""Segment trees: two arrays with range swapping, and a merge-sort tree."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from collections.abc import Sequence


class _Node:
    __slots__ = ("left", "right", "total")

    def __init__(self) -> None:
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.total = 0


def _build(lo: int, hi: int) -> _Node:
    node = _Node()
    if lo < hi:
        mid = (lo + hi) // 2
        node.left = _build(lo, mid)
        node.right = _build(mid + 1, hi)
    return node


def _update(node: _Node, lo: int, hi: int, index: int, value: int) -> None:
    if lo == hi:
        node.total = value
        return
    mid = (lo + hi) // 2
    if index <= mid:
        _update(node.left, lo, mid, index, value)
    else:
        _update(node.right, mid + 1, hi, index, value)
    node.total = node.left.total + node.right.total


def _range_sum(node: _Node, lo: int, hi: int, left: int, right: int) -> int:
    if hi < left or lo > right:
        return 0
    if left <= lo and hi <= right:
        return node.total
    mid = (lo + hi) // 2
    return _range_sum(node.left, lo, mid, left, right) + _range_sum(
        node.right, mid + 1, hi, left, right
    )


def _swap(first: _Node, second: _Node, lo: int, hi: int, left: int, right: int) -> tuple[_Node, _Node]:
    if hi < left or lo > right:
        return first, second
    if left <= lo and hi <= right:
        return second, first
    mid = (lo + hi) // 2
    first.left, second.left = _swap(first.left, second.left, lo, mid, left, right)
    first.right, second.right = _swap(first.right, second.right, mid + 1, hi, left, right)
    first.total = first.left.total + first.right.total
    second.total = second.left.total + second.right.total
    return first, second


class TwinArrays:
    """Two zero-filled arrays of length ``n`` that can exchange whole ranges."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("n must be positive")
        self.n = n
        self._roots = [_build(0, n - 1), _build(0, n - 1)]

    def _root(self, which: int) -> _Node:
        if which not in (0, 1):
            raise ValueError("which must be 0 or 1")
        return self._roots[which]

    def _check_range(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self.n:
            raise IndexError(f"range [{left}, {right}] is not inside [0, {self.n - 1}]")

    def sum(self, which: int, left: int, right: int) -> int:
        """Return the sum of array ``which`` over ``left..right`` inclusive."""
        root = self._root(which)
        self._check_range(left, right)
        return _range_sum(root, 0, self.n - 1, left, right)

    def update(self, which: int, index: int, value: int) -> None:
        """Set element ``index`` of array ``which`` to ``value``."""
        root = self._root(which)
        if not 0 <= index < self.n:
            raise IndexError(f"index {index} is not inside [0, {self.n - 1}]")
        _update(root, 0, self.n - 1, index, value)

    def swap(self, left: int, right: int) -> None:
        """Exchange the elements ``left..right`` of the two arrays."""
        self._check_range(left, right)
        first, second = self._roots
        self._roots = list(_swap(first, second, 0, self.n - 1, left, right))


class MergeSortTree:
    """Static array answering order-statistic queries on ranges."""

    def __init__(self, values: Sequence[int]) -> None:
        self._n = len(values)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        tree: list[list[int]] = [[] for _ in range(2 * size)]
        for index, value in enumerate(values):
            tree[size + index] = [value]
        for node in range(size - 1, 0, -1):
            tree[node] = list(heapq.merge(tree[2 * node], tree[2 * node + 1]))
        self._tree = tree

    def _check_range(self, lo: int, hi: int) -> None:
        if not 0 <= lo <= hi <= self._n:
            raise ValueError(f"range [{lo}, {hi}) is not inside [0, {self._n})")

    def count_at_most(self, value: int, lo: int, hi: int) -> int:
        """Count elements with index in ``[lo, hi)`` that are at most ``value``."""
        self._check_range(lo, hi)
        count = 0
        lo += self._size
        hi += self._size
        while lo < hi:
            if lo & 1:
                count += bisect_right(self._tree[lo], value)
                lo += 1
            if hi & 1:
                hi -= 1
                count += bisect_right(self._tree[hi], value)
            lo >>= 1
            hi >>= 1
        return count

    def kth_smallest(self, lo: int, hi: int, k: int) -> int:
        """Return the ``k``-th smallest (from 1) element with index in ``[lo, hi)``."""
        self._check_range(lo, hi)
        if not 1 <= k <= hi - lo:
            raise ValueError(f"k must lie between 1 and {hi - lo}")
        candidates = self._tree[1]
        first, last = 0, len(candidates) - 1
        while first < last:
            middle = (first + last) // 2
            if self.count_at_most(candidates[middle], lo, hi) >= k:
                last = middle
            else:
                first = middle + 1
        return candidates[first]