"""Small container classes."""

from __future__ import annotations

from collections import deque


class QueueStack:
    """A last-in, first-out stack kept in a single queue."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._queue:
            raise IndexError("pop from an empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._queue:
            raise IndexError("top of an empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """True when the stack holds nothing."""
        return not self._queue


class NumArray:
    """Range sums over a fixed list, answered from a segment tree."""

    def __init__(self, nums: list[int]) -> None:
        self._size = len(nums)
        self._tree = [0] * (4 * self._size)
        if nums:
            self._build(0, 0, self._size - 1, nums)

    def _build(self, index: int, low: int, high: int, nums: list[int]) -> None:
        if low == high:
            self._tree[index] = nums[low]
            return
        mid = low + (high - low) // 2
        left, right = 2 * index + 1, 2 * index + 2
        self._build(left, low, mid, nums)
        self._build(right, mid + 1, high, nums)
        self._tree[index] = self._tree[left] + self._tree[right]

    def _query(self, index: int, low: int, high: int, start: int, end: int) -> int:
        if low == start and high == end:
            return self._tree[index]
        mid = low + (high - low) // 2
        left, right = 2 * index + 1, 2 * index + 2
        if start > mid:
            return self._query(right, mid + 1, high, start, end)
        if end <= mid:
            return self._query(left, low, mid, start, end)
        return self._query(left, low, mid, start, mid) + self._query(
            right, mid + 1, high, mid + 1, end
        )

    def sum_range(self, i: int, j: int) -> int:
        """Sum of the values at positions ``i`` through ``j`` inclusive."""
        if not 0 <= i <= j < self._size:
            raise IndexError(f"range [{i}, {j}] outside 0..{self._size - 1}")
        return self._query(0, 0, self._size - 1, i, j)