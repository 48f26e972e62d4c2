"""Dynamic-programming puzzles."""

from __future__ import annotations


def minimum_total(triangle: list[list[int]]) -> int:
    """Smallest top-to-bottom path sum through a number triangle."""
    if not triangle:
        raise ValueError("empty triangle")
    row = list(triangle[0])
    for next_row in triangle[1:]:
        if len(next_row) != len(row) + 1:
            raise ValueError("each row must be one longer than the one above")
        middle = (v + min(a, b) for v, a, b in zip(next_row[1:-1], row, row[1:]))
        row = [next_row[0] + row[0], *middle, next_row[-1] + row[-1]]
    return min(row)


def rob(nums: list[int]) -> int:
    """Largest sum of values taken from houses of which no two are adjacent."""
    best: list[int] = []
    peak = None
    for i, value in enumerate(nums):
        if i < 2:
            best.append(value)
            continue
        peak = best[i - 2] if peak is None else max(peak, best[i - 2])
        best.append(value + peak)
    return max(best, default=0)


def rob_circle(nums: list[int]) -> int:
    """Like :func:`rob`, but the first and last houses are neighbours."""
    n = len(nums)
    if n == 0:
        return 0
    if n <= 3:
        return max(nums)

    best = [0] * n
    best[0], best[1] = nums[0], nums[1]
    uses_first = [False] * n
    uses_first[0] = uses_first[2] = True
    for i in range(2, n - 1):
        # The latest position holding the maximum decides the chain followed.
        k = max(range(i - 1), key=lambda idx: (best[idx], idx))
        if uses_first[k]:
            uses_first[i] = True
        best[i] = nums[i] + best[k]

    with_first = without_first = best[1]
    for value, flag in zip(best[1 : n - 2], uses_first[1 : n - 2]):
        if flag and value > with_first:
            with_first = value
        if not flag and value > without_first:
            without_first = value
    best[-1] = max(with_first + nums[-1] - nums[0], without_first + nums[-1])

    skip_first = [nums[1], nums[2]]
    for i in range(3, n):
        skip_first.append(nums[i] + max(skip_first[: i - 2]))
    best[-1] = max(best[-1], skip_first[-1])
    return max(best)