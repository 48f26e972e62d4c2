"""Puzzles over lists of integers."""

from __future__ import annotations

import heapq
from collections import Counter
from itertools import combinations, groupby


def two_sum(nums: list[int], target: int) -> list[int]:
    """Indices of every pair summing to ``target``, flattened in scan order."""
    indices: list[int] = []
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            indices.extend((i, j))
    return indices


def find_median_sorted_arrays(nums1: list[int], nums2: list[int]) -> float:
    """Median of the two lists taken together."""
    values = sorted([*nums1, *nums2])
    if not values:
        raise ValueError("median of no numbers")
    mid = len(values) // 2
    if len(values) % 2 == 0:
        return (values[mid - 1] + values[mid]) / 2
    return float(values[mid])


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal neighbours in place; return the new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Drop every ``val`` in place, leaving the rest sorted; return the new length."""
    nums[:] = sorted(value for value in nums if value != val)
    return len(nums)


def search_insert(nums: list[int], target: int) -> int:
    """Index of ``target``; if absent it is inserted in place at the returned index."""
    if not nums:
        return 0
    index = next((i for i, value in enumerate(nums) if value >= target), len(nums))
    if index < len(nums) and nums[index] == target:
        return index
    nums.insert(index, target)
    return index


def max_sub_array(nums: list[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("no numbers to sum")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def plus_one(digits: list[int]) -> list[int]:
    """Add one to the decimal number held in ``digits``, in place, and return it."""
    if not digits:
        raise ValueError("no digits")
    for k in reversed(range(len(digits))):
        digits[k] += 1
        if digits[k] <= 9:
            return digits
        digits[k] = 0
    digits[:] = [1] + [0] * len(digits)
    return digits


def merge(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Copy ``nums2`` into ``nums1`` after its first ``m`` items and sort ``nums1`` in place.

    ``n`` is accepted for symmetry; the whole of ``nums2`` is always copied.
    """
    if m < 0 or m + len(nums2) > len(nums1):
        raise ValueError("nums1 has no room for nums2")
    nums1[m : m + len(nums2)] = nums2
    nums1.sort()


def max_profit_once(prices: list[int]) -> int:
    """Best profit from a single buy followed by a single sell."""
    best = 0
    lowest = None
    for price in prices:
        if lowest is not None:
            best = max(best, price - lowest)
        lowest = price if lowest is None else min(lowest, price)
    return best


def max_profit(prices: list[int]) -> int:
    """Best profit from any number of non-overlapping trades."""
    return sum(max(0, later - earlier) for earlier, later in zip(prices, prices[1:]))


def single_number(nums: list[int]) -> int:
    """The value that appears once while every other appears twice."""
    values = sorted(nums)
    for a, b in zip(values[::2], values[1::2]):
        if a != b:
            return a
    if len(values) % 2:
        return values[-1]
    raise ValueError("every number appears in pairs")


def majority_element(nums: list[int]) -> int:
    """The value holding the middle position once the list is sorted."""
    if not nums:
        raise ValueError("no numbers")
    return sorted(nums)[len(nums) // 2]


def contains_duplicate(nums: list[int]) -> bool:
    """True when some value appears more than once."""
    return len(set(nums)) != len(nums)


def reverse_string(s: list[str]) -> None:
    """Reverse the list of characters in place."""
    s.reverse()


def top_k_frequent(nums: list[int], k: int) -> list[int]:
    """The ``k`` most frequent values, least frequent of them first."""
    if k <= 0:
        return []
    counts = Counter(nums)
    if k > len(counts):
        raise ValueError("k exceeds the number of distinct values")
    largest = heapq.nlargest(k, ((freq, value) for value, freq in counts.items()))
    return [value for _, value in reversed(largest)]


def intersection(nums1: list[int], nums2: list[int]) -> list[int]:
    """Distinct values common to both lists, in order of first sight in ``nums2``."""
    remaining = set(nums1)
    common: list[int] = []
    for value in nums2:
        if value in remaining:
            common.append(value)
            remaining.discard(value)
    return common


def intersect(nums1: list[int], nums2: list[int]) -> list[int]:
    """Common values counted with multiplicity, in ``nums2`` order."""
    available = Counter(nums1)
    common: list[int] = []
    for value in nums2:
        if available[value] > 0:
            common.append(value)
            available[value] -= 1
    return common


def search(nums: list[int], target: int) -> int:
    """Binary search over a sorted list; -1 when ``target`` is absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if target < nums[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def flip_and_invert_image(image: list[list[int]]) -> list[list[int]]:
    """Reverse each row and invert its bits; short rows are padded with zeros."""
    width = max(map(len, image), default=0)
    return [
        [int(bit == 0) for bit in reversed(row)] + [0] * (width - len(row))
        for row in image
    ]


def fair_candy_swap(a: list[int], b: list[int]) -> list[int]:
    """First pair ``[x, y]`` whose exchange evens out the two totals, or ``[]``."""
    total_a, total_b = sum(a), sum(b)
    for x in a:
        for y in b:
            if total_a - x + y == total_b - y + x:
                return [x, y]
    return []


def sort_array_by_parity(nums: list[int]) -> list[int]:
    """Even values first, then odd ones, each in their original order."""
    evens = [value for value in nums if value % 2 == 0]
    odds = [value for value in nums if value % 2 != 0]
    return evens + odds


def sort_array_by_parity_ii(nums: list[int]) -> list[int]:
    """Alternate even and odd values, starting with an even one."""
    odds = [value for value in nums if value % 2 != 0]
    evens = [value for value in nums if value % 2 == 0]
    half = len(nums) // 2
    if len(evens) < half or len(odds) < half:
        raise ValueError("needs as many even values as odd ones")
    return [value for pair in zip(evens[:half], odds[:half]) for value in pair]


def repeated_n_times(nums: list[int]) -> int:
    """The value whose repeats reach half the list's length, or -1."""
    needed = len(nums) // 2
    seen: dict[int, int] = {}
    for value in nums:
        if value in seen:
            seen[value] += 1
            if seen[value] == needed:
                return value
        else:
            seen[value] = 1
    return -1


def sorted_squares(nums: list[int]) -> list[int]:
    """Squares of the values, in ascending order."""
    return sorted(value * value for value in nums)


def height_checker(heights: list[int]) -> int:
    """Number of positions that differ from the sorted order."""
    return sum(a != b for a, b in zip(heights, sorted(heights)))


def relative_sort_array(arr1: list[int], arr2: list[int]) -> list[int]:
    """Order ``arr1`` by ``arr2``, then append the leftovers in ascending order.

    Leftovers are only gathered when ``arr2`` is non-empty, and a leftover equal
    to ``arr1[len(arr2) - 1]`` is dropped.
    """
    placed = [value for wanted in arr2 for value in arr1 if value == wanted]
    if not arr2:
        return placed
    ordered = set(arr2)
    pivot_index = len(arr2) - 1

    def kept(value: int) -> bool:
        return pivot_index >= len(arr1) or value != arr1[pivot_index]

    leftovers = sorted(value for value in arr1 if value not in ordered and kept(value))
    return placed + leftovers