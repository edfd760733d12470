"""Classic array problems: sub-arrays, pair sums, records and repeats."""

from itertools import accumulate
from typing import Iterable, List, Optional, Sequence, Tuple


def negated(values: Iterable[int]) -> List[int]:
    """Return the negation of every value."""
    return [-value for value in values]


def pair_sum(values: Sequence[int], target: int) -> Optional[Tuple[int, int]]:
    """Find indices ``(i, j)``, ``i < j``, of two values adding up to ``target``.

    ``values`` must be sorted in ascending order. Returns None if no pair exists.
    """
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total == target:
            return low, high
        if total > target:
            high -= 1
        else:
            low += 1
    return None


def kadane(values: Iterable[int]) -> int:
    """Return the largest sub-array sum, never less than 0 (the empty sub-array)."""
    items = list(values)
    if not items:
        raise ValueError("kadane() needs at least one value")
    current = 0
    best = 0
    for value in items:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def subarray_sums(values: Sequence[int]) -> List[int]:
    """Return the sum of every contiguous sub-array, by start then end index."""
    items = list(values)
    return [
        total
        for start in range(len(items))
        for total in accumulate(items[start:])
    ]


def all_subarrays(values: Sequence[int]) -> List[List[int]]:
    """Return every contiguous sub-array, by start then end index."""
    items = list(values)
    return [
        items[start:end]
        for start in range(len(items))
        for end in range(start + 1, len(items) + 1)
    ]


def longest_arithmetic_subarray(values: Sequence[int]) -> int:
    """Return the length of the longest contiguous run with a constant difference."""
    items = list(values)
    if len(items) < 2:
        return len(items)
    best = current = 2
    difference = items[1] - items[0]
    for previous, value in zip(items[1:], items[2:]):
        if value - previous == difference:
            current += 1
        else:
            difference = value - previous
            current = 2
        best = max(best, current)
    return best


def record_breaking_days(values: Sequence[int]) -> int:
    """Count days above every earlier day and above the following day.

    The day after the last one counts as having -1 visitors; a single day
    always counts as a record.
    """
    items = list(values)
    if len(items) == 1:
        return 1
    count = 0
    highest = float("-inf")
    for value, following in zip(items, items[1:] + [-1]):
        if value > highest and value > following:
            count += 1
        highest = max(highest, value)
    return count


def first_repeating_index(values: Iterable[int]) -> Optional[int]:
    """Return the smallest index whose value occurs again later, or None."""
    first_seen = {}
    best: Optional[int] = None
    for index, value in enumerate(values):
        if value in first_seen:
            seen = first_seen[value]
            best = seen if best is None else min(best, seen)
        else:
            first_seen[value] = index
    return best


def subarrays_with_sum(values: Sequence[int], target: int) -> List[Tuple[int, int]]:
    """Return every ``(start, end)`` pair whose inclusive slice sums to ``target``."""
    items = list(values)
    return [
        (start, start + offset)
        for start in range(len(items))
        for offset, total in enumerate(accumulate(items[start:]))
        if total == target
    ]


def smallest_missing_non_negative(values: Iterable[int]) -> int:
    """Return the smallest non-negative integer that is not among ``values``."""
    present = {value for value in values if value >= 0}
    candidate = 0
    while candidate in present:
        candidate += 1
    return candidate


def max_circular_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sub-array sum when the array wraps around."""
    items = list(values)
    non_wrapping = kadane(items)
    wrapping = sum(items) + kadane(negated(items))
    return max(non_wrapping, wrapping)


def is_pythagorean_triplet(x: int, y: int, z: int) -> bool:
    """Return whether the three sides, in any order, form a right triangle."""
    a, b, c = sorted((abs(x), abs(y), abs(z)))
    return a * a + b * b == c * c