"""Linear and binary search over sequences."""

from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def binary_search(values: Sequence[T], key: T) -> Optional[int]:
    """Return an index of ``key`` in the sorted ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return None


def linear_search(values: Sequence[T], key: T) -> Optional[int]:
    """Return the first index of ``key`` in ``values``, or None if absent."""
    return next((index for index, value in enumerate(values) if value == key), None)