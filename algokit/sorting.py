"""Classic comparison sorts. Each takes an iterable and returns a new list."""

from typing import Iterable, List, TypeVar

T = TypeVar("T")


def insertion_sort(values: Iterable[T]) -> List[T]:
    """Return the values sorted by insertion sort."""
    result = list(values)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def bubble_sort(values: Iterable[T]) -> List[T]:
    """Return the values sorted by bubble sort."""
    result = list(values)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def selection_sort(values: Iterable[T]) -> List[T]:
    """Return the values sorted by exchange selection sort."""
    result = list(values)
    n = len(result)
    for i in range(n - 1):
        for j in range(i + 1, n):
            if result[j] < result[i]:
                result[i], result[j] = result[j], result[i]
    return result


def _merge(left: List[T], right: List[T]) -> List[T]:
    merged: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> List[T]:
    """Return the values sorted by top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def wave_sort(values: Iterable[T]) -> List[T]:
    """Rearrange values so that every even-indexed item is >= its neighbours."""
    result = list(values)
    n = len(result)
    for i in range(0, n, 2):
        if i > 0 and result[i] < result[i - 1]:
            result[i], result[i - 1] = result[i - 1], result[i]
        if i < n - 1 and result[i] < result[i + 1]:
            result[i], result[i + 1] = result[i + 1], result[i]
    return result