"""Bit manipulation helpers."""

from functools import reduce
from operator import xor
from typing import Iterable, List, Sequence, TypeVar

T = TypeVar("T")

_INT_MASK = 0xFFFFFFFF


def get_bit(n: int, pos: int) -> int:
    """Return the bit of ``n`` at ``pos`` as 0 or 1."""
    return int(n & (1 << pos) != 0)


def set_bit(n: int, pos: int) -> int:
    """Return ``n`` with the bit at ``pos`` set to 1."""
    return n | (1 << pos)


def clear_bit(n: int, pos: int) -> int:
    """Return ``n`` with the bit at ``pos`` cleared to 0."""
    return n & ~(1 << pos)


def update_bit(n: int, pos: int, value: int) -> int:
    """Return ``n`` with the bit at ``pos`` replaced by ``value``."""
    return clear_bit(n, pos) | (value << pos)


def is_power_of_two(n: int) -> bool:
    """Return whether ``n`` is a positive power of two."""
    return bool(n) and not (n & (n - 1))


def count_ones(n: int) -> int:
    """Count the 1 bits of ``n``; negatives are taken as 32-bit two's complement."""
    if n < 0:
        n &= _INT_MASK
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def subsets(items: Sequence[T]) -> List[List[T]]:
    """Return every subset of ``items``, ordered by the bitmask that selects it."""
    return [
        [item for position, item in enumerate(items) if mask & (1 << position)]
        for mask in range(1 << len(items))
    ]


def unique(values: Iterable[int]) -> int:
    """Return the value that appears once when all others appear twice."""
    return reduce(xor, values, 0)