"""Small recursive exercises on numbers, sequences and strings."""

import math
from itertools import groupby
from typing import List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def sum_to(n: int) -> int:
    """Return ``1 + 2 + ... + n``."""
    _require_non_negative("n", n)
    return sum(range(n + 1))


def power(n: int, p: int) -> int:
    """Return ``n`` raised to the non-negative integer power ``p``."""
    _require_non_negative("p", p)
    result = 1
    for _ in range(p):
        result *= n
    return result


def factorial(n: int) -> int:
    """Return ``n!``."""
    _require_non_negative("n", n)
    return math.factorial(n)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    _require_non_negative("n", n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def is_sorted(values: Sequence[T]) -> bool:
    """Return whether ``values`` is strictly increasing."""
    return all(a < b for a, b in zip(values, values[1:]))


def count_down(n: int) -> List[int]:
    """Return ``[n, n - 1, ..., 1]``."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    return list(range(n, 0, -1))


def count_up(n: int) -> List[int]:
    """Return ``[1, 2, ..., n]``."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    return list(range(1, n + 1))


def first_occurrence(values: Sequence[T], key: T) -> Optional[int]:
    """Return the first index of ``key``, or None if absent."""
    return next((i for i, value in enumerate(values) if value == key), None)


def last_occurrence(values: Sequence[T], key: T) -> Optional[int]:
    """Return the last index of ``key``, or None if absent."""
    return next(
        (i for i in range(len(values) - 1, -1, -1) if values[i] == key), None
    )


def reverse_string(s: str) -> str:
    """Return ``s`` reversed."""
    return s[::-1]


def replace_pi(s: str) -> str:
    """Replace every ``pi``, scanned left to right, with ``"3.14 "``."""
    return s.replace("pi", "3.14 ")


def tower_of_hanoi(n: int, source: str, target: str, spare: str) -> List[Tuple[str, str]]:
    """Return the moves, as ``(from, to)`` pairs, that shift ``n`` disks."""
    _require_non_negative("n", n)
    moves: List[Tuple[str, str]] = []

    def solve(count: int, src: str, dest: str, helper: str) -> None:
        if count == 0:
            return
        solve(count - 1, src, helper, dest)
        moves.append((src, dest))
        solve(count - 1, helper, dest, src)

    solve(n, source, target, spare)
    return moves


def remove_consecutive_duplicates(s: str) -> str:
    """Collapse each run of equal adjacent characters to one character."""
    return "".join(char for char, _ in groupby(s))


def move_x_to_end(s: str) -> str:
    """Move every ``x`` to the end, keeping the other characters in order."""
    others = s.replace("x", "")
    return others + "x" * (len(s) - len(others))