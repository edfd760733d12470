"""Prime numbers by the sieve of Eratosthenes."""

from typing import List


def prime_sieve(n: int) -> List[int]:
    """Return every prime up to and including ``n``."""
    if n < 2:
        return []
    composite = [False] * (n + 1)
    for i in range(2, int(n**0.5) + 1):
        if not composite[i]:
            for multiple in range(i * i, n + 1, i):
                composite[multiple] = True
    return [i for i in range(2, n + 1) if not composite[i]]


def prime_factors(n: int) -> List[int]:
    """Return the prime factors of ``n`` in ascending order, with repeats."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    smallest = list(range(n + 1))
    for i in range(2, int(n**0.5) + 1):
        if smallest[i] == i:
            for multiple in range(i * i, n + 1, i):
                if smallest[multiple] == multiple:
                    smallest[multiple] = i
    factors: List[int] = []
    while n != 1:
        factors.append(smallest[n])
        n //= smallest[n]
    return factors