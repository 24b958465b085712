"""Number puzzles: Josephus, Pascal's triangle, prime sieve, Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

__all__ = ["Move", "josephus", "pascal_triangle", "primes_up_to", "hanoi_moves"]


class Move(NamedTuple):
    """One disk moved from one rod to another."""

    disk: int
    source: str
    target: str


def josephus(n: int, k: int) -> int:
    """Return the 1-based position of the survivor among ``n`` people."""
    if n < 1:
        raise ValueError("there must be at least one person")
    survivor = 1
    for size in range(2, n + 1):
        survivor = (survivor + k - 1) % size + 1
    return survivor


def pascal_triangle(n: int) -> list[list[int]]:
    """Return the first ``n`` rows of Pascal's triangle."""
    if n < 0:
        raise ValueError("row count must be non-negative")
    rows = []
    for line in range(1, n + 1):
        row = []
        coefficient = 1
        for i in range(1, line + 1):
            row.append(coefficient)
            coefficient = coefficient * (line - i) // i
        rows.append(row)
    return rows


def primes_up_to(n: int) -> list[int]:
    """Return every prime not greater than ``n`` (sieve of Eratosthenes)."""
    if n < 2:
        return []
    is_prime = bytearray([1]) * (n + 1)
    is_prime[0] = is_prime[1] = 0
    p = 2
    while p * p <= n:
        if is_prime[p]:
            is_prime[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
        p += 1
    return [number for number, flag in enumerate(is_prime) if flag]


def _hanoi(n: int, source: str, target: str, auxiliary: str) -> Iterator[Move]:
    if n == 1:
        yield Move(1, source, target)
        return
    yield from _hanoi(n - 1, source, auxiliary, target)
    yield Move(n, source, target)
    yield from _hanoi(n - 1, auxiliary, target, source)


def hanoi_moves(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 1:
        raise ValueError("there must be at least one disk")
    return _hanoi(n, source, target, auxiliary)