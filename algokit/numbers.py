"""Small number-theoretic and combinatorial routines."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple


class Move(NamedTuple):
    """One move of the Tower of Hanoi: a disk from one peg to another."""

    disk: int
    source: str
    target: str


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k)."""
    if n < 0 or k < 0 or k > n:
        raise ValueError("binomial coefficient needs 0 <= k <= n")
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def catalan(n: int) -> int:
    """Return the ``n``-th Catalan number."""
    if n < 0:
        raise ValueError("n must not be negative")
    return binomial(2 * n, n) // (n + 1)


def primes_up_to(n: int) -> list[int]:
    """Return every prime not greater than ``n``, by the sieve of Eratosthenes."""
    if n < 2:
        return []
    is_prime = bytearray([1]) * (n + 1)
    is_prime[0] = is_prime[1] = 0
    p = 2
    while p * p <= n:
        if is_prime[p]:
            is_prime[p * p :: p] = bytearray(len(range(p * p, n + 1, p)))
        p += 1
    return [number for number, flag in enumerate(is_prime) if flag]


def equal_by_xor(a: int, b: int) -> bool:
    """Return whether ``a`` equals ``b`` using only an exclusive or."""
    return not a ^ b


def _moves(n: int, source: str, spare: str, target: str) -> Iterator[Move]:
    if n == 1:
        yield Move(1, source, target)
        return
    yield from _moves(n - 1, source, target, spare)
    yield Move(n, source, target)
    yield from _moves(n - 1, spare, source, target)


def tower_of_hanoi(
    n: int, source: str = "A", spare: str = "B", target: str = "C"
) -> list[Move]:
    """Return the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    if n == 0:
        return []
    return list(_moves(n, source, spare, target))