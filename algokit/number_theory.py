"""Euclid's greatest common divisor and prime-pair decomposition."""

from __future__ import annotations

from math import isqrt


def _truncated_mod(m: int, n: int) -> int:
    remainder = abs(m) % abs(n)
    return -remainder if m < 0 else remainder


def gcd(m: int, n: int) -> int:
    """Greatest common divisor by Euclid's repeated remainder."""
    if n == 0:
        raise ValueError("the second number must be non-zero")
    while (remainder := _truncated_mod(m, n)) != 0:
        m, n = n, remainder
    return n


def prime_sum(n: int) -> tuple[int, int]:
    """Two primes adding up to ``n``, smallest first, or ``(-1, -1)`` if none exist."""
    if n < 2:
        return (-1, -1)
    sieve = [True] * n
    sieve[0] = sieve[1] = False
    for i in range(2, isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i : n : i] = [False] * len(range(i * i, n, i))
    for i in range(2, n):
        if sieve[i] and sieve[n - i]:
            return (i, n - i)
    return (-1, -1)