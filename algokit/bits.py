"""Single-bit manipulation helpers and set-bit counting."""

from __future__ import annotations


def get_bit(n: int, position: int) -> int:
    """The bit of ``n`` at ``position`` (0 or 1)."""
    return 1 if n & (1 << position) else 0


def set_bit(n: int, position: int) -> int:
    """``n`` with the bit at ``position`` set to 1."""
    return n | (1 << position)


def clear_bit(n: int, position: int) -> int:
    """``n`` with the bit at ``position`` cleared to 0."""
    return n & ~(1 << position)


def update_bit(n: int, position: int, value: int) -> int:
    """``n`` with the bit at ``position`` replaced by ``value``."""
    return clear_bit(n, position) | (value << position)


def clear_last_bits(n: int, count: int) -> int:
    """``n`` with its lowest ``count`` bits cleared."""
    return n & (-1 << count)


def clear_bits_range(n: int, low: int, high: int) -> int:
    """``n`` with the bits from ``low`` to ``high`` inclusive cleared."""
    mask = (-1 << (high + 1)) | ((1 << low) - 1)
    return n & mask


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"set bits are counted for non-negative numbers, got {n}")


def count_set_bits(n: int) -> int:
    """Number of 1 bits in ``n``, testing one bit at a time."""
    _require_non_negative(n)
    count = 0
    while n > 0:
        count += n & 1
        n >>= 1
    return count


def count_set_bits_fast(n: int) -> int:
    """Number of 1 bits in ``n``, dropping the lowest set bit each step."""
    _require_non_negative(n)
    count = 0
    while n > 0:
        n &= n - 1
        count += 1
    return count