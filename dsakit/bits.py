"""Small bit-manipulation routines on integers."""

from __future__ import annotations


def count_set_bits(n: int) -> int:
    """Number of one bits in ``n``; zero for non-positive ``n``."""
    return bin(n).count("1") if n > 0 else 0


def bits_to_flip(a: int, b: int) -> int:
    """Number of bits that differ between non-negative ``a`` and ``b``."""
    if a < 0 or b < 0:
        raise ValueError("bits_to_flip needs non-negative integers")
    return bin(a ^ b).count("1")


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0