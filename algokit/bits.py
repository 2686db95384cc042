"""Bit manipulation helpers for 32-bit unsigned values."""

_MASK32 = 0xFFFFFFFF


def reverse_bits(n: int) -> int:
    """Reverse the order of the 32 bits of an unsigned integer."""
    if not 0 <= n <= _MASK32:
        raise ValueError("n must be an unsigned 32-bit integer")
    n = ((n >> 16) | (n << 16)) & _MASK32
    n = ((n & 0xFF00FF00) >> 8) | ((n & 0x00FF00FF) << 8)
    n = ((n & 0xF0F0F0F0) >> 4) | ((n & 0x0F0F0F0F) << 4)
    n = ((n & 0xCCCCCCCC) >> 2) | ((n & 0x33333333) << 2)
    n = ((n & 0xAAAAAAAA) >> 1) | ((n & 0x55555555) << 1)
    return n


def hamming_weight(n: int) -> int:
    """Count the set bits of a positive integer; zero or less gives 0."""
    count = 0
    while n > 0:
        count += 1
        n &= n - 1
    return count