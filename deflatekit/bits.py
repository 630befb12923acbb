"""Small integer helpers: byte swapping, bit scanning and rounding."""

from __future__ import annotations

__all__ = [
    "bswap16",
    "bswap32",
    "bswap64",
    "bsr",
    "bsf",
    "div_round_up",
    "align",
]


def _bswap(n: int, nbytes: int) -> int:
    limit = 1 << (8 * nbytes)
    if not 0 <= n < limit:
        raise ValueError(f"value {n!r} does not fit in {nbytes * 8} unsigned bits")
    return int.from_bytes(n.to_bytes(nbytes, "little"), "big")


def bswap16(n: int) -> int:
    """Swap the bytes of a 16-bit unsigned integer."""
    return _bswap(n, 2)


def bswap32(n: int) -> int:
    """Swap the bytes of a 32-bit unsigned integer."""
    return _bswap(n, 4)


def bswap64(n: int) -> int:
    """Swap the bytes of a 64-bit unsigned integer."""
    return _bswap(n, 8)


def _require_positive(n: int) -> None:
    if n <= 0:
        raise ValueError(f"bit scan needs a positive integer, got {n!r}")


def bsr(n: int) -> int:
    """Return the index of the most significant set bit of ``n`` (n > 0)."""
    _require_positive(n)
    return n.bit_length() - 1


def bsf(n: int) -> int:
    """Return the index of the least significant set bit of ``n`` (n > 0)."""
    _require_positive(n)
    return (n & -n).bit_length() - 1


def div_round_up(n: int, d: int) -> int:
    """Divide ``n`` by ``d``, rounding up."""
    if d <= 0:
        raise ValueError(f"divisor must be positive, got {d!r}")
    return -(-n // d)


def align(n: int, a: int) -> int:
    """Round ``n`` up to a multiple of ``a``, which must be a power of two."""
    if a <= 0 or a & (a - 1):
        raise ValueError(f"alignment must be a power of two, got {a!r}")
    return (n + a - 1) & ~(a - 1)