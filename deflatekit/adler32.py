"""Adler-32 checksum as used by the zlib format."""

from __future__ import annotations

from itertools import accumulate

__all__ = ["adler32"]

DIVISOR = 65521

# The most bytes that can be summed before s2 could exceed 32 bits, assuming
# every byte is 0xFF and s1, s2 start at DIVISOR - 1.  Reducing at this
# interval keeps intermediate sums small.
MAX_CHUNK_SIZE = 5552

_MASK = 0xFFFFFFFF


def adler32(data=None, value: int = 1) -> int:
    """Continue the Adler-32 ``value`` over ``data``.

    With ``data`` of ``None`` the initial Adler-32 value, 1, is returned.
    """
    if data is None:
        return 1
    if not 0 <= value <= _MASK:
        raise ValueError(f"Adler-32 value {value!r} does not fit in 32 bits")

    buf = memoryview(data).cast("B")
    s1 = value & 0xFFFF
    s2 = value >> 16

    for start in range(0, len(buf), MAX_CHUNK_SIZE):
        chunk = buf[start:start + MAX_CHUNK_SIZE]
        # Each byte adds to s1, and s2 gains s1 after every byte: that is the
        # starting s1 once per byte plus the running prefix sums of the chunk.
        s2 += s1 * len(chunk) + sum(accumulate(chunk))
        s1 += sum(chunk)
        s1 %= DIVISOR
        s2 %= DIVISOR

    return (s2 << 16) | s1