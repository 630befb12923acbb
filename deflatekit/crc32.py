"""CRC-32 as used by the gzip format (reflected polynomial 0xEDB88320)."""

from __future__ import annotations

import struct
from functools import lru_cache

__all__ = ["crc32", "crc32_tables"]

_POLY = 0xEDB88320
_MASK = 0xFFFFFFFF


@lru_cache(maxsize=None)
def crc32_tables(slices: int = 8) -> tuple[tuple[int, ...], ...]:
    """Return ``slices`` lookup tables of 256 entries for sliced CRC-32.

    Table ``k`` holds the CRC of each byte value followed by ``k`` zero bytes.
    """
    if slices < 1:
        raise ValueError(f"need at least one table, got {slices!r}")

    first = []
    for byte in range(256):
        rem = byte
        for _ in range(8):
            rem = (rem >> 1) ^ (_POLY if rem & 1 else 0)
        first.append(rem)

    tables = [tuple(first)]
    for _ in range(1, slices):
        prev = tables[-1]
        tables.append(tuple((v >> 8) ^ first[v & 0xFF] for v in prev))
    return tuple(tables)


def _update_bytes(rem: int, chunk, t0) -> int:
    for byte in chunk:
        rem = (rem >> 8) ^ t0[(rem ^ byte) & 0xFF]
    return rem


def crc32(data=None, value: int = 0) -> int:
    """Continue the CRC-32 ``value`` over ``data``.

    With ``data`` of ``None`` the initial CRC value, 0, is returned.
    """
    if data is None:
        return 0
    buf = memoryview(data).cast("B")
    t0, t1, t2, t3, t4, t5, t6, t7 = crc32_tables(8)
    rem = ~value & _MASK

    body = len(buf) - len(buf) % 8
    for v1, v2 in struct.iter_unpack("<II", buf[:body]):
        x = rem ^ v1
        rem = (
            t7[x & 0xFF]
            ^ t6[(x >> 8) & 0xFF]
            ^ t5[(x >> 16) & 0xFF]
            ^ t4[x >> 24]
            ^ t3[v2 & 0xFF]
            ^ t2[(v2 >> 8) & 0xFF]
            ^ t1[(v2 >> 16) & 0xFF]
            ^ t0[v2 >> 24]
        )
    rem = _update_bytes(rem, buf[body:], t0)
    return ~rem & _MASK