"""Helpers shared by the Lempel-Ziv matchfinders: hashing, match extension
and the position tables that slide along with the window."""

from __future__ import annotations

__all__ = ["lz_hash", "lz_extend", "init_table", "rebase_table"]

_HASH_MULTIPLIER = 0x1E35A7BD
_MASK32 = 0xFFFFFFFF
_MAX_WINDOW_SIZE = 1 << 15


def _check_window_size(window_size: int) -> None:
    if (
        window_size <= 0
        or window_size & (window_size - 1)
        or window_size > _MAX_WINDOW_SIZE
    ):
        raise ValueError(
            f"window size must be a power of two up to {_MAX_WINDOW_SIZE}, "
            f"got {window_size!r}"
        )


def lz_hash(seq: int, num_bits: int) -> int:
    """Hash a sequence prefix held in the low bits of a 32-bit value.

    The prefix is multiplied by a large constant; of the low 32 bits of the
    product, the top ``num_bits`` are the hash.
    """
    if not 1 <= num_bits <= 32:
        raise ValueError(f"hash width must be 1..32 bits, got {num_bits!r}")
    return ((seq * _HASH_MULTIPLIER) & _MASK32) >> (32 - num_bits)


def lz_extend(data, str_pos: int, match_pos: int, start_len: int, max_len: int) -> int:
    """Return how many bytes at ``match_pos`` equal those at ``str_pos``.

    The first ``start_len`` bytes are taken as already matched and the count
    never exceeds ``max_len``.
    """
    if not 0 <= start_len <= max_len:
        raise ValueError(
            f"start length {start_len!r} must lie between 0 and {max_len!r}"
        )
    if min(str_pos, match_pos) < 0 or max(str_pos, match_pos) + max_len > len(data):
        raise ValueError("match extends past the end of the data")

    a = data[str_pos + start_len:str_pos + max_len]
    b = data[match_pos + start_len:match_pos + max_len]
    if a == b:
        return max_len
    return start_len + next(i for i, (x, y) in enumerate(zip(a, b)) if x != y)


def init_table(num_entries: int, window_size: int) -> list[int]:
    """Return a position table with every entry out of the window."""
    _check_window_size(window_size)
    if num_entries < 0:
        raise ValueError(f"number of entries must not be negative, got {num_entries!r}")
    return [-window_size] * num_entries


def rebase_table(table, window_size: int) -> None:
    """Slide a position table by ``window_size`` bytes, in place.

    Each position becomes relative to a point ``window_size`` bytes later;
    positions that fall out of the window saturate at ``-window_size`` and
    stay out of bounds for good.
    """
    _check_window_size(window_size)
    table[:] = [v - window_size if v >= 0 else -window_size for v in table]