"""Lempel-Ziv matchfinding with a hash table of binary trees.

Each hash bucket holds a binary tree of earlier positions whose first four
bytes share a hash code.  Each tree is sorted so that a left child is a
sequence lexicographically less than its parent and a right child a greater
one.  Visiting a position searches its bucket's tree for matches and
re-roots the tree at the new position in the same pass.  A small two-way
hash table gives length-3 matches as well.
"""

from __future__ import annotations

from dataclasses import dataclass

from .matchfinder import init_table, lz_extend, lz_hash, rebase_table

__all__ = ["LzMatch", "BtMatchfinder", "REQUIRED_NBYTES"]

HASH3_ORDER = 16
HASH3_WAYS = 2
HASH4_ORDER = 16

# There must be enough bytes left to read a 32-bit sequence from the
# position after the current one.
REQUIRED_NBYTES = 5


@dataclass(frozen=True)
class LzMatch:
    """A match: ``length`` bytes equal to those ``offset`` bytes back."""

    length: int
    offset: int


class BtMatchfinder:
    """Binary-tree matchfinder over a sliding window of ``2**window_order`` bytes.

    Positions are relative to a base index into the data: the index of the
    byte that was next when the matchfinder was last reset or slid.  The
    caller slides the window every ``window_size`` positions and then counts
    positions from the new base.
    """

    def __init__(self, window_order: int = 15) -> None:
        if not 1 <= window_order <= 15:
            raise ValueError(f"window order must be 1..15, got {window_order!r}")
        self.window_order = window_order
        self.window_size = 1 << window_order
        self.reset()

    def reset(self) -> None:
        """Forget all earlier positions, ready for a new input buffer."""
        ws = self.window_size
        self._hash3 = init_table((1 << HASH3_ORDER) * HASH3_WAYS, ws)
        self._hash4 = init_table(1 << HASH4_ORDER, ws)
        self._children = init_table(2 * ws, ws)
        self._next_hashes = [0, 0]

    def slide_window(self) -> None:
        """Make all stored positions relative to a base ``window_size`` later."""
        ws = self.window_size
        rebase_table(self._hash3, ws)
        rebase_table(self._hash4, ws)
        rebase_table(self._children, ws)

    def get_matches(
        self,
        data,
        base: int,
        cur_pos: int,
        max_len: int,
        nice_len: int,
        max_search_depth: int,
    ) -> list[LzMatch]:
        """Return the matches for the sequence at ``base + cur_pos``.

        Matches come sorted by strictly increasing length and non-decreasing
        offset; there are at most ``nice_len - 2`` of them.  The search stops
        early at a match of ``nice_len`` bytes or after ``max_search_depth``
        tree nodes.
        """
        return self._advance(
            data, base, cur_pos, max_len, nice_len, max_search_depth, True
        )

    def skip_position(
        self,
        data,
        base: int,
        cur_pos: int,
        nice_len: int,
        max_search_depth: int,
    ) -> None:
        """Insert the position ``base + cur_pos`` without recording matches."""
        self._advance(
            data, base, cur_pos, nice_len, nice_len, max_search_depth, False
        )

    def _check_args(self, data, base, cur_pos, max_len, nice_len, max_search_depth):
        if max_len < REQUIRED_NBYTES:
            raise ValueError(
                f"max_len must be at least {REQUIRED_NBYTES}, got {max_len!r}"
            )
        if not 1 <= nice_len <= max_len:
            raise ValueError(
                f"nice_len must lie between 1 and max_len ({max_len}), got {nice_len!r}"
            )
        if max_search_depth < 1:
            raise ValueError(
                f"max_search_depth must be at least 1, got {max_search_depth!r}"
            )
        if base < 0 or not 0 <= cur_pos < self.window_size:
            raise ValueError(
                f"position {cur_pos!r} from base {base!r} is outside the window"
            )
        if base + cur_pos + max_len > len(data):
            raise ValueError("not enough data left at this position for max_len")

    def _left(self, node: int) -> int:
        return 2 * (node & (self.window_size - 1))

    def _right(self, node: int) -> int:
        return 2 * (node & (self.window_size - 1)) + 1

    def _advance(
        self,
        data,
        base: int,
        cur_pos: int,
        max_len: int,
        nice_len: int,
        max_search_depth: int,
        record: bool,
    ) -> list[LzMatch]:
        self._check_args(data, base, cur_pos, max_len, nice_len, max_search_depth)

        in_next = base + cur_pos
        depth_remaining = max_search_depth
        cutoff = cur_pos - self.window_size
        matches: list[LzMatch] = []
        best_len = 3
        hash3_tab = self._hash3
        hash4_tab = self._hash4
        children = self._children

        next_seq = int.from_bytes(data[in_next + 1:in_next + 5], "little")
        hash3, hash4 = self._next_hashes
        self._next_hashes = [
            lz_hash(next_seq & 0xFFFFFF, HASH3_ORDER),
            lz_hash(next_seq, HASH4_ORDER),
        ]

        slot = hash3 * HASH3_WAYS
        cur_node = hash3_tab[slot]
        cur_node_2 = hash3_tab[slot + 1]
        hash3_tab[slot] = cur_pos
        hash3_tab[slot + 1] = cur_node

        if record and cur_node > cutoff:
            seq3 = bytes(data[in_next:in_next + 3])
            if seq3 == bytes(data[base + cur_node:base + cur_node + 3]):
                matches.append(LzMatch(3, cur_pos - cur_node))
            elif cur_node_2 > cutoff and seq3 == bytes(
                data[base + cur_node_2:base + cur_node_2 + 3]
            ):
                matches.append(LzMatch(3, cur_pos - cur_node_2))

        cur_node = hash4_tab[hash4]
        hash4_tab[hash4] = cur_pos

        pending_lt = self._left(cur_pos)
        pending_gt = self._right(cur_pos)
        out_of_window = -self.window_size

        if cur_node <= cutoff:
            children[pending_lt] = out_of_window
            children[pending_gt] = out_of_window
            return matches

        best_lt_len = 0
        best_gt_len = 0
        length = 0

        while True:
            match_pos = base + cur_node

            if data[match_pos + length] == data[in_next + length]:
                length = lz_extend(data, in_next, match_pos, length + 1, max_len)
                if not record or length > best_len:
                    if record:
                        best_len = length
                        matches.append(LzMatch(length, in_next - match_pos))
                    if length >= nice_len:
                        children[pending_lt] = children[self._left(cur_node)]
                        children[pending_gt] = children[self._right(cur_node)]
                        return matches

            if data[match_pos + length] < data[in_next + length]:
                children[pending_lt] = cur_node
                pending_lt = self._right(cur_node)
                cur_node = children[pending_lt]
                best_lt_len = length
                length = min(length, best_gt_len)
            else:
                children[pending_gt] = cur_node
                pending_gt = self._left(cur_node)
                cur_node = children[pending_gt]
                best_gt_len = length
                length = min(length, best_lt_len)

            depth_remaining -= 1
            if cur_node <= cutoff or depth_remaining == 0:
                children[pending_lt] = out_of_window
                children[pending_gt] = out_of_window
                return matches