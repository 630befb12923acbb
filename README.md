# deflatekit

Building blocks for DEFLATE, zlib and gzip style compressors, written in
plain Python with no third-party dependencies:

- `deflatekit.crc32` – the gzip CRC-32 checksum (slice-by-8 table method)
- `deflatekit.adler32` – the zlib Adler-32 checksum
- `deflatekit.bits` – byte swapping, bit scans and small integer helpers
- `deflatekit.matchfinder` – the LZ hash function, match extension and
  position-table maintenance for sliding windows
- `deflatekit.bt_matchfinder` – a binary-tree matchfinder that reports
  Lempel-Ziv matches at each input position

## Installation

```
pip install deflatekit
```

To run the test suite:

```
pip install deflatekit[test]
pytest
```

## Checksums

Both checksums take any bytes-like object and can be computed in one go or
continued across pieces of input by passing the previous result back in.

```python
from deflatekit.crc32 import crc32
from deflatekit.adler32 import adler32

data = b"hello, world"

crc = crc32(data, 0)
adler = adler32(data, 1)

# The same values, computed in two parts
assert crc32(data[5:], crc32(data[:5], 0)) == crc
assert adler32(data[5:], adler32(data[:5], 1)) == adler
```

Passing `None` as the data (the default) gives the initial value of the
checksum: `0` for CRC-32 and `1` for Adler-32. `adler32` raises
`ValueError` for a starting value that does not fit in 32 bits.

`crc32_tables(slices)` returns the lookup tables behind `crc32`: `slices`
tables of 256 entries, where table `k` holds the CRC of each byte value
followed by `k` zero bytes. It raises `ValueError` for fewer than one table.

## Bit helpers

```python
from deflatekit.bits import bswap32, bsr, bsf, div_round_up, align

bswap32(0x12345678)   # 0x78563412
bsr(0x80)             # 7, index of the most significant set bit
bsf(0x80)             # 7, index of the least significant set bit
div_round_up(10, 4)   # 3
align(10, 8)          # 16
```

`bswap16`, `bswap32` and `bswap64` raise `ValueError` for values that do not
fit their width; `bsr` and `bsf` need a positive integer; `div_round_up`
needs a positive divisor; `align` needs a power-of-two alignment.

## Matchfinding

`BtMatchfinder` keeps a hash table of binary trees over a sliding window of
`2**window_order` bytes (`window_order` from 1 to 15, default 15). At each
position `get_matches` returns the matches it found against earlier data, as
frozen `LzMatch` records with a `length` and an `offset`, in order of
strictly increasing length and non-decreasing offset. The search stops at a
match of `nice_len` bytes or after `max_search_depth` tree nodes.

```python
from deflatekit.bt_matchfinder import BtMatchfinder

data = b"abcdabcdabcdabcd" + b"\0" * 8
mf = BtMatchfinder(window_order=15)

for pos in range(len(data) - 8):
    matches = mf.get_matches(data, 0, pos, max_len=8, nice_len=8,
                             max_search_depth=16)
    for m in matches:
        print(pos, m.length, m.offset)
```

Positions are given as `base + cur_pos`: `base` is the index in `data` of
the byte that was next when the matchfinder was last reset or slid, and
`cur_pos` counts from there. Each call computes the hash codes of the
following position, so positions must be visited one after another, each
through either `get_matches` or `skip_position`.

- `skip_position(data, base, cur_pos, nice_len, max_search_depth)` inserts a
  position without collecting matches.
- `slide_window()` makes stored positions relative to a base one window
  later; call it after each window's worth of input.
- `reset()` forgets all earlier positions, ready for new input.

`max_len` must be at least `REQUIRED_NBYTES` (5), `nice_len` must lie
between 1 and `max_len`, `max_search_depth` must be at least 1, and there
must be `max_len` bytes of data at the position; otherwise a `ValueError`
is raised.

The lower-level functions in `deflatekit.matchfinder` – `lz_hash`,
`lz_extend`, `init_table` and `rebase_table` – are available for building
other matchfinders.

## What this package does not do

deflatekit provides the pieces only. It has no DEFLATE compressor or
decompressor, does not read or write gzip or zlib streams, and has no
command-line tool.