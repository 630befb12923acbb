import random
import zlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from deflatekit.crc32 import crc32, crc32_tables


@pytest.mark.parametrize("initial", [0, 1234])
def test_initial_value_without_data(initial):
    assert crc32(None, initial) == 0


def test_default_initial_value():
    assert crc32(None) == 0
    assert crc32(b"") == 0


def test_check_value():
    assert crc32(b"123456789") == 0xCBF43926


def test_table_entries_fixed_by_source():
    tables = crc32_tables(8)
    assert len(tables) == 8
    assert all(len(t) == 256 for t in tables)
    assert tables[0][1] == 0x77073096
    assert tables[0][255] == 0x2D02EF8D
    assert tables[1][1] == 0x191B3141
    assert tables[2][1] == 0x01C26A37
    assert tables[3][1] == 0xB8BC6765
    assert tables[4][1] == 0x3D6029B0
    assert tables[7][1] == 0xCCAA009E


def test_fewer_slices_are_prefix():
    assert crc32_tables(4) == crc32_tables(8)[:4]
    assert crc32_tables(1) == crc32_tables(8)[:1]


def test_tables_reject_zero_slices():
    with pytest.raises(ValueError):
        crc32_tables(0)


def _select_initial_crc(rng):
    if rng.random() < 0.5:
        return 0
    return rng.getrandbits(32)


@pytest.mark.parametrize("limit,iterations", [(256, 300), (1024, 100), (32768, 10)])
def test_random_buffers_match_zlib(limit, iterations):
    rng = random.Random(limit)
    for _ in range(iterations):
        length = rng.randrange(limit)
        data = rng.randbytes(length)
        initial = _select_initial_crc(rng)
        assert crc32(data, initial) == zlib.crc32(data, initial)


@given(st.binary(max_size=2000), st.integers(min_value=0, max_value=0xFFFFFFFF), st.data())
def test_multipart(data, initial, draw):
    division = draw.draw(st.integers(min_value=0, max_value=len(data)))
    whole = crc32(data, initial)
    part = crc32(data[division:], crc32(data[:division], initial))
    assert part == whole
    assert whole == zlib.crc32(data, initial)


def test_accepts_bytearray_and_memoryview():
    data = bytes(range(256)) * 3
    expected = zlib.crc32(data)
    assert crc32(bytearray(data)) == expected
    assert crc32(memoryview(data)[5:]) == zlib.crc32(data[5:])


def test_unaligned_slices():
    data = bytes(range(200))
    for start in range(9):
        assert crc32(data[start:]) == zlib.crc32(data[start:])