import pytest
from hypothesis import given
from hypothesis import strategies as st

from deflatekit.bits import align, bsf, bsr, bswap16, bswap32, bswap64, div_round_up


@given(st.integers(min_value=0, max_value=0xFFFF))
def test_bswap16_is_involution(n):
    assert bswap16(bswap16(n)) == n


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_bswap32_is_involution(n):
    assert bswap32(bswap32(n)) == n


@given(st.integers(min_value=0, max_value=0xFFFFFFFFFFFFFFFF))
def test_bswap64_is_involution(n):
    assert bswap64(bswap64(n)) == n


def test_bswap_moves_low_byte_to_top():
    assert bswap16(0x00FF) == 0xFF00
    assert bswap32(0x000000FF) == 0xFF000000
    assert bswap64(0x00000000000000FF) == 0xFF00000000000000


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_bswap32_matches_byte_order(n):
    assert bswap32(n).to_bytes(4, "little") == n.to_bytes(4, "big")


@pytest.mark.parametrize(
    "func,value",
    [(bswap16, 0x10000), (bswap32, 1 << 32), (bswap64, 1 << 64), (bswap32, -1)],
)
def test_bswap_rejects_out_of_range(func, value):
    with pytest.raises(ValueError):
        func(value)


@pytest.mark.parametrize("k", range(64))
def test_bit_scans_on_powers_of_two(k):
    assert bsr(1 << k) == k
    assert bsf(1 << k) == k


@given(st.integers(min_value=1, max_value=(1 << 64) - 1))
def test_bsr_bounds(n):
    i = bsr(n)
    assert (1 << i) <= n < (1 << (i + 1))


@given(st.integers(min_value=1, max_value=(1 << 64) - 1))
def test_bsf_bounds(n):
    i = bsf(n)
    assert n % (1 << i) == 0
    assert (n >> i) & 1 == 1


@pytest.mark.parametrize("func", [bsr, bsf])
@pytest.mark.parametrize("value", [0, -5])
def test_bit_scans_reject_non_positive(func, value):
    with pytest.raises(ValueError):
        func(value)


@given(st.integers(min_value=0, max_value=10**9), st.integers(min_value=1, max_value=10**6))
def test_div_round_up_bounds(n, d):
    q = div_round_up(n, d)
    assert q * d >= n
    assert (q - 1) * d < n or q == 0


def test_div_round_up_rejects_zero_divisor():
    with pytest.raises(ValueError):
        div_round_up(5, 0)


@given(st.integers(min_value=0, max_value=10**9), st.integers(min_value=0, max_value=20))
def test_align_bounds(n, shift):
    a = 1 << shift
    r = align(n, a)
    assert r % a == 0
    assert n <= r < n + a


@pytest.mark.parametrize("a", [0, 3, 12, -4])
def test_align_rejects_non_power_of_two(a):
    with pytest.raises(ValueError):
        align(10, a)