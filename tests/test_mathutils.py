import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from boosterswap.mathutils import (
    U128_MAX,
    U64_MAX,
    checked_ceil_div,
    from_decimals,
    to_decimals,
)

values = st.integers(min_value=1, max_value=U64_MAX)


def test_zero_divisor_is_none():
    assert checked_ceil_div(10, 0) is None


def test_small_quotient_rounds_up_at_half():
    assert checked_ceil_div(3, 5) == (1, 0)


def test_small_quotient_rounds_down_below_half():
    assert checked_ceil_div(2, 5) == (0, 0)


def test_huge_dividend_with_zero_quotient_is_none():
    assert checked_ceil_div(U128_MAX, U128_MAX + 1) is None


@given(values, values)
def test_exact_division_keeps_divisor(quotient, divisor):
    assert checked_ceil_div(quotient * divisor, divisor) == (quotient, divisor)


@given(values, values)
def test_quotient_is_ceiling_and_divisor_reproduces_it(dividend, divisor):
    assume(dividend >= divisor)
    quotient, adjusted = checked_ceil_div(dividend, divisor)
    assert (quotient - 1) * divisor < dividend <= quotient * divisor
    assert adjusted <= divisor
    assert quotient * adjusted >= dividend


@given(st.integers(min_value=0, max_value=10**9), st.integers(min_value=0, max_value=9))
def test_decimals_round_trip(amount, decimals):
    assert from_decimals(to_decimals(amount, decimals), decimals) == amount


@given(st.integers(min_value=0, max_value=U64_MAX))
def test_zero_decimals_is_identity(amount):
    assert to_decimals(amount, 0) == amount
    assert from_decimals(amount, 0) == amount


def test_to_decimals_overflow_raises():
    with pytest.raises(OverflowError):
        to_decimals(U64_MAX, 1)


def test_scale_beyond_64_bits_raises():
    with pytest.raises(OverflowError):
        from_decimals(1, 20)


def test_negative_decimals_raise():
    with pytest.raises(ValueError):
        to_decimals(1, -1)