import pytest
from hypothesis import given
from hypothesis import strategies as st

from boosterswap.fees import (
    FEE_RATE_DENOMINATOR_VALUE,
    calculate_pre_fee_amount,
    floor_div,
    fund_fee,
    protocol_fee,
    trading_fee,
)
from boosterswap.mathutils import U128_MAX, U64_MAX

amounts = st.integers(min_value=0, max_value=U64_MAX)
rates = st.integers(min_value=0, max_value=FEE_RATE_DENOMINATOR_VALUE)


def test_floor_div_value():
    assert floor_div(10, 3, 4) == 7


def test_floor_div_zero_denominator_is_none():
    assert floor_div(10, 3, 0) is None


def test_floor_div_overflow_is_none():
    assert floor_div(U128_MAX, 2, 1) is None


@given(amounts)
def test_zero_rate_means_zero_fee(amount):
    assert trading_fee(amount, 0) == 0
    assert protocol_fee(amount, 0) == 0
    assert fund_fee(amount, 0) == 0


@given(amounts)
def test_full_rate_takes_everything(amount):
    assert trading_fee(amount, FEE_RATE_DENOMINATOR_VALUE) == amount
    assert protocol_fee(amount, FEE_RATE_DENOMINATOR_VALUE) == amount


@given(amounts, rates)
def test_trading_fee_rounds_up_against_floor(amount, rate):
    floor = floor_div(amount, rate, FEE_RATE_DENOMINATOR_VALUE)
    ceiling = trading_fee(amount, rate)
    assert ceiling - floor in (0, 1)
    exact = amount * rate % FEE_RATE_DENOMINATOR_VALUE == 0
    assert (ceiling == floor) == exact


@given(amounts, rates)
def test_protocol_and_fund_fee_agree(amount, rate):
    assert protocol_fee(amount, rate) == fund_fee(amount, rate)


def test_tiny_trading_fee_is_rounded_up():
    assert trading_fee(1, 1) == 1


def test_trading_fee_overflow_raises():
    with pytest.raises(OverflowError):
        trading_fee(U128_MAX, 2)


@given(amounts)
def test_pre_fee_amount_with_zero_rate_is_identity(post):
    assert calculate_pre_fee_amount(post, 0) == post


@given(amounts, st.integers(min_value=1, max_value=FEE_RATE_DENOMINATOR_VALUE - 1))
def test_pre_fee_amount_round_trip(post, rate):
    pre = calculate_pre_fee_amount(post, rate)
    assert pre >= post
    assert pre - trading_fee(pre, rate) >= post


def test_pre_fee_amount_full_rate_is_none():
    assert calculate_pre_fee_amount(5, FEE_RATE_DENOMINATOR_VALUE) is None


def test_pre_fee_amount_rate_above_denominator_is_none():
    assert calculate_pre_fee_amount(5, FEE_RATE_DENOMINATOR_VALUE + 1) is None