import dataclasses

import pytest

from boosterswap.constant_product import lp_tokens_to_trading_tokens
from boosterswap.curve_types import (
    RoundDirection,
    SwapResult,
    TradeDirection,
    TradingTokenResult,
)


def test_opposite_swaps_directions():
    assert TradeDirection.ZERO_FOR_ONE.opposite() is TradeDirection.ONE_FOR_ZERO
    assert TradeDirection.ONE_FOR_ZERO.opposite() is TradeDirection.ZERO_FOR_ONE


@pytest.mark.parametrize("code", [0, 1])
def test_opposite_is_involution(code):
    direction = TradeDirection.from_u8(code)
    assert direction.opposite().opposite() is direction


@pytest.mark.parametrize("direction", list(TradeDirection))
def test_from_u8_round_trip(direction):
    assert TradeDirection.from_u8(direction.value) is direction
    assert direction.matches(direction.value)
    assert not direction.matches(direction.opposite().value)


def test_numeric_codes_follow_source():
    assert TradeDirection.from_u8(0) is TradeDirection.ZERO_FOR_ONE
    assert TradeDirection.from_u8(1) is TradeDirection.ONE_FOR_ZERO


@pytest.mark.parametrize("value", [2, 255, -1])
def test_from_u8_rejects_unknown(value):
    with pytest.raises(ValueError, match="Invalid trade direction"):
        TradeDirection.from_u8(value)


def test_round_directions_change_conversion():
    floor = lp_tokens_to_trading_tokens(5, 10, 2, 49, RoundDirection.FLOOR)
    ceiling = lp_tokens_to_trading_tokens(5, 10, 2, 49, RoundDirection.CEILING)
    assert floor == TradingTokenResult(token_0_amount=1, token_1_amount=24)
    assert ceiling == TradingTokenResult(token_0_amount=1, token_1_amount=25)


def test_trading_token_result_is_frozen_value():
    result = TradingTokenResult(token_0_amount=3, token_1_amount=4)
    assert result == TradingTokenResult(3, 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.token_0_amount = 5


def test_swap_result_equality_by_fields():
    fields = dict(
        new_swap_source_amount=11,
        new_swap_destination_amount=9,
        source_amount_swapped=1,
        destination_amount_swapped=1,
        margin_trade_fee=0,
        padding_trade_fee=0,
        protocol_fee=0,
        fund_fee=0,
    )
    assert SwapResult(**fields) == SwapResult(**fields)
    assert SwapResult(**fields) != SwapResult(**{**fields, "fund_fee": 1})