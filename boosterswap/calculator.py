"""Swap calculations combining the constant product curve with fees."""

from __future__ import annotations

from typing import Optional

from boosterswap import constant_product
from boosterswap.curve_types import RoundDirection, SwapResult, TradingTokenResult
from boosterswap.errors import SwapError, SwapErrorCode
from boosterswap.fees import fund_fee, protocol_fee, trading_fee
from boosterswap.mathutils import U128_MAX


def map_zero_to_none(x: int) -> Optional[int]:
    """Return None for zero, the value itself otherwise."""
    return None if x == 0 else x


def validate_supply(token_amount: int) -> None:
    """Raise SwapError(EMPTY_SUPPLY) when the token amount is zero."""
    if token_amount == 0:
        raise SwapError(SwapErrorCode.EMPTY_SUPPLY)


def _checked_add(a: int, b: int) -> Optional[int]:
    total = a + b
    return None if total > U128_MAX else total


def _checked_sub(a: int, b: int) -> Optional[int]:
    difference = a - b
    return None if difference < 0 else difference


def _build_result(
    swap_source_amount: int,
    swap_destination_amount: int,
    source_amount_swapped: int,
    destination_amount_swapped: int,
    margin_trade_fee: int,
    padding_trade_fee: int,
    protocol_fee_amount: int,
    fund_fee_amount: int,
) -> Optional[SwapResult]:
    new_source = _checked_add(swap_source_amount, source_amount_swapped)
    if new_source is None:
        return None
    new_destination = _checked_sub(swap_destination_amount, destination_amount_swapped)
    if new_destination is None:
        return None
    return SwapResult(
        new_swap_source_amount=new_source,
        new_swap_destination_amount=new_destination,
        source_amount_swapped=source_amount_swapped,
        destination_amount_swapped=destination_amount_swapped,
        margin_trade_fee=margin_trade_fee,
        padding_trade_fee=padding_trade_fee,
        protocol_fee=protocol_fee_amount,
        fund_fee=fund_fee_amount,
    )


def swap_base_input(
    source_amount: int,
    swap_source_amount: int,
    swap_destination_amount: int,
    trade_fee_rate: int,
    protocol_fee_rate: int,
    fund_fee_rate: int,
) -> Optional[SwapResult]:
    """Destination amount and fees for a fixed source amount, or None on overflow."""
    margin_trade_fee = trading_fee(source_amount, trade_fee_rate)
    if margin_trade_fee is None:
        return None
    protocol_fee_amount = protocol_fee(margin_trade_fee, protocol_fee_rate)
    if protocol_fee_amount is None:
        return None
    fund_fee_amount = fund_fee(margin_trade_fee, fund_fee_rate)
    if fund_fee_amount is None:
        return None

    destination_amount_swapped = constant_product.swap_base_input_without_fees(
        source_amount, swap_source_amount, swap_destination_amount
    )
    padding_trade_fee = trading_fee(destination_amount_swapped, trade_fee_rate)
    if padding_trade_fee is None:
        return None

    return _build_result(
        swap_source_amount,
        swap_destination_amount,
        source_amount,
        destination_amount_swapped,
        margin_trade_fee,
        padding_trade_fee,
        protocol_fee_amount,
        fund_fee_amount,
    )


def swap_base_output(
    destination_amount: int,
    swap_source_amount: int,
    swap_destination_amount: int,
    trade_fee_rate: int,
    protocol_fee_rate: int,
    fund_fee_rate: int,
) -> Optional[SwapResult]:
    """Source amount and fees for a fixed destination amount, or None on overflow."""
    source_amount_swapped = constant_product.swap_base_output_without_fees(
        destination_amount, swap_source_amount, swap_destination_amount
    )

    margin_trade_fee = trading_fee(source_amount_swapped, trade_fee_rate)
    if margin_trade_fee is None:
        return None
    protocol_fee_amount = protocol_fee(margin_trade_fee, protocol_fee_rate)
    if protocol_fee_amount is None:
        return None
    fund_fee_amount = fund_fee(margin_trade_fee, fund_fee_rate)
    if fund_fee_amount is None:
        return None
    padding_trade_fee = trading_fee(destination_amount, trade_fee_rate)
    if padding_trade_fee is None:
        return None

    return _build_result(
        swap_source_amount,
        swap_destination_amount,
        source_amount_swapped,
        destination_amount,
        margin_trade_fee,
        padding_trade_fee,
        protocol_fee_amount,
        fund_fee_amount,
    )


def lp_tokens_to_trading_tokens(
    lp_token_amount: int,
    lp_token_supply: int,
    swap_token_0_amount: int,
    swap_token_1_amount: int,
    round_direction: RoundDirection,
) -> Optional[TradingTokenResult]:
    """Trading tokens matching an amount of pool tokens, given pool totals."""
    return constant_product.lp_tokens_to_trading_tokens(
        lp_token_amount,
        lp_token_supply,
        swap_token_0_amount,
        swap_token_1_amount,
        round_direction,
    )