"""Constant product (x * y = k) curve."""

from __future__ import annotations

from typing import Optional

from boosterswap.curve_types import RoundDirection, TradingTokenResult
from boosterswap.mathutils import U128_MAX, checked_ceil_div


def _must_fit(value: int, what: str) -> int:
    if value > U128_MAX:
        raise OverflowError(f"{what} overflow")
    if value < 0:
        raise OverflowError(f"{what} underflow")
    return value


def swap_base_input_without_fees(
    source_amount: int, swap_source_amount: int, swap_destination_amount: int
) -> int:
    """Destination amount received for a given source amount, rounded down."""
    numerator = _must_fit(source_amount * swap_destination_amount, "numerator")
    denominator = _must_fit(swap_source_amount + source_amount, "denominator")
    return numerator // denominator


def swap_base_output_without_fees(
    destination_amount: int, swap_source_amount: int, swap_destination_amount: int
) -> int:
    """Source amount needed to receive a given destination amount, rounded up."""
    numerator = _must_fit(swap_source_amount * destination_amount, "numerator")
    denominator = _must_fit(swap_destination_amount - destination_amount, "denominator")
    if denominator == 0:
        raise ZeroDivisionError("destination amount drains the pool")
    result = checked_ceil_div(numerator, denominator)
    if result is None:
        raise OverflowError("ceiling division overflow")
    return result[0]


def lp_tokens_to_trading_tokens(
    lp_token_amount: int,
    lp_token_supply: int,
    swap_token_0_amount: int,
    swap_token_1_amount: int,
    round_direction: RoundDirection,
) -> Optional[TradingTokenResult]:
    """Trading tokens matching an amount of pool tokens, or None on overflow or empty supply."""
    if lp_token_supply == 0:
        return None
    product_0 = lp_token_amount * swap_token_0_amount
    product_1 = lp_token_amount * swap_token_1_amount
    if product_0 > U128_MAX or product_1 > U128_MAX:
        return None

    token_0_amount, remainder_0 = divmod(product_0, lp_token_supply)
    token_1_amount, remainder_1 = divmod(product_1, lp_token_supply)
    if round_direction is RoundDirection.CEILING:
        # Zero amounts stay zero so tiny requests are rejected later instead of rounded up.
        if remainder_0 > 0 and token_0_amount > 0:
            token_0_amount += 1
        if remainder_1 > 0 and token_1_amount > 0:
            token_1_amount += 1
    return TradingTokenResult(token_0_amount=token_0_amount, token_1_amount=token_1_amount)