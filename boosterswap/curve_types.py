"""Value types shared by the curve calculations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TradeDirection(Enum):
    """Which token goes into the pool."""

    ZERO_FOR_ONE = 0
    ONE_FOR_ZERO = 1

    def opposite(self) -> "TradeDirection":
        """The reverse direction of this trade."""
        if self is TradeDirection.ZERO_FOR_ONE:
            return TradeDirection.ONE_FOR_ZERO
        return TradeDirection.ZERO_FOR_ONE

    def matches(self, value: int) -> bool:
        """Whether the numeric direction code denotes this direction."""
        return value == self.value

    @classmethod
    def from_u8(cls, value: int) -> "TradeDirection":
        """Direction for a numeric code; raises ValueError for unknown codes."""
        for direction in cls:
            if direction.value == value:
                return direction
        raise ValueError("Invalid trade direction")


class RoundDirection(Enum):
    """Rounding used when converting pool tokens to trading tokens."""

    FLOOR = 0
    CEILING = 1


@dataclass(frozen=True)
class TradingTokenResult:
    """Amounts of both tokens for a pool-token conversion."""

    token_0_amount: int
    token_1_amount: int


@dataclass(frozen=True)
class SwapResult:
    """Outcome of swapping a source token for a destination token."""

    new_swap_source_amount: int
    new_swap_destination_amount: int
    source_amount_swapped: int
    destination_amount_swapped: int
    margin_trade_fee: int
    padding_trade_fee: int
    protocol_fee: int
    fund_fee: int