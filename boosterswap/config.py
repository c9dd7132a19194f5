"""AMM configuration: fee rates, owners and pool creation settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from boosterswap.errors import SwapError, SwapErrorCode
from boosterswap.fees import FEE_RATE_DENOMINATOR_VALUE

AMM_CONFIG_SEED = "amm_config"

_DEFAULT_KEY = bytes(32)
_U16_MAX = 2**16 - 1


def _check_key(key: bytes) -> bytes:
    if len(key) != 32:
        raise ValueError("public key must be 32 bytes")
    return bytes(key)


@dataclass
class AmmConfig:
    """Fee rates and owners shared by the pools created under one config index."""

    bump: int = 0
    disable_create_pool: bool = False
    index: int = 0
    trade_from_zero_to_one_fee_rate: int = 0
    trade_from_one_to_zero_fee_rate: int = 0
    protocol_fee_rate: int = 0
    fund_fee_rate: int = 0
    create_pool_fee: int = 0
    protocol_owner: bytes = _DEFAULT_KEY
    fund_owner: bytes = _DEFAULT_KEY
    padding: Tuple[int, ...] = (0,) * 16

    LEN = 8 + 1 + 1 + 2 + 8 * 5 + 32 * 2 + 8 * 16

    def update(self, param: int, value: int, new_owner: Optional[bytes] = None) -> None:
        """Change one setting selected by param.

        0: token 0 -> 1 trade fee rate, 1: token 1 -> 0 trade fee rate,
        2: protocol fee rate, 3: fund fee rate, 4: protocol owner (new_owner),
        5: fund owner (new_owner), 6: create pool fee, 7: disable pool creation
        (non-zero value disables). Any other param raises SwapError(INVALID_INPUT).
        """
        if param == 0:
            self._set_trade_rate("trade_from_zero_to_one_fee_rate", value)
        elif param == 1:
            self._set_trade_rate("trade_from_one_to_zero_fee_rate", value)
        elif param == 2:
            self._check_share(value, self.fund_fee_rate)
            self.protocol_fee_rate = value
        elif param == 3:
            self._check_share(value, self.protocol_fee_rate)
            self.fund_fee_rate = value
        elif param == 4:
            self.protocol_owner = self._new_owner(new_owner)
        elif param == 5:
            self.fund_owner = self._new_owner(new_owner)
        elif param == 6:
            self.create_pool_fee = value
        elif param == 7:
            self.disable_create_pool = value != 0
        else:
            raise SwapError(SwapErrorCode.INVALID_INPUT)

    def _set_trade_rate(self, name: str, rate: int) -> None:
        if rate >= FEE_RATE_DENOMINATOR_VALUE:
            raise ValueError("trade fee rate must be below the fee denominator")
        setattr(self, name, rate)

    @staticmethod
    def _check_share(rate: int, other_rate: int) -> None:
        if rate > FEE_RATE_DENOMINATOR_VALUE:
            raise ValueError("fee rate exceeds the fee denominator")
        if rate + other_rate > FEE_RATE_DENOMINATOR_VALUE:
            raise ValueError("protocol and fund fee rates together exceed the fee denominator")

    @staticmethod
    def _new_owner(new_owner: Optional[bytes]) -> bytes:
        if new_owner is None:
            raise ValueError("a new owner key is required")
        key = _check_key(new_owner)
        if key == _DEFAULT_KEY:
            raise ValueError("new owner must not be the default key")
        return key


def create_amm_config(
    owner: bytes,
    bump: int,
    index: int,
    trade_from_zero_to_one_fee_rate: int,
    trade_from_one_to_zero_fee_rate: int,
    protocol_fee_rate: int,
    fund_fee_rate: int,
    create_pool_fee: int,
) -> AmmConfig:
    """Build a new config owned by owner with the given fee settings."""
    if trade_from_zero_to_one_fee_rate >= FEE_RATE_DENOMINATOR_VALUE:
        raise ValueError("token 0 -> 1 trade fee rate must be below the fee denominator")
    if trade_from_one_to_zero_fee_rate > FEE_RATE_DENOMINATOR_VALUE:
        raise ValueError("token 1 -> 0 trade fee rate exceeds the fee denominator")
    if not 0 <= index <= _U16_MAX:
        raise ValueError("config index must fit in 16 bits")
    return AmmConfig(
        bump=bump,
        disable_create_pool=False,
        index=index,
        trade_from_zero_to_one_fee_rate=trade_from_zero_to_one_fee_rate,
        trade_from_one_to_zero_fee_rate=trade_from_one_to_zero_fee_rate,
        protocol_fee_rate=protocol_fee_rate,
        fund_fee_rate=fund_fee_rate,
        create_pool_fee=create_pool_fee,
        protocol_owner=_check_key(owner),
    )