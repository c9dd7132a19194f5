"""Error codes reported by the swap program."""

from __future__ import annotations

from enum import IntEnum

_ERROR_CODE_OFFSET = 6000


class SwapErrorCode(IntEnum):
    """Numbered failure reasons, each with a human-readable message."""

    NOT_APPROVED = _ERROR_CODE_OFFSET
    INVALID_OWNER = _ERROR_CODE_OFFSET + 1
    EMPTY_SUPPLY = _ERROR_CODE_OFFSET + 2
    INVALID_INPUT = _ERROR_CODE_OFFSET + 3
    INCORRECT_LP_MINT = _ERROR_CODE_OFFSET + 4
    INCORRECT_TOKEN_0_MINT = _ERROR_CODE_OFFSET + 5
    EXCEEDED_SLIPPAGE = _ERROR_CODE_OFFSET + 6
    ZERO_TRADING_TOKENS = _ERROR_CODE_OFFSET + 7
    NOT_SUPPORT_MINT = _ERROR_CODE_OFFSET + 8
    INVALID_VAULT = _ERROR_CODE_OFFSET + 9
    INVALID_MARKET_CAP = _ERROR_CODE_OFFSET + 10

    @property
    def message(self) -> str:
        """The message reported for this code."""
        return _MESSAGES[self]


_MESSAGES = {
    SwapErrorCode.NOT_APPROVED: "Not approved",
    SwapErrorCode.INVALID_OWNER: "Input account owner is not the program address",
    SwapErrorCode.EMPTY_SUPPLY: "Input token account empty",
    SwapErrorCode.INVALID_INPUT: "InvalidInput",
    SwapErrorCode.INCORRECT_LP_MINT: "Address of the provided lp token mint is incorrect",
    SwapErrorCode.INCORRECT_TOKEN_0_MINT: "Token 0 mint is invalid",
    SwapErrorCode.EXCEEDED_SLIPPAGE: "Exceeds desired slippage limit",
    SwapErrorCode.ZERO_TRADING_TOKENS: "Given pool token amount results in zero trading tokens",
    SwapErrorCode.NOT_SUPPORT_MINT: "Not support token_2022 mint extension",
    SwapErrorCode.INVALID_VAULT: "invalid vault",
    SwapErrorCode.INVALID_MARKET_CAP: "Marketcap is too low",
}


class SwapError(Exception):
    """Raised when a swap operation is rejected."""

    def __init__(self, code: SwapErrorCode) -> None:
        self.code = code
        super().__init__(code.message)

    def __repr__(self) -> str:
        return f"SwapError({self.code.name})"