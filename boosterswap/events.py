"""Records emitted by pool operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LpChangeEvent:
    """Emitted on deposit (change_type 0) and withdrawal (change_type 1)."""

    pool_id: bytes
    lp_amount_before: int
    token_0_vault_before: int
    token_1_vault_before: int
    token_0_amount: int
    token_1_amount: int
    token_0_transfer_fee: int
    token_1_transfer_fee: int
    change_type: int


@dataclass(frozen=True)
class SwapEvent:
    """Emitted on every swap."""

    pool_id: bytes
    token_0_vault_before: int
    token_1_vault_before: int
    input_amount: int
    output_amount: int
    base_input: bool
    trade_direction: int


@dataclass(frozen=True)
class PreDeployPairEvent:
    """Emitted when a pair is prepared for deployment."""

    pool_id: bytes
    token_0_vault_before: int
    token_1_vault_before: int
    token_0_cumulative: int
    token_1_cumulative: int