# boosterswap

Integer arithmetic for a two-token constant-product (x · y = k) automated
market maker. Amounts are plain Python integers checked against 64- and
128-bit limits. The package is a library only. It does no I/O and has no
runtime dependencies.

## Modules

- `boosterswap.constant_product`: the raw curve.
  - `swap_base_input_without_fees` gives the output for a fixed input, rounded down.
  - `swap_base_output_without_fees` gives the input needed for a fixed output, rounded up.
    It raises `ZeroDivisionError` when the output would drain the pool.
  - `lp_tokens_to_trading_tokens` converts pool tokens to amounts of both tokens.
    It takes a `RoundDirection` and returns `None` on overflow or zero supply.
  - Both swap functions raise `OverflowError` when a value leaves the 128-bit range.
- `boosterswap.fees`: fee rates are in millionths. `FEE_RATE_DENOMINATOR_VALUE`
  is `1_000_000`.
  - `trading_fee` rounds up.
  - `protocol_fee` and `fund_fee` round down. `floor_div` is their helper.
  - `calculate_pre_fee_amount` gives the smallest amount that still leaves a
    given amount once the trading fee is taken.
- `boosterswap.calculator`: `swap_base_input` and `swap_base_output` return a
  `SwapResult`, or `None` on overflow. The result holds:
  - the new reserves and the swapped amounts;
  - `margin_trade_fee`, the trading fee on the source amount;
  - `padding_trade_fee`, the trading fee on the destination amount;
  - the protocol and fund shares of the margin fee.

  `validate_supply` raises `SwapError(SwapErrorCode.EMPTY_SUPPLY)` for a zero
  amount. `map_zero_to_none` and `lp_tokens_to_trading_tokens` are also here.
- `boosterswap.curve_types`: `TradeDirection` (`ZERO_FOR_ONE` and `ONE_FOR_ZERO`,
  with `opposite()`, `matches(code)` and `from_u8(code)`), `RoundDirection`,
  `TradingTokenResult` and `SwapResult`.
- `boosterswap.mathutils`: `checked_ceil_div`, `to_decimals` and
  `from_decimals`, plus the constants `U64_MAX` and `U128_MAX`.
- `boosterswap.oracle`:
  - `ObservationState` is a ring buffer of 100 `Observation`s holding
    cumulative Q32.32 prices.
  - `update(timestamp, price_0, price_1)` ignores calls that come less than
    15 seconds after the latest observation. Cumulative values wrap modulo 2**128.
  - `latest_cumulative()` returns the latest pair of cumulative prices.
  - `block_timestamp()` returns the current Unix time.
- `boosterswap.config`: `AmmConfig` and `create_amm_config`.
  - `AmmConfig.update(param, value, new_owner)` changes one setting, chosen by `param`:

    | `param` | setting |
    |---|---|
    | 0 | trade fee rate, token 0 to token 1 |
    | 1 | trade fee rate, token 1 to token 0 |
    | 2 | protocol fee rate |
    | 3 | fund fee rate |
    | 4 | protocol owner |
    | 5 | fund owner |
    | 6 | create-pool fee |
    | 7 | disable pool creation |

  - A value out of its limits raises `ValueError`.
  - An unknown `param` raises `SwapError(SwapErrorCode.INVALID_INPUT)`.
  - Owners are 32-byte keys.
- `boosterswap.events`: frozen records `SwapEvent`, `LpChangeEvent` and
  `PreDeployPairEvent`.
- `boosterswap.errors`: `SwapError` carries a `SwapErrorCode`. Each code has a
  `.message`.

## Example

```python
from boosterswap.calculator import swap_base_input
from boosterswap.constant_product import swap_base_input_without_fees

# 10 units into a 20_000 / 30_000 pool gives 14 units out
assert swap_base_input_without_fees(10, 20_000, 30_000) == 14

result = swap_base_input(
    1_000,        # amount in
    1_000_000,    # source reserve
    2_000_000,    # destination reserve
    2_500,        # trade fee rate (0.25 %)
    120_000,      # protocol share of the trade fee
    40_000,       # fund share of the trade fee
)
print(result.destination_amount_swapped, result.margin_trade_fee, result.protocol_fee)
```

Configuration updates are validated:

```python
from boosterswap.config import create_amm_config

config = create_amm_config(bytes(32), 255, 0, 2_500, 2_500, 120_000, 40_000, 0)
config.update(2, 200_000, None)      # protocol fee rate is now 200_000

try:
    config.update(0, 1_000_000, None)  # a trade fee rate must stay below 1_000_000
except ValueError as exc:
    print(exc)
```

## What it does not do

This package only computes. It has none of the following:

- pool state or pool creation;
- vaults, token transfers or account handling;
- instructions that run a swap against stored balances or collect fees.

A caller holds the reserves and applies the results of the calculations.

## Tests

```
pip install -e .[test]
pytest
```