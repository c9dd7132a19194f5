"""Time-weighted price observations kept in a ring buffer."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Tuple

from boosterswap.mathutils import U128_MAX

OBSERVATION_SEED = "observation"
OBSERVATION_NUM = 100
OBSERVATION_UPDATE_DURATION_DEFAULT = 15

_U128_MODULUS = U128_MAX + 1


@dataclass
class Observation:
    """One oracle sample: a timestamp and cumulative Q32.32 prices of both tokens."""

    block_timestamp: int = 0
    cumulative_token_0_price_x32: int = 0
    cumulative_token_1_price_x32: int = 0

    LEN = 8 + 16 + 16


def _empty_observations() -> List[Observation]:
    return [Observation() for _ in range(OBSERVATION_NUM)]


@dataclass
class ObservationState:
    """Ring buffer of observations for one pool."""

    initialized: bool = False
    observation_index: int = 0
    pool_id: bytes = bytes(32)
    observations: List[Observation] = field(default_factory=_empty_observations)
    padding: Tuple[int, ...] = (0,) * 4

    LEN = 8 + 1 + 2 + 32 + Observation.LEN * OBSERVATION_NUM + 8 * 4

    def update(self, block_timestamp: int, token_0_price_x32: int, token_1_price_x32: int) -> None:
        """Record the prices at block_timestamp.

        The first call only stamps the current slot. Later calls are ignored
        until OBSERVATION_UPDATE_DURATION_DEFAULT seconds have passed since the
        latest observation; then the next slot (wrapping to 0 after the last)
        receives the cumulative prices, which wrap modulo 2**128.
        """
        index = self.observation_index
        if not self.initialized:
            self.initialized = True
            self.observations[index] = Observation(block_timestamp=block_timestamp)
            return

        last = self.observations[index]
        delta_time = max(block_timestamp - last.block_timestamp, 0)
        if delta_time < OBSERVATION_UPDATE_DURATION_DEFAULT:
            return

        delta_0 = token_0_price_x32 * delta_time
        delta_1 = token_1_price_x32 * delta_time
        if delta_0 > U128_MAX or delta_1 > U128_MAX:
            raise OverflowError("cumulative price delta exceeds 128 bits")

        next_index = 0 if index == OBSERVATION_NUM - 1 else index + 1
        self.observations[next_index] = Observation(
            block_timestamp=block_timestamp,
            cumulative_token_0_price_x32=(last.cumulative_token_0_price_x32 + delta_0) % _U128_MODULUS,
            cumulative_token_1_price_x32=(last.cumulative_token_1_price_x32 + delta_1) % _U128_MODULUS,
        )
        self.observation_index = next_index

    def latest_cumulative(self) -> Tuple[int, int]:
        """Cumulative prices of token 0 and token 1 in the most recent observation."""
        latest = self.observations[self.observation_index]
        return latest.cumulative_token_0_price_x32, latest.cumulative_token_1_price_x32


def block_timestamp() -> int:
    """Current Unix time in whole seconds."""
    return int(time.time())