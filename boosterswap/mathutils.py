"""Integer helpers for fixed-width token arithmetic."""

from __future__ import annotations

from typing import Optional, Tuple

U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


def checked_ceil_div(dividend: int, divisor: int) -> Optional[Tuple[int, int]]:
    """Ceiling division returning (quotient, adjusted divisor), or None on failure.

    When the quotient would be zero, it is rounded to 1 if the dividend is at
    least half the divisor and to 0 otherwise; the divisor returned is then 0.
    Otherwise the divisor is reduced to the smallest value yielding the same
    ceiling quotient.
    """
    if divisor == 0:
        return None
    quotient = dividend // divisor
    if quotient == 0:
        doubled = dividend * 2
        if doubled > U128_MAX:
            return None
        return (1, 0) if doubled >= divisor else (0, 0)

    if dividend % divisor > 0:
        quotient += 1
        if quotient > U128_MAX:
            return None
        divisor = dividend // quotient
        if dividend % quotient > 0:
            divisor += 1
    return quotient, divisor


def _power_of_ten(decimals: int) -> int:
    if decimals < 0:
        raise ValueError("decimals must not be negative")
    factor = 10**decimals
    if factor > U64_MAX:
        raise OverflowError("decimal scale exceeds 64 bits")
    return factor


def to_decimals(amount: int, decimals: int) -> int:
    """Scale a whole-token amount up to its smallest units."""
    result = amount * _power_of_ten(decimals)
    if result > U64_MAX:
        raise OverflowError("scaled amount exceeds 64 bits")
    return result


def from_decimals(amount: int, decimals: int) -> int:
    """Scale an amount in smallest units down to whole tokens, truncating."""
    return amount // _power_of_ten(decimals)