"""Price conversions: Q64.64 sqrt prices and ticks.

sqrt_price_x64 = floor(sqrt(price) * 2^64) is computed exactly with integer
square roots, so the value sent on-chain never depends on float rounding.
The reverse direction returns a float and loses the truncated bits; round
trips are only equal up to a small relative error.

Ticks index prices on a logarithmic grid of base 1.0001:
tick = floor(log(price) / log(1.0001)). Quantization to a tick, and then to
the tier's tick spacing, is lossy.
"""

from __future__ import annotations

import decimal
import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

from beluga.constants import Q64, TICK_BASE
from beluga.errors import InvalidArgumentError

from beluga.math.units import DECIMAL_HIGH_PREC_CONTEXT, HumanValue, to_decimal

_TICK_BASE_DECIMAL = Decimal(repr(TICK_BASE))


def _positive_price(price: HumanValue) -> Decimal:
    value = to_decimal(price)
    if value <= 0:
        raise InvalidArgumentError(f"Price must be positive: {price}")
    return value


def price_to_sqrt_price_x64(price: HumanValue) -> int:
    """Convert a human price to a Q64.64 sqrt price.

    Uses floor(sqrt(p * 2^128)) == floor(sqrt(p) * 2^64), evaluated with
    math.isqrt on the exact rational value of the price.

    Args:
        price: Price of token0 in terms of token1 (must be > 0)

    Returns:
        floor(sqrt(price) * 2^64) as an arbitrary-precision int

    Raises:
        InvalidArgumentError: If price <= 0
    """
    exact = Fraction(_positive_price(price))
    return math.isqrt(exact.numerator * Q64 * Q64 // exact.denominator)


def sqrt_price_x64_to_price(sqrt_price_x64: int) -> float:
    """Convert a Q64.64 sqrt price back to a human price: (x / 2^64)^2."""
    if sqrt_price_x64 < 0:
        raise InvalidArgumentError(f"sqrt price cannot be negative: {sqrt_price_x64}")
    return float(Fraction(sqrt_price_x64 * sqrt_price_x64, Q64 * Q64))


def format_price(sqrt_price_x64: int, decimals: int = 6) -> str:
    """Format a Q64.64 sqrt price as a human price string."""
    return f"{sqrt_price_x64_to_price(sqrt_price_x64):.{decimals}f}"


def price_to_tick(price: HumanValue) -> int:
    """Convert a human price to its tick: floor(log(price) / log(1.0001)).

    Raises:
        InvalidArgumentError: If price <= 0
    """
    value = _positive_price(price)
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return math.floor(value.ln() / _TICK_BASE_DECIMAL.ln())


def tick_to_price(tick: int) -> float:
    """Convert a tick to its price: 1.0001^tick."""
    return TICK_BASE**tick


def align_tick(tick: int, spacing: int) -> int:
    """Align a tick down to the nearest multiple of spacing.

    The result is always <= tick (floor division also rounds negative ticks
    toward -infinity).

    Raises:
        InvalidArgumentError: If spacing is not positive
    """
    if spacing <= 0:
        raise InvalidArgumentError(f"Tick spacing must be positive: {spacing}")
    return (tick // spacing) * spacing


@dataclass(frozen=True)
class TickRange:
    """A pair of aligned ticks. Ordering is not checked here."""

    lower_tick: int
    upper_tick: int


def price_range_to_ticks(
    lower_price: HumanValue, upper_price: HumanValue, spacing: int
) -> TickRange:
    """Convert a price range to aligned ticks.

    Each bound is converted and aligned independently. Callers must check
    that lower_tick < upper_tick.
    """
    return TickRange(
        lower_tick=align_tick(price_to_tick(lower_price), spacing),
        upper_tick=align_tick(price_to_tick(upper_price), spacing),
    )


__all__ = [
    "price_to_sqrt_price_x64",
    "sqrt_price_x64_to_price",
    "format_price",
    "price_to_tick",
    "tick_to_price",
    "align_tick",
    "TickRange",
    "price_range_to_ticks",
]
