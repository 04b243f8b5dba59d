"""Parameter validation against protocol bounds.

Checks run on converted (protocol-unit) values, before a payload is built,
and raise synchronously. The same rules apply to every builder.
"""

from __future__ import annotations

from decimal import Decimal

from beluga.constants import (
    I128_MAX,
    MAX_CREATOR_FEE_BPS,
    MAX_SLIPPAGE_BPS,
    MAX_TICK,
    MIN_CREATOR_FEE_BPS,
    MIN_INITIAL_LIQUIDITY,
    MIN_LOCK_DURATION_LEDGERS,
    MIN_TICK,
    PERMANENT_LOCK_LEDGERS,
    U128_MAX,
)
from beluga.errors import BelowMinimumError, InvalidRangeError, OutOfRangeError
from beluga.math.units import days_to_ledgers
from beluga.models.params import LockDuration, Permanent


def validate_creator_fee(creator_fee_bps: int) -> int:
    """Check the creator fee lies in [10, 1000] bps (0.1% - 10%).

    Raises:
        BelowMinimumError: If under 10 bps
        OutOfRangeError: If over 1000 bps
    """
    if creator_fee_bps < MIN_CREATOR_FEE_BPS:
        raise BelowMinimumError(
            f"Creator fee must be between 0.1% and 10% (got {creator_fee_bps} bps, "
            f"minimum {MIN_CREATOR_FEE_BPS})"
        )
    if creator_fee_bps > MAX_CREATOR_FEE_BPS:
        raise OutOfRangeError(
            f"Creator fee must be between 0.1% and 10% (got {creator_fee_bps} bps, "
            f"maximum {MAX_CREATOR_FEE_BPS})"
        )
    return creator_fee_bps


def validate_initial_liquidity(amount0_stroops: int, amount1_stroops: int) -> None:
    """Check both initial amounts are at least 0.1 tokens.

    Raises:
        BelowMinimumError: If either amount is under 1,000,000 stroops
    """
    if amount0_stroops < MIN_INITIAL_LIQUIDITY or amount1_stroops < MIN_INITIAL_LIQUIDITY:
        raise BelowMinimumError(
            f"Minimum amount is 0.1 tokens each (got {amount0_stroops} and "
            f"{amount1_stroops} stroops, minimum {MIN_INITIAL_LIQUIDITY})"
        )


def validate_tick_range(lower_tick: int, upper_tick: int) -> None:
    """Check the aligned lower tick is strictly below the upper tick.

    Raises:
        InvalidRangeError: If lower_tick >= upper_tick
    """
    if lower_tick >= upper_tick:
        raise InvalidRangeError(
            f"Lower price must be less than upper price (ticks {lower_tick} >= {upper_tick} "
            "after alignment)"
        )


def validate_tick_bounds(tick: int) -> int:
    """Check a tick lies on the protocol grid [-887272, 887272].

    Raises:
        OutOfRangeError: If the tick is outside the grid
    """
    if not MIN_TICK <= tick <= MAX_TICK:
        raise OutOfRangeError(f"Tick {tick} outside [{MIN_TICK}, {MAX_TICK}]")
    return tick


def validate_sqrt_price(sqrt_price_x64: int) -> int:
    """Check a Q64.64 sqrt price fits in an unsigned 128-bit integer.

    Raises:
        OutOfRangeError: If the value does not fit
    """
    if sqrt_price_x64 > U128_MAX:
        raise OutOfRangeError(f"sqrt price {sqrt_price_x64} does not fit in 128 bits")
    return sqrt_price_x64


def validate_amount(amount_stroops: int) -> int:
    """Check a stroop amount fits in a signed 128-bit integer.

    Raises:
        OutOfRangeError: If the amount exceeds 2^127 - 1
    """
    if amount_stroops > I128_MAX:
        raise OutOfRangeError(f"Amount {amount_stroops} stroops does not fit in i128")
    return amount_stroops


def resolve_lock_duration(lock: LockDuration | None) -> int:
    """Convert a lock duration to a ledger count.

    Permanent locks are encoded as 0. No lock means the minimum duration.

    Raises:
        BelowMinimumError: If a timed lock is shorter than 120,960 ledgers
    """
    if lock is None:
        return MIN_LOCK_DURATION_LEDGERS
    if isinstance(lock, Permanent):
        return PERMANENT_LOCK_LEDGERS

    ledgers = days_to_ledgers(lock.days)
    if ledgers < MIN_LOCK_DURATION_LEDGERS:
        raise BelowMinimumError(
            f"Minimum lock duration is 7 days ({lock.days} days = {ledgers} ledgers, "
            f"minimum {MIN_LOCK_DURATION_LEDGERS})"
        )
    return ledgers


def validate_slippage(slippage_bps: int) -> int:
    """Check slippage is within [0, 5000] bps (50%).

    Raises:
        OutOfRangeError: If slippage is negative or above 50%
    """
    if slippage_bps < 0 or slippage_bps > MAX_SLIPPAGE_BPS:
        raise OutOfRangeError(
            f"Slippage cannot exceed 50% (got {slippage_bps} bps, maximum {MAX_SLIPPAGE_BPS})"
        )
    return slippage_bps


def validate_liquidity_percent(percent: Decimal) -> Decimal:
    """Check a liquidity removal share lies in (0, 100].

    Raises:
        OutOfRangeError: If percent <= 0 or percent > 100
    """
    if percent <= 0 or percent > 100:
        raise OutOfRangeError(f"Liquidity percent must be in (0, 100], got {percent}")
    return percent


__all__ = [
    "validate_creator_fee",
    "validate_initial_liquidity",
    "validate_tick_range",
    "validate_tick_bounds",
    "validate_sqrt_price",
    "validate_amount",
    "resolve_lock_duration",
    "validate_slippage",
    "validate_liquidity_percent",
]
