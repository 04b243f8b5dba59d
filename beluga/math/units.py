"""Conversions between human units and protocol integer units.

Forward conversions (human -> protocol) always floor. On-chain arithmetic
must never receive more value than the caller specified.

Human inputs are normalized to Decimal first. Floats go through their
shortest repr, so 4.35 is the decimal 4.35 and not 4.3499999999999996447.
"""

from __future__ import annotations

import decimal
import math
from decimal import Decimal

from beluga.constants import (
    BPS_DENOMINATOR,
    BPS_PER_PERCENT,
    LEDGERS_PER_DAY,
    MAX_DECIMAL_EXPONENT,
    STROOPS_DECIMALS,
    STROOPS_MULTIPLIER,
)
from beluga.errors import InvalidArgumentError, OutOfRangeError

# 78 digits of precision, enough for any 128-bit quantity scaled by 10^7
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=78)

HumanValue = int | float | str | Decimal


def to_decimal(value: HumanValue) -> Decimal:
    """Normalize a human-entered number to a finite Decimal.

    Args:
        value: int, float, numeric string or Decimal

    Returns:
        Equivalent Decimal

    Raises:
        InvalidArgumentError: If the value is not a finite number, or its
            magnitude is outside 10^-60 .. 10^60
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Expected a number, got bool: {value}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except decimal.InvalidOperation as err:
            raise InvalidArgumentError(f"Not a decimal number: '{value}'") from err
    else:
        raise InvalidArgumentError(f"Expected a number, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidArgumentError(f"Number must be finite: {value}")
    if result and abs(result.adjusted()) > MAX_DECIMAL_EXPONENT:
        raise InvalidArgumentError(
            f"Number magnitude out of range (exponent {result.adjusted()}, "
            f"limit +/-{MAX_DECIMAL_EXPONENT}): {value}"
        )
    return result


def _floor_scaled(value: Decimal, factor: int) -> int:
    try:
        with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
            return math.floor(value * factor)
    except decimal.DecimalException as err:
        raise OutOfRangeError(f"Cannot scale {value} by {factor}") from err


# --- Amounts (stroops) ---


def to_stroops(amount: HumanValue) -> int:
    """Convert a human token amount to stroops: floor(amount * 10^7).

    Raises:
        InvalidArgumentError: If the amount is negative
    """
    value = to_decimal(amount)
    if value < 0:
        raise InvalidArgumentError(f"Amount cannot be negative: {amount}")
    return _floor_scaled(value, STROOPS_MULTIPLIER)


def from_stroops(stroops: int) -> Decimal:
    """Convert stroops back to a human amount (exact)."""
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return Decimal(int(stroops)).scaleb(-STROOPS_DECIMALS)


def format_amount(stroops: int, decimals: int = STROOPS_DECIMALS) -> str:
    """Format a stroop amount for display with a fixed number of decimals."""
    amount = from_stroops(stroops)
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        truncated = amount.quantize(Decimal(1).scaleb(-decimals), rounding=decimal.ROUND_DOWN)
    return f"{truncated:f}"


def format_amount_with_symbol(stroops: int, symbol: str, decimals: int = STROOPS_DECIMALS) -> str:
    """Format a stroop amount followed by its token symbol."""
    return f"{format_amount(stroops, decimals)} {symbol}"


# --- Fees (basis points) ---


def percent_to_bps(percent: HumanValue) -> int:
    """Convert a percentage to basis points: floor(percent * 100).

    Raises:
        InvalidArgumentError: If the percentage is negative
    """
    value = to_decimal(percent)
    if value < 0:
        raise InvalidArgumentError(f"Percent cannot be negative: {percent}")
    return _floor_scaled(value, BPS_PER_PERCENT)


def bps_to_percent(bps: int) -> Decimal:
    """Convert basis points to a percentage (exact)."""
    return Decimal(int(bps)).scaleb(-2)


def apply_slippage(amount_stroops: int, slippage_bps: int) -> int:
    """Minimum acceptable amount after slippage: floor(amount * (10000 - bps) / 10000)."""
    return amount_stroops * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR


# --- Time (ledgers) ---


def days_to_ledgers(days: HumanValue) -> int:
    """Convert days to a ledger count: floor(days * 17,280).

    Raises:
        InvalidArgumentError: If days is negative
    """
    value = to_decimal(days)
    if value < 0:
        raise InvalidArgumentError(f"Duration cannot be negative: {days}")
    return _floor_scaled(value, LEDGERS_PER_DAY)


def ledgers_to_days(ledgers: int) -> float:
    """Convert a ledger count to (fractional) days."""
    return ledgers / LEDGERS_PER_DAY


__all__ = [
    "DECIMAL_HIGH_PREC_CONTEXT",
    "HumanValue",
    "to_decimal",
    "to_stroops",
    "from_stroops",
    "format_amount",
    "format_amount_with_symbol",
    "percent_to_bps",
    "bps_to_percent",
    "apply_slippage",
    "days_to_ledgers",
    "ledgers_to_days",
]
