"""Numeric conversions between human and protocol units.

- price: Q64.64 sqrt prices and ticks
- units: stroop amounts, basis points, ledger counts
"""

from beluga.math.price import (
    TickRange,
    align_tick,
    format_price,
    price_range_to_ticks,
    price_to_sqrt_price_x64,
    price_to_tick,
    sqrt_price_x64_to_price,
    tick_to_price,
)
from beluga.math.units import (
    DECIMAL_HIGH_PREC_CONTEXT,
    HumanValue,
    apply_slippage,
    bps_to_percent,
    days_to_ledgers,
    format_amount,
    format_amount_with_symbol,
    from_stroops,
    ledgers_to_days,
    percent_to_bps,
    to_decimal,
    to_stroops,
)

__all__ = [
    # Price
    "TickRange",
    "align_tick",
    "format_price",
    "price_range_to_ticks",
    "price_to_sqrt_price_x64",
    "price_to_tick",
    "sqrt_price_x64_to_price",
    "tick_to_price",
    # Units
    "DECIMAL_HIGH_PREC_CONTEXT",
    "HumanValue",
    "apply_slippage",
    "bps_to_percent",
    "days_to_ledgers",
    "format_amount",
    "format_amount_with_symbol",
    "from_stroops",
    "ledgers_to_days",
    "percent_to_bps",
    "to_decimal",
    "to_stroops",
]
