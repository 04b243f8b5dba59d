"""Protocol constants for the BelugaSwap AMM.

These values are fixed by the deployed contracts. Changing any of them is a
breaking protocol change, not a runtime setting.
"""

# Stellar amounts are integers of stroops (7 decimals)
STROOPS_DECIMALS = 7
STROOPS_MULTIPLIER = 10_000_000

# Q64.64 fixed-point scale for sqrt prices
Q64 = 2**64
ONE_X64 = Q64  # 18446744073709551616

# Soroban integer ranges used in contract payloads
U128_MAX = 2**128 - 1
I128_MAX = 2**127 - 1

# Nonzero human inputs must lie within 10^-60 .. 10^60 (decimal exponent bound)
MAX_DECIMAL_EXPONENT = 60

# Tick grid
MIN_TICK = -887_272
MAX_TICK = 887_272
TICK_BASE = 1.0001

# Percent and basis points
BPS_PER_PERCENT = 100
BPS_DENOMINATOR = 10_000

# 1 day = 17,280 ledgers (5s close time)
LEDGERS_PER_DAY = 17_280

# Validation limits
MIN_LOCK_DURATION_LEDGERS = 120_960  # ~7 days
MIN_INITIAL_LIQUIDITY = 1_000_000  # 0.1 tokens
MIN_CREATOR_FEE_BPS = 10  # 0.1%
MAX_CREATOR_FEE_BPS = 1000  # 10%
MAX_SLIPPAGE_BPS = 5000  # 50%

# Permanent locks are encoded as a zero lock duration
PERMANENT_LOCK_LEDGERS = 0

__all__ = [
    "STROOPS_DECIMALS",
    "STROOPS_MULTIPLIER",
    "Q64",
    "ONE_X64",
    "U128_MAX",
    "I128_MAX",
    "MAX_DECIMAL_EXPONENT",
    "MIN_TICK",
    "MAX_TICK",
    "TICK_BASE",
    "BPS_PER_PERCENT",
    "BPS_DENOMINATOR",
    "LEDGERS_PER_DAY",
    "MIN_LOCK_DURATION_LEDGERS",
    "MIN_INITIAL_LIQUIDITY",
    "MIN_CREATOR_FEE_BPS",
    "MAX_CREATOR_FEE_BPS",
    "MAX_SLIPPAGE_BPS",
    "PERMANENT_LOCK_LEDGERS",
]
