"""Factory functions for building request parameters in tests.

Usage:
    from tests.helpers import make_create_pool_params

    params = make_create_pool_params(fee_tier="STABLE", lock=Permanent())
"""

from typing import Any

from beluga.models.params import (
    AddLiquidityParams,
    CreatePoolParams,
    RemoveLiquidityParams,
    SwapParams,
    TimedLock,
)
from tests.helpers.constants import CREATOR, OWNER, TRADER, USDC, XLM


def make_create_pool_params(**overrides: Any) -> CreatePoolParams:
    """Create pool parameters with sensible defaults.

    Defaults describe a VOLATILE USDC/XLM pool at price 1.0 with 100 of
    each token, a 0.95 - 1.05 range, 1% creator fee and a 7-day lock.
    """
    fields: dict[str, Any] = {
        "creator": CREATOR,
        "token_a": USDC,
        "token_b": XLM,
        "fee_tier": "VOLATILE",
        "creator_fee_percent": 1,
        "initial_price": 1.0,
        "amount0": 100,
        "amount1": 100,
        "price_range_lower": 0.95,
        "price_range_upper": 1.05,
        "lock": TimedLock(days=7),
    }
    fields.update(overrides)
    return CreatePoolParams(**fields)


def make_add_liquidity_params(**overrides: Any) -> AddLiquidityParams:
    """Add 50 + 50 to a VOLATILE 0.95 - 1.05 position."""
    fields: dict[str, Any] = {
        "owner": OWNER,
        "price_range_lower": 0.95,
        "price_range_upper": 1.05,
        "fee_tier": "VOLATILE",
        "amount0": 50,
        "amount1": 50,
    }
    fields.update(overrides)
    return AddLiquidityParams(**fields)


def make_remove_liquidity_params(**overrides: Any) -> RemoveLiquidityParams:
    """Remove 50% of a VOLATILE 0.95 - 1.05 position."""
    fields: dict[str, Any] = {
        "owner": OWNER,
        "price_range_lower": 0.95,
        "price_range_upper": 1.05,
        "fee_tier": "VOLATILE",
        "liquidity_percent": 50,
    }
    fields.update(overrides)
    return RemoveLiquidityParams(**fields)


def make_swap_params(**overrides: Any) -> SwapParams:
    """Swap 10 USDC expecting 9.97 out with 1% slippage."""
    fields: dict[str, Any] = {
        "sender": TRADER,
        "token_in": USDC,
        "amount_in": 10,
        "expected_amount_out": 9.97,
        "slippage_percent": 1,
    }
    fields.update(overrides)
    return SwapParams(**fields)
