"""Contract call payloads in protocol units.

These models never hold human-unit values. 128-bit quantities are decimal
strings; ticks, basis points and ledger counts are plain integers.
"""

from pydantic import BaseModel

from beluga.models.types import U128, Amount, StellarAddress, TokenId


class CreatePoolArgs(BaseModel):
    """Arguments of the factory's create_pool call."""

    token_a: TokenId
    token_b: TokenId
    fee_bps: int
    creator_fee_bps: int
    initial_sqrt_price_x64: U128
    amount0_desired: Amount
    amount1_desired: Amount
    lower_tick: int
    upper_tick: int
    lock_duration: int

    model_config = {"frozen": True}


class CreatePoolCall(BaseModel):
    """Payload for factory.create_pool."""

    creator: StellarAddress
    params: CreatePoolArgs

    model_config = {"frozen": True}


class PositionCall(BaseModel):
    """Payload identifying a position (remove_liquidity, collect)."""

    owner: StellarAddress
    lower_tick: int
    upper_tick: int

    model_config = {"frozen": True}


class AddLiquidityCall(PositionCall):
    """Payload for pool.add_liquidity."""

    amount0_desired: Amount
    amount1_desired: Amount


class SwapCall(BaseModel):
    """Payload for pool.swap. A zero price limit means no limit."""

    sender: StellarAddress
    token_in: TokenId
    amount_in: Amount
    amount_out_min: Amount
    sqrt_price_limit_x64: U128

    model_config = {"frozen": True}


__all__ = [
    "CreatePoolArgs",
    "CreatePoolCall",
    "PositionCall",
    "AddLiquidityCall",
    "SwapCall",
]
