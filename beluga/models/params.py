"""Human-unit request parameters for factory and pool operations."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from beluga.models.types import HumanNumber, StellarAddress, TokenId


class Permanent(BaseModel):
    """Liquidity is locked forever."""

    kind: Literal["permanent"] = "permanent"

    model_config = {"frozen": True}


class TimedLock(BaseModel):
    """Liquidity is locked for a number of days (minimum 7)."""

    kind: Literal["timed"] = "timed"
    days: HumanNumber

    model_config = {"frozen": True}


# Tagged union: exactly one lock kind is ever set
LockDuration = Annotated[Permanent | TimedLock, Field(discriminator="kind")]


class CreatePoolParams(BaseModel):
    """Parameters for creating a pool, in human units.

    A missing lock defaults to the protocol minimum lock duration.
    """

    creator: StellarAddress
    token_a: TokenId
    token_b: TokenId
    fee_tier: str = Field(description="STABLE, VOLATILE or EXOTIC")
    creator_fee_percent: HumanNumber = Field(description="Creator fee, e.g. 1 for 1%")
    initial_price: HumanNumber
    amount0: HumanNumber
    amount1: HumanNumber
    price_range_lower: HumanNumber
    price_range_upper: HumanNumber
    lock: LockDuration | None = None

    model_config = {"frozen": True}


class GetPoolParams(BaseModel):
    """Token pair and fee tier identifying a pool."""

    token_a: TokenId
    token_b: TokenId
    fee_tier: str

    model_config = {"frozen": True}


class PositionParams(BaseModel):
    """Owner and price range identifying a position."""

    owner: StellarAddress
    price_range_lower: HumanNumber
    price_range_upper: HumanNumber
    fee_tier: str

    model_config = {"frozen": True}


class CollectFeesParams(PositionParams):
    """Position whose accrued fees are collected."""

    pass


class AddLiquidityParams(PositionParams):
    """Liquidity to add to a position, in human units."""

    amount0: HumanNumber
    amount1: HumanNumber


class RemoveLiquidityParams(PositionParams):
    """Share of a position's liquidity to remove, in percent (0, 100]."""

    liquidity_percent: HumanNumber


class SwapParams(BaseModel):
    """Exact-input swap parameters, in human units.

    expected_amount_out is the caller's expected output (typically from a
    swap preview). The minimum output is derived from it and the slippage.
    """

    sender: StellarAddress
    token_in: TokenId
    amount_in: HumanNumber
    slippage_percent: HumanNumber
    price_limit: HumanNumber | None = None
    expected_amount_out: HumanNumber | None = None

    model_config = {"frozen": True}


__all__ = [
    "Permanent",
    "TimedLock",
    "LockDuration",
    "CreatePoolParams",
    "GetPoolParams",
    "PositionParams",
    "CollectFeesParams",
    "AddLiquidityParams",
    "RemoveLiquidityParams",
    "SwapParams",
]
