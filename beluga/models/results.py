"""Builder results and ledger read models.

Every builder result carries:
- function: contract function the payload is meant for
- summary: short human-readable projection
- contract_params: the submission payload (protocol units only)
- technical: verbose breakdown of the converted values

summary and technical are derived formatting and carry no semantics.
"""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel

from beluga.models.payloads import AddLiquidityCall, CreatePoolCall, PositionCall, SwapCall
from beluga.models.types import U128, Amount

# =============================================================================
# Factory
# =============================================================================


class CreatePoolSummary(BaseModel):
    pair: str
    fee: str
    creator_fee: str
    initial_price: str
    price_range: str
    amounts: str
    lock_duration: str


class CreatePoolTechnical(BaseModel):
    fee_bps: int
    creator_fee_bps: int
    sqrt_price_x64: U128
    current_tick: int
    tick_spacing: int
    lower_tick: int
    upper_tick: int
    amount0_stroops: Amount
    amount1_stroops: Amount
    lock_duration_ledgers: int


class CreatePoolResult(BaseModel):
    """Pool creation payload with its summary and technical breakdown."""

    function: Literal["create_pool"] = "create_pool"
    summary: CreatePoolSummary
    contract_params: CreatePoolCall
    technical: CreatePoolTechnical


# =============================================================================
# Pool: liquidity
# =============================================================================


class AddLiquiditySummary(BaseModel):
    price_range: str
    amounts: str


class AddLiquidityTechnical(BaseModel):
    lower_tick: int
    upper_tick: int
    tick_spacing: int
    amount0_stroops: Amount
    amount1_stroops: Amount


class AddLiquidityResult(BaseModel):
    """Add-liquidity payload with its summary and technical breakdown."""

    function: Literal["add_liquidity"] = "add_liquidity"
    summary: AddLiquiditySummary
    contract_params: AddLiquidityCall
    technical: AddLiquidityTechnical


class RemoveLiquiditySummary(BaseModel):
    removing: str
    price_range: str


class RemoveLiquidityTechnical(BaseModel):
    lower_tick: int
    upper_tick: int
    tick_spacing: int
    percent_to_remove: Decimal


class RemoveLiquidityResult(BaseModel):
    """Remove-liquidity payload with its summary and technical breakdown."""

    function: Literal["remove_liquidity"] = "remove_liquidity"
    summary: RemoveLiquiditySummary
    contract_params: PositionCall
    technical: RemoveLiquidityTechnical


class CollectFeesSummary(BaseModel):
    price_range: str


class CollectFeesTechnical(BaseModel):
    lower_tick: int
    upper_tick: int
    tick_spacing: int


class CollectFeesResult(BaseModel):
    """Fee collection payload."""

    function: Literal["collect"] = "collect"
    summary: CollectFeesSummary
    contract_params: PositionCall
    technical: CollectFeesTechnical


# =============================================================================
# Pool: swap
# =============================================================================


class SwapSummary(BaseModel):
    swapping: str
    expected_output: str
    minimum_output: str
    slippage: str
    price_limit: str


class SwapTechnical(BaseModel):
    amount_in_stroops: Amount
    expected_amount_out_stroops: Amount
    min_amount_out_stroops: Amount
    slippage_bps: int
    sqrt_price_limit_x64: U128


class SwapResult(BaseModel):
    """Swap payload with its summary and technical breakdown."""

    function: Literal["swap"] = "swap"
    summary: SwapSummary
    contract_params: SwapCall
    technical: SwapTechnical


# =============================================================================
# Ledger read responses (protocol units, as returned by the contract)
# =============================================================================


class PreviewSwapResponse(BaseModel):
    """Raw result of pool.preview_swap."""

    amount_out: Amount
    price_impact_bps: int
    sqrt_price_x64_after: U128


class PositionResponse(BaseModel):
    """Raw result of pool.get_position."""

    liquidity: U128
    amount0: Amount
    amount1: Amount
    fees_owed_0: Amount
    fees_owed_1: Amount


class PoolStateResponse(BaseModel):
    """Raw result of pool.get_pool_state."""

    sqrt_price_x64: U128
    current_tick: int
    liquidity: U128


# =============================================================================
# Ledger reads converted to human units
# =============================================================================


class SwapPreview(BaseModel):
    """Expected swap outcome in human units."""

    amount_out: Decimal
    price_impact_percent: Decimal
    new_price: float
    technical: PreviewSwapResponse


class PositionFormatted(BaseModel):
    liquidity: str
    amounts: str
    fees: str


class PositionInfo(BaseModel):
    """Position state in human units."""

    liquidity: int
    amount0: Decimal
    amount1: Decimal
    fees_owed0: Decimal
    fees_owed1: Decimal
    formatted: PositionFormatted


class PoolState(BaseModel):
    """Current pool state in human units."""

    current_price: float
    current_tick: int
    liquidity: int
    technical: PoolStateResponse


__all__ = [
    "CreatePoolSummary",
    "CreatePoolTechnical",
    "CreatePoolResult",
    "AddLiquiditySummary",
    "AddLiquidityTechnical",
    "AddLiquidityResult",
    "RemoveLiquiditySummary",
    "RemoveLiquidityTechnical",
    "RemoveLiquidityResult",
    "CollectFeesSummary",
    "CollectFeesTechnical",
    "CollectFeesResult",
    "SwapSummary",
    "SwapTechnical",
    "SwapResult",
    "PreviewSwapResponse",
    "PositionResponse",
    "PoolStateResponse",
    "SwapPreview",
    "PositionFormatted",
    "PositionInfo",
    "PoolState",
]
