"""Pydantic models for SDK inputs, contract payloads and results."""

from beluga.models.params import (
    AddLiquidityParams,
    CollectFeesParams,
    CreatePoolParams,
    GetPoolParams,
    LockDuration,
    Permanent,
    PositionParams,
    RemoveLiquidityParams,
    SwapParams,
    TimedLock,
)
from beluga.models.payloads import (
    AddLiquidityCall,
    CreatePoolArgs,
    CreatePoolCall,
    PositionCall,
    SwapCall,
)
from beluga.models.results import (
    AddLiquidityResult,
    CollectFeesResult,
    CreatePoolResult,
    PoolState,
    PoolStateResponse,
    PositionInfo,
    PositionResponse,
    PreviewSwapResponse,
    RemoveLiquidityResult,
    SwapPreview,
    SwapResult,
)
from beluga.models.types import U128, Amount, HumanNumber, StellarAddress, TokenId

__all__ = [
    # Types
    "U128",
    "Amount",
    "HumanNumber",
    "StellarAddress",
    "TokenId",
    # Params
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
    # Payloads
    "CreatePoolArgs",
    "CreatePoolCall",
    "PositionCall",
    "AddLiquidityCall",
    "SwapCall",
    # Results
    "CreatePoolResult",
    "AddLiquidityResult",
    "RemoveLiquidityResult",
    "CollectFeesResult",
    "SwapResult",
    # Ledger reads
    "PreviewSwapResponse",
    "PositionResponse",
    "PoolStateResponse",
    "SwapPreview",
    "PositionInfo",
    "PoolState",
]
