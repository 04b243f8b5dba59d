"""API endpoints exposing the SDK payload builders."""

from functools import lru_cache
from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Depends, Path

from beluga.config import FEE_TIERS
from beluga.ledger.soroban import SorobanRpcClient
from beluga.models.params import (
    AddLiquidityParams,
    CollectFeesParams,
    CreatePoolParams,
    RemoveLiquidityParams,
    SwapParams,
)
from beluga.models.results import (
    AddLiquidityResult,
    CollectFeesResult,
    CreatePoolResult,
    RemoveLiquidityResult,
    SwapResult,
)
from beluga.models.types import STELLAR_ADDRESS_PATTERN
from beluga.pool import BelugaPool
from beluga.sdk import BelugaSwapSDK

logger = structlog.get_logger()

router = APIRouter()

PoolAddress = Annotated[str, Path(pattern=STELLAR_ADDRESS_PATTERN)]


@lru_cache(maxsize=1)
def get_default_sdk() -> BelugaSwapSDK:
    """Build the SDK from BELUGA_* environment variables (once)."""
    return BelugaSwapSDK.from_env()


def get_sdk() -> BelugaSwapSDK:
    """Dependency provider for the SDK instance.

    Override this in tests to inject an SDK with a mock ledger:
        app.dependency_overrides[get_sdk] = lambda: sdk
    """
    return get_default_sdk()


def get_rpc_client(sdk: BelugaSwapSDK = Depends(get_sdk)) -> SorobanRpcClient:
    """Dependency provider for the Soroban RPC client of the SDK's network."""
    return sdk.rpc


@router.get("/fee-tiers")
async def fee_tiers() -> list[dict[str, Any]]:
    """List the protocol fee tiers."""
    return [
        {
            "name": tier.name,
            "bps": tier.bps,
            "tick_spacing": tier.tick_spacing,
            "percent": tier.percent,
            "description": tier.description,
        }
        for tier in FEE_TIERS.values()
    ]


@router.get("/network")
async def network(sdk: BelugaSwapSDK = Depends(get_sdk)) -> dict[str, Any]:
    """Describe the configured network."""
    return {
        "name": sdk.network.name,
        "rpc_url": sdk.rpc_url,
        "network_passphrase": sdk.network_passphrase,
        "factory": sdk.factory.contract_id,
    }


@router.get("/network/latest-ledger")
async def latest_ledger(rpc: SorobanRpcClient = Depends(get_rpc_client)) -> dict[str, int]:
    """Return the latest ledger sequence reported by the RPC server."""
    return {"sequence": await rpc.get_latest_ledger()}


@router.post("/pools")
async def create_pool(
    params: CreatePoolParams,
    sdk: BelugaSwapSDK = Depends(get_sdk),
) -> CreatePoolResult:
    """Build a create_pool payload."""
    result = sdk.factory.create_pool(params)
    logger.info(
        "api_create_pool",
        pair=result.summary.pair,
        fee_bps=result.technical.fee_bps,
        lower_tick=result.technical.lower_tick,
        upper_tick=result.technical.upper_tick,
    )
    return result


@router.post("/pools/{pool_address}/liquidity/add")
async def add_liquidity(
    pool_address: PoolAddress,
    params: AddLiquidityParams,
    sdk: BelugaSwapSDK = Depends(get_sdk),
) -> AddLiquidityResult:
    """Build an add_liquidity payload for a pool."""
    return BelugaPool(pool_address, sdk.ledger).add_liquidity(params)


@router.post("/pools/{pool_address}/liquidity/remove")
async def remove_liquidity(
    pool_address: PoolAddress,
    params: RemoveLiquidityParams,
    sdk: BelugaSwapSDK = Depends(get_sdk),
) -> RemoveLiquidityResult:
    """Build a remove_liquidity payload for a pool."""
    return BelugaPool(pool_address, sdk.ledger).remove_liquidity(params)


@router.post("/pools/{pool_address}/swap")
async def swap(
    pool_address: PoolAddress,
    params: SwapParams,
    sdk: BelugaSwapSDK = Depends(get_sdk),
) -> SwapResult:
    """Build a swap payload for a pool.

    Without expected_amount_out the pool is asked for a preview first.
    """
    pool = BelugaPool(pool_address, sdk.ledger)
    if params.expected_amount_out is None:
        return await pool.quote_swap(params)
    return pool.swap(params)


@router.post("/pools/{pool_address}/fees/collect")
async def collect_fees(
    pool_address: PoolAddress,
    params: CollectFeesParams,
    sdk: BelugaSwapSDK = Depends(get_sdk),
) -> CollectFeesResult:
    """Build a collect payload for a position."""
    return BelugaPool(pool_address, sdk.ledger).collect_fees(params)
