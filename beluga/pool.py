"""Pool builder: liquidity, swap and fee collection payloads.

Payload building is pure. Swap previews, positions and pool state come from
the ledger client; nothing here fabricates prices or balances.
"""

from __future__ import annotations

from typing import Any

import structlog

from beluga.config import FeeTier, get_fee_tier
from beluga.errors import InvalidArgumentError
from beluga.ledger.client import LedgerClient
from beluga.math.price import (
    TickRange,
    price_range_to_ticks,
    price_to_sqrt_price_x64,
    sqrt_price_x64_to_price,
)
from beluga.math.units import (
    HumanValue,
    apply_slippage,
    bps_to_percent,
    from_stroops,
    percent_to_bps,
    to_stroops,
)
from beluga.models.params import (
    AddLiquidityParams,
    CollectFeesParams,
    PositionParams,
    RemoveLiquidityParams,
    SwapParams,
)
from beluga.models.payloads import AddLiquidityCall, PositionCall, SwapCall
from beluga.models.results import (
    AddLiquidityResult,
    AddLiquiditySummary,
    AddLiquidityTechnical,
    CollectFeesResult,
    CollectFeesSummary,
    CollectFeesTechnical,
    PoolState,
    PoolStateResponse,
    PositionFormatted,
    PositionInfo,
    PositionResponse,
    PreviewSwapResponse,
    RemoveLiquidityResult,
    RemoveLiquiditySummary,
    RemoveLiquidityTechnical,
    SwapPreview,
    SwapResult,
    SwapSummary,
    SwapTechnical,
)
from beluga.validation import (
    validate_amount,
    validate_liquidity_percent,
    validate_slippage,
    validate_sqrt_price,
    validate_tick_bounds,
    validate_tick_range,
)

logger = structlog.get_logger()

# Builder results that can be submitted to a pool contract
PoolCallResult = AddLiquidityResult | RemoveLiquidityResult | CollectFeesResult | SwapResult


class BelugaPool:
    """Builds pool contract calls from human-friendly inputs.

    Holds only the pool contract address and the ledger client; each call
    is an independent request -> payload transformation.
    """

    def __init__(self, contract_id: str, ledger: LedgerClient):
        """Initialize the pool builder.

        Args:
            contract_id: Pool contract address
            ledger: Remote ledger collaborator
        """
        self.contract_id = contract_id
        self.ledger = ledger

    # -------------------------------------------------------------------------
    # Payload builders
    # -------------------------------------------------------------------------

    def add_liquidity(self, params: AddLiquidityParams) -> AddLiquidityResult:
        """Build an add_liquidity payload.

        Raises:
            UnknownFeeTierError: If the fee tier does not exist
            InvalidArgumentError: Non-positive prices or negative amounts
            InvalidRangeError: Lower tick not below upper tick after alignment
            OutOfRangeError: Ticks off the grid, or an amount too large for i128
        """
        fee_tier, tick_range = _position_ticks(params)

        amount0_stroops = validate_amount(to_stroops(params.amount0))
        amount1_stroops = validate_amount(to_stroops(params.amount1))

        logger.debug(
            "add_liquidity_prepared",
            pool=self.contract_id,
            lower_tick=tick_range.lower_tick,
            upper_tick=tick_range.upper_tick,
            amount0_stroops=amount0_stroops,
            amount1_stroops=amount1_stroops,
        )

        return AddLiquidityResult(
            summary=AddLiquiditySummary(
                price_range=f"{params.price_range_lower:.4f} - {params.price_range_upper:.4f}",
                amounts=f"{params.amount0} + {params.amount1}",
            ),
            contract_params=AddLiquidityCall(
                owner=params.owner,
                lower_tick=tick_range.lower_tick,
                upper_tick=tick_range.upper_tick,
                amount0_desired=amount0_stroops,
                amount1_desired=amount1_stroops,
            ),
            technical=AddLiquidityTechnical(
                lower_tick=tick_range.lower_tick,
                upper_tick=tick_range.upper_tick,
                tick_spacing=fee_tier.tick_spacing,
                amount0_stroops=amount0_stroops,
                amount1_stroops=amount1_stroops,
            ),
        )

    def remove_liquidity(self, params: RemoveLiquidityParams) -> RemoveLiquidityResult:
        """Build a remove_liquidity payload.

        Raises:
            OutOfRangeError: If liquidity_percent is outside (0, 100]
        """
        percent = validate_liquidity_percent(params.liquidity_percent)
        fee_tier, tick_range = _position_ticks(params)

        logger.debug(
            "remove_liquidity_prepared",
            pool=self.contract_id,
            lower_tick=tick_range.lower_tick,
            upper_tick=tick_range.upper_tick,
            percent=str(percent),
        )

        return RemoveLiquidityResult(
            summary=RemoveLiquiditySummary(
                removing=f"{percent}% of liquidity",
                price_range=f"{params.price_range_lower} - {params.price_range_upper}",
            ),
            contract_params=PositionCall(
                owner=params.owner,
                lower_tick=tick_range.lower_tick,
                upper_tick=tick_range.upper_tick,
            ),
            technical=RemoveLiquidityTechnical(
                lower_tick=tick_range.lower_tick,
                upper_tick=tick_range.upper_tick,
                tick_spacing=fee_tier.tick_spacing,
                percent_to_remove=percent,
            ),
        )

    def collect_fees(self, params: CollectFeesParams) -> CollectFeesResult:
        """Build a collect payload for a position's accrued fees."""
        fee_tier, tick_range = _position_ticks(params)

        return CollectFeesResult(
            summary=CollectFeesSummary(
                price_range=f"{params.price_range_lower} - {params.price_range_upper}",
            ),
            contract_params=PositionCall(
                owner=params.owner,
                lower_tick=tick_range.lower_tick,
                upper_tick=tick_range.upper_tick,
            ),
            technical=CollectFeesTechnical(
                lower_tick=tick_range.lower_tick,
                upper_tick=tick_range.upper_tick,
                tick_spacing=fee_tier.tick_spacing,
            ),
        )

    def swap(self, params: SwapParams) -> SwapResult:
        """Build an exact-input swap payload.

        The minimum output is the caller's expected output reduced by the
        slippage tolerance, computed on stroops with integer arithmetic.
        Use quote_swap() to fill in the expected output from the pool.

        Raises:
            InvalidArgumentError: Zero input, missing expected output, or a
                non-positive price limit
            OutOfRangeError: Slippage above 50%, or an amount too large for i128
        """
        amount_in_stroops = validate_amount(to_stroops(params.amount_in))
        if amount_in_stroops == 0:
            raise InvalidArgumentError(
                f"Swap amount must be at least one stroop: {params.amount_in}"
            )

        slippage_bps = validate_slippage(percent_to_bps(params.slippage_percent))

        if params.expected_amount_out is None:
            raise InvalidArgumentError(
                "expected_amount_out is required to derive the minimum output; "
                "use quote_swap() to fetch it from the pool"
            )
        expected_out_stroops = validate_amount(to_stroops(params.expected_amount_out))
        min_amount_out_stroops = apply_slippage(expected_out_stroops, slippage_bps)

        if params.price_limit is not None:
            sqrt_price_limit_x64 = validate_sqrt_price(price_to_sqrt_price_x64(params.price_limit))
        else:
            sqrt_price_limit_x64 = 0

        logger.debug(
            "swap_prepared",
            pool=self.contract_id,
            token_in=params.token_in,
            amount_in_stroops=amount_in_stroops,
            min_amount_out_stroops=min_amount_out_stroops,
            slippage_bps=slippage_bps,
        )

        return SwapResult(
            summary=SwapSummary(
                swapping=f"{params.amount_in} {params.token_in}",
                expected_output=f"~{from_stroops(expected_out_stroops):.4f}",
                minimum_output=f"{from_stroops(min_amount_out_stroops):.4f}",
                slippage=f"{params.slippage_percent}%",
                price_limit=str(params.price_limit) if params.price_limit is not None else "None",
            ),
            contract_params=SwapCall(
                sender=params.sender,
                token_in=params.token_in,
                amount_in=amount_in_stroops,
                amount_out_min=min_amount_out_stroops,
                sqrt_price_limit_x64=sqrt_price_limit_x64,
            ),
            technical=SwapTechnical(
                amount_in_stroops=amount_in_stroops,
                expected_amount_out_stroops=expected_out_stroops,
                min_amount_out_stroops=min_amount_out_stroops,
                slippage_bps=slippage_bps,
                sqrt_price_limit_x64=sqrt_price_limit_x64,
            ),
        )

    async def quote_swap(self, params: SwapParams) -> SwapResult:
        """Preview the swap on the pool, then build it from the previewed output."""
        preview = await self.preview_swap(params.token_in, params.amount_in)
        return self.swap(params.model_copy(update={"expected_amount_out": preview.amount_out}))

    # -------------------------------------------------------------------------
    # Ledger reads
    # -------------------------------------------------------------------------

    async def preview_swap(self, token_in: str, amount_in: HumanValue) -> SwapPreview:
        """Ask the pool for the expected outcome of an exact-input swap."""
        amount_in_stroops = validate_amount(to_stroops(amount_in))
        raw = await self.ledger.query(
            self.contract_id,
            "preview_swap",
            {"token_in": token_in, "amount_in": str(amount_in_stroops)},
        )
        response = PreviewSwapResponse.model_validate(raw)

        return SwapPreview(
            amount_out=from_stroops(int(response.amount_out)),
            price_impact_percent=bps_to_percent(response.price_impact_bps),
            new_price=sqrt_price_x64_to_price(int(response.sqrt_price_x64_after)),
            technical=response,
        )

    async def get_position(self, params: PositionParams) -> PositionInfo:
        """Fetch a position and convert it to human units."""
        _, tick_range = _position_ticks(params)
        raw = await self.ledger.query(
            self.contract_id,
            "get_position",
            {
                "owner": params.owner,
                "lower_tick": tick_range.lower_tick,
                "upper_tick": tick_range.upper_tick,
            },
        )
        response = PositionResponse.model_validate(raw)

        liquidity = int(response.liquidity)
        amount0 = from_stroops(int(response.amount0))
        amount1 = from_stroops(int(response.amount1))
        fees_owed0 = from_stroops(int(response.fees_owed_0))
        fees_owed1 = from_stroops(int(response.fees_owed_1))

        return PositionInfo(
            liquidity=liquidity,
            amount0=amount0,
            amount1=amount1,
            fees_owed0=fees_owed0,
            fees_owed1=fees_owed1,
            formatted=PositionFormatted(
                liquidity=f"{liquidity:,}",
                amounts=f"{amount0.normalize():f} + {amount1.normalize():f}",
                fees=f"{fees_owed0.normalize():f} + {fees_owed1.normalize():f}",
            ),
        )

    async def get_pool_state(self) -> PoolState:
        """Fetch the pool's current price, tick and liquidity."""
        raw = await self.ledger.query(self.contract_id, "get_pool_state", {})
        response = PoolStateResponse.model_validate(raw)

        return PoolState(
            current_price=sqrt_price_x64_to_price(int(response.sqrt_price_x64)),
            current_tick=response.current_tick,
            liquidity=int(response.liquidity),
            technical=response,
        )

    async def submit(self, result: PoolCallResult) -> Any:
        """Submit a built pool payload through the ledger client."""
        logger.info("pool_call_submitted", pool=self.contract_id, function=result.function)
        return await self.ledger.submit(
            self.contract_id,
            result.function,
            result.contract_params.model_dump(),
        )


def _position_ticks(params: PositionParams) -> tuple[FeeTier, TickRange]:
    """Resolve a position's fee tier and validated, aligned tick range."""
    fee_tier = get_fee_tier(params.fee_tier)
    tick_range = price_range_to_ticks(
        params.price_range_lower,
        params.price_range_upper,
        fee_tier.tick_spacing,
    )
    validate_tick_range(tick_range.lower_tick, tick_range.upper_tick)
    validate_tick_bounds(tick_range.lower_tick)
    validate_tick_bounds(tick_range.upper_tick)
    return fee_tier, tick_range


__all__ = ["BelugaPool", "PoolCallResult"]
