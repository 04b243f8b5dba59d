"""Factory builder: pool creation payloads and pool lookup."""

from __future__ import annotations

from typing import Any

import structlog

from beluga.config import get_fee_tier
from beluga.ledger.client import LedgerClient
from beluga.math.price import price_range_to_ticks, price_to_sqrt_price_x64, price_to_tick
from beluga.math.units import percent_to_bps, to_stroops
from beluga.models.params import CreatePoolParams, GetPoolParams, Permanent
from beluga.models.payloads import CreatePoolArgs, CreatePoolCall
from beluga.models.results import CreatePoolResult, CreatePoolSummary, CreatePoolTechnical
from beluga.validation import (
    resolve_lock_duration,
    validate_amount,
    validate_creator_fee,
    validate_initial_liquidity,
    validate_sqrt_price,
    validate_tick_bounds,
    validate_tick_range,
)

logger = structlog.get_logger()


class BelugaFactory:
    """Builds factory contract calls from human-friendly inputs.

    Building is pure and synchronous. Only get_pool, pool_exists,
    get_total_pools and submit reach the ledger.
    """

    def __init__(self, contract_id: str, ledger: LedgerClient):
        """Initialize the factory builder.

        Args:
            contract_id: Factory contract address
            ledger: Remote ledger collaborator
        """
        self.contract_id = contract_id
        self.ledger = ledger

    def create_pool(self, params: CreatePoolParams) -> CreatePoolResult:
        """Build a create_pool payload.

        Args:
            params: Pool parameters in human units

        Returns:
            CreatePoolResult with summary, contract params and technical details

        Raises:
            UnknownFeeTierError: If the fee tier does not exist
            BelowMinimumError: Creator fee under 0.1%, an amount under 0.1
                tokens, or a lock shorter than 7 days
            OutOfRangeError: Creator fee over 10%, ticks off the grid, or an amount
                too large for i128
            InvalidArgumentError: Non-positive prices or negative amounts
            InvalidRangeError: Lower tick not below upper tick after alignment
        """
        fee_tier = get_fee_tier(params.fee_tier)

        creator_fee_bps = validate_creator_fee(percent_to_bps(params.creator_fee_percent))

        sqrt_price_x64 = validate_sqrt_price(price_to_sqrt_price_x64(params.initial_price))
        current_tick = validate_tick_bounds(price_to_tick(params.initial_price))

        amount0_stroops = validate_amount(to_stroops(params.amount0))
        amount1_stroops = validate_amount(to_stroops(params.amount1))
        validate_initial_liquidity(amount0_stroops, amount1_stroops)

        tick_range = price_range_to_ticks(
            params.price_range_lower,
            params.price_range_upper,
            fee_tier.tick_spacing,
        )
        validate_tick_range(tick_range.lower_tick, tick_range.upper_tick)
        validate_tick_bounds(tick_range.lower_tick)
        validate_tick_bounds(tick_range.upper_tick)

        lock_duration = resolve_lock_duration(params.lock)

        contract_params = CreatePoolCall(
            creator=params.creator,
            params=CreatePoolArgs(
                token_a=params.token_a,
                token_b=params.token_b,
                fee_bps=fee_tier.bps,
                creator_fee_bps=creator_fee_bps,
                initial_sqrt_price_x64=sqrt_price_x64,
                amount0_desired=amount0_stroops,
                amount1_desired=amount1_stroops,
                lower_tick=tick_range.lower_tick,
                upper_tick=tick_range.upper_tick,
                lock_duration=lock_duration,
            ),
        )

        logger.debug(
            "pool_creation_prepared",
            factory=self.contract_id,
            token_a=params.token_a,
            token_b=params.token_b,
            fee_tier=fee_tier.name,
            lower_tick=tick_range.lower_tick,
            upper_tick=tick_range.upper_tick,
            lock_duration=lock_duration,
        )

        return CreatePoolResult(
            summary=CreatePoolSummary(
                pair=f"{params.token_a}/{params.token_b}",
                fee=f"{fee_tier.percent:.2f}%",
                creator_fee=f"{params.creator_fee_percent}%",
                initial_price=str(params.initial_price),
                price_range=f"{params.price_range_lower} - {params.price_range_upper}",
                amounts=f"{params.amount0} + {params.amount1}",
                lock_duration=_describe_lock(params),
            ),
            contract_params=contract_params,
            technical=CreatePoolTechnical(
                fee_bps=fee_tier.bps,
                creator_fee_bps=creator_fee_bps,
                sqrt_price_x64=sqrt_price_x64,
                current_tick=current_tick,
                tick_spacing=fee_tier.tick_spacing,
                lower_tick=tick_range.lower_tick,
                upper_tick=tick_range.upper_tick,
                amount0_stroops=amount0_stroops,
                amount1_stroops=amount1_stroops,
                lock_duration_ledgers=lock_duration,
            ),
        )

    async def get_pool(self, params: GetPoolParams) -> str | None:
        """Look up the pool address for a pair and fee tier.

        Returns:
            Pool contract address, or None if the pool does not exist
        """
        fee_tier = get_fee_tier(params.fee_tier)
        logger.debug(
            "pool_lookup",
            factory=self.contract_id,
            token_a=params.token_a,
            token_b=params.token_b,
            fee_bps=fee_tier.bps,
        )
        return await self.ledger.resolve_pool_address(params.token_a, params.token_b, fee_tier.bps)

    async def pool_exists(self, params: GetPoolParams) -> bool:
        """Check whether a pool exists for a pair and fee tier."""
        return await self.get_pool(params) is not None

    async def get_total_pools(self) -> int:
        """Return the number of pools created by this factory."""
        result = await self.ledger.query(self.contract_id, "get_total_pools", {})
        return int(result)

    async def submit(self, result: CreatePoolResult) -> Any:
        """Submit a built create_pool payload through the ledger client."""
        logger.info("pool_creation_submitted", factory=self.contract_id)
        return await self.ledger.submit(
            self.contract_id,
            result.function,
            result.contract_params.model_dump(),
        )


def _describe_lock(params: CreatePoolParams) -> str:
    if isinstance(params.lock, Permanent):
        return "Permanent"
    if params.lock is None:
        return "7 days (minimum)"
    return f"{params.lock.days} days"


__all__ = ["BelugaFactory"]
