"""Tests for the pool payload builder and ledger reads."""

import asyncio
from decimal import Decimal

import pytest
from pydantic import ValidationError

from beluga.constants import I128_MAX
from beluga.errors import (
    InvalidArgumentError,
    InvalidRangeError,
    OutOfRangeError,
    RemoteUnavailableError,
    UnimplementedError,
    UnknownFeeTierError,
)
from beluga.ledger import UnavailableLedgerClient
from beluga.math import from_stroops, price_to_sqrt_price_x64
from beluga.models.params import CollectFeesParams, PositionParams
from beluga.pool import BelugaPool
from tests.helpers import (
    ONE_X64,
    OWNER,
    POOL,
    TRADER,
    USDC,
    MockLedgerClient,
    make_add_liquidity_params,
    make_remove_liquidity_params,
    make_swap_params,
)


def _position(**overrides) -> dict:
    fields = {
        "owner": OWNER,
        "price_range_lower": 0.95,
        "price_range_upper": 1.05,
        "fee_tier": "VOLATILE",
    }
    fields.update(overrides)
    return fields


class TestAddLiquidity:
    """Tests for BelugaPool.add_liquidity."""

    def test_payload(self, pool):
        result = pool.add_liquidity(make_add_liquidity_params())

        assert result.function == "add_liquidity"
        assert result.contract_params.model_dump() == {
            "owner": OWNER,
            "lower_tick": -540,
            "upper_tick": 480,
            "amount0_desired": "500000000",
            "amount1_desired": "500000000",
        }
        assert result.technical.tick_spacing == 60
        assert result.summary.price_range == "0.9500 - 1.0500"
        assert result.summary.amounts == "50 + 50"

    def test_single_sided(self, pool):
        """One side may be zero."""
        result = pool.add_liquidity(make_add_liquidity_params(amount1=0))
        assert result.contract_params.amount1_desired == "0"

    def test_inverted_range(self, pool):
        with pytest.raises(InvalidRangeError):
            pool.add_liquidity(
                make_add_liquidity_params(price_range_lower=1.05, price_range_upper=0.95)
            )

    def test_unknown_fee_tier(self, pool):
        with pytest.raises(UnknownFeeTierError):
            pool.add_liquidity(make_add_liquidity_params(fee_tier="MEME"))

    def test_negative_amount(self, pool):
        with pytest.raises(InvalidArgumentError):
            pool.add_liquidity(make_add_liquidity_params(amount0=-5))

    def test_oversized_amount(self, pool):
        with pytest.raises(OutOfRangeError, match="i128"):
            pool.add_liquidity(make_add_liquidity_params(amount1="1e40"))


class TestRemoveLiquidity:
    """Tests for BelugaPool.remove_liquidity."""

    def test_payload(self, pool):
        result = pool.remove_liquidity(make_remove_liquidity_params())

        assert result.function == "remove_liquidity"
        assert result.contract_params.model_dump() == {
            "owner": OWNER,
            "lower_tick": -540,
            "upper_tick": 480,
        }
        assert result.technical.percent_to_remove == Decimal(50)
        assert result.summary.removing == "50% of liquidity"

    def test_full_removal(self, pool):
        result = pool.remove_liquidity(make_remove_liquidity_params(liquidity_percent=100))
        assert result.technical.percent_to_remove == Decimal(100)

    @pytest.mark.parametrize("percent", [0, 100.5, -10])
    def test_percent_out_of_range(self, pool, percent):
        with pytest.raises(OutOfRangeError):
            pool.remove_liquidity(make_remove_liquidity_params(liquidity_percent=percent))


class TestCollectFees:
    """Tests for BelugaPool.collect_fees."""

    def test_payload(self, pool):
        result = pool.collect_fees(CollectFeesParams(**_position(fee_tier="STABLE")))

        assert result.function == "collect"
        assert result.technical.tick_spacing == 10
        assert result.contract_params.lower_tick % 10 == 0
        assert result.contract_params.lower_tick < result.contract_params.upper_tick
        assert result.summary.price_range == "0.95 - 1.05"


class TestSwap:
    """Tests for BelugaPool.swap."""

    def test_payload(self, pool):
        result = pool.swap(make_swap_params())

        assert result.function == "swap"
        assert result.contract_params.model_dump() == {
            "sender": TRADER,
            "token_in": USDC,
            "amount_in": "100000000",
            "amount_out_min": "98703000",
            "sqrt_price_limit_x64": "0",
        }
        assert result.technical.expected_amount_out_stroops == "99700000"
        assert result.technical.slippage_bps == 100

    def test_summary(self, pool):
        summary = pool.swap(make_swap_params()).summary

        assert summary.swapping == f"10 {USDC}"
        assert summary.expected_output == "~9.9700"
        assert summary.minimum_output == "9.8703"
        assert summary.slippage == "1%"
        assert summary.price_limit == "None"

    def test_price_limit(self, pool):
        result = pool.swap(make_swap_params(price_limit=0.95))
        assert result.contract_params.sqrt_price_limit_x64 == str(price_to_sqrt_price_x64(0.95))
        assert result.summary.price_limit == "0.95"

    def test_zero_slippage(self, pool):
        result = pool.swap(make_swap_params(slippage_percent=0))
        assert result.contract_params.amount_out_min == "99700000"

    def test_max_slippage(self, pool):
        result = pool.swap(make_swap_params(slippage_percent=50))
        assert result.contract_params.amount_out_min == "49850000"

    def test_slippage_too_high(self, pool):
        with pytest.raises(OutOfRangeError):
            pool.swap(make_swap_params(slippage_percent=60))

    def test_zero_amount(self, pool):
        with pytest.raises(InvalidArgumentError):
            pool.swap(make_swap_params(amount_in=0))

    def test_expected_output_required(self, pool):
        """No price is ever assumed for the minimum output."""
        with pytest.raises(InvalidArgumentError, match="quote_swap"):
            pool.swap(make_swap_params(expected_amount_out=None))

    def test_non_positive_price_limit(self, pool):
        with pytest.raises(InvalidArgumentError):
            pool.swap(make_swap_params(price_limit=0))

    def test_oversized_expected_output(self, pool):
        with pytest.raises(OutOfRangeError, match="i128"):
            pool.swap(make_swap_params(expected_amount_out="1e40"))

    def test_oversized_amount_in(self, pool):
        with pytest.raises(OutOfRangeError, match="i128"):
            pool.swap(make_swap_params(amount_in="1e40"))

    def test_amount_at_i128_bound(self, pool):
        result = pool.swap(make_swap_params(amount_in=from_stroops(I128_MAX)))
        assert result.contract_params.amount_in == str(I128_MAX)

    def test_invalid_sender(self):
        with pytest.raises(ValidationError):
            make_swap_params(sender="alice")


class TestQuoteSwap:
    """Tests for swaps built from a ledger preview."""

    def test_preview_swap(self, pool, mock_ledger):
        preview = asyncio.run(pool.preview_swap(USDC, 10))

        assert preview.amount_out == Decimal("9.97")
        assert preview.price_impact_percent == Decimal("0.30")
        assert preview.new_price == 1.0
        assert mock_ledger.calls == [
            ("query", POOL, "preview_swap", {"token_in": USDC, "amount_in": "100000000"})
        ]

    def test_preview_oversized_amount(self, pool, mock_ledger):
        """Oversized amounts fail locally, before the ledger is asked."""
        with pytest.raises(OutOfRangeError):
            asyncio.run(pool.preview_swap(USDC, "1e40"))
        assert mock_ledger.calls == []

    def test_quote_swap_uses_preview(self, pool):
        result = asyncio.run(pool.quote_swap(make_swap_params(expected_amount_out=None)))

        assert result.technical.expected_amount_out_stroops == "99700000"
        assert result.contract_params.amount_out_min == "98703000"

    def test_quote_swap_unavailable(self):
        pool = BelugaPool(POOL, UnavailableLedgerClient())
        with pytest.raises(UnimplementedError):
            asyncio.run(pool.quote_swap(make_swap_params(expected_amount_out=None)))


class TestPoolReads:
    """Tests for position and pool state reads."""

    def test_get_position(self, pool, mock_ledger):
        position = asyncio.run(pool.get_position(PositionParams(**_position())))

        assert position.liquidity == 10_000_000
        assert position.amount0 == Decimal(5)
        assert position.fees_owed1 == Decimal("0.05")
        assert position.formatted.liquidity == "10,000,000"
        assert position.formatted.amounts == "5 + 5"
        assert position.formatted.fees == "0.05 + 0.05"
        assert mock_ledger.calls == [
            ("query", POOL, "get_position", {"owner": OWNER, "lower_tick": -540, "upper_tick": 480})
        ]

    def test_get_pool_state(self, pool):
        state = asyncio.run(pool.get_pool_state())

        assert state.current_price == 1.0
        assert state.current_tick == 0
        assert state.liquidity == 123_456_789
        assert state.technical.sqrt_price_x64 == str(ONE_X64)

    def test_malformed_response(self):
        ledger = MockLedgerClient(responses={"get_pool_state": {"sqrt_price_x64": "-1"}})
        pool = BelugaPool(POOL, ledger)
        with pytest.raises(ValidationError):
            asyncio.run(pool.get_pool_state())

    def test_remote_error_passes_through(self):
        error = RemoteUnavailableError("timeout")
        pool = BelugaPool(POOL, MockLedgerClient(error=error))
        with pytest.raises(RemoteUnavailableError) as exc_info:
            asyncio.run(pool.get_pool_state())
        assert exc_info.value is error


class TestPoolSubmit:
    """Tests for BelugaPool.submit."""

    @pytest.mark.parametrize(
        "build,function",
        [
            (lambda pool: pool.add_liquidity(make_add_liquidity_params()), "add_liquidity"),
            (
                lambda pool: pool.remove_liquidity(make_remove_liquidity_params()),
                "remove_liquidity",
            ),
            (lambda pool: pool.collect_fees(CollectFeesParams(**_position())), "collect"),
            (lambda pool: pool.swap(make_swap_params()), "swap"),
        ],
    )
    def test_submit_uses_result_function(self, pool, mock_ledger, build, function):
        result = build(pool)
        assert asyncio.run(pool.submit(result)) == {"status": "SUCCESS"}
        assert mock_ledger.calls == [
            ("submit", POOL, function, result.contract_params.model_dump())
        ]

    def test_submit_unavailable(self):
        pool = BelugaPool(POOL, UnavailableLedgerClient())
        with pytest.raises(UnimplementedError):
            asyncio.run(pool.submit(pool.swap(make_swap_params())))
