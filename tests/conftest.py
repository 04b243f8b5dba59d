"""Pytest configuration and fixtures."""

import pytest
import structlog

from beluga.factory import BelugaFactory
from beluga.pool import BelugaPool
from beluga.sdk import BelugaSwapSDK
from tests.helpers import FACTORY, ONE_X64, POOL, USDC, XLM, MockLedgerClient

ENV_VARS = (
    "BELUGA_NETWORK",
    "BELUGA_RPC_URL",
    "BELUGA_NETWORK_PASSPHRASE",
    "BELUGA_FACTORY_ADDRESS",
    "BELUGA_POOL_ADDRESS",
    "BELUGA_RPC_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep BELUGA_* variables from the developer's shell out of tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo structlog.configure() calls made by the CLI."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_ledger() -> MockLedgerClient:
    """A ledger with one VOLATILE USDC/XLM pool and canned read responses."""
    return MockLedgerClient(
        pools={(USDC, XLM, 30): POOL},
        responses={
            "get_total_pools": 3,
            "preview_swap": {
                "amount_out": "99700000",
                "price_impact_bps": 30,
                "sqrt_price_x64_after": str(ONE_X64),
            },
            "get_position": {
                "liquidity": "10000000",
                "amount0": "50000000",
                "amount1": "50000000",
                "fees_owed_0": "500000",
                "fees_owed_1": "500000",
            },
            "get_pool_state": {
                "sqrt_price_x64": str(ONE_X64),
                "current_tick": 0,
                "liquidity": "123456789",
            },
        },
        submit_result={"status": "SUCCESS"},
    )


@pytest.fixture
def sdk(mock_ledger: MockLedgerClient) -> BelugaSwapSDK:
    """A testnet SDK wired to the mock ledger."""
    return BelugaSwapSDK(factory_address=FACTORY, network="testnet", ledger=mock_ledger)


@pytest.fixture
def factory(sdk: BelugaSwapSDK) -> BelugaFactory:
    return sdk.factory


@pytest.fixture
def pool(sdk: BelugaSwapSDK) -> BelugaPool:
    return sdk.connect_pool(POOL)
