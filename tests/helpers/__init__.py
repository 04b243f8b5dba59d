"""Test helpers module for shared test utilities.

- constants: Stellar addresses used across tests
- factories: Request parameter factory functions
- ledger: Deterministic LedgerClient implementation
"""

from tests.helpers.constants import (
    CREATOR,
    FACTORY,
    ONE_X64,
    OWNER,
    POOL,
    TRADER,
    USDC,
    XLM,
)
from tests.helpers.factories import (
    make_add_liquidity_params,
    make_create_pool_params,
    make_remove_liquidity_params,
    make_swap_params,
)
from tests.helpers.ledger import MockLedgerClient

__all__ = [
    # Constants
    "CREATOR",
    "OWNER",
    "TRADER",
    "FACTORY",
    "POOL",
    "USDC",
    "XLM",
    "ONE_X64",
    # Factories
    "make_create_pool_params",
    "make_add_liquidity_params",
    "make_remove_liquidity_params",
    "make_swap_params",
    # Ledger
    "MockLedgerClient",
]
