"""BelugaSwap SDK facade combining the factory and pool builders."""

from __future__ import annotations

import structlog

from beluga.config import NetworkConfig, SDKSettings, resolve_network
from beluga.errors import PoolNotFoundError
from beluga.factory import BelugaFactory
from beluga.ledger.client import LedgerClient, UnavailableLedgerClient
from beluga.ledger.soroban import DEFAULT_RPC_TIMEOUT, SorobanRpcClient
from beluga.models.params import GetPoolParams
from beluga.pool import BelugaPool

logger = structlog.get_logger()


class BelugaSwapSDK:
    """Single entry point to the BelugaSwap factory and pools.

    Resolves the network, then wires the factory (and optionally a pool) to
    the ledger client. Without an explicit ledger client, every remote
    operation raises UnimplementedError.

    Usage:
        sdk = BelugaSwapSDK(factory_address=FACTORY, network="testnet")
        result = sdk.factory.create_pool(params)

        pool = sdk.connect_pool(POOL)
        swap = pool.swap(swap_params)
    """

    def __init__(
        self,
        factory_address: str,
        pool_address: str | None = None,
        network: str | None = None,
        rpc_url: str | None = None,
        network_passphrase: str | None = None,
        ledger: LedgerClient | None = None,
        rpc_timeout: float = DEFAULT_RPC_TIMEOUT,
    ):
        """Initialize the SDK.

        Args:
            factory_address: Factory contract address
            pool_address: Optional pool contract to connect immediately
            network: Predefined network name ("testnet"/"test" or
                "mainnet"/"production")
            rpc_url: Custom RPC URL (requires network_passphrase)
            network_passphrase: Custom network passphrase (requires rpc_url)
            ledger: Remote ledger client; defaults to UnavailableLedgerClient
            rpc_timeout: Timeout in seconds for direct Soroban RPC calls

        Raises:
            ConfigurationError: If the network setup is missing or contradictory
        """
        self.network: NetworkConfig = resolve_network(network, rpc_url, network_passphrase)
        if ledger is None:
            ledger = UnavailableLedgerClient(self.network)
        self.ledger: LedgerClient = ledger
        self.rpc = SorobanRpcClient(self.network, timeout=rpc_timeout)

        self.factory = BelugaFactory(factory_address, self.ledger)
        self.pool: BelugaPool | None = None
        if pool_address:
            self.pool = BelugaPool(pool_address, self.ledger)

        logger.debug(
            "sdk_initialized",
            network=self.network.name or self.network.rpc_url,
            factory=factory_address,
            pool=pool_address,
        )

    @classmethod
    def from_env(cls, ledger: LedgerClient | None = None) -> BelugaSwapSDK:
        """Create an SDK from BELUGA_* environment variables."""
        settings = SDKSettings.from_env()
        return cls(
            factory_address=settings.factory_address,
            pool_address=settings.pool_address,
            network=settings.network,
            rpc_url=settings.rpc_url,
            network_passphrase=settings.network_passphrase,
            ledger=ledger,
            rpc_timeout=settings.rpc_timeout,
        )

    @property
    def network_passphrase(self) -> str:
        return self.network.network_passphrase

    @property
    def rpc_url(self) -> str:
        return self.network.rpc_url

    def connect_pool(self, pool_address: str) -> BelugaPool:
        """Bind a pool contract address for subsequent pool calls (no I/O)."""
        self.pool = BelugaPool(pool_address, self.ledger)
        return self.pool

    async def get_and_connect_pool(self, params: GetPoolParams) -> BelugaPool:
        """Look up a pool through the factory and connect to it.

        Raises:
            PoolNotFoundError: If the factory has no such pool
        """
        pool_address = await self.factory.get_pool(params)
        if not pool_address:
            raise PoolNotFoundError(
                f"Pool does not exist: {params.token_a}/{params.token_b} ({params.fee_tier})"
            )
        return self.connect_pool(pool_address)


__all__ = ["BelugaSwapSDK"]
