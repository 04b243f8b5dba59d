"""Remote ledger collaborator interface.

The SDK never encodes, signs or sends transactions itself. Everything that
needs the ledger goes through a LedgerClient, and whatever the client raises
reaches the caller unchanged. Retries, if wanted, belong in the client.
"""

from __future__ import annotations

from typing import Any, Protocol

import structlog

from beluga.config import NetworkConfig
from beluga.errors import UnimplementedError

logger = structlog.get_logger()


class LedgerClient(Protocol):
    """Protocol for remote ledger access.

    Each call is a single-shot request. Implementations decide the wire
    encoding of params; the SDK only hands over protocol-unit fields.
    """

    async def resolve_pool_address(self, token_a: str, token_b: str, fee_bps: int) -> str | None:
        """Look up the pool contract for a pair and fee.

        Args:
            token_a: First token identifier
            token_b: Second token identifier
            fee_bps: Fee tier in basis points

        Returns:
            Pool contract address, or None if no such pool exists
        """
        ...

    async def submit(
        self, contract_address: str, function_name: str, params: dict[str, Any]
    ) -> Any:
        """Invoke a state-changing contract function.

        Args:
            contract_address: Target contract
            function_name: Contract function (e.g. "create_pool", "swap")
            params: Payload produced by a builder

        Returns:
            Implementation-defined submission result
        """
        ...

    async def query(self, contract_address: str, function_name: str, params: dict[str, Any]) -> Any:
        """Call a read-only contract function.

        Args:
            contract_address: Target contract
            function_name: Contract function (e.g. "get_pool_state")
            params: Call arguments in protocol units

        Returns:
            Decoded return value
        """
        ...


class UnavailableLedgerClient:
    """Ledger client used when no integration is configured.

    Every call raises UnimplementedError instead of returning made-up data.
    """

    def __init__(self, network: NetworkConfig | None = None):
        self.network = network

    def _unavailable(self, operation: str, **context: Any) -> UnimplementedError:
        logger.debug("ledger_unavailable", operation=operation, **context)
        return UnimplementedError(
            f"{operation}: no ledger integration configured - pass a LedgerClient to the SDK"
        )

    async def resolve_pool_address(self, token_a: str, token_b: str, fee_bps: int) -> str | None:
        raise self._unavailable(
            "resolve_pool_address", token_a=token_a, token_b=token_b, fee_bps=fee_bps
        )

    async def submit(
        self, contract_address: str, function_name: str, params: dict[str, Any]
    ) -> Any:
        raise self._unavailable("submit", contract=contract_address, function=function_name)

    async def query(self, contract_address: str, function_name: str, params: dict[str, Any]) -> Any:
        raise self._unavailable("query", contract=contract_address, function=function_name)


__all__ = ["LedgerClient", "UnavailableLedgerClient"]
