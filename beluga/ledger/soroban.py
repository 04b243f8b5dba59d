"""Soroban JSON-RPC client.

Supports the read-only RPC methods that need no XDR encoding (getHealth,
getLatestLedger). Contract invocation requires building and signing
transactions, which this SDK does not do, so the LedgerClient methods raise
UnimplementedError.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from beluga.config import NetworkConfig
from beluga.errors import RemoteUnavailableError, UnimplementedError

logger = structlog.get_logger()

DEFAULT_RPC_TIMEOUT = 30.0


class SorobanRpcClient:
    """Minimal async client for a Soroban RPC server.

    One HTTP request per call, no retries and no connection reuse between
    calls.

    Usage:
        client = SorobanRpcClient(TESTNET)
        health = await client.get_health()
        ledger = await client.get_latest_ledger()
    """

    def __init__(
        self,
        network: NetworkConfig,
        timeout: float = DEFAULT_RPC_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            network: Network whose RPC endpoint is called
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.network = network
        self.timeout = timeout
        self._transport = transport
        self._id = 0

    async def _call(self, method: str, params: dict[str, Any] | None = None) -> Any:
        """Make a JSON-RPC 2.0 call and return its result.

        Raises:
            RemoteUnavailableError: On transport errors, HTTP errors, or a
                JSON-RPC error response
        """
        self._id += 1
        payload: dict[str, Any] = {"jsonrpc": "2.0", "id": self._id, "method": method}
        if params is not None:
            payload["params"] = params

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.network.rpc_url, json=payload)
                response.raise_for_status()
                body = response.json()
                if not isinstance(body, dict):
                    raise ValueError(f"expected a JSON object, got {type(body).__name__}")
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(
                "soroban_rpc_error",
                method=method,
                rpc_url=self.network.rpc_url,
                error=str(e),
            )
            raise RemoteUnavailableError(f"Soroban RPC {method} failed: {e}") from e

        if body.get("error"):
            error = body["error"]
            logger.warning(
                "soroban_rpc_error_response",
                method=method,
                code=error.get("code"),
                message=error.get("message"),
            )
            raise RemoteUnavailableError(
                f"Soroban RPC error {error.get('code')}: {error.get('message')}"
            )

        return body.get("result")

    async def get_health(self) -> dict[str, Any]:
        """Return the server's getHealth result (status, latest ledger, ...)."""
        result = await self._call("getHealth")
        return dict(result or {})

    async def get_latest_ledger(self) -> int:
        """Return the sequence number of the latest closed ledger."""
        result = await self._call("getLatestLedger")
        try:
            return int(result["sequence"])
        except (TypeError, KeyError, ValueError) as e:
            raise RemoteUnavailableError(f"Malformed getLatestLedger result: {result!r}") from e

    async def resolve_pool_address(self, token_a: str, token_b: str, fee_bps: int) -> str | None:
        raise UnimplementedError("resolve_pool_address requires Soroban contract invocation")

    async def submit(
        self, contract_address: str, function_name: str, params: dict[str, Any]
    ) -> Any:
        raise UnimplementedError(
            f"{function_name}: transaction signing and submission are not supported"
        )

    async def query(self, contract_address: str, function_name: str, params: dict[str, Any]) -> Any:
        raise UnimplementedError(f"{function_name}: Soroban contract simulation is not supported")


__all__ = ["DEFAULT_RPC_TIMEOUT", "SorobanRpcClient"]
