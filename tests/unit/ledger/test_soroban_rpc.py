"""Tests for the Soroban JSON-RPC client and the unavailable ledger."""

import asyncio
import json

import httpx
import pytest

from beluga.config import TESTNET
from beluga.errors import RemoteUnavailableError, UnimplementedError
from beluga.ledger import SorobanRpcClient, UnavailableLedgerClient
from tests.helpers import POOL, USDC, XLM


def make_client(handler) -> SorobanRpcClient:
    return SorobanRpcClient(TESTNET, timeout=1.0, transport=httpx.MockTransport(handler))


class TestSorobanRpcClient:
    """Tests for SorobanRpcClient over a mocked transport."""

    def test_get_latest_ledger(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(json.loads(request.content))
            return httpx.Response(
                200,
                json={
                    "jsonrpc": "2.0",
                    "id": 1,
                    "result": {"id": "abc", "protocolVersion": 21, "sequence": 123456},
                },
            )

        client = make_client(handler)
        assert asyncio.run(client.get_latest_ledger()) == 123456
        assert requests == [{"jsonrpc": "2.0", "id": 1, "method": "getLatestLedger"}]

    def test_request_ids_increment(self):
        ids = []

        def handler(request: httpx.Request) -> httpx.Response:
            ids.append(json.loads(request.content)["id"])
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": ids[-1], "result": {}})

        client = make_client(handler)
        asyncio.run(client.get_health())
        asyncio.run(client.get_health())
        assert ids == [1, 2]

    def test_posts_to_network_host(self):
        hosts = []

        def handler(request: httpx.Request) -> httpx.Response:
            hosts.append(request.url.host)
            return httpx.Response(
                200, json={"jsonrpc": "2.0", "id": 1, "result": {"status": "healthy"}}
            )

        health = asyncio.run(make_client(handler).get_health())
        assert health == {"status": "healthy"}
        assert hosts == ["soroban-testnet.stellar.org"]

    def test_error_response(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "nope"}},
            )

        with pytest.raises(RemoteUnavailableError, match="-32601"):
            asyncio.run(make_client(handler).get_latest_ledger())

    def test_http_error_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        with pytest.raises(RemoteUnavailableError):
            asyncio.run(make_client(handler).get_health())

    def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(RemoteUnavailableError) as exc_info:
            asyncio.run(make_client(handler).get_latest_ledger())
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_invalid_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        with pytest.raises(RemoteUnavailableError):
            asyncio.run(make_client(handler).get_health())

    @pytest.mark.parametrize("body", [[1, 2], "ok", 42])
    def test_non_object_body(self, body):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=body)

        with pytest.raises(RemoteUnavailableError, match="JSON object"):
            asyncio.run(make_client(handler).get_latest_ledger())

    def test_malformed_latest_ledger(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": {}})

        with pytest.raises(RemoteUnavailableError, match="Malformed"):
            asyncio.run(make_client(handler).get_latest_ledger())

    def test_contract_calls_unimplemented(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("contract calls must not hit the network")

        client = make_client(handler)
        with pytest.raises(UnimplementedError):
            asyncio.run(client.resolve_pool_address(USDC, XLM, 30))
        with pytest.raises(UnimplementedError):
            asyncio.run(client.query(POOL, "get_pool_state", {}))
        with pytest.raises(UnimplementedError):
            asyncio.run(client.submit(POOL, "swap", {}))


class TestUnavailableLedgerClient:
    """Tests for the default ledger client."""

    def test_every_operation_raises(self):
        ledger = UnavailableLedgerClient(TESTNET)
        with pytest.raises(UnimplementedError, match="resolve_pool_address"):
            asyncio.run(ledger.resolve_pool_address(USDC, XLM, 30))
        with pytest.raises(UnimplementedError):
            asyncio.run(ledger.query(POOL, "get_position", {}))
        with pytest.raises(UnimplementedError):
            asyncio.run(ledger.submit(POOL, "swap", {}))

    def test_is_not_implemented_error(self):
        """Callers catching NotImplementedError see the same failure."""
        with pytest.raises(NotImplementedError):
            asyncio.run(UnavailableLedgerClient().query(POOL, "get_pool_state", {}))
