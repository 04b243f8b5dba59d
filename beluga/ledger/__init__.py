"""Remote ledger collaborator: protocol and implementations."""

from beluga.ledger.client import LedgerClient, UnavailableLedgerClient
from beluga.ledger.soroban import DEFAULT_RPC_TIMEOUT, SorobanRpcClient

__all__ = [
    "LedgerClient",
    "UnavailableLedgerClient",
    "SorobanRpcClient",
    "DEFAULT_RPC_TIMEOUT",
]
