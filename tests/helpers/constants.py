"""Shared address constants for tests.

Addresses are syntactically valid Stellar strkeys (G... accounts, C...
contracts); checksums are not verified by the SDK.

Usage:
    from tests.helpers import CREATOR, POOL
"""


def _strkey(prefix: str, tag: str) -> str:
    return (prefix + tag).ljust(56, "A")


# =============================================================================
# Accounts
# =============================================================================

CREATOR = _strkey("G", "CREATOR")
OWNER = _strkey("G", "OWNER")
TRADER = _strkey("G", "TRADER")

# =============================================================================
# Contracts
# =============================================================================

FACTORY = _strkey("C", "FACTORY")
POOL = _strkey("C", "POOL")
USDC = _strkey("C", "USDC")
XLM = _strkey("C", "XLM")

# 2^64: sqrt price of 1.0
ONE_X64 = 18446744073709551616


__all__ = [
    "CREATOR",
    "OWNER",
    "TRADER",
    "FACTORY",
    "POOL",
    "USDC",
    "XLM",
    "ONE_X64",
]
