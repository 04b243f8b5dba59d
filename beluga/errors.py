"""BelugaSwap SDK error classes.

Validation errors are raised locally before any payload is built. They are
deterministic caller mistakes and are never retried. Remote errors come from
the ledger collaborator and are passed through to the caller.
"""


class BelugaError(Exception):
    """Base error for BelugaSwap SDK operations."""

    pass


class InvalidArgumentError(BelugaError, ValueError):
    """Input outside its domain (e.g. non-positive price, negative amount)."""

    pass


class OutOfRangeError(BelugaError, ValueError):
    """Value outside protocol-defined bounds."""

    pass


class BelowMinimumError(OutOfRangeError):
    """Value under a protocol floor."""

    pass


class InvalidRangeError(BelugaError, ValueError):
    """Lower bound is not strictly less than the upper bound."""

    pass


class UnknownFeeTierError(BelugaError, ValueError):
    """Fee tier name is not STABLE, VOLATILE or EXOTIC."""

    pass


class ConfigurationError(BelugaError):
    """Missing or contradictory network configuration."""

    pass


class PoolNotFoundError(BelugaError):
    """The factory has no pool for the requested pair and fee tier."""

    pass


class UnimplementedError(BelugaError, NotImplementedError):
    """Ledger integration for this operation does not exist."""

    pass


class RemoteUnavailableError(BelugaError):
    """The remote ledger could not be reached or returned an error."""

    pass


__all__ = [
    "BelugaError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "BelowMinimumError",
    "InvalidRangeError",
    "UnknownFeeTierError",
    "ConfigurationError",
    "PoolNotFoundError",
    "UnimplementedError",
    "RemoteUnavailableError",
]
