"""Fee tiers and network configuration.

Fee tiers are fixed by the protocol and exposed as a read-only mapping.
Networks are either one of the predefined Stellar networks or a custom
RPC URL + passphrase pair.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from types import MappingProxyType

from beluga.errors import ConfigurationError, UnknownFeeTierError


@dataclass(frozen=True)
class FeeTier:
    """A protocol fee tier.

    Attributes:
        name: Tier name (STABLE, VOLATILE or EXOTIC)
        bps: Swap fee in basis points
        tick_spacing: Tick spacing enforced for positions in this tier
        percent: Swap fee as a percentage, for display
        description: Human-readable description
    """

    name: str
    bps: int
    tick_spacing: int
    percent: float
    description: str


STABLE = FeeTier(
    name="STABLE",
    bps=5,
    tick_spacing=10,
    percent=0.05,
    description="For stablecoin pairs (0.05% fee)",
)
VOLATILE = FeeTier(
    name="VOLATILE",
    bps=30,
    tick_spacing=60,
    percent=0.30,
    description="For volatile pairs (0.30% fee)",
)
EXOTIC = FeeTier(
    name="EXOTIC",
    bps=100,
    tick_spacing=200,
    percent=1.00,
    description="For exotic/meme pairs (1.00% fee)",
)

FEE_TIERS: MappingProxyType[str, FeeTier] = MappingProxyType(
    {tier.name: tier for tier in (STABLE, VOLATILE, EXOTIC)}
)


def get_fee_tier(name: str) -> FeeTier:
    """Look up a fee tier by name (case-insensitive).

    Raises:
        UnknownFeeTierError: If name is not one of the three tiers
    """
    tier = FEE_TIERS.get(name.upper()) if isinstance(name, str) else None
    if tier is None:
        raise UnknownFeeTierError(
            f"Unknown fee tier: {name!r} (expected one of {', '.join(FEE_TIERS)})"
        )
    return tier


@dataclass(frozen=True)
class NetworkConfig:
    """Soroban RPC endpoint and the passphrase of the network behind it."""

    rpc_url: str
    network_passphrase: str
    name: str | None = None


TESTNET = NetworkConfig(
    rpc_url="https://soroban-testnet.stellar.org",
    network_passphrase="Test SDF Network ; September 2015",
    name="Testnet",
)
MAINNET = NetworkConfig(
    rpc_url="https://soroban-mainnet.stellar.org",
    network_passphrase="Public Global Stellar Network ; September 2015",
    name="Mainnet",
)

# Symbolic names accepted for the predefined networks
NETWORKS: MappingProxyType[str, NetworkConfig] = MappingProxyType(
    {
        "testnet": TESTNET,
        "test": TESTNET,
        "mainnet": MAINNET,
        "production": MAINNET,
    }
)


def resolve_network(
    network: str | None = None,
    rpc_url: str | None = None,
    network_passphrase: str | None = None,
) -> NetworkConfig:
    """Resolve network settings to a NetworkConfig.

    Either a symbolic network name or both rpc_url and network_passphrase
    must be given, but not both.

    Raises:
        ConfigurationError: If the setup is missing, incomplete, unknown or
            contradictory
    """
    has_custom = rpc_url is not None or network_passphrase is not None

    if network:
        if has_custom:
            raise ConfigurationError(
                f'Provide either "network" ({network!r}) or a custom "rpc_url" and '
                '"network_passphrase", not both'
            )
        config = NETWORKS.get(network.lower())
        if config is None:
            raise ConfigurationError(
                f"Unknown network: {network!r} (expected one of {', '.join(NETWORKS)})"
            )
        return config

    if rpc_url and network_passphrase:
        return NetworkConfig(rpc_url=rpc_url, network_passphrase=network_passphrase)

    raise ConfigurationError(
        'Must provide either "network" (testnet/mainnet) or both "rpc_url" and '
        '"network_passphrase"'
    )


@dataclass(frozen=True)
class SDKSettings:
    """SDK settings read from the environment.

    Attributes:
        factory_address: Factory contract ID (BELUGA_FACTORY_ADDRESS)
        pool_address: Optional pool contract ID (BELUGA_POOL_ADDRESS)
        network: Symbolic network name (BELUGA_NETWORK)
        rpc_url: Custom RPC URL (BELUGA_RPC_URL)
        network_passphrase: Custom network passphrase (BELUGA_NETWORK_PASSPHRASE)
        rpc_timeout: RPC request timeout in seconds (BELUGA_RPC_TIMEOUT)
    """

    factory_address: str
    pool_address: str | None = None
    network: str | None = None
    rpc_url: str | None = None
    network_passphrase: str | None = None
    rpc_timeout: float = 30.0

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> SDKSettings:
        """Read settings from environment variables.

        Raises:
            ConfigurationError: If BELUGA_FACTORY_ADDRESS is not set
        """
        env = os.environ if environ is None else environ
        factory_address = env.get("BELUGA_FACTORY_ADDRESS")
        if not factory_address:
            raise ConfigurationError("BELUGA_FACTORY_ADDRESS is not set")

        try:
            rpc_timeout = float(env.get("BELUGA_RPC_TIMEOUT", "30"))
        except ValueError as err:
            raise ConfigurationError(
                f"BELUGA_RPC_TIMEOUT must be a number: {env.get('BELUGA_RPC_TIMEOUT')!r}"
            ) from err

        return cls(
            factory_address=factory_address,
            pool_address=env.get("BELUGA_POOL_ADDRESS") or None,
            network=env.get("BELUGA_NETWORK") or None,
            rpc_url=env.get("BELUGA_RPC_URL") or None,
            network_passphrase=env.get("BELUGA_NETWORK_PASSPHRASE") or None,
            rpc_timeout=rpc_timeout,
        )


__all__ = [
    "FeeTier",
    "STABLE",
    "VOLATILE",
    "EXOTIC",
    "FEE_TIERS",
    "get_fee_tier",
    "NetworkConfig",
    "TESTNET",
    "MAINNET",
    "NETWORKS",
    "resolve_network",
    "SDKSettings",
]
