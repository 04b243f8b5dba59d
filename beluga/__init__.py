"""BelugaSwap SDK - human-friendly parameters for BelugaSwap pools."""

from beluga.config import FEE_TIERS, NETWORKS, FeeTier, NetworkConfig, get_fee_tier
from beluga.factory import BelugaFactory
from beluga.pool import BelugaPool
from beluga.sdk import BelugaSwapSDK

__version__ = "0.1.0"
__all__ = [
    "BelugaSwapSDK",
    "BelugaFactory",
    "BelugaPool",
    "FeeTier",
    "FEE_TIERS",
    "get_fee_tier",
    "NetworkConfig",
    "NETWORKS",
    "__version__",
]
